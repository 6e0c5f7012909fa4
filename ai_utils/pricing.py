"""
Per-model token prices (USD per million tokens) and cost helpers.
"""

from typing import NamedTuple

from telemetry import get_logger

logger = get_logger(__name__)


class ModelPrice(NamedTuple):
    prompt_per_million: float
    completion_per_million: float


MODEL_PRICES: dict[str, ModelPrice] = {
    "anthropic/claude-sonnet-4": ModelPrice(3.0, 15.0),
    "anthropic/claude-3.5-sonnet": ModelPrice(3.0, 15.0),
    "openai/gpt-4o": ModelPrice(2.5, 10.0),
    "openai/gpt-4o-mini": ModelPrice(0.15, 0.6),
    "gemini-2.0-flash": ModelPrice(0.1, 0.4),
}


def estimate_cost(model: str, prompt_tokens: int, completion_tokens: int) -> float:
    """Cost of one call; models missing from the table are reported as free."""
    price = MODEL_PRICES.get(model)
    if price is None:
        logger.warning(f"No price entry for model {model}; reporting cost as 0")
        return 0.0
    return (
        prompt_tokens * price.prompt_per_million
        + completion_tokens * price.completion_per_million
    ) / 1_000_000
