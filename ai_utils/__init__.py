"""
AI Utils Package
Model-provider configuration, chat models, pricing and provider implementations
"""

__version__ = "0.2.0"

from .config import AIConfig, get_config
from .models import ChatCompletion, ChatMessage, ChatRequest, ChatRole, ChatUsage
from .pricing import MODEL_PRICES, estimate_cost

__all__ = [
    "AIConfig",
    "get_config",
    "ChatCompletion",
    "ChatMessage",
    "ChatRequest",
    "ChatRole",
    "ChatUsage",
    "MODEL_PRICES",
    "estimate_cost",
]
