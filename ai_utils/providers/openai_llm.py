"""
OpenRouter LLM Provider Implementation
Chat completions through OpenRouter's OpenAI-compatible endpoint
"""

import time

from openai import AsyncOpenAI

from telemetry import get_logger, handle_api_errors

from ..config import AIConfig
from ..interfaces.llm import LLMProvider
from ..models import ChatCompletion, ChatRequest, ChatUsage

logger = get_logger(__name__)


class OpenRouterLLMProvider(LLMProvider):
    """Chat completions via the openai SDK pointed at OpenRouter"""

    def __init__(self, config: AIConfig):
        self.config = config
        self.client = AsyncOpenAI(
            api_key=config.openrouter.api_key,
            base_url=config.openrouter.base_url,
            timeout=config.openrouter.timeout,
            max_retries=config.openrouter.max_retries,
        )
        self.default_model = config.openrouter.script_model
        self.default_temperature = config.openrouter.temperature
        self.default_max_tokens = config.openrouter.max_tokens

    def get_default_model(self) -> str:
        return self.default_model

    async def chat_completion(self, request: ChatRequest) -> ChatCompletion:
        """Run one completion; provider errors surface as ExternalServiceError"""
        model_name = request.model or self.default_model
        params = {
            "model": model_name,
            "messages": [
                {"role": msg.role.value, "content": msg.content} for msg in request.messages
            ],
            "temperature": request.temperature
            if request.temperature is not None
            else self.default_temperature,
            "max_tokens": request.max_tokens or self.default_max_tokens,
        }

        start_time = time.time()
        with handle_api_errors("OpenRouter"):
            response = await self.client.chat.completions.create(**params)
        generation_time_ms = (time.time() - start_time) * 1000

        text = ""
        finish_reason = None
        if response.choices:
            choice = response.choices[0]
            text = choice.message.content or ""
            finish_reason = choice.finish_reason

        usage = ChatUsage()
        if response.usage is not None:
            usage = ChatUsage(
                prompt_tokens=response.usage.prompt_tokens or 0,
                completion_tokens=response.usage.completion_tokens or 0,
            )

        logger.info(
            f"Completion from {model_name}: {len(text)} chars, "
            f"{usage.prompt_tokens}+{usage.completion_tokens} tokens in {generation_time_ms:.0f} ms"
        )
        return ChatCompletion(
            text=text,
            model=model_name,
            usage=usage,
            finish_reason=finish_reason,
            generation_time_ms=generation_time_ms,
        )
