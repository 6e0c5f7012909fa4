"""
Configuration management for the model providers.
Values come from environment variables (a local .env is loaded first) with
fallback defaults.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


class OpenRouterConfig(BaseModel):
    """Chat-completion settings for script generation (OpenAI-compatible API)"""

    api_key: str = Field(default="", description="OpenRouter API key")
    base_url: str = Field(default="https://openrouter.ai/api/v1", description="OpenAI-compatible endpoint")
    script_model: str = Field(default="anthropic/claude-sonnet-4", description="Model used to write scripts")
    max_tokens: int = Field(default=2000, ge=1, description="Max completion tokens per script")
    temperature: float = Field(default=0.5, ge=0.0, le=2.0, description="Slightly creative for punchier hooks")
    timeout: int = Field(default=55, description="Request timeout in seconds")
    max_retries: int = Field(default=0, description="SDK-level retries; the script call is never retried")


class GeminiConfig(BaseModel):
    """Google Gemini settings for AI video transcription"""

    api_key: str = Field(default="", description="Google AI Studio key")
    transcription_model: str = Field(default="gemini-2.0-flash", description="Model that watches the video")
    temperature: float = Field(default=0.0, ge=0.0, le=2.0)
    max_output_tokens: int = Field(default=4000, ge=1)
    timeout: int = Field(default=50, description="Wall-clock budget for one transcription, seconds")


class AIConfig(BaseModel):
    """Main AI configuration container"""

    openrouter: OpenRouterConfig = Field(default_factory=OpenRouterConfig)
    gemini: GeminiConfig = Field(default_factory=GeminiConfig)

    @classmethod
    def from_env(cls) -> "AIConfig":
        """Create configuration from environment variables"""
        return cls(
            openrouter=OpenRouterConfig(
                api_key=os.getenv("OPENROUTER_API_KEY", ""),
                base_url=os.getenv("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1"),
                script_model=os.getenv("SCRIPT_MODEL", "anthropic/claude-sonnet-4"),
                max_tokens=int(os.getenv("SCRIPT_MAX_TOKENS", "2000")),
                temperature=float(os.getenv("SCRIPT_TEMPERATURE", "0.5")),
                timeout=int(os.getenv("OPENROUTER_TIMEOUT", "55")),
            ),
            gemini=GeminiConfig(
                api_key=os.getenv("GOOGLE_AI_KEY", ""),
                transcription_model=os.getenv("GEMINI_TRANSCRIBE_MODEL", "gemini-2.0-flash"),
                timeout=int(os.getenv("GEMINI_TRANSCRIBE_TIMEOUT", "50")),
            ),
        )

    @property
    def script_generation_enabled(self) -> bool:
        return bool(self.openrouter.api_key)

    @property
    def video_transcription_enabled(self) -> bool:
        return bool(self.gemini.api_key)


config = AIConfig.from_env()


def get_config() -> AIConfig:
    """Get the global AI configuration"""
    return config


def update_config(**kwargs) -> None:
    """Update global configuration with new values"""
    global config
    config = config.model_copy(update=kwargs)
