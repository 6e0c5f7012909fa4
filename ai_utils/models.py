"""
Pydantic models for chat completions and token accounting.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class ChatRole(str, Enum):
    """Chat message roles"""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """Chat message model"""

    role: ChatRole = Field(..., description="Message role")
    content: str = Field(..., description="Message content")


class ChatRequest(BaseModel):
    """Chat completion request model"""

    messages: List[ChatMessage] = Field(..., description="List of chat messages", min_length=1)
    model: Optional[str] = Field(None, description="Model override; provider default when unset")
    temperature: Optional[float] = Field(None, ge=0.0, le=2.0, description="Generation temperature")
    max_tokens: Optional[int] = Field(None, ge=1, description="Maximum tokens to generate")

    @field_validator("messages")
    @classmethod
    def validate_messages(cls, v):
        if not v:
            raise ValueError("Messages cannot be empty")
        return v


class ChatUsage(BaseModel):
    """Token usage reported by the provider"""

    prompt_tokens: int = Field(default=0, description="Prompt tokens used")
    completion_tokens: int = Field(default=0, description="Completion tokens used")

    @property
    def total_tokens(self) -> int:
        return self.prompt_tokens + self.completion_tokens


class ChatCompletion(BaseModel):
    """Completion text plus token counts, the only things callers need"""

    text: str = Field(default="", description="Assistant message content")
    model: str = Field(..., description="Model that was requested")
    usage: ChatUsage = Field(default_factory=ChatUsage)
    finish_reason: Optional[str] = Field(None, description="Finish reason")
    generation_time_ms: float = Field(default=0.0, description="Wall-clock time of the call")
