"""
Abstract interfaces for model providers.

Two capabilities are consumed by the core:
- chat completion: system + user message in, text + token counts out
- video transcription: instruction + public video URL in, free text out
"""

from abc import ABC, abstractmethod

from ..models import ChatCompletion, ChatRequest


class LLMProvider(ABC):
    """Abstract interface for chat-completion providers"""

    @abstractmethod
    async def chat_completion(self, request: ChatRequest) -> ChatCompletion:
        """
        Run one chat completion.

        Args:
            request: Messages plus optional model/temperature/max_tokens overrides

        Returns:
            Completion text and token usage
        """

    @abstractmethod
    def get_default_model(self) -> str:
        """Model identifier used when a request does not name one."""


class VideoTranscriptionProvider(ABC):
    """Abstract interface for providers that can watch a public video URL"""

    @abstractmethod
    async def transcribe_video(self, prompt: str, video_url: str) -> str:
        """
        Transcribe the spoken words of a video.

        Args:
            prompt: Instruction (verbatim transcription, no timestamps)
            video_url: Public watch URL; no media is downloaded locally

        Returns:
            Transcript text (may be empty)
        """
