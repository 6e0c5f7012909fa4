"""
AI video transcription source.

The model is handed only the public watch URL; no media is downloaded here.
"""

from typing import Optional

from ai_utils.config import AIConfig, get_config
from ai_utils.interfaces import VideoTranscriptionProvider
from telemetry import get_logger

from ..config import TRANSCRIPT_CONFIG
from ..types import SourceOutcome, SourceStatus
from ..utils import youtube_watch_url
from .base import TranscriptSource

logger = get_logger(__name__)


class GeminiTranscriptionSource(TranscriptSource):
    name = "ai_transcription"

    def __init__(
        self,
        config: Optional[AIConfig] = None,
        provider: Optional[VideoTranscriptionProvider] = None,
    ):
        self.config = config or get_config()
        self._provider = provider
        self.timeout = self.config.gemini.timeout or TRANSCRIPT_CONFIG["TIMEOUTS"]["ai_transcription"]

    def is_enabled(self) -> bool:
        if not TRANSCRIPT_CONFIG["SOURCES"]["ai_transcription"]:
            return False
        return self._provider is not None or self.config.video_transcription_enabled

    @property
    def provider(self) -> VideoTranscriptionProvider:
        if self._provider is None:
            from ai_utils.providers import GeminiVideoTranscriber

            self._provider = GeminiVideoTranscriber(self.config)
        return self._provider

    async def attempt(self, video_id: str) -> SourceOutcome:
        if not self.is_enabled():
            logger.info("No GOOGLE_AI_KEY configured, skipping AI transcription")
            return self._outcome(SourceStatus.SKIPPED, detail="GOOGLE_AI_KEY not configured")

        logger.info(f"Trying AI video transcription for {video_id}")
        text = await self.provider.transcribe_video(
            TRANSCRIPT_CONFIG["AI_TRANSCRIPTION_PROMPT"], youtube_watch_url(video_id)
        )

        if len(text) > TRANSCRIPT_CONFIG["MIN_TRANSCRIPT_CHARS"]:
            return self._outcome(SourceStatus.SUCCESS, text=text)

        logger.warning("AI transcription returned empty response")
        return self._outcome(SourceStatus.EMPTY)
