"""
YouTube Transcript Service - native caption extraction
"""

import asyncio
from typing import List, Optional

from youtube_transcript_api import (
    NoTranscriptFound,
    RequestBlocked,
    TranscriptsDisabled,
    YouTubeTranscriptApi,
)

from telemetry import get_logger

from ..config import TRANSCRIPT_CONFIG
from ..types import DETAIL_BLOCKED, DETAIL_CAPTIONS_DISABLED, SourceOutcome, SourceStatus
from .base import TranscriptSource

logger = get_logger(__name__)


def extract_youtube_transcript(video_id: str, preferred_languages: Optional[List[str]] = None) -> str:
    """
    Fetch the caption track of a video and join the fragment text.

    Args:
        video_id: YouTube video ID
        preferred_languages: Language codes in order of preference (default: ['en'])

    Returns:
        Transcript text, fragments joined with single spaces (timings dropped)

    Raises:
        TranscriptsDisabled, NoTranscriptFound, RequestBlocked and the other
        youtube-transcript-api errors
    """
    if not preferred_languages:
        preferred_languages = [TRANSCRIPT_CONFIG["LANGUAGE"]]

    fetched = YouTubeTranscriptApi().fetch(video_id, languages=preferred_languages)
    return " ".join(snippet.text for snippet in fetched)


class NativeCaptionSource(TranscriptSource):
    """Platform captions via youtube-transcript-api"""

    name = "native_captions"

    def __init__(self, languages: Optional[List[str]] = None):
        self.languages = languages or [TRANSCRIPT_CONFIG["LANGUAGE"]]
        self.timeout = TRANSCRIPT_CONFIG["TIMEOUTS"]["native_captions"]

    def is_enabled(self) -> bool:
        return TRANSCRIPT_CONFIG["SOURCES"]["native_captions"]

    async def attempt(self, video_id: str) -> SourceOutcome:
        logger.info(f"Attempting native caption extraction for {video_id}")

        try:
            text = await asyncio.to_thread(extract_youtube_transcript, video_id, self.languages)
        except (TranscriptsDisabled, NoTranscriptFound) as e:
            logger.warning(f"Captions unavailable for {video_id}: {type(e).__name__}")
            return self._outcome(SourceStatus.ERROR, detail=DETAIL_CAPTIONS_DISABLED)
        except RequestBlocked:
            logger.warning(f"YouTube blocked caption request for {video_id}")
            return self._outcome(SourceStatus.ERROR, detail=DETAIL_BLOCKED)

        if len(text.strip()) > TRANSCRIPT_CONFIG["MIN_TRANSCRIPT_CHARS"]:
            return self._outcome(SourceStatus.SUCCESS, text=text)
        return self._outcome(SourceStatus.EMPTY)
