"""
Invidious caption proxy service.

Public Invidious instances mirror YouTube's caption tracks without
authentication. Instances are tried in order; the first usable transcript
wins. Each instance gets its own wall-clock cap and any failure moves the
walk on to the next one.
"""

import asyncio
from typing import List, Optional
from urllib.parse import urljoin

import requests

from telemetry import get_logger, race_with_timeout
from telemetry.resilience import RaceStatus

from ..config import TRANSCRIPT_CONFIG
from ..types import SourceOutcome, SourceStatus
from .base import TranscriptSource
from .caption_parser import parse_caption_xml

logger = get_logger(__name__)


class InvidiousCaptionService:
    """Fetches caption documents from Invidious instances"""

    def __init__(self, instances: Optional[List[str]] = None):
        self.instances = instances or list(TRANSCRIPT_CONFIG["INVIDIOUS_INSTANCES"])
        self.manifest_timeout = TRANSCRIPT_CONFIG["TIMEOUTS"]["caption_proxy_manifest"]
        self.document_timeout = TRANSCRIPT_CONFIG["TIMEOUTS"]["caption_proxy_document"]
        self.instance_timeout = TRANSCRIPT_CONFIG["TIMEOUTS"]["caption_proxy_instance"]
        self.language = TRANSCRIPT_CONFIG["LANGUAGE"]

    async def extract_transcript(self, video_id: str) -> str:
        """
        Walk the instances and return the first transcript longer than 10 chars.

        Returns:
            Transcript text, or "" when no instance produced one
        """
        for base in self.instances:
            race = await race_with_timeout(
                asyncio.to_thread(self._from_instance, base, video_id),
                self.instance_timeout,
                f"Invidious {base}",
            )
            if race.status == RaceStatus.TIMED_OUT:
                continue
            if race.status == RaceStatus.FAILED:
                logger.warning(f"Invidious {base} error: {str(race.error)[:60]}")
                continue

            transcript = race.value or ""
            if len(transcript) > TRANSCRIPT_CONFIG["MIN_TRANSCRIPT_CHARS"]:
                logger.info(f"Invidious ({base}) success: {len(transcript)} chars")
                return transcript

        return ""

    def _from_instance(self, base: str, video_id: str) -> str:
        response = requests.get(
            f"{base}/api/v1/captions/{video_id}", timeout=self.manifest_timeout
        )
        if response.status_code != 200:
            logger.debug(f"Invidious {base} manifest HTTP {response.status_code}")
            return ""

        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"unexpected manifest type {type(data).__name__}")

        captions = data.get("captions") or []
        if not isinstance(captions, list):
            raise ValueError("captions is not a list")
        captions = [c for c in captions if isinstance(c, dict)]
        if not captions:
            return ""

        track = next(
            (c for c in captions if c.get("languageCode") == self.language),
            captions[0],
        )
        track_url = str(track.get("url") or "")
        if not track_url.startswith("http"):
            track_url = urljoin(base + "/", track_url.lstrip("/"))

        document = requests.get(track_url, timeout=self.document_timeout).text
        if len(document) < TRANSCRIPT_CONFIG["MIN_CAPTION_DOCUMENT_CHARS"]:
            return ""

        return parse_caption_xml(document)


class InvidiousCaptionSource(TranscriptSource):
    name = "caption_proxy"

    def __init__(self, service: Optional[InvidiousCaptionService] = None):
        self.service = service or InvidiousCaptionService()
        self.timeout = TRANSCRIPT_CONFIG["TIMEOUTS"]["caption_proxy_total"]

    def is_enabled(self) -> bool:
        return TRANSCRIPT_CONFIG["SOURCES"]["caption_proxy"]

    async def attempt(self, video_id: str) -> SourceOutcome:
        logger.info(f"Trying Invidious caption proxies for {video_id}")
        text = await self.service.extract_transcript(video_id)
        if text:
            return self._outcome(SourceStatus.SUCCESS, text=text)
        return self._outcome(SourceStatus.EMPTY, detail="no instance returned captions")
