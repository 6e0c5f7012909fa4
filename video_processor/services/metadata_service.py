"""
Best-effort YouTube metadata lookup through the public oEmbed endpoint.
"""

import asyncio
from typing import Tuple

import requests

from telemetry import get_logger

from ..config import TRANSCRIPT_CONFIG, UNKNOWN_CHANNEL, UNKNOWN_TITLE
from ..utils import youtube_watch_url

logger = get_logger(__name__)


def fetch_oembed_meta(video_id: str) -> Tuple[str, str]:
    """
    Look up (title, channel) for a video.

    Never raises: any failure yields ("Unknown Title", "Unknown Channel").
    """
    try:
        response = requests.get(
            TRANSCRIPT_CONFIG["OEMBED_URL"],
            params={"url": youtube_watch_url(video_id), "format": "json"},
            timeout=TRANSCRIPT_CONFIG["TIMEOUTS"]["metadata"],
        )
        if response.status_code == 200:
            data = response.json()
            return (
                data.get("title") or UNKNOWN_TITLE,
                data.get("author_name") or UNKNOWN_CHANNEL,
            )
        logger.debug(f"oEmbed HTTP {response.status_code} for {video_id}")
    except (requests.exceptions.RequestException, ValueError) as e:
        logger.debug(f"oEmbed lookup failed for {video_id}: {e}")

    return UNKNOWN_TITLE, UNKNOWN_CHANNEL


async def fetch_youtube_meta(video_id: str) -> Tuple[str, str]:
    return await asyncio.to_thread(fetch_oembed_meta, video_id)
