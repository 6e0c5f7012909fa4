"""
Client-assisted caption fetch.

The browser tries to read captions itself and falls back to this server-side
path (CORS). The InnerTube player endpoint is asked for the caption track
list with an ANDROID client context, then the track document is parsed.
"""

from typing import Optional

import requests

from telemetry import CaptionFetchError, get_logger

from ..config import TRANSCRIPT_CONFIG
from .caption_parser import parse_caption_xml

logger = get_logger(__name__)

BLOCKED = "blocked"
NO_CAPTIONS = "no_captions"
EMPTY_CAPTIONS = "empty_captions"
TRANSCRIPT_TOO_SHORT = "transcript_too_short"
CAPTION_FETCH_FAILED = "caption_fetch_failed"


def _player_caption_url(video_id: str) -> str:
    try:
        response = requests.post(
            TRANSCRIPT_CONFIG["INNERTUBE_PLAYER_URL"],
            json={
                "videoId": video_id,
                "context": {"client": TRANSCRIPT_CONFIG["INNERTUBE_CLIENT"]},
            },
            headers={
                "Content-Type": "application/json",
                "User-Agent": TRANSCRIPT_CONFIG["USER_AGENT"],
            },
            timeout=TRANSCRIPT_CONFIG["TIMEOUTS"]["innertube_player"],
        )
    except requests.exceptions.RequestException as e:
        raise CaptionFetchError(CAPTION_FETCH_FAILED, f"YouTube API error: {e}") from e

    if response.status_code != 200:
        raise CaptionFetchError(
            CAPTION_FETCH_FAILED,
            "YouTube API error",
            status_code=response.status_code,
        )

    try:
        player = response.json()
    except ValueError as e:
        raise CaptionFetchError(CAPTION_FETCH_FAILED, "YouTube API returned invalid JSON") from e

    playability = player.get("playabilityStatus") or {}
    if playability.get("status") == "LOGIN_REQUIRED" or "Sign in" in (playability.get("reason") or ""):
        logger.warning(f"YouTube demanded sign-in for {video_id}")
        raise CaptionFetchError(BLOCKED, "YouTube blocked this request from the server")

    tracks = (
        (player.get("captions") or {})
        .get("playerCaptionsTracklistRenderer", {})
        .get("captionTracks")
    ) or []
    if not tracks:
        raise CaptionFetchError(NO_CAPTIONS)

    track = next(
        (t for t in tracks if t.get("languageCode") == TRANSCRIPT_CONFIG["LANGUAGE"]),
        tracks[0],
    )
    return track.get("baseUrl", "")


def fetch_player_captions(video_id: str, caption_url: Optional[str] = None) -> str:
    """
    Fetch and parse a caption track.

    Args:
        video_id: YouTube video ID
        caption_url: Track URL already known to the client; skips the player call

    Returns:
        Transcript text of at least 10 characters

    Raises:
        CaptionFetchError: category is one of blocked, no_captions,
            empty_captions, transcript_too_short, caption_fetch_failed
    """
    track_url = caption_url or _player_caption_url(video_id)

    try:
        document = requests.get(
            track_url, timeout=TRANSCRIPT_CONFIG["TIMEOUTS"]["innertube_document"]
        ).text
    except requests.exceptions.RequestException as e:
        raise CaptionFetchError(CAPTION_FETCH_FAILED, f"Caption download failed: {e}") from e

    if not document or len(document) < TRANSCRIPT_CONFIG["MIN_CAPTION_DOCUMENT_CHARS"]:
        raise CaptionFetchError(EMPTY_CAPTIONS)

    transcript = parse_caption_xml(document)
    if len(transcript) < TRANSCRIPT_CONFIG["MIN_TRANSCRIPT_CHARS"]:
        raise CaptionFetchError(TRANSCRIPT_TOO_SHORT)

    logger.info(f"Client-assisted caption fetch for {video_id}: {len(transcript)} chars")
    return transcript
