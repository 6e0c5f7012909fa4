"""
URL parsing helpers for the supported video platforms.
"""

import re
from typing import Optional

from ..types import Platform

YOUTUBE_ID_PATTERNS = [
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/shorts/)([a-zA-Z0-9_-]{11})"),
    re.compile(r"youtube\.com/embed/([a-zA-Z0-9_-]{11})"),
    re.compile(r"youtube\.com/live/([a-zA-Z0-9_-]{11})"),
]

INSTAGRAM_ID_PATTERN = re.compile(r"/(p|reel|reels)/([A-Za-z0-9_-]+)")
INSTAGRAM_USER_PATTERN = re.compile(r"instagram\.com/([^/?]+)")


def detect_platform(url: Optional[str]) -> Optional[Platform]:
    """Return YOUTUBE, INSTAGRAM or None for anything else"""
    if not url:
        return None
    if re.search(r"youtube\.com|youtu\.be", url, re.IGNORECASE):
        return Platform.YOUTUBE
    if re.search(r"instagram\.com", url, re.IGNORECASE):
        return Platform.INSTAGRAM
    return None


def extract_youtube_video_id(url: str) -> Optional[str]:
    for pattern in YOUTUBE_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None


def extract_instagram_video_id(url: str) -> str:
    match = INSTAGRAM_ID_PATTERN.search(url)
    return match.group(2) if match else "ig_unknown"


def extract_instagram_username(url: str) -> str:
    match = INSTAGRAM_USER_PATTERN.search(url)
    return f"@{match.group(1)}" if match else "Instagram"


def youtube_watch_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"
