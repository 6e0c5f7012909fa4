from .url_parsing import (
    detect_platform,
    extract_instagram_username,
    extract_instagram_video_id,
    extract_youtube_video_id,
    youtube_watch_url,
)

__all__ = [
    "detect_platform",
    "extract_instagram_username",
    "extract_instagram_video_id",
    "extract_youtube_video_id",
    "youtube_watch_url",
]
