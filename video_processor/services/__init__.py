"""
Video processor services module.
"""
from .base import TranscriptSource
from .caption_parser import parse_caption_xml
from .gemini_transcription_service import GeminiTranscriptionSource
from .innertube_service import fetch_player_captions
from .invidious_service import InvidiousCaptionService, InvidiousCaptionSource
from .metadata_service import fetch_oembed_meta, fetch_youtube_meta
from .youtube_transcript_service import NativeCaptionSource, extract_youtube_transcript

__all__ = [
    'TranscriptSource',
    'parse_caption_xml',
    'GeminiTranscriptionSource',
    'fetch_player_captions',
    'InvidiousCaptionService',
    'InvidiousCaptionSource',
    'fetch_oembed_meta',
    'fetch_youtube_meta',
    'NativeCaptionSource',
    'extract_youtube_transcript',
]
