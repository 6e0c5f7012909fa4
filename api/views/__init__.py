"""
API Views Module

- script_views: script generation from a video URL or pasted transcript
- transcript_views: client-assisted caption fetch
- timeline_views: timeline recompute after section edits
- picks_views: script generation from betting picks
- hook_views: hook catalog
"""

from .hook_views import HookListView
from .picks_views import generate_from_picks
from .script_views import generate_script
from .timeline_views import TimelineView
from .transcript_views import fetch_transcript

__all__ = [
    "generate_script",
    "fetch_transcript",
    "TimelineView",
    "generate_from_picks",
    "HookListView",
]
