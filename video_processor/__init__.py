"""
Video processor: caption parsing, transcript sources and the source chain.
"""
from .processors import TranscriptSourceChain, default_sources

__all__ = ["TranscriptSourceChain", "default_sources"]
