from .transcript import TranscriptSourceChain, default_sources

__all__ = ["TranscriptSourceChain", "default_sources"]
