"""
Abstract interfaces for model providers
"""

from .llm import LLMProvider, VideoTranscriptionProvider

__all__ = ["LLMProvider", "VideoTranscriptionProvider"]
