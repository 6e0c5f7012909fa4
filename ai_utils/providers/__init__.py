"""
AI Providers
Concrete implementations of the provider interfaces
"""

from .gemini_llm import GeminiVideoTranscriber
from .openai_llm import OpenRouterLLMProvider

__all__ = ["GeminiVideoTranscriber", "OpenRouterLLMProvider"]
