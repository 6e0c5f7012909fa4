"""
Script Engine Prompts Package
Prompt templates for script generation
"""

from .picks_prompt import build_picks_system_prompt, build_picks_user_message
from .script_prompt import build_script_system_prompt, build_script_user_message

__all__ = [
    "build_picks_system_prompt",
    "build_picks_user_message",
    "build_script_system_prompt",
    "build_script_user_message",
]
