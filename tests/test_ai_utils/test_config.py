"""
Unit tests for configuration management.
"""

import os
from unittest.mock import patch

import ai_utils.config as config_module
from ai_utils.config import AIConfig, GeminiConfig, OpenRouterConfig


class TestAIConfig:
    """Test AI configuration"""

    def test_defaults(self):
        config = AIConfig()

        assert config.openrouter.base_url == "https://openrouter.ai/api/v1"
        assert config.openrouter.script_model == "anthropic/claude-sonnet-4"
        assert config.openrouter.max_tokens == 2000
        assert config.openrouter.temperature == 0.5
        assert config.gemini.transcription_model == "gemini-2.0-flash"
        assert config.gemini.temperature == 0.0
        assert config.gemini.max_output_tokens == 4000

    def test_feature_flags_follow_keys(self):
        config = AIConfig(
            openrouter=OpenRouterConfig(api_key="or-key"),
            gemini=GeminiConfig(api_key=""),
        )

        assert config.script_generation_enabled is True
        assert config.video_transcription_enabled is False

    def test_from_env(self):
        env = {
            "OPENROUTER_API_KEY": "or-key",
            "SCRIPT_MODEL": "openai/gpt-4o",
            "SCRIPT_TEMPERATURE": "0.2",
            "GOOGLE_AI_KEY": "g-key",
            "GEMINI_TRANSCRIBE_TIMEOUT": "30",
        }
        with patch.dict(os.environ, env, clear=False):
            config = AIConfig.from_env()

        assert config.openrouter.api_key == "or-key"
        assert config.openrouter.script_model == "openai/gpt-4o"
        assert config.openrouter.temperature == 0.2
        assert config.gemini.api_key == "g-key"
        assert config.gemini.timeout == 30
        assert config.video_transcription_enabled is True


class TestGlobalConfig:
    def test_update_config_replaces_sections(self):
        original = config_module.get_config()
        try:
            config_module.update_config(openrouter=OpenRouterConfig(api_key="rotated"))

            assert config_module.get_config().openrouter.api_key == "rotated"
            assert config_module.get_config().gemini == original.gemini
        finally:
            config_module.config = original
