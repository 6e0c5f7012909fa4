"""
Tests for script synthesis with a mocked chat provider.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from ai_utils.config import AIConfig, OpenRouterConfig
from ai_utils.models import ChatCompletion, ChatUsage
from script_engine.generator import ScriptGenerator, ensure_script_model_configured
from script_engine.models import ScriptSettings, ScriptStyle
from telemetry import ConfigurationError

COMPLETION_TEXT = """[HOOK]
Stop scrolling.

[BODY]
Lakers minus four is free money tonight. [STAT: 8-2 ATS at home]

[CTA]
Bet now on the link.
---
{"footage": ["LeBron dunk", "Crypto Arena"], "notes": ["Fast cuts"], "hookAlts": ["Vegas missed this"]}"""


def _completion(text=COMPLETION_TEXT, prompt_tokens=1000, completion_tokens=500):
    return ChatCompletion(
        text=text,
        model="anthropic/claude-sonnet-4",
        usage=ChatUsage(prompt_tokens=prompt_tokens, completion_tokens=completion_tokens),
    )


@pytest.fixture
def mock_provider():
    provider = MagicMock()
    provider.chat_completion = AsyncMock(return_value=_completion())
    return provider


@pytest.fixture
def generator(mock_provider):
    return ScriptGenerator(llm_provider=mock_provider, config=AIConfig())


class TestEnsureConfigured:
    def test_missing_key_raises(self):
        with pytest.raises(ConfigurationError, match="OPENROUTER_API_KEY not configured"):
            ensure_script_model_configured(AIConfig())

    def test_present_key_passes(self):
        ensure_script_model_configured(AIConfig(openrouter=OpenRouterConfig(api_key="or-key")))

    def test_provider_not_built_without_key(self):
        generator = ScriptGenerator(config=AIConfig())

        with pytest.raises(ConfigurationError):
            generator.llm_provider


class TestScriptGenerator:
    @pytest.mark.asyncio
    async def test_generate_full_result(self, generator):
        script = await generator.generate("transcript text", "Lakers Preview", "Sharp Picks")

        assert script.sections.hook == "Stop scrolling."
        assert script.sections.cta == "Bet now on the link."
        assert script.hook_seconds == 1
        assert script.cta_seconds == 2
        assert script.full_script == (
            f"{script.sections.hook}\n\n{script.sections.body}\n\n{script.sections.cta}"
        )
        assert script.word_count == len(script.full_script.split())
        assert script.background_footage == ["LeBron dunk", "Crypto Arena"]
        assert script.production_notes == ["Fast cuts"]
        assert script.hook_alternatives == ["Vegas missed this"]
        assert script.graphics_needed == ["8-2 ATS at home"]
        assert [c.section for c in script.timeline.clips] == ["hook", "body", "cta"]
        assert script.timeline.clips[0].footage == "LeBron dunk"

    @pytest.mark.asyncio
    async def test_usage_and_cost(self, generator):
        script = await generator.generate("transcript text", "Title", "Channel")

        usage = script.usage[0]
        assert usage.model == "anthropic/claude-sonnet-4"
        assert usage.total_tokens == 1500
        assert usage.estimated_cost == pytest.approx(0.0105)
        assert script.total_cost == pytest.approx(0.0105)

    @pytest.mark.asyncio
    async def test_transcript_truncated_before_prompting(self, generator, mock_provider):
        await generator.generate("x" * 15000, "Title", "Channel")

        request = mock_provider.chat_completion.call_args.args[0]
        user_message = request.messages[1].content
        assert "x" * 12000 in user_message
        assert "x" * 12001 not in user_message

    @pytest.mark.asyncio
    async def test_settings_reach_system_prompt(self, generator, mock_provider):
        settings = ScriptSettings(target_seconds=60, style=ScriptStyle.CONVERSATIONAL, custom_hook="Trust me")

        await generator.generate("transcript", "Title", "Channel", settings)

        system = mock_provider.chat_completion.call_args.args[0].messages[0].content
        assert "60s script (~168 words)" in system
        assert '"Trust me"' in system

    @pytest.mark.asyncio
    async def test_malformed_completion_does_not_raise(self, generator, mock_provider):
        mock_provider.chat_completion.return_value = _completion(text="I can't help with that.")

        script = await generator.generate("transcript", "Title", "Channel")

        assert script.sections.hook == ""
        assert script.sections.body == ""
        assert script.sections.cta.startswith("Stop leaving money on the table.")
        assert [c.section for c in script.timeline.clips] == ["cta"]
        assert script.background_footage == []

    @pytest.mark.asyncio
    async def test_provider_error_propagates(self, generator, mock_provider):
        mock_provider.chat_completion.side_effect = RuntimeError("rate limited")

        with pytest.raises(RuntimeError):
            await generator.generate("transcript", "Title", "Channel")

        assert mock_provider.chat_completion.await_count == 1

    def test_camel_case_output(self, generator):
        script = generator.assemble(_completion(), ScriptSettings())

        data = script.model_dump(mode="json", by_alias=True)
        assert {"fullScript", "hookSeconds", "backgroundFootage", "graphicsNeeded", "totalCost"} <= set(data)
        assert data["usage"][0]["totalTokens"] == 1500
        assert data["timeline"]["totalFrames"] == script.timeline.total_frames
