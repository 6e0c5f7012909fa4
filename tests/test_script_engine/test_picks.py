"""
Tests for the picks-to-script flow.
"""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from ai_utils.config import AIConfig
from ai_utils.models import ChatCompletion, ChatUsage
from script_engine import hooks
from script_engine.models import PickInput, PicksRequest
from script_engine.picks import PicksScriptGenerator, parse_picks_sidecar, resolve_hook_line
from telemetry import ValidationError

PICKS = [
    PickInput(matchup="Celtics vs Knicks", selection="Celtics -6", odds="-110"),
    PickInput(matchup="Nuggets vs Suns", selection="Over 231.5"),
]

SIDECAR = {
    "picks": [
        {"matchup": "Celtics vs Knicks", "selection": "Celtics -6", "odds": "-110", "oneLiner": "Rest edge."},
    ],
    "caption": "Two plays for Wednesday",
    "hashtags": ["#NBA", "#picks"],
}


def _request(**overrides):
    data = {"picks": PICKS, "sport": "NBA", "day": "Wednesday", "date": "Nov 6"}
    data.update(overrides)
    return PicksRequest(**data)


class TestResolveHookLine:
    def test_explicit_text_wins(self):
        assert resolve_hook_line(_request(hook_text="  My own hook  ", hook_id="marry-picks")) == "My own hook"

    def test_named_template_is_filled(self):
        assert resolve_hook_line(_request(hook_id="marry-picks")) == (
            "I might marry these 2 picks for the NBA on Wednesday"
        )

    def test_unknown_template_is_rejected(self):
        with pytest.raises(ValidationError, match="Unknown hook"):
            resolve_hook_line(_request(hook_id="nope"))

    def test_random_template_by_tone(self):
        with patch("script_engine.picks.get_random_hook", wraps=hooks.get_random_hook) as rand:
            line = resolve_hook_line(_request(tone="casual"))

        rand.assert_called_once_with(tone="casual")
        assert "{" not in line


class TestParsePicksSidecar:
    def test_parsed_object(self):
        picks, caption, hashtags = parse_picks_sidecar(json.dumps(SIDECAR), PICKS)

        assert picks[0].one_liner == "Rest edge."
        assert caption == "Two plays for Wednesday"
        assert hashtags == ["#NBA", "#picks"]

    def test_absent_sidecar_echoes_input(self):
        picks, caption, hashtags = parse_picks_sidecar(None, PICKS)

        assert [p.selection for p in picks] == ["Celtics -6", "Over 231.5"]
        assert picks[1].odds == ""
        assert (caption, hashtags) == ("", [])

    def test_invalid_json_echoes_input(self):
        picks, _, _ = parse_picks_sidecar("{not json", PICKS)

        assert [p.matchup for p in picks] == ["Celtics vs Knicks", "Nuggets vs Suns"]


class TestPicksScriptGenerator:
    @pytest.mark.asyncio
    async def test_generate(self):
        text = "I might marry these 2 picks. Celtics minus six, then the over.\n---\n" + json.dumps(SIDECAR)
        provider = MagicMock()
        provider.chat_completion = AsyncMock(
            return_value=ChatCompletion(
                text=text,
                model="anthropic/claude-sonnet-4",
                usage=ChatUsage(prompt_tokens=500, completion_tokens=200),
            )
        )
        generator = PicksScriptGenerator(llm_provider=provider, config=AIConfig())

        result = await generator.generate(_request(hook_id="marry-picks", target_seconds=30))

        assert result.hook == "I might marry these 2 picks for the NBA on Wednesday"
        assert result.script == "I might marry these 2 picks. Celtics minus six, then the over."
        assert result.word_count == 12
        assert result.estimated_seconds == 4
        assert result.caption == "Two plays for Wednesday"
        assert result.usage[0].total_tokens == 700
        assert result.total_cost == pytest.approx((500 * 3 + 200 * 15) / 1_000_000)

        request = provider.chat_completion.call_args.args[0]
        assert '"I might marry these 2 picks for the NBA on Wednesday"' in request.messages[0].content
        assert "2. Nuggets vs Suns: Over 231.5" in request.messages[1].content
