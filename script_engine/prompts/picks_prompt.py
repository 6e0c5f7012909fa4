"""Prompt for writing a short-form script straight from a list of picks"""

from typing import List

from ..config import SCRIPT_CONFIG
from ..constants import words_for
from ..models import PickInput, ScriptStyle
from .script_prompt import STYLE_GUIDES

PICKS_SIDECAR_INSTRUCTION = (
    "After the script, add a --- separator, then output JSON on a single line:\n"
    '{"picks":[{"matchup":"...","selection":"...","odds":"...","oneLiner":"one punchy sentence"}],'
    '"caption":"post caption","hashtags":["#tag"]}\n\n'
    "Return the script first, then --- then the JSON. Nothing else."
)


def format_picks(picks: List[PickInput]) -> str:
    lines = []
    for number, pick in enumerate(picks, start=1):
        line = f"{number}. {pick.matchup}: {pick.selection}"
        if pick.odds:
            line += f" ({pick.odds})"
        if pick.reasoning:
            line += f" | Why: {pick.reasoning}"
        lines.append(line)
    return "\n".join(lines)


def build_picks_system_prompt(style: ScriptStyle, target_seconds: int, hook: str) -> str:
    word_target = words_for(target_seconds)
    brand = SCRIPT_CONFIG["BRAND"]

    return f"""You write short-form sports betting video scripts for {brand} (zero-vig betting exchange, fairest odds).

VOICE: {STYLE_GUIDES[ScriptStyle(style)]}

Write a {target_seconds}s script (~{word_target} words) covering every pick you are given.

The script MUST open with this exact hook line, unmodified:
"{hook}"

Then walk through each pick in order: matchup, selection, odds, and one sharp reason.
End with: "{SCRIPT_CONFIG["DEFAULT_CTA"]}"

RULES:
- Use the picks and odds exactly as given. Never fabricate stats or injuries.
- No section labels, no stage directions. Plain spoken text only.
- Max 2 natural {brand} mentions.
- Target ~{word_target} words total.

{PICKS_SIDECAR_INSTRUCTION}"""


def build_picks_user_message(sport: str, day: str, date: str, picks: List[PickInput]) -> str:
    return f"Sport: {sport}\nDay: {day} ({date})\n\nPicks:\n{format_picks(picks)}"
