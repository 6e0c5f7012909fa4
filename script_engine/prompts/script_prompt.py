"""Prompt for rewriting a video transcript into a sectioned short-form script"""

from ..config import SCRIPT_CONFIG
from ..constants import CTA_SECONDS, HOOK_SECONDS, words_for
from ..models import ScriptSettings, ScriptStyle

STYLE_GUIDES = {
    ScriptStyle.HYPE: (
        "High energy, punchy, confident. Short sentences. Build excitement. "
        "Use bold claims and urgency."
    ),
    ScriptStyle.ANALYTICAL: (
        "Data-driven, precise, authoritative. Reference numbers and trends. Sound like a sharp."
    ),
    ScriptStyle.CONVERSATIONAL: (
        "Casual, relatable, like talking to a friend at a sportsbook. Natural flow."
    ),
}

EXAMPLE_HOOKS = [
    "This MAY BE CONTROVERSIAL, but NBA Wednesday might be the EASIEST path to a 3-0 sweep",
    "Everyone's sleeping on this prop and it's basically free money",
    "I found a stat that Vegas doesn't want you to see",
    "Three picks. One night. Zero losses. Here's the play.",
]

SIDECAR_INSTRUCTION = (
    'After the script sections, add a --- separator, then output JSON on a single line:\n'
    '{"footage":["3-5 b-roll suggestions"],"notes":["3-5 production tips"],'
    '"hookAlts":["3 alternative hook lines that could replace the main hook"]}\n\n'
    "Return the sections first, then --- then the JSON. Nothing else."
)


def _hook_instruction(settings: ScriptSettings, hook_words: int) -> str:
    custom_hook = (settings.custom_hook or "").strip()
    if custom_hook:
        return f'(USE THIS EXACT HOOK, do not modify it:\n"{custom_hook}")'

    examples = "\n".join(f'- "{hook}"' for hook in EXAMPLE_HOOKS)
    return (
        f"(~{hook_words} words, ~{HOOK_SECONDS} seconds. This is THE most important part. "
        "Make it controversial, bold, or create FOMO. Examples of great hooks:\n"
        f"{examples}\n"
        'The hook must STOP THE SCROLL. No "hey guys", no "what\'s up". '
        "Make a bold claim or tease the payoff.)"
    )


def _marker_rules(settings: ScriptSettings) -> str:
    rules = []
    if settings.include_stats:
        rules.append("- Add [STAT: ...] markers where on-screen stats should appear.")
    if settings.include_graphics:
        rules.append("- Add [GFX: ...] markers where visual overlays should appear.")
    return "".join(f"\n{rule}" for rule in rules)


def build_script_system_prompt(settings: ScriptSettings) -> str:
    word_target = words_for(settings.target_seconds)
    hook_words = words_for(HOOK_SECONDS)
    cta_words = words_for(CTA_SECONDS)
    body_words = word_target - hook_words - cta_words
    brand = SCRIPT_CONFIG["BRAND"]

    return f"""You write short-form sports betting video scripts for {brand} (zero-vig betting exchange, fairest odds).

VOICE: {STYLE_GUIDES[ScriptStyle(settings.style)]}

Rewrite the transcript into a {settings.target_seconds}s script (~{word_target} words) with CLEARLY SEPARATED SECTIONS.

OUTPUT THE SCRIPT IN EXACTLY THIS FORMAT:

[HOOK]
{_hook_instruction(settings, hook_words)}

[BODY]
(~{body_words} words. The actual picks, analysis, and reasoning. This is where the substance lives.)

[CTA]
(~{cta_words} words. Always end with: "{SCRIPT_CONFIG["DEFAULT_CTA"]}")

RULES:
- Preserve ALL picks, odds, teams, spreads, totals, props, numbers from the transcript. Never fabricate.
- Cut filler. Tighten for short-form pacing.
- Max 2 natural {brand} mentions (one can be in the body, one in CTA).
- Target ~{word_target} words total.{_marker_rules(settings)}

{SIDECAR_INSTRUCTION}"""


def build_script_user_message(video_title: str, channel: str, transcript: str) -> str:
    return f'Video: "{video_title}"\nSource: {channel}\n\nTranscript:\n{transcript}'
