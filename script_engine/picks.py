"""
Picks-to-script synthesis.

Skips transcript acquisition entirely: the prompt is built from a list of
picks plus one hook line, and the completion is a flat script followed by a
--- separator and a JSON object with per-pick one-liners, a caption and
hashtags.
"""

import json
from typing import List, Optional

from ai_utils.config import AIConfig, get_config
from ai_utils.interfaces import LLMProvider
from ai_utils.models import ChatMessage, ChatRequest, ChatRole
from telemetry import ValidationError, get_logger, timed_operation

from .constants import seconds_for, word_count
from .generator import ensure_script_model_configured, usage_from_completion
from .hooks import fill_hook, get_hook, get_random_hook
from .models import PickInput, PickMeta, PicksRequest, PicksScript
from .parsing import split_sidecar
from .prompts import build_picks_system_prompt, build_picks_user_message

logger = get_logger(__name__)


def resolve_hook_line(request: PicksRequest) -> str:
    """
    Explicit hook text wins, then the named template, then a random template
    (filtered by tone when one is given).
    """
    if request.hook_text and request.hook_text.strip():
        return request.hook_text.strip()

    if request.hook_id:
        hook = get_hook(request.hook_id)
        if hook is None:
            raise ValidationError(f"Unknown hook: {request.hook_id}", field="hookId", value=request.hook_id)
    else:
        hook = get_random_hook(tone=request.tone)

    return fill_hook(hook, day=request.day, sport=request.sport, count=len(request.picks))


def _echo_picks(picks: List[PickInput]) -> List[PickMeta]:
    return [
        PickMeta(matchup=pick.matchup, selection=pick.selection, odds=pick.odds or "")
        for pick in picks
    ]


def parse_picks_sidecar(sidecar: Optional[str], picks: List[PickInput]) -> tuple[List[PickMeta], str, List[str]]:
    """Return (picks metadata, caption, hashtags); malformed JSON echoes the input picks"""
    if sidecar is None:
        return _echo_picks(picks), "", []

    try:
        parsed = json.loads(sidecar.strip())
    except json.JSONDecodeError:
        parsed = None

    if not isinstance(parsed, dict):
        logger.warning("Picks JSON did not parse, echoing input picks")
        return _echo_picks(picks), "", []

    pick_meta = []
    for item in parsed.get("picks") or []:
        if not isinstance(item, dict):
            continue
        pick_meta.append(
            PickMeta(
                matchup=str(item.get("matchup") or ""),
                selection=str(item.get("selection") or ""),
                odds=str(item.get("odds") or ""),
                one_liner=str(item.get("oneLiner") or ""),
            )
        )

    hashtags = parsed.get("hashtags")
    return (
        pick_meta or _echo_picks(picks),
        str(parsed.get("caption") or ""),
        [str(tag) for tag in hashtags] if isinstance(hashtags, list) else [],
    )


class PicksScriptGenerator:
    def __init__(self, llm_provider: Optional[LLMProvider] = None, config: Optional[AIConfig] = None):
        self.config = config or get_config()
        self._llm_provider = llm_provider

    @property
    def llm_provider(self) -> LLMProvider:
        if self._llm_provider is None:
            ensure_script_model_configured(self.config)
            from ai_utils.providers import OpenRouterLLMProvider

            self._llm_provider = OpenRouterLLMProvider(self.config)
        return self._llm_provider

    @timed_operation(name="picks script generation")
    async def generate(self, request: PicksRequest) -> PicksScript:
        hook = resolve_hook_line(request)
        logger.info(f"Generating picks script for {request.sport} {request.day}: {len(request.picks)} picks")

        chat_request = ChatRequest(
            messages=[
                ChatMessage(
                    role=ChatRole.SYSTEM,
                    content=build_picks_system_prompt(request.style, request.target_seconds, hook),
                ),
                ChatMessage(
                    role=ChatRole.USER,
                    content=build_picks_user_message(request.sport, request.day, request.date, request.picks),
                ),
            ],
        )
        completion = await self.llm_provider.chat_completion(chat_request)

        script_part, sidecar = split_sidecar(completion.text)
        script = script_part.strip()
        picks, caption, hashtags = parse_picks_sidecar(sidecar, request.picks)
        usage = usage_from_completion(completion)

        return PicksScript(
            hook=hook,
            script=script,
            word_count=word_count(script),
            estimated_seconds=seconds_for(script),
            picks=picks,
            caption=caption,
            hashtags=hashtags,
            usage=[usage],
            total_cost=usage.estimated_cost,
        )
