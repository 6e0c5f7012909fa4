"""
Script synthesis: transcript in, sectioned script with timing, production
metadata, cost and editing timeline out.
"""

from typing import Optional

from ai_utils.config import AIConfig, get_config
from ai_utils.interfaces import LLMProvider
from ai_utils.models import ChatCompletion, ChatMessage, ChatRequest, ChatRole
from ai_utils.pricing import estimate_cost
from telemetry import ConfigurationError, get_logger, timed_operation

from .config import SCRIPT_CONFIG
from .constants import seconds_for, word_count
from .models import GeneratedScript, ScriptSettings, UsageInfo
from .parsing import extract_graphics, parse_script_completion
from .prompts import build_script_system_prompt, build_script_user_message
from .timeline import build_timeline, section_durations

logger = get_logger(__name__)


def ensure_script_model_configured(config: Optional[AIConfig] = None) -> None:
    """Fail before any network activity when the model credential is missing"""
    config = config or get_config()
    if not config.script_generation_enabled:
        raise ConfigurationError("OPENROUTER_API_KEY not configured", setting="OPENROUTER_API_KEY")


def usage_from_completion(completion: ChatCompletion) -> UsageInfo:
    prompt_tokens = completion.usage.prompt_tokens
    completion_tokens = completion.usage.completion_tokens
    return UsageInfo(
        model=completion.model,
        prompt_tokens=prompt_tokens,
        completion_tokens=completion_tokens,
        estimated_cost=estimate_cost(completion.model, prompt_tokens, completion_tokens),
    )


class ScriptGenerator:
    """Rewrites a transcript into a hook/body/cta script with one chat completion"""

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

    @timed_operation(name="script generation")
    async def generate(
        self,
        transcript: str,
        video_title: str,
        channel: str,
        settings: Optional[ScriptSettings] = None,
    ) -> GeneratedScript:
        settings = settings or ScriptSettings()
        truncated = transcript[: SCRIPT_CONFIG["MAX_TRANSCRIPT_CHARS"]]
        if len(truncated) < len(transcript):
            logger.info(f"Transcript truncated from {len(transcript)} to {len(truncated)} chars")

        request = ChatRequest(
            messages=[
                ChatMessage(role=ChatRole.SYSTEM, content=build_script_system_prompt(settings)),
                ChatMessage(
                    role=ChatRole.USER,
                    content=build_script_user_message(video_title, channel, truncated),
                ),
            ],
        )
        completion = await self.llm_provider.chat_completion(request)

        return self.assemble(completion, settings)

    def assemble(self, completion: ChatCompletion, settings: ScriptSettings) -> GeneratedScript:
        """Turn a raw completion into the final script; never raises on malformed output"""
        sections, production = parse_script_completion(completion.text)
        full_script = sections.full_script
        durations = section_durations(sections)
        usage = usage_from_completion(completion)

        if not sections.hook or not sections.body:
            logger.warning(
                f"Completion missing sections (hook={bool(sections.hook)}, body={bool(sections.body)})"
            )

        script = GeneratedScript(
            sections=sections,
            full_script=full_script,
            word_count=word_count(full_script),
            estimated_seconds=seconds_for(full_script),
            hook_seconds=durations.hook_seconds,
            body_seconds=durations.body_seconds,
            cta_seconds=durations.cta_seconds,
            background_footage=production.footage,
            graphics_needed=extract_graphics(full_script),
            production_notes=production.notes,
            hook_alternatives=production.hook_alts,
            timeline=build_timeline(sections, durations, production.footage, SCRIPT_CONFIG["FPS"]),
            usage=[usage],
            total_cost=usage.estimated_cost,
        )

        logger.info(
            f"Generated {settings.target_seconds}s {settings.style.value} script: "
            f"{script.word_count} words, ~{script.estimated_seconds}s, ${script.total_cost:.4f}"
        )
        return script

