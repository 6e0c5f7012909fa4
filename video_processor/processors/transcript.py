"""
Transcript acquisition with fallback across sources.

Order for YouTube:
1. Native captions (fast, free)
2. AI video transcription (Gemini watches the public URL)
3. Invidious caption proxies

Sources run one after another; the first usable transcript wins and later
sources are never started. A pasted transcript short-circuits everything.
"""

from typing import List, Optional, Sequence

from telemetry import (
    ManualTranscriptRequiredError,
    TranscriptUnavailableError,
    UnsupportedURLError,
    UpstreamBlockedError,
    get_logger,
    race_with_timeout,
    timed_operation,
)
from telemetry.resilience import RaceStatus

from ..services import (
    GeminiTranscriptionSource,
    InvidiousCaptionSource,
    NativeCaptionSource,
    TranscriptSource,
    fetch_youtube_meta,
)
from ..types import (
    AcquisitionContext,
    Platform,
    SourceOutcome,
    SourceStatus,
    TranscriptResult,
    VideoMeta,
)
from ..utils import (
    detect_platform,
    extract_instagram_username,
    extract_instagram_video_id,
    extract_youtube_video_id,
)

logger = get_logger(__name__)

CAPTIONS_DISABLED_MESSAGE = (
    "Transcript is disabled for this video. Paste the transcript manually in the box below."
)
EXHAUSTED_MESSAGE = (
    "Could not transcribe this video. Paste the transcript manually, "
    "or check that GOOGLE_AI_KEY is configured."
)
BLOCKED_MESSAGE = "YouTube blocked automated access to this video. Paste the transcript manually."
INSTAGRAM_MESSAGE = (
    "Instagram videos require a manual transcript. Paste what they say in the box below."
)
INVALID_YOUTUBE_MESSAGE = "Invalid YouTube URL."
UNSUPPORTED_MESSAGE = "Unsupported URL. Provide a YouTube or Instagram link."


def default_sources() -> List[TranscriptSource]:
    return [NativeCaptionSource(), GeminiTranscriptionSource(), InvidiousCaptionSource()]


class TranscriptSourceChain:
    """Resolves a URL (or pasted text) into transcript text plus video metadata"""

    def __init__(self, sources: Optional[Sequence[TranscriptSource]] = None):
        self.sources = list(sources) if sources is not None else default_sources()

    @timed_operation(name="transcript acquisition")
    async def fetch(self, url: Optional[str], manual_transcript: Optional[str] = None) -> TranscriptResult:
        url = url or ""
        platform = detect_platform(url)

        if manual_transcript and manual_transcript.strip():
            meta = await self._manual_meta(url, platform)
            logger.info(f"Using pasted transcript ({len(manual_transcript.strip())} chars) for {meta.platform}")
            return TranscriptResult(transcript=manual_transcript.strip(), meta=meta)

        if platform == Platform.YOUTUBE:
            video_id = extract_youtube_video_id(url)
            if not video_id:
                raise UnsupportedURLError(INVALID_YOUTUBE_MESSAGE, url=url)

            title, channel = await fetch_youtube_meta(video_id)
            meta = VideoMeta(video_id=video_id, title=title, channel=channel, platform=Platform.YOUTUBE)
            transcript = await self._run_sources(video_id)
            return TranscriptResult(transcript=transcript, meta=meta)

        if platform == Platform.INSTAGRAM:
            raise ManualTranscriptRequiredError(INSTAGRAM_MESSAGE, video_id=extract_instagram_video_id(url))

        raise UnsupportedURLError(UNSUPPORTED_MESSAGE, url=url)

    async def _manual_meta(self, url: str, platform: Optional[Platform]) -> VideoMeta:
        if platform == Platform.YOUTUBE:
            video_id = extract_youtube_video_id(url) or "unknown"
            title, channel = await fetch_youtube_meta(video_id)
            return VideoMeta(video_id=video_id, title=title, channel=channel, platform=Platform.YOUTUBE)

        if platform == Platform.INSTAGRAM:
            return VideoMeta(
                video_id=extract_instagram_video_id(url),
                title="Instagram Video",
                channel=extract_instagram_username(url),
                platform=Platform.INSTAGRAM,
            )

        return VideoMeta(
            video_id="manual",
            title="Manual Input",
            channel="Direct Paste",
            platform=Platform.MANUAL,
        )

    async def _run_sources(self, video_id: str) -> str:
        context = AcquisitionContext(video_id=video_id)

        for source in self.sources:
            outcome = context.record(await self._attempt(source, video_id))
            logger.info(
                f"Transcript source {outcome.source} for {video_id}: {outcome.status.value}, "
                f"{len(outcome.text)} chars, {outcome.elapsed_ms:.0f} ms",
                extra={"attempt": outcome.as_log_dict()},
            )

            if outcome.usable:
                logger.info(f"✅ {source.name} succeeded for {video_id}: {len(outcome.text)} chars")
                return outcome.text

            if outcome.status != SourceStatus.SKIPPED:
                logger.warning(f"{source.name} failed for {video_id}, falling back")

        logger.error(
            f"All transcript sources failed for {video_id}",
            extra={"attempts": context.attempts()},
        )

        if context.all_blocked:
            raise UpstreamBlockedError(BLOCKED_MESSAGE, video_id=video_id, attempts=context.attempts())

        message = CAPTIONS_DISABLED_MESSAGE if context.captions_disabled else EXHAUSTED_MESSAGE
        raise TranscriptUnavailableError(
            message,
            video_id=video_id,
            attempts=context.attempts(),
            last_error=context.last_error,
        )

    async def _attempt(self, source: TranscriptSource, video_id: str) -> SourceOutcome:
        if not source.is_enabled():
            return SourceOutcome(source=source.name, status=SourceStatus.SKIPPED, detail="disabled")

        race = await race_with_timeout(source.attempt(video_id), source.timeout, source.name)

        if race.status == RaceStatus.COMPLETED:
            outcome = race.value
            outcome.elapsed_ms = race.elapsed_ms
            return outcome

        if race.status == RaceStatus.TIMED_OUT:
            return SourceOutcome(
                source=source.name,
                status=SourceStatus.TIMEOUT,
                detail=f"timed out after {source.timeout}s",
                elapsed_ms=race.elapsed_ms,
            )

        return SourceOutcome(
            source=source.name,
            status=SourceStatus.ERROR,
            detail=f"{type(race.error).__name__}: {str(race.error)[:200]}",
            elapsed_ms=race.elapsed_ms,
        )
