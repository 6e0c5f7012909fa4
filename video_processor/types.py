"""
Types shared by the transcript sources and the source chain.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Platform(str, Enum):
    YOUTUBE = "youtube"
    INSTAGRAM = "instagram"
    MANUAL = "manual"


class VideoMeta(BaseModel):
    """Identity and display info of the source video"""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, use_enum_values=True
    )

    video_id: str
    title: str
    channel: str
    platform: Platform


class TranscriptResult(BaseModel):
    """
    Transcript text plus metadata.

    Acquired transcripts are always longer than 10 characters; a pasted
    transcript is passed through as given (trimmed).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    transcript: str
    meta: VideoMeta


class SourceStatus(str, Enum):
    SUCCESS = "success"
    EMPTY = "empty"
    TIMEOUT = "timeout"
    ERROR = "error"
    SKIPPED = "skipped"


# Detail tags the chain branches on
DETAIL_CAPTIONS_DISABLED = "captions_disabled"
DETAIL_BLOCKED = "blocked"


class SourceOutcome(BaseModel):
    """Result of one transcript source attempt"""

    source: str
    status: SourceStatus
    text: str = ""
    detail: str = ""
    elapsed_ms: float = 0.0

    @property
    def usable(self) -> bool:
        return self.status == SourceStatus.SUCCESS and len(self.text.strip()) > 10

    def as_log_dict(self) -> dict:
        return {
            "source": self.source,
            "status": self.status.value,
            "chars": len(self.text),
            "detail": self.detail,
            "elapsed_ms": round(self.elapsed_ms),
        }


class AcquisitionContext(BaseModel):
    """Per-request record of every source attempt, in order"""

    video_id: Optional[str] = None
    outcomes: List[SourceOutcome] = Field(default_factory=list)

    def record(self, outcome: SourceOutcome) -> SourceOutcome:
        self.outcomes.append(outcome)
        return outcome

    @property
    def last_error(self) -> str:
        for outcome in reversed(self.outcomes):
            if outcome.status != SourceStatus.SUCCESS:
                suffix = f" ({outcome.detail})" if outcome.detail else ""
                return f"{outcome.source}: {outcome.status.value}{suffix}"
        return ""

    @property
    def captions_disabled(self) -> bool:
        return any(o.detail == DETAIL_CAPTIONS_DISABLED for o in self.outcomes)

    @property
    def all_blocked(self) -> bool:
        attempted = [o for o in self.outcomes if o.status != SourceStatus.SKIPPED]
        return bool(attempted) and all(o.detail == DETAIL_BLOCKED for o in attempted)

    def attempts(self) -> List[dict]:
        return [o.as_log_dict() for o in self.outcomes]
