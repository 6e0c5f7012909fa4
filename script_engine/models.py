"""
Pydantic models for generated scripts and editing timelines.

Python attributes are snake_case; the JSON handed to the UI is camelCase
(dump with ``by_alias=True``). Models accept either spelling on input.
"""

from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

SectionName = Literal["hook", "body", "cta"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScriptStyle(str, Enum):
    HYPE = "hype"
    ANALYTICAL = "analytical"
    CONVERSATIONAL = "conversational"


class ScriptSettings(CamelModel):
    """User-chosen script parameters"""

    target_seconds: Literal[30, 45, 60, 90] = 45
    style: ScriptStyle = ScriptStyle.HYPE
    include_graphics: bool = True
    include_stats: bool = True
    custom_hook: Optional[str] = None


class ScriptSections(CamelModel):
    hook: str = ""
    body: str = ""
    cta: str = ""

    @property
    def full_script(self) -> str:
        return f"{self.hook}\n\n{self.body}\n\n{self.cta}"


class ProductionMeta(CamelModel):
    """Machine-readable sidecar that follows the --- separator"""

    footage: List[str] = Field(default_factory=list)
    notes: List[str] = Field(default_factory=list)
    hook_alts: List[str] = Field(default_factory=list)


class UsageInfo(CamelModel):
    model: str
    prompt_tokens: int = 0
    completion_tokens: int = 0
    estimated_cost: float = 0.0

    @computed_field
    @property
    def total_tokens(self) -> int:
        return self.prompt_tokens + self.completion_tokens


class TimelineClip(CamelModel):
    id: str
    section: SectionName
    label: str
    start_sec: float
    end_sec: float
    duration_sec: float
    start_frame: int
    end_frame: int
    duration_frames: int
    text: str
    word_count: int
    footage: str = ""
    overlays: List[str] = Field(default_factory=list)


class EditingTimeline(CamelModel):
    fps: int
    total_duration_sec: float
    total_frames: int
    clips: List[TimelineClip] = Field(default_factory=list)


class GeneratedScript(CamelModel):
    sections: ScriptSections
    full_script: str
    word_count: int
    estimated_seconds: int
    hook_seconds: int
    body_seconds: int
    cta_seconds: int
    background_footage: List[str] = Field(default_factory=list)
    graphics_needed: List[str] = Field(default_factory=list)
    production_notes: List[str] = Field(default_factory=list)
    hook_alternatives: List[str] = Field(default_factory=list)
    timeline: EditingTimeline
    usage: List[UsageInfo] = Field(default_factory=list)
    total_cost: float = 0.0


# Picks flow


class PickInput(CamelModel):
    matchup: str = Field(..., min_length=1)
    selection: str = Field(..., min_length=1)
    odds: Optional[str] = None
    reasoning: Optional[str] = None


class PicksRequest(CamelModel):
    picks: List[PickInput] = Field(..., min_length=1)
    sport: str = Field(..., min_length=1)
    day: str = Field(..., min_length=1)
    date: str = Field(..., min_length=1)
    hook_id: Optional[str] = None
    hook_text: Optional[str] = None
    tone: Optional[str] = None
    style: ScriptStyle = ScriptStyle.HYPE
    target_seconds: Literal[30, 45, 60, 90] = 45


class PickMeta(CamelModel):
    matchup: str = ""
    selection: str = ""
    odds: str = ""
    one_liner: str = ""


class PicksScript(CamelModel):
    hook: str
    script: str
    word_count: int
    estimated_seconds: int
    picks: List[PickMeta] = Field(default_factory=list)
    caption: str = ""
    hashtags: List[str] = Field(default_factory=list)
    usage: List[UsageInfo] = Field(default_factory=list)
    total_cost: float = 0.0
