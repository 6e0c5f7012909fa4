"""
Pydantic schemas for API request validation.
Request bodies arrive in camelCase; snake_case names are accepted too.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from script_engine.models import PicksRequest, ScriptSections, ScriptSettings

MISSING_INPUT_MESSAGE = "Provide a video URL or paste a transcript"


class RequestSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GenerateScriptRequest(RequestSchema):
    """Request schema for script generation from a video URL or pasted transcript"""
    url: Optional[str] = Field(None, description="YouTube or Instagram URL")
    manual_transcript: Optional[str] = Field(None, description="Pasted transcript; wins over the URL")
    settings: ScriptSettings = Field(default_factory=ScriptSettings)

    @field_validator('url', 'manual_transcript')
    @classmethod
    def blank_to_none(cls, v):
        if v is None or not v.strip():
            return None
        return v

    @model_validator(mode='after')
    def require_url_or_transcript(self):
        if not self.url and not self.manual_transcript:
            raise ValueError(MISSING_INPUT_MESSAGE)
        return self

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
                    "settings": {"targetSeconds": 45, "style": "hype"},
                },
                {
                    "manualTranscript": "Lakers minus 4.5 tonight, here's why...",
                    "settings": {"targetSeconds": 30, "style": "analytical", "includeGraphics": False},
                },
            ]
        },
    )


class CaptionFetchRequest(RequestSchema):
    """Request schema for the client-assisted caption fetch"""
    video_id: str = Field(..., min_length=1, description="YouTube video ID")
    caption_url: Optional[str] = Field(None, description="Caption track URL already known to the client")


class TimelineRequest(RequestSchema):
    """Request schema for recomputing a timeline after section edits"""
    sections: ScriptSections
    footage: List[str] = Field(default_factory=list)
    fps: int = Field(30, ge=1, le=120)


__all__ = [
    "GenerateScriptRequest",
    "CaptionFetchRequest",
    "TimelineRequest",
    "PicksRequest",
    "MISSING_INPUT_MESSAGE",
]
