"""
Editing timeline builder.

Clips are laid out back to back in hook -> body -> cta order. Frame numbers
are rounded independently, so ``duration_frames`` need not equal
``end_frame - start_frame``. Both entry points are pure: the UI may call
``derive_timeline`` again after editing section text and get the same
layout the generator produced.
"""

from typing import List, NamedTuple, Optional, Sequence

from .config import SCRIPT_CONFIG
from .constants import round_half_up, seconds_for, word_count
from .models import EditingTimeline, ScriptSections, TimelineClip
from .parsing import extract_overlays

SECTION_ORDER = (
    ("hook", "HOOK"),
    ("body", "BODY"),
    ("cta", "CTA"),
)


class SectionDurations(NamedTuple):
    hook_seconds: float
    body_seconds: float
    cta_seconds: float

    def for_section(self, section: str) -> float:
        return getattr(self, f"{section}_seconds")


def section_durations(sections: ScriptSections) -> SectionDurations:
    return SectionDurations(
        hook_seconds=seconds_for(sections.hook),
        body_seconds=seconds_for(sections.body),
        cta_seconds=seconds_for(sections.cta),
    )


def build_timeline(
    sections: ScriptSections,
    durations: SectionDurations,
    footage: Optional[Sequence[str]] = None,
    fps: int = SCRIPT_CONFIG["FPS"],
) -> EditingTimeline:
    """
    Lay out one clip per non-empty section.

    Args:
        sections: Hook, body and CTA text
        durations: Seconds per section
        footage: B-roll suggestions, assigned to clips by clip index
        fps: Frames per second

    Returns:
        EditingTimeline whose total equals the sum of included durations
    """
    footage = list(footage or [])
    clips: List[TimelineClip] = []
    cursor = 0

    for section, label in SECTION_ORDER:
        text = getattr(sections, section)
        if not text:
            continue

        duration = durations.for_section(section)
        start_sec = cursor
        end_sec = cursor + duration
        index = len(clips)

        clips.append(
            TimelineClip(
                id=section,
                section=section,
                label=label,
                start_sec=start_sec,
                end_sec=end_sec,
                duration_sec=duration,
                start_frame=round_half_up(start_sec * fps),
                end_frame=round_half_up(end_sec * fps),
                duration_frames=round_half_up(duration * fps),
                text=text,
                word_count=word_count(text),
                footage=footage[index] if index < len(footage) else "",
                overlays=extract_overlays(text),
            )
        )
        cursor = end_sec

    return EditingTimeline(
        fps=fps,
        total_duration_sec=cursor,
        total_frames=round_half_up(cursor * fps),
        clips=clips,
    )


def derive_timeline(
    sections: ScriptSections,
    footage: Optional[Sequence[str]] = None,
    fps: int = SCRIPT_CONFIG["FPS"],
) -> EditingTimeline:
    """Recompute durations from the section text, then build the timeline"""
    return build_timeline(sections, section_durations(sections), footage, fps)
