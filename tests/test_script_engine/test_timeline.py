import pytest

from script_engine.constants import round_half_up, seconds_for, words_for
from script_engine.models import ScriptSections
from script_engine.timeline import SectionDurations, build_timeline, derive_timeline, section_durations

SECTIONS = ScriptSections(
    hook="Stop scrolling.",
    body="Lakers minus four is free money tonight.",
    cta="Bet now on the link.",
)


class TestRounding:
    @pytest.mark.parametrize(
        "value,expected",
        [(7 / 2.8, 3), (0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2), (0.0, 0)],
    )
    def test_half_rounds_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_word_targets(self):
        assert words_for(45) == 126
        assert words_for(3) == 8
        assert words_for(4) == 11

    def test_seconds_for_text(self):
        assert seconds_for("one two three four five six seven") == 3
        assert seconds_for("") == 0


class TestDeriveTimeline:
    def test_three_section_layout(self):
        timeline = derive_timeline(SECTIONS, footage=["Lakers b-roll", "Arena shot"])

        assert [c.duration_sec for c in timeline.clips] == [1, 3, 2]
        assert [(c.start_sec, c.end_sec) for c in timeline.clips] == [(0, 1), (1, 4), (4, 6)]
        assert timeline.total_duration_sec == 6
        assert timeline.total_frames == 180
        assert timeline.fps == 30

        hook, body, cta = timeline.clips
        assert (hook.start_frame, hook.end_frame, hook.duration_frames) == (0, 30, 30)
        assert (body.start_frame, body.end_frame) == (30, 120)
        assert (cta.start_frame, cta.end_frame) == (120, 180)
        assert [c.label for c in timeline.clips] == ["HOOK", "BODY", "CTA"]
        assert body.word_count == 7
        assert hook.footage == "Lakers b-roll"
        assert body.footage == "Arena shot"
        assert cta.footage == ""

    def test_empty_sections_are_skipped(self):
        timeline = derive_timeline(ScriptSections(hook="", body="Take the over tonight.", cta="Tap the link."))

        assert [c.section for c in timeline.clips] == ["body", "cta"]
        assert timeline.clips[0].start_sec == 0
        assert timeline.total_duration_sec == sum(c.duration_sec for c in timeline.clips)

    def test_footage_is_assigned_by_clip_index(self):
        timeline = derive_timeline(
            ScriptSections(hook="", body="Take the over tonight.", cta="Tap the link."),
            footage=["first", "second"],
        )

        assert [c.footage for c in timeline.clips] == ["first", "second"]

    def test_overlays_from_section_text(self):
        sections = ScriptSections(hook="Look.", body="Boston [STAT: 7-1 ATS] at home.", cta="Go.")

        body = derive_timeline(sections).clips[1]

        assert body.overlays == ["[STAT] 7-1 ATS"]

    def test_recomputing_is_stable(self):
        assert derive_timeline(SECTIONS, ["a"]) == derive_timeline(SECTIONS, ["a"])

    def test_custom_fps(self):
        timeline = derive_timeline(SECTIONS, fps=24)

        assert timeline.total_frames == 144
        assert timeline.clips[1].start_frame == 24


class TestBuildTimeline:
    def test_uses_given_durations(self):
        timeline = build_timeline(SECTIONS, SectionDurations(2.5, 10, 4), fps=30)

        assert timeline.total_duration_sec == 16.5
        assert timeline.clips[0].duration_frames == 75
        assert timeline.clips[1].start_frame == 75

    def test_section_durations(self):
        assert section_durations(SECTIONS) == SectionDurations(1, 3, 2)

    def test_camel_case_dump(self):
        data = derive_timeline(SECTIONS).model_dump(mode="json", by_alias=True)

        assert data["totalDurationSec"] == 6
        assert data["clips"][0]["startFrame"] == 0
        assert "durationFrames" in data["clips"][0]
