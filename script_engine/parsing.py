"""
Parsing of raw script completions.

A completion looks like::

    [HOOK]
    ...
    [BODY]
    ...
    [CTA]
    ...
    ---
    {"footage": [...], "notes": [...], "hookAlts": [...]}

Section markers are matched case-insensitively. Nothing here raises: a
missing CTA gets the default line and an unparseable sidecar gets fixed
fallback suggestions.
"""

import json
import re
from typing import Any, List, Optional, Tuple

from telemetry import get_logger

from .config import SCRIPT_CONFIG
from .models import ProductionMeta, ScriptSections

logger = get_logger(__name__)

SIDECAR_SEPARATOR = re.compile(r"\n---\n?")
HOOK_PATTERN = re.compile(r"\[HOOK\]\s*\n([\s\S]*?)(?=\[BODY\])", re.IGNORECASE)
BODY_PATTERN = re.compile(r"\[BODY\]\s*\n([\s\S]*?)(?=\[CTA\])", re.IGNORECASE)
CTA_PATTERN = re.compile(r"\[CTA\]\s*\n([\s\S]*?)(?=---|\Z)", re.IGNORECASE)
GRAPHICS_PATTERN = re.compile(r"\[(GFX|STAT):\s*([^\]]+)\]")


def split_sidecar(raw: str) -> Tuple[str, Optional[str]]:
    """Return (script part, sidecar text or None) split at the first --- line"""
    parts = SIDECAR_SEPARATOR.split(raw)
    sidecar = parts[1] if len(parts) > 1 and parts[1] else None
    return parts[0], sidecar


def parse_sections(script_part: str) -> ScriptSections:
    hook = HOOK_PATTERN.search(script_part)
    body = BODY_PATTERN.search(script_part)
    cta = CTA_PATTERN.search(script_part)

    return ScriptSections(
        hook=hook.group(1).strip() if hook else "",
        body=body.group(1).strip() if body else "",
        cta=cta.group(1).strip() if cta else SCRIPT_CONFIG["DEFAULT_CTA"],
    )


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None]


def parse_production_meta(sidecar: Optional[str]) -> ProductionMeta:
    if sidecar is None:
        return ProductionMeta()

    try:
        parsed = json.loads(sidecar.strip())
    except json.JSONDecodeError:
        parsed = None

    if not isinstance(parsed, dict):
        logger.warning("Production JSON did not parse, using fallback suggestions")
        return ProductionMeta(
            footage=list(SCRIPT_CONFIG["FALLBACK_FOOTAGE"]),
            notes=list(SCRIPT_CONFIG["FALLBACK_NOTES"]),
            hook_alts=[],
        )

    return ProductionMeta(
        footage=_string_list(parsed.get("footage")),
        notes=_string_list(parsed.get("notes")),
        hook_alts=_string_list(parsed.get("hookAlts")),
    )


def parse_script_completion(raw: str) -> Tuple[ScriptSections, ProductionMeta]:
    script_part, sidecar = split_sidecar(raw)
    return parse_sections(script_part), parse_production_meta(sidecar)


def extract_graphics(text: str) -> List[str]:
    """Inner text of every [GFX: ...] / [STAT: ...] cue, in document order"""
    return [match.group(2).strip() for match in GRAPHICS_PATTERN.finditer(text)]


def extract_overlays(text: str) -> List[str]:
    """Cues formatted for the editor, e.g. "[STAT] 7-1 ATS last 8" """
    return [
        f"[{match.group(1)}] {match.group(2).strip()}"
        for match in GRAPHICS_PATTERN.finditer(text)
    ]
