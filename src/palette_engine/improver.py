"""
BlackRoad Studio – Palette Engine: palette repair.

``improve`` rebuilds a palette around its first colour, steering toward
better accessibility and harmony depending on which score is low.
``generate_accessibility_improved_colors`` is the heavier path used when
contrast is the main problem.
"""
from __future__ import annotations

import logging
from typing import List, Sequence

from palette_engine.color import (
    GENERATION_DEFAULT_LIGHTNESS,
    GENERATION_DEFAULT_SATURATION,
    from_hsl,
    hsl_with_defaults,
    normalize_hex,
    relative_luminance,
    to_hsl,
)
from palette_engine.config import get_settings
from palette_engine.contrast import contrast_ratio
from palette_engine.errors import ColorFormatError
from palette_engine.similarity import dedupe

logger = logging.getLogger(__name__)

ACCESSIBILITY_TARGET = 60
HARMONY_TARGET = 70
MIN_READABLE_RATIO = 4.5
NEUTRAL_SATURATION = 0.2
FIXED_NEUTRALS = ("#ffffff", "#000000", "#6b7280")

_DEFAULT_S = GENERATION_DEFAULT_SATURATION
_DEFAULT_L = GENERATION_DEFAULT_LIGHTNESS


def _high_contrast_companion(base: str) -> str:
    h, _, _ = hsl_with_defaults(base, _DEFAULT_S, _DEFAULT_L)
    lightness = 0.1 if relative_luminance(base) > 0.5 else 0.9
    return from_hsl(h, 0.3, lightness)


def _harmony_repairs(base: str) -> List[str]:
    h, s, l = hsl_with_defaults(base, _DEFAULT_S, _DEFAULT_L)
    return [
        from_hsl(h + 180, min(s, 0.7), l),
        from_hsl(h + 150, s * 0.8, l),
        from_hsl(h + 210, s * 0.8, l),
    ]


def _subtle_variations(base: str) -> List[str]:
    h, s, l = hsl_with_defaults(base, _DEFAULT_S, _DEFAULT_L)
    return [
        from_hsl(h, s * 0.7, min(l + 0.3, 0.9)),
        from_hsl(h, s, max(l - 0.3, 0.1)),
        from_hsl(h + 30, s, l),
    ]


def _has_neutral(colors: Sequence[str]) -> bool:
    return any(to_hsl(c).saturation < NEUTRAL_SATURATION for c in colors)


def ensure_readable(colors: Sequence[str]) -> List[str]:
    """Single best-effort pass: push unreadable colours 0.4 toward an extreme.

    A colour counts as readable when it reaches 4.5:1 against at least one
    other colour of the input. Adjusted colours are not re-checked.
    """
    out: List[str] = []
    for i, color in enumerate(colors):
        readable = any(
            contrast_ratio(color, other) >= MIN_READABLE_RATIO
            for j, other in enumerate(colors) if i != j
        )
        if not readable and len(colors) > 1:
            h, s, l = hsl_with_defaults(color, _DEFAULT_S, _DEFAULT_L)
            l = max(l - 0.4, 0.1) if l > 0.5 else min(l + 0.4, 0.9)
            color = from_hsl(h, s, l)
        out.append(color)
    return out


def improve(palette: Sequence[str], accessibility_score: float, harmony_score: float) -> List[str]:
    """Suggest a repaired palette seeded with ``palette[0]``.

    Returns the original palette untouched when the colours cannot be read.
    """
    if not palette:
        return []
    try:
        base = normalize_hex(palette[0])
        result = [base]
        if accessibility_score < ACCESSIBILITY_TARGET:
            result.append(_high_contrast_companion(base))
        if harmony_score < HARMONY_TARGET:
            result += _harmony_repairs(base)
        else:
            result += _subtle_variations(base)
        if not _has_neutral(result):
            h, _, _ = hsl_with_defaults(base, _DEFAULT_S, _DEFAULT_L)
            result.append(from_hsl(h, 0.1, 0.7))
        return ensure_readable(dedupe(result))
    except ColorFormatError as exc:
        logger.warning("Palette repair failed, keeping original: %s", exc)
        return list(palette)


def generate_accessibility_improved_colors(palette: Sequence[str]) -> List[str]:
    """Each colour plus a high-contrast partner, then white, black and gray."""
    if not palette:
        return []
    try:
        improved: List[str] = []
        for color in palette:
            color = normalize_hex(color)
            h, s, _ = hsl_with_defaults(color, _DEFAULT_S, _DEFAULT_L)
            improved.append(color)
            if relative_luminance(color) > 0.5:
                improved.append(from_hsl(h, min(s + 0.2, 1.0), 0.15))
            else:
                improved.append(from_hsl(h, max(s - 0.3, 0.3), 0.85))
        improved.extend(FIXED_NEUTRALS)
        return dedupe(improved, get_settings().strict_threshold)
    except ColorFormatError as exc:
        logger.warning("Accessibility repair failed, keeping original: %s", exc)
        return list(palette)
