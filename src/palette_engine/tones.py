"""Light/dark counterparts of a palette (hue kept, lightness remapped)."""
from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from palette_engine.color import TONE_DEFAULT_SATURATION, from_hsl, hsl_with_defaults
from palette_engine.errors import ColorFormatError

logger = logging.getLogger(__name__)


def dark_lightness(l: float) -> float:
    if l > 0.7:
        return 0.2 + (l - 0.7) * 0.3
    if l > 0.4:
        return 0.15 + (l - 0.4) * 0.2
    # already dark: lift so it stays visible on a dark surface
    return min(0.6, l + 0.3)


def light_lightness(l: float) -> float:
    if l < 0.3:
        return 0.6 + (0.3 - l) * 0.5
    if l < 0.6:
        return 0.7 + (l - 0.3) * 0.4
    return max(0.3, l - 0.2)


def _to_dark(color: str) -> str:
    h, s, l = hsl_with_defaults(color, TONE_DEFAULT_SATURATION)
    return from_hsl(h, min(1.0, s * 1.1), dark_lightness(l))


def _to_light(color: str) -> str:
    h, s, l = hsl_with_defaults(color, TONE_DEFAULT_SATURATION)
    return from_hsl(h, max(0.2, s * 0.9), light_lightness(l))


def to_dark_variant(palette: Sequence[str]) -> List[str]:
    """Index-preserving dark-mode mapping; the input comes back on bad colours."""
    try:
        return [_to_dark(c) for c in palette]
    except ColorFormatError as exc:
        logger.warning("Dark variant failed, keeping palette: %s", exc)
        return list(palette)


def to_light_variant(palette: Sequence[str]) -> List[str]:
    try:
        return [_to_light(c) for c in palette]
    except ColorFormatError as exc:
        logger.warning("Light variant failed, keeping palette: %s", exc)
        return list(palette)


def palette_variants(palette: Sequence[str]) -> Dict[str, List[str]]:
    return {"light": list(palette), "dark": to_dark_variant(palette)}
