"""Perceptual near-duplicate filtering (CIEDE2000 via coloraide)."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from coloraide import Color

from palette_engine.color import rgb_distance, to_rgb
from palette_engine.config import get_settings

logger = logging.getLogger(__name__)

# ΔE is undefined for a pair coloraide cannot read; RGB distance is
# roughly twice as large for the same visual step.
RGB_FALLBACK_FACTOR = 2.0


def delta_e(color1: str, color2: str) -> float:
    return Color(color1).delta_e(Color(color2), method="2000")


def _too_close(color: str, kept: str, threshold: float) -> bool:
    try:
        return delta_e(color, kept) < threshold
    except ValueError:
        logger.debug("ΔE unavailable for %r/%r, using RGB distance", color, kept)
        return rgb_distance(to_rgb(color), to_rgb(kept)) < threshold * RGB_FALLBACK_FACTOR


def dedupe(colors: Sequence[str], threshold: Optional[float] = None) -> List[str]:
    """Drop colours within ``threshold`` ΔE of an earlier kept colour.

    Walks in input order, so the first occurrence always wins and the result
    is never longer than the input. The threshold defaults to the
    configured PALETTE_SIMILARITY_THRESHOLD (25).
    """
    if threshold is None:
        threshold = get_settings().similarity_threshold
    kept: List[str] = []
    for color in colors:
        if not any(_too_close(color, k, threshold) for k in kept):
            kept.append(color)
    return kept
