"""Harmony scoring.

A coarse proxy, not a colour-appearance model: every pair of colours that is
nearly identical (RGB distance < 30) or maximally far apart (> 440, close to
the 441.67 black/white diagonal) costs five points.
"""
from __future__ import annotations

import logging
from itertools import combinations
from typing import List, Sequence

from palette_engine.color import RGB, rgb_distance, to_rgb
from palette_engine.errors import ColorFormatError

logger = logging.getLogger(__name__)

TOO_SIMILAR = 30.0
CLASH = 440.0
PENALTY = 5


def harmony_score(palette: Sequence[str]) -> int:
    if len(palette) < 2:
        return 100

    rgbs: List[RGB] = []
    for color in palette:
        try:
            rgbs.append(to_rgb(color))
        except ColorFormatError:
            logger.debug("Skipping unparseable colour in harmony score: %r", color)

    score = 100
    for a, b in combinations(rgbs, 2):
        distance = rgb_distance(a, b)
        if distance < TOO_SIMILAR:
            score -= PENALTY
        if distance > CLASH:
            score -= PENALTY
    return max(0, score)
