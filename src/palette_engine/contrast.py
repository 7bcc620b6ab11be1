"""WCAG 2.1 contrast ratio, level grading and per-pair scoring."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from palette_engine.color import normalize_hex, relative_luminance

WHITE = "#ffffff"
BLACK = "#000000"


class WCAGLevel(str, Enum):
    """Ordered by decreasing strictness."""
    AAA = "AAA"
    AA = "AA"
    AA_LARGE = "AA Large"
    FAIL = "Fail"


@dataclass(frozen=True)
class ContrastResult:
    foreground: str
    background: str
    ratio: float
    level: WCAGLevel
    score: float

    def to_dict(self) -> dict:
        return {
            "foreground": self.foreground,
            "background": self.background,
            "ratio": round(self.ratio, 2),
            "level": self.level.value,
            "score": round(self.score, 2),
        }


def contrast_ratio(color1: str, color2: str) -> float:
    """Return the WCAG 2.1 contrast ratio (1–21), unrounded."""
    l1, l2 = relative_luminance(color1), relative_luminance(color2)
    bright, dark = max(l1, l2), min(l1, l2)
    return (bright + 0.05) / (dark + 0.05)


def classify(ratio: float) -> Tuple[WCAGLevel, float]:
    """Map a ratio to its level and a 0–100 score.

    Below AA Large the score scales linearly, so a failing 1.5:1 pair still
    scores better than a 1:1 pair.
    """
    if ratio >= 7.0:  return WCAGLevel.AAA, 100.0
    if ratio >= 4.5:  return WCAGLevel.AA, 80.0
    if ratio >= 3.0:  return WCAGLevel.AA_LARGE, 50.0
    return WCAGLevel.FAIL, (ratio / 3) * 50


def wcag_grade(ratio: float) -> WCAGLevel:
    return classify(ratio)[0]


def evaluate(foreground: str, background: str) -> ContrastResult:
    fg, bg = normalize_hex(foreground), normalize_hex(background)
    ratio = contrast_ratio(fg, bg)
    level, score = classify(ratio)
    return ContrastResult(fg, bg, ratio, level, score)


def text_color_for(background: str) -> str:
    """White or black text, whichever reads on the given background."""
    return WHITE if contrast_ratio(background, WHITE) > 4.5 else BLACK
