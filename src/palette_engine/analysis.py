"""
BlackRoad Studio – Palette Engine: full palette audit.
Scores every fg/bg combination, rates harmony, writes recommendations and
proposes a repaired palette.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from palette_engine.color import normalize_hex, relative_luminance, round_half_up, to_hsl
from palette_engine.contrast import ContrastResult, WCAGLevel, evaluate
from palette_engine.generator import recommended_colors
from palette_engine.harmony import harmony_score
from palette_engine.improver import ACCESSIBILITY_TARGET, generate_accessibility_improved_colors, improve

logger = logging.getLogger(__name__)

SUGGESTION_LIMIT = 6


@dataclass
class PaletteAnalysis:
    palette: List[str]
    contrast_scores: List[ContrastResult] = field(default_factory=list)
    harmony_score: int = 100
    accessibility_score: int = 0
    overall_score: int = 0
    recommendations: List[str] = field(default_factory=list)
    improved_palette: List[str] = field(default_factory=list)

    @property
    def failing_pairs(self) -> List[ContrastResult]:
        return [c for c in self.contrast_scores if c.level is WCAGLevel.FAIL]

    def to_dict(self) -> dict:
        passed = sum(1 for c in self.contrast_scores if c.ratio >= 4.5)
        total = len(self.contrast_scores)
        return {
            "palette": self.palette,
            "checks": [c.to_dict() for c in self.contrast_scores],
            "summary": {
                "total": total,
                "pass_aa": passed,
                "fail_aa": total - passed,
                "pass_rate": round(passed / max(1, total) * 100, 1),
            },
            "harmony_score": self.harmony_score,
            "accessibility_score": self.accessibility_score,
            "overall_score": self.overall_score,
            "recommendations": self.recommendations,
            "improved_palette": self.improved_palette,
        }


# ── Scoring ───────────────────────────────────────────────────────────────────
def contrast_matrix(palette: Sequence[str]) -> List[ContrastResult]:
    """Every ordered pair (i != j), highest ratio first."""
    results = [
        evaluate(fg, bg)
        for i, fg in enumerate(palette)
        for j, bg in enumerate(palette)
        if i != j
    ]
    results.sort(key=lambda c: c.ratio, reverse=True)
    return results


def accessibility_score(results: Sequence[ContrastResult]) -> int:
    if not results:
        return 0
    return round_half_up(sum(c.score for c in results) / len(results))


# ── Recommendations ───────────────────────────────────────────────────────────
def _share(palette: Sequence[str], predicate) -> int:
    return sum(1 for c in palette if predicate(c))


def recommendations_for(palette: Sequence[str], results: Sequence[ContrastResult],
                        access: int, harmony: int) -> List[str]:
    recs: List[str] = []
    n = len(palette)

    if access < ACCESSIBILITY_TARGET:
        failing = sum(1 for c in results if c.level is WCAGLevel.FAIL)
        if failing:
            recs.append(f"{failing} color combinations fail WCAG standards - "
                        "consider darkening or lightening some colors")
        recs.append("Add high-contrast colors (very light or very dark) to improve readability")
    elif access < 80:
        recs.append("Good accessibility! Consider testing with color vision simulators "
                    "for complete coverage")

    if harmony < 50:
        recs.append("Colors appear to clash - try using complementary, analogous, "
                    "or triadic color relationships")
    elif harmony < 70:
        recs.append("Color harmony can be improved by using more systematic color relationships")

    if n < 3:
        recs.append("Consider adding 2-3 more colors for a more versatile palette")
    elif n > 8:
        recs.append("Large palettes can be overwhelming - consider focusing on 5-7 core colors")

    if _share(palette, lambda c: relative_luminance(c) > 0.8) > n * 0.6:
        recs.append("Palette is mostly light colors - add some darker shades for better contrast")
    if _share(palette, lambda c: relative_luminance(c) < 0.2) > n * 0.6:
        recs.append("Palette is mostly dark colors - add some lighter tones for better balance")
    if n > 2 and _share(palette, lambda c: to_hsl(c).saturation > 0.8) == n:
        recs.append("All colors are highly saturated - consider adding some muted tones for balance")

    if access >= 80 and harmony >= 70 and 3 <= n <= 7:
        recs.append("Excellent palette! Well-balanced colors with good accessibility and harmony")
    return recs


def suggest_palette(palette: Sequence[str], access: int, harmony: int) -> List[str]:
    """Repaired palette, topped up from the primary's recommendations."""
    if not palette:
        return []
    if access < ACCESSIBILITY_TARGET:
        improved = generate_accessibility_improved_colors(palette)[:SUGGESTION_LIMIT]
    else:
        improved = improve(palette, access, harmony)
    if len(improved) < 3:
        improved = list(dict.fromkeys(improved + recommended_colors(palette[0])))
    return improved[:SUGGESTION_LIMIT]


# ── Entry point ───────────────────────────────────────────────────────────────
def analyze_palette(palette: Sequence[str]) -> PaletteAnalysis:
    """Full audit of a palette. Raises ColorFormatError for unreadable colours."""
    colors = [normalize_hex(c) for c in palette]
    results = contrast_matrix(colors)
    harmony = harmony_score(colors)
    access = accessibility_score(results)
    overall = round_half_up((harmony + access) / 2)
    logger.debug("Analysed %d colours: harmony=%d accessibility=%d", len(colors), harmony, access)
    return PaletteAnalysis(
        palette=colors,
        contrast_scores=results,
        harmony_score=harmony,
        accessibility_score=access,
        overall_score=overall,
        recommendations=recommendations_for(colors, results, access, harmony) if colors else [],
        improved_palette=suggest_palette(colors, access, harmony),
    )

