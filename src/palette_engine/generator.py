"""
BlackRoad Studio – Palette Engine: palette generation.
Harmony templates around a base colour, plus seeded random palettes that
start from a template and fill up with lightness variations.
"""
from __future__ import annotations

import logging
import random
from enum import Enum
from typing import List, Optional

from palette_engine.color import (
    GENERATION_DEFAULT_LIGHTNESS,
    GENERATION_DEFAULT_SATURATION,
    default_rng,
    from_hsl,
    hsl_with_defaults,
    normalize_hex,
    random_color,
    to_hsl,
)
from palette_engine.errors import ColorFormatError
from palette_engine.similarity import dedupe

logger = logging.getLogger(__name__)

# Jitter attempts per missing colour before falling back to random colours.
_MAX_VARIATION_ATTEMPTS = 50


class HarmonyTemplate(str, Enum):
    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    SPLIT_COMPLEMENTARY = "split-complementary"

    @classmethod
    def from_name(cls, name: "HarmonyTemplate | str") -> "HarmonyTemplate":
        if isinstance(name, cls):
            return name
        key = str(name).strip().replace("_", "-")
        if key == "splitComplementary":
            key = "split-complementary"
        try:
            return cls(key.lower())
        except ValueError:
            raise ValueError(f"Unknown harmony type: {name!r}") from None


_HUE_OFFSETS = {
    HarmonyTemplate.ANALOGOUS:           [30, 60, 90, 120],
    HarmonyTemplate.TRIADIC:             [120, 240],
    HarmonyTemplate.TETRADIC:            [90, 180, 270],
    HarmonyTemplate.SPLIT_COMPLEMENTARY: [150, 210],
}


# ── Harmony templates ─────────────────────────────────────────────────────────
def _monochromatic(h: float, s: float, l: float) -> List[str]:
    out = []
    for i in range(1, 5):
        lightness = max(0.1, min(0.9, l + (i * 0.15 - 0.3)))
        saturation = max(0.1, min(1.0, s * (1 - i * 0.1)))
        out.append(from_hsl(h, saturation, lightness))
    return out


def _complementary(h: float, s: float, l: float) -> List[str]:
    lifted = min(l + 0.2, 0.9)
    return [
        from_hsl(h + 180, s, l),
        from_hsl(h, s * 0.7, lifted),
        from_hsl(h + 180, s * 0.7, lifted),
    ]


def generate_harmony(base: str, template: HarmonyTemplate | str,
                     threshold: Optional[float] = None) -> List[str]:
    """Base colour first, then the template's companions, near-duplicates removed.

    A black base is read at lightness 0.5 so its companions are visible.
    Pure white has no such fallback: every companion is white again and the
    harmony collapses to ``[base]``.
    """
    template = HarmonyTemplate.from_name(template)
    try:
        base = normalize_hex(base)
        h, s, l = hsl_with_defaults(base, GENERATION_DEFAULT_SATURATION,
                                GENERATION_DEFAULT_LIGHTNESS)
    except ColorFormatError as exc:
        logger.warning("Cannot build %s harmony for %r: %s", template.value, base, exc)
        return [base]

    if template is HarmonyTemplate.MONOCHROMATIC:
        companions = _monochromatic(h, s, l)
    elif template is HarmonyTemplate.COMPLEMENTARY:
        companions = _complementary(h, s, l)
    else:
        companions = [from_hsl(h + offset, s, l) for offset in _HUE_OFFSETS[template]]

    return dedupe([base] + companions, threshold)


# ── Random palettes ───────────────────────────────────────────────────────────
def generate_random_palette(size: int = 5, rng: Optional[random.Random] = None) -> List[str]:
    rng = rng or default_rng()
    return [random_color(rng) for _ in range(max(0, size))]


def _lightness_variation(color: str, rng: random.Random) -> str:
    h, s, l = hsl_with_defaults(color, GENERATION_DEFAULT_SATURATION,
                                GENERATION_DEFAULT_LIGHTNESS)
    jitter = (rng.random() - 0.5) * 0.3
    return from_hsl(h, s, max(0.1, min(0.9, l + jitter)))


def generate_quality_random_palette(size: int = 5, rng: Optional[random.Random] = None) -> List[str]:
    """Random base + random template, padded with lightness variations.

    Pass a seeded ``random.Random`` for reproducible output.
    """
    if size <= 0:
        return []
    rng = rng or default_rng()
    base = random_color(rng)
    template = rng.choice(list(HarmonyTemplate))
    colors = generate_harmony(base, template)
    logger.debug("Quality palette from %s (%s)", base, template.value)

    attempts = 0
    while len(colors) < size:
        if attempts >= _MAX_VARIATION_ATTEMPTS * size:
            colors.append(random_color(rng))
            continue
        attempts += 1
        try:
            variation = _lightness_variation(rng.choice(colors), rng)
        except ColorFormatError as exc:
            logger.warning("Variation failed, adding a random colour: %s", exc)
            colors.append(random_color(rng))
            continue
        if variation not in colors:
            colors.append(variation)

    return colors[:size]


def recommended_colors(primary: str) -> List[str]:
    """Primary plus complementary, triadic and ±30° analogous suggestions."""
    try:
        hue, s, l = to_hsl(primary)
    except ColorFormatError as exc:
        logger.warning("Cannot recommend colours for %r: %s", primary, exc)
        return [primary]
    h = 0.0 if hue is None else hue
    s = s or 0.5
    l = l or 0.5
    suggestions = [normalize_hex(primary)]
    suggestions += [from_hsl(h + offset, s, l) for offset in (180, 120, 240, 30, -30)]
    return suggestions[:6]
