"""
Colour-vision-deficiency simulation.

Six deficiencies are fixed 3×3 linear transforms over normalised RGB; the
two achromatic ones are built from the 0.299/0.587/0.114 gray. Simulation
never raises: anything that cannot be converted comes back unchanged.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Sequence, Tuple

from palette_engine.color import rgb_to_hex, round_half_up, to_rgb
from palette_engine.errors import ColorFormatError

logger = logging.getLogger(__name__)

Matrix = Tuple[Tuple[float, float, float], ...]


class CVDType(str, Enum):
    PROTANOPIA = "protanopia"
    PROTANOMALY = "protanomaly"
    DEUTERANOPIA = "deuteranopia"
    DEUTERANOMALY = "deuteranomaly"
    TRITANOPIA = "tritanopia"
    TRITANOMALY = "tritanomaly"
    ACHROMATOPSIA = "achromatopsia"
    ACHROMATOMALY = "achromatomaly"

    @property
    def label(self) -> str:
        return CVD_INFO[self][0]

    @property
    def description(self) -> str:
        return CVD_INFO[self][1]


CVD_INFO: Dict[CVDType, Tuple[str, str]] = {
    CVDType.PROTANOPIA:    ("Protanopia",    "Red-blind (1% of males)"),
    CVDType.PROTANOMALY:   ("Protanomaly",   "Red-weak (1% of males)"),
    CVDType.DEUTERANOPIA:  ("Deuteranopia",  "Green-blind (1% of males)"),
    CVDType.DEUTERANOMALY: ("Deuteranomaly", "Green-weak (5% of males)"),
    CVDType.TRITANOPIA:    ("Tritanopia",    "Blue-blind (rare)"),
    CVDType.TRITANOMALY:   ("Tritanomaly",   "Blue-weak (rare)"),
    CVDType.ACHROMATOPSIA: ("Achromatopsia", "Complete color blindness"),
    CVDType.ACHROMATOMALY: ("Achromatomaly", "Partial color blindness"),
}

# Row-major: new[c] = sum(M[c][k] * orig[k])
_MATRICES: Dict[CVDType, Matrix] = {
    CVDType.PROTANOPIA:    ((0.567, 0.433, 0.0), (0.558, 0.442, 0.0), (0.0, 0.242, 0.758)),
    CVDType.PROTANOMALY:   ((0.817, 0.183, 0.0), (0.333, 0.667, 0.0), (0.0, 0.125, 0.875)),
    CVDType.DEUTERANOPIA:  ((0.625, 0.375, 0.0), (0.7, 0.3, 0.0),     (0.0, 0.3, 0.7)),
    CVDType.DEUTERANOMALY: ((0.8, 0.2, 0.0),     (0.258, 0.742, 0.0), (0.0, 0.142, 0.858)),
    CVDType.TRITANOPIA:    ((0.95, 0.05, 0.0),   (0.0, 0.433, 0.567), (0.0, 0.475, 0.525)),
    CVDType.TRITANOMALY:   ((0.967, 0.033, 0.0), (0.0, 0.733, 0.267), (0.0, 0.183, 0.817)),
}


def _gray(r: float, g: float, b: float) -> float:
    return 0.299 * r + 0.587 * g + 0.114 * b


def _transform(rgb: Tuple[float, float, float], cvd: CVDType) -> Tuple[float, float, float]:
    r, g, b = rgb
    if cvd is CVDType.ACHROMATOPSIA:
        gray = _gray(r, g, b)
        return gray, gray, gray
    if cvd is CVDType.ACHROMATOMALY:
        gray = _gray(r, g, b)
        return (0.618 * r + 0.320 * gray + 0.062 * b,
                0.163 * r + 0.775 * g + 0.062 * b,
                0.163 * r + 0.320 * gray + 0.516 * b)
    m = _MATRICES[cvd]
    return tuple(row[0] * r + row[1] * g + row[2] * b for row in m)  # type: ignore[return-value]


def _channel(v: float) -> int:
    return max(0, min(255, round_half_up(v * 255)))


def simulate(color: str, cvd_type: CVDType | str) -> str:
    """How ``color`` appears under ``cvd_type``; the input is returned on failure."""
    try:
        cvd = CVDType(cvd_type)
        r, g, b = to_rgb(color)
    except (ColorFormatError, ValueError) as exc:
        logger.warning("Cannot simulate %s for %r: %s", cvd_type, color, exc)
        return color
    nr, ng, nb = _transform((r / 255, g / 255, b / 255), cvd)
    return rgb_to_hex(_channel(nr), _channel(ng), _channel(nb))


def simulate_palette(palette: Sequence[str], cvd_type: CVDType | str) -> List[str]:
    return [simulate(c, cvd_type) for c in palette]


def color_combinations(palette: Sequence[str]) -> List[Dict[str, str]]:
    """Every ordered background/foreground pair of distinct palette slots."""
    return [
        {"background": bg, "foreground": fg}
        for i, bg in enumerate(palette)
        for j, fg in enumerate(palette)
        if i != j
    ]
