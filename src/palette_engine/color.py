"""
BlackRoad Studio – Palette Engine: colour model.
Canonical colours are lowercase ``#rrggbb`` strings (``#rrggbbaa`` when an
alpha below 1 is carried). Everything else converts through here.
"""
from __future__ import annotations

import math
import random
import re
from colorsys import hls_to_rgb, rgb_to_hls
from typing import NamedTuple, Optional, Tuple

from palette_engine.config import get_settings
from palette_engine.errors import ColorFormatError

RGB = Tuple[int, int, int]

_HEX_RE = re.compile(r"^[0-9a-fA-F]+$")

# Saturation substituted for achromatic colours by the generation / repair
# formulas and by the tone mapper respectively. Generation and repair also
# treat a lightness of 0 as the default lightness.
GENERATION_DEFAULT_SATURATION = 0.6
GENERATION_DEFAULT_LIGHTNESS = 0.5
TONE_DEFAULT_SATURATION = 0.5


class HSL(NamedTuple):
    """Hue in [0, 360) or None when achromatic; saturation/lightness in [0, 1]."""
    hue: Optional[float]
    saturation: float
    lightness: float


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


# ── Hex handling ──────────────────────────────────────────────────────────────
def _hex_digits(value: str) -> str:
    if not isinstance(value, str):
        raise ColorFormatError(value, "expected a string")
    h = value.strip().lstrip("#")
    if len(h) not in (3, 6, 8) or not _HEX_RE.match(h):
        raise ColorFormatError(value, "expected #rgb, #rrggbb or #rrggbbaa")
    if len(h) == 3:
        h = h[0]*2 + h[1]*2 + h[2]*2
    return h.lower()


def normalize_hex(value: str) -> str:
    """Return the canonical ``#rrggbb`` (or ``#rrggbbaa``) form of a hex string."""
    h = _hex_digits(value)
    if len(h) == 8 and h[6:] == "ff":
        h = h[:6]
    return f"#{h}"


def is_valid_hex(value: str) -> bool:
    try:
        _hex_digits(value)
    except ColorFormatError:
        return False
    return True


def to_rgb(color: str) -> RGB:
    """Parse a hex colour into (r, g, b) ints 0-255. Alpha is ignored."""
    h = _hex_digits(color)
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def alpha_of(color: str) -> float:
    h = _hex_digits(color)
    return int(h[6:8], 16) / 255 if len(h) == 8 else 1.0


def rgb_to_hex(r: int, g: int, b: int) -> str:
    r, g, b = max(0, min(255, r)), max(0, min(255, g)), max(0, min(255, b))
    return f"#{r:02x}{g:02x}{b:02x}"


def from_rgb(r: float, g: float, b: float, alpha: Optional[float] = None) -> str:
    """Strict constructor: channels 0-255, alpha in [0, 1]."""
    for name, v in (("r", r), ("g", g), ("b", b)):
        if not 0 <= v <= 255:
            raise ColorFormatError((r, g, b), f"{name} out of range 0-255")
    hex_color = rgb_to_hex(round_half_up(r), round_half_up(g), round_half_up(b))
    if alpha is None:
        return hex_color
    if not 0.0 <= alpha <= 1.0:
        raise ColorFormatError(alpha, "alpha out of range 0-1")
    if alpha >= 1.0:
        return hex_color
    return f"{hex_color}{round_half_up(alpha * 255):02x}"


def with_alpha(color: str, alpha: float) -> str:
    r, g, b = to_rgb(color)
    return from_rgb(r, g, b, alpha)


# ── HSL ───────────────────────────────────────────────────────────────────────
def to_hsl(color: str) -> HSL:
    """Hue is reported as None for achromatic colours (saturation 0)."""
    r, g, b = to_rgb(color)
    h, l, s = rgb_to_hls(r / 255, g / 255, b / 255)
    if s == 0:
        return HSL(None, 0.0, l)
    return HSL((h * 360) % 360, s, l)


def from_hsl(hue: Optional[float], saturation: float, lightness: float) -> str:
    """Build hex from HSL; hue wraps mod 360, s and l are clamped to [0, 1]."""
    h = 0.0 if hue is None else hue % 360
    s = max(0.0, min(1.0, saturation))
    l = max(0.0, min(1.0, lightness))
    r, g, b = hls_to_rgb(h / 360, l, s)
    return rgb_to_hex(round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255))


def hsl_with_defaults(color: str, default_saturation: float,
                      default_lightness: Optional[float] = None) -> Tuple[float, float, float]:
    """HSL with the achromatic fallback applied.

    Grays have no hue; callers that rotate or re-saturate them get hue 0 and
    ``default_saturation`` instead, so a gray base still yields a coloured
    harmony. With ``default_lightness`` set, pure black (lightness 0) is
    read at that lightness too.
    """
    hue, s, l = to_hsl(color)
    if default_lightness is not None and l == 0:
        l = default_lightness
    if hue is None or s == 0:
        return 0.0, default_saturation, l
    return hue, s, l


# ── Luminance / distance ──────────────────────────────────────────────────────
def _linearize(c: float) -> float:
    c /= 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def luminance(r: int, g: int, b: int) -> float:
    """WCAG relative luminance of 0-255 channels."""
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def relative_luminance(color: str) -> float:
    return luminance(*to_rgb(color))


def rgb_distance(a: RGB, b: RGB) -> float:
    return math.sqrt(sum((int(x) - int(y)) ** 2 for x, y in zip(a, b)))


# ── Random sampling ───────────────────────────────────────────────────────────
_shared_rng: Optional[random.Random] = None


def default_rng() -> random.Random:
    """Module-wide generator, seeded from PALETTE_SEED when it is set."""
    global _shared_rng
    if _shared_rng is None:
        _shared_rng = random.Random(get_settings().seed)
    return _shared_rng


def reset_default_rng(seed: Optional[int] = None) -> None:
    global _shared_rng
    _shared_rng = random.Random(seed)


def random_color(rng: Optional[random.Random] = None) -> str:
    """Uniformly sampled 24-bit colour."""
    rng = rng or default_rng()
    return f"#{rng.randrange(0x1000000):06x}"
