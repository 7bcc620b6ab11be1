"""
Pull colours out of free-form text (pasted CSS, design tokens, notes).

Recognised, in scan order: ``#abc`` / ``#aabbcc``, bare ``aabbcc`` tokens
that are not plain numbers, ``rgb()``, ``rgba()``, ``hsl()``, ``hsla()``.
Matches that do not make a valid colour are skipped.
"""
from __future__ import annotations

import logging
import re
from typing import Callable, List

from palette_engine.color import from_hsl, from_rgb, normalize_hex, with_alpha
from palette_engine.errors import ColorFormatError

logger = logging.getLogger(__name__)

_NUM = r"([0-9]*\.?[0-9]+)"

HEX_RE = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}\b")
BARE_HEX_RE = re.compile(r"\b(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})\b")
RGB_RE = re.compile(r"rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)")
RGBA_RE = re.compile(rf"rgba\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*,\s*{_NUM}\s*\)")
HSL_RE = re.compile(r"hsl\(\s*(\d+)\s*,\s*(\d+)%\s*,\s*(\d+)%\s*\)")
HSLA_RE = re.compile(rf"hsla\(\s*(\d+)\s*,\s*(\d+)%\s*,\s*(\d+)%\s*,\s*{_NUM}\s*\)")


def _percent(raw: str) -> float:
    value = int(raw)
    if value > 100:
        raise ColorFormatError(f"{raw}%", "percentage above 100")
    return value / 100


def _from_rgb_match(m: re.Match) -> str:
    return from_rgb(int(m[1]), int(m[2]), int(m[3]))


def _from_rgba_match(m: re.Match) -> str:
    return from_rgb(int(m[1]), int(m[2]), int(m[3]), float(m[4]))


def _from_hsl_match(m: re.Match) -> str:
    return from_hsl(int(m[1]), _percent(m[2]), _percent(m[3]))


def _from_hsla_match(m: re.Match) -> str:
    return with_alpha(_from_hsl_match(m), float(m[4]))


_FUNCTIONAL: List[tuple] = [
    (RGB_RE, _from_rgb_match),
    (RGBA_RE, _from_rgba_match),
    (HSL_RE, _from_hsl_match),
    (HSLA_RE, _from_hsla_match),
]


def _collect(colors: List[str], token: str, build: Callable[[], str]) -> None:
    try:
        colors.append(build())
    except ColorFormatError as exc:
        logger.debug("Skipping %r: %s", token, exc)


def parse_colors(text: str) -> List[str]:
    """Canonical colours found in ``text``, deduplicated, first seen first."""
    colors: List[str] = []

    for m in HEX_RE.finditer(text):
        _collect(colors, m[0], lambda: normalize_hex(m[0]))

    for m in BARE_HEX_RE.finditer(text):
        token = m[0]
        if f"#{token}" in colors or token.isdigit():
            continue
        _collect(colors, token, lambda: normalize_hex(token))

    for regex, build in _FUNCTIONAL:
        for m in regex.finditer(text):
            _collect(colors, m[0], lambda: build(m))

    return list(dict.fromkeys(colors))
