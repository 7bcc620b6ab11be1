"""Tests for palette_engine.generator"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import random
import pytest
from palette_engine.color import is_valid_hex, to_hsl
from palette_engine.generator import (
    HarmonyTemplate, generate_harmony, generate_quality_random_palette,
    generate_random_palette, recommended_colors,
)


@pytest.fixture
def rng():
    return random.Random(2024)


# ── Templates ─────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("name,expected", [
    ("triadic", HarmonyTemplate.TRIADIC),
    ("Split-Complementary", HarmonyTemplate.SPLIT_COMPLEMENTARY),
    ("split_complementary", HarmonyTemplate.SPLIT_COMPLEMENTARY),
    ("splitComplementary", HarmonyTemplate.SPLIT_COMPLEMENTARY),
    (HarmonyTemplate.TETRADIC, HarmonyTemplate.TETRADIC),
])
def test_template_from_name(name, expected):
    assert HarmonyTemplate.from_name(name) is expected

def test_unknown_template():
    with pytest.raises(ValueError):
        generate_harmony("#3b82f6", "rainbow")


# ── Harmony palettes ──────────────────────────────────────────────────────────
def test_complementary_red():
    palette = generate_harmony("#ff0000", "complementary")
    assert palette[0] == "#ff0000"
    assert palette[1] == "#00ffff"

@pytest.mark.parametrize("template", list(HarmonyTemplate))
def test_every_template(template):
    palette = generate_harmony("#3B82F6", template)
    assert palette[0] == "#3b82f6"
    assert 1 <= len(palette) <= 5
    assert len(set(palette)) == len(palette)
    assert all(is_valid_hex(c) for c in palette)

def test_triadic_hues():
    palette = generate_harmony("#ff0000", HarmonyTemplate.TRIADIC)
    assert palette == ["#ff0000", "#00ff00", "#0000ff"]

def test_gray_base_still_gets_companions():
    palette = generate_harmony("#808080", "complementary", threshold=1)
    assert palette[0] == "#808080"
    assert len(palette) == 4
    assert to_hsl(palette[1]).hue == pytest.approx(180, abs=1)
    assert to_hsl(palette[1]).saturation == pytest.approx(0.6, abs=0.01)

def test_black_base_uses_mid_lightness():
    palette = generate_harmony("#000000", "triadic")
    assert palette[0] == "#000000"
    assert len(palette) == 3
    for color in palette[1:]:
        assert to_hsl(color).lightness == pytest.approx(0.5, abs=0.01)
        assert to_hsl(color).saturation == pytest.approx(0.6, abs=0.01)

def test_white_base_collapses():
    assert generate_harmony("#ffffff", "triadic") == ["#ffffff"]

def test_bad_base_returned_alone():
    assert generate_harmony("zzzzzz", "triadic") == ["zzzzzz"]


# ── Random palettes ───────────────────────────────────────────────────────────
def test_random_palette_size(rng):
    palette = generate_random_palette(7, rng)
    assert len(palette) == 7
    assert all(is_valid_hex(c) for c in palette)

@pytest.mark.parametrize("size", [1, 2, 3, 5, 8, 12])
def test_quality_palette_exact_size(size, rng):
    palette = generate_quality_random_palette(size, rng)
    assert len(palette) == size
    assert all(is_valid_hex(c) for c in palette)

def test_quality_palette_reproducible():
    a = generate_quality_random_palette(6, random.Random(11))
    b = generate_quality_random_palette(6, random.Random(11))
    assert a == b

def test_quality_palette_empty(rng):
    assert generate_quality_random_palette(0, rng) == []


# ── Recommendations ───────────────────────────────────────────────────────────
def test_recommended_colors():
    recs = recommended_colors("#ff0000")
    assert len(recs) == 6
    assert recs[:4] == ["#ff0000", "#00ffff", "#00ff00", "#0000ff"]

def test_recommended_colors_for_black_get_mid_lightness():
    recs = recommended_colors("#000000")
    assert recs[0] == "#000000"
    assert to_hsl(recs[1]).lightness == pytest.approx(0.5, abs=0.01)
