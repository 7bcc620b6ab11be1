"""Tests for palette_engine.harmony"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest
from palette_engine.harmony import harmony_score


@pytest.mark.parametrize("palette", [[], ["#3b82f6"]])
def test_small_palettes_score_full(palette):
    assert harmony_score(palette) == 100

def test_distinct_colours_unpenalised():
    assert harmony_score(["#ff0000", "#00ff00", "#0000ff"]) == 100

def test_near_duplicates_penalised():
    assert harmony_score(["#ff0000", "#ff0101"]) == 95

def test_black_white_clash():
    assert harmony_score(["#000000", "#ffffff"]) == 95

def test_score_floors_at_zero():
    assert harmony_score(["#3b82f6"] * 30) == 0

def test_unreadable_colours_skipped():
    assert harmony_score(["#000000", "not-a-colour", "#ffffff"]) == 95
