"""Tests for palette_engine.similarity"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import random
import pytest
from palette_engine.color import random_color
from palette_engine.similarity import dedupe, delta_e


def test_delta_e_identity():
    assert delta_e("#3b82f6", "#3b82f6") == pytest.approx(0.0)

def test_delta_e_black_white():
    assert delta_e("#000000", "#ffffff") == pytest.approx(100.0, abs=0.5)

def test_dedupe_drops_near_duplicates():
    assert dedupe(["#ff0000", "#fe0101", "#0000ff"]) == ["#ff0000", "#0000ff"]

def test_dedupe_keeps_first_and_never_grows():
    rng = random.Random(5)
    for _ in range(20):
        colors = [random_color(rng) for _ in range(8)]
        out = dedupe(colors)
        assert out[0] == colors[0]
        assert len(out) <= len(colors)
        assert all(c in colors for c in out)

def test_dedupe_empty():
    assert dedupe([]) == []

def test_dedupe_threshold_argument():
    colors = ["#ff0000", "#e60000"]
    assert dedupe(colors, threshold=1) == colors
    assert dedupe(colors, threshold=50) == ["#ff0000"]

def test_dedupe_threshold_from_environment(monkeypatch):
    monkeypatch.setenv("PALETTE_SIMILARITY_THRESHOLD", "1")
    assert dedupe(["#ff0000", "#e60000"]) == ["#ff0000", "#e60000"]

def test_dedupe_rgb_fallback_for_unhashed_hex():
    assert dedupe(["ff0000", "ff0101", "0000ff"]) == ["ff0000", "0000ff"]
