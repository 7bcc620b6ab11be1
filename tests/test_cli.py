"""Tests for the palette CLI"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import json
import pytest
from palette_engine.cli import main


def run(capsys, *argv):
    main(list(argv))
    return capsys.readouterr().out


def test_contrast(capsys):
    out = run(capsys, "contrast", "#000000", "#ffffff")
    assert "ratio 21.00:1" in out
    assert "grade=AAA" in out

def test_harmony(capsys):
    out = run(capsys, "harmony", "#ff0000", "complementary")
    assert "1. #ff0000" in out
    assert "2. #00ffff" in out

def test_random_is_seeded(capsys):
    first = run(capsys, "random", "--size", "4", "--seed", "7")
    second = run(capsys, "random", "--size", "4", "--seed", "7")
    assert first == second
    assert len(first.strip().splitlines()) == 4

def test_analyze_json(capsys):
    data = json.loads(run(capsys, "analyze", "#000000", "#ffffff", "--json"))
    assert data["accessibility_score"] == 100
    assert data["summary"]["total"] == 2

def test_analyze_pretty(capsys):
    out = run(capsys, "analyze", "#000000", "#ffffff")
    assert "overall=98" in out

def test_simulate(capsys):
    out = run(capsys, "simulate", "protanopia", "#ff0000")
    assert "#ff0000 → #918e00" in out

def test_parse_nothing(capsys):
    assert "(no colours found)" in run(capsys, "parse", "nothing here")

def test_parse(capsys):
    assert "1. #00ff00" in run(capsys, "parse", "hsl(120, 100%, 50%)")

def test_export_name_from_environment(capsys, monkeypatch):
    monkeypatch.setenv("PALETTE_EXPORT_NAME", "brand")
    out = run(capsys, "export", "css", "#ff0000")
    assert "--brand-1: #ff0000;" in out

def test_export_with_dark(capsys):
    out = run(capsys, "export", "scss", "#ffffff", "--name", "ui", "--with-dark")
    assert "$uiLight-1: #ffffff;" in out
    assert "// Dark variant" in out

def test_improve_contrast_first(capsys):
    out = run(capsys, "improve", "#ffffff", "--contrast-first")
    assert "1. #ffffff" in out

def test_variant_dark(capsys):
    out = run(capsys, "variant", "dark", "#ffffff", "#000000")
    assert len(out.strip().splitlines()) == 2

def test_bad_colour_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["contrast", "nope", "#ffffff"])
    assert "Invalid color" in str(exc.value.code)

def test_unknown_template_rejected(capsys):
    with pytest.raises(SystemExit):
        main(["harmony", "#ff0000", "rainbow"])

def test_bad_environment_exits_cleanly(monkeypatch):
    monkeypatch.setenv("PALETTE_LOG_LEVEL", "verbose")
    with pytest.raises(SystemExit) as exc:
        main(["contrast", "#000000", "#ffffff"])
    assert "PALETTE_LOG_LEVEL" in str(exc.value.code)
