"""Tests for palette_engine.export"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import json
import pytest
from palette_engine.export import (
    EXPORT_FORMATS, export_palette, export_variants, get_format,
    to_css_vars, to_js_array, to_scss, to_swatch_list, to_tailwind,
)

PALETTE = ["#ff0000", "#00ff00"]


def test_css_vars():
    assert to_css_vars(PALETTE, "brand") == (
        ":root {\n  --brand-1: #ff0000;\n  --brand-2: #00ff00;\n}"
    )

def test_scss():
    assert to_scss(PALETTE) == "$palette-1: #ff0000;\n$palette-2: #00ff00;"

def test_js_array():
    js = to_js_array(PALETTE, "brand")
    assert js.startswith("const brand = [")
    assert js.endswith("];")
    assert json.loads(js[len("const brand = "):-1]) == PALETTE

def test_json_export():
    assert json.loads(export_palette(PALETTE, "json", "brand")) == {"brand": PALETTE}

def test_tailwind():
    tw = to_tailwind(PALETTE, "brand")
    assert tw.startswith("module.exports = {")
    assert '"brand-1": "#ff0000"' in tw

def test_swatch_list():
    assert to_swatch_list(PALETTE) == "palette-1: #ff0000\npalette-2: #00ff00"

def test_registry_keys():
    assert set(EXPORT_FORMATS) == {"css", "scss", "js", "json", "tailwind", "ase"}
    assert get_format("tailwind").extension == "js"

def test_unknown_format():
    with pytest.raises(ValueError):
        export_palette(PALETTE, "pdf")

def test_export_variants():
    out = export_variants(["#ffffff"], ["#4a1f1f"], "css", "theme")
    light, dark = out.split("\n\n")
    assert light.startswith("// Light variant\n:root {")
    assert "--themeLight-1: #ffffff;" in light
    assert dark.startswith("// Dark variant\n")
    assert "--themeDark-1: #4a1f1f;" in dark

def test_empty_palette_exports():
    assert to_css_vars([]) == ":root {\n}"
    assert json.loads(export_palette([], "json")) == {"palette": []}
