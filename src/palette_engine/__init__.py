"""
BlackRoad Studio – Palette Engine.
Contrast grading, harmony scoring, CVD simulation, palette generation and
repair, tone variants, colour parsing and code export.
"""
from palette_engine.analysis import PaletteAnalysis, analyze_palette
from palette_engine.color import (
    HSL,
    from_hsl,
    from_rgb,
    is_valid_hex,
    normalize_hex,
    random_color,
    relative_luminance,
    to_hsl,
    to_rgb,
)
from palette_engine.config import Settings, get_settings, load_settings
from palette_engine.contrast import ContrastResult, WCAGLevel, contrast_ratio, evaluate, text_color_for
from palette_engine.cvd import CVDType, color_combinations, simulate, simulate_palette
from palette_engine.errors import ColorFormatError
from palette_engine.export import EXPORT_FORMATS, export_palette, export_variants
from palette_engine.generator import (
    HarmonyTemplate,
    generate_harmony,
    generate_quality_random_palette,
    generate_random_palette,
    recommended_colors,
)
from palette_engine.harmony import harmony_score
from palette_engine.improver import generate_accessibility_improved_colors, improve
from palette_engine.parser import parse_colors
from palette_engine.similarity import dedupe, delta_e
from palette_engine.tones import palette_variants, to_dark_variant, to_light_variant

__version__ = "0.1.0"

__all__ = [
    "HSL", "from_hsl", "from_rgb", "is_valid_hex", "normalize_hex", "random_color",
    "relative_luminance", "to_hsl", "to_rgb",
    "Settings", "get_settings", "load_settings",
    "ColorFormatError",
    "ContrastResult", "WCAGLevel", "contrast_ratio", "evaluate", "text_color_for",
    "harmony_score",
    "CVDType", "color_combinations", "simulate", "simulate_palette",
    "dedupe", "delta_e",
    "HarmonyTemplate", "generate_harmony", "generate_quality_random_palette",
    "generate_random_palette", "recommended_colors",
    "generate_accessibility_improved_colors", "improve",
    "palette_variants", "to_dark_variant", "to_light_variant",
    "parse_colors",
    "PaletteAnalysis", "analyze_palette",
    "EXPORT_FORMATS", "export_palette", "export_variants",
]
