#!/usr/bin/env python3
"""
BlackRoad Studio – Palette Engine CLI.
Score, repair, simulate and export palettes from the command line.
"""
from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from typing import List, Optional

from palette_engine.analysis import PaletteAnalysis, analyze_palette
from palette_engine.color import normalize_hex
from palette_engine.config import Settings, load_settings
from palette_engine.contrast import evaluate
from palette_engine.cvd import CVDType, simulate_palette
from palette_engine.export import EXPORT_FORMATS, export_palette, export_variants
from palette_engine.generator import HarmonyTemplate, generate_harmony, generate_quality_random_palette
from palette_engine.improver import generate_accessibility_improved_colors, improve
from palette_engine.parser import parse_colors
from palette_engine.tones import to_dark_variant, to_light_variant

logger = logging.getLogger(__name__)


def _setup_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level_value,
        format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _colors(values: List[str]) -> List[str]:
    return [normalize_hex(v) for v in values]


def _print_palette(colors: List[str]) -> None:
    for i, c in enumerate(colors, 1):
        print(f"  {i:>2}. {c}")


def _pretty(a: PaletteAnalysis) -> None:
    print(f"\n🎨  {len(a.palette)} colours  overall={a.overall_score}  "
          f"accessibility={a.accessibility_score}  harmony={a.harmony_score}")
    print(f"    failing pairs: {len(a.failing_pairs)} / {len(a.contrast_scores)}")
    for c in a.contrast_scores:
        print(f"    {c.foreground} on {c.background}  {c.ratio:5.2f}:1  {c.level.value}")
    if a.recommendations:
        print("\n    recommendations:")
        for rec in a.recommendations:
            print(f"    • {rec}")
    if a.improved_palette:
        print("\n    suggested palette:", " ".join(a.improved_palette))


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="palette",
        description="BlackRoad Studio – Palette Engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  palette contrast '#ffffff' '#1e293b'
  palette analyze '#3b82f6' '#f8fafc' '#0f172a'
  palette harmony '#3b82f6' split-complementary
  palette random --size 6 --seed 7
  palette simulate deuteranopia '#ff0000' '#00ff00'
  palette variant dark '#f8fafc' '#3b82f6'
  palette parse 'primary: #3b82f6; accent: rgb(234, 88, 12)'
  palette export css '#3b82f6' '#f97316' --name brand
""",
    )
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_con = sub.add_parser("contrast", help="Contrast ratio between two colours")
    p_con.add_argument("color1")
    p_con.add_argument("color2")

    p_an = sub.add_parser("analyze", help="Full accessibility / harmony audit")
    p_an.add_argument("colors", nargs="+")
    p_an.add_argument("--json", dest="as_json", action="store_true")

    p_har = sub.add_parser("harmony", help="Palette from a harmony template")
    p_har.add_argument("base_color")
    p_har.add_argument("template", choices=[t.value for t in HarmonyTemplate])

    p_rnd = sub.add_parser("random", help="Random palette built on a harmony template")
    p_rnd.add_argument("--size", type=int, default=5)
    p_rnd.add_argument("--seed", type=int, default=None)

    p_imp = sub.add_parser("improve", help="Suggest a repaired palette")
    p_imp.add_argument("colors", nargs="+")
    p_imp.add_argument("--accessibility", type=float, default=None,
                       help="Accessibility score (computed when omitted)")
    p_imp.add_argument("--harmony", type=float, default=None,
                       help="Harmony score (computed when omitted)")
    p_imp.add_argument("--contrast-first", action="store_true",
                       help="Use the accessibility repair path")

    p_sim = sub.add_parser("simulate", help="Colour vision deficiency simulation")
    p_sim.add_argument("cvd_type", choices=[t.value for t in CVDType])
    p_sim.add_argument("colors", nargs="+")

    p_var = sub.add_parser("variant", help="Dark or light counterpart of a palette")
    p_var.add_argument("tone", choices=["dark", "light"])
    p_var.add_argument("colors", nargs="+")

    p_par = sub.add_parser("parse", help="Extract colours from text")
    p_par.add_argument("text")

    p_ex = sub.add_parser("export", help="Export a palette as code")
    p_ex.add_argument("format", choices=list(EXPORT_FORMATS))
    p_ex.add_argument("colors", nargs="+")
    p_ex.add_argument("--name", default=None)
    p_ex.add_argument("--with-dark", action="store_true", help="Append the dark variant")

    return ap


def main(argv: Optional[List[str]] = None) -> None:
    args = _build_parser().parse_args(argv)
    try:
        settings = load_settings()
        _setup_logging(settings)
        logger.debug("palette %s", args.cmd)
        _dispatch(args, settings)
    except ValueError as exc:
        sys.exit(f"❌ {exc}")


def _dispatch(args: argparse.Namespace, settings: Settings) -> None:
    if args.cmd == "contrast":
        result = evaluate(args.color1, args.color2)
        ratio = result.ratio
        print(f"ratio {ratio:.2f}:1  grade={result.level.value}  score={result.score:.0f}")
        print(f"AA-normal  (≥4.5): {'✅' if ratio>=4.5 else '❌'}")
        print(f"AA-large   (≥3.0): {'✅' if ratio>=3.0 else '❌'}")
        print(f"AAA-normal (≥7.0): {'✅' if ratio>=7.0 else '❌'}")

    elif args.cmd == "analyze":
        analysis = analyze_palette(args.colors)
        if args.as_json:
            print(json.dumps(analysis.to_dict(), indent=2))
        else:
            _pretty(analysis)

    elif args.cmd == "harmony":
        _print_palette(generate_harmony(normalize_hex(args.base_color), args.template))

    elif args.cmd == "random":
        rng = random.Random(args.seed) if args.seed is not None else None
        _print_palette(generate_quality_random_palette(args.size, rng))

    elif args.cmd == "improve":
        colors = _colors(args.colors)
        if args.contrast_first:
            _print_palette(generate_accessibility_improved_colors(colors))
            return
        access, harmony = args.accessibility, args.harmony
        if access is None or harmony is None:
            analysis = analyze_palette(colors)
            access = analysis.accessibility_score if access is None else access
            harmony = analysis.harmony_score if harmony is None else harmony
        _print_palette(improve(colors, access, harmony))

    elif args.cmd == "simulate":
        colors = _colors(args.colors)
        for before, after in zip(colors, simulate_palette(colors, args.cvd_type)):
            print(f"  {before} → {after}")

    elif args.cmd == "variant":
        colors = _colors(args.colors)
        mapped = to_dark_variant(colors) if args.tone == "dark" else to_light_variant(colors)
        _print_palette(mapped)

    elif args.cmd == "parse":
        found = parse_colors(args.text)
        if not found:
            print("(no colours found)")
        _print_palette(found)

    elif args.cmd == "export":
        colors = _colors(args.colors)
        name = args.name or settings.export_name
        if args.with_dark:
            print(export_variants(colors, to_dark_variant(colors), args.format, name))
        else:
            print(export_palette(colors, args.format, name))


if __name__ == "__main__":
    main()
