"""
Text exports for palettes: CSS, SCSS, JS, JSON, Tailwind and a plain
swatch listing. Indices in every format are 1-based.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence

DEFAULT_NAME = "palette"


@dataclass(frozen=True)
class ExportFormat:
    key: str
    label: str
    extension: str
    render: Callable[[Sequence[str], str], str]


def to_css_vars(palette: Sequence[str], name: str = DEFAULT_NAME) -> str:
    lines = [":root {"]
    lines += [f"  --{name}-{i + 1}: {color};" for i, color in enumerate(palette)]
    lines.append("}")
    return "\n".join(lines)


def to_scss(palette: Sequence[str], name: str = DEFAULT_NAME) -> str:
    return "\n".join(f"${name}-{i + 1}: {color};" for i, color in enumerate(palette))


def to_js_array(palette: Sequence[str], name: str = DEFAULT_NAME) -> str:
    return f"const {name} = {json.dumps(list(palette), indent=2)};"


def to_json(palette: Sequence[str], name: str = DEFAULT_NAME) -> str:
    return json.dumps({name: list(palette)}, indent=2)


def to_tailwind(palette: Sequence[str], name: str = DEFAULT_NAME) -> str:
    colors = {f"{name}-{i + 1}": color for i, color in enumerate(palette)}
    lines = [
        "module.exports = {", "  theme: {", "    extend: {",
        f"      colors: {json.dumps(colors, indent=8)}",
        "    }", "  }", "}",
    ]
    return "\n".join(lines)


def to_swatch_list(palette: Sequence[str], name: str = DEFAULT_NAME) -> str:
    # Plain listing; not a binary .ase file.
    return "\n".join(f"{name}-{i + 1}: {color}" for i, color in enumerate(palette))


EXPORT_FORMATS: Dict[str, ExportFormat] = {
    f.key: f for f in (
        ExportFormat("css",      "CSS Variables",               "css",  to_css_vars),
        ExportFormat("scss",     "SCSS Variables",              "scss", to_scss),
        ExportFormat("js",       "JavaScript Array",            "js",   to_js_array),
        ExportFormat("json",     "JSON",                        "json", to_json),
        ExportFormat("tailwind", "Tailwind Config",             "js",   to_tailwind),
        ExportFormat("ase",      "Adobe Swatch Exchange (ASE)", "ase",  to_swatch_list),
    )
}


def get_format(key: str) -> ExportFormat:
    if key not in EXPORT_FORMATS:
        raise ValueError(f"Unknown export format: {key!r}. Available: {', '.join(EXPORT_FORMATS)}")
    return EXPORT_FORMATS[key]


def export_palette(palette: Sequence[str], fmt: str, name: str = DEFAULT_NAME) -> str:
    return get_format(fmt).render(palette, name)


def export_variants(light: Sequence[str], dark: Sequence[str], fmt: str,
                    name: str = DEFAULT_NAME) -> str:
    """Both variants in one document, named ``{name}Light`` and ``{name}Dark``."""
    render = get_format(fmt).render
    blocks: List[str] = [
        f"// Light variant\n{render(light, f'{name}Light')}",
        f"// Dark variant\n{render(dark, f'{name}Dark')}",
    ]
    return "\n\n".join(blocks)
