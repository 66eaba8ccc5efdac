from __future__ import annotations

import json
from typing import Iterable
from urllib.parse import quote_plus

from farmhand.theme.model import FontAsset


_FONT_SYSTEM_NAMES = {
    "system-ui",
    "-apple-system",
    "segoe ui",
    "roboto",
    "helvetica",
    "helvetica neue",
    "arial",
    "tahoma",
    "trebuchet ms",
    "ms sans serif",
    "sans-serif",
    "serif",
    "monospace",
}


def build_font_face_css(fonts: Iterable[FontAsset] | None) -> str:
    blocks = []
    for font in fonts or ():
        blocks.append(
            "\n".join(
                [
                    "@font-face {",
                    f"  font-family: {json.dumps(font.font_family)};",
                    f"  font-style: {font.font_style or 'normal'};",
                    f"  font-display: {font.font_display or 'swap'};",
                    f"  src: {font.src};",
                    "}",
                ]
            )
        )
    return "\n".join(blocks)


def build_font_import(font_stacks: Iterable[str], *, skip: Iterable[str] = ()) -> str:
    """Google Fonts ``@import`` for the web families named in ``font_stacks``.

    System families and anything listed in ``skip`` (usually families shipped
    as local assets) are left out. Returns ``""`` when nothing remains.
    """
    skipped = {name.lower() for name in skip}
    families: list[str] = []
    for stack in font_stacks:
        for name in font_names(stack):
            lowered = name.lower()
            if lowered in _FONT_SYSTEM_NAMES or lowered in skipped or name in families:
                continue
            families.append(name)
    if not families:
        return ""
    query = "&".join(f"family={quote_plus(name)}:wght@400;500;600;700" for name in families)
    return f"@import url('https://fonts.googleapis.com/css2?{query}&display=swap');"


def font_names(font_family: str) -> list[str]:
    names = []
    for chunk in (font_family or "").split(","):
        name = chunk.strip().strip("\"'").strip()
        if name:
            names.append(name)
    return names


__all__ = ["build_font_face_css", "build_font_import", "font_names"]
