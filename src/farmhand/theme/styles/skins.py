from __future__ import annotations

import difflib
from typing import Callable

from farmhand.errors.base import FarmhandError
from farmhand.errors.guidance import build_guidance_message
from farmhand.theme.model import Theme
from farmhand.theme.styles.base import StyleTable
from farmhand.theme.styles.default import build_default_styles
from farmhand.theme.styles.parchment import build_parchment_styles
from farmhand.theme.styles.retro import build_retro_styles


DEFAULT_SKIN = "farmhand"

SKINS: dict[str, Callable[[Theme], StyleTable]] = {
    "farmhand": build_default_styles,
    "parchment": build_parchment_styles,
    "retro": build_retro_styles,
}


def resolve_skin(name: str | None) -> str:
    if name is None:
        return DEFAULT_SKIN
    if name in SKINS:
        return name
    choices = sorted(SKINS)
    matches = difflib.get_close_matches(str(name), choices, n=1, cutoff=0.6)
    fix = f'Did you mean "{matches[0]}"?' if matches else f"Use one of: {', '.join(choices)}."
    raise FarmhandError(
        build_guidance_message(
            what=f"Unknown skin '{name}'.",
            why=f"Available skins: {', '.join(choices)}.",
            fix=fix,
            example='build_style_table(theme, skin="parchment")',
        )
    )


def build_style_table(theme: Theme, skin: str | None = DEFAULT_SKIN) -> StyleTable:
    return SKINS[resolve_skin(skin)](theme)


__all__ = ["DEFAULT_SKIN", "SKINS", "build_style_table", "resolve_skin"]
