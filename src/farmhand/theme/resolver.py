from __future__ import annotations

import difflib

from farmhand.errors.base import FarmhandError
from farmhand.errors.guidance import build_guidance_message
from farmhand.theme.defaults import DEFAULTS, ThemeDefaults, resolve_shape
from farmhand.theme.model import (
    MODES,
    BackgroundColors,
    CustomShadows,
    Palette,
    ShadowToken,
    Shape,
    Theme,
    ThemeConfig,
    ThemeDefinition,
    ThemeMeta,
)
from farmhand.theme.palette import (
    build_action_colors,
    build_common_colors,
    build_role_scales,
    build_text_colors,
)
from farmhand.theme.surfaces import build_divider, build_surface_set
from farmhand.theme.typography import build_typography


# name -> ((x, y, blur, spread, opacity) light, (...) dark); tinted shadows use the primary color.
_SHADOW_RECIPES: dict[str, tuple[tuple[int, int, int, int, float], tuple[int, int, int, int, float]]] = {
    "card": ((0, 12, 30, 0, 0.08), (0, 14, 34, 0, 0.6)),
    "focus": ((0, 0, 0, 3, 0.32), (0, 0, 0, 3, 0.5)),
    "popover": ((0, 20, 45, 0, 0.12), (0, 22, 50, 0, 0.7)),
    "glow": ((0, 0, 35, 0, 0.35), (0, 0, 35, 0, 0.55)),
}
_TINTED_SHADOWS = {"focus", "glow"}


def normalize_mode(mode: str) -> str:
    if mode in MODES:
        return mode
    matches = difflib.get_close_matches(str(mode), list(MODES), n=1, cutoff=0.6)
    fix = f'Did you mean "{matches[0]}"?' if matches else "Use light or dark."
    raise FarmhandError(
        build_guidance_message(
            what=f"Unknown theme mode '{mode}'.",
            why=f"Allowed modes: {', '.join(MODES)}.",
            fix=fix,
            example='build_theme(config, "dark")',
        )
    )


def build_custom_shadows(
    primary_main: str,
    mode: str,
    *,
    defaults: ThemeDefaults = DEFAULTS,
) -> CustomShadows:
    index = 0 if mode == "light" else 1
    tokens: dict[str, ShadowToken] = {}
    for name, recipes in _SHADOW_RECIPES.items():
        x, y, blur, spread, opacity = recipes[index]
        color = primary_main if name in _TINTED_SHADOWS else defaults.ink
        tokens[name] = ShadowToken(offset_x=x, offset_y=y, blur=blur, spread=spread, color=color, opacity=opacity)
    return CustomShadows(**tokens)


def build_palette(config: ThemeConfig, mode: str, *, defaults: ThemeDefaults = DEFAULTS) -> Palette:
    surface = build_surface_set(config.neutrals, mode, defaults=defaults)
    roles = build_role_scales(config.brand, mode, surface.base, defaults=defaults)
    return Palette(
        mode=mode,
        roles=roles,
        surface=surface,
        text=build_text_colors(mode, defaults=defaults),
        divider=build_divider(mode, defaults=defaults),
        background=BackgroundColors(default=surface.base, paper=surface.elevated),
        common=build_common_colors(defaults=defaults),
        action=build_action_colors(roles.primary.main, mode, defaults=defaults),
    )


def build_theme(
    config: ThemeConfig,
    mode: str,
    *,
    defaults: ThemeDefaults = DEFAULTS,
    shape: Shape | None = None,
) -> Theme:
    """Assemble one theme for ``mode``.

    ``shape`` replaces the config's shape entirely; skins with bespoke radii
    pass it instead of editing the config.
    """
    selected = normalize_mode(mode)
    palette = build_palette(config, selected, defaults=defaults)
    return Theme(
        id=config.id,
        palette=palette,
        typography=build_typography(config.typography, defaults=defaults),
        shape=shape or resolve_shape(config.shape, defaults),
        custom_shadows=build_custom_shadows(palette.roles.primary.main, selected, defaults=defaults),
        motion=defaults.motion,
        font_faces=tuple(config.fonts),
    )


def create_theme_definition(
    config: ThemeConfig,
    *,
    defaults: ThemeDefaults = DEFAULTS,
    shape: Shape | None = None,
) -> ThemeDefinition:
    return ThemeDefinition(
        id=config.id,
        meta=ThemeMeta(display_name=config.display_name, flavor_text=config.flavor_text),
        light=build_theme(config, "light", defaults=defaults, shape=shape),
        dark=build_theme(config, "dark", defaults=defaults, shape=shape),
    )


__all__ = [
    "build_custom_shadows",
    "build_palette",
    "build_theme",
    "create_theme_definition",
    "normalize_mode",
]
