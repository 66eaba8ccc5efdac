from __future__ import annotations

from dataclasses import replace

from farmhand.theme.defaults import DEFAULTS, ThemeDefaults, resolve_font_roles
from farmhand.theme.model import HEADING_TIERS, TextStyle, TypographyConfig, TypographyPlan


# Font-independent base styles. ``font_family`` is filled in per theme.
_HEADING_BASE: dict[str, TextStyle] = {
    "h1": TextStyle(font_family="", font_weight=600, font_size="3rem", line_height=1.1, letter_spacing="-0.03em"),
    "h2": TextStyle(font_family="", font_weight=600, font_size="2.25rem", line_height=1.15, letter_spacing="-0.02em"),
    "h3": TextStyle(font_family="", font_weight=600, font_size="1.875rem", line_height=1.2),
    "h4": TextStyle(font_family="", font_weight=600, font_size="1.5rem", line_height=1.25),
    "h5": TextStyle(font_family="", font_weight=600, font_size="1.25rem", line_height=1.3),
    "h6": TextStyle(font_family="", font_weight=600, font_size="1.125rem", line_height=1.35),
}

# tier -> (font role, base style)
_TEXT_BASE: dict[str, tuple[str, TextStyle]] = {
    "subtitle1": ("ui", TextStyle(font_family="", font_weight=600, font_size="1rem", line_height=1.4)),
    "subtitle2": ("ui", TextStyle(font_family="", font_weight=500, font_size="0.9375rem", line_height=1.35)),
    "body1": ("body", TextStyle(font_family="", font_weight=400, font_size="1rem", line_height=1.55)),
    "body2": ("body", TextStyle(font_family="", font_weight=400, font_size="0.9375rem", line_height=1.5)),
    "button": ("ui", TextStyle(font_family="", font_weight=600, letter_spacing="0.02em", text_transform="none")),
    "caption": ("ui", TextStyle(font_family="", font_weight=500, letter_spacing="0.04em")),
    "overline": ("ui", TextStyle(font_family="", font_weight=600, letter_spacing="0.08em", text_transform="uppercase")),
}


def build_typography(
    typography: TypographyConfig | None,
    *,
    defaults: ThemeDefaults = DEFAULTS,
) -> TypographyPlan:
    roles = resolve_font_roles(typography, defaults)
    heading_families: dict[str, str] = {}
    for tier in roles.display_tiers:
        heading_families[tier] = roles.display
    for tier in roles.headline_tiers:
        heading_families[tier] = roles.headline

    styles: dict[str, TextStyle] = {}
    for tier in HEADING_TIERS:
        family = heading_families.get(tier, roles.display)
        styles[tier] = replace(_HEADING_BASE[tier], font_family=family)
    role_families = {"body": roles.body, "ui": roles.ui}
    for tier, (role, base) in _TEXT_BASE.items():
        styles[tier] = replace(base, font_family=role_families[role])
    return TypographyPlan(font_family=roles.body, **styles)


__all__ = ["build_typography"]
