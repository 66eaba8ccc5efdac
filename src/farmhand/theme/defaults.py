"""Default values for theme derivation.

Every constant the engine falls back on lives in one ``ThemeDefaults`` value,
and each config field group has exactly one function that fills in its
omitted fields. Builders take ``defaults`` as a keyword so tests can swap in
their own.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from farmhand.theme.colors import BLACK, MIN_CONTRAST, WHITE, normalize_hex
from farmhand.theme.model import (
    HEADING_TIERS,
    BrandColorInput,
    BrandColors,
    ColorInput,
    HeadingGroups,
    Motion,
    Neutrals,
    Shape,
    ShapeConfig,
    TypographyConfig,
)


FALLBACK_FONT = '"Inter", "Roboto", "Helvetica Neue", sans-serif'


@dataclass(frozen=True)
class RoleSeeds:
    info: str = "#2D7FF9"
    success: str = "#2E8B57"
    warning: str = "#F59E0B"
    error: str = "#E63946"


@dataclass(frozen=True)
class ThemeDefaults:
    white: str = WHITE
    black: str = BLACK
    ink: str = "#05060A"
    text_ink: str = "#14181F"
    role_seeds: RoleSeeds = field(default_factory=RoleSeeds)
    surface: str = "#F6F5F0"
    surface_dark: str = "#0B0D13"
    border: str = "#E0E3DA"
    border_dark: str = "#242832"
    fallback_font: str = FALLBACK_FONT
    display_font: str = f'"Space Grotesk", {FALLBACK_FONT}'
    heading_groups: HeadingGroups = field(
        default_factory=lambda: HeadingGroups(display=("h1", "h2", "h3"), headline=("h4", "h5", "h6"))
    )
    border_radius: int | float = 4
    spacing_unit: int = 8
    min_contrast: float = MIN_CONTRAST
    divider_opacity: float = 0.14
    motion: Motion = field(default_factory=Motion)


DEFAULTS = ThemeDefaults()


@dataclass(frozen=True)
class ResolvedNeutrals:
    surface: str
    surface_dark: str
    border: str
    border_dark: str

    def surface_for(self, mode: str) -> str:
        return self.surface if mode == "light" else self.surface_dark

    def border_for(self, mode: str) -> str:
        return self.border if mode == "light" else self.border_dark


@dataclass(frozen=True)
class FontRoles:
    display: str
    headline: str
    body: str
    ui: str
    display_tiers: tuple[str, ...]
    headline_tiers: tuple[str, ...]


def resolve_role_inputs(brand: BrandColors, defaults: ThemeDefaults = DEFAULTS) -> dict[str, ColorInput]:
    seeds = defaults.role_seeds
    return {
        "primary": as_color_input(brand.primary),
        "secondary": as_color_input(brand.secondary),
        "info": as_color_input(brand.info if brand.info is not None else seeds.info),
        "success": as_color_input(brand.success if brand.success is not None else seeds.success),
        "warning": as_color_input(brand.warning if brand.warning is not None else seeds.warning),
        "error": as_color_input(brand.error if brand.error is not None else seeds.error),
    }


def resolve_neutrals(neutrals: Neutrals | None, defaults: ThemeDefaults = DEFAULTS) -> ResolvedNeutrals:
    given = neutrals or Neutrals()
    return ResolvedNeutrals(
        surface=normalize_hex(given.surface or defaults.surface),
        surface_dark=normalize_hex(given.surface_dark or defaults.surface_dark),
        border=normalize_hex(given.border or defaults.border),
        border_dark=normalize_hex(given.border_dark or defaults.border_dark),
    )


def resolve_font_roles(typography: TypographyConfig | None, defaults: ThemeDefaults = DEFAULTS) -> FontRoles:
    given = typography or TypographyConfig()
    display = _font_or(given.display, defaults.display_font)
    headline = _font_or(given.headline, display)
    body = _font_or(given.body, defaults.fallback_font)
    ui = _font_or(given.ui, headline)
    headings = given.headings or HeadingGroups()
    default_groups = defaults.heading_groups
    display_tiers = headings.display if headings.display is not None else default_groups.display
    headline_tiers = headings.headline if headings.headline is not None else default_groups.headline
    return FontRoles(
        display=display,
        headline=headline,
        body=body,
        ui=ui,
        display_tiers=_heading_tiers(display_tiers or ()),
        headline_tiers=_heading_tiers(headline_tiers or ()),
    )


def resolve_shape(shape: ShapeConfig | None, defaults: ThemeDefaults = DEFAULTS) -> Shape:
    given = shape or ShapeConfig()
    radius = given.border_radius if given.border_radius is not None else defaults.border_radius
    spacing = given.spacing if given.spacing is not None else defaults.spacing_unit
    return Shape(border_radius=radius, spacing_unit=spacing)


def as_color_input(value: BrandColorInput) -> ColorInput:
    if isinstance(value, ColorInput):
        return value
    return ColorInput(main=value)


def _font_or(value: str | None, fallback: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return fallback


def _heading_tiers(values: tuple[str, ...]) -> tuple[str, ...]:
    seen: set[str] = set()
    ordered: list[str] = []
    for value in values:
        if value not in HEADING_TIERS or value in seen:
            continue
        seen.add(value)
        ordered.append(value)
    return tuple(ordered)


__all__ = [
    "DEFAULTS",
    "FALLBACK_FONT",
    "FontRoles",
    "ResolvedNeutrals",
    "RoleSeeds",
    "ThemeDefaults",
    "as_color_input",
    "resolve_font_roles",
    "resolve_neutrals",
    "resolve_role_inputs",
    "resolve_shape",
]
