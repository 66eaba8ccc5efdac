from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

from farmhand.theme.colors import rgba


MODES: tuple[str, ...] = ("light", "dark")
ROLE_NAMES: tuple[str, ...] = ("primary", "secondary", "info", "success", "warning", "error")
HEADING_TIERS: tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5", "h6")
TEXT_TIERS: tuple[str, ...] = ("subtitle1", "subtitle2", "body1", "body2", "button", "caption", "overline")
TYPOGRAPHY_TIERS: tuple[str, ...] = HEADING_TIERS + TEXT_TIERS


@dataclass(frozen=True)
class ColorInput:
    main: str
    light: str | None = None
    dark: str | None = None
    contrast_text: str | None = None


BrandColorInput = Union[str, ColorInput]


@dataclass(frozen=True)
class BrandColors:
    primary: BrandColorInput
    secondary: BrandColorInput
    info: BrandColorInput | None = None
    success: BrandColorInput | None = None
    warning: BrandColorInput | None = None
    error: BrandColorInput | None = None


@dataclass(frozen=True)
class Neutrals:
    surface: str | None = None
    surface_dark: str | None = None
    border: str | None = None
    border_dark: str | None = None


@dataclass(frozen=True)
class FontAsset:
    font_family: str
    src: str
    font_style: str | None = None
    font_display: str | None = None


@dataclass(frozen=True)
class HeadingGroups:
    display: tuple[str, ...] | None = None
    headline: tuple[str, ...] | None = None


@dataclass(frozen=True)
class TypographyConfig:
    display: str | None = None
    headline: str | None = None
    body: str | None = None
    ui: str | None = None
    headings: HeadingGroups | None = None


@dataclass(frozen=True)
class ShapeConfig:
    border_radius: int | float | None = None
    spacing: int | None = None


@dataclass(frozen=True)
class ThemeConfig:
    id: str
    display_name: str
    brand: BrandColors
    flavor_text: str | None = None
    neutrals: Neutrals | None = None
    fonts: tuple[FontAsset, ...] = ()
    typography: TypographyConfig | None = None
    shape: ShapeConfig | None = None


@dataclass(frozen=True)
class ColorScale:
    main: str
    light: str
    dark: str
    contrast_text: str
    container: str
    on_container: str


@dataclass(frozen=True)
class PaletteRoles:
    primary: ColorScale
    secondary: ColorScale
    info: ColorScale
    success: ColorScale
    warning: ColorScale
    error: ColorScale

    def role(self, name: str) -> ColorScale:
        if name not in ROLE_NAMES:
            raise KeyError(name)
        return getattr(self, name)

    def items(self) -> Iterator[tuple[str, ColorScale]]:
        for name in ROLE_NAMES:
            yield name, getattr(self, name)


@dataclass(frozen=True)
class SurfaceSet:
    base: str
    elevated: str
    variant: str
    subtle: str
    outline: str


@dataclass(frozen=True)
class TextColors:
    primary: str
    secondary: str
    disabled: str


@dataclass(frozen=True)
class BackgroundColors:
    default: str
    paper: str


@dataclass(frozen=True)
class CommonColors:
    black: str
    white: str


@dataclass(frozen=True)
class ActionColors:
    hover: str
    selected: str
    disabled: str
    disabled_background: str
    focus: str
    active: str
    scrim: str
    hover_opacity: float
    disabled_opacity: float


@dataclass(frozen=True)
class Palette:
    mode: str
    roles: PaletteRoles
    surface: SurfaceSet
    text: TextColors
    divider: str
    background: BackgroundColors
    common: CommonColors
    action: ActionColors


@dataclass(frozen=True)
class TextStyle:
    font_family: str
    font_weight: int | None = None
    font_size: str | None = None
    line_height: float | None = None
    letter_spacing: str | None = None
    text_transform: str | None = None


@dataclass(frozen=True)
class TypographyPlan:
    font_family: str
    h1: TextStyle
    h2: TextStyle
    h3: TextStyle
    h4: TextStyle
    h5: TextStyle
    h6: TextStyle
    subtitle1: TextStyle
    subtitle2: TextStyle
    body1: TextStyle
    body2: TextStyle
    button: TextStyle
    caption: TextStyle
    overline: TextStyle

    def style(self, tier: str) -> TextStyle:
        if tier not in TYPOGRAPHY_TIERS:
            raise KeyError(tier)
        return getattr(self, tier)

    def family(self, tier: str) -> str:
        return self.style(tier).font_family


@dataclass(frozen=True)
class Shape:
    border_radius: int | float
    spacing_unit: int

    def spacing(self, *factors: float) -> str:
        return " ".join(_px(factor * self.spacing_unit) for factor in (factors or (1,)))


@dataclass(frozen=True)
class ShadowToken:
    offset_x: int
    offset_y: int
    blur: int
    color: str
    opacity: float
    spread: int = 0

    def to_css(self) -> str:
        parts = [_px(self.offset_x), _px(self.offset_y), _px(self.blur)]
        if self.spread:
            parts.append(_px(self.spread))
        return f"{' '.join(parts)} {rgba(self.color, self.opacity)}"


@dataclass(frozen=True)
class CustomShadows:
    card: ShadowToken
    focus: ShadowToken
    popover: ShadowToken
    glow: ShadowToken


@dataclass(frozen=True)
class Motion:
    duration_shortest: int = 150
    duration_shorter: int = 200
    duration_short: int = 250
    easing: str = "cubic-bezier(0.4, 0, 0.2, 1)"


@dataclass(frozen=True)
class Theme:
    id: str
    palette: Palette
    typography: TypographyPlan
    shape: Shape
    custom_shadows: CustomShadows
    motion: Motion = field(default_factory=Motion)
    font_faces: tuple[FontAsset, ...] = ()

    @property
    def mode(self) -> str:
        return self.palette.mode


@dataclass(frozen=True)
class ThemeMeta:
    display_name: str
    flavor_text: str | None = None


@dataclass(frozen=True)
class ThemeDefinition:
    id: str
    meta: ThemeMeta
    light: Theme
    dark: Theme

    def for_mode(self, mode: str) -> Theme:
        if mode == "dark":
            return self.dark
        if mode == "light":
            return self.light
        raise KeyError(mode)


def _px(value: float) -> str:
    if value == 0:
        return "0"
    number = int(value) if float(value).is_integer() else value
    return f"{number}px"


__all__ = [
    "ActionColors",
    "BackgroundColors",
    "BrandColorInput",
    "BrandColors",
    "ColorInput",
    "ColorScale",
    "CommonColors",
    "CustomShadows",
    "FontAsset",
    "HEADING_TIERS",
    "HeadingGroups",
    "MODES",
    "Motion",
    "Neutrals",
    "Palette",
    "PaletteRoles",
    "ROLE_NAMES",
    "ShadowToken",
    "Shape",
    "ShapeConfig",
    "SurfaceSet",
    "TEXT_TIERS",
    "TYPOGRAPHY_TIERS",
    "TextColors",
    "TextStyle",
    "Theme",
    "ThemeConfig",
    "ThemeDefinition",
    "ThemeMeta",
    "TypographyConfig",
    "TypographyPlan",
]
