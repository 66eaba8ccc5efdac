from __future__ import annotations

from farmhand.theme.colors import darken, ensure_contrast, lighten, mix, normalize_hex, rgba
from farmhand.theme.defaults import DEFAULTS, ThemeDefaults, as_color_input, resolve_role_inputs
from farmhand.theme.model import (
    ActionColors,
    BrandColorInput,
    BrandColors,
    ColorScale,
    CommonColors,
    PaletteRoles,
    TextColors,
)


# (light mode, dark mode)
_LIGHT_TONE = {"light": 0.18, "dark": 0.08}
_DARK_TONE = {"light": 0.22, "dark": 0.30}
_CONTAINER_MIX = {"light": 0.82, "dark": 0.35}

_TEXT_OPACITY = {
    "light": (0.92, 0.68, 0.38),
    "dark": (0.92, 0.70, 0.38),
}


def build_color_scale(
    color: BrandColorInput,
    mode: str,
    surface_base: str,
    *,
    defaults: ThemeDefaults = DEFAULTS,
) -> ColorScale:
    """Derive the six-value scale for one role.

    Explicit ``light``/``dark`` tones win over derived ones. ``contrast_text``
    is only a preference: it is replaced by black or white whenever it fails
    the contrast gate against ``main`` (and separately against the container).
    """
    source = as_color_input(color)
    main = normalize_hex(source.main)
    light = normalize_hex(source.light) if source.light else lighten(main, _LIGHT_TONE[mode])
    dark = normalize_hex(source.dark) if source.dark else darken(main, _DARK_TONE[mode])
    container = mix(main, surface_base, _CONTAINER_MIX[mode])
    return ColorScale(
        main=main,
        light=light,
        dark=dark,
        contrast_text=_on_color(main, source.contrast_text, defaults),
        container=container,
        on_container=_on_color(container, source.contrast_text, defaults),
    )


def build_role_scales(
    brand: BrandColors,
    mode: str,
    surface_base: str,
    *,
    defaults: ThemeDefaults = DEFAULTS,
) -> PaletteRoles:
    inputs = resolve_role_inputs(brand, defaults)
    scales = {
        name: build_color_scale(value, mode, surface_base, defaults=defaults)
        for name, value in inputs.items()
    }
    return PaletteRoles(**scales)


def build_text_colors(mode: str, *, defaults: ThemeDefaults = DEFAULTS) -> TextColors:
    ink = defaults.text_ink if mode == "light" else defaults.white
    primary, secondary, disabled = _TEXT_OPACITY[mode]
    return TextColors(
        primary=rgba(ink, primary),
        secondary=rgba(ink, secondary),
        disabled=rgba(ink, disabled),
    )


def build_action_colors(
    primary_main: str,
    mode: str,
    *,
    defaults: ThemeDefaults = DEFAULTS,
) -> ActionColors:
    light = mode == "light"
    text_ink = defaults.text_ink if light else defaults.white
    return ActionColors(
        hover=rgba(primary_main, 0.08 if light else 0.2),
        selected=rgba(primary_main, 0.16 if light else 0.28),
        disabled=build_text_colors(mode, defaults=defaults).disabled,
        disabled_background=rgba(text_ink, 0.04 if light else 0.08),
        focus=rgba(primary_main, 0.3),
        active=rgba(primary_main, 0.4),
        scrim=rgba(defaults.ink, 0.85),
        hover_opacity=0.08 if light else 0.16,
        disabled_opacity=0.4,
    )


def build_common_colors(*, defaults: ThemeDefaults = DEFAULTS) -> CommonColors:
    return CommonColors(black=normalize_hex(defaults.ink), white=normalize_hex(defaults.white))


def _on_color(background: str, preferred: str | None, defaults: ThemeDefaults) -> str:
    return ensure_contrast(
        background,
        preferred,
        black=defaults.black,
        white=defaults.white,
        threshold=defaults.min_contrast,
    )


__all__ = [
    "build_action_colors",
    "build_color_scale",
    "build_common_colors",
    "build_role_scales",
    "build_text_colors",
]
