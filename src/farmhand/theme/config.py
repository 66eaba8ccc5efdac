from __future__ import annotations

import difflib
from typing import Mapping

from farmhand.errors.base import FarmhandError
from farmhand.errors.guidance import build_guidance_message
from farmhand.theme.model import (
    BrandColorInput,
    BrandColors,
    ColorInput,
    FontAsset,
    HeadingGroups,
    Neutrals,
    ShapeConfig,
    ThemeConfig,
    TypographyConfig,
)


_CONFIG_KEYS = ("id", "displayName", "flavorText", "brand", "neutrals", "fonts", "typography", "shape")
_BRAND_KEYS = ("primary", "secondary", "info", "success", "warning", "error")
_COLOR_KEYS = ("main", "light", "dark", "contrastText")
_NEUTRAL_KEYS = ("surface", "surfaceDark", "border", "borderDark")
_FONT_KEYS = ("fontFamily", "fontStyle", "fontDisplay", "src")
_TYPOGRAPHY_KEYS = ("display", "headline", "body", "ui", "headings")
_HEADING_KEYS = ("display", "headline")
_SHAPE_KEYS = ("borderRadius", "spacing")


def parse_theme_config(payload: object) -> ThemeConfig:
    data = _mapping(payload, "theme config", _CONFIG_KEYS)
    theme_id = _required_text(data, "id", "theme config")
    display_name = _required_text(data, "displayName", "theme config")
    return ThemeConfig(
        id=theme_id,
        display_name=display_name,
        flavor_text=_optional_text(data, "flavorText", "theme config"),
        brand=_parse_brand(data.get("brand")),
        neutrals=_parse_neutrals(data.get("neutrals")),
        fonts=_parse_fonts(data.get("fonts")),
        typography=_parse_typography(data.get("typography")),
        shape=_parse_shape(data.get("shape")),
    )


def serialize_theme_config(config: ThemeConfig) -> dict[str, object]:
    payload: dict[str, object] = {
        "id": config.id,
        "displayName": config.display_name,
        "brand": _drop_none({name: _serialize_color(getattr(config.brand, name)) for name in _BRAND_KEYS}),
    }
    if config.flavor_text is not None:
        payload["flavorText"] = config.flavor_text
    if config.neutrals is not None:
        payload["neutrals"] = _drop_none(
            {
                "surface": config.neutrals.surface,
                "surfaceDark": config.neutrals.surface_dark,
                "border": config.neutrals.border,
                "borderDark": config.neutrals.border_dark,
            }
        )
    if config.fonts:
        payload["fonts"] = [
            _drop_none(
                {
                    "fontFamily": font.font_family,
                    "fontStyle": font.font_style,
                    "fontDisplay": font.font_display,
                    "src": font.src,
                }
            )
            for font in config.fonts
        ]
    if config.typography is not None:
        typography = config.typography
        entry: dict[str, object] = _drop_none(
            {
                "display": typography.display,
                "headline": typography.headline,
                "body": typography.body,
                "ui": typography.ui,
            }
        )
        if typography.headings is not None:
            entry["headings"] = _drop_none(
                {
                    "display": list(typography.headings.display) if typography.headings.display is not None else None,
                    "headline": list(typography.headings.headline) if typography.headings.headline is not None else None,
                }
            )
        payload["typography"] = entry
    if config.shape is not None:
        payload["shape"] = _drop_none({"borderRadius": config.shape.border_radius, "spacing": config.shape.spacing})
    return payload


def _parse_brand(value: object) -> BrandColors:
    if value is None:
        raise FarmhandError(
            build_guidance_message(
                what="Theme config is missing 'brand'.",
                why="Every theme derives its palette from brand seed colors.",
                fix="Add a brand group with at least primary and secondary colors.",
                example='{"brand": {"primary": "#339900", "secondary": "#FFD400"}}',
            )
        )
    data = _mapping(value, "brand", _BRAND_KEYS)
    colors: dict[str, BrandColorInput | None] = {}
    for name in _BRAND_KEYS:
        raw = data.get(name)
        if raw is None:
            if name in ("primary", "secondary"):
                raise FarmhandError(
                    build_guidance_message(
                        what=f"Brand color '{name}' is required.",
                        why="Only info, success, warning and error have built-in seeds.",
                        fix=f"Add a '{name}' color to the brand group.",
                        example=f'"{name}": "#339900"',
                    )
                )
            colors[name] = None
            continue
        colors[name] = _parse_color_input(raw, f"brand.{name}")
    return BrandColors(**colors)  # type: ignore[arg-type]


def _parse_color_input(value: object, where: str) -> BrandColorInput:
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        data = _mapping(value, where, _COLOR_KEYS)
        main = data.get("main")
        if not isinstance(main, str) or not main.strip():
            raise FarmhandError(
                build_guidance_message(
                    what=f"Color '{where}' has no main value.",
                    why="A color record derives every tone from its main color.",
                    fix="Add a main hex color.",
                    example='{"main": "#339900", "contrastText": "#FFFFFF"}',
                )
            )
        return ColorInput(
            main=main,
            light=_optional_text(data, "light", where),
            dark=_optional_text(data, "dark", where),
            contrast_text=_optional_text(data, "contrastText", where),
        )
    raise FarmhandError(
        build_guidance_message(
            what=f"Color '{where}' must be a string or an object.",
            why=f"Got {type(value).__name__}.",
            fix="Use a hex string or a record with main, light, dark and contrastText.",
            example='"#339900"',
        )
    )


def _parse_neutrals(value: object) -> Neutrals | None:
    if value is None:
        return None
    data = _mapping(value, "neutrals", _NEUTRAL_KEYS)
    return Neutrals(
        surface=_optional_text(data, "surface", "neutrals"),
        surface_dark=_optional_text(data, "surfaceDark", "neutrals"),
        border=_optional_text(data, "border", "neutrals"),
        border_dark=_optional_text(data, "borderDark", "neutrals"),
    )


def _parse_fonts(value: object) -> tuple[FontAsset, ...]:
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)):
        raise FarmhandError(
            build_guidance_message(
                what="Theme fonts must be a list.",
                why=f"Got {type(value).__name__}.",
                fix="List one object per font asset.",
                example='"fonts": [{"fontFamily": "Anton", "src": "url(Anton.ttf)"}]',
            )
        )
    fonts: list[FontAsset] = []
    for index, entry in enumerate(value):
        where = f"fonts[{index}]"
        data = _mapping(entry, where, _FONT_KEYS)
        fonts.append(
            FontAsset(
                font_family=_required_text(data, "fontFamily", where),
                src=_required_text(data, "src", where),
                font_style=_optional_text(data, "fontStyle", where),
                font_display=_optional_text(data, "fontDisplay", where),
            )
        )
    return tuple(fonts)


def _parse_typography(value: object) -> TypographyConfig | None:
    if value is None:
        return None
    data = _mapping(value, "typography", _TYPOGRAPHY_KEYS)
    headings = None
    if data.get("headings") is not None:
        heading_data = _mapping(data["headings"], "typography.headings", _HEADING_KEYS)
        headings = HeadingGroups(
            display=_heading_list(heading_data.get("display"), "typography.headings.display"),
            headline=_heading_list(heading_data.get("headline"), "typography.headings.headline"),
        )
    return TypographyConfig(
        display=_optional_text(data, "display", "typography"),
        headline=_optional_text(data, "headline", "typography"),
        body=_optional_text(data, "body", "typography"),
        ui=_optional_text(data, "ui", "typography"),
        headings=headings,
    )


def _parse_shape(value: object) -> ShapeConfig | None:
    if value is None:
        return None
    data = _mapping(value, "shape", _SHAPE_KEYS)
    radius = data.get("borderRadius")
    spacing = data.get("spacing")
    if radius is not None and (isinstance(radius, bool) or not isinstance(radius, (int, float)) or radius < 0):
        _raise_invalid_number("shape.borderRadius", radius, "non-negative number")
    if spacing is not None and (isinstance(spacing, bool) or not isinstance(spacing, int) or spacing <= 0):
        _raise_invalid_number("shape.spacing", spacing, "positive integer")
    return ShapeConfig(border_radius=radius, spacing=spacing)


def _heading_list(value: object, where: str) -> tuple[str, ...] | None:
    if value is None:
        return None
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        return tuple(value)
    raise FarmhandError(
        build_guidance_message(
            what=f"'{where}' must be a list of heading names.",
            why=f"Got {value!r}.",
            fix="List heading tiers such as h1 through h6.",
            example='"display": ["h1", "h2", "h3"]',
        )
    )


def _mapping(value: object, where: str, allowed: tuple[str, ...]) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        raise FarmhandError(
            build_guidance_message(
                what=f"'{where}' must be an object.",
                why=f"Got {type(value).__name__}.",
                fix="Use a JSON object with named fields.",
                example='{"id": "TractorTheme", "displayName": "Tractor"}',
            )
        )
    for key in value:
        if key not in allowed:
            _raise_unknown_key(str(key), where, allowed)
    return value


def _required_text(data: Mapping[str, object], key: str, where: str) -> str:
    value = data.get(key)
    if isinstance(value, str) and value.strip():
        return value
    raise FarmhandError(
        build_guidance_message(
            what=f"'{where}' is missing '{key}'.",
            why=f"'{key}' must be a non-empty string.",
            fix=f"Add a '{key}' value.",
            example=f'"{key}": "..."',
        )
    )


def _optional_text(data: Mapping[str, object], key: str, where: str) -> str | None:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise FarmhandError(
        build_guidance_message(
            what=f"'{where}.{key}' must be a string.",
            why=f"Got {type(value).__name__}.",
            fix=f"Quote the '{key}' value.",
            example=f'"{key}": "..."',
        )
    )


def _serialize_color(value: BrandColorInput | None) -> object:
    if value is None or isinstance(value, str):
        return value
    return _drop_none(
        {
            "main": value.main,
            "light": value.light,
            "dark": value.dark,
            "contrastText": value.contrast_text,
        }
    )


def _drop_none(values: dict[str, object]) -> dict[str, object]:
    return {key: value for key, value in values.items() if value is not None}


def _raise_unknown_key(key: str, where: str, allowed: tuple[str, ...]) -> None:
    matches = difflib.get_close_matches(key, list(allowed), n=1, cutoff=0.6)
    fix = f'Did you mean "{matches[0]}"?' if matches else "Remove the key."
    raise FarmhandError(
        build_guidance_message(
            what=f"Unknown key '{key}' in '{where}'.",
            why=f"Allowed keys: {', '.join(allowed)}.",
            fix=fix,
            example=f'"{allowed[0]}": ...',
        )
    )


def _raise_invalid_number(where: str, value: object, expected: str) -> None:
    raise FarmhandError(
        build_guidance_message(
            what=f"Invalid value '{value}' for '{where}'.",
            why=f"'{where}' must be a {expected}.",
            fix="Use a valid number.",
            example='"shape": {"borderRadius": 4, "spacing": 8}',
        )
    )


__all__ = ["parse_theme_config", "serialize_theme_config"]
