from __future__ import annotations

import pytest

from farmhand.errors.base import FarmhandError
from farmhand.theme.colors import contrast_ratio, is_hex
from farmhand.theme.defaults import ThemeDefaults
from farmhand.theme.model import Shape
from farmhand.theme.resolver import build_custom_shadows, build_theme, create_theme_definition, normalize_mode
from tests.conftest import make_config


def test_default_background_differs_by_mode() -> None:
    config = make_config()
    light = build_theme(config, "light")
    dark = build_theme(config, "dark")
    assert light.palette.background.default == "#F6F5F0"
    assert light.palette.background.default != dark.palette.background.default
    assert light.palette.background.paper == light.palette.surface.elevated


def test_building_twice_yields_equal_themes() -> None:
    config = make_config()
    assert build_theme(config, "dark") == build_theme(config, "dark")
    assert create_theme_definition(config) == create_theme_definition(config)


def test_definition_has_both_modes_and_meta() -> None:
    config = make_config(flavorText="Plough on.")
    definition = create_theme_definition(config)
    assert definition.id == "TestTheme"
    assert definition.meta.display_name == "Test Theme"
    assert definition.meta.flavor_text == "Plough on."
    assert definition.light.mode == "light"
    assert definition.dark.mode == "dark"
    assert definition.for_mode("dark") is definition.dark
    assert definition.light.id == definition.dark.id == "TestTheme"


def test_all_role_scales_present_and_legible() -> None:
    theme = build_theme(make_config(brand={"primary": {"main": "#339900"}, "secondary": "#FFD400"}), "light")
    for _, scale in theme.palette.roles.items():
        for value in (scale.main, scale.light, scale.dark, scale.container, scale.on_container):
            assert is_hex(value)
        assert contrast_ratio(scale.main, scale.contrast_text) >= 4.5


def test_shadow_tokens_per_mode() -> None:
    light = build_custom_shadows("#339900", "light")
    dark = build_custom_shadows("#339900", "dark")
    assert light.card.to_css() == "0 12px 30px rgba(5, 6, 10, 0.08)"
    assert dark.card.to_css() == "0 14px 34px rgba(5, 6, 10, 0.6)"
    assert light.focus.to_css() == "0 0 0 3px rgba(51, 153, 0, 0.32)"
    assert dark.focus.to_css() == "0 0 0 3px rgba(51, 153, 0, 0.5)"
    assert light.popover.to_css() == "0 20px 45px rgba(5, 6, 10, 0.12)"
    assert dark.glow.to_css() == "0 0 35px rgba(51, 153, 0, 0.55)"


def test_theme_shadows_follow_primary() -> None:
    theme = build_theme(make_config(), "light")
    assert theme.custom_shadows.glow.color == theme.palette.roles.primary.main


def test_shape_defaults_and_overrides() -> None:
    assert build_theme(make_config(), "light").shape == Shape(border_radius=4, spacing_unit=8)
    flat = build_theme(make_config(shape={"borderRadius": 0}), "light")
    assert flat.shape.border_radius == 0
    assert flat.shape.spacing_unit == 8
    forced = build_theme(make_config(shape={"borderRadius": 0}), "light", shape=Shape(border_radius=12, spacing_unit=4))
    assert forced.shape == Shape(border_radius=12, spacing_unit=4)


def test_spacing_helper_formats_lengths() -> None:
    shape = Shape(border_radius=4, spacing_unit=8)
    assert shape.spacing() == "8px"
    assert shape.spacing(1, 2) == "8px 16px"
    assert shape.spacing(0.75) == "6px"
    assert shape.spacing(0) == "0"


def test_font_assets_are_carried_on_the_theme() -> None:
    config = make_config(fonts=[{"fontFamily": "Anton", "src": "url(Anton.ttf)"}])
    theme = build_theme(config, "dark")
    assert [font.font_family for font in theme.font_faces] == ["Anton"]


def test_injected_defaults_reach_the_theme() -> None:
    theme = build_theme(make_config(), "light", defaults=ThemeDefaults(surface="#EEEEEE", border_radius=10))
    assert theme.palette.surface.base == "#EEEEEE"
    assert theme.shape.border_radius == 10


def test_malformed_colors_never_raise() -> None:
    config = make_config(brand={"primary": "#zzzzzz", "secondary": "??"}, neutrals={"surface": "nope"})
    theme = build_theme(config, "light")
    assert theme.palette.roles.primary.main == "#FFFFFF"
    assert theme.palette.surface.base == "#FFFFFF"


def test_unknown_mode_suggests_a_fix() -> None:
    with pytest.raises(FarmhandError) as excinfo:
        normalize_mode("drak")
    assert "Unknown theme mode 'drak'" in str(excinfo.value)
    assert 'Did you mean "dark"?' in str(excinfo.value)
    with pytest.raises(FarmhandError):
        build_theme(make_config(), "sepia")


def test_package_level_entry_points() -> None:
    import farmhand

    payload = {"id": "TestTheme", "displayName": "Test Theme", "brand": {"primary": "#339900", "secondary": "#FFD400"}}
    config = farmhand.parse_theme_config(payload)
    assert config == make_config()
    assert farmhand.create_theme_definition(config) == create_theme_definition(config)
