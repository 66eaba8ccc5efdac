from __future__ import annotations

import pytest

from farmhand.errors.base import FarmhandError
from farmhand.theme.config import parse_theme_config, serialize_theme_config
from farmhand.theme.model import ColorInput, HeadingGroups, ShapeConfig
from farmhand.theme.presets import PRESETS
from tests.conftest import BASIC_BRAND, make_config


def test_minimal_config() -> None:
    config = make_config()
    assert config.id == "TestTheme"
    assert config.display_name == "Test Theme"
    assert config.brand.primary == "#339900"
    assert config.brand.info is None
    assert config.neutrals is None
    assert config.fonts == ()
    assert config.typography is None
    assert config.shape is None


def test_camel_case_fields_map_to_model() -> None:
    config = make_config(
        brand={"primary": {"main": "#339900", "contrastText": "#ffffff"}, "secondary": "#FFD400"},
        neutrals={"surfaceDark": "#121212", "borderDark": "#515761"},
        fonts=[{"fontFamily": "Anton", "src": "url(Anton.ttf)", "fontDisplay": "block"}],
        typography={"display": "Anton", "headings": {"display": ["h1"], "headline": ["h2", "h3"]}},
        shape={"borderRadius": 2.5, "spacing": 4},
    )
    assert config.brand.primary == ColorInput(main="#339900", contrast_text="#ffffff")
    assert config.neutrals.surface_dark == "#121212"
    assert config.fonts[0].font_display == "block"
    assert config.typography.headings == HeadingGroups(display=("h1",), headline=("h2", "h3"))
    assert config.shape == ShapeConfig(border_radius=2.5, spacing=4)


def test_presets_round_trip() -> None:
    for payload, _ in PRESETS.values():
        config = parse_theme_config(payload)
        assert parse_theme_config(serialize_theme_config(config)) == config


def test_serialize_omits_unset_fields() -> None:
    payload = serialize_theme_config(make_config())
    assert payload == {"id": "TestTheme", "displayName": "Test Theme", "brand": BASIC_BRAND}


def test_unknown_key_suggests_close_match() -> None:
    with pytest.raises(FarmhandError) as excinfo:
        parse_theme_config({"id": "x", "dispalyName": "X", "brand": BASIC_BRAND})
    assert "Unknown key 'dispalyName'" in str(excinfo.value)
    assert 'Did you mean "displayName"?' in str(excinfo.value)


def test_required_fields() -> None:
    with pytest.raises(FarmhandError):
        parse_theme_config({"displayName": "X", "brand": BASIC_BRAND})
    with pytest.raises(FarmhandError):
        parse_theme_config({"id": "x", "displayName": "  ", "brand": BASIC_BRAND})
    with pytest.raises(FarmhandError) as excinfo:
        parse_theme_config({"id": "x", "displayName": "X"})
    assert "missing 'brand'" in str(excinfo.value)
    with pytest.raises(FarmhandError) as excinfo:
        parse_theme_config({"id": "x", "displayName": "X", "brand": {"primary": "#339900"}})
    assert "'secondary' is required" in str(excinfo.value)


@pytest.mark.parametrize(
    "fields",
    [
        {"brand": {"primary": 5, "secondary": "#FFD400"}},
        {"brand": {"primary": {"light": "#FFFFFF"}, "secondary": "#FFD400"}},
        {"neutrals": ["#FFFFFF"]},
        {"fonts": {"fontFamily": "Anton"}},
        {"fonts": [{"fontFamily": "Anton"}]},
        {"typography": {"headings": {"display": "h1"}}},
        {"shape": {"borderRadius": -1}},
        {"shape": {"spacing": 0}},
        {"shape": {"spacing": True}},
        {"flavorText": 42},
    ],
)
def test_structural_errors_raise_guidance(fields) -> None:
    with pytest.raises(FarmhandError) as excinfo:
        make_config(**fields)
    assert str(excinfo.value).startswith("What happened:")


def test_non_mapping_payload() -> None:
    with pytest.raises(FarmhandError) as excinfo:
        parse_theme_config("TractorTheme")
    assert "must be an object" in str(excinfo.value)


def test_color_values_are_not_validated_by_the_parser() -> None:
    config = make_config(brand={"primary": "#nothex", "secondary": "??"})
    assert config.brand.primary == "#nothex"
