from __future__ import annotations

import pytest

from farmhand.errors.base import FarmhandError
from farmhand.theme.colors import contrast_ratio
from farmhand.theme.presets import PRESETS
from farmhand.theme.registry import DEFAULT_THEME_KEY, ThemeRegistry, default_registry
from tests.conftest import make_config


def test_default_registry_lists_presets_in_order() -> None:
    registry = default_registry()
    assert registry.keys() == list(PRESETS)
    assert DEFAULT_THEME_KEY == "TractorTheme"
    assert DEFAULT_THEME_KEY in registry
    assert "Nope" not in registry
    assert len(registry) == 6


def test_definitions_are_built_once() -> None:
    registry = default_registry()
    first = registry.get("ThunderTheme")
    assert registry.get("ThunderTheme") is first
    assert first.meta.display_name == "Thunder"


def test_specialty_presets_pick_their_skins_and_shapes() -> None:
    registry = default_registry()
    assert registry.skin_for("TractorTheme") == "farmhand"
    assert registry.skin_for("RuneScapeTheme") == "parchment"
    assert registry.skin_for("WindowsXPTheme") == "retro"
    assert registry.get("RuneScapeTheme").dark.shape.border_radius == 2
    assert registry.get("WindowsXPTheme").light.shape.border_radius == 0
    assert registry.get("RuneScapeTheme").meta.display_name == "Dungeon Master"


def test_tractor_preset_values() -> None:
    tractor = default_registry().get("TractorTheme")
    assert tractor.light.palette.roles.primary.main == "#339900"
    assert tractor.light.palette.roles.primary.light == "#4DB82E"
    assert tractor.light.palette.surface.base == "#F1F1F1"
    assert tractor.dark.palette.surface.base == "#121212"
    assert tractor.light.typography.h4.font_family == "Anton"
    assert tractor.light.typography.h5.font_family == "Antonio"
    assert tractor.light.typography.body1.font_family == "Baskervville"
    assert len(tractor.light.font_faces) == 3


def test_every_preset_keeps_text_legible() -> None:
    registry = default_registry()
    for key in registry.keys():
        definition = registry.get(key)
        for theme in (definition.light, definition.dark):
            for _, scale in theme.palette.roles.items():
                assert contrast_ratio(scale.main, scale.contrast_text) >= 4.5, (key, theme.mode)
                assert contrast_ratio(scale.container, scale.on_container) >= 4.5, (key, theme.mode)


def test_duplicate_ids_are_rejected() -> None:
    registry = ThemeRegistry()
    registry.register(make_config())
    with pytest.raises(FarmhandError) as excinfo:
        registry.register(make_config())
    assert "already registered" in str(excinfo.value)


def test_unknown_skin_is_rejected_at_registration() -> None:
    registry = ThemeRegistry()
    with pytest.raises(FarmhandError):
        registry.register(make_config(), skin="glass")
    assert "TestTheme" not in registry


def test_unknown_key_suggests_close_match() -> None:
    with pytest.raises(FarmhandError) as excinfo:
        default_registry().get("TractorThem")
    assert "Unknown theme 'TractorThem'" in str(excinfo.value)
    assert 'Did you mean "TractorTheme"?' in str(excinfo.value)


def test_custom_registry_round_trip() -> None:
    registry = ThemeRegistry()
    registry.register(make_config(shape={"borderRadius": 12}), skin="parchment")
    assert registry.keys() == ["TestTheme"]
    assert registry.skin_for("TestTheme") == "parchment"
    assert registry.get("TestTheme").light.shape.border_radius == 12
