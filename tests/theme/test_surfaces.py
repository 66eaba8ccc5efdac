from __future__ import annotations

from farmhand.theme.colors import is_hex, lighten, mix
from farmhand.theme.defaults import ThemeDefaults
from farmhand.theme.model import Neutrals
from farmhand.theme.surfaces import build_divider, build_surface_set


def test_default_light_surfaces() -> None:
    surface = build_surface_set(None, "light")
    assert surface.base == "#F6F5F0"
    assert surface.elevated == "#FFFFFF"
    assert surface.variant == mix("#F6F5F0", "#FFFFFF", 0.3)
    assert surface.subtle == mix("#F6F5F0", "#FFFFFF", 0.5)
    assert surface.outline == "#E0E3DA"


def test_default_dark_surfaces() -> None:
    surface = build_surface_set(None, "dark")
    assert surface.base == "#0B0D13"
    assert surface.elevated == lighten("#0B0D13", 0.08)
    assert surface.variant == mix("#0B0D13", "#000000", 0.2)
    assert surface.subtle == mix(surface.elevated, "#0B0D13", 0.3)
    assert surface.outline == "#242832"


def test_dark_elevated_never_collapses_to_base() -> None:
    assert build_surface_set(None, "dark").elevated != "#0B0D13"
    pale = build_surface_set(Neutrals(surface_dark="#FAFAFA"), "dark")
    assert pale.base == "#FAFAFA"
    assert pale.elevated == mix("#FAFAFA", "#FFFFFF", 0.12)
    assert pale.elevated != pale.base
    white = build_surface_set(Neutrals(surface_dark="#FFFFFF"), "dark")
    assert white.elevated == "#F5F5F5"


def test_neutrals_override_and_normalize() -> None:
    neutrals = Neutrals(surface="#f1f1f1", surface_dark="#121212", border="#e0e0e0", border_dark="#515761")
    light = build_surface_set(neutrals, "light")
    dark = build_surface_set(neutrals, "dark")
    assert light.base == "#F1F1F1"
    assert light.outline == "#E0E0E0"
    assert dark.base == "#121212"
    assert dark.outline == "#515761"


def test_partial_neutrals_keep_other_defaults() -> None:
    surface = build_surface_set(Neutrals(surface="#EEEEEE"), "light")
    assert surface.base == "#EEEEEE"
    assert surface.outline == "#E0E3DA"


def test_every_tier_is_hex() -> None:
    for neutrals in (None, Neutrals(surface="bogus", surface_dark="#abc")):
        for mode in ("light", "dark"):
            surface = build_surface_set(neutrals, mode)
            assert all(is_hex(value) for value in (surface.base, surface.elevated, surface.variant, surface.subtle))


def test_injected_defaults_drive_surfaces() -> None:
    defaults = ThemeDefaults(surface="#FAFAFA", border="#CCCCCC")
    surface = build_surface_set(None, "light", defaults=defaults)
    assert surface.base == "#FAFAFA"
    assert surface.outline == "#CCCCCC"


def test_divider_is_translucent_ink() -> None:
    assert build_divider("light") == "rgba(0, 0, 0, 0.14)"
    assert build_divider("dark") == "rgba(255, 255, 255, 0.14)"
