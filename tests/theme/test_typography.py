from __future__ import annotations

import pytest

from farmhand.theme.defaults import DEFAULTS, FALLBACK_FONT
from farmhand.theme.model import HEADING_TIERS, TYPOGRAPHY_TIERS, HeadingGroups, TypographyConfig
from farmhand.theme.typography import build_typography


def test_display_and_headline_split_headings() -> None:
    plan = build_typography(TypographyConfig(display="Foo", headline="Bar"))
    assert [plan.family(tier) for tier in HEADING_TIERS] == ["Foo", "Foo", "Foo", "Bar", "Bar", "Bar"]
    assert plan.body1.font_family == FALLBACK_FONT
    assert plan.body2.font_family == FALLBACK_FONT
    assert plan.font_family == FALLBACK_FONT


def test_ui_tiers_follow_headline_when_ui_is_omitted() -> None:
    plan = build_typography(TypographyConfig(display="Foo", headline="Bar"))
    for tier in ("subtitle1", "subtitle2", "button", "caption", "overline"):
        assert plan.family(tier) == "Bar"


def test_no_typography_uses_display_default_everywhere_above_body() -> None:
    plan = build_typography(None)
    assert plan.h1.font_family == DEFAULTS.display_font
    assert plan.h6.font_family == DEFAULTS.display_font
    assert plan.button.font_family == DEFAULTS.display_font
    assert plan.body1.font_family == FALLBACK_FONT


def test_blank_fonts_count_as_omitted() -> None:
    plan = build_typography(TypographyConfig(display="   ", body=""))
    assert plan.h1.font_family == DEFAULTS.display_font
    assert plan.body1.font_family == FALLBACK_FONT


def test_custom_heading_groups_ignore_unknown_and_repeated_tiers() -> None:
    headings = HeadingGroups(display=("h1", "h1", "h9"), headline=("h2",))
    plan = build_typography(TypographyConfig(display="A", headline="B", headings=headings))
    assert plan.h1.font_family == "A"
    assert plan.h2.font_family == "B"
    # Tiers in neither group fall back to display.
    assert [plan.family(tier) for tier in ("h3", "h4", "h5", "h6")] == ["A", "A", "A", "A"]


def test_every_tier_has_a_family() -> None:
    plan = build_typography(TypographyConfig(body="Baskervville", ui="Antonio"))
    for tier in TYPOGRAPHY_TIERS:
        assert plan.family(tier)
    assert plan.overline.text_transform == "uppercase"
    assert plan.h1.font_size == "3rem"


def test_unknown_tier_lookup_raises_key_error() -> None:
    plan = build_typography(None)
    with pytest.raises(KeyError):
        plan.style("h7")
