"""Retro desktop skin: glossy title bars, bevelled buttons, window-style dialogs."""

from __future__ import annotations

from farmhand.theme.model import Theme
from farmhand.theme.styles.base import ComponentStyle, StyleTable, border, merge_style_tables
from farmhand.theme.styles.default import build_baseline, build_default_styles


def build_retro_styles(theme: Theme) -> StyleTable:
    palette = theme.palette
    surface = palette.surface
    primary = palette.roles.primary
    secondary = palette.roles.secondary
    shadows = theme.custom_shadows
    typography = theme.typography

    title_bar = f"linear-gradient(180deg, {primary.light} 0%, {primary.main} 45%, {primary.dark} 100%)"
    start_bar = f"linear-gradient(90deg, {primary.dark}, {primary.light})"
    start_button = f"linear-gradient(180deg, {secondary.light}, {secondary.dark})"
    window_body = f"linear-gradient(180deg, {surface.elevated} 0%, {surface.subtle} 100%)"
    side_panel = f"linear-gradient(180deg, {surface.subtle} 0%, {surface.variant} 100%)"
    bevel = f"inset 1px 1px 0 {palette.common.white}, inset -1px -1px 0 {surface.outline}"
    window_border = border(1, primary.dark)

    extra = "\n".join(
        [
            "*, *::before, *::after {",
            "  image-rendering: optimizeSpeed;",
            "}",
            "",
            "body {",
            f"  background-image: {side_panel};",
            "  background-attachment: fixed;",
            "}",
            "",
            "::selection {",
            f"  background-color: {primary.main};",
            f"  color: {primary.contrast_text};",
            "}",
        ]
    )

    overrides = {
        "app_bar": ComponentStyle(
            slots={
                "root": {
                    "backgroundImage": start_bar,
                    "color": primary.contrast_text,
                    "borderBottom": window_border,
                    "boxShadow": shadows.card.to_css(),
                    "backdropFilter": "none",
                }
            }
        ),
        "toolbar": ComponentStyle(slots={"root": {"minHeight": 48, "paddingInline": theme.shape.spacing(1)}}),
        "button": ComponentStyle(
            slots={
                "root": {
                    "borderRadius": 3,
                    "fontFamily": typography.body1.font_family,
                    "fontWeight": 400,
                    "letterSpacing": "normal",
                    "border": border(1, surface.outline),
                    "boxShadow": bevel,
                },
                "contained": {
                    "backgroundImage": title_bar,
                    "color": primary.contrast_text,
                    "&:hover": {"boxShadow": shadows.focus.to_css(), "transform": "none"},
                },
                "containedSecondary": {"backgroundImage": start_button, "color": secondary.contrast_text},
            }
        ),
        "card": ComponentStyle(
            slots={
                "root": {
                    "borderRadius": 6,
                    "border": window_border,
                    "backgroundImage": window_body,
                    "boxShadow": shadows.card.to_css(),
                    "&:hover": {"borderColor": primary.main, "transform": "none"},
                }
            }
        ),
        "drawer": ComponentStyle(
            slots={"paper": {"backgroundImage": side_panel, "borderRight": window_border}}
        ),
        "list_item": ComponentStyle(
            slots={
                "root": {
                    "borderRadius": 2,
                    "&.Mui-selected": {
                        "backgroundColor": primary.main,
                        "color": primary.contrast_text,
                        "& .MuiListItemIcon-root": {"color": primary.contrast_text},
                    },
                }
            }
        ),
        "chip": ComponentStyle(slots={"root": {"borderRadius": 3, "border": border(1, surface.outline)}}),
        "text_input": ComponentStyle(
            slots={
                "root": {
                    "borderRadius": 0,
                    "backgroundColor": surface.elevated,
                    "fontFamily": typography.body1.font_family,
                    "& .MuiOutlinedInput-notchedOutline": {"borderColor": primary.dark, "borderWidth": 1},
                }
            }
        ),
        "menu": ComponentStyle(
            slots={
                "paper": {"borderRadius": 0, "border": window_border, "backgroundColor": surface.elevated},
                "popover": {"borderRadius": 0, "border": window_border, "backgroundColor": surface.elevated},
            }
        ),
        "dialog": ComponentStyle(
            slots={
                "paper": {
                    "borderRadius": "8px 8px 0 0",
                    "border": border(3, primary.main),
                    "backgroundImage": window_body,
                },
                "title": {
                    "backgroundImage": title_bar,
                    "color": primary.contrast_text,
                    "fontFamily": typography.h6.font_family,
                    "paddingBlock": theme.shape.spacing(0.75),
                },
            }
        ),
        "tabs": ComponentStyle(
            slots={
                "indicator": {"height": 2, "borderRadius": 0, "backgroundColor": secondary.main},
                "tab": {"fontFamily": typography.body1.font_family, "fontWeight": 400},
            }
        ),
        "tooltip": ComponentStyle(
            slots={
                "tooltip": {
                    "borderRadius": 0,
                    "border": border(1, palette.common.black),
                    "backgroundColor": palette.roles.warning.container,
                    "color": palette.roles.warning.on_container,
                    "backdropFilter": "none",
                }
            }
        ),
        "fab": ComponentStyle(slots={"root": {"backgroundImage": start_button, "boxShadow": bevel}}),
    }
    return merge_style_tables(
        build_default_styles(theme),
        overrides,
        baseline=build_baseline(theme, extra=extra),
    )


__all__ = ["build_retro_styles"]
