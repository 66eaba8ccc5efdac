"""Default FarmHand skin: flat surfaces, outlined cards, primary-tinted states."""

from __future__ import annotations

from farmhand.theme.fonts import build_font_face_css
from farmhand.theme.model import Theme
from farmhand.theme.styles.base import ComponentStyle, StyleTable, border, transition


def build_baseline(theme: Theme, *, extra: str = "") -> str:
    palette = theme.palette
    body = theme.typography.body1
    sections = [
        build_font_face_css(theme.font_faces),
        "\n".join(
            [
                ":root {",
                f"  color-scheme: {palette.mode};",
                "}",
                "",
                "* {",
                "  box-sizing: border-box;",
                "}",
                "",
                "body {",
                "  margin: 0;",
                "  min-height: 100vh;",
                f"  background-color: {palette.surface.base};",
                f"  color: {palette.text.primary};",
                f"  font-family: {body.font_family};",
                f"  line-height: {body.line_height};",
                "  -webkit-font-smoothing: antialiased;",
                "  text-rendering: optimizeLegibility;",
                "}",
            ]
        ),
        extra,
    ]
    return "\n\n".join(section for section in sections if section).strip() + "\n"


def build_default_styles(theme: Theme) -> StyleTable:
    palette = theme.palette
    surface = palette.surface
    primary = palette.roles.primary
    action = palette.action
    shadows = theme.custom_shadows
    radius = theme.shape.border_radius
    outline = border(1, surface.outline)
    floating_paper = {
        "borderRadius": radius,
        "border": outline,
        "boxShadow": shadows.popover.to_css(),
    }
    return StyleTable(
        baseline=build_baseline(theme),
        app_bar=ComponentStyle(
            slots={
                "root": {
                    "backgroundColor": surface.elevated,
                    "color": palette.text.primary,
                    "border": "none",
                    "borderBottom": outline,
                    "boxShadow": "none",
                    "backdropFilter": "blur(12px)",
                }
            }
        ),
        toolbar=ComponentStyle(slots={"root": {"paddingInline": theme.shape.spacing(2), "minHeight": 64}}),
        button=ComponentStyle(
            default_props={"disableElevation": True},
            slots={
                "root": {
                    "borderRadius": radius,
                    "textTransform": theme.typography.button.text_transform,
                    "fontWeight": theme.typography.button.font_weight,
                    "letterSpacing": theme.typography.button.letter_spacing,
                    "paddingInline": theme.shape.spacing(2.5),
                    "paddingBlock": theme.shape.spacing(1.25),
                    "transition": transition(theme, ("background-color", "box-shadow", "transform")),
                },
                "contained": {
                    "boxShadow": "none",
                    "&:hover": {"boxShadow": shadows.card.to_css(), "transform": "translateY(-1px)"},
                },
                "outlined": {
                    "borderWidth": 1.5,
                    "borderColor": surface.outline,
                    "&:hover": {"borderColor": primary.main, "backgroundColor": action.hover},
                },
                "text": {"&:hover": {"backgroundColor": action.hover}},
            },
        ),
        icon_button=ComponentStyle(
            slots={
                "root": {
                    "borderRadius": radius,
                    "color": palette.text.secondary,
                    "&:hover": {"backgroundColor": action.hover},
                }
            }
        ),
        card=ComponentStyle(
            default_props={"elevation": 0},
            slots={
                "root": {
                    "borderRadius": radius,
                    "border": outline,
                    "backgroundColor": surface.elevated,
                    "backgroundImage": "none",
                    "boxShadow": "none",
                    "transition": transition(theme, ("border-color", "box-shadow", "transform"), duration="shorter"),
                    "&:hover": {
                        "borderColor": primary.light,
                        "boxShadow": shadows.card.to_css(),
                        "transform": "translateY(-2px)",
                    },
                }
            },
        ),
        drawer=ComponentStyle(
            slots={
                "paper": {
                    "border": "none",
                    "borderRight": outline,
                    "backgroundColor": surface.base,
                }
            }
        ),
        list_item=ComponentStyle(
            slots={
                "root": {
                    "borderRadius": radius,
                    "paddingBlock": theme.shape.spacing(1),
                    "paddingInline": theme.shape.spacing(1.5),
                    "transition": transition(theme, ("background-color", "color", "padding")),
                    "&.Mui-selected": {
                        "backgroundColor": primary.container,
                        "color": primary.on_container,
                        "& .MuiListItemIcon-root": {"color": primary.on_container},
                        "&:hover": {"backgroundColor": action.selected},
                    },
                }
            }
        ),
        chip=ComponentStyle(
            slots={
                "root": {
                    "borderRadius": radius,
                    "fontWeight": theme.typography.subtitle1.font_weight,
                    "letterSpacing": "0.05em",
                }
            }
        ),
        divider=ComponentStyle(slots={"root": {"borderColor": surface.outline}}),
        text_input=ComponentStyle(
            default_props={"variant": "outlined", "fullWidth": True},
            slots={
                "root": {
                    "borderRadius": radius,
                    "backgroundColor": surface.subtle,
                    "& .MuiOutlinedInput-notchedOutline": {"borderColor": surface.outline, "borderWidth": 1.5},
                    "&:hover .MuiOutlinedInput-notchedOutline": {"borderColor": primary.light},
                    "&.Mui-focused .MuiOutlinedInput-notchedOutline": {
                        "borderColor": primary.main,
                        "boxShadow": shadows.focus.to_css(),
                    },
                },
                "input": {"paddingBlock": theme.shape.spacing(1.5)},
            },
        ),
        menu=ComponentStyle(slots={"paper": dict(floating_paper), "popover": dict(floating_paper)}),
        dialog=ComponentStyle(slots={"paper": dict(floating_paper)}),
        tabs=ComponentStyle(
            slots={
                "root": {"minHeight": 44},
                "indicator": {"height": 3, "borderRadius": 3},
                "tab": {
                    "textTransform": "none",
                    "fontWeight": theme.typography.button.font_weight,
                    "minHeight": 44,
                    "paddingInline": theme.shape.spacing(2.5),
                },
            }
        ),
        tooltip=ComponentStyle(
            slots={
                "tooltip": {
                    "borderRadius": radius,
                    "backgroundColor": action.scrim,
                    "backdropFilter": "blur(6px)",
                }
            }
        ),
        fab=ComponentStyle(slots={"root": {"borderRadius": 999, "boxShadow": shadows.glow.to_css()}}),
    )


__all__ = ["build_baseline", "build_default_styles"]
