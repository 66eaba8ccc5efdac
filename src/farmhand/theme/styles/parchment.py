"""Parchment skin.

Light mode reads as aged parchment, dark mode as carved stone. Every color is
a theme token; the textures are small inline SVGs drawn with those tokens.
"""

from __future__ import annotations

from urllib.parse import quote

from farmhand.theme.fonts import build_font_import
from farmhand.theme.model import Theme
from farmhand.theme.styles.base import ComponentStyle, StyleTable, border, merge_style_tables, transition
from farmhand.theme.styles.default import build_baseline, build_default_styles


_NOISE_DOTS = (
    (6, 10, 0.9), (22, 28, 0.7), (40, 6, 0.8), (58, 22, 0.65), (74, 12, 0.85),
    (88, 34, 0.6), (14, 54, 0.8), (34, 46, 0.7), (50, 62, 0.65), (72, 50, 0.9),
    (90, 70, 0.75), (18, 82, 0.65), (38, 90, 0.8), (60, 82, 0.7), (80, 92, 0.6),
)
_GLYPH_PATHS = (
    "M6 30 L20 18 L30 30",
    "M50 14 L60 4 L70 14",
    "M92 36 L104 24 L112 36",
    "M24 70 L32 58 L40 70",
    "M70 82 L80 68 L92 82",
    "M14 100 L24 88 L34 100",
)


def inline_svg(svg: str) -> str:
    return f'url("data:image/svg+xml,{quote(svg, safe="-_.!~*()")}")'


def noise_texture(color: str) -> str:
    dots = "".join(f'<circle cx="{x}" cy="{y}" r="{r}"/>' for x, y, r in _NOISE_DOTS)
    return inline_svg(
        '<svg xmlns="http://www.w3.org/2000/svg" width="96" height="96">'
        f'<g fill="{color}" opacity="0.08">{dots}</g>'
        "</svg>"
    )


def glyph_texture(color: str) -> str:
    paths = "".join(f'<path d="{d}" fill="none"/>' for d in _GLYPH_PATHS)
    return inline_svg(
        '<svg xmlns="http://www.w3.org/2000/svg" width="120" height="120">'
        f'<g stroke="{color}" stroke-width="0.8" stroke-linecap="round" opacity="0.18">{paths}</g>'
        "</svg>"
    )


def build_parchment_styles(theme: Theme) -> StyleTable:
    palette = theme.palette
    surface = palette.surface
    primary = palette.roles.primary
    shadows = theme.custom_shadows
    light = palette.mode == "light"

    noise = noise_texture(palette.common.white if not light else primary.dark)
    glyphs = glyph_texture(primary.main)
    if light:
        backdrop = ", ".join(
            [
                f"radial-gradient(circle at 20% 20%, {surface.elevated}, transparent 55%)",
                f"linear-gradient(135deg, {primary.container}, {surface.variant})",
                noise,
            ]
        )
        backdrop_size = "140% 140%, 100% 100%, 200px 200px"
    else:
        backdrop = ", ".join(
            [
                f"radial-gradient(circle at 80% 0%, {primary.container}, transparent 50%)",
                f"linear-gradient(120deg, {surface.variant}, {surface.base})",
                noise,
            ]
        )
        backdrop_size = "160% 160%, 100% 100%, 220px 220px"
    panel = f"linear-gradient(120deg, {surface.elevated}, {surface.subtle})"
    metal = f"linear-gradient(120deg, {primary.light}, {primary.dark})"
    frame = border(1.5, surface.outline)
    highlight = primary.light

    families = [theme.typography.family(tier) for tier in ("h1", "h4", "body1", "button")]
    shipped = [font.font_family for font in theme.font_faces]
    font_import = build_font_import(families, skip=shipped)
    extra = "\n".join(
        [
            "body {",
            f"  background-image: {backdrop};",
            f"  background-size: {backdrop_size};",
            "  background-attachment: scroll;",
            "  letter-spacing: 0.02em;",
            "}",
            "",
            "::selection {",
            f"  background-color: {palette.action.selected};",
            f"  color: {primary.contrast_text};",
            "}",
        ]
    )
    baseline = build_baseline(theme, extra=extra)
    if font_import:
        baseline = f"{font_import}\n\n{baseline}"

    overrides = {
        "app_bar": ComponentStyle(
            slots={
                "root": {
                    "backgroundColor": primary.dark,
                    "backgroundImage": metal,
                    "backgroundSize": "cover",
                    "color": primary.contrast_text,
                    "borderBottom": border(3, highlight),
                    "boxShadow": shadows.popover.to_css(),
                    "backdropFilter": "none",
                }
            }
        ),
        "toolbar": ComponentStyle(slots={"root": {"minHeight": 72, "paddingInline": theme.shape.spacing(3)}}),
        "drawer": ComponentStyle(
            slots={
                "paper": {
                    "backgroundImage": backdrop,
                    "backgroundSize": backdrop_size,
                    "borderRight": border(2, surface.outline),
                }
            }
        ),
        "card": ComponentStyle(
            slots={
                "root": {
                    "border": frame,
                    "borderRadius": 14,
                    "backgroundImage": f"{panel}, {glyphs}, {noise}",
                    "backgroundSize": "cover, 320px, 200px",
                    "boxShadow": shadows.card.to_css(),
                    "position": "relative",
                    "overflow": "hidden",
                    "&:hover": {"borderColor": highlight, "boxShadow": shadows.popover.to_css()},
                }
            }
        ),
        "button": ComponentStyle(
            slots={
                "root": {
                    "borderRadius": 999,
                    "paddingInline": theme.shape.spacing(3),
                    "border": border(1.5, highlight),
                    "textTransform": "uppercase",
                    "fontWeight": 700,
                    "letterSpacing": "0.12em",
                    "transition": transition(theme, ("transform", "box-shadow")),
                },
                "contained": {
                    "backgroundImage": metal,
                    "color": primary.contrast_text,
                    "&:hover": {"boxShadow": shadows.glow.to_css(), "transform": "translateY(-1px)"},
                },
            }
        ),
        "chip": ComponentStyle(
            slots={
                "root": {
                    "borderRadius": 8,
                    "border": frame,
                    "backgroundColor": primary.container,
                    "color": primary.on_container,
                    "textTransform": "uppercase",
                }
            }
        ),
        "text_input": ComponentStyle(
            slots={
                "root": {
                    "borderRadius": 12,
                    "backgroundImage": panel,
                    "& .MuiOutlinedInput-notchedOutline": {"borderColor": surface.outline},
                }
            }
        ),
        "menu": ComponentStyle(
            slots={
                "paper": {"borderRadius": 12, "border": frame, "backgroundImage": panel},
                "popover": {"borderRadius": 12, "border": frame, "backgroundImage": panel},
            }
        ),
        "dialog": ComponentStyle(
            slots={
                "paper": {
                    "borderRadius": 16,
                    "border": border(2, highlight),
                    "backgroundImage": f"{panel}, {glyphs}",
                    "boxShadow": shadows.popover.to_css(),
                }
            }
        ),
        "tabs": ComponentStyle(
            slots={
                "indicator": {"height": 4, "backgroundColor": highlight},
                "tab": {"fontFamily": theme.typography.button.font_family, "letterSpacing": "0.12em"},
            }
        ),
        "tooltip": ComponentStyle(
            slots={"tooltip": {"borderRadius": 8, "border": frame, "backgroundColor": palette.action.scrim}}
        ),
        "fab": ComponentStyle(slots={"root": {"backgroundImage": metal, "border": border(2, highlight)}}),
    }
    return merge_style_tables(build_default_styles(theme), overrides, baseline=baseline)


__all__ = ["build_parchment_styles", "glyph_texture", "inline_svg", "noise_texture"]
