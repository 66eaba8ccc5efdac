"""Compile a resolved theme into a standalone stylesheet.

The ``:root`` block exposes every theme token as a ``--fh-*`` custom property
so plain CSS can follow the theme; the selected skin's baseline follows it.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from farmhand.determinism import canonical_json_hash
from farmhand.theme.model import ROLE_NAMES, TYPOGRAPHY_TIERS, Theme
from farmhand.theme.styles.skins import build_style_table, resolve_skin


_SCALE_FIELDS = ("main", "light", "dark", "contrast_text", "container", "on_container")
_SURFACE_FIELDS = ("base", "elevated", "variant", "subtle", "outline")
_TEXT_FIELDS = ("primary", "secondary", "disabled")


@dataclass(frozen=True)
class CompiledThemeCss:
    theme_id: str
    mode: str
    skin: str
    css: str
    css_hash: str


def theme_custom_properties(theme: Theme) -> list[tuple[str, str]]:
    palette = theme.palette
    props: list[tuple[str, str]] = []
    for role in ROLE_NAMES:
        scale = palette.roles.role(role)
        for name in _SCALE_FIELDS:
            props.append((f"--fh-{role}-{_kebab(name)}", getattr(scale, name)))
    for name in _SURFACE_FIELDS:
        props.append((f"--fh-surface-{name}", getattr(palette.surface, name)))
    for name in _TEXT_FIELDS:
        props.append((f"--fh-text-{name}", getattr(palette.text, name)))
    props.append(("--fh-divider", palette.divider))
    props.append(("--fh-background-default", palette.background.default))
    props.append(("--fh-background-paper", palette.background.paper))
    for item in fields(palette.action):
        value = getattr(palette.action, item.name)
        if isinstance(value, str):
            props.append((f"--fh-action-{_kebab(item.name)}", value))
    for item in fields(theme.custom_shadows):
        props.append((f"--fh-shadow-{item.name}", getattr(theme.custom_shadows, item.name).to_css()))
    props.append(("--fh-radius", f"{theme.shape.border_radius:g}px"))
    props.append(("--fh-spacing", theme.shape.spacing(1)))
    props.append(("--fh-font-family", theme.typography.font_family))
    for tier in TYPOGRAPHY_TIERS:
        props.append((f"--fh-font-{tier}", theme.typography.family(tier)))
    return props


def compile_theme_css(theme: Theme, *, skin: str | None = None) -> CompiledThemeCss:
    selected = resolve_skin(skin)
    table = build_style_table(theme, selected)
    root = "\n".join([":root {"] + [f"  {name}: {value};" for name, value in theme_custom_properties(theme)] + ["}"])
    css = f"{root}\n\n{table.baseline}"
    digest = canonical_json_hash({"theme_id": theme.id, "mode": theme.mode, "skin": selected, "css": css})
    return CompiledThemeCss(theme_id=theme.id, mode=theme.mode, skin=selected, css=css, css_hash=digest)


def _kebab(name: str) -> str:
    return name.replace("_", "-")


__all__ = ["CompiledThemeCss", "compile_theme_css", "theme_custom_properties"]
