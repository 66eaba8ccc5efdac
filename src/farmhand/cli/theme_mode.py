from __future__ import annotations

from farmhand.cli.options import parse_options, require_key
from farmhand.determinism import canonical_json_dumps
from farmhand.errors.base import FarmhandError
from farmhand.errors.guidance import build_guidance_message
from farmhand.theme.css import compile_theme_css
from farmhand.theme.export import style_table_to_json, theme_to_payload
from farmhand.theme.fonts import build_font_face_css
from farmhand.theme.model import ROLE_NAMES, Theme
from farmhand.theme.registry import DEFAULT_THEME_KEY, ThemeRegistry
from farmhand.theme.styles.skins import build_style_table


def run_list(registry: ThemeRegistry, args: list[str]) -> int:
    options = parse_options("list", args, flags={"--json"})
    if options.positional:
        raise FarmhandError(
            build_guidance_message(
                what=f"'list' takes no arguments, got '{options.positional[0]}'.",
                why="list always prints every registered theme.",
                fix="Drop the extra argument.",
                example="farmhand-theme list --json",
            )
        )
    rows = []
    for key in registry.keys():
        config = registry.config_for(key)
        rows.append(
            {
                "key": key,
                "display_name": config.display_name,
                "skin": registry.skin_for(key),
                "default": key == DEFAULT_THEME_KEY,
            }
        )
    if options.json_mode:
        print(canonical_json_dumps({"count": len(rows), "themes": rows}, pretty=True))
        return 0
    print(f"Themes: {len(rows)}")
    for row in rows:
        marker = " (default)" if row["default"] else ""
        print(f"- {row['key']}{marker}: {row['display_name']} [skin {row['skin']}]")
    return 0


def run_show(registry: ThemeRegistry, args: list[str]) -> int:
    options = parse_options("show", args, flags={"--mode", "--json"})
    key = require_key("show", options)
    definition = registry.get(key)
    theme = definition.for_mode(options.mode)
    if options.json_mode:
        payload = {
            "id": definition.id,
            "meta": {"display_name": definition.meta.display_name, "flavor_text": definition.meta.flavor_text},
            "skin": registry.skin_for(key),
            "theme": theme_to_payload(theme),
        }
        print(canonical_json_dumps(payload, pretty=True))
        return 0
    print(_summary(definition.meta.display_name, definition.meta.flavor_text, registry.skin_for(key), theme))
    return 0


def run_styles(registry: ThemeRegistry, args: list[str]) -> int:
    options = parse_options("styles", args, flags={"--mode", "--skin"})
    key = require_key("styles", options)
    theme = registry.get(key).for_mode(options.mode)
    table = build_style_table(theme, options.skin or registry.skin_for(key))
    print(style_table_to_json(table))
    return 0


def run_css(registry: ThemeRegistry, args: list[str]) -> int:
    options = parse_options("css", args, flags={"--mode", "--skin"})
    key = require_key("css", options)
    theme = registry.get(key).for_mode(options.mode)
    compiled = compile_theme_css(theme, skin=options.skin or registry.skin_for(key))
    print(f"/* {compiled.theme_id} {compiled.mode} {compiled.skin} sha256:{compiled.css_hash} */")
    print(compiled.css.rstrip("\n"))
    return 0


def run_fonts(registry: ThemeRegistry, args: list[str]) -> int:
    options = parse_options("fonts", args, flags=set())
    key = require_key("fonts", options)
    css = build_font_face_css(registry.config_for(key).fonts)
    if not css:
        print(f"{key} ships no font assets; it relies on installed or imported families.")
        return 0
    print(css)
    return 0


def _summary(display_name: str, flavor_text: str | None, skin: str, theme: Theme) -> str:
    palette = theme.palette
    lines = [f"{theme.id}: {display_name}"]
    if flavor_text:
        lines.append(f"  {flavor_text}")
    lines.append(f"Mode: {theme.mode}  Skin: {skin}  Radius: {theme.shape.border_radius:g}px")
    lines.append("")
    lines.append("Roles:")
    for name in ROLE_NAMES:
        scale = palette.roles.role(name)
        lines.append(
            f"- {name}: main {scale.main} light {scale.light} dark {scale.dark} "
            f"text {scale.contrast_text} container {scale.container}"
        )
    surface = palette.surface
    lines.append("")
    lines.append("Surfaces:")
    for name in ("base", "elevated", "variant", "subtle", "outline"):
        lines.append(f"- {name}: {getattr(surface, name)}")
    lines.append("")
    lines.append("Fonts:")
    lines.append(f"- body: {theme.typography.font_family}")
    lines.append(f"- h1: {theme.typography.family('h1')}")
    lines.append(f"- h6: {theme.typography.family('h6')}")
    lines.append(f"- button: {theme.typography.family('button')}")
    return "\n".join(lines)


__all__ = ["run_css", "run_fonts", "run_list", "run_show", "run_styles"]
