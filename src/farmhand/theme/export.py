from __future__ import annotations

from dataclasses import asdict

from farmhand.determinism import canonical_json_dumps
from farmhand.theme.model import Theme, ThemeDefinition
from farmhand.theme.styles.base import StyleTable, style_table_payload


def theme_to_payload(theme: Theme) -> dict[str, object]:
    payload = asdict(theme)
    payload["mode"] = theme.mode
    payload["custom_shadows_css"] = {
        name: getattr(theme.custom_shadows, name).to_css() for name in payload["custom_shadows"]
    }
    return payload


def definition_to_payload(definition: ThemeDefinition) -> dict[str, object]:
    return {
        "id": definition.id,
        "meta": asdict(definition.meta),
        "light": theme_to_payload(definition.light),
        "dark": theme_to_payload(definition.dark),
    }


def theme_to_json(theme: Theme, *, pretty: bool = True) -> str:
    return canonical_json_dumps(theme_to_payload(theme), pretty=pretty)


def style_table_to_json(table: StyleTable, *, pretty: bool = True) -> str:
    return canonical_json_dumps(style_table_payload(table), pretty=pretty)


__all__ = ["definition_to_payload", "style_table_to_json", "theme_to_json", "theme_to_payload"]
