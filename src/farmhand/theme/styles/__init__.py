"""Component style skins. Each skin maps a resolved theme to a StyleTable."""

from farmhand.theme.styles.base import (
    STYLE_TARGETS,
    ComponentStyle,
    StyleTable,
    merge_style_tables,
    style_table_payload,
)
from farmhand.theme.styles.skins import DEFAULT_SKIN, SKINS, build_style_table, resolve_skin

__all__ = [
    "DEFAULT_SKIN",
    "SKINS",
    "STYLE_TARGETS",
    "ComponentStyle",
    "StyleTable",
    "build_style_table",
    "merge_style_tables",
    "resolve_skin",
    "style_table_payload",
]
