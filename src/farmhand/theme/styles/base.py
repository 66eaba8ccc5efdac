from __future__ import annotations

import difflib
from dataclasses import dataclass, field, fields, replace
from typing import Mapping

from farmhand.errors.base import FarmhandError
from farmhand.errors.guidance import build_guidance_message
from farmhand.theme.model import Theme


StyleRule = dict[str, object]

STYLE_TARGETS: tuple[str, ...] = (
    "app_bar",
    "toolbar",
    "button",
    "icon_button",
    "card",
    "drawer",
    "list_item",
    "chip",
    "divider",
    "text_input",
    "menu",
    "dialog",
    "tabs",
    "tooltip",
    "fab",
)


@dataclass(frozen=True)
class ComponentStyle:
    slots: dict[str, StyleRule] = field(default_factory=dict)
    default_props: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class StyleTable:
    baseline: str
    app_bar: ComponentStyle
    toolbar: ComponentStyle
    button: ComponentStyle
    icon_button: ComponentStyle
    card: ComponentStyle
    drawer: ComponentStyle
    list_item: ComponentStyle
    chip: ComponentStyle
    divider: ComponentStyle
    text_input: ComponentStyle
    menu: ComponentStyle
    dialog: ComponentStyle
    tabs: ComponentStyle
    tooltip: ComponentStyle
    fab: ComponentStyle

    def component(self, target: str) -> ComponentStyle:
        if target not in STYLE_TARGETS:
            raise KeyError(target)
        return getattr(self, target)


def merge_rules(base: Mapping[str, object], override: Mapping[str, object]) -> StyleRule:
    merged: StyleRule = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_rules(current, value)
        else:
            merged[key] = value
    return merged


def merge_component_style(base: ComponentStyle, override: ComponentStyle) -> ComponentStyle:
    slots = {name: dict(rule) for name, rule in base.slots.items()}
    for name, rule in override.slots.items():
        slots[name] = merge_rules(slots.get(name, {}), rule)
    return ComponentStyle(slots=slots, default_props={**base.default_props, **override.default_props})


def merge_style_tables(
    base: StyleTable,
    overrides: Mapping[str, ComponentStyle],
    *,
    baseline: str | None = None,
) -> StyleTable:
    """Return a new table with ``overrides`` merged over ``base``.

    Keys must be names from ``STYLE_TARGETS``; declarations merge per slot and
    nested selectors merge recursively.
    """
    changes: dict[str, object] = {}
    for target, style in overrides.items():
        if target not in STYLE_TARGETS:
            _raise_unknown_target(target)
        changes[target] = merge_component_style(getattr(base, target), style)
    if baseline is not None:
        changes["baseline"] = baseline
    return replace(base, **changes)


def style_table_payload(table: StyleTable) -> dict[str, object]:
    payload: dict[str, object] = {}
    for item in fields(table):
        value = getattr(table, item.name)
        if isinstance(value, ComponentStyle):
            payload[item.name] = {"slots": value.slots, "default_props": value.default_props}
        else:
            payload[item.name] = value
    return payload


def transition(theme: Theme, properties: tuple[str, ...], *, duration: str = "short") -> str:
    motion = theme.motion
    millis = {
        "shortest": motion.duration_shortest,
        "shorter": motion.duration_shorter,
        "short": motion.duration_short,
    }[duration]
    return ",".join(f"{prop} {millis}ms {motion.easing} 0ms" for prop in properties)


def border(width: float, color: str, style: str = "solid") -> str:
    return f"{width:g}px {style} {color}"


def _raise_unknown_target(target: str) -> None:
    matches = difflib.get_close_matches(target, list(STYLE_TARGETS), n=1, cutoff=0.6)
    fix = f'Did you mean "{matches[0]}"?' if matches else "Use one of the supported style targets."
    raise FarmhandError(
        build_guidance_message(
            what=f"Unknown style target '{target}'.",
            why=f"Supported targets: {', '.join(STYLE_TARGETS)}.",
            fix=fix,
            example='{"card": ComponentStyle(slots={"root": {...}})}',
        )
    )


__all__ = [
    "STYLE_TARGETS",
    "ComponentStyle",
    "StyleRule",
    "StyleTable",
    "border",
    "merge_component_style",
    "merge_rules",
    "merge_style_tables",
    "style_table_payload",
    "transition",
]
