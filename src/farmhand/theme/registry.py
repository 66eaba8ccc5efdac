from __future__ import annotations

import difflib
from dataclasses import dataclass

from farmhand.errors.base import FarmhandError
from farmhand.errors.guidance import build_guidance_message
from farmhand.theme.config import parse_theme_config
from farmhand.theme.defaults import DEFAULTS, ThemeDefaults
from farmhand.theme.model import ThemeConfig, ThemeDefinition
from farmhand.theme.presets import PRESETS
from farmhand.theme.resolver import create_theme_definition
from farmhand.theme.styles.skins import DEFAULT_SKIN, resolve_skin


DEFAULT_THEME_KEY = "TractorTheme"


@dataclass(frozen=True)
class RegisteredTheme:
    config: ThemeConfig
    skin: str


class ThemeRegistry:
    """Maps theme keys to configs and lazily built definitions.

    Definitions are built on first ``get`` and reused afterwards. Keys keep
    registration order.
    """

    def __init__(self, *, defaults: ThemeDefaults = DEFAULTS) -> None:
        self._defaults = defaults
        self._entries: dict[str, RegisteredTheme] = {}
        self._built: dict[str, ThemeDefinition] = {}

    def register(self, config: ThemeConfig, *, skin: str = DEFAULT_SKIN) -> None:
        if config.id in self._entries:
            raise FarmhandError(
                build_guidance_message(
                    what=f"Theme '{config.id}' is already registered.",
                    why="Theme keys must be unique within a registry.",
                    fix="Pick a different id or use a fresh registry.",
                    example=f'{{"id": "{config.id}Custom", ...}}',
                )
            )
        self._entries[config.id] = RegisteredTheme(config=config, skin=resolve_skin(skin))

    def get(self, key: str) -> ThemeDefinition:
        entry = self._entry(key)
        definition = self._built.get(key)
        if definition is None:
            definition = create_theme_definition(entry.config, defaults=self._defaults)
            self._built[key] = definition
        return definition

    def config_for(self, key: str) -> ThemeConfig:
        return self._entry(key).config

    def skin_for(self, key: str) -> str:
        return self._entry(key).skin

    def keys(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def _entry(self, key: str) -> RegisteredTheme:
        entry = self._entries.get(key)
        if entry is not None:
            return entry
        known = self.keys()
        matches = difflib.get_close_matches(str(key), known, n=1, cutoff=0.6)
        fix = f'Did you mean "{matches[0]}"?' if matches else "Run `farmhand-theme list` to see registered themes."
        raise FarmhandError(
            build_guidance_message(
                what=f"Unknown theme '{key}'.",
                why=f"Registered themes: {', '.join(known) or 'none'}.",
                fix=fix,
                example=f"farmhand-theme show {DEFAULT_THEME_KEY}",
            )
        )


def default_registry(*, defaults: ThemeDefaults = DEFAULTS) -> ThemeRegistry:
    registry = ThemeRegistry(defaults=defaults)
    for payload, skin in PRESETS.values():
        registry.register(parse_theme_config(payload), skin=skin)
    return registry


__all__ = ["DEFAULT_THEME_KEY", "RegisteredTheme", "ThemeRegistry", "default_registry"]
