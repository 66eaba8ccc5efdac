"""Built-in theme presets.

Presets are plain config payloads in the same camelCase shape accepted by
``parse_theme_config`` so they double as examples for hand-written themes.
"""

from __future__ import annotations

from typing import Mapping


FONT_ASSET_ROOT = "fonts"


def font_asset(family: str, filename: str, *, local_name: str | None = None) -> dict[str, str]:
    return {
        "fontFamily": family,
        "fontStyle": "normal",
        "fontDisplay": "swap",
        "src": f"local('{local_name or family}'), url({FONT_ASSET_ROOT}/{filename}) format('truetype')",
    }


ANTON = font_asset("Anton", "Anton-Regular.ttf")
ANTONIO = font_asset("Antonio", "Antonio-VariableFont_wght.ttf")
BASKERVVILLE = font_asset("Baskervville", "Baskervville-VariableFont_wght.ttf")
VOLTEC = font_asset("Voltec", "Voltec-Regular.ttf")
TELEGRAF = font_asset("Telegraf", "Telegraf-Regular.ttf")
ICELAND = font_asset("Iceland", "Iceland-Regular.ttf")
RUSSO_ONE = font_asset("Russo One", "RussoOne-Regular.ttf")
NASALIZATION = font_asset("Nasalization", "Nasalization-Regular.ttf")
FREDOKA = font_asset("Fredoka", "Fredoka-VariableFont_wght.ttf")

# Shared seeds for the single-brand presets.
_STATUS_ROLES = {
    "info": {"main": "#0066b3", "light": "#42a5f5", "dark": "#004c8c", "contrastText": "#ffffff"},
    "success": {"main": "#2e7d32", "contrastText": "#ffffff"},
    "warning": {"main": "#f57c00", "light": "#ff9800", "dark": "#e65100", "contrastText": "#ffffff"},
    "error": {"main": "#ed1c24", "light": "#ff5252", "dark": "#c41e3a", "contrastText": "#ffffff"},
}
_CLASSIC_NEUTRALS = {"surface": "#f1f1f1", "surfaceDark": "#1e1e1e"}
_INK_SECONDARY = {"main": "#000000", "light": "#000000", "dark": "#333333", "contrastText": "#ffffff"}

TRACTOR_THEME: dict[str, object] = {
    "id": "TractorTheme",
    "displayName": "Tractor Technicians (default)",
    "flavorText": '"\U0001F69C"',
    "brand": {
        "primary": {"main": "#339900", "dark": "#2d8500", "light": "#4db82e", "contrastText": "#ffffff"},
        "secondary": {"main": "#ffd400", "dark": "#f9a825", "light": "#fff59d", "contrastText": "#000000"},
        "info": _STATUS_ROLES["info"],
        "success": {"main": "#00C853", "contrastText": "#ffffff"},
        "warning": _STATUS_ROLES["warning"],
        "error": _STATUS_ROLES["error"],
    },
    "neutrals": {"surface": "#f1f1f1", "surfaceDark": "#121212", "border": "#e0e0e0", "borderDark": "#515761"},
    "fonts": [ANTON, ANTONIO, BASKERVVILLE],
    "typography": {
        "display": "Anton",
        "headline": "Antonio",
        "ui": "Antonio",
        "body": "Baskervville",
        "headings": {"display": ["h1", "h2", "h3", "h4"], "headline": ["h5", "h6"]},
    },
}

THUNDER_THEME: dict[str, object] = {
    "id": "ThunderTheme",
    "displayName": "Thunder",
    "brand": {
        "primary": {"main": "#ff0000", "dark": "#B20000", "light": "#FF3333", "contrastText": "#ffffff"},
        "secondary": _INK_SECONDARY,
        **_STATUS_ROLES,
    },
    "neutrals": _CLASSIC_NEUTRALS,
    "fonts": [VOLTEC, ANTON, TELEGRAF],
    "typography": {
        "display": "Voltec",
        "headline": "Anton",
        "ui": "Anton",
        "body": "Telegraf",
        "headings": {"display": ["h1", "h2", "h3"], "headline": ["h4", "h5", "h6"]},
    },
}

MUTTON_THEME: dict[str, object] = {
    "id": "MuttonTheme",
    "displayName": "Mutton",
    "brand": {
        "primary": {"main": "#c4b454", "dark": "#897D3A", "light": "#CFC376", "contrastText": "#000000"},
        "secondary": _INK_SECONDARY,
        **_STATUS_ROLES,
    },
    "neutrals": _CLASSIC_NEUTRALS,
    "fonts": [RUSSO_ONE, ICELAND],
    "typography": {
        "display": "Russo One",
        "ui": "Russo One",
        "body": "Iceland",
        "headings": {"display": ["h1", "h2", "h3", "h4", "h5", "h6"], "headline": []},
    },
}

THEME_NOT_FOUND: dict[str, object] = {
    "id": "ThemeNotFound",
    "displayName": "404: Theme Not Found",
    "brand": {
        "primary": {"main": "#731daa", "dark": "#501476", "light": "#8F4ABB", "contrastText": "#ffffff"},
        "secondary": {"main": "#ffc52e", "dark": "#f9a825", "light": "#da9a08", "contrastText": "#000000"},
        **_STATUS_ROLES,
    },
    "neutrals": _CLASSIC_NEUTRALS,
    "fonts": [NASALIZATION, FREDOKA],
    "typography": {
        "display": "Nasalization",
        "ui": "Nasalization",
        "body": "Fredoka",
        "headings": {"display": ["h1", "h2", "h3", "h4", "h5", "h6"], "headline": []},
    },
}

RUNESCAPE_THEME: dict[str, object] = {
    "id": "RuneScapeTheme",
    "displayName": "Dungeon Master",
    "flavorText": "Blades dull, armor breaks, but the will to grind endures.",
    "brand": {
        "primary": "#c69b3f",
        "secondary": "#477a6a",
        "info": "#4c6fbf",
        "success": "#6b9c3c",
        "warning": "#d4891a",
        "error": "#c44747",
    },
    "neutrals": {"surface": "#f3e0bb", "surfaceDark": "#0c1118", "border": "#b89a64", "borderDark": "#4a3f2c"},
    "fonts": [ICELAND, BASKERVVILLE, ANTON],
    "typography": {
        "display": '"Cinzel Decorative", "Iceland", "Cinzel", "Trajan Pro", serif',
        "headline": '"Uncial Antiqua", "Iceland", "Cinzel", serif',
        "body": '"Cormorant Garamond", "Baskervville", "Iowan Old Style", serif',
        "ui": '"MedievalSharp", "Antonio", sans-serif',
        "headings": {"display": ["h1", "h2"], "headline": ["h3", "h4", "h5", "h6"]},
    },
    "shape": {"borderRadius": 2},
}

WINDOWS_XP_THEME: dict[str, object] = {
    "id": "WindowsXPTheme",
    "displayName": "Frutiger",
    "flavorText": '"Your changes have been saved, probably...',
    "brand": {
        "primary": {"main": "#245edb", "light": "#5b8df5", "dark": "#1242a0", "contrastText": "#ffffff"},
        "secondary": {"main": "#2c9d2c", "light": "#57c657", "dark": "#1d701d", "contrastText": "#ffffff"},
        "info": {"main": "#f0c300", "contrastText": "#1a1a1a"},
        "success": {"main": "#2c9d2c", "light": "#57c657", "dark": "#1d701d", "contrastText": "#ffffff"},
        "warning": {"main": "#f0a000", "contrastText": "#1a1a1a"},
        "error": {"main": "#c74343", "contrastText": "#ffffff"},
    },
    "neutrals": {"surface": "#dfe9f5", "surfaceDark": "#11141a", "border": "#94a5c6", "borderDark": "#0d0f14"},
    "typography": {
        "display": '"Trebuchet MS", "Tahoma", sans-serif',
        "body": '"Tahoma", "MS Sans Serif", "Segoe UI", sans-serif',
        "ui": '"Tahoma", "MS Sans Serif", "Segoe UI", sans-serif',
    },
    "shape": {"borderRadius": 0},
}

# key -> (payload, skin), in menu order
PRESETS: dict[str, tuple[Mapping[str, object], str]] = {
    "TractorTheme": (TRACTOR_THEME, "farmhand"),
    "ThemeNotFound": (THEME_NOT_FOUND, "farmhand"),
    "ThunderTheme": (THUNDER_THEME, "farmhand"),
    "MuttonTheme": (MUTTON_THEME, "farmhand"),
    "RuneScapeTheme": (RUNESCAPE_THEME, "parchment"),
    "WindowsXPTheme": (WINDOWS_XP_THEME, "retro"),
}


__all__ = [
    "FONT_ASSET_ROOT",
    "MUTTON_THEME",
    "PRESETS",
    "RUNESCAPE_THEME",
    "THEME_NOT_FOUND",
    "THUNDER_THEME",
    "TRACTOR_THEME",
    "WINDOWS_XP_THEME",
    "font_asset",
]
