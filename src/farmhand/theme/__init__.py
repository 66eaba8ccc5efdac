"""Theme derivation: brand seeds in, light and dark themes out."""

from farmhand.theme.colors import contrast_ratio, ensure_contrast, mix, normalize_hex
from farmhand.theme.config import parse_theme_config, serialize_theme_config
from farmhand.theme.css import CompiledThemeCss, compile_theme_css
from farmhand.theme.defaults import DEFAULTS, ThemeDefaults
from farmhand.theme.model import Theme, ThemeConfig, ThemeDefinition
from farmhand.theme.registry import DEFAULT_THEME_KEY, ThemeRegistry, default_registry
from farmhand.theme.resolver import build_theme, create_theme_definition
from farmhand.theme.styles import StyleTable, build_style_table

__all__ = [
    "CompiledThemeCss",
    "DEFAULTS",
    "DEFAULT_THEME_KEY",
    "StyleTable",
    "Theme",
    "ThemeConfig",
    "ThemeDefaults",
    "ThemeDefinition",
    "ThemeRegistry",
    "build_style_table",
    "build_theme",
    "compile_theme_css",
    "contrast_ratio",
    "create_theme_definition",
    "default_registry",
    "ensure_contrast",
    "mix",
    "normalize_hex",
    "parse_theme_config",
    "serialize_theme_config",
]
