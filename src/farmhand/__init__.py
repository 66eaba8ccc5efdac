"""
FarmHand: theme derivation engine for the FarmHand field-data-collection app.
"""

__all__ = ["create_theme_definition", "parse_theme_config"]


def create_theme_definition(*args, **kwargs):
    from farmhand.theme.resolver import create_theme_definition as _create

    return _create(*args, **kwargs)


def parse_theme_config(*args, **kwargs):
    from farmhand.theme.config import parse_theme_config as _parse

    return _parse(*args, **kwargs)
