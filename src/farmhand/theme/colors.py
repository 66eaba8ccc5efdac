from __future__ import annotations

import math
import re


RGB = tuple[int, int, int]

WHITE = "#FFFFFF"
BLACK = "#000000"
MIN_CONTRAST = 4.5

_HEX_SHORT = re.compile(r"^#([0-9a-fA-F]{3})$")
_HEX_LONG = re.compile(r"^#([0-9a-fA-F]{6})$")

_CSS_COLORS: dict[str, str] = {
    "black": "#000000",
    "white": "#ffffff",
    "red": "#ff0000",
    "green": "#008000",
    "blue": "#0000ff",
    "yellow": "#ffff00",
    "orange": "#ffa500",
    "purple": "#800080",
    "pink": "#ffc0cb",
    "teal": "#008080",
    "cyan": "#00ffff",
    "gray": "#808080",
    "grey": "#808080",
    "brown": "#a52a2a",
    "indigo": "#4b0082",
    "lime": "#00ff00",
    "navy": "#000080",
    "maroon": "#800000",
    "olive": "#808000",
    "silver": "#c0c0c0",
    "gold": "#ffd700",
    "tan": "#d2b48c",
    "beige": "#f5f5dc",
    "ivory": "#fffff0",
    "wheat": "#f5deb3",
}


def normalize_hex(value: str | None) -> str:
    """Return ``value`` as upper-case ``#RRGGBB``.

    Short hex is expanded and CSS keywords resolve to their hex value. Any
    other input, including ``None``, falls back to white.
    """
    rgb = _match_color(value)
    if rgb is None:
        return WHITE
    return from_channels(*rgb)


def is_hex(value: object) -> bool:
    return isinstance(value, str) and bool(_HEX_LONG.match(value))


def to_channels(value: str | None) -> RGB:
    rgb = _match_color(value)
    if rgb is None:
        return 0, 0, 0
    return rgb


def from_channels(r: float, g: float, b: float) -> str:
    return f"#{_clamp_channel(r):02X}{_clamp_channel(g):02X}{_clamp_channel(b):02X}"


def mix(color: str, other: str, weight: float = 0.5) -> str:
    ratio = _clamp(weight, 0.0, 1.0)
    first = to_channels(normalize_hex(color))
    second = to_channels(normalize_hex(other))
    return from_channels(
        first[0] * (1.0 - ratio) + second[0] * ratio,
        first[1] * (1.0 - ratio) + second[1] * ratio,
        first[2] * (1.0 - ratio) + second[2] * ratio,
    )


def lighten(color: str, amount: float) -> str:
    return mix(color, WHITE, amount)


def darken(color: str, amount: float) -> str:
    return mix(color, BLACK, amount)


def rgba(color: str, opacity: float) -> str:
    r, g, b = to_channels(normalize_hex(color))
    alpha = round(_clamp(opacity, 0.0, 1.0), 3)
    return f"rgba({r}, {g}, {b}, {alpha:g})"


def contrast_ratio(left: str, right: str) -> float:
    l1 = _relative_luminance(to_channels(normalize_hex(left)))
    l2 = _relative_luminance(to_channels(normalize_hex(right)))
    bright = max(l1, l2)
    dark = min(l1, l2)
    return (bright + 0.05) / (dark + 0.05)


def ensure_contrast(
    background: str,
    preferred: str | None = None,
    *,
    black: str = BLACK,
    white: str = WHITE,
    threshold: float = MIN_CONTRAST,
) -> str:
    """Return a text color legible on ``background``.

    ``preferred`` wins when it clears ``threshold``; otherwise whichever of
    black and white contrasts more.
    """
    if preferred and contrast_ratio(background, preferred) >= threshold:
        return normalize_hex(preferred)
    on_black = contrast_ratio(background, black)
    on_white = contrast_ratio(background, white)
    return normalize_hex(black) if on_black >= on_white else normalize_hex(white)


def _match_color(value: str | None) -> RGB | None:
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    short = _HEX_SHORT.match(text)
    if short:
        chunk = short.group(1)
        return tuple(int(ch * 2, 16) for ch in chunk)  # type: ignore[return-value]
    long = _HEX_LONG.match(text)
    if long:
        chunk = long.group(1)
        return int(chunk[0:2], 16), int(chunk[2:4], 16), int(chunk[4:6], 16)
    css = _CSS_COLORS.get(text.lower())
    if css:
        return _match_color(css)
    return None


def _relative_luminance(rgb: RGB) -> float:
    r, g, b = [_linearize(channel / 255.0) for channel in rgb]
    return round(0.2126 * r + 0.7152 * g + 0.0722 * b, 3)


def _linearize(value: float) -> float:
    if value <= 0.03928:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def _clamp_channel(value: float) -> int:
    return int(max(0, min(255, math.floor(value + 0.5))))


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


__all__ = [
    "BLACK",
    "MIN_CONTRAST",
    "RGB",
    "WHITE",
    "contrast_ratio",
    "darken",
    "ensure_contrast",
    "from_channels",
    "is_hex",
    "lighten",
    "mix",
    "normalize_hex",
    "rgba",
    "to_channels",
]
