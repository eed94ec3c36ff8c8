# ============================================================================
# CLAUDE CONTEXT - COLOR/OPACITY CODEC
# ============================================================================
# STATUS: Service - color value conversion
# PURPOSE: Merge hex color and opacity into engine colors and split them back
# EXPORTS: merge, split_hex, split_opacity, to_css, parse_color
# DEPENDENCIES: Standard library only
# ============================================================================
"""
Color/Opacity Codec.

Merges a hex color and an opacity into one engine color value and splits an
engine color value back into hex color and opacity.

Engine color values are CSS strings (``#rgb``, ``#rrggbb``, ``#rrggbbaa``,
``rgb(r, g, b)``, ``rgba(r, g, b, a)``, basic color keywords such as
``red``) or ``[r, g, b]`` / ``[r, g, b, a]``
sequences. Alpha is always a float in 0-1; merged values are emitted as
``rgba(r, g, b, a)`` strings.
"""

import re
from typing import Optional, Sequence, Tuple, Union

from exceptions import ColorParseError

ColorValue = Union[str, Sequence[float]]
Channels = Tuple[int, int, int, Optional[float]]

_HEX_PATTERN = re.compile(r"^#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_FUNC_PATTERN = re.compile(r"^rgba?\(([^)]*)\)$", re.IGNORECASE)

# CSS basic color keywords plus the common extras engines accept
_NAMED_COLORS = {
    "black": (0, 0, 0, None),
    "silver": (192, 192, 192, None),
    "gray": (128, 128, 128, None),
    "grey": (128, 128, 128, None),
    "white": (255, 255, 255, None),
    "maroon": (128, 0, 0, None),
    "red": (255, 0, 0, None),
    "purple": (128, 0, 128, None),
    "fuchsia": (255, 0, 255, None),
    "magenta": (255, 0, 255, None),
    "green": (0, 128, 0, None),
    "lime": (0, 255, 0, None),
    "olive": (128, 128, 0, None),
    "yellow": (255, 255, 0, None),
    "navy": (0, 0, 128, None),
    "blue": (0, 0, 255, None),
    "teal": (0, 128, 128, None),
    "aqua": (0, 255, 255, None),
    "cyan": (0, 255, 255, None),
    "orange": (255, 165, 0, None),
    "transparent": (0, 0, 0, 0.0),
}

# Alpha values derived from 8-bit channels are rounded to this many places
_ALPHA_PRECISION = 3


def _format_number(value: float) -> str:
    """12.0 -> '12', 0.50 -> '0.5'."""
    return f"{value:g}"


def _clamp_channel(value: float) -> int:
    return max(0, min(255, int(round(value))))


def _clamp_alpha(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


def _parse_hex(value: str) -> Optional[Channels]:
    match = _HEX_PATTERN.match(value)
    if not match:
        return None
    digits = match.group(1)
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    alpha = None
    if len(digits) == 8:
        alpha = round(int(digits[6:8], 16) / 255, _ALPHA_PRECISION)
    return r, g, b, alpha


def _parse_function(value: str) -> Optional[Channels]:
    match = _FUNC_PATTERN.match(value)
    if not match:
        return None
    parts = [p.strip() for p in match.group(1).split(",")]
    if len(parts) not in (3, 4):
        return None
    try:
        numbers = [float(p) for p in parts]
    except ValueError:
        return None
    alpha = _clamp_alpha(numbers[3]) if len(numbers) == 4 else None
    return _clamp_channel(numbers[0]), _clamp_channel(numbers[1]), _clamp_channel(numbers[2]), alpha


def parse_color(value: ColorValue) -> Channels:
    """
    Parse an engine color value into ``(r, g, b, alpha)``.

    Alpha is None when the value has no alpha channel.

    Raises:
        ColorParseError: value is not a supported color representation
    """
    if isinstance(value, str):
        text = value.strip()
        channels = _parse_hex(text) or _parse_function(text) or _NAMED_COLORS.get(text.lower())
        if channels is None:
            raise ColorParseError(value)
        return channels

    if isinstance(value, (list, tuple)) and len(value) in (3, 4):
        try:
            r, g, b = (_clamp_channel(float(c)) for c in value[:3])
            alpha = _clamp_alpha(value[3]) if len(value) == 4 else None
        except (TypeError, ValueError) as e:
            raise ColorParseError(value) from e
        return r, g, b, alpha

    raise ColorParseError(value)


def merge(color: Optional[ColorValue], opacity: Optional[float]) -> Optional[ColorValue]:
    """
    Combine a color and an opacity into one engine color value.

    Args:
        color: Hex color (any parseable engine color is accepted)
        opacity: Opacity in 0-1, applied as the alpha channel

    Returns:
        ``rgba(r, g, b, a)`` when both are given, the color unchanged when
        opacity is None, None when color is absent.
    """
    if color is None or color == "":
        return None
    if opacity is None:
        return color
    r, g, b, _ = parse_color(color)
    return f"rgba({r}, {g}, {b}, {_format_number(_clamp_alpha(opacity))})"


def split_hex(value: Optional[ColorValue]) -> Optional[str]:
    """Color channels of an engine color as ``#rrggbb``; None when absent."""
    if value is None or value == "":
        return None
    r, g, b, _ = parse_color(value)
    return f"#{r:02x}{g:02x}{b:02x}"


def split_opacity(value: Optional[ColorValue]) -> Optional[float]:
    """Alpha of an engine color in 0-1; None when absent or without alpha."""
    if value is None or value == "":
        return None
    return parse_color(value)[3]


def to_css(value: Optional[ColorValue]) -> Optional[str]:
    """
    Engine color as a CSS string.

    Strings are returned verbatim; channel sequences become ``rgb()`` or
    ``rgba()`` strings.
    """
    if value is None or isinstance(value, str):
        return value
    r, g, b, alpha = parse_color(value)
    if alpha is None:
        return f"rgb({r}, {g}, {b})"
    return f"rgba({r}, {g}, {b}, {_format_number(alpha)})"
