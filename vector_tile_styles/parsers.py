"""
Style Value Parsers.

Pure functions turning raw style-document scalars into canonical renderer
values:
- parse_color: hex / rgb() / named colors -> "rgba(r, g, b, a)" strings
- parse_font: text-font + text-size -> CSS font shorthand

Plus the literal-value coercions the compiler uses so that expression arrays
and other non-literal values fall back to defaults instead of raising.

Usage:
    parse_color("#ff0000", 0.5)          # "rgba(255, 0, 0, 0.5)"
    parse_font(["Noto Sans"], 14)        # "14px Noto Sans"

Created: 19 OCT 2026
"""

import math
from typing import Any, Optional, Sequence, Tuple

from config.defaults import StyleDefaults

OPAQUE_BLACK = "rgba(0, 0, 0, 1)"

NAMED_COLORS = {
    "white": "#ffffff",
    "black": "#000000",
    "red": "#ff0000",
    "green": "#008000",
    "blue": "#0000ff",
}

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


# ============================================================================
# COLOR
# ============================================================================

def parse_color(value: Any, opacity: Any = 1) -> str:
    """
    Convert a style color value to a canonical rgba string.

    Args:
        value: Raw color from the style document (hex, rgb(), named, ...)
        opacity: Opacity applied to hex and named colors, and to rgb() strings

    Returns:
        Renderer color string; opaque black for non-string input
    """
    if not isinstance(value, str):
        return OPAQUE_BLACK

    if value.startswith("#"):
        rgb = _hex_to_rgb(value[1:])
        if rgb is None:
            return OPAQUE_BLACK
        r, g, b = rgb
        return f"rgba({r}, {g}, {b}, {format_number(opacity)})"

    if value.startswith("rgb"):
        if opacity != 1 and value.startswith("rgb("):
            body = value[len("rgb("):]
            return "rgba(" + body.replace(")", f", {format_number(opacity)})", 1)
        return value

    named = NAMED_COLORS.get(value)
    if named is not None:
        return parse_color(named, opacity)

    return value


def _hex_to_rgb(digits: str) -> Optional[Tuple[int, int, int]]:
    """Read the first six hex digits as three 2-digit channels."""
    if len(digits) in (3, 4):
        digits = "".join(c * 2 for c in digits)
    digits = digits[:6]
    if len(digits) < 6 or not set(digits) <= _HEX_DIGITS:
        return None
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


# ============================================================================
# FONT
# ============================================================================

def parse_font(font_families: Sequence[str] = (), font_size: Any = StyleDefaults.TEXT_SIZE) -> str:
    """
    Build a CSS font shorthand from text-font and text-size.

    Args:
        font_families: Font stack from layout.text-font
        font_size: Size in pixels from layout.text-size

    Returns:
        "{size}px {families}", with "Arial, sans-serif" when no family is given
    """
    families = []
    # A nested list means an expression such as ["literal", [...]]
    if isinstance(font_families, (list, tuple)) and all(isinstance(f, str) for f in font_families):
        families = [f for f in font_families if f]
    family_list = ", ".join(families) if families else StyleDefaults.FONT_FAMILY
    size = literal_number(font_size, StyleDefaults.TEXT_SIZE)
    return f"{format_number(size)}px {family_list}"


# ============================================================================
# LITERAL COERCION
# ============================================================================

def is_number(value: Any) -> bool:
    """
    True for finite int/float literals.

    Bools are not numbers in a style document. Integers too large for a float
    and NaN/Infinity (which json.loads accepts) count as non-literal.
    """
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def literal_number(value: Any, default: float) -> float:
    """Return value if it is a literal number, else default."""
    return value if is_number(value) else default


def literal_string(value: Any, default: Optional[str]) -> Optional[str]:
    """Return value if it is a literal string, else default."""
    return value if isinstance(value, str) else default


def literal_pair(value: Any) -> Optional[Tuple[float, float]]:
    """Return a 2-number literal array as a tuple, else None."""
    if isinstance(value, (list, tuple)) and len(value) == 2 and all(is_number(v) for v in value):
        return value[0], value[1]
    return None


def literal_number_array(value: Any) -> Optional[Tuple[float, ...]]:
    """Return a non-empty literal number array as a tuple, else None."""
    if isinstance(value, (list, tuple)) and value and all(is_number(v) for v in value):
        return tuple(value)
    return None


def format_number(value: Any) -> str:
    """Render numbers the way style strings expect: 1 not 1.0, 0.5 as-is."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
