"""
Unit formatting and derived sizes for stylesheet generation.

Every length written into the stylesheet goes through the formatters here,
so a given quantity always renders the same way (10 and 10.0 both become
"10mm"). Values that are not numbers are passed through untouched: type
checking is the caller's job and a bad value shows up as bad CSS, never as
an exception.
"""

from typing import Any

from vitae.contexts.styling.defaults import META_FONT_FLOOR_PT
from vitae.contexts.styling.settings import PageMargin, StyleSettings


def is_number(value: Any) -> bool:
    """True for int/float values, excluding bools."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def format_number(value: Any) -> str:
    """
    Format a number the way it should appear in CSS.

    Integral floats drop their fractional part; everything else uses the
    shortest round-tripping representation.

    Examples:
        >>> format_number(10.0)
        '10'
        >>> format_number(2.5)
        '2.5'
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def mm(value: Any) -> str:
    """Millimeter length."""
    return f"{format_number(value)}mm"


def pt(value: Any) -> str:
    """Point length."""
    return f"{format_number(value)}pt"


def px(value: Any) -> str:
    """Pixel length."""
    return f"{format_number(value)}px"


def scale(value: Any, factor: float) -> Any:
    """Multiply a numeric value, leaving non-numeric values as they are."""
    return value * factor if is_number(value) else value


def name_size(base_font_size: Any, hero: bool = False) -> Any:
    """Size of the name heading: base + 5pt, or base + 7pt inside the hero banner."""
    if not is_number(base_font_size):
        return base_font_size
    return base_font_size + (7 if hero else 5)


def meta_size(base_font_size: Any) -> Any:
    """Size of meta and contact text: one point below base, floored at 9pt."""
    if not is_number(base_font_size):
        return base_font_size
    return max(META_FONT_FLOOR_PT, base_font_size - 1)


def badge_size(base_font_size: Any) -> Any:
    """Size of badge labels: two points below base, floored at 9pt."""
    if not is_number(base_font_size):
        return base_font_size
    return max(META_FONT_FLOOR_PT, base_font_size - 2)


def margin_shorthand(margin: PageMargin) -> str:
    """
    Build the CSS margin shorthand in top-right-bottom-left order.

    Example:
        >>> margin_shorthand(PageMargin(top=10, right=12, bottom=14, left=16))
        '10mm 12mm 14mm 16mm'
    """
    return " ".join(mm(side) for side in (margin.top, margin.right, margin.bottom, margin.left))


def grid_columns(settings: StyleSettings) -> str:
    """Grid track list for .page: sidebar, gap and flexible main, or a single column."""
    if settings.show_sidebar:
        return f"{mm(settings.sidebar_width)} {mm(settings.column_gap)} 1fr"
    return "1fr"


def css_string(value: Any) -> str:
    """Quote a value as a CSS string literal (used for ::before content)."""
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    # A raw newline would leave the string unterminated
    text = text.replace("\r\n", "\n").replace("\r", "\n").replace("\n", "\\A ")
    return f'"{text}"'
