"""Unit tests for unit formatting and derived sizes."""

import pytest

from vitae.contexts.styling.normalizer import normalize_style
from vitae.contexts.styling.settings import PageMargin
from vitae.contexts.styling.units import (
    badge_size,
    css_string,
    format_number,
    grid_columns,
    margin_shorthand,
    meta_size,
    mm,
    name_size,
    pt,
    px,
    scale,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [(10, "10"), (10.0, "10"), (2.5, "2.5"), (0, "0"), ("0.06em", "0.06em")],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.mark.unit
def test_length_formatters():
    assert mm(15) == "15mm"
    assert mm(7.5) == "7.5mm"
    assert pt(11) == "11pt"
    assert px(2) == "2px"


@pytest.mark.unit
def test_scale_numeric_and_passthrough():
    assert mm(scale(4, 2)) == "8mm"
    assert mm(scale(2.5, 2)) == "5mm"
    assert scale("wide", 2) == "wide"


@pytest.mark.unit
def test_name_size():
    assert name_size(12) == 17
    assert name_size(12, hero=True) == 19


@pytest.mark.unit
@pytest.mark.parametrize("base", [6, 7, 8, 8.5, 9, 10])
def test_meta_and_badge_sizes_never_below_floor(base):
    assert meta_size(base) >= 9
    assert badge_size(base) >= 9


@pytest.mark.unit
def test_meta_and_badge_sizes_above_floor():
    assert meta_size(12) == 11
    assert badge_size(12) == 10
    assert badge_size(11) == 9


@pytest.mark.unit
def test_derived_sizes_pass_through_non_numbers():
    """Bad types come back unchanged instead of raising."""
    assert name_size("big") == "big"
    assert meta_size(None) is None
    assert badge_size(True) is True


@pytest.mark.unit
def test_margin_shorthand_order():
    margin = PageMargin(top=10, right=12, bottom=14, left=16)
    assert margin_shorthand(margin) == "10mm 12mm 14mm 16mm"


@pytest.mark.unit
def test_grid_columns():
    assert grid_columns(normalize_style({})) == "64mm 8mm 1fr"
    assert grid_columns(normalize_style({"sidebarWidth": 70, "columnGap": 6})) == "70mm 6mm 1fr"
    assert grid_columns(normalize_style({"showSidebar": False})) == "1fr"


@pytest.mark.unit
def test_css_string_escapes_quotes_and_backslashes():
    assert css_string("•") == '"•"'
    assert css_string('a"b') == '"a\\"b"'
    assert css_string("\\") == '"\\\\"'


@pytest.mark.unit
def test_css_string_escapes_newlines():
    assert css_string("a\nb") == '"a\\A b"'
    assert css_string("a\r\nb") == '"a\\A b"'
