"""Unit tests for the stylesheet compiler."""

import copy
import re

import pytest

from vitae.contexts.styling.compiler import build_css, compile_stylesheet, enabled_blocks, render_blocks
from vitae.contexts.styling.normalizer import normalize_style


def _rules(css: str, selector: str) -> list:
    """Bodies of every rule whose selector line starts with ``selector {``."""
    pattern = re.compile(rf"(?m)^{re.escape(selector)} \{{([^}}]*)\}}")
    return [body.strip() for body in pattern.findall(css)]


def _bullets(css: str) -> list:
    return [re.search(r'content: ("[^"]*")', body).group(1) for body in _rules(css, ".list li::before")]


ALL_THEMES = {
    "header": {"enable": True, "photoInHeader": True, "bg": "#fafafa"},
    "circlePortrait": {"enable": True, "ringColor": "#fff"},
    "brutalism": {"enable": True},
}


class TestPurity:
    @pytest.mark.unit
    @pytest.mark.parametrize("style", [{}, {"showSidebar": False}, ALL_THEMES])
    def test_same_input_same_output(self, style):
        assert build_css(style) == build_css(copy.deepcopy(style))

    @pytest.mark.unit
    def test_input_not_modified(self):
        style = copy.deepcopy(ALL_THEMES)
        build_css(style)
        assert style == ALL_THEMES


class TestDefaultCompleteness:
    @pytest.mark.unit
    @pytest.mark.parametrize("style", [None, {}, ALL_THEMES])
    def test_no_missing_value_tokens(self, style):
        css = build_css(style)

        for token in ("undefined", "None", "NaN", "null"):
            assert token not in css
        assert not re.search(r":\s*;", css), "empty declaration value"

    @pytest.mark.unit
    def test_empty_config_defaults(self):
        css = build_css({})

        assert "@page { size: A4; margin: 15mm 15mm 15mm 15mm; }" in css
        assert "font-family: Inter, Roboto, Arial, sans-serif;" in css
        assert "font-size: 11pt;" in css
        assert "line-height: 1.45;" in css
        assert "color: #222;" in css
        assert "grid-template-columns: 64mm 8mm 1fr;" in css
        assert "text-transform: uppercase;" in css
        assert "letter-spacing: 0.06em;" in css
        assert "border-bottom: 1px solid #ddd;" in css
        assert _bullets(css) == ['"•"']

    @pytest.mark.unit
    def test_only_base_block_by_default(self):
        assert enabled_blocks(normalize_style({})) == ("base",)
        assert len(render_blocks(normalize_style({}))) == 1


class TestFontFloor:
    @pytest.mark.unit
    @pytest.mark.parametrize("base", [6, 7, 8])
    def test_meta_sizes_floored(self, base):
        css = build_css({"baseFontSize": base})

        for selector in (".badge", ".item .meta", ".contact", ".footer"):
            (body,) = _rules(css, selector)
            size = int(re.search(r"font-size: (\d+)pt", body).group(1))
            assert size >= 9, f"{selector} at {size}pt"

    @pytest.mark.unit
    def test_sizes_follow_base_above_floor(self):
        css = build_css({"baseFontSize": 13})

        assert "font-size: 11pt" in _rules(css, ".badge")[0]
        assert "font-size: 12pt" in _rules(css, ".item .meta")[0]


class TestSidebarToggle:
    @pytest.mark.unit
    def test_sidebar_disabled(self):
        css = build_css({"showSidebar": False})

        assert ".gap, .sidebar { display: none; }" in css
        assert "grid-template-columns: 1fr;" in _rules(css, ".page")[0]
        assert _rules(css, ".main") == ["grid-column: 1;"]
        assert ".sidebar .block + .block" not in css

    @pytest.mark.unit
    @pytest.mark.parametrize("style", [{}, {"showSidebar": True}])
    def test_sidebar_enabled(self, style):
        css = build_css({**style, "sidebarWidth": 70})

        assert "grid-template-columns: 70mm 8mm 1fr;" in _rules(css, ".page")[0]
        assert _rules(css, ".main") == ["grid-column: 3;"]
        assert "display: none" not in css


class TestThemeIndependence:
    @pytest.mark.unit
    def test_brutalism_alone_has_no_hero_selectors(self):
        css = build_css({"brutalism": {"enable": True}})

        assert "hero" not in css
        assert "header" not in css

    @pytest.mark.unit
    def test_header_alone_keeps_bullet_rules(self):
        base = build_css({"bulletChar": "–"})
        with_header = build_css({"bulletChar": "–", "header": {"enable": True}})

        assert _rules(with_header, ".list li::before") == _rules(base, ".list li::before")

    @pytest.mark.unit
    def test_circle_portrait_alone(self):
        css = build_css({"circlePortrait": {"enable": True}})

        assert ".circle-portrait .photo-frame" in css
        assert "hero" not in css
        assert "is-brutalism" not in css

    @pytest.mark.unit
    def test_all_blocks_in_order(self):
        settings = normalize_style(ALL_THEMES)
        css = compile_stylesheet(settings)

        assert enabled_blocks(settings) == ("base", "hero", "circle_portrait", "brutalism")
        assert css.index("@page") < css.index("/* Hero header */")
        assert css.index("/* Hero header */") < css.index("/* Circle portrait */")
        assert css.index("/* Circle portrait */") < css.index("/* Brutalism theme */")

    @pytest.mark.unit
    def test_enabling_brutalism_keeps_other_blocks(self):
        without = build_css({**ALL_THEMES, "brutalism": {"enable": False}})
        with_brutalism = build_css(ALL_THEMES)

        assert with_brutalism.startswith(without.rstrip("\n"))


class TestBrutalism:
    @pytest.mark.unit
    def test_square_bullet_overrides_configured_char(self):
        css = build_css({"bulletChar": "→", "brutalism": {"enable": True}})

        bullets = _bullets(css)
        assert bullets[0] == '"→"'
        assert bullets[-1] == '"■"'

    @pytest.mark.unit
    def test_borders_shadow_and_square_corners(self):
        css = build_css({"brutalism": {"enable": True, "borderWidth": 3, "borderColor": "#111"}})

        card = _rules(css, ".card")[-1]
        assert "border: 3px solid #111;" in card
        assert "box-shadow: 6px 6px 0 #111;" in card
        assert "border-radius: 0;" in card
        assert "border-radius: 0;" in _rules(css, ".badge")[-1]

    @pytest.mark.unit
    def test_hero_restyled_only_with_header(self):
        css = build_css({"header": {"enable": True}, "brutalism": {"enable": True}})

        heroes = _rules(css, ".hero")
        assert len(heroes) == 2
        assert "border: 2px solid #000;" in heroes[-1]
        assert "background: #ffef5a;" in heroes[-1]


class TestHero:
    @pytest.mark.unit
    def test_defaults(self):
        css = build_css({"header": {"enable": True}})
        (hero,) = _rules(css, ".hero")

        assert "min-height: 42mm;" in hero
        assert "background-image: linear-gradient(135deg, rgba(0,0,0,0) 0%, rgba(0,0,0,.05) 100%);" in hero
        assert "background: " not in hero
        assert "font-size: 18pt" in _rules(css, ".hero .name")[0]
        assert ".hero.hero--slanted" in css
        assert "clip-path: polygon(0 0, 100% 0, 100% calc(100% - 10mm), 0 100%);" in css
        assert ".hero-divider" in css

    @pytest.mark.unit
    def test_background_layers(self):
        css = build_css({"header": {"enable": True, "bg": "#fafafa", "gradient": ["url(a.png)", "linear-gradient(red, blue)"]}})
        (hero,) = _rules(css, ".hero")

        assert "background: #fafafa;" in hero
        assert "background-image: url(a.png), linear-gradient(red, blue);" in hero

    @pytest.mark.unit
    def test_empty_gradient_emits_no_background_image(self):
        css = build_css({"header": {"enable": True, "gradient": []}})

        assert "background-image" not in css

    @pytest.mark.unit
    def test_divider_only_when_enabled(self):
        assert ".hero-divider" not in build_css({"header": {"enable": True, "showDivider": False}})

    @pytest.mark.unit
    def test_with_photo_grid(self):
        css = build_css({"header": {"enable": True, "photoInHeader": True}})

        assert "grid-template-columns: 1fr auto;" in _rules(css, ".hero.with-photo")[0]


class TestCirclePortrait:
    @pytest.mark.unit
    def test_gap_ring(self):
        css = build_css({"circlePortrait": {"enable": True, "gap": 3, "ringColor": "#fff"}})
        (photo,) = _rules(css, ".circle-portrait .photo-frame .photo")

        assert "width: calc(100% - 6mm);" in photo
        assert "height: calc(100% - 6mm);" in photo
        assert "box-shadow: 0 0 0 3mm #fff inset;" in photo

    @pytest.mark.unit
    def test_no_ring_without_color(self):
        css = build_css({"circlePortrait": {"enable": True}})
        (photo,) = _rules(css, ".circle-portrait .photo-frame .photo")

        assert "calc(100% - 8mm)" in photo
        assert "box-shadow" not in photo

    @pytest.mark.unit
    def test_blob_and_cutout(self):
        css = build_css({"circlePortrait": {"enable": True, "blobColor": "#fde"}})

        (blob,) = _rules(css, ".circle-portrait .photo-frame::before")
        assert "background: #fde;" in blob
        assert "border-radius: 40% 60% 55% 45% / 55% 45% 55% 45%;" in blob
        (cutout,) = _rules(css, ".circle-portrait .photo-frame::after")
        assert "right: -4mm;" in cutout
        assert "box-shadow: 0 0 0 1px #ddd inset;" in cutout


class TestFormatting:
    @pytest.mark.unit
    def test_margin_shorthand(self):
        css = build_css({"pageMargin": {"top": 10, "right": 12, "bottom": 14, "left": 16}})

        assert "margin: 10mm 12mm 14mm 16mm;" in _rules(css, "@page")[0]

    @pytest.mark.unit
    def test_integral_floats_print_as_integers(self):
        css = build_css({"sidebarWidth": 60.0, "sectionSpacing": 6.5})

        assert "grid-template-columns: 60mm 8mm 1fr;" in css
        assert "margin-top: 6.5mm;" in _rules(css, ".section")[0]

    @pytest.mark.unit
    def test_zero_section_spacing(self):
        assert "margin-top: 0mm;" in _rules(build_css({"sectionSpacing": 0}), ".section")[0]

    @pytest.mark.unit
    def test_multi_character_bullet_passes_through(self):
        assert _bullets(build_css({"bulletChar": "->"})) == ['"->"']


class TestMalformedValues:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "style",
        [
            {"baseFontSize": "12"},
            {"baseFontSize": None, "sidebarWidth": "wide"},
            {"header": True, "brutalism": "on"},
            {"circlePortrait": {"enable": True, "gap": "big"}},
            {"pageMargin": [1, 2, 3, 4]},
        ],
    )
    def test_never_raises(self, style):
        assert "@page" in build_css(style)

    @pytest.mark.unit
    def test_string_size_surfaces_in_css(self):
        assert "font-size: 12pt;" in build_css({"baseFontSize": "12"})


@pytest.mark.unit
def test_concrete_scenario():
    """Bigger base font, single column, brutalist headings."""
    css = build_css({"baseFontSize": 12, "showSidebar": False, "brutalism": {"enable": True}})

    assert "grid-template-columns: 1fr;" in _rules(css, ".page")[0]
    title = _rules(css, ".section-title")[-1]
    assert "border: 2px solid #000;" in title
    assert "background: #ffef5a;" in title
    assert "font-size: 17pt;" in _rules(css, ".name")[0]


@pytest.mark.unit
def test_newline_bullet_keeps_following_rules():
    css = build_css({"bulletChar": "-\n"})

    assert _bullets(css) == ['"-\\A "']
    assert "font-weight: 600;" in _rules(css, ".contact .label")[0]
