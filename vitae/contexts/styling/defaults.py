"""
Default values for VITAE style configurations.

Provides the documented defaults used by:
- normalizer.py (fill every unset field before compilation)
- compiler.py (block order)

Keys use the camelCase names of the style JSON so they can be compared
directly against user configuration.
"""

from typing import Any, Dict

# Meta, contact and badge text never render smaller than this (pt)
META_FONT_FLOOR_PT = 9

# Replaces the configured bullet when the brutalism theme is enabled
BRUTALIST_BULLET = "■"

DEFAULT_STYLE = {
    "fontFamily": "Inter, Roboto, Arial, sans-serif",
    "baseFontSize": 11,  # pt
    "textColor": "#222",
    "accentColor": "#1f5fbf",
    "bgAccent": "#f5f8ff",
    "dividerColor": "#ddd",
    "sectionSpacing": 8,  # mm
    "lineHeight": 1.45,
    "columnGap": 8,  # mm
    "showSidebar": True,
    "sidebarWidth": 64,  # mm
    "headingTransform": "uppercase",
    "headingLetterSpacing": "0.06em",
    "bulletChar": "•",
}

DEFAULT_PAGE_MARGIN = {
    "top": 15,
    "right": 15,
    "bottom": 15,
    "left": 15,
}

DEFAULT_HEADER = {
    "enable": False,
    "photoInHeader": False,
    "height": 42,  # mm
    "showDivider": True,
    "gradient": ["linear-gradient(135deg, rgba(0,0,0,0) 0%, rgba(0,0,0,.05) 100%)"],
    "bg": None,
    "variant": "classic",
}

DEFAULT_CIRCLE_PORTRAIT = {
    "enable": False,
    "gap": 4,  # mm
    "ringColor": None,
    "blobColor": "#eef2ff",
}

DEFAULT_BRUTALISM = {
    "enable": False,
    "borderColor": "#000",
    "borderWidth": 2,  # px
    "shadowOffset": 6,  # px
    "shadow": None,  # derived from shadowOffset and borderColor when unset
    "accentBg": "#ffef5a",
}

# Theme blocks in emission order; later blocks win on shared selectors
BLOCK_ORDER = ("base", "hero", "circle_portrait", "brutalism")


def get_default_style() -> Dict[str, Any]:
    """
    Get a complete style configuration with every documented default.

    Nested feature blocks are included in their disabled state, so the
    result can be used as a fully spelled-out starting point for a
    style.json file.

    Returns:
        Dict with all recognized style fields
    """
    return {
        **DEFAULT_STYLE,
        "pageMargin": DEFAULT_PAGE_MARGIN.copy(),
        "header": {**DEFAULT_HEADER, "gradient": list(DEFAULT_HEADER["gradient"])},
        "circlePortrait": DEFAULT_CIRCLE_PORTRAIT.copy(),
        "brutalism": DEFAULT_BRUTALISM.copy(),
    }
