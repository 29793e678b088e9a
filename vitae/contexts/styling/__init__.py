"""
Styling Context

Responsibilities:
- Normalizes style configurations (fills every unset field with its default)
- Derives unit-formatted lengths and floored font sizes
- Compiles the print stylesheet from base and theme blocks
- Applies named style presets

Owns: StyleSettings, stylesheet block templates, presets
Never: Reads personal content or renders documents
"""

from vitae.contexts.styling.compiler import build_css, compile_stylesheet, enabled_blocks
from vitae.contexts.styling.config_resolver import apply_presets, load_style_presets
from vitae.contexts.styling.defaults import get_default_style
from vitae.contexts.styling.normalizer import normalize_style
from vitae.contexts.styling.settings import (
    BrutalismSettings,
    CirclePortraitSettings,
    HeaderSettings,
    PageMargin,
    StyleSettings,
)

__all__ = [
    # Compilation
    "build_css",
    "compile_stylesheet",
    "enabled_blocks",
    # Normalization
    "normalize_style",
    "get_default_style",
    # Presets
    "apply_presets",
    "load_style_presets",
    # Data structures
    "StyleSettings",
    "PageMargin",
    "HeaderSettings",
    "CirclePortraitSettings",
    "BrutalismSettings",
]
