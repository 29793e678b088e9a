"""
Style Settings Data Structures

Defines the fully-resolved settings records produced by the normalizer.
Every field holds a concrete value; optional theme blocks carry an
``enabled`` flag alongside their defaulted parameters.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class PageMargin:
    """
    Page margins in millimeters.

    Attributes:
        top, right, bottom, left: Margin per side (mm)
    """

    top: Any = 15
    right: Any = 15
    bottom: Any = 15
    left: Any = 15


@dataclass(frozen=True)
class HeaderSettings:
    """
    Hero banner settings.

    Attributes:
        enabled: Whether the hero block is emitted
        photo_in_header: Two-column hero with a circular photo on the right
        height: Minimum banner height (mm)
        show_divider: Emit the .hero-divider rule
        gradient: Background image layers, joined with ", "
        bg: Solid background below the gradient layers (None to omit)
        variant: "classic" or "slanted"
    """

    enabled: bool = False
    photo_in_header: bool = False
    height: Any = 42
    show_divider: bool = True
    gradient: Tuple[str, ...] = ()
    bg: Optional[str] = None
    variant: str = "classic"

    @property
    def css_class(self) -> str:
        """Class the template puts on the hero element for this variant."""
        return f"hero--{self.variant}"


@dataclass(frozen=True)
class CirclePortraitSettings:
    """
    Circular portrait settings.

    Attributes:
        enabled: Whether the circle portrait block is emitted
        gap: Width of the ring between frame and image (mm)
        ring_color: Inset ring color (None to omit the ring)
        blob_color: Color of the organic blob behind the photo
    """

    enabled: bool = False
    gap: Any = 4
    ring_color: Optional[str] = None
    blob_color: str = "#eef2ff"


@dataclass(frozen=True)
class BrutalismSettings:
    """
    Brutalist theme settings.

    Attributes:
        enabled: Whether the brutalism block is emitted
        border_color: Solid border color
        border_width: Border width (px)
        shadow: Hard offset box-shadow value
        accent_bg: Flat background behind section headings
    """

    enabled: bool = False
    border_color: str = "#000"
    border_width: Any = 2
    shadow: str = "6px 6px 0 #000"
    accent_bg: str = "#ffef5a"


@dataclass(frozen=True)
class StyleSettings:
    """
    Complete, normalized style configuration.

    Built by normalize_style(); consumed by the stylesheet compiler and
    exposed to the HTML template as ``settings``.
    """

    font_family: str
    base_font_size: Any
    text_color: str
    accent_color: str
    bg_accent: str
    divider_color: str
    section_spacing: Any
    line_height: Any
    page_margin: PageMargin
    column_gap: Any
    show_sidebar: bool
    sidebar_width: Any
    heading_transform: str
    heading_letter_spacing: str
    bullet_char: str
    header: HeaderSettings = field(default_factory=HeaderSettings)
    circle_portrait: CirclePortraitSettings = field(default_factory=CirclePortraitSettings)
    brutalism: BrutalismSettings = field(default_factory=BrutalismSettings)
