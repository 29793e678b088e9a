"""
Style Normalization

Turns a raw, possibly partial style configuration (parsed style.json) into a
complete StyleSettings record.

Rules:
- A field is unset when its key is missing, null, or an empty string; unset
  fields take the documented default from defaults.py
- Zero is a real value and is kept
- Nested blocks (pageMargin, header, circlePortrait, brutalism) normalize
  independently; a missing or non-mapping block means "all defaults", which
  for theme blocks is the disabled state
- Unknown keys are ignored
- Values are not type-checked; a wrong type comes out as wrong CSS
"""

from typing import Any, Mapping, Optional

from vitae.contexts.styling.defaults import (
    DEFAULT_BRUTALISM,
    DEFAULT_CIRCLE_PORTRAIT,
    DEFAULT_HEADER,
    DEFAULT_PAGE_MARGIN,
    DEFAULT_STYLE,
)
from vitae.contexts.styling.settings import (
    BrutalismSettings,
    CirclePortraitSettings,
    HeaderSettings,
    PageMargin,
    StyleSettings,
)
from vitae.contexts.styling.units import format_number


def _is_unset(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def _pick(raw: Mapping[str, Any], key: str, defaults: Mapping[str, Any]) -> Any:
    """Return raw[key] unless it is unset, else the default for key."""
    value = raw.get(key)
    return defaults[key] if _is_unset(value) else value


def _section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    """Get a nested block, treating anything that is not a mapping as absent."""
    value = raw.get(key)
    return value if isinstance(value, Mapping) else {}


def _flag(value: Any, default: bool) -> bool:
    return default if value is None else bool(value)


def _normalize_page_margin(raw: Mapping[str, Any]) -> PageMargin:
    margin = _section(raw, "pageMargin")
    return PageMargin(**{side: _pick(margin, side, DEFAULT_PAGE_MARGIN) for side in DEFAULT_PAGE_MARGIN})


def _normalize_gradient(value: Any) -> tuple:
    """Gradient layers as a tuple of strings; a single string is one layer."""
    if value is None:
        return tuple(DEFAULT_HEADER["gradient"])
    if isinstance(value, str):
        return (value,) if value.strip() else ()
    if isinstance(value, (list, tuple)):
        return tuple(str(layer) for layer in value if not _is_unset(layer))
    return (str(value),)


def _normalize_variant(value: Any) -> str:
    if _is_unset(value):
        return DEFAULT_HEADER["variant"]
    variant = str(value).strip()
    # Older style files spell the variant as its CSS class
    if variant.startswith("hero--"):
        variant = variant[len("hero--") :]
    return variant


def _normalize_header(raw: Mapping[str, Any]) -> HeaderSettings:
    header = _section(raw, "header")
    bg = header.get("bg")
    return HeaderSettings(
        enabled=_flag(header.get("enable"), DEFAULT_HEADER["enable"]),
        photo_in_header=_flag(header.get("photoInHeader"), DEFAULT_HEADER["photoInHeader"]),
        height=_pick(header, "height", DEFAULT_HEADER),
        show_divider=_flag(header.get("showDivider"), DEFAULT_HEADER["showDivider"]),
        gradient=_normalize_gradient(header.get("gradient")),
        bg=None if _is_unset(bg) else str(bg),
        variant=_normalize_variant(header.get("variant")),
    )


def _normalize_circle_portrait(raw: Mapping[str, Any]) -> CirclePortraitSettings:
    portrait = _section(raw, "circlePortrait")
    ring_color = portrait.get("ringColor")
    return CirclePortraitSettings(
        enabled=_flag(portrait.get("enable"), DEFAULT_CIRCLE_PORTRAIT["enable"]),
        gap=_pick(portrait, "gap", DEFAULT_CIRCLE_PORTRAIT),
        ring_color=None if _is_unset(ring_color) else str(ring_color),
        blob_color=_pick(portrait, "blobColor", DEFAULT_CIRCLE_PORTRAIT),
    )


def _normalize_brutalism(raw: Mapping[str, Any]) -> BrutalismSettings:
    brutalism = _section(raw, "brutalism")
    border_color = _pick(brutalism, "borderColor", DEFAULT_BRUTALISM)
    shadow = brutalism.get("shadow")
    if _is_unset(shadow):
        # Hard shadow: equal x/y offset, no blur, in the border color
        offset = format_number(_pick(brutalism, "shadowOffset", DEFAULT_BRUTALISM))
        shadow = f"{offset}px {offset}px 0 {border_color}"
    return BrutalismSettings(
        enabled=_flag(brutalism.get("enable"), DEFAULT_BRUTALISM["enable"]),
        border_color=border_color,
        border_width=_pick(brutalism, "borderWidth", DEFAULT_BRUTALISM),
        shadow=shadow,
        accent_bg=_pick(brutalism, "accentBg", DEFAULT_BRUTALISM),
    )


def normalize_style(raw: Optional[Mapping[str, Any]] = None) -> StyleSettings:
    """
    Resolve a raw style configuration into a complete StyleSettings.

    Args:
        raw: Parsed style.json content. None or a non-mapping value is
             treated as an empty configuration.

    Returns:
        StyleSettings with every field populated

    Examples:
        >>> normalize_style({}).base_font_size
        11
        >>> normalize_style({"showSidebar": False}).show_sidebar
        False
        >>> normalize_style({"brutalism": {"enable": True}}).brutalism.shadow
        '6px 6px 0 #000'
    """
    if not isinstance(raw, Mapping):
        raw = {}

    return StyleSettings(
        font_family=_pick(raw, "fontFamily", DEFAULT_STYLE),
        base_font_size=_pick(raw, "baseFontSize", DEFAULT_STYLE),
        text_color=_pick(raw, "textColor", DEFAULT_STYLE),
        accent_color=_pick(raw, "accentColor", DEFAULT_STYLE),
        bg_accent=_pick(raw, "bgAccent", DEFAULT_STYLE),
        divider_color=_pick(raw, "dividerColor", DEFAULT_STYLE),
        section_spacing=_pick(raw, "sectionSpacing", DEFAULT_STYLE),
        line_height=_pick(raw, "lineHeight", DEFAULT_STYLE),
        page_margin=_normalize_page_margin(raw),
        column_gap=_pick(raw, "columnGap", DEFAULT_STYLE),
        # Only an explicit false turns the sidebar off
        show_sidebar=raw.get("showSidebar") is not False,
        sidebar_width=_pick(raw, "sidebarWidth", DEFAULT_STYLE),
        heading_transform=_pick(raw, "headingTransform", DEFAULT_STYLE),
        heading_letter_spacing=_pick(raw, "headingLetterSpacing", DEFAULT_STYLE),
        bullet_char=_pick(raw, "bulletChar", DEFAULT_STYLE),
        header=_normalize_header(raw),
        circle_portrait=_normalize_circle_portrait(raw),
        brutalism=_normalize_brutalism(raw),
    )
