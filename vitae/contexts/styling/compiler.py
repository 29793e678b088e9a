"""
Stylesheet Compiler

Compiles a style configuration into the print stylesheet embedded in the CV
HTML document.

The stylesheet is an ordered list of independently rendered blocks:

    base -> hero -> circle_portrait -> brutalism

``base`` is always present; every theme block is appended only when its
feature flag is enabled. Blocks that restyle base selectors (brutalism on
.card, .badge, .section-title and bullets) come after base in this order,
so they win on source order.

Compilation is a pure function of the configuration: no clock, no
randomness, no state carried between calls.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple

from vitae.contexts.styling.defaults import BLOCK_ORDER, BRUTALIST_BULLET
from vitae.contexts.styling.normalizer import normalize_style
from vitae.contexts.styling.registries import BlockRegistry
from vitae.contexts.styling.settings import StyleSettings

_registry = BlockRegistry()


def enabled_blocks(settings: StyleSettings) -> Tuple[str, ...]:
    """
    Names of the blocks to emit for these settings, in emission order.

    Example:
        >>> enabled_blocks(normalize_style({"brutalism": {"enable": True}}))
        ('base', 'brutalism')
    """
    flags = {
        "base": True,
        "hero": settings.header.enabled,
        "circle_portrait": settings.circle_portrait.enabled,
        "brutalism": settings.brutalism.enabled,
    }
    return tuple(name for name in BLOCK_ORDER if flags[name])


def _block_context(settings: StyleSettings) -> Dict[str, Any]:
    """Variables available to every block template."""
    return {
        "s": settings,
        "h": settings.header,
        "c": settings.circle_portrait,
        "b": settings.brutalism,
        "brutalist_bullet": BRUTALIST_BULLET,
    }


def render_blocks(settings: StyleSettings, registry: Optional[BlockRegistry] = None) -> List[str]:
    """
    Render each enabled block to CSS text.

    Args:
        settings: Normalized style settings
        registry: Block template registry (defaults to the module registry)

    Returns:
        List of CSS blocks in emission order
    """
    registry = registry or _registry
    context = _block_context(settings)
    return [registry.get_template(name).render(context).strip() for name in enabled_blocks(settings)]


def compile_stylesheet(settings: StyleSettings, registry: Optional[BlockRegistry] = None) -> str:
    """
    Compile normalized settings into the complete stylesheet.

    Args:
        settings: Normalized style settings
        registry: Block template registry (defaults to the module registry)

    Returns:
        Stylesheet text, blocks separated by a blank line
    """
    return "\n\n".join(render_blocks(settings, registry)) + "\n"


def build_css(style: Optional[Mapping[str, Any]] = None) -> str:
    """
    Normalize a raw style configuration and compile it to CSS.

    Args:
        style: Parsed style.json content; any field may be missing

    Returns:
        Stylesheet text

    Examples:
        >>> css = build_css({"pageMargin": {"top": 10, "right": 12, "bottom": 14, "left": 16}})
        >>> "margin: 10mm 12mm 14mm 16mm;" in css
        True
    """
    return compile_stylesheet(normalize_style(style))
