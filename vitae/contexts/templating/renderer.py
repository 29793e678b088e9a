"""
HTML rendering of the CV document.
"""

from pathlib import Path
from typing import Any, Mapping, Optional

from jinja2 import TemplateError
from markupsafe import Markup

from vitae.contexts.styling.normalizer import normalize_style
from vitae.contexts.templating.exceptions import TemplateRenderError
from vitae.contexts.templating.logger import log_html_rendered
from vitae.contexts.templating.registries import DEFAULT_TEMPLATE, TemplateRegistry

_default_registry = TemplateRegistry()


def render_html(
    personal: Mapping[str, Any],
    style: Mapping[str, Any],
    css: str,
    now: str,
    settings: Any = None,
    template_path: Optional[Path] = None,
) -> str:
    """
    Render the CV HTML document.

    The stylesheet is embedded verbatim; personal fields are escaped unless
    they go through the ``safe`` filter.

    Args:
        personal: Parsed personal.json content
        style: Raw style configuration (as loaded, after presets)
        css: Compiled stylesheet text
        now: Generation date shown in the footer (YYYY-MM-DD)
        settings: Normalized StyleSettings for layout switches (normalized from style if omitted)
        template_path: Custom template file (defaults to the bundled cv.html.jinja)

    Returns:
        HTML document text

    Raises:
        TemplateRenderError: If the template is missing or fails to render
    """
    if settings is None:
        settings = normalize_style(style)

    if template_path is None:
        registry = _default_registry
        template_name = DEFAULT_TEMPLATE
    else:
        template_path = Path(template_path)
        registry = TemplateRegistry(template_path.parent)
        template_name = template_path.name

    resolved_path = registry.get_template_path(template_name)

    try:
        template = registry.get_template(template_name)
        html = template.render(
            personal=personal or {},
            style=style or {},
            settings=settings,
            css=Markup(css),
            now=now,
        )
    except TemplateError as e:
        raise TemplateRenderError(
            "Failed to render HTML template", template_path=resolved_path, original_error=e
        ) from e

    log_html_rendered(resolved_path, html)
    return html
