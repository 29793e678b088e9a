"""
HTML Template Registry

Loads and caches the Jinja2 templates that lay out the CV document.
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, Template, TemplateNotFound

from vitae.contexts.templating.helpers import FILTERS, GLOBALS

load_dotenv()
TEMPLATES_PATH = Path(os.getenv("CV_TEMPLATES_PATH", Path(__file__).parent / "templates"))
DEFAULT_TEMPLATE = "cv.html.jinja"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 HTML templates.

    Templates use the standard Jinja2 delimiters and HTML autoescaping.
    Personal content is optional throughout, so undefined values render
    as empty rather than raising; rich text goes through the ``safe``
    filter, which sanitizes before marking it safe.
    """

    def __init__(self, templates_base_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_base_path: Directory holding the templates. Defaults to
                                 CV_TEMPLATES_PATH or the bundled templates/
        """
        if templates_base_path is None:
            templates_base_path = TEMPLATES_PATH

        self.templates_base_path = Path(templates_base_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_base_path)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters.update(FILTERS)
        self.env.globals.update(GLOBALS)

    def get_template(self, template_name: str = DEFAULT_TEMPLATE) -> Template:
        """
        Get a template by file name, loading and caching it if necessary.

        Args:
            template_name: File name relative to the templates directory

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if template_name in self._cache:
            return self._cache[template_name]

        try:
            template = self.env.get_template(template_name)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template '{template_name}' not found in {self.templates_base_path}"
            ) from e

        self._cache[template_name] = template
        return template

    def get_template_path(self, template_name: str = DEFAULT_TEMPLATE) -> Path:
        """Get the file path for a template."""
        return self.templates_base_path / template_name

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, template_name: str) -> bool:
        """Check if a template is in the cache."""
        return template_name in self._cache
