"""
Stylesheet Block Registry

Loads and caches the Jinja2 templates that make up the stylesheet.
"""

from pathlib import Path
from typing import Dict

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

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

BLOCKS_PATH = Path(__file__).parent / "blocks"


class BlockRegistry:
    """
    Registry for loading and caching stylesheet block templates.

    Blocks are stored in vitae/contexts/styling/blocks/{block_name}/template.css.jinja
    and use custom delimiters to avoid conflicts with CSS braces:
    - Variable: <<< var >>>
    - Block: <%% block %%>
    - Comment: <# comment #>

    Unit formatters from units.py are available as filters
    (e.g. ``<<< s.section_spacing|mm >>>``).
    """

    def __init__(self, blocks_base_path: Path = None):
        """
        Initialize the block registry.

        Args:
            blocks_base_path: Base path for block directories. Defaults to the
                              blocks/ directory bundled with this package
        """
        if blocks_base_path is None:
            blocks_base_path = BLOCKS_PATH

        self.blocks_base_path = blocks_base_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(blocks_base_path)),
            # Missing values raise instead of rendering as empty text
            undefined=StrictUndefined,
            variable_start_string="<<<",
            variable_end_string=">>>",
            block_start_string="<%%",
            block_end_string="%%>",
            comment_start_string="<#",
            comment_end_string="#>",
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
            autoescape=False,
        )
        self.env.filters.update(
            {
                "mm": mm,
                "pt": pt,
                "px": px,
                "num": format_number,
                "css_string": css_string,
                "scale": scale,
                "name_size": name_size,
                "meta_size": meta_size,
                "badge_size": badge_size,
            }
        )
        self.env.globals.update(
            {
                "margin_shorthand": margin_shorthand,
                "grid_columns": grid_columns,
            }
        )

    def get_template(self, block_name: str) -> Template:
        """
        Get a block template by name, loading and caching it if necessary.

        Args:
            block_name: Name of the block (e.g., 'hero')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
        """
        if block_name in self._cache:
            return self._cache[block_name]

        template_path = f"{block_name}/template.css.jinja"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Stylesheet block '{block_name}' not found at {self.blocks_base_path / template_path}"
            ) from e

        self._cache[block_name] = template
        return template

    def get_template_path(self, block_name: str) -> Path:
        """Get the file path for a block's template."""
        return self.blocks_base_path / block_name / "template.css.jinja"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, block_name: str) -> bool:
        """Check if a block template is in the cache."""
        return block_name in self._cache
