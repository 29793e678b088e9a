"""
Templating Context

Responsibilities:
- Loads personal and style JSON documents
- Manages the HTML template system (templates/cv.html.jinja)
- Sanitizes rich text from personal content
- Renders the CV document with the compiled stylesheet embedded

Owns: JSON loading, HTML templates, template helpers
Never: Makes styling decisions or produces PDFs
"""

from vitae.contexts.templating.exceptions import DocumentLoadError, TemplateRenderError
from vitae.contexts.templating.loader import load_json
from vitae.contexts.templating.registries import TemplateRegistry
from vitae.contexts.templating.renderer import render_html
from vitae.contexts.templating.sanitizer import sanitize_rich

__all__ = [
    "load_json",
    "render_html",
    "sanitize_rich",
    "TemplateRegistry",
    # Errors
    "DocumentLoadError",
    "TemplateRenderError",
]
