"""
Rendering Context

Responsibilities:
- Prints HTML documents to PDF (headless Chromium)
- Orchestrates a full CV run: inputs -> stylesheet -> HTML -> PDF
- Manages output files and per-run logs

Owns: PDF generation, output management
Never: Modifies stylesheet or template content
"""

from vitae.contexts.rendering.pdf import RenderResult, render_pdf
from vitae.contexts.rendering.pipeline import build_document, generate_cv

__all__ = ["RenderResult", "render_pdf", "build_document", "generate_cv"]
