"""
CV Generation Pipeline

End-to-end orchestration: JSON inputs -> stylesheet -> HTML -> PDF.
"""

import os
import time
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from vitae.contexts.rendering.logger import (
    _log_debug,
    _log_info,
    log_render_result,
    log_render_start,
    setup_rendering_logger,
)
from vitae.contexts.rendering.pdf import RenderResult, render_pdf
from vitae.contexts.styling import apply_presets, compile_stylesheet, enabled_blocks, normalize_style
from vitae.contexts.styling.logger import log_stylesheet_built
from vitae.contexts.templating import DocumentLoadError, TemplateRenderError, load_json, render_html
from vitae.utils.timestamp import now, today

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
OUTPUT_PATH = Path(os.getenv("OUTPUT_PATH", "output"))


def build_document(
    personal_path: Path,
    style_path: Path,
    presets: Sequence[str] = (),
    template_path: Optional[Path] = None,
    generated_on: Optional[str] = None,
) -> str:
    """
    Load the inputs and render the CV HTML with its stylesheet embedded.

    Args:
        personal_path: personal.json
        style_path: style.json
        presets: Style preset names applied over style.json, in order
        template_path: Custom HTML template (defaults to the bundled one)
        generated_on: Date printed in the footer (defaults to today)

    Returns:
        HTML document text

    Raises:
        DocumentLoadError: If a JSON input cannot be loaded
        ValueError: If a preset is unknown
        TemplateRenderError: If the template fails
    """
    personal = load_json(personal_path)
    style = apply_presets(load_json(style_path) or {}, list(presets))

    settings = normalize_style(style)
    css = compile_stylesheet(settings)
    log_stylesheet_built(enabled_blocks(settings), css)

    return render_html(
        personal=personal,
        style=style,
        css=css,
        now=generated_on or today(),
        settings=settings,
        template_path=template_path,
    )


def generate_cv(
    personal_path: Path,
    style_path: Path,
    template_path: Optional[Path] = None,
    out_path: Optional[Path] = None,
    html_path: Optional[Path] = None,
    presets: Sequence[str] = (),
    no_sandbox: bool = False,
    verbose: bool = False,
    log_dir: Optional[Path] = None,
) -> RenderResult:
    """
    Render a CV to PDF with logging and organized output.

    Writes the intermediate HTML (``cv.html`` beside the PDF unless
    ``html_path`` is given) and a render.log in a timestamped log directory.

    Args:
        personal_path: personal.json
        style_path: style.json
        template_path: Custom HTML template (defaults to the bundled one)
        out_path: PDF destination (default: OUTPUT_PATH/cv.pdf)
        html_path: Where to write the intermediate HTML
        presets: Style preset names applied over style.json, in order
        no_sandbox: Launch Chromium with --no-sandbox
        verbose: Show debug output on the console
        log_dir: Log directory (default: LOGS_PATH/render_<timestamp>)

    Returns:
        RenderResult with success status, output paths and errors
    """
    pdf_path = Path(out_path) if out_path else OUTPUT_PATH / "cv.pdf"
    html_path = Path(html_path) if html_path else pdf_path.parent / "cv.html"

    if log_dir is None:
        log_dir = LOGS_PATH / f"render_{now()}"
    setup_rendering_logger(Path(log_dir), verbose=verbose)

    document_name = pdf_path.stem
    log_render_start(document_name, personal_path, style_path, presets)
    start_time = time.time()

    try:
        html = build_document(personal_path, style_path, presets, template_path)
    except (DocumentLoadError, TemplateRenderError, ValueError) as e:
        result = RenderResult(success=False, log_dir=Path(log_dir), errors=[str(e)])
        log_render_result(document_name, result, time.time() - start_time)
        return result

    try:
        html_path.parent.mkdir(parents=True, exist_ok=True)
        html_path.write_text(html, encoding="utf-8")
    except OSError as e:
        result = RenderResult(
            success=False, log_dir=Path(log_dir), errors=[f"Could not write HTML to {html_path}: {e}"]
        )
        log_render_result(document_name, result, time.time() - start_time)
        return result

    _log_debug(f"HTML written to: {html_path}")

    _log_info("Printing PDF")
    result = render_pdf(html_path, pdf_path, no_sandbox=no_sandbox)
    result.html_path = html_path
    result.log_dir = Path(log_dir)

    log_render_result(document_name, result, time.time() - start_time)
    return result
