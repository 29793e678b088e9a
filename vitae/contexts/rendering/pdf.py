"""
PDF Rendering Module

Prints an HTML document to PDF with headless Chromium through Playwright.
"""

import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from vitae.contexts.rendering.logger import _log_debug

load_dotenv()
CHROMIUM_ARGS = shlex.split(os.getenv("CHROMIUM_ARGS", ""))
PAGE_FORMAT = "A4"


@dataclass
class RenderResult:
    """
    Result of rendering a CV.

    Attributes:
        success: Whether a PDF was produced
        pdf_path: Path to generated PDF (None if failed)
        html_path: Path to the intermediate HTML (None if not written)
        log_dir: Directory holding the render log for this run
        errors: Error messages collected along the way
    """

    success: bool
    pdf_path: Optional[Path] = None
    html_path: Optional[Path] = None
    log_dir: Optional[Path] = None
    errors: List[str] = field(default_factory=list)


def browser_args(no_sandbox: bool = False) -> List[str]:
    """Chromium command-line flags for a render."""
    args = ["--font-render-hinting=none", *CHROMIUM_ARGS]
    if no_sandbox:
        args.append("--no-sandbox")
    return args


def render_pdf(html_path: Path, pdf_path: Path, no_sandbox: bool = False) -> RenderResult:
    """
    Print an HTML file to an A4 PDF.

    Page size and margins come from the document's CSS @page rule
    (prefer_css_page_size); backgrounds are printed.

    Args:
        html_path: HTML document to print (must exist)
        pdf_path: Destination PDF path; its directory is created if needed
        no_sandbox: Launch Chromium with --no-sandbox (containers, CI)

    Returns:
        RenderResult; browser failures are reported in ``errors`` rather than raised
    """
    html_path = Path(html_path).resolve()
    pdf_path = Path(pdf_path).resolve()

    if not html_path.exists():
        return RenderResult(success=False, errors=[f"HTML file not found: {html_path}"])

    try:
        pdf_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        return RenderResult(success=False, html_path=html_path, errors=[f"Could not create output directory: {e}"])

    args = browser_args(no_sandbox)
    _log_debug(f"Launching chromium with args: {' '.join(args)}")

    try:
        with sync_playwright() as p:
            browser = p.chromium.launch(headless=True, args=args)
            try:
                page = browser.new_page()
                page.goto(html_path.as_uri(), wait_until="networkidle")
                page.evaluate("document.fonts.ready.then(() => true)")
                page.pdf(
                    path=str(pdf_path),
                    format=PAGE_FORMAT,
                    print_background=True,
                    prefer_css_page_size=True,
                    display_header_footer=False,
                )
            finally:
                browser.close()
    except PlaywrightError as e:
        return RenderResult(success=False, html_path=html_path, errors=[f"Chromium failed: {e}"])

    if not pdf_path.exists():
        return RenderResult(success=False, html_path=html_path, errors=["PDF file was not generated"])

    return RenderResult(success=True, pdf_path=pdf_path, html_path=html_path)
