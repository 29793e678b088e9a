"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, verbose: bool = False) -> Path:
    """
    Setup logger for rendering context.

    Sends this run's log to <log_dir>/render.log with a run header.

    Args:
        log_dir: Directory for this rendering session
        verbose: Show DEBUG messages on the console too

    Returns:
        Path to log file

    Example:
        from vitae.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir)
        _log_info("Starting render...")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        run_details={"PDF engine": "playwright/chromium"},
        console_level="DEBUG" if verbose else "INFO",
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(document_name: str, personal_path: Path, style_path: Path, presets) -> None:
    """Log start of a render with its inputs."""
    _log_info(f"Starting render: {document_name}")
    _log_debug(f"  Personal: {personal_path}")
    _log_debug(f"  Style: {style_path}")
    if presets:
        _log_info(f"  Presets: {', '.join(presets)}")


def log_render_result(document_name: str, result, elapsed_time: float) -> None:
    """
    Log render result.

    Args:
        document_name: Document identifier (output file stem)
        result: RenderResult from render_pdf() or generate_cv()
        elapsed_time: Time taken
    """
    if result.success:
        _log_success(f"{document_name}: render succeeded ({elapsed_time:.2f}s)")
        if result.pdf_path:
            _log_info(f"  PDF: {result.pdf_path}")
        if result.html_path:
            _log_debug(f"  HTML: {result.html_path}")
    else:
        _log_error(f"{document_name}: render failed ({elapsed_time:.2f}s)")
        for i, err in enumerate(result.errors, 1):
            _log_error(f"  Error {i}: {err}")
