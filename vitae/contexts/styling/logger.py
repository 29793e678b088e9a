"""
Styling context logger.

Provides logging interface for styling context with automatic [style] prefix.
All styling modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[style]"


# Wrapper functions with automatic [style] prefix


def _log_info(message: str) -> None:
    """Log info message with [style] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [style] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_stylesheet_built(blocks, css: str) -> None:
    """Log which blocks went into a compiled stylesheet."""
    _log_info(f"Stylesheet compiled from blocks: {', '.join(blocks)}")
    _log_debug(f"  Size: {len(css)} characters")
