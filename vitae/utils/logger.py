"""
Loguru sinks for a VITAE render run.

A run gets one log directory: ``<context>.log`` inside it records everything
at DEBUG, the console shows INFO and up (DEBUG with --verbose). The first
lines of every log file say which vitae version rendered what, from where.
"""

import sys
from pathlib import Path
from typing import Mapping, Optional

from loguru import logger

from vitae import __version__
from vitae.utils.timestamp import now_exact

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(
    context_name: str,
    log_dir: Path,
    run_details: Optional[Mapping[str, object]] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Point loguru at a run's log directory and write the run header.

    Any previously configured sinks are dropped, so calling this again for
    the next run does not keep writing into the previous run's file.

    Args:
        context_name: Log file stem (e.g. "render" -> render.log)
        log_dir: Directory for this run; created if missing
        run_details: Extra header lines (e.g. {"PDF engine": "playwright/chromium"})
        console_level: Minimum console level

    Returns:
        Path to the log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_run_header(run_details)

    return log_file


def log_run_header(run_details: Optional[Mapping[str, object]] = None) -> None:
    """Log the vitae version, start time and invocation of this run."""
    logger.info("-" * 60)
    logger.info(f"vitae {__version__} run started {now_exact()}")
    logger.info(f"Invocation: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python {sys.version.split()[0]}")

    for key, value in (run_details or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("-" * 60)
