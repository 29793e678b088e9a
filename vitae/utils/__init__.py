"""
Shared utilities for VITAE.

Common functionality used across contexts:
- Run logging (loguru sinks and run header)
- Timestamps
"""

from vitae.utils.logger import setup_logger
from vitae.utils.timestamp import now, now_exact, today

__all__ = ["setup_logger", "now", "now_exact", "today"]
