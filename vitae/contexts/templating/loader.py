"""
JSON document loading for personal content and style configuration.
"""

import json
from pathlib import Path
from typing import Any

from vitae.contexts.templating.exceptions import DocumentLoadError
from vitae.contexts.templating.logger import _log_debug


def load_json(path: Path) -> Any:
    """
    Read and parse a UTF-8 JSON document.

    No schema validation is done here; the style normalizer and the HTML
    template both tolerate missing fields.

    Args:
        path: Path to the JSON file

    Returns:
        Parsed JSON value

    Raises:
        DocumentLoadError: If the file cannot be read or is not valid JSON
    """
    path = Path(path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentLoadError("Could not read JSON document", path=path, original_error=e) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise DocumentLoadError("Invalid JSON document", path=path, original_error=e) from e

    _log_debug(f"Loaded {path}")
    return data
