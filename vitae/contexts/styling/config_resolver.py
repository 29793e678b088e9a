"""
Style Preset Resolution

Applies named style presets to a style configuration before compilation.
Presets are composable: later presets override earlier ones, and nested
blocks (header, brutalism, pageMargin, ...) merge key by key.

Examples:
    # Brutalist theme on a single column
    >>> apply_presets(style, ["theme_brutalist", "layout_single_column"])

    # Hero header with the slanted variant
    >>> apply_presets(style, ["theme_hero", "header_slanted"])
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping

from dotenv import load_dotenv
from omegaconf import OmegaConf

from vitae.contexts.styling.logger import _log_debug

load_dotenv()
STYLE_PRESETS_PATH = Path(os.getenv("STYLE_PRESETS_PATH", Path(__file__).parent / "presets.yaml"))


def load_style_presets(config_path: Path = None) -> Dict[str, Any]:
    """
    Load presets.yaml and flatten it to a single-level dict.

    Collapses nested structure: theme.brutalist -> theme_brutalist

    Args:
        config_path: Optional path to presets file (defaults to STYLE_PRESETS_PATH)

    Returns:
        Flattened dict mapping preset names to partial style configs
        Example: {"theme_brutalist": {...}, "layout_compact": {...}}
    """
    if config_path is None:
        config_path = STYLE_PRESETS_PATH

    nested = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    flattened = {}
    for category, presets in nested.items():
        for name, config in presets.items():
            flattened[f"{category}_{name}"] = config

    return flattened


def apply_presets(
    style: Mapping[str, Any],
    preset_names: List[str],
    config_path: Path = None,
) -> Dict[str, Any]:
    """
    Merge named presets over a style configuration.

    The input is not modified. Lists (e.g. header.gradient) are replaced, not
    concatenated.

    Args:
        style: Parsed style.json content
        preset_names: Preset names to apply, in order
        config_path: Optional path to presets file (defaults to STYLE_PRESETS_PATH)

    Returns:
        New style dict with presets applied

    Raises:
        ValueError: If a preset is not found

    Examples:
        >>> apply_presets({"baseFontSize": 12}, ["layout_single_column"])
        {'baseFontSize': 12, 'showSidebar': False}
    """
    if not preset_names:
        return copy.deepcopy(dict(style or {}))

    merged = OmegaConf.create(dict(style or {}))

    presets_dict = load_style_presets(config_path)

    for preset_name in preset_names:
        if preset_name not in presets_dict:
            available = sorted(presets_dict.keys())
            raise ValueError(f"Preset '{preset_name}' not found. Available presets: {available}")

        _log_debug(f"Applying preset: {preset_name}")
        merged = OmegaConf.merge(merged, presets_dict[preset_name])

    # Style values are CSS text, never interpolations
    return OmegaConf.to_container(merged, resolve=False)
