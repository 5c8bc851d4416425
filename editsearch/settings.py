"""
Settings Module for edit-search

Provides persistent storage for harness preferences using JSON.
Settings are stored in config.json in the working directory unless another
path is given.
"""

import copy
import json
import logging
import string
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "strategy_names": ["exhaustive", "all_paths", "heuristic", "bidirectional"],
    "max_depth": 4,
    "max_nodes": 200_000,
    "timeout_sec": 10.0,
    "alphabet": string.ascii_lowercase,  # "" for input characters only
    "seed": 42,
    "debug_enabled": False,
}


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from a JSON file.

    Args:
        path: Settings file (default: config.json)

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    settings_file = Path(path) if path is not None else SETTINGS_FILE
    if not settings_file.exists():
        logger.debug(f"Settings file {settings_file} not found, using defaults")
        return copy.deepcopy(DEFAULT_SETTINGS)

    try:
        with open(settings_file, 'r', encoding='utf-8') as f:
            settings = json.load(f)
        if not isinstance(settings, dict):
            raise ValueError(f"expected a JSON object, got {type(settings).__name__}")

        # Merge with defaults to handle missing keys
        result = copy.deepcopy(DEFAULT_SETTINGS)
        result.update(settings)
        logger.debug(f"Settings loaded: {result}")
        return result

    except (json.JSONDecodeError, ValueError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return copy.deepcopy(DEFAULT_SETTINGS)


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Save settings to a JSON file.

    Args:
        settings: Settings dictionary to save
        path: Settings file (default: config.json)
    """
    settings_file = Path(path) if path is not None else SETTINGS_FILE
    try:
        with open(settings_file, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")
