"""
Settings Module - Generation limits and rendering options kept in config.json.

Keys:
    debug_enabled: DEBUG logging without the --debug flag
    max_completion_attempts: Grid fills tried before generation gives up
    max_generation_attempts: Puzzles tried when targeting a difficulty
    require_all_tier_strategies: Targeted puzzles must use every strategy of their tier
    image_cell_size: Cell edge in pixels for PNG output

The file is read from the working directory; missing keys fall back to
DEFAULT_SETTINGS and command line flags override what is loaded.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

# Looked up relative to the working directory
SETTINGS_FILE = Path("config.json")

# Used for any key missing from config.json
DEFAULT_SETTINGS: Dict[str, Any] = {
    "debug_enabled": False,
    "max_completion_attempts": 100,
    "max_generation_attempts": 500,
    "require_all_tier_strategies": True,
    "image_cell_size": 48
}


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from config.json.

    Args:
        path: Settings file (defaults to SETTINGS_FILE)

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    path = path or SETTINGS_FILE
    if not path.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            settings = json.load(f)

        # Merge with defaults to handle missing keys
        result = DEFAULT_SETTINGS.copy()
        result.update(settings)
        logger.debug(f"Settings loaded: {result}")
        return result

    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Save settings to config.json.

    Args:
        settings: Settings dictionary to save
        path: Settings file (defaults to SETTINGS_FILE)
    """
    path = path or SETTINGS_FILE
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")
