# src/libdialog/utils/config.py

import copy
import json
import logging
import os

from .paths import get_config_file, get_sounds_path

logger = logging.getLogger('libdialog.config')

DEFAULT_CONFIG = {
    "max_dialogs": 4,
    "screen_top_offset": 135,
    "sounds": {
        "open": "dialog_open",
        "close": "dialog_close"
    },
    "sounds_dir": str(get_sounds_path()),
    "theme": "Plain",
    "debug": False
}


def merge_config(overrides=None):
    """
    Merge user settings over the defaults.

    Args:
        overrides (dict): User settings, may be None

    Returns:
        dict: A fresh configuration dictionary
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    for key, value in (overrides or {}).items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key].update(value)
        else:
            config[key] = value

    max_dialogs = config["max_dialogs"]
    if isinstance(max_dialogs, bool) or not isinstance(max_dialogs, int) or max_dialogs < 1:
        logger.warning("Invalid max_dialogs %r, using %d", max_dialogs, DEFAULT_CONFIG["max_dialogs"])
        config["max_dialogs"] = DEFAULT_CONFIG["max_dialogs"]
    return config


def load_config(config_path=None):
    """Load configuration from ~/.config/libdialog/config.json."""
    config_path = config_path or get_config_file()
    try:
        with open(config_path) as f:
            config = merge_config(json.load(f))
            logger.debug("Loaded config from %s", config_path)
            return config
    except (OSError, ValueError) as e:
        logger.warning("Configuration error (%s), using defaults", e)
        default_config = merge_config()
        try:
            os.makedirs(os.path.dirname(config_path), exist_ok=True)
            with open(config_path, 'w') as f:
                json.dump(default_config, f, indent=4)
            logger.info("Saved default config to %s", config_path)
        except OSError as e:
            logger.warning("Could not save default configuration: %s", e)
        return default_config
