"""
config_manager.py
-----------------
JSON configuration loader.

Features:
- Resolves bare filenames against the package config directory
- Recursively merges loaded data over defaults
- Ignores '_notes' keys for human-readable configs
"""

import os
import json

from cracker_chase.core.debug.debug_logger import DebugLogger


CONFIG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config")


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a JSON configuration file merged over defaults.

    Args:
        filename: Bare filename (looked up in CONFIG_DIR) or a path
        default_dict: Default fallback config
        strict: If True, raise FileNotFoundError instead of falling back

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    path = resolve_path(filename)

    try:
        data = _load_json(path)
    except (json.JSONDecodeError, FileNotFoundError, IOError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _merge_dicts(default_dict, {})

    if not isinstance(data, dict):
        DebugLogger.warn(f"{path} is not a JSON object - using defaults", category="loading")
        return _merge_dicts(default_dict, {})

    return _merge_dicts(default_dict, data)


def resolve_path(filename):
    """Return filename unchanged if it names a path, else its CONFIG_DIR location."""
    if os.path.dirname(filename) or os.path.isabs(filename):
        return filename
    return os.path.join(CONFIG_DIR, filename)


# ===========================================================
# Internals
# ===========================================================

def _load_json(path):
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = {
        key: _merge_dicts(value, {}) if isinstance(value, dict) else value
        for key, value in default.items()
    }
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
