"""Centralized path configuration for the application."""

import os
from pathlib import Path

def get_data_root() -> Path:
    """
    Get the root directory for data files (config, stopword lists).

    Respects the KEYPHRASE_DATA_DIR environment variable.
    If not set, defaults to the current working directory.
    """
    env_path = os.getenv("KEYPHRASE_DATA_DIR")
    if env_path:
        return Path(env_path)
    return Path(".")

def get_config_file() -> Path:
    """Get the path to the default keyword extraction configuration."""
    return get_data_root() / "config" / "keywords.yaml"
