#!/usr/bin/env python3
"""
UploadFields configuration loader.
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Final

from uploadfields.core.utils import merge_dicts, load_json_file

# --- Defaults & locations --- #

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "site_path": str(Path("./site.yaml").resolve()),
    "logging": {"level": "INFO"},
}

GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".config" / "uploadfields" / "config.json"


# --- Public API --- #

def load_config() -> Dict[str, Any]:
    """
    Load UploadFields configuration with layered precedence.

    Order:
        1. Built-in defaults
        2. Global config (~/.config/uploadfields/config.json)
        3. Project config (./uploadfields.json)
        4. Environment overrides:
           - UPLOADFIELDS_SITE_PATH
           - UPLOADFIELDS_LOG_LEVEL

    Returns:
        A merged configuration dictionary.
    """
    # 1) start with defaults
    config = copy.deepcopy(DEFAULT_CONFIG)

    # 2) global config
    config = merge_dicts(config, load_json_file(GLOBAL_CONFIG_PATH))

    # 3) project config
    project_path = Path.cwd() / "uploadfields.json"
    config = merge_dicts(config, load_json_file(project_path))

    # 4) environment overrides
    site_path_env = os.getenv("UPLOADFIELDS_SITE_PATH")
    if site_path_env:
        config["site_path"] = str(Path(site_path_env.strip()).expanduser())

    log_level_env = os.getenv("UPLOADFIELDS_LOG_LEVEL")
    if log_level_env:
        config.setdefault("logging", {})["level"] = log_level_env

    return config
