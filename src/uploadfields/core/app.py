#!/usr/bin/env python3
"""
Purpose:
    Provides a module-level accessor for the UploadFields AppContext, with
    optional reload and overrides for configuration and the site file.
"""
from typing import Optional, Dict, Any, Union
from pathlib import Path

from uploadfields.core.app_context import AppContext, build_context

# --- Module state --- #

_CTX: Optional[AppContext] = None


# --- Public API --- #

def get_context(
    *,
    force_reload: bool = False,
    config_override: Optional[Dict[str, Any]] = None,
    site_path_override: Optional[Union[str, Path]] = None,
) -> AppContext:
    """
    Return the process-wide `AppContext`.

    Args:
        force_reload:
            If True, rebuilds the context even if one is already cached.
        config_override:
            Optional configuration dict to use instead of `load_config()`.
        site_path_override:
            Optional site file used instead of `config['site_path']`.

    Returns:
        A loaded `AppContext` instance.
    """
    global _CTX
    if (
        _CTX is None
        or force_reload
        or config_override
        or site_path_override
    ):
        _CTX = build_context(
            config=config_override,
            site_path=site_path_override,
            preload=True,
        )
    return _CTX
