#!/usr/bin/env python3
"""
Purpose:
    Wires together the UploadFields application context: configuration, the
    site backing the collaborator interfaces, the field registry, and the
    upload hooks.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from uploadfields.core.config import load_config
from uploadfields.core.hooks import UploadHooks
from uploadfields.core.registry import FieldRegistry
from uploadfields.core.stores import YamlSite


# --- Data model --- #

@dataclass(frozen=True)
class AppContext:
    """Immutable container for configuration, site, registry and hooks."""
    config: Dict[str, Any]
    site: YamlSite
    registry: FieldRegistry
    hooks: UploadHooks


# --- Factory --- #

def build_context(
    *,
    config: Optional[Dict[str, Any]] = None,
    site_path: Optional[Union[str, Path]] = None,
    preload: bool = True,
) -> AppContext:
    """
    Build an `AppContext`.

    Args:
        config:
            Pre-merged configuration. If omitted, `load_config()` is used.
        site_path:
            Optional override for the site file. Defaults to `config['site_path']`.
        preload:
            If True, eagerly loads the field registry.

    Returns:
        AppContext: immutable bundle of config, site, registry and hooks.

    Raises:
        ValueError: if the site file cannot be parsed.
    """
    cfg = config or load_config()

    site = YamlSite.from_file(Path(site_path or cfg.get("site_path", "site.yaml")))
    registry = FieldRegistry(definitions=site, messages=site, categories=site)
    hooks = UploadHooks(registry, pages=site)

    if preload:
        registry.load(clear=True)

    return AppContext(config=cfg, site=site, registry=registry, hooks=hooks)
