#!/usr/bin/env python3
from dataclasses import FrozenInstanceError

import pytest
import yaml

import uploadfields.core.app as app
import uploadfields.core.app_context as ac


def _site_file(tmp_path):
    path = tmp_path / "site.yaml"
    path.write_text(yaml.safe_dump({
        "definitions": [{"id": 1, "title": "UploadField-text-Artist"}],
    }), encoding="utf-8")
    return path


def test_build_context_preloads_registry(tmp_path):
    path = _site_file(tmp_path)
    ctx = ac.build_context(config={"site_path": str(path)})

    assert ctx.registry.loaded is True
    assert ctx.registry.get(1).key == "artist"
    assert ctx.hooks.registry is ctx.registry
    assert ctx.hooks.pages is ctx.site
    with pytest.raises(FrozenInstanceError):
        ctx.config = {}  # type: ignore[misc]


def test_build_context_uses_load_config_and_site_override(tmp_path, monkeypatch):
    path = _site_file(tmp_path)
    cfg = {"site_path": str(tmp_path / "ignored.yaml")}
    monkeypatch.setattr(ac, "load_config", lambda: cfg)

    ctx = ac.build_context(site_path=path, preload=False)

    assert ctx.config is cfg
    assert ctx.site.path == path
    assert ctx.registry.loaded is False


def test_build_context_propagates_bad_site(tmp_path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("definitions: [\n", encoding="utf-8")
    with pytest.raises(ValueError):
        ac.build_context(config={"site_path": str(bad)})


def test_get_context_caches_until_reload(tmp_path, monkeypatch):
    path = _site_file(tmp_path)
    calls = []

    def _build(**kwargs):
        calls.append(kwargs)
        return object()

    monkeypatch.setattr(app, "_CTX", None)
    monkeypatch.setattr(app, "build_context", _build)

    first = app.get_context()
    assert app.get_context() is first
    assert len(calls) == 1

    app.get_context(site_path_override=path)
    assert calls[-1]["site_path"] == path
    app.get_context(force_reload=True)
    assert len(calls) == 3
