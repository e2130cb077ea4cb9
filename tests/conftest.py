# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from toolgate.loader import CONFIG_ENV_VAR

ConfigWriter = Callable[..., Path]


@pytest.fixture(autouse=True)
def isolated_config_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test from an empty directory with no config override in the environment."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def write_config(tmp_path: Path) -> ConfigWriter:
    """Return a helper that writes a JSON payload (or raw text) to a config file."""

    def _write(payload: object, *, name: str = "tools.config.json", raw: bool = False) -> Path:
        path = tmp_path / name
        text = payload if raw and isinstance(payload, str) else json.dumps(payload, indent=2)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
