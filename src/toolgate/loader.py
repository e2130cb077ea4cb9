# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tools configuration loading with explicit, environment, and default path precedence."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict

from .errors import ConfigParseError, ConfigValidationError
from .resolver import disabled_features
from .schema import DEFAULT_TOOLS_CONFIG, ToolsConfig, validate_tools_config

LOGGER = logging.getLogger(__name__)

CONFIG_ENV_VAR: Final[str] = "AZURE_DEVOPS_TOOLS_CONFIG"
DEFAULT_CONFIG_FILENAME: Final[str] = "tools.config.json"


def resolve_config_path(
    path: Path | str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> Path:
    """Return the configuration path honouring argument, environment, and default precedence.

    Args:
        path: Explicit path supplied by the caller.
        environ: Environment mapping consulted for :data:`CONFIG_ENV_VAR`;
            defaults to :data:`os.environ`.
        cwd: Directory anchoring the default filename; defaults to the process
            working directory.

    Returns:
        Path: Path the configuration should be read from. The file may not exist.
    """

    if path:
        return Path(path)
    env = os.environ if environ is None else environ
    if env_path := env.get(CONFIG_ENV_VAR, ""):
        return Path(env_path)
    base = cwd if cwd is not None else Path.cwd()
    return base / DEFAULT_CONFIG_FILENAME


class ToolsConfigLoadResult(BaseModel):
    """Container bundling a loaded configuration with where it came from."""

    model_config = ConfigDict(frozen=True)

    config: ToolsConfig
    source: Path
    from_file: bool


class ToolsConfigLoader:
    """Resolve, read, and validate the tools configuration for this process."""

    def __init__(
        self,
        path: Path | str | None = None,
        *,
        environ: Mapping[str, str] | None = None,
        cwd: Path | None = None,
    ) -> None:
        """Initialise a loader for an explicit path or the resolved default.

        Args:
            path: Optional explicit configuration path.
            environ: Optional environment override used for path resolution.
            cwd: Optional working directory override used for path resolution.
        """

        self._path = path
        self._environ = environ
        self._cwd = cwd

    @property
    def path(self) -> Path:
        """Return the path this loader reads from."""

        return resolve_config_path(self._path, environ=self._environ, cwd=self._cwd)

    def load(self) -> ToolsConfig:
        """Return the loaded configuration without source metadata."""

        return self.load_with_trace().config

    def load_with_trace(self) -> ToolsConfigLoadResult:
        """Return the loaded configuration along with its source.

        Returns:
            ToolsConfigLoadResult: Configuration plus the resolved path and a flag
            telling whether it was read from disk.

        Raises:
            ConfigParseError: If the file is not valid UTF-8 encoded JSON.
            ConfigValidationError: If the JSON does not match the schema.
            OSError: If reading the file fails for any other reason.
        """

        path = self.path
        if not path.exists():
            LOGGER.debug("Tools config not found at %s; all features and tools enabled", path)
            return ToolsConfigLoadResult(config=DEFAULT_TOOLS_CONFIG, source=path, from_file=False)
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ConfigParseError(path, f"file is not valid UTF-8: {exc}") from exc
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigParseError(path, str(exc)) from exc
        try:
            config = validate_tools_config(payload)
        except ConfigValidationError as exc:
            raise exc.with_path(path) from exc
        for line in summarise_config(config, source=path):
            LOGGER.debug(line)
        return ToolsConfigLoadResult(config=config, source=path, from_file=True)


def load_tools_config(path: Path | str | None = None) -> ToolsConfig:
    """Load the tools configuration using the standard path precedence.

    Args:
        path: Optional explicit path; otherwise :data:`CONFIG_ENV_VAR` or
            ``./tools.config.json`` is used.

    Returns:
        ToolsConfig: Loaded configuration, or the default when no file exists.
    """

    return ToolsConfigLoader(path).load()


def summarise_config(config: ToolsConfig, *, source: Path | None = None) -> list[str]:
    """Return human-readable lines describing what ``config`` disables."""

    lines: list[str] = []
    if source is not None:
        lines.append(f"Tools config loaded from: {source}")
    features = disabled_features(config)
    if features:
        lines.append(f"  Disabled features: {', '.join(feature.value for feature in features)}")
    if config.tools.disabled:
        lines.append(f"  Disabled tools: {', '.join(config.tools.disabled)}")
    if not features and not config.tools.disabled:
        lines.append("  All features and tools enabled")
    return lines


__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_FILENAME",
    "ToolsConfigLoadResult",
    "ToolsConfigLoader",
    "load_tools_config",
    "resolve_config_path",
    "summarise_config",
]
