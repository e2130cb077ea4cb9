# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Reloadable holder that answers enablement queries against the current configuration."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from pathlib import Path

from . import resolver
from .catalog import DEFAULT_CATALOG, FeatureName, ToolCatalog
from .loader import ToolsConfigLoader
from .schema import ToolsConfig

LOGGER = logging.getLogger(__name__)


class ToolGate:
    """Own the active configuration snapshot and swap it atomically on reload.

    Snapshots are never mutated. A reload validates a complete new configuration
    before replacing the reference, so concurrent readers observe either the old
    or the new snapshot and never a mixture.
    """

    def __init__(
        self,
        loader: ToolsConfigLoader,
        *,
        catalog: ToolCatalog = DEFAULT_CATALOG,
        config: ToolsConfig | None = None,
    ) -> None:
        """Create a gate, loading the initial configuration unless one is supplied.

        Args:
            loader: Loader used for the initial load and later reloads.
            catalog: Catalog mapping tools to their owning features.
            config: Optional pre-loaded configuration snapshot.
        """

        self._loader = loader
        self._catalog = catalog
        self._lock = threading.Lock()
        self._config = config if config is not None else loader.load()

    @classmethod
    def from_path(cls, path: Path | str | None = None, *, catalog: ToolCatalog = DEFAULT_CATALOG) -> ToolGate:
        """Build a gate reading from ``path`` (or the resolved default path)."""

        return cls(ToolsConfigLoader(path), catalog=catalog)

    @property
    def config(self) -> ToolsConfig:
        """Return the active configuration snapshot."""

        return self._config

    @property
    def catalog(self) -> ToolCatalog:
        """Return the catalog used for feature lookups."""

        return self._catalog

    def reload(self) -> ToolsConfig:
        """Load a fresh configuration and make it the active snapshot.

        Returns:
            ToolsConfig: The newly active snapshot.

        Raises:
            ToolsConfigError: If the new configuration cannot be loaded; the
                previous snapshot remains active.
        """

        with self._lock:
            config = self._loader.load()
            self._config = config
        LOGGER.debug("Tools config reloaded from %s", self._loader.path)
        return config

    def is_feature_enabled(self, feature: FeatureName | str) -> bool:
        """Return whether ``feature`` is enabled in the active snapshot.

        Args:
            feature: Feature member or its string value.

        Returns:
            bool: The explicit override when present, otherwise ``True``.
        """

        return resolver.is_feature_enabled(feature, self._config)

    def is_tool_enabled(self, tool: str) -> bool:
        """Return whether ``tool`` is enabled in the active snapshot.

        Args:
            tool: Tool identifier to check.

        Returns:
            bool: ``False`` when the tool or its owning feature is disabled.
        """

        return resolver.is_tool_enabled(tool, self._config, catalog=self._catalog)

    def enabled_tools(self, candidates: Iterable[str]) -> list[str]:
        """Return the enabled subset of ``candidates`` in input order.

        Args:
            candidates: Tool identifiers to filter.

        Returns:
            list[str]: Candidates enabled under the active snapshot.
        """

        return resolver.enabled_tools(candidates, self._config, catalog=self._catalog)

    def disabled_tools(self, candidates: Iterable[str]) -> list[str]:
        """Return the disabled subset of ``candidates`` in input order.

        Args:
            candidates: Tool identifiers to filter.

        Returns:
            list[str]: Candidates disabled under the active snapshot.
        """

        return resolver.disabled_tools(candidates, self._config, catalog=self._catalog)


__all__ = ["ToolGate"]
