# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Pure enablement decisions over a tools configuration and the feature catalog."""

from __future__ import annotations

from collections.abc import Iterable

from .catalog import DEFAULT_CATALOG, FeatureName, ToolCatalog
from .schema import ToolsConfig


def is_feature_enabled(feature: FeatureName | str, config: ToolsConfig) -> bool:
    """Return whether ``feature`` is enabled in ``config``.

    Features without an explicit override are enabled.

    Args:
        feature: Feature member or its string value.
        config: Configuration snapshot to consult.

    Returns:
        bool: The explicit override when present, otherwise ``True``.
    """

    return config.features.get(FeatureName(feature), True)


def is_tool_enabled(tool: str, config: ToolsConfig, *, catalog: ToolCatalog = DEFAULT_CATALOG) -> bool:
    """Return whether ``tool`` should be exposed under ``config``.

    A tool is disabled when its owning feature is disabled or when it is listed
    in ``tools.disabled``; either condition is sufficient. Tools the catalog does
    not know about are only disabled by an explicit entry.

    Args:
        tool: Tool identifier to check.
        config: Configuration snapshot to consult.
        catalog: Catalog used to find the tool's owning feature.

    Returns:
        bool: ``True`` when the tool is enabled.
    """

    feature = catalog.feature_of(tool)
    if feature is not None and not is_feature_enabled(feature, config):
        return False
    return tool not in config.tools.disabled


def enabled_tools(
    candidates: Iterable[str],
    config: ToolsConfig,
    *,
    catalog: ToolCatalog = DEFAULT_CATALOG,
) -> list[str]:
    """Return the enabled subset of ``candidates`` in input order."""

    return [tool for tool in candidates if is_tool_enabled(tool, config, catalog=catalog)]


def disabled_tools(
    candidates: Iterable[str],
    config: ToolsConfig,
    *,
    catalog: ToolCatalog = DEFAULT_CATALOG,
) -> list[str]:
    """Return the disabled subset of ``candidates`` in input order."""

    return [tool for tool in candidates if not is_tool_enabled(tool, config, catalog=catalog)]


def disabled_features(config: ToolsConfig) -> tuple[FeatureName, ...]:
    """Return features switched off by ``config`` in enumeration order."""

    return tuple(feature for feature in FeatureName if not is_feature_enabled(feature, config))


__all__ = [
    "disabled_features",
    "disabled_tools",
    "enabled_tools",
    "is_feature_enabled",
    "is_tool_enabled",
]
