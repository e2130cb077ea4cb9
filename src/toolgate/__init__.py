# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Feature and tool enablement resolution driven by a JSON configuration file."""

from __future__ import annotations

from .catalog import DEFAULT_CATALOG, FEATURE_NAMES, FEATURE_TOOLS, FeatureName, ToolCatalog, feature_of, tools_of
from .errors import (
    CatalogIntegrityError,
    ConfigParseError,
    ConfigValidationError,
    ParseError,
    ToolsConfigError,
    ValidationIssue,
)
from .gate import ToolGate
from .loader import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_FILENAME,
    ToolsConfigLoader,
    ToolsConfigLoadResult,
    load_tools_config,
    resolve_config_path,
)
from .resolver import disabled_features, disabled_tools, enabled_tools, is_feature_enabled, is_tool_enabled
from .schema import (
    DEFAULT_TOOLS_CONFIG,
    ToolsConfig,
    ToolsSection,
    collect_validation_issues,
    generate_config_schema,
    validate_tools_config,
)

__all__ = [
    "CONFIG_ENV_VAR",
    "CatalogIntegrityError",
    "ConfigParseError",
    "ConfigValidationError",
    "DEFAULT_CATALOG",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_TOOLS_CONFIG",
    "FEATURE_NAMES",
    "FEATURE_TOOLS",
    "FeatureName",
    "ParseError",
    "ToolCatalog",
    "ToolGate",
    "ToolsConfig",
    "ToolsConfigError",
    "ToolsConfigLoadResult",
    "ToolsConfigLoader",
    "ToolsSection",
    "ValidationIssue",
    "collect_validation_issues",
    "disabled_features",
    "disabled_tools",
    "enabled_tools",
    "feature_of",
    "generate_config_schema",
    "is_feature_enabled",
    "is_tool_enabled",
    "load_tools_config",
    "resolve_config_path",
    "tools_of",
    "validate_tools_config",
]
