# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Pydantic models and validation entry points for tools configuration payloads.

Unknown top-level keys (and unknown keys inside ``tools``) are ignored so older
builds keep accepting configuration files written for newer ones. Feature keys
are the exception: they must belong to :class:`~toolgate.catalog.FeatureName`.

A top-level JSON ``null`` is treated like an absent document and normalises to
the default configuration, the same as ``{}``. Nested ``null`` values (for
example ``"features": null``) are still rejected.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Final

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    ValidationError,
    field_serializer,
    field_validator,
)

from .catalog import FEATURE_NAMES, FeatureName
from .errors import ConfigValidationError, ValidationIssue
from .types import IssuePath, JSONValue

_DICT_KEY_MARKER: Final[str] = "[key]"


class ToolsSection(BaseModel):
    """Per-tool overrides nested under the ``tools`` key."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    disabled: tuple[StrictStr, ...] = Field(
        default=(),
        description="Tool names that are disabled regardless of their feature state.",
    )


class ToolsConfig(BaseModel):
    """Normalised, immutable tools configuration snapshot."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    features: Mapping[FeatureName, StrictBool] = Field(
        default_factory=dict,
        validate_default=True,
        description="Feature overrides; features without an entry are enabled.",
        json_schema_extra={"propertyNames": {"enum": list(FEATURE_NAMES)}},
    )
    tools: ToolsSection = Field(default_factory=ToolsSection)

    @field_validator("features", mode="after")
    @classmethod
    def _freeze_features(cls, value: Mapping[FeatureName, bool]) -> Mapping[FeatureName, bool]:
        """Wrap the overrides in a read-only view shared by every reader."""

        return MappingProxyType(dict(value))

    @field_serializer("features")
    def _dump_features(self, value: Mapping[FeatureName, bool]) -> dict[FeatureName, bool]:
        return dict(value)

    @property
    def disabled_tools(self) -> tuple[str, ...]:
        """Return the explicitly disabled tool names."""

        return self.tools.disabled


DEFAULT_TOOLS_CONFIG: Final[ToolsConfig] = ToolsConfig()


def validate_tools_config(payload: JSONValue | Mapping[str, Any] | None) -> ToolsConfig:
    """Validate ``payload`` and return the normalised configuration.

    Args:
        payload: Parsed JSON value. ``None`` and empty objects normalise to the
            default configuration.

    Returns:
        ToolsConfig: Immutable configuration snapshot.

    Raises:
        ConfigValidationError: If the payload violates the schema. Every
            violation is reported, not only the first.
    """

    if payload is None or (isinstance(payload, Mapping) and not payload):
        return DEFAULT_TOOLS_CONFIG
    try:
        return ToolsConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigValidationError(_issues_from_error(exc)) from exc


def collect_validation_issues(payload: JSONValue | Mapping[str, Any] | None) -> tuple[ValidationIssue, ...]:
    """Return every validation issue found in ``payload`` (empty when valid)."""

    try:
        validate_tools_config(payload)
    except ConfigValidationError as exc:
        return exc.issues
    return ()


def generate_config_schema() -> dict[str, Any]:
    """Return the JSON Schema describing the tools configuration file."""

    schema = ToolsConfig.model_json_schema()
    schema.setdefault("$schema", "https://json-schema.org/draft/2020-12/schema")
    return schema


def _issues_from_error(exc: ValidationError) -> tuple[ValidationIssue, ...]:
    issues: list[ValidationIssue] = []
    for error in exc.errors(include_url=False):
        path: IssuePath = tuple(segment for segment in error["loc"] if segment != _DICT_KEY_MARKER)
        issues.append(ValidationIssue(path=path, message=error["msg"]))
    return tuple(issues)


__all__ = [
    "DEFAULT_TOOLS_CONFIG",
    "ToolsConfig",
    "ToolsSection",
    "collect_validation_issues",
    "generate_config_schema",
    "validate_tools_config",
]
