# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exceptions raised while building the catalog and loading tool configuration."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .types import IssuePath

ROOT_PATH_LABEL = "<root>"


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """A single schema violation located by its path inside the payload."""

    path: IssuePath
    message: str

    @property
    def dotted_path(self) -> str:
        """Return ``path`` joined with dots, or ``<root>`` for top-level issues."""

        if not self.path:
            return ROOT_PATH_LABEL
        return ".".join(str(segment) for segment in self.path)

    def render(self) -> str:
        """Return the issue formatted as ``dotted.path: message``."""

        return f"{self.dotted_path}: {self.message}"


class CatalogIntegrityError(RuntimeError):
    """Raised when the feature catalog violates its disjointness invariant."""


class ToolsConfigError(Exception):
    """Base class for failures that abort loading a tools configuration."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Create the error with a message and the optional offending file.

        Args:
            message: Human-readable description of the failure.
            path: Configuration file that triggered the failure, when known.
        """

        super().__init__(message)
        self.path = path


class ConfigParseError(ToolsConfigError):
    """Raised when a configuration file does not contain valid JSON."""

    def __init__(self, path: Path, detail: str) -> None:
        """Create the error from the offending file and the decoder message.

        Args:
            path: Configuration file that failed to parse.
            detail: Message reported by the JSON decoder.
        """

        super().__init__(f"Invalid JSON in tools config file at {path}: {detail}", path=path)
        self.detail = detail


ParseError = ConfigParseError


class ConfigValidationError(ToolsConfigError):
    """Raised when a configuration payload is well-formed JSON but violates the schema."""

    def __init__(self, issues: Iterable[ValidationIssue], *, path: Path | None = None) -> None:
        """Create the error from every validation issue that was found.

        Args:
            issues: Structured issues describing each violation.
            path: Configuration file the payload was read from, when known.
        """

        self.issues: tuple[ValidationIssue, ...] = tuple(issues)
        super().__init__(_format_validation_message(self.issues, path), path=path)

    def with_path(self, path: Path) -> ConfigValidationError:
        """Return a copy of this error attributed to ``path``."""

        return ConfigValidationError(self.issues, path=path)


def _format_validation_message(issues: tuple[ValidationIssue, ...], path: Path | None) -> str:
    header = f"Invalid tools config file at {path}:" if path is not None else "Invalid tools config:"
    lines = [f"  - {issue.render()}" for issue in issues]
    return "\n".join([header, *lines])


__all__ = [
    "CatalogIntegrityError",
    "ConfigParseError",
    "ConfigValidationError",
    "ParseError",
    "ToolsConfigError",
    "ValidationIssue",
]
