# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Static registry describing which tools belong to each feature."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Final

from .errors import CatalogIntegrityError


class FeatureName(str, Enum):
    """Enumerate the feature groups that tools are organised under."""

    USERS = "users"
    ORGANIZATIONS = "organizations"
    PROJECTS = "projects"
    REPOSITORIES = "repositories"
    WORK_ITEMS = "work-items"
    SEARCH = "search"
    PULL_REQUESTS = "pull-requests"
    PIPELINES = "pipelines"
    WIKIS = "wikis"

    @classmethod
    def from_raw(cls, raw: str) -> FeatureName | None:
        """Return the member whose value is ``raw``.

        Args:
            raw: Feature identifier as written in configuration or on the CLI.

        Returns:
            FeatureName | None: Matching member, or ``None`` when ``raw`` is unknown.
        """

        try:
            return cls(raw)
        except ValueError:
            return None


FEATURE_NAMES: Final[tuple[str, ...]] = tuple(feature.value for feature in FeatureName)

FEATURE_TOOLS: Final[Mapping[FeatureName, tuple[str, ...]]] = MappingProxyType(
    {
        FeatureName.USERS: ("get_me",),
        FeatureName.ORGANIZATIONS: ("list_organizations",),
        FeatureName.PROJECTS: ("list_projects", "get_project", "get_project_details"),
        FeatureName.REPOSITORIES: (
            "get_repository",
            "get_repository_details",
            "list_repositories",
            "get_file_content",
            "get_all_repositories_tree",
            "get_repository_tree",
            "create_branch",
            "create_commit",
            "list_commits",
        ),
        FeatureName.WORK_ITEMS: (
            "list_work_items",
            "get_work_item",
            "create_work_item",
            "update_work_item",
            "manage_work_item_link",
        ),
        FeatureName.SEARCH: ("search_code", "search_wiki", "search_work_items"),
        FeatureName.PULL_REQUESTS: (
            "create_pull_request",
            "list_pull_requests",
            "get_pull_request_comments",
            "add_pull_request_comment",
            "update_pull_request",
            "get_pull_request_changes",
            "get_pull_request_checks",
            "update_pull_request_comment",
        ),
        FeatureName.PIPELINES: (
            "list_pipelines",
            "get_pipeline",
            "list_pipeline_runs",
            "get_pipeline_run",
            "download_pipeline_artifact",
            "pipeline_timeline",
            "get_pipeline_log",
            "trigger_pipeline",
        ),
        FeatureName.WIKIS: (
            "get_wikis",
            "get_wiki_page",
            "create_wiki",
            "update_wiki_page",
            "list_wiki_pages",
            "create_wiki_page",
        ),
    },
)


@dataclass(frozen=True, slots=True)
class ToolCatalog:
    """Immutable feature-to-tools registry with a derived reverse index."""

    _feature_tools: Mapping[FeatureName, tuple[str, ...]]
    _tool_features: Mapping[str, FeatureName] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Freeze the forward mapping and build the tool-to-feature index.

        Raises:
            CatalogIntegrityError: If a tool is listed under more than one feature.
        """

        forward: dict[FeatureName, tuple[str, ...]] = {}
        reverse: dict[str, FeatureName] = {}
        for raw_feature, tools in self._feature_tools.items():
            feature = FeatureName(raw_feature)
            forward[feature] = tuple(tools)
            for tool in forward[feature]:
                owner = reverse.get(tool)
                if owner is not None and owner is not feature:
                    raise CatalogIntegrityError(
                        f"Tool '{tool}' is registered under both '{owner.value}' and '{feature.value}'",
                    )
                reverse[tool] = feature
        object.__setattr__(self, "_feature_tools", MappingProxyType(forward))
        object.__setattr__(self, "_tool_features", MappingProxyType(reverse))

    @classmethod
    def from_mapping(cls, mapping: Mapping[FeatureName | str, Sequence[str]]) -> ToolCatalog:
        """Build a catalog from a mapping keyed by features or their string values.

        Args:
            mapping: Feature identifiers mapped to the tool names they own.

        Returns:
            ToolCatalog: Catalog validated for tool uniqueness.
        """

        return cls({FeatureName(feature): tuple(tools) for feature, tools in mapping.items()})

    @property
    def features(self) -> tuple[FeatureName, ...]:
        """Return the features registered in the catalog."""

        return tuple(self._feature_tools)

    @property
    def tool_index(self) -> Mapping[str, FeatureName]:
        """Return the read-only tool-to-feature index."""

        return self._tool_features

    def tools_of(self, feature: FeatureName | str) -> tuple[str, ...]:
        """Return the ordered tools owned by ``feature``.

        Args:
            feature: Feature member or its string value.

        Returns:
            tuple[str, ...]: Tool identifiers in catalog order, empty when the
            feature registers no tools.
        """

        return self._feature_tools.get(FeatureName(feature), ())

    def feature_of(self, tool: str) -> FeatureName | None:
        """Return the feature owning ``tool`` or ``None`` for unregistered tools."""

        return self._tool_features.get(tool)

    def all_tools(self) -> tuple[str, ...]:
        """Return every registered tool in catalog order."""

        return tuple(self._tool_features)

    def __contains__(self, tool: object) -> bool:
        """Return ``True`` when ``tool`` is registered under some feature.

        Args:
            tool: Candidate tool identifier.

        Returns:
            bool: Whether the reverse index knows ``tool``.
        """

        return tool in self._tool_features

    def __iter__(self) -> Iterator[tuple[FeatureName, tuple[str, ...]]]:
        """Iterate over ``(feature, tools)`` pairs in catalog order.

        Returns:
            Iterator[tuple[FeatureName, tuple[str, ...]]]: Feature and owned tools.
        """

        return iter(self._feature_tools.items())

    def __len__(self) -> int:
        """Return the number of registered tools.

        Returns:
            int: Size of the reverse index.
        """

        return len(self._tool_features)


DEFAULT_CATALOG: Final[ToolCatalog] = ToolCatalog(FEATURE_TOOLS)


def tools_of(feature: FeatureName | str) -> tuple[str, ...]:
    """Return the tools owned by ``feature`` in the default catalog."""

    return DEFAULT_CATALOG.tools_of(feature)


def feature_of(tool: str) -> FeatureName | None:
    """Return the feature owning ``tool`` in the default catalog."""

    return DEFAULT_CATALOG.feature_of(tool)


__all__ = [
    "DEFAULT_CATALOG",
    "FEATURE_NAMES",
    "FEATURE_TOOLS",
    "FeatureName",
    "ToolCatalog",
    "feature_of",
    "tools_of",
]
