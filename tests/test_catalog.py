# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the static feature catalog."""

from __future__ import annotations

import pytest

from toolgate.catalog import (
    DEFAULT_CATALOG,
    FEATURE_NAMES,
    FEATURE_TOOLS,
    FeatureName,
    ToolCatalog,
    feature_of,
    tools_of,
)
from toolgate.errors import CatalogIntegrityError


def test_every_feature_has_a_tool_list() -> None:
    assert set(FEATURE_TOOLS) == set(FeatureName)
    for feature in FeatureName:
        assert isinstance(FEATURE_TOOLS[feature], tuple)
        assert FEATURE_TOOLS[feature]


def test_feature_names_match_enum_values() -> None:
    assert FEATURE_NAMES == (
        "users",
        "organizations",
        "projects",
        "repositories",
        "work-items",
        "search",
        "pull-requests",
        "pipelines",
        "wikis",
    )


def test_tool_names_are_unique_across_features() -> None:
    all_tools = [tool for tools in FEATURE_TOOLS.values() for tool in tools]
    assert len(set(all_tools)) == len(all_tools)
    assert len(DEFAULT_CATALOG) == len(all_tools)


def test_reverse_index_maps_each_tool_to_its_feature() -> None:
    for feature, tools in FEATURE_TOOLS.items():
        for tool in tools:
            assert feature_of(tool) is feature
            assert DEFAULT_CATALOG.tool_index[tool] is feature


def test_unregistered_tool_has_no_owner() -> None:
    assert feature_of("unknown_tool") is None
    assert "unknown_tool" not in DEFAULT_CATALOG


def test_tools_of_accepts_enum_or_string() -> None:
    assert tools_of(FeatureName.PIPELINES) == tools_of("pipelines")
    assert "trigger_pipeline" in tools_of("pipelines")
    assert tools_of("users") == ("get_me",)


def test_all_tools_preserves_catalog_order() -> None:
    flattened = tuple(tool for _, tools in DEFAULT_CATALOG for tool in tools)
    assert DEFAULT_CATALOG.all_tools() == flattened
    assert DEFAULT_CATALOG.all_tools()[0] == "get_me"


def test_custom_catalog_rejects_duplicate_tools() -> None:
    with pytest.raises(CatalogIntegrityError, match="'shared_tool'"):
        ToolCatalog.from_mapping({"pipelines": ["shared_tool"], "wikis": ["shared_tool"]})


def test_custom_catalog_missing_feature_returns_empty() -> None:
    catalog = ToolCatalog.from_mapping({"wikis": ["get_wiki_page"]})
    assert catalog.features == (FeatureName.WIKIS,)
    assert catalog.tools_of(FeatureName.PIPELINES) == ()
    assert catalog.feature_of("get_wiki_page") is FeatureName.WIKIS


def test_catalog_is_read_only() -> None:
    with pytest.raises(TypeError):
        DEFAULT_CATALOG.tool_index["new_tool"] = FeatureName.WIKIS  # type: ignore[index]


def test_from_raw_handles_unknown_values() -> None:
    assert FeatureName.from_raw("work-items") is FeatureName.WORK_ITEMS
    assert FeatureName.from_raw("invalid-feature") is None
