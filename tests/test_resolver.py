# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for feature and tool enablement decisions."""

from __future__ import annotations

import pytest

from toolgate.catalog import DEFAULT_CATALOG, FeatureName, ToolCatalog
from toolgate.resolver import (
    disabled_features,
    disabled_tools,
    enabled_tools,
    is_feature_enabled,
    is_tool_enabled,
)
from toolgate.schema import DEFAULT_TOOLS_CONFIG, ToolsConfig

SAMPLE_TOOLS = ["list_pipelines", "trigger_pipeline", "get_wiki_page"]


def _config(features: dict[str, bool] | None = None, disabled: list[str] | None = None) -> ToolsConfig:
    return ToolsConfig(features=features or {}, tools={"disabled": disabled or []})


@pytest.mark.parametrize("feature", list(FeatureName))
def test_features_default_to_enabled(feature: FeatureName) -> None:
    assert is_feature_enabled(feature, DEFAULT_TOOLS_CONFIG)


def test_explicit_feature_overrides() -> None:
    config = _config({"pipelines": False, "wikis": True})

    assert not is_feature_enabled(FeatureName.PIPELINES, config)
    assert not is_feature_enabled("pipelines", config)
    assert is_feature_enabled("wikis", config)
    assert is_feature_enabled("search", config)


@pytest.mark.parametrize("feature", list(FeatureName))
def test_disabling_a_feature_disables_all_of_its_tools(feature: FeatureName) -> None:
    config = _config({feature.value: False})

    for tool in DEFAULT_CATALOG.tools_of(feature):
        assert not is_tool_enabled(tool, config)
    others = [tool for tool in DEFAULT_CATALOG.all_tools() if DEFAULT_CATALOG.feature_of(tool) is not feature]
    assert all(is_tool_enabled(tool, config) for tool in others)


def test_explicit_tool_disable_leaves_siblings_enabled() -> None:
    config = _config(disabled=["trigger_pipeline", "create_wiki"])

    assert not is_tool_enabled("trigger_pipeline", config)
    assert not is_tool_enabled("create_wiki", config)
    assert is_tool_enabled("list_pipelines", config)
    assert is_tool_enabled("get_wiki_page", config)


def test_unknown_tools_are_enabled_unless_listed() -> None:
    assert is_tool_enabled("unknown_tool", DEFAULT_TOOLS_CONFIG)
    assert not is_tool_enabled("unknown_tool", _config(disabled=["unknown_tool"]))


def test_feature_enabled_true_does_not_override_tool_disable() -> None:
    config = _config({"pipelines": True}, ["trigger_pipeline"])

    assert not is_tool_enabled("trigger_pipeline", config)


def test_doubly_disabled_tool_stays_disabled() -> None:
    config = _config({"pipelines": False}, ["trigger_pipeline"])

    assert not is_tool_enabled("trigger_pipeline", config)
    assert not is_tool_enabled("list_pipelines", config)
    assert is_tool_enabled("get_wiki_page", config)


def test_enabled_tools_without_restrictions_returns_input() -> None:
    assert enabled_tools(SAMPLE_TOOLS, DEFAULT_TOOLS_CONFIG) == SAMPLE_TOOLS
    assert disabled_tools(SAMPLE_TOOLS, DEFAULT_TOOLS_CONFIG) == []


def test_enabled_tools_excludes_disabled_feature() -> None:
    config = _config({"pipelines": False})

    assert enabled_tools(["trigger_pipeline", "get_wiki_page"], config) == ["get_wiki_page"]
    assert disabled_tools(SAMPLE_TOOLS, config) == ["list_pipelines", "trigger_pipeline"]


def test_enabled_tools_excludes_explicitly_disabled() -> None:
    config = _config(disabled=["trigger_pipeline"])

    assert enabled_tools(SAMPLE_TOOLS, config) == ["list_pipelines", "get_wiki_page"]
    assert disabled_tools(SAMPLE_TOOLS, config) == ["trigger_pipeline"]


@pytest.mark.parametrize(
    "config",
    [
        DEFAULT_TOOLS_CONFIG,
        _config({"pipelines": False}),
        _config({"wikis": False, "search": False}, ["get_me", "unknown_tool"]),
        _config({feature.value: False for feature in FeatureName}),
    ],
)
def test_enabled_and_disabled_partition_the_input(config: ToolsConfig) -> None:
    candidates = ["unknown_tool", *reversed(DEFAULT_CATALOG.all_tools()), "another_unknown"]

    enabled = enabled_tools(candidates, config)
    disabled = disabled_tools(candidates, config)

    assert set(enabled) | set(disabled) == set(candidates)
    assert not set(enabled) & set(disabled)
    assert enabled == [tool for tool in candidates if tool in enabled]
    assert disabled == [tool for tool in candidates if tool in disabled]


def test_custom_catalog_is_honoured() -> None:
    catalog = ToolCatalog.from_mapping({"pipelines": ["custom_tool"]})
    config = _config({"pipelines": False})

    assert not is_tool_enabled("custom_tool", config, catalog=catalog)
    assert is_tool_enabled("list_pipelines", config, catalog=catalog)
    assert enabled_tools(["custom_tool", "list_pipelines"], config, catalog=catalog) == ["list_pipelines"]


def test_disabled_features_follow_enumeration_order() -> None:
    config = _config({"wikis": False, "users": False, "search": True})

    assert disabled_features(config) == (FeatureName.USERS, FeatureName.WIKIS)
    assert disabled_features(DEFAULT_TOOLS_CONFIG) == ()
