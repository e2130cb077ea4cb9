# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line interface for inspecting and validating tools configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer

from .catalog import DEFAULT_CATALOG, FeatureName
from .errors import ConfigValidationError, ToolsConfigError
from .loader import ToolsConfigLoader, ToolsConfigLoadResult
from .logging import fail, info, ok, section, warn
from .resolver import disabled_tools, is_feature_enabled
from .schema import ToolsConfig, generate_config_schema

app = typer.Typer(
    help="Inspect which features and tools a tools configuration enables.",
    no_args_is_help=True,
    add_completion=False,
)

_CONFIG_HELP = "Path to the tools config file (defaults to $AZURE_DEVOPS_TOOLS_CONFIG or ./tools.config.json)."


def _load_or_exit(config: Path | None, *, use_emoji: bool) -> ToolsConfigLoadResult:
    try:
        return ToolsConfigLoader(config).load_with_trace()
    except ConfigValidationError as exc:
        fail(f"Invalid tools config file at {exc.path}:", use_emoji=use_emoji)
        for issue in exc.issues:
            typer.echo(f"  - {issue.render()}")
        raise typer.Exit(code=1) from exc
    except ToolsConfigError as exc:
        fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=1) from exc


@app.command("check")
def check_command(
    config: Path | None = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    use_emoji: bool = typer.Option(True, "--emoji/--no-emoji", help="Decorate output with emoji."),
) -> None:
    """Ensure the tools configuration loads successfully."""

    result = _load_or_exit(config, use_emoji=use_emoji)
    if not result.from_file:
        info(f"No tools config at {result.source}; all features and tools enabled", use_emoji=use_emoji)
        return
    ok(f"Tools config at {result.source} is valid", use_emoji=use_emoji)
    unknown = _unregistered(result.config)
    if unknown:
        warn(f"Disabled tools not in the catalog: {', '.join(unknown)}", use_emoji=use_emoji)


@app.command("show")
def show_command(
    config: Path | None = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    as_json: bool = typer.Option(False, "--json", help="Print the effective state as JSON."),
    use_color: bool = typer.Option(False, "--color/--no-color", help="Colourise section headers."),
) -> None:
    """Print the effective enablement state for every feature and tool."""

    result = _load_or_exit(config, use_emoji=not as_json)
    snapshot = _render_state(result)
    if as_json:
        typer.echo(json.dumps(snapshot, indent=2))
        return
    section("Features", use_color=use_color)
    for name, enabled in snapshot["features"].items():
        typer.echo(f"{name}: {'enabled' if enabled else 'disabled'}")
    section("Disabled tools", use_color=use_color)
    for tool in snapshot["disabled_tools"]:
        typer.echo(tool)
    if not snapshot["disabled_tools"]:
        typer.echo("(none)")


@app.command("catalog")
def catalog_command(
    feature: str | None = typer.Option(None, "--feature", "-f", help="Only list tools for this feature."),
) -> None:
    """List the features in the catalog and the tools each one owns."""

    if feature is None:
        features = DEFAULT_CATALOG.features
    else:
        selected = FeatureName.from_raw(feature)
        if selected is None:
            raise typer.BadParameter(
                f"unknown feature '{feature}'; expected one of: {', '.join(f.value for f in FeatureName)}",
                param_hint="--feature",
            )
        features = (selected,)
    for name in features:
        typer.echo(f"{name.value}:")
        for tool in DEFAULT_CATALOG.tools_of(name):
            typer.echo(f"  {tool}")


@app.command("schema")
def schema_command(
    out: Path | None = typer.Option(None, "--out", help="Write the schema to this path instead of stdout."),
) -> None:
    """Emit the JSON Schema describing the tools configuration file."""

    content = json.dumps(generate_config_schema(), indent=2) + "\n"
    if out is None:
        typer.echo(content, nl=False)
        return
    out.write_text(content, encoding="utf-8")
    ok(f"Wrote schema to {out}", use_emoji=False)


def _render_state(result: ToolsConfigLoadResult) -> dict[str, Any]:
    cfg = result.config
    return {
        "source": str(result.source),
        "from_file": result.from_file,
        "features": {feature.value: is_feature_enabled(feature, cfg) for feature in FeatureName},
        "disabled_tools": disabled_tools([*DEFAULT_CATALOG.all_tools(), *_unregistered(cfg)], cfg),
    }


def _unregistered(config: ToolsConfig) -> list[str]:
    return [tool for tool in dict.fromkeys(config.tools.disabled) if tool not in DEFAULT_CATALOG]


def main() -> None:
    """Run the Typer application."""

    app()


__all__ = ["app", "main"]
