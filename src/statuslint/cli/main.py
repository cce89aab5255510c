"""CLI entry point - Click commands for statuslint."""

from __future__ import annotations

import dataclasses
import sys

import click

from statuslint import __version__
from statuslint.cli._output import (
    format_codes_json,
    format_codes_text,
    format_json,
    format_rules_json,
    format_rules_text,
    format_text,
)
from statuslint.cli._runner import run_check
from statuslint.core._types import Style
from statuslint.core.config import ConfigError, StatuslintConfig, load_config
from statuslint.core.status_table import load_table
from statuslint.rules import ALL_RULES


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", message="statuslint %(version)s")
def cli() -> None:
    """statuslint - HTTP status notation checker for RSpec have_http_status."""


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@click.option(
    "--style",
    type=click.Choice([str(s) for s in Style]),
    default=None,
    help="Enforced notation (overrides config file).",
)
@click.option("--fix", is_flag=True, help="Rewrite correctable offenses in place.")
@click.option("--strict", is_flag=True, help="Exit 1 when offenses remain.")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
@click.option("--no-color", is_flag=True, envvar="NO_COLOR", help="Disable ANSI colors.")
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=False),
    help="Path to .statuslint.toml or pyproject.toml config file.",
)
def check(
    paths: tuple[str, ...],
    style: str | None,
    fix: bool,
    strict: bool,
    fmt: str,
    no_color: bool,
    config_path: str | None,
) -> None:
    """Check Ruby spec files for have_http_status notation offenses."""
    try:
        config: StatuslintConfig = load_config(config_path)
    except ConfigError as exc:
        click.echo(f"Error: invalid config: {exc}", err=True)
        sys.exit(2)

    if style is not None:
        config = dataclasses.replace(config, enforced_style=Style(style))

    table = load_table()
    if fix and not table.available:
        click.echo("Warning: HTTP status registry unavailable, --fix has no effect.", err=True)

    report = run_check(paths, config=config, table=table, fix=fix)

    if fmt == "json":
        click.echo(format_json(report))
    else:
        click.echo(format_text(report, no_color=no_color))

    if strict and report.remaining:
        sys.exit(1)


@cli.command()
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
def codes(fmt: str) -> None:
    """List the HTTP status codes and their symbolic names."""
    table = load_table()
    if fmt == "json":
        click.echo(format_codes_json(table))
    else:
        click.echo(format_codes_text(table))


@cli.command()
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
@click.option("--no-color", is_flag=True, envvar="NO_COLOR", help="Disable ANSI colors.")
def rules(fmt: str, no_color: bool) -> None:
    """List all style rules."""
    if fmt == "json":
        click.echo(format_rules_json(ALL_RULES))
    else:
        click.echo(format_rules_text(ALL_RULES, no_color=no_color))
