"""Click command group for inspecting and demonstrating the console sink.

Purpose
-------
Give operators a quick way to see what the sink would do on the current
terminal: which environment was detected, which style ``auto`` resolves to,
and how each level renders.

Contents
--------
* :func:`cli` – root group with the ``--use-dotenv`` toggle.
* ``info`` / ``env`` / ``symbols`` / ``demo`` – subcommands.
* :func:`main` – test-friendly runner returning an exit code.

System Role
-----------
Presentation layer only. Every command builds its own :class:`CltSink` (or
calls pure domain helpers); none touches the process-wide runtime.
"""

from __future__ import annotations

import os
import sys
from typing import Sequence

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from . import __init__conf__, summary_info
from . import config as log_config
from .adapters import STDERR, STDOUT, CltSink, FileDescriptorOutput, detect, is_terminal
from .domain import LogLevel, OutputEnvironment, Style, Symbol, render_symbol, resolve_style

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_STYLE_CHOICES = [style.value for style in Style]
_LEVEL_CHOICES = [level.severity for level in LogLevel.ordered()]
_ENVIRONMENT_CHOICES = [environment.value for environment in OutputEnvironment]


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(__init__conf__.version, "--version", "-V", prog_name=__init__conf__.shell_command)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from a nearby .env (overrides {log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool) -> None:
    """Inspect and demonstrate the console sink."""

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if log_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("env", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_env() -> None:
    """Show the detected environment and the style ``auto`` resolves to."""

    try:
        force_color = log_config.env_bool("LOG_FORCE_COLOR", False)
        no_color = log_config.env_bool("LOG_NO_COLOR", False) or log_config.env_flag("NO_COLOR")
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    table = Table(title="Output environment")
    table.add_column("stream")
    table.add_column("environment")
    table.add_column("terminal")
    table.add_column("auto style")
    for label, fd in (("stdout", STDOUT), ("stderr", STDERR)):
        output = FileDescriptorOutput(fd)
        environment = detect(output)
        terminal = is_terminal(output)
        style = resolve_style(Style.AUTO, environment, is_terminal=terminal, force_color=force_color, no_color=no_color)
        table.add_row(label, environment.value, "yes" if terminal else "no", style.value)
    Console().print(table)


@cli.command("symbols", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--environment",
    "environment_name",
    type=click.Choice(_ENVIRONMENT_CHOICES),
    default=None,
    help="Environment to show padding for (defaults to the one detected for stdout).",
)
def cli_symbols(environment_name: str | None) -> None:
    """List the emoji catalog with the padding applied in one environment."""

    if environment_name is None:
        environment = detect(FileDescriptorOutput(STDOUT))
    else:
        environment = OutputEnvironment.from_name(environment_name)
    table = Table(title=f"Symbols for {environment.value}")
    table.add_column("symbol")
    table.add_column("glyph")
    table.add_column("padding")
    for symbol in Symbol:
        glyph, padding = render_symbol(symbol, environment)
        table.add_row(symbol.name, glyph, Text(repr(padding)))
    Console().print(table)


def _parse_metadata(_ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]) -> dict[str, str]:
    metadata: dict[str, str] = {}
    for item in values:
        key, separator, value = item.partition("=")
        if not separator or not key.strip():
            raise click.BadParameter(f"expected key=value, got {item!r}")
        metadata[key.strip()] = value
    return metadata


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--style", type=click.Choice(_STYLE_CHOICES), default=Style.AUTO.value, show_default=True)
@click.option("--level", type=click.Choice(_LEVEL_CHOICES), default=LogLevel.TRACE.severity, show_default=True)
@click.option(
    "--metadata",
    "-m",
    multiple=True,
    callback=_parse_metadata,
    help="Base metadata as key=value; repeat for several keys.",
)
def cli_demo(style: str, level: str, metadata: dict[str, str]) -> None:
    """Emit one record per level: below warning to stdout, the rest to stderr."""

    sink = CltSink(
        style=style,
        routing={LogLevel.TRACE: sys.stdout, LogLevel.WARNING: sys.stderr},
        metadata=metadata,
        log_level=level,
    )
    for current in LogLevel.ordered():
        sink.log(current, f"{current.severity} message", source="demo")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command group and return its exit code.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    lib_log_clt, version ...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        result = cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return result if isinstance(result, int) else 0


__all__ = ["cli", "main"]
