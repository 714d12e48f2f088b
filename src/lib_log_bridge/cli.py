"""Click command group exposing metadata and the bridge demo.

Contents
--------
* :func:`cli` - root group with ``--version``, ``--traceback`` and
  ``--use-dotenv`` options.
* ``info`` / ``logdemo`` subcommands.
* :func:`main` - runs the group through ``lib_cli_exit_tools`` and returns
  its exit code.
"""

from __future__ import annotations

import os
from typing import Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as bridge_config
from .adapters.console.rich_console import CONSOLE_STYLE_THEMES
from .domain.levels import Severity
from .lib_log_bridge import logdemo, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Show the full Python traceback when a command fails.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from the nearest .env before running commands.",
)
@click.pass_context
def cli(ctx: click.Context, version: bool, traceback: bool, use_dotenv: bool) -> None:
    """Bridge a severity-leveled logging contract onto stdlib logging."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if bridge_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(bridge_config.DOTENV_ENV_VAR)):
        bridge_config.enable_dotenv()

    if version:
        click.echo(__init__conf__.version)
        ctx.exit(0)

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata and the resolved default repository."""

    click.echo(summary_info(), nl=False)
    settings = bridge_config.BridgeSettings.from_env()
    click.echo(f"    repository    = {settings.repository}")


@cli.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--theme",
    "themes",
    multiple=True,
    type=click.Choice(sorted(CONSOLE_STYLE_THEMES), case_sensitive=False),
    help="Palette(s) to preview; defaults to all themes.",
)
@click.option(
    "--level",
    type=click.Choice([severity.name.lower() for severity in Severity], case_sensitive=False),
    default="trace",
    show_default=True,
    help="Lowest severity the demo repository lets through.",
)
def cli_logdemo(themes: tuple[str, ...], level: str) -> None:
    """Write one record per severity through the bridge to the console."""

    for theme in themes or tuple(sorted(CONSOLE_STYLE_THEMES)):
        click.echo(f"=== Theme: {theme} ===")
        result = logdemo(theme=theme, level=level)
        written = sum(1 for event in result["events"] if event["enabled"])
        click.echo(f"emitted {written} of {len(result['events'])} records at level >= {result['level']}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command group and return its exit code.

    Exit-code mapping and traceback rendering are delegated to
    :func:`lib_cli_exit_tools.run_cli`. The traceback preferences in
    ``lib_cli_exit_tools.config`` are restored afterwards, so a
    ``--traceback`` run does not leak into the caller.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0.1...
    0
    """
    previous_traceback = lib_cli_exit_tools.config.traceback
    previous_force_color = lib_cli_exit_tools.config.traceback_force_color
    args = list(argv) if argv is not None else None
    try:
        return lib_cli_exit_tools.run_cli(cli, argv=args, prog_name=__init__conf__.shell_command)
    finally:
        lib_cli_exit_tools.config.traceback = previous_traceback
        lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
