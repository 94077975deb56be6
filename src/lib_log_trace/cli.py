"""Command line interface for previewing the trace renderer.

Purpose
-------
Give operators a quick way to inspect package metadata, preview both span
profiles with every presentation mode, and list the named styles.

Contents
--------
* :func:`cli` - Click group with global ``--traceback`` and ``--use-dotenv``.
* ``info`` / ``logdemo`` / ``styles`` subcommands.
* :func:`main` - entry point executed through :mod:`lib_cli_exit_tools`.
"""

from __future__ import annotations

from typing import Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as log_config
from .domain import PROGRESS_STYLES, styles
from .runtime import logdemo as _logdemo
from .runtime import summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_PROFILE_CHOICES = ("full", "depth", "both")
_LEVEL_CHOICES = ("trace", "debug", "info", "warn", "error")


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load LOG_* overrides from the nearest .env (also enabled by {log_config.DOTENV_ENV_VAR}=1).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool | None) -> None:
    """Root command storing global flags."""

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    if log_config.should_use_dotenv(explicit=use_dotenv):
        log_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""

    click.echo(summary_info(), nl=False)


@cli.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--profile",
    type=click.Choice(_PROFILE_CHOICES, case_sensitive=False),
    default="both",
    show_default=True,
    help="Span profile to preview; 'both' renders the full path and the depth counter.",
)
@click.option(
    "--level",
    type=click.Choice(_LEVEL_CHOICES, case_sensitive=False),
    default="trace",
    show_default=True,
    help="Minimum severity rendered by the demo runtime.",
)
def cli_logdemo(profile: str, level: str) -> None:
    """Render sample events in every presentation mode."""

    selected = ("full", "depth") if profile.lower() == "both" else (profile.lower(),)
    for name in selected:
        click.echo(f"=== Profile: {name} ===")
        result = _logdemo(profile=name, level=level)
        emitted = sum(1 for event in result["events"] if event.get("ok"))
        click.echo(f"emitted {emitted} of {len(result['events'])} events at level >= {result['level']}")
        click.echo()


@cli.command("styles", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_styles() -> None:
    """List the named ANSI styles and progress templates."""

    click.echo("Attributes:")
    for name, code in styles.ATTRIBUTES.items():
        click.echo(f"  {code}{name}{styles.RESET}")
    click.echo("Foreground:")
    for name, code in styles.FOREGROUND.items():
        click.echo(f"  {code}{name}{styles.RESET}")
    click.echo("Background:")
    for name, code in styles.BACKGROUND.items():
        click.echo(f"  {code}{name}{styles.RESET}")
    click.echo("Progress:")
    for name, style in PROGRESS_STYLES.items():
        click.echo(f"  {name:<6} {style.template}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI through :func:`lib_cli_exit_tools.run_cli`.

    The global traceback preferences are restored afterwards so embedding
    hosts (and tests) keep their own settings.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        lib_cli_exit_tools.config.traceback = previous_traceback
        lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
