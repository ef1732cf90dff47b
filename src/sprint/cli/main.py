"""Command line entry point.

``sprint`` on its own opens the countdown TUI; ``sprint config`` inspects the
configuration it would run with.
"""

import asyncio
import json

import typer
from rich.console import Console

from .. import __version__

app = typer.Typer(
    name="sprint",
    help="Countdown timer that mirrors the remaining time to a status file",
    add_completion=False,
    invoke_without_command=True,
)

console = Console()
err_console = Console(stderr=True)


def _print_version(value: bool) -> None:
    if not value:
        return
    console.print(f"sprint {__version__}")
    raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_print_version,
        is_eager=True,
        help="Print the version and exit",
    ),
):
    """Start a countdown; the TUI opens when no command is given."""
    if ctx.invoked_subcommand is None:
        from .cmd.tui import tui_command

        tui_command()


@app.command()
def config(
    show: bool = typer.Option(False, "--show", help="Print the merged configuration as JSON"),
    path: bool = typer.Option(False, "--path", help="Print the global configuration directory"),
    sources: bool = typer.Option(False, "--sources", help="List the files and variables that were merged"),
):
    """Inspect the configuration sprint would start with."""
    from ..core.config import ConfigError, ConfigManager
    from ..core.global_paths import GlobalPath

    if path:
        console.print(GlobalPath.config(), markup=False, soft_wrap=True)
        return

    if not (show or sources):
        console.print("Pass --show, --sources or --path", markup=False)
        return

    try:
        cfg = asyncio.run(ConfigManager.get())
    except ConfigError as e:
        err_console.print(str(e), style="red", markup=False, soft_wrap=True)
        raise typer.Exit(1)

    if sources:
        for source in ConfigManager.sources() or ["<defaults>"]:
            console.print(source, markup=False, soft_wrap=True)
    if show:
        console.print_json(json.dumps(cfg.model_dump(by_alias=True, exclude_none=True)))
