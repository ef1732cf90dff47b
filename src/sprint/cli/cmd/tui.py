"""TUI command - start the interactive terminal interface."""

from __future__ import annotations

import asyncio
from typing import Callable, Optional

import typer
from rich.console import Console

from ...core.config import Config, ConfigManager
from ...runtime.logging import bootstrap_logging
from ...tui.app import SprintApp, run_tui
from ...util.error import format_error, format_unknown_error
from ...util.log import Log

log = Log.create({"service": "cli.tui"})

console = Console()
err_console = Console(stderr=True)

FAREWELL = "See you soon."


def tui_command(run: Optional[Callable[[Config], SprintApp]] = None) -> None:
    """Start the sprint TUI.

    Exits with status 1 and a message on stderr when configuration,
    logging, or the terminal session cannot be started.

    Args:
        run: Runs the app for a resolved config, ``run_tui`` by default
    """
    # Bind the manager in this context so asyncio.run() reuses its cache
    ConfigManager.current()
    call = run or run_tui
    try:
        bootstrap_logging(mode="tui")
        config = asyncio.run(ConfigManager.get())
        log.info("starting TUI", {"status_file": config.status_file, "sources": ConfigManager.sources()})
        app = call(config)
    except Exception as e:
        log.error("could not start program", {"error": e})
        message = format_error(e) or format_unknown_error(e)
        err_console.print(f"could not start program: {message}", style="red", markup=False, soft_wrap=True)
        raise typer.Exit(1)
    finally:
        Log.close()

    if app.return_code:
        raise typer.Exit(app.return_code)
    if app.state.quitting:
        console.print(FAREWELL)
