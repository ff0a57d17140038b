"""CLI Helper Functions for zed-devcontainer.

Shared by the commands so they resolve the orchestrator, report errors and
print tables the same way.
"""

import logging
import sys
from typing import Any, NoReturn

import click
from tabulate import tabulate

from zed_devcontainer.core.orchestrator import DevcontainerOrchestrator
from zed_devcontainer.models.output import CommandOutput
from zed_devcontainer.services.process import ProcessRunner

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; everything when verbose, warnings otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def get_orchestrator() -> DevcontainerOrchestrator:
    """Get the orchestrator configured by the root command.

    Falls back to defaults when a command is invoked on its own.
    """
    ctx = click.get_current_context()
    obj = ctx.find_object(dict) or {}
    orchestrator = obj.get('orchestrator')
    if orchestrator is None:
        orchestrator = DevcontainerOrchestrator(runner=ProcessRunner())
    return orchestrator


def exit_with_error(error: Exception) -> NoReturn:
    """Print an error message and exit with status 1."""
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def echo_output(output: CommandOutput) -> None:
    """Print a command report."""
    click.echo(output.text)


def print_table(headers: list[str], rows: list[list[Any]],
                tablefmt: str = "simple") -> None:
    """Print a table using tabulate.

    Args:
        headers: Column headers
        rows: Table rows
        tablefmt: Table format (default: "simple")
    """
    click.echo(tabulate(rows, headers=headers, tablefmt=tablefmt))
