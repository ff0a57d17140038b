"""Rebuild command for zed-devcontainer."""

from pathlib import Path

import click

from ...services.exceptions import DevcontainerError
from ..helpers import echo_output, exit_with_error, get_orchestrator


@click.command()
@click.option('--worktree', type=click.Path(file_okay=False, path_type=Path),
              help='Project root (defaults to the current directory)')
def rebuild(worktree):
    """Check the devcontainer configuration and explain how to rebuild"""
    worktree_root = worktree or Path.cwd()
    orchestrator = get_orchestrator()
    try:
        output = orchestrator.rebuild(worktree_root)
    except DevcontainerError as e:
        exit_with_error(e)

    echo_output(output)
