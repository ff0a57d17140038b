"""Attach command for zed-devcontainer."""

import logging

import click
from click.shell_completion import CompletionItem

from ...services.exceptions import DevcontainerError
from ..helpers import echo_output, exit_with_error, get_orchestrator

logger = logging.getLogger(__name__)


def complete_container(ctx, param, incomplete):
    """Complete running container IDs for shell completion."""
    try:
        completions = get_orchestrator().complete_attach_argument()
    except DevcontainerError as e:
        # Completion must never break the user's shell
        logger.debug(f"Container completion unavailable: {e}")
        return []

    return [
        CompletionItem(completion.new_text, help=completion.label)
        for completion in completions
        if completion.new_text.startswith(incomplete)
    ]


@click.command()
@click.argument('container', nargs=-1, shell_complete=complete_container)
def attach(container):
    """Start a devcontainer if needed and show how to connect to it"""
    orchestrator = get_orchestrator()
    try:
        output = orchestrator.attach(list(container))
    except DevcontainerError as e:
        exit_with_error(e)

    echo_output(output)
