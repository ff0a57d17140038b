"""List running containers command."""

import click

from ...services.exceptions import DevcontainerError
from ..helpers import exit_with_error, get_orchestrator, print_table


@click.command()
def ps():
    """List running containers that can be attached to"""
    orchestrator = get_orchestrator()
    try:
        containers = orchestrator.list_running_containers()
    except DevcontainerError as e:
        exit_with_error(e)

    if not containers:
        click.echo("No running containers found")
        return

    print_table(
        ["CONTAINER ID", "NAME"],
        [[container.id, container.name] for container in containers],
    )
