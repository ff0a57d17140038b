"""Open command for zed-devcontainer."""

import click

from ...services.exceptions import DevcontainerError
from ..helpers import echo_output, exit_with_error, get_orchestrator


@click.command(name='open')
@click.argument('project_path', nargs=-1)
def open_project(project_path):
    """Create a devcontainer for a project and run its post-create command"""
    orchestrator = get_orchestrator()
    try:
        output = orchestrator.open(list(project_path))
    except DevcontainerError as e:
        exit_with_error(e)

    echo_output(output)
