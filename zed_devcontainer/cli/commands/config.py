"""Configuration inspection commands for zed-devcontainer."""

from pathlib import Path

import click
from rich.console import Console

from ...core.argument_builder import container_name_for
from ...core.config_loader import ConfigLoader
from ...services.exceptions import ConfigError
from ..helpers import exit_with_error


@click.group()
def config():
    """Inspect devcontainer configuration"""
    pass


@config.command()
@click.argument('project_path', required=False,
                type=click.Path(file_okay=False, path_type=Path))
def show(project_path):
    """Display the devcontainer.json that open would use"""
    project_root = project_path or Path.cwd()
    loader = ConfigLoader()

    try:
        config_path, devcontainer = loader.load_with_path(project_root)
    except ConfigError as e:
        exit_with_error(e)

    console = Console()
    console.print(f"[cyan]Configuration:[/cyan] {config_path}")
    console.print(f"[cyan]Container name:[/cyan] {container_name_for(devcontainer)}")
    if devcontainer.image is None:
        console.print("[yellow]No image set; open will fail until one is added.[/yellow]")
    console.print_json(devcontainer.to_json())
