"""Main CLI entry point for zed-devcontainer."""

import click

from ..core.constants import RUNTIME_ENV_VAR, SUPPORTED_RUNTIMES, TIMEOUT_ENV_VAR, DEFAULT_TIMEOUT
from ..core.orchestrator import DevcontainerOrchestrator
from ..services.process import ProcessRunner
from .commands.attach import attach
from .commands.config import config
from .commands.open import open_project
from .commands.ps import ps
from .commands.rebuild import rebuild
from .helpers import configure_logging


@click.group()
@click.option('--runtime', type=click.Choice(SUPPORTED_RUNTIMES), envvar=RUNTIME_ENV_VAR,
              help='Container runtime to use instead of auto-detecting')
@click.option('--timeout', type=float, default=DEFAULT_TIMEOUT, envvar=TIMEOUT_ENV_VAR,
              show_default=True, help='Timeout in seconds for each runtime command')
@click.option('--verbose', '-v', is_flag=True, help='Show log output')
@click.pass_context
def cli(ctx, runtime, timeout, verbose):
    """zed-devcontainer - Open and attach to devcontainers with docker or podman"""
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj['orchestrator'] = DevcontainerOrchestrator(
        runner=ProcessRunner(timeout=timeout),
        preferred_runtime=runtime,
    )


# Register commands
cli.add_command(open_project)
cli.add_command(rebuild)
cli.add_command(attach)
cli.add_command(ps)
cli.add_command(config)


if __name__ == '__main__':
    cli()
