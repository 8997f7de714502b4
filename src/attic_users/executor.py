import logging
import shlex
import subprocess
from typing import Iterable

import click

from attic_users.command import TokenCommand
from attic_users.exceptions import CommandSpawnError

logger = logging.getLogger(__name__)


def render(command: TokenCommand) -> str:
    """Shell-quoted command line, as it would be executed."""
    return shlex.join(command.argv)


def execute(command: TokenCommand, dry_run: bool = False) -> int:
    """Print or run a token command.

    The child's exit status is only logged: a non-zero exit does not
    fail the run. Returns the child's return code, 0 for a dry run.

    Raises:
        CommandSpawnError: If the program cannot be started, including
            arguments the OS rejects (embedded NUL bytes)
    """
    click.echo()
    click.echo(f"=> Fetching token for '{command.user}'")

    if dry_run:
        click.echo(render(command))
        return 0

    logger.debug(f"Running: {render(command)}")
    try:
        result = subprocess.run(command.argv)
    except (OSError, ValueError) as e:
        raise CommandSpawnError(str(e)) from e

    if result.returncode != 0:
        logger.warning(
            f"{command.program} exited with status {result.returncode} for '{command.user}'"
        )
    return result.returncode


def execute_all(commands: Iterable[TokenCommand], dry_run: bool = False) -> list[int]:
    """Run commands in order, stopping at the first one that cannot be started."""
    return [execute(command, dry_run=dry_run) for command in commands]
