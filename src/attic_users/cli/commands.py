"""CLI for attic-users."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from attic_users import __version__
from attic_users.command import DEFAULT_PROGRAM, DEFAULT_VALIDITY, generate_commands
from attic_users.exceptions import AtticUsersError
from attic_users.executor import execute_all
from attic_users.spec.config import FORMATS, load_configuration, render_example

DEFAULT_CONFIG_PATH = Path("/etc/attic-users.toml")


def setup_logging(verbose: bool = False) -> None:
    """Setup logging with rich formatting on stderr"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


@click.command()
@click.argument("name", required=False)
@click.option(
    "--dry-run", "-d", is_flag=True, help="Show the command but don't run it"
)
@click.option(
    "--program",
    "-p",
    default=DEFAULT_PROGRAM,
    envvar="ATTIC_USERS_PROGRAM",
    show_default=True,
    help="Binary to call with the generated arguments",
)
@click.option(
    "--validity",
    "-v",
    default=DEFAULT_VALIDITY,
    envvar="ATTIC_USERS_VALIDITY",
    show_default=True,
    help="Validity duration of the generated tokens",
)
@click.option(
    "--file",
    "-f",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_PATH,
    envvar="ATTIC_USERS_FILE",
    show_default=True,
    help="File with the user configurations",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(FORMATS),
    default="auto",
    show_default=True,
    help="Config file format; auto picks from the file suffix",
)
@click.option(
    "--example",
    "-e",
    is_flag=True,
    help="Print a sample config and exit",
)
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, prog_name="attic-users")
def main(
    name: Optional[str],
    dry_run: bool,
    program: str,
    validity: str,
    config_file: Path,
    fmt: str,
    example: bool,
    verbose: bool,
):
    """Generate atticadm tokens for the users in a config file.

    With NAME, only that user's token is made; otherwise every user in
    the file gets one, in file order.
    """
    setup_logging(verbose)

    if example:
        click.echo(render_example("toml" if fmt == "toml" else "yaml"), nl=False)
        return

    try:
        config = load_configuration(config_file, fmt)
        commands = generate_commands(config, name, program=program, validity=validity)
        execute_all(commands, dry_run=dry_run)
    except AtticUsersError as e:
        click.echo(str(e), err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
