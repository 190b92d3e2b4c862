"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from wsctl import __version__
from wsctl.cli.commands import apply, install, listing, remove, status, system
from wsctl.utils.log import setup_logging

app = typer.Typer(
    name="wsctl",
    help="Install and detect developer tools on Linux workstations.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"wsctl version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output, including every executed command.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """wsctl - Install and detect developer tools on Linux workstations.

    Installs applications through apt, snap, flatpak, mise, aqua, .deb
    files, install scripts and GitHub release downloads.
    """
    setup_logging(verbose=verbose, quiet=quiet)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.command(name="install")(install.install)
app.command(name="remove")(remove.remove)
app.command(name="status")(status.status)
app.command(name="system")(system.system)
app.command(name="list")(listing.list_packages)
app.command(name="apply")(apply.apply)


if __name__ == "__main__":
    app()
