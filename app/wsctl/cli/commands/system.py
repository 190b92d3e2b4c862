"""System command implementation."""

import typer

from wsctl.cli.types import build_services
from wsctl.core.context import OperationContext
from wsctl.core.errors import WsctlError
from wsctl.core.service import select_method
from wsctl.utils.formatting import console, create_system_table, print_error


def system(ctx: typer.Context) -> None:
    """Show the detected distribution, desktop and package manager."""
    services = build_services(ctx)

    try:
        info = services.install.get_system_info(OperationContext.background())
    except WsctlError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    table = create_system_table(info)
    table.add_row("Install method", select_method(info).value)
    console.print(table)
