"""List command implementation.

Lists packages installed through APT.
"""

from typing import Annotated

import typer

from wsctl.cli.types import build_services
from wsctl.core.context import OperationContext
from wsctl.core.errors import WsctlError
from wsctl.utils.formatting import (
    console,
    create_package_table,
    format_package_row,
    print_error,
    print_info,
)


def list_packages(
    ctx: typer.Context,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-l",
            help="Limit the number of packages shown.",
            min=1,
        ),
    ] = None,
    count_only: Annotated[
        bool,
        typer.Option(
            "--count",
            "-c",
            help="Show only the package count.",
        ),
    ] = False,
) -> None:
    """List installed APT packages."""
    services = build_services(ctx)

    try:
        packages = services.install.list_installed_packages(OperationContext.background())
    except WsctlError as e:
        print_error(f"Could not list packages: {e}")
        raise typer.Exit(code=1) from e

    if count_only:
        console.print(f"[info]{len(packages)}[/] installed packages")
        return

    if not packages:
        print_info("No packages found.")
        return

    shown = packages[:limit] if limit is not None else packages
    table = create_package_table()
    for pkg in shown:
        table.add_row(*format_package_row(pkg))
    console.print(table)

    if len(shown) < len(packages):
        console.print(f"[muted]Showing {len(shown)} of {len(packages)} packages[/]")
