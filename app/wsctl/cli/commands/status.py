"""Status command implementation.

Reports whether an application is installed. Exits with code 1 when it
is not, so the command can be used in shell conditions.
"""

from typing import Annotated

import typer

from wsctl.cli.types import MethodChoice, build_services
from wsctl.core.context import OperationContext
from wsctl.core.errors import WsctlError
from wsctl.utils.formatting import print_error, print_info, print_success


def status(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Application name.")],
    method: Annotated[
        MethodChoice | None,
        typer.Option(
            "--method",
            "-m",
            help="Only check this method instead of every detector.",
            case_sensitive=False,
        ),
    ] = None,
) -> None:
    """Check whether an application is installed."""
    services = build_services(ctx)
    op_ctx = OperationContext.background()

    try:
        if method is None:
            installed = services.packages.is_installed(op_ctx, name)
        else:
            installed = services.installer.is_installed_by_method(op_ctx, name, method.to_method())
    except WsctlError as e:
        print_error(f"Could not check {name}: {e}")
        raise typer.Exit(code=1) from e

    where = f" via {method.value}" if method is not None else ""
    if installed:
        print_success(f"{name} is installed{where}")
        return

    print_info(f"{name} is not installed{where}")
    raise typer.Exit(code=1)
