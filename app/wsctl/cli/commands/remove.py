"""Remove command implementation."""

from typing import Annotated

import typer

from wsctl.cli.types import MethodChoice, build_services, is_verbose
from wsctl.core.context import OperationContext
from wsctl.core.errors import WsctlError, get_error_info
from wsctl.models.package import Package
from wsctl.utils.formatting import console, print_error, print_info, print_success


def remove(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Application name.")],
    method: Annotated[
        MethodChoice,
        typer.Option(
            "--method",
            "-m",
            help="Method the application was installed with.",
            case_sensitive=False,
        ),
    ],
    source: Annotated[
        str | None,
        typer.Option(
            "--source",
            "-s",
            help="Method-specific source. Defaults to NAME.",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Show what would be removed without making changes.",
        ),
    ] = False,
) -> None:
    """Remove an application installed with the given method."""
    services = build_services(ctx, dry_run=dry_run)
    op_ctx = OperationContext.background()
    pkg = Package(name=name, source=source or name, method=method.to_method())

    try:
        result = services.packages.remove(op_ctx, pkg)
    except WsctlError as e:
        print_error(f"Failed to remove {name}: {e}")
        raise typer.Exit(code=1) from e

    if result.failed:
        info = get_error_info(result.error, name, is_verbose(ctx))
        message = f"Failed to remove {name}: {info.message}"
        if info.show_details:
            message += f"\n  Technical details: {result.error}"
        elif info.suggestions:
            message += f" ({info.suggestions[0]})"
        print_error(message)
        raise typer.Exit(code=1)

    if result.dry_run:
        console.print(f"[dry_run][DRY-RUN][/] would remove {name} via {pkg.method.value}")
    elif result.skipped:
        print_info(f"{name} is not installed")
    else:
        print_success(f"Removed {name}")
