"""Install command implementation.

Installs a single application, either with an explicit method or with
the method that suits the detected system.
"""

from typing import Annotated

import typer

from wsctl.cli.types import MethodChoice, build_services, is_verbose
from wsctl.core.context import OperationContext
from wsctl.core.errors import WsctlError, format_error_message
from wsctl.models.package import LATEST, Package
from wsctl.models.result import InstallationResult
from wsctl.utils.formatting import console, print_error


def install(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Application name.")],
    source: Annotated[
        str | None,
        typer.Option(
            "--source",
            "-s",
            help="Method-specific source (package name, URL, owner/repo). Defaults to NAME.",
        ),
    ] = None,
    method: Annotated[
        MethodChoice | None,
        typer.Option(
            "--method",
            "-m",
            help="Installation method. Auto-selected for this system when omitted.",
            case_sensitive=False,
        ),
    ] = None,
    version: Annotated[
        str,
        typer.Option(
            "--version",
            help="Requested version (mise only).",
        ),
    ] = LATEST,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Show what would be installed without making changes.",
        ),
    ] = False,
) -> None:
    """Install an application.

    Without --method the distribution's package manager is used.
    """
    services = build_services(ctx, dry_run=dry_run)
    op_ctx = OperationContext.background()
    pkg_source = source or name
    verbose = is_verbose(ctx)

    try:
        if method is None:
            result = services.install.install_application(op_ctx, name, pkg_source)
        else:
            pkg = Package(name=name, source=pkg_source, method=method.to_method(), version=version)
            result = services.packages.install(op_ctx, pkg)
    except WsctlError as e:
        print_error(format_error_message(e, name, verbose))
        raise typer.Exit(code=1) from e

    _report(result, verbose)


def _report(result: InstallationResult, verbose: bool) -> None:
    """Print the result line and exit non-zero on failure."""
    if result.failed:
        print_error(format_error_message(result.error, result.package.name, verbose))
        raise typer.Exit(code=1)

    console.print(_format_install(result))
    if verbose and result.output:
        console.print(f"[muted]{result.output}[/]")


def _format_install(result: InstallationResult) -> str:
    name = result.package.name
    if result.dry_run:
        return f"[dry_run][DRY-RUN][/] would install {name} via {result.package.method.value}"
    if result.skipped:
        return f"[muted]{name} is already installed[/]"
    return f"[success]Installed {name}[/] [muted]({result.duration_ms} ms)[/]"
