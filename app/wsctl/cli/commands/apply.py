"""Apply command implementation.

Installs every application listed in a catalog file, one after another.
Failures are reported per application and do not stop the run.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from wsctl.cli.types import build_services, is_quiet, is_verbose
from wsctl.core.context import OperationContext
from wsctl.core.errors import format_error_message
from wsctl.models.catalog import CatalogError, load_catalog
from wsctl.models.result import InstallationResult
from wsctl.utils.formatting import (
    console,
    format_result,
    print_error,
    print_info,
    print_success,
    print_warning,
)


def apply(
    ctx: typer.Context,
    catalog: Annotated[
        Path,
        typer.Argument(
            help="Catalog TOML file.",
            dir_okay=False,
        ),
    ],
    group: Annotated[
        str | None,
        typer.Option(
            "--group",
            "-g",
            help="Only install applications from this group.",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Show what would be installed without making changes.",
        ),
    ] = False,
) -> None:
    """Install all applications from a catalog.

    Reads the catalog, installs each application with its declared
    method and prints a summary.
    """
    try:
        packages = load_catalog(catalog).to_packages(group)
    except CatalogError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not packages:
        where = f" in group '{group}'" if group else ""
        print_warning(f"No applications{where} in {catalog}.")
        return

    services = build_services(ctx, dry_run=dry_run)
    if services.installer.dry_run:
        print_info("Dry-run mode: no changes will be made.")

    results = services.install.install_packages(OperationContext.background(), packages)

    verbose = is_verbose(ctx)
    quiet = is_quiet(ctx)
    for result in results:
        if result.failed:
            print_error(format_error_message(result.error, result.package.name, verbose))
        elif not quiet:
            console.print(format_result(result))

    if not quiet:
        console.print()
        console.print(_create_summary_table(results))

    failed = [r for r in results if r.failed]
    if failed:
        print_error(f"{len(failed)} of {len(results)} application(s) failed.")
        raise typer.Exit(code=1)

    if not quiet and not services.installer.dry_run:
        print_success("All applications installed.")


def _create_summary_table(results: list[InstallationResult]) -> Table:
    """Build a one-row summary of the run."""
    table = Table(
        title="Summary",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Installed", style="success", justify="right")
    table.add_column("Already present", style="muted", justify="right")
    table.add_column("Planned", style="dry_run", justify="right")
    table.add_column("Failed", style="error", justify="right")

    installed = sum(1 for r in results if r.success and not r.skipped and not r.dry_run)
    skipped = sum(1 for r in results if r.skipped)
    planned = sum(1 for r in results if r.dry_run and r.success)
    failed = sum(1 for r in results if r.failed)
    table.add_row(str(installed), str(skipped), str(planned), str(failed))
    return table
