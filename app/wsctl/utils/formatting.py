"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

if TYPE_CHECKING:
    from wsctl.models.package import Package
    from wsctl.models.result import InstallationResult
    from wsctl.models.system import SystemInfo

_THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "header": "#69B9A1",
        "bold_header": "bold #69B9A1",
        "border": "#29526d",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "#f53263",
        "info": "#0ec1c8",
        "dry_run": "italic #faf870",
    }
)


def _detect_color_system() -> str | None:
    """Return "truecolor" for interactive terminals, None to let Rich decide."""
    if sys.stdout.isatty():
        return "truecolor"
    return None


console = Console(theme=_THEME, color_system=_detect_color_system())
err_console = Console(theme=_THEME, stderr=True, color_system=_detect_color_system())


def create_package_table(title: str = "Installed Packages") -> Table:
    """Create a pre-configured table for listing packages.

    Args:
        title: Table title.

    Returns:
        Rich Table with Package, Version and Method columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("Package", style="header", no_wrap=True)
    table.add_column("Version", style="muted")
    table.add_column("Method", style="info")
    return table


def format_package_row(pkg: Package) -> tuple[str, str, str]:
    """Format a package as a (name, version, method) table row."""
    return (pkg.name, pkg.version or "-", pkg.method.value)


def create_system_table(info: SystemInfo) -> Table:
    """Build a two-column table describing the detected system.

    Args:
        info: Detected system information.

    Returns:
        Rich Table with one row per property.
    """
    table = Table(
        title="System",
        show_header=False,
        border_style="border",
    )
    table.add_column("Property", style="header", no_wrap=True)
    table.add_column("Value", style="text")

    dist = info.distribution
    release = " ".join(part for part in (dist.version, dist.codename) if part)
    table.add_row("Distribution", f"{dist.name} {release}".strip())
    table.add_row("Family", dist.family)
    table.add_row(
        "Package manager",
        f"{info.package_manager.name} ({info.package_manager.method.value})",
    )
    if info.desktop_environment is not None:
        desktop = info.desktop_environment
        session = f" ({desktop.session})" if desktop.session else ""
        table.add_row("Desktop", f"{desktop.name}{session}")
    else:
        table.add_row("Desktop", "[muted]none[/]")
    table.add_row("Architecture", info.architecture or "-")
    table.add_row("Kernel", info.kernel)
    return table


def format_result(result: InstallationResult) -> str:
    """Format an installation result as a single status line."""
    name = result.package.name
    if result.dry_run:
        return f"[dry_run]would install {name} via {result.package.method.value}[/]"
    if result.skipped:
        return f"[muted]{name} already installed[/]"
    if result.success:
        return f"[success]{name} installed[/] [muted]({result.duration_ms} ms)[/]"
    return f"[error]{name} failed[/]: {result.error}"


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
