"""Shared types and helpers for CLI commands.

This module provides the method choice enum and the factory that wires
installer, services and platform adapters for a command invocation.
"""

from dataclasses import dataclass
from enum import Enum

import typer

from wsctl.core.config import InstallerConfig, load_config
from wsctl.core.errors import ConfigError
from wsctl.core.installer import PackageInstaller
from wsctl.core.service import InstallService, PackageService
from wsctl.models.package import InstallMethod
from wsctl.platform.commands import SubprocessCommandRunner
from wsctl.platform.detector import LinuxSystemDetector
from wsctl.platform.files import LocalFileManager
from wsctl.platform.network import HttpNetworkClient
from wsctl.utils.formatting import print_error


class MethodChoice(str, Enum):
    """Installation methods accepted on the command line."""

    APT = "apt"
    SNAP = "snap"
    FLATPAK = "flatpak"
    DEB = "deb"
    SCRIPT = "script"
    MISE = "mise"
    AQUA = "aqua"
    BINARY = "binary"
    GITHUB = "github"
    GITHUB_BINARY = "github-binary"
    GITHUB_BUNDLE = "github-bundle"
    GITHUB_JAVA = "github-java"

    def to_method(self) -> InstallMethod:
        """Convert to the matching InstallMethod."""
        return InstallMethod(self.value)


@dataclass(frozen=True, slots=True)
class Services:
    """Everything a command needs to talk to the system."""

    config: InstallerConfig
    installer: PackageInstaller
    packages: PackageService
    install: InstallService


def is_verbose(ctx: typer.Context) -> bool:
    """Read the global --verbose flag."""
    return bool(ctx.obj and ctx.obj.get("verbose"))


def build_services(ctx: typer.Context, dry_run: bool = False) -> Services:
    """Load configuration and wire the installer for this invocation.

    Args:
        ctx: Typer context carrying the global flags.
        dry_run: Command-level --dry-run flag; enabled if either this or
            the configuration asks for it.

    Raises:
        typer.Exit: If the configuration file is invalid.
    """
    try:
        config = load_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    verbose = is_verbose(ctx) or config.verbose
    runner = SubprocessCommandRunner(verbose=verbose, stream_output=verbose)
    files = LocalFileManager()
    network = HttpNetworkClient(
        user_agent=config.user_agent,
        timeout=float(config.download_timeout_seconds),
    )

    installer = PackageInstaller(
        runner,
        files,
        network,
        config=config,
        dry_run=dry_run or config.dry_run,
    )
    packages = PackageService(installer)
    detector = LinuxSystemDetector(runner, files)
    return Services(
        config=config,
        installer=installer,
        packages=packages,
        install=InstallService(packages, detector),
    )


def is_quiet(ctx: typer.Context) -> bool:
    """Read the global --quiet flag."""
    return bool(ctx.obj and ctx.obj.get("quiet"))
