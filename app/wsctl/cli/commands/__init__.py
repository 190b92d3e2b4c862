"""CLI commands for wsctl.

This package contains all subcommand implementations.
"""

from wsctl.cli.commands import apply, install, listing, remove, status, system

__all__ = ["apply", "install", "listing", "remove", "status", "system"]
