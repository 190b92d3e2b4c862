"""Utility modules for wsctl.

This module exports commonly used utility functions.
"""

from wsctl.utils.formatting import (
    console,
    create_package_table,
    create_system_table,
    err_console,
    format_package_row,
    format_result,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from wsctl.utils.shell import CommandResult, command_exists, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "create_package_table",
    "create_system_table",
    "err_console",
    "format_package_row",
    "format_result",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
