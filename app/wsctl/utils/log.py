"""Logging setup for the command line.

Called once by the CLI callback. Every module that does
``logger = logging.getLogger(__name__)`` inherits this configuration.
"""

import logging

from rich.logging import RichHandler

from wsctl.utils.formatting import err_console


def resolve_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map the global CLI flags to a log level.

    --quiet wins over --verbose; the default is WARNING.
    """
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route log records through Rich on stderr.

    Args:
        verbose: Show debug records, including every executed command.
        quiet: Show errors only.
    """
    level = resolve_level(verbose, quiet)

    handler = RichHandler(
        console=err_console,
        show_time=verbose,
        show_path=verbose,
        markup=False,
        rich_tracebacks=verbose,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
