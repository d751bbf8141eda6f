"""Logging configuration for the archive-man CLI.

Library modules only create module-level loggers; the CLI callback
installs a single Rich handler on the root logger.
"""

import logging

from rich.logging import RichHandler

from archive_man.utils.formatting import err_console


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the root logger for CLI use.

    Args:
        verbose: Log everything down to DEBUG.
        quiet: Only log errors.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates on repeated invocations
    for handler in root_logger.handlers[:]:
        if isinstance(handler, RichHandler):
            root_logger.removeHandler(handler)

    handler = RichHandler(
        console=err_console,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)
