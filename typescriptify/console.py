"""Console logging setup for the command line entry point."""

import logging

from rich.console import Console
from rich.logging import RichHandler

stderr_console = Console(stderr=True)


def configure_logging(verbose: bool = False) -> None:
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if isinstance(handler, RichHandler):
            root_logger.removeHandler(handler)
    root_logger.addHandler(
        RichHandler(
            console=stderr_console,
            show_time=False,
            show_path=False,
            markup=False,
        )
    )
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
