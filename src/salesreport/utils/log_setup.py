"""Console logging setup for the salesreport CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "salesreport"


def configure_logging(verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Attach a rich handler to the package logger and set its level.

    Safe to call more than once; the existing handler is reused.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logging.DEBUG if verbose else logging.WARNING

    handler = next((h for h in logger.handlers if isinstance(h, RichHandler)), None)
    if handler is None:
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        logger.addHandler(handler)
    handler.setLevel(level)
    logger.setLevel(level)
    return logger
