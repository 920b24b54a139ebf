"""Logging setup for tripcal."""

import logging

from rich.console import Console
from rich.logging import RichHandler

# Third-party loggers that are too chatty below WARNING
NOISY_LOGGERS = ("urllib3", "requests")


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr through rich.

    Args:
        verbose: Show DEBUG records from tripcal instead of WARNING and up.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger("tripcal").setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
