"""Logging setup for applications embedding idgraph.

Library modules only create named loggers under ``idgraph.*``. Handlers
are attached to the ``idgraph`` logger on request, never to the root.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "idgraph"


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> logging.Logger:
    """Attach a Rich handler to the idgraph logger.

    Calling this again only updates levels; a second handler is never added.

    Args:
        verbose: Log graph mutations at DEBUG; otherwise only warnings.
        console: Rich Console instance for coordinated output (optional).

    Returns:
        logging.Logger: The configured ``idgraph`` logger.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)

    handler = next(
        (h for h in package_logger.handlers if isinstance(h, RichHandler)), None
    )
    if handler is None:
        handler = RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
            log_time_format="[%H:%M:%S]",
        )
        handler.setFormatter(logging.Formatter("[%(name)s] %(message)s"))
        package_logger.addHandler(handler)

    handler.setLevel(level)
    handler.tracebacks_show_locals = verbose
    return package_logger
