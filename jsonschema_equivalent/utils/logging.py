"""
Logging configuration for the command line.

Library modules only create ``logging.getLogger(__name__)`` loggers and never
configure handlers. The CLI calls ``setup_logging`` once at startup.
"""

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "jsonschema_equivalent"


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    rich_output: bool = True,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Logging level name or number
        rich_output: Render records with ``rich.logging.RichHandler``; plain
            ``StreamHandler`` otherwise
        console: Console for the rich handler (stderr when omitted)

    Returns:
        logging.Logger: The configured package logger

    Raises:
        ValueError: If ``level`` is not a known level name
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    if rich_output:
        handler: logging.Handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    # Repeated calls replace the handler instead of stacking them
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
