from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import ReporterConfig

LOGGER_NAME = "slsdiag"


def configure_logging(*, cfg: ReporterConfig, console: Optional[Console] = None) -> logging.Logger:
    """
    Configure the reporter's internal logger.

    Log records go to stderr through Rich so they never mix with the report
    itself (stdout). Debug mode lowers the level to DEBUG and enables Rich
    tracebacks.

    Returns
    -------
    logger
        A configured logger named "slsdiag".

    Usage example
    -------------
        logger = configure_logging(cfg=ReporterConfig.from_env())
        logger.debug("Hello")
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.propagate = False

    handler = RichHandler(
        console=console if console is not None else Console(stderr=True),
        rich_tracebacks=cfg.debug,
        show_path=False,
    )
    handler.setLevel(logging.DEBUG if cfg.debug else cfg.console_level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    logger.debug("Logging configured (debug=%s, output_format=%s)", cfg.debug, cfg.output_format)
    return logger
