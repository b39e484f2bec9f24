"""
Logging setup for the pets application.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger the first time it is called.  The level is
applied to the ``pets_api`` logger hierarchy, so third-party libraries
keep their own verbosity while provider rejections and writes follow
``LOG_LEVEL``.
"""

import logging
from pathlib import Path
from typing import List, Optional

APP_LOGGER = "pets_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure logging for the application.

    Parameters
    ----------
    level : str
        Level name for the ``pets_api`` loggers (e.g. ``"DEBUG"``).
        Unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Optional path of a file that receives the same records as the
        console.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.getLogger(APP_LOGGER).setLevel(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        # Someone (pytest, uvicorn, an earlier create_app) owns the handlers.
        return

    root.setLevel(logging.WARNING)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)
