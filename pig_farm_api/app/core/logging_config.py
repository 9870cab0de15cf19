"""
Log set-up for the records service.

Everything goes through the root logger.  ``setup_logging`` gives it a
console handler and, when ``LOG_FILE`` is set, a file handler with the
same format.  Calling it again only changes the level, so
``create_app`` can run more than once in a process (tests do) without
doubling every log line.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Set the root log level and attach handlers on first use.

    Parameters
    ----------
    level : str
        Level name such as ``"debug"`` or ``"INFO"``.  Names the
        logging module does not know mean ``INFO``.
    logfile : Optional[str]
        Where to also write log lines.  ``None`` keeps output on the
        console only.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if root.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
