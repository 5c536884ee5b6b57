"""
Logging setup for the User Directory API.

Both the application factory and ``run.py`` read the level from
``Settings.log_level``.  ``resolve_log_level`` turns that free‑form
value into one of the standard level names, so the root logger and
uvicorn always agree on the level and an unknown name never stops the
server from starting.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_LEVEL = "INFO"
KNOWN_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def resolve_log_level(level: Optional[str]) -> str:
    """Return the canonical upper‑case name for ``level``.

    Aliases such as ``"warn"`` or ``"fatal"`` map to their standard
    names.  Anything else, including ``None`` and ``"NOTSET"``, gives
    ``"INFO"``.  Lower‑case the result for uvicorn's ``log_level``.
    """
    if not level:
        return DEFAULT_LEVEL
    numeric_level = getattr(logging, level.strip().upper(), None)
    if not isinstance(numeric_level, int):
        return DEFAULT_LEVEL
    name = logging.getLevelName(numeric_level)
    return name if name in KNOWN_LEVELS else DEFAULT_LEVEL


def setup_logging(level: str = DEFAULT_LEVEL, logfile: Optional[str] = None) -> None:
    """Attach console (and optional file) handlers to the root logger.

    Does nothing when the root logger already has handlers, which
    happens under pytest and when ``create_app`` runs more than once.

    Parameters
    ----------
    level : str
        Level name, passed through ``resolve_log_level``.
    logfile : Optional[str]
        Extra log file, typically ``Settings.log_file``.  Relative
        paths are taken from the current working directory.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(resolve_log_level(level))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
