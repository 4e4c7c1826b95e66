"""
Logging configuration for the application.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger and tags records with the current request
id. Modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves.
"""

import logging
from pathlib import Path
from typing import Optional

from task_storage.middleware.request_context import RequestIdLogFilter

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """
    Configure the root logger once.

    If the root logger already has handlers (uvicorn, pytest, a second
    ``create_app`` call) only the level is updated.

    Args:
        level: Logging level name, case insensitive (e.g. "DEBUG")
        logfile: Optional path of a file to also write log records to
    """
    root = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    if root.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    request_id_filter = RequestIdLogFilter()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.addFilter(request_id_filter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.addFilter(request_id_filter)
        root.addHandler(file_handler)
