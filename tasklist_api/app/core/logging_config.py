"""
Logging setup for the Task List API.

``create_app`` calls ``setup_logging`` with ``LOG_LEVEL`` and
``LOG_FILE`` from ``Settings``.  Records from the service end up on
the root logger:

* ``tasklist_api.app.core.db`` reports the startup connectivity check
  (``Connected to the task store`` or the failure with its traceback);
* ``tasklist_api.app.services.task_service`` logs each create, update
  and delete at INFO with the task id;
* ``tasklist_api.app.api.endpoints.tasks`` logs every store failure at
  ERROR before the client receives its static 500 message.

Configuration happens once per process; later calls are ignored.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach the service's handlers to the root logger.

    Parameters
    ----------
    level : str
        ``LOG_LEVEL`` name (e.g. ``"DEBUG"``).  Case insensitive; unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        ``LOG_FILE`` path.  When set, records are also appended to this
        file in UTF-8; otherwise they only go to the console.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured, e.g. by pytest or a second create_app call.
        return

    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
