"""
Logging configuration for the Bank Back Office API.

``setup_logging`` attaches a console handler and, when ``LOG_FILE`` is
set, a file handler to the root logger.  A relative log file is
resolved against the package directory, the same way ``core.db``
resolves ``DATABASE_URL``, so the log ends up in the same place
whatever the working directory of the server is.
"""

import logging
import os
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Names of the handlers installed here, used to tell them apart from
# handlers added by uvicorn or pytest.
CONSOLE_HANDLER = "bank_api.console"
FILE_HANDLER = "bank_api.file"


def get_log_path(logfile: str) -> Path:
    """Resolve ``logfile`` against the package directory unless absolute."""
    if os.path.isabs(logfile):
        return Path(logfile)
    base_dir = Path(__file__).resolve().parent.parent.parent  # bank_api/
    return (base_dir / logfile).resolve()


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Calling it again, e.g. from a second ``create_app()``, only updates
    the level; handlers are installed once.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to log to.  Missing parent directories are
        created.  If omitted or empty, no file handler is added.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    installed = {handler.get_name() for handler in root.handlers}
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if CONSOLE_HANDLER not in installed:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile and FILE_HANDLER not in installed:
        log_path = get_log_path(logfile)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
