from __future__ import annotations

import logging
import os
import sys
import uuid
from logging.handlers import RotatingFileHandler
from pathlib import Path

from notes_app.settings import APP_NAME, log_dir, log_level

SESSION_ID = uuid.uuid4().hex[:8]

FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s | sid=%(session)s"


class EnsureSessionFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session"):
            record.session = SESSION_ID
        return True


def _file_handlers(logger: logging.Logger) -> list[RotatingFileHandler]:
    return [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]


def _console_handlers(logger: logging.Logger) -> list[logging.Handler]:
    # RotatingFileHandler is a StreamHandler too
    return [h for h in logger.handlers if not isinstance(h, RotatingFileHandler)]


def setup_logging(directory: Path | None = None) -> logging.Logger:
    """
    Attach a stdout handler and a rotating file handler to the app logger.

    Calling it again adds nothing: the console level is refreshed from the
    environment, and the file handler is only swapped when the log directory
    changed (each data dir keeps its own log file).
    """
    directory = directory or log_dir()
    log_path = os.path.abspath(directory / f"{APP_NAME}.log")

    logger = logging.getLogger(APP_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    fmt = logging.Formatter(FORMAT)
    session_filter = EnsureSessionFilter()

    consoles = _console_handlers(logger)
    if consoles:
        for h in consoles:
            h.setLevel(log_level())
    else:
        ch = logging.StreamHandler(sys.stdout or sys.stderr)
        ch.setLevel(log_level())
        ch.setFormatter(fmt)
        ch.addFilter(session_filter)
        logger.addHandler(ch)

    files = _file_handlers(logger)
    if files and files[0].baseFilename == log_path:
        return logger
    for h in files:
        logger.removeHandler(h)
        h.close()

    directory.mkdir(parents=True, exist_ok=True)
    fh = RotatingFileHandler(
        log_path, maxBytes=2 * 1024 * 1024, backupCount=5, encoding="utf-8"
    )
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)
    fh.addFilter(session_filter)
    logger.addHandler(fh)

    logger.info("Logging initialized. log_file=%s", log_path)
    return logger
