from __future__ import annotations

import logging
import sys
import uuid
from logging.handlers import RotatingFileHandler

from ydnotes.settings import APP_NAME, LOG_DIR, LOG_PATH

SESSION_ID = uuid.uuid4().hex[:8]


class EnsureSessionFilter(logging.Filter):
    """Stamp records that bypassed SessionAdapter with this run's session id."""
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session"):
            record.session = SESSION_ID
        return True


class SessionAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        extra = kwargs.setdefault("extra", {})
        extra.setdefault("session", SESSION_ID)
        return msg, kwargs


def setup_logging(*, log_path=LOG_PATH, console: bool = True) -> SessionAdapter:
    """
    Attach the rotating notes log and, optionally, a console handler to the
    "ydnotes" logger, then hand back an adapter that tags records with the
    session id.

    The core, vault and services modules log through getLogger(APP_NAME)
    and stay silent until the host application calls this.
    """
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # already configured by an earlier call
    if logger.handlers:
        return SessionAdapter(logger, {})

    if log_path == LOG_PATH:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
    else:
        log_path.parent.mkdir(parents=True, exist_ok=True)

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s | sid=%(session)s"
    )
    session_filter = EnsureSessionFilter()

    fh = RotatingFileHandler(
        log_path, maxBytes=2 * 1024 * 1024, backupCount=5, encoding="utf-8"
    )
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)
    fh.addFilter(session_filter)
    logger.addHandler(fh)

    if console:
        ch = logging.StreamHandler(sys.stdout or sys.stderr)
        ch.setLevel(logging.INFO)
        ch.setFormatter(fmt)
        ch.addFilter(session_filter)
        logger.addHandler(ch)

    logger.info("Logging initialized. log_file=%s", log_path)
    return SessionAdapter(logger, {})


def install_global_exception_hooks(log: logging.LoggerAdapter) -> None:
    """Route uncaught exceptions and Qt warnings into the notes log."""
    def _excepthook(exc_type, exc, tb):
        log.critical("Uncaught exception", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _excepthook

    try:
        from PySide6.QtCore import qInstallMessageHandler

        def _qt_message_handler(mode, context, message):
            file = getattr(context, "file", None)
            line = getattr(context, "line", None)
            func = getattr(context, "function", None)
            where = f"{file}:{line} {func}" if file or line or func else "unknown"

            level = _QT_LEVELS.get(_qt_mode_value(mode), logging.WARNING)
            log.log(level, "Qt: %s | where=%s", message, where)

        qInstallMessageHandler(_qt_message_handler)
        log.info("Qt message handler installed")
    except Exception:
        log.exception("Failed to install Qt message handler")


# QtMsgType: Debug=0, Warning=1, Critical=2, Fatal=3, Info=4
_QT_LEVELS = {
    0: logging.DEBUG,
    1: logging.WARNING,
    2: logging.ERROR,
    3: logging.CRITICAL,
    4: logging.INFO,
}


def _qt_mode_value(mode) -> int:
    try:
        return int(getattr(mode, "value", mode))
    except (TypeError, ValueError):
        return 1
