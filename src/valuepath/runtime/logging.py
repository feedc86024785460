from __future__ import annotations

import datetime
import logging
import threading
from pathlib import Path

from rich.console import Console
from rich.text import Text

from ..config import VALUEPATH_CONFIG

LOGGER_NAME = "valuepath"

_CONFIGURE_LOCK = threading.Lock()

_LEVEL_STYLES = {
    logging.DEBUG: "dim",
    logging.INFO: "cyan",
    logging.WARNING: "yellow",
    logging.ERROR: "red",
    logging.CRITICAL: "bold red",
}


class _ValuePathRichConsoleHandler(logging.Handler):
    """Console handler that renders records as rich text on stderr."""

    def __init__(self, level: int = logging.NOTSET, console: Console | None = None):
        super().__init__(level)
        self._console = console if console is not None else Console(stderr=True)

    @staticmethod
    def _format_location(record: logging.LogRecord) -> str:
        return f"[{Path(record.pathname).name}:{record.lineno}]"

    @staticmethod
    def _format_message_text(record: logging.LogRecord) -> Text:
        # Only the leading verb is colored; the rest stays plain.
        message = record.getMessage()
        color = getattr(record, "valuepath_action_color", None)
        text = Text(message)
        if color:
            verb, _, _ = message.partition(" ")
            text.stylize(color, 0, len(verb))
        return text

    def emit(self, record: logging.LogRecord) -> None:
        try:
            timestamp = datetime.datetime.fromtimestamp(record.created).strftime(
                "%H:%M:%S"
            )
            line = Text()
            line.append(f"{timestamp} ", style="dim")
            line.append(
                f"{record.levelname:<8} ", style=_LEVEL_STYLES.get(record.levelno, "")
            )
            line.append_text(self._format_message_text(record))
            line.append(" ")
            line.append(self._format_location(record), style="dim")
            self._console.print(line, soft_wrap=True, highlight=False)
            if record.exc_info:
                formatter = self.formatter or logging.Formatter()
                self._console.print(
                    formatter.formatException(record.exc_info), highlight=False
                )
        except Exception:
            self.handleError(record)


def get_logger() -> logging.Logger:
    """Return the package logger."""
    return logging.getLogger(LOGGER_NAME)


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Attach the rich console handler to the package logger.

    Safe to call repeatedly; the handler is installed at most once. ``level``
    defaults to ``VALUEPATH_CONFIG.log_level``.
    """
    logger = get_logger()
    with _CONFIGURE_LOCK:
        logger.setLevel(level if level is not None else VALUEPATH_CONFIG.log_level)
        if not any(
            isinstance(handler, _ValuePathRichConsoleHandler)
            for handler in logger.handlers
        ):
            logger.addHandler(_ValuePathRichConsoleHandler())
    return logger


def reset_logging() -> None:
    """Remove installed console handlers and restore the default level."""
    logger = get_logger()
    with _CONFIGURE_LOCK:
        for handler in list(logger.handlers):
            if isinstance(handler, _ValuePathRichConsoleHandler):
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
