"""Logging configuration for termline.

The stderr handler shares the terminal with the progress line, so its
formatter has to know whether ANSI colors are usable there; a native
Windows console prints them literally. The debug file gets plain text
with every control character escaped.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import NamedTuple, Optional

from termline.shared.colors import Colors

PACKAGE_LOGGER = "termline"
DEFAULT_LOG_FILE = "~/.termline/logs/debug.log"

# Root-logger file handler, attached at most once per process
_file_handler = None


class FileLogSettings(NamedTuple):
    path: str
    level: int
    max_bytes: int
    backup_count: int


class ColorFormatter(logging.Formatter):
    """Level-tagged formatter that colors the tag only when ``use_color`` is set."""

    LEVEL_COLORS = {
        logging.DEBUG: ('CYAN', '[DEBUG]'),
        logging.INFO: ('GREEN', '[INFO]'),
        logging.WARNING: ('YELLOW', '[WARN]'),
        logging.ERROR: ('RED', '[ERROR]'),
        logging.CRITICAL: ('RED', '[CRITICAL]'),
    }

    def __init__(self, use_color=True):
        super().__init__()
        self.use_color = use_color

    def format(self, record):
        color_name, tag = self.LEVEL_COLORS.get(record.levelno, ('NC', '[LOG]'))
        if not self.use_color:
            return f"{tag} {record.getMessage()}"
        return f"{getattr(Colors, color_name, '')}{tag}{Colors.NC} {record.getMessage()}"


class EscapingFormatter(logging.Formatter):
    """Plain formatter that escapes ESC, CR and other control characters.

    Rendered progress lines and redraw sequences end up in debug messages;
    written raw they would redraw the terminal of whoever tails the file.
    """

    def format(self, record):
        text = super().format(record)
        return "".join(
            ch if ch == "\n" or ch == "\t" or ch.isprintable() else repr(ch)[1:-1]
            for ch in text
        )


def colors_usable(stream, strategy=None) -> bool:
    """True when ANSI color codes written to ``stream`` will render."""
    if strategy is not None and strategy.requires_native_console:
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def setup_logging(name=PACKAGE_LOGGER, verbose=False, quiet=False, config=None,
                  strategy=None, stream=None):
    """Configure the stderr logger.

    Safe to call again once the redraw strategy is known: the existing
    handler is reused and only its color setting is refreshed.

    Args:
        name: Logger name; the default covers every module in the package.
        verbose: Show DEBUG messages.
        quiet: Show only WARNING and above.
        config: Optional config dict passed on to configure_file_logging().
        strategy: Resolved RedrawStrategy; a native console disables colors.
        stream: Output stream, stderr by default.

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    if stream is None:
        stream = sys.stderr
    use_color = colors_usable(stream, strategy)

    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handlers = [h for h in logger.handlers if isinstance(h.formatter, ColorFormatter)]
    if not handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(ColorFormatter())
        logger.addHandler(handler)
        handlers = [handler]
    for handler in handlers:
        handler.formatter.use_color = use_color
        handler.setLevel(level)

    if config is not None:
        configure_file_logging(config)

    # The stream handler filters for the terminal; the debug file may want more
    if _file_handler is not None:
        level = min(level, _file_handler.level)
    logger.setLevel(level)

    return logger


def file_log_settings(config) -> Optional[FileLogSettings]:
    """Read the 'logging' section, or None when file logging is off.

        logging:
          enabled: true
          level: debug
          file: ~/.termline/logs/debug.log
          max_size_mb: 5
          backup_count: 3
    """
    section = (config or {}).get("logging")
    if not isinstance(section, dict) or not section.get("enabled", False):
        return None
    level_name = str(section.get("level", "debug")).upper()
    return FileLogSettings(
        path=os.path.expanduser(section.get("file", DEFAULT_LOG_FILE)),
        level=getattr(logging, level_name, logging.DEBUG),
        max_bytes=int(section.get("max_size_mb", 5) * 1024 * 1024),
        backup_count=int(section.get("backup_count", 3)),
    )


def configure_file_logging(config):
    """Attach a rotating debug-file handler to the root logger, once.

    Returns:
        The new handler, or None if file logging is disabled or already set up.
    """
    global _file_handler

    settings = file_log_settings(config)
    if settings is None or _file_handler is not None:
        return None

    Path(settings.path).parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        settings.path,
        maxBytes=settings.max_bytes,
        backupCount=settings.backup_count,
        encoding="utf-8",
    )
    handler.setLevel(settings.level)
    handler.setFormatter(EscapingFormatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))

    root = logging.getLogger()
    root.addHandler(handler)
    if root.level == logging.NOTSET or root.level > settings.level:
        root.setLevel(settings.level)

    _file_handler = handler
    logging.getLogger(PACKAGE_LOGGER).debug(
        "File logging enabled: %s (level=%s)", settings.path, logging.getLevelName(settings.level)
    )
    return handler
