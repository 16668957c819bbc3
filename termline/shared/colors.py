"""ANSI color utilities for terminal output."""

import sys


class Colors:
    """ANSI color codes for terminal output."""
    RED = '\033[0;31m'
    GREEN = '\033[0;32m'
    YELLOW = '\033[1;33m'
    CYAN = '\033[0;36m'
    BOLD = '\033[1m'
    NC = '\033[0m'  # No Color

    _DEFAULTS = {
        'RED': RED,
        'GREEN': GREEN,
        'YELLOW': YELLOW,
        'CYAN': CYAN,
        'BOLD': BOLD,
        'NC': NC,
    }

    @classmethod
    def disable(cls):
        """Disable colors for non-ANSI output."""
        for name in cls._DEFAULTS:
            setattr(cls, name, '')

    @classmethod
    def enable(cls):
        """Restore the ANSI codes."""
        for name, value in cls._DEFAULTS.items():
            setattr(cls, name, value)

    @classmethod
    def auto(cls, stream=None, strategy=None):
        """Disable colors when ANSI sequences would be printed literally.

        Args:
            stream: Stream the colored text goes to. Defaults to stdout.
            strategy: Optional RedrawStrategy; a native Windows console
                gets no colors.
        """
        if stream is None:
            stream = sys.stdout
        if not stream.isatty():
            cls.disable()
        elif strategy is not None and strategy.requires_native_console:
            cls.disable()
