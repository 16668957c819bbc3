"""Progress bar that redraws a single terminal line."""

import shutil
import sys

from termline.redraw.platforms import OSFamily
from termline.redraw.probe import DEFAULT_PROBE_TIMEOUT, query_terminal_size
from termline.redraw.resolver import get_strategy

DEFAULT_FALLBACK_WIDTH = 80

# Room left on the line for prefix, brackets and the counter
_LABEL_ROOM = 30


def terminal_width(strategy, fallback=DEFAULT_FALLBACK_WIDTH, timeout=DEFAULT_PROBE_TIMEOUT):
    """Best-effort terminal width in columns.

    Windows POSIX emulation that passed the size probe asks ``stty size``;
    everything else goes through shutil, which falls back to ``fallback``.
    """
    if strategy.os_family is OSFamily.WINDOWS and strategy.supports_size_probe:
        size = query_terminal_size(timeout)
        if size is not None:
            return size[1]
        return fallback
    return shutil.get_terminal_size((fallback, 24)).columns


class ProgressBar:
    """Simple progress bar for batch operations.

    Renders on TTY stderr using the resolved redraw strategy. Silent on non-TTY.

    Usage:
        bar = ProgressBar(total=10, prefix="Processing")
        for item in items:
            bar.update(item.name)
        bar.finish()
    """

    def __init__(self, total, prefix="", width=40, strategy=None, stream=None):
        self.total = total
        self.prefix = prefix
        self.strategy = strategy if strategy is not None else get_strategy()
        if width is None:
            width = max(10, terminal_width(self.strategy) - len(prefix) - _LABEL_ROOM)
        self.width = width
        self.current = 0
        self.stream = stream if stream is not None else sys.stderr
        self.is_tty = self.stream.isatty()
        self._drawn = False
        self._ended_line = False
        self._last_len = 0

    def render(self, item_name=""):
        """Build the progress line for the current position."""
        filled = int(self.width * self.current / self.total) if self.total else self.width
        bar = "█" * filled + "░" * (self.width - filled)
        line = f"{self.prefix} [{bar}] {self.current}/{self.total}"
        if item_name:
            max_name = 30
            if len(item_name) > max_name:
                item_name = item_name[:max_name - 3] + "..."
            line += f" {item_name}"
        return line

    def update(self, item_name=""):
        """Advance the progress bar by one step."""
        self.current += 1
        if not self.is_tty:
            return
        line = self.render(item_name)
        # A bare carriage return leaves the tail of a longer previous line
        padded = line.ljust(self._last_len)
        self._last_len = len(line)
        line = padded
        if self._drawn:
            out = self.strategy.wrap(line)
        else:
            # Nothing to clear yet; moving the cursor up would eat earlier output
            out = line + self.strategy.clear_suffix
        if self.current >= self.total and not out.endswith("\n"):
            out += "\n"
        self.stream.write(out)
        self.stream.flush()
        self._drawn = True
        self._ended_line = out.endswith("\n")

    def finish(self):
        """Ensure the progress bar ends with a newline."""
        if self.is_tty and self._drawn and not self._ended_line:
            self.stream.write("\n")
            self.stream.flush()
            self._ended_line = True
