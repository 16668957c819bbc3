"""Line-redraw strategy resolution.

Works out, once per process, which control sequences clear and rewrite a
single terminal line. A plain ``"\\r"`` works in bash-like shells and the
native Windows console; everything else gets a cursor-up-and-clear
sequence that is known to work in zsh and assumed to work in ksh, csh,
tcsh and fish.

Usage:
    from termline.redraw.resolver import get_strategy

    strategy = get_strategy()
    sys.stderr.write(strategy.clear_prefix + line + strategy.clear_suffix)
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from termline.redraw.platforms import (
    OSFamily,
    UnsupportedPlatformError,
    coerce_os_family,
    detect_os_family,
)
from termline.redraw.probe import DEFAULT_PROBE_TIMEOUT, probe_size_support
from termline.redraw.shell import has_multiplexer_override, is_bash_like

logger = logging.getLogger(__name__)

CARRIAGE_RETURN = "\r"
CURSOR_UP_CLEAR_PREFIX = "\x1b[1A\x1b[K\r"  # up one line, erase it, column 0
MODE_RESET_SUFFIX = "\x1b[1i\n"

SHELL_VAR = "SHELL"

# Resolved once per process by get_strategy()
_cached: Optional["RedrawStrategy"] = None


@dataclass(frozen=True)
class RedrawStrategy:
    """Control sequences and environment facts for redrawing one line.

    Attributes:
        clear_prefix: Emitted immediately before the redrawn line.
        clear_suffix: Emitted immediately after the redrawn line.
        requires_native_console: True on a plain Windows console, where the
            widget must use console API calls rather than ANSI sequences.
        supports_size_probe: True when ``stty size`` answered within the
            probe timeout (Windows POSIX emulation only).
        os_family: Family the strategy was resolved for.
        shell: ``$SHELL`` value used for classification.
    """
    clear_prefix: str
    clear_suffix: str
    requires_native_console: bool = False
    supports_size_probe: bool = False
    os_family: OSFamily = OSFamily.LINUX
    shell: str = ""

    @property
    def uses_ansi(self) -> bool:
        return not self.requires_native_console

    def wrap(self, line: str) -> str:
        """Surround a line of text with the clear prefix and suffix."""
        return f"{self.clear_prefix}{line}{self.clear_suffix}"


def _posix_strategy(os_family: OSFamily, shell: str, environ: Mapping[str, str],
                    supports_size_probe: bool = False) -> RedrawStrategy:
    if is_bash_like(shell, has_multiplexer_override(environ)):
        prefix, suffix = CARRIAGE_RETURN, ""
    else:
        prefix, suffix = CURSOR_UP_CLEAR_PREFIX, MODE_RESET_SUFFIX
    return RedrawStrategy(
        clear_prefix=prefix,
        clear_suffix=suffix,
        requires_native_console=False,
        supports_size_probe=supports_size_probe,
        os_family=os_family,
        shell=shell,
    )


def resolve(
    os_family=None,
    environ: Optional[Mapping[str, str]] = None,
    probe: Optional[Callable[[float], bool]] = None,
    timeout: float = DEFAULT_PROBE_TIMEOUT,
) -> RedrawStrategy:
    """Resolve the line-redraw strategy for an environment.

    Args:
        os_family: OSFamily or family name. Defaults to the running host.
        environ: Environment mapping. Defaults to ``os.environ``.
        probe: Callable taking a timeout in seconds and returning whether the
            terminal size probe works. Defaults to ``probe_size_support``.
        timeout: Size probe timeout in seconds.

    Returns:
        A new immutable RedrawStrategy.

    Raises:
        UnsupportedPlatformError: If the OS family has no redraw strategy.
    """
    if os_family is None:
        os_family = detect_os_family()
        if os_family is OSFamily.UNSUPPORTED:
            raise UnsupportedPlatformError(sys.platform)
    family = coerce_os_family(os_family)
    if environ is None:
        environ = os.environ
    if probe is None:
        probe = probe_size_support
    shell = environ.get(SHELL_VAR, "") or ""

    if family is OSFamily.WINDOWS:
        if not shell:
            strategy = RedrawStrategy(
                clear_prefix=CARRIAGE_RETURN,
                clear_suffix="",
                requires_native_console=True,
                supports_size_probe=False,
                os_family=family,
                shell=shell,
            )
            logger.debug("Native Windows console; using carriage-return redraw")
            return strategy
        # SHELL is set, so some POSIX emulation layer (cygwin, msys, ...) is present
        supports_size_probe = bool(probe(timeout))
        logger.debug("POSIX emulation on Windows (SHELL=%s), size probe %s",
                     shell, "available" if supports_size_probe else "unavailable")
        strategy = _posix_strategy(family, shell, environ, supports_size_probe)
    else:
        strategy = _posix_strategy(family, shell, environ)

    logger.debug("Resolved redraw strategy for %s (SHELL=%r): prefix=%r suffix=%r",
                 family.value, shell, strategy.clear_prefix, strategy.clear_suffix)
    return strategy


def get_strategy() -> RedrawStrategy:
    """Return the process-wide strategy, resolving it on first use.

    Raises:
        UnsupportedPlatformError: If the host platform is unsupported.
    """
    global _cached
    if _cached is None:
        _cached = resolve()
    return _cached


__all__ = [
    "CARRIAGE_RETURN",
    "CURSOR_UP_CLEAR_PREFIX",
    "MODE_RESET_SUFFIX",
    "RedrawStrategy",
    "UnsupportedPlatformError",
    "get_strategy",
    "resolve",
]
