"""Shell classification for choosing a line-redraw strategy.

``$SHELL`` is the POSIX way of telling a program which shell it runs in.
It is not always right: running ``zsh my_program`` from a bash session
still reports bash. The classifier only has to be good enough to pick
between a plain carriage return and the cursor-up fallback.
"""

from enum import Enum
from typing import Mapping

# Substrings that mark a shell as bash-like (bash, dash, and their paths)
BASH_LIKE_FRAGMENTS = ("bash", "dash")

# Exact POSIX sh locations; "sh" alone as a substring would match zsh/fish
POSIX_SH_PATHS = frozenset({
    "/bin/sh",
    "/sbin/sh",
    "/usr/bin/sh",
    "/usr/sbin/sh",
})

# Terminal emulators/multiplexers where "\r" redraw misbehaves even under bash
INCOMPATIBLE_MULTIPLEXER_VARS = ("TERMINATOR_UUID",)


class ShellKind(Enum):
    BASH_LIKE = "bash-like"
    OTHER = "other"


def has_multiplexer_override(environ: Mapping[str, str]) -> bool:
    """Return True if an incompatible multiplexer variable is set and non-empty."""
    return any(environ.get(var) for var in INCOMPATIBLE_MULTIPLEXER_VARS)


def classify_shell(shell: str, multiplexer_override: bool = False) -> ShellKind:
    """Classify a shell identifier.

    Args:
        shell: Value of ``$SHELL`` (may be empty).
        multiplexer_override: Force ``ShellKind.OTHER`` regardless of the shell.

    Returns:
        ``ShellKind.BASH_LIKE`` when a plain carriage return redraws a line,
        ``ShellKind.OTHER`` otherwise.
    """
    if multiplexer_override:
        return ShellKind.OTHER
    shell = (shell or "").strip()
    if any(fragment in shell for fragment in BASH_LIKE_FRAGMENTS):
        return ShellKind.BASH_LIKE
    if shell in POSIX_SH_PATHS:
        return ShellKind.BASH_LIKE
    return ShellKind.OTHER


def is_bash_like(shell: str, multiplexer_override: bool = False) -> bool:
    return classify_shell(shell, multiplexer_override) is ShellKind.BASH_LIKE
