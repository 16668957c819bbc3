"""Bounded ``stty size`` probe.

Cygwin ships a working ``stty``; Git for Windows and mintty do not, even
though both export ``$SHELL``. Running the probe tells them apart.
"""

import logging
import subprocess
from typing import Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

DEFAULT_PROBE_TIMEOUT = 0.25  # seconds
STTY_SIZE_COMMAND = ("stty", "size")


def _run_probe(command: Sequence[str], timeout: float) -> Optional[subprocess.CompletedProcess]:
    """Run the probe command, returning None on any failure to complete."""
    try:
        return subprocess.run(
            list(command),
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired:
        logger.debug("Size probe %s timed out after %.3fs", " ".join(command), timeout)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("Size probe %s could not run: %s", " ".join(command), e)
    return None


def probe_size_support(timeout: float = DEFAULT_PROBE_TIMEOUT,
                       command: Sequence[str] = STTY_SIZE_COMMAND) -> bool:
    """Return True if the size probe command exits cleanly within ``timeout``.

    A timed-out child is killed before returning, so this never blocks much
    longer than ``timeout``. Failures are reported as False, never raised.
    """
    result = _run_probe(command, timeout)
    if result is None:
        return False
    if result.returncode != 0:
        logger.debug("Size probe exited with status %d: %s",
                     result.returncode, result.stderr.strip())
        return False
    return True


def query_terminal_size(timeout: float = DEFAULT_PROBE_TIMEOUT,
                        command: Sequence[str] = STTY_SIZE_COMMAND) -> Optional[Tuple[int, int]]:
    """Ask the size probe for the terminal dimensions.

    Returns:
        ``(rows, columns)`` parsed from ``stty size`` output, or None if the
        probe failed or printed something unexpected.
    """
    result = _run_probe(command, timeout)
    if result is None or result.returncode != 0:
        return None
    parts = result.stdout.split()
    if len(parts) != 2:
        logger.debug("Unexpected size probe output: %r", result.stdout)
        return None
    try:
        rows, cols = int(parts[0]), int(parts[1])
    except ValueError:
        logger.debug("Non-numeric size probe output: %r", result.stdout)
        return None
    if rows <= 0 or cols <= 0:
        return None
    return rows, cols
