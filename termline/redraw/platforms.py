"""Host operating-system family detection."""

import sys
from enum import Enum
from typing import Optional


class OSFamily(str, Enum):
    """Operating-system families the redraw resolver knows about."""
    WINDOWS = "windows"
    DARWIN = "darwin"
    LINUX = "linux"
    FREEBSD = "freebsd"
    NETBSD = "netbsd"
    OPENBSD = "openbsd"
    DRAGONFLY = "dragonfly"
    SOLARIS = "solaris"
    PLAN9 = "plan9"
    UNSUPPORTED = "unsupported"


POSIX_FAMILIES = frozenset({
    OSFamily.DARWIN,
    OSFamily.LINUX,
    OSFamily.FREEBSD,
    OSFamily.NETBSD,
    OSFamily.OPENBSD,
    OSFamily.DRAGONFLY,
    OSFamily.SOLARIS,
    OSFamily.PLAN9,
})

# sys.platform prefix -> family, checked in order
_PLATFORM_PREFIXES = (
    ("win32", OSFamily.WINDOWS),
    ("cygwin", OSFamily.WINDOWS),
    ("msys", OSFamily.WINDOWS),
    ("darwin", OSFamily.DARWIN),
    ("linux", OSFamily.LINUX),
    ("freebsd", OSFamily.FREEBSD),
    ("netbsd", OSFamily.NETBSD),
    ("openbsd", OSFamily.OPENBSD),
    ("dragonfly", OSFamily.DRAGONFLY),
    ("sunos", OSFamily.SOLARIS),
    ("solaris", OSFamily.SOLARIS),
    ("plan9", OSFamily.PLAN9),
)


class UnsupportedPlatformError(RuntimeError):
    """Raised when no line-redraw strategy exists for the host platform."""

    def __init__(self, platform):
        self.platform = platform
        super().__init__(f"Terminal line redraw is not supported on {platform!r}")


def detect_os_family(platform: Optional[str] = None) -> OSFamily:
    """Map a ``sys.platform`` style string to an :class:`OSFamily`.

    Args:
        platform: Platform string. Defaults to ``sys.platform``.

    Returns:
        The matching family, or ``OSFamily.UNSUPPORTED`` for anything unknown.
    """
    if platform is None:
        platform = sys.platform
    name = platform.strip().lower()
    for prefix, family in _PLATFORM_PREFIXES:
        if name.startswith(prefix):
            return family
    return OSFamily.UNSUPPORTED


def coerce_os_family(value) -> OSFamily:
    """Turn a family name or enum member into a supported OSFamily.

    Raises:
        UnsupportedPlatformError: If the value is unknown or ``unsupported``.
    """
    if isinstance(value, OSFamily):
        family = value
    else:
        try:
            family = OSFamily(str(value).strip().lower())
        except ValueError:
            raise UnsupportedPlatformError(value) from None
    if family is OSFamily.UNSUPPORTED:
        raise UnsupportedPlatformError(family.value)
    return family
