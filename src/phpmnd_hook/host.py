"""Host platform detection and PHPMND binary selection."""

from __future__ import annotations

import platform as _platform

from phpmnd_hook.models import Platform

_SYSTEM_MAP = {
    "windows": Platform.WINDOWS,
    "darwin": Platform.DARWIN,
    "linux": Platform.LINUX,
    "sunos": Platform.SOLARIS,
    "solaris": Platform.SOLARIS,
}


def detect_platform(system: str | None = None) -> Platform:
    """Map ``platform.system()`` (or an explicit value) onto a :class:`Platform`."""
    name = (system if system is not None else _platform.system()).lower()
    if name in _SYSTEM_MAP:
        return _SYSTEM_MAP[name]
    if name.endswith("bsd") or name == "dragonfly":
        return Platform.BSD
    if name.startswith(("cygwin", "msys", "mingw")):
        return Platform.WINDOWS
    return Platform.UNKNOWN


def binary_name(platform: Platform) -> str:
    """Return the PHPMND launcher name Composer installs for ``platform``."""
    if platform == Platform.WINDOWS:
        return "phpmnd.bat"
    return "phpmnd"
