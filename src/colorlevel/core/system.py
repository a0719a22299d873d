"""Operating-system signals: platform identity and the Windows release number."""

from __future__ import annotations

import math
import platform

from colorlevel._meta import logger
from colorlevel.core.config import (
    WINDOWS_256_BUILD,
    WINDOWS_MIN_MAJOR,
    WINDOWS_PLATFORM,
    WINDOWS_TRUECOLOR_BUILD,
)
from colorlevel.core.types import ColorLevel, OsVersion


def is_windows(platform_name: str) -> bool:
    return platform_name == WINDOWS_PLATFORM


def _component(parts: list[str], index: int) -> float:
    if index >= len(parts):
        return math.nan
    text = parts[index].strip()
    if not text:
        return 0.0
    if not (text.isascii() and text.isdigit()):
        return math.nan
    return float(int(text))


def parse_os_release(release: str | None) -> OsVersion:
    """Split a dotted release (``"10.0.14931"``) into an :class:`OsVersion`.

    ``None`` means the host had nothing to report and maps to ``0.0.0``.
    Components that are missing or not numbers become NaN, which compares
    false against every threshold.
    """
    if release is None:
        return OsVersion()
    parts = release.split(".")
    return OsVersion(
        major=_component(parts, 0),
        minor=_component(parts, 1),
        build=_component(parts, 2),
    )


def host_os_release() -> str | None:
    """Return the running system's dotted version string, or ``None`` if unavailable."""
    try:
        release = platform.version()
    except OSError:
        logger.debug("host did not report an OS version", exc_info=True)
        return None
    return release or None


def resolve_windows_level(version: OsVersion) -> ColorLevel:
    """Map a Windows release to its console colour support.

    Windows 10 gained 256 colours in build 10586 and 24-bit colour in build
    14931. Anything older still gets the basic palette.
    """
    if version.major >= WINDOWS_MIN_MAJOR and version.build >= WINDOWS_256_BUILD:
        return ColorLevel.TRUECOLOR if version.build >= WINDOWS_TRUECOLOR_BUILD else ColorLevel.ANSI256
    return ColorLevel.BASIC


__all__ = [
    "host_os_release",
    "is_windows",
    "parse_os_release",
    "resolve_windows_level",
]
