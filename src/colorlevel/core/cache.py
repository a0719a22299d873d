"""Memoisation owned by a resolver instance."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from colorlevel.core.types import ColorLevel, OsVersion

_UNSET = object()


class DetectionCache:
    """Flag-lookup, forced-level and OS-version caches behind one lock.

    Every stored value is immutable, so readers never see a half-built entry.
    The forced-level entry remembers the argv tuple it was computed from and
    is ignored as soon as argv differs in any way.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._flags: dict[tuple[str, tuple[str, ...]], bool] = {}
        self._os_versions: dict[str | None, OsVersion] = {}
        self._forced_argv: tuple[str, ...] | None = None
        self._forced_level: ColorLevel | None | object = _UNSET

    # -- flag lookups -------------------------------------------------------
    def flag(self, flag: str, argv: tuple[str, ...], compute: Callable[[], bool]) -> bool:
        key = (flag, argv)
        with self._lock:
            try:
                return self._flags[key]
            except KeyError:
                result = self._flags[key] = compute()
                return result

    # -- forced level from flags -------------------------------------------
    def forced_level(
        self,
        argv: tuple[str, ...],
        compute: Callable[[], ColorLevel | None],
    ) -> ColorLevel | None:
        with self._lock:
            if self._forced_level is not _UNSET and self._forced_argv == argv:
                return self._forced_level  # type: ignore[return-value]
        # computed outside the lock; it takes the lock again for flag lookups
        value = compute()
        with self._lock:
            self._forced_argv = argv
            self._forced_level = value
        return value

    # -- OS version ---------------------------------------------------------
    def os_version(self, release: str | None, compute: Callable[[], OsVersion]) -> OsVersion:
        with self._lock:
            cached = self._os_versions.get(release)
        if cached is not None:
            return cached
        value = compute()
        with self._lock:
            return self._os_versions.setdefault(release, value)

    def clear(self) -> None:
        with self._lock:
            self._flags.clear()
            self._os_versions.clear()
            self._forced_argv = None
            self._forced_level = _UNSET

    def __len__(self) -> int:
        with self._lock:
            forced = 0 if self._forced_level is _UNSET else 1
            return len(self._flags) + len(self._os_versions) + forced


__all__ = ["DetectionCache"]
