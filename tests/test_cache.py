from __future__ import annotations

import threading

from colorlevel.core.cache import DetectionCache
from colorlevel.core.types import ColorLevel, OsVersion


def test_flag_lookup_is_computed_once_per_key() -> None:
    cache = DetectionCache()
    calls: list[str] = []

    def compute() -> bool:
        calls.append("x")
        return True

    assert cache.flag("color", ("--color",), compute)
    assert cache.flag("color", ("--color",), compute)
    assert len(calls) == 1

    cache.flag("color", ("--color", "x"), compute)
    assert len(calls) == 2


def test_forced_level_keyed_on_argv_contents() -> None:
    cache = DetectionCache()
    assert cache.forced_level(("a",), lambda: ColorLevel.BASIC) == ColorLevel.BASIC
    assert cache.forced_level(("a",), lambda: ColorLevel.NONE) == ColorLevel.BASIC
    assert cache.forced_level(("b",), lambda: None) is None
    assert cache.forced_level(("b",), lambda: ColorLevel.BASIC) is None


def test_os_version_cached_per_release() -> None:
    cache = DetectionCache()
    assert cache.os_version("10.0.1", lambda: OsVersion(10, 0, 1)) == OsVersion(10, 0, 1)
    assert cache.os_version("10.0.1", lambda: OsVersion(0, 0, 0)) == OsVersion(10, 0, 1)
    assert cache.os_version(None, lambda: OsVersion(6, 1, 0)) == OsVersion(6, 1, 0)


def test_clear_forgets_everything() -> None:
    cache = DetectionCache()
    cache.flag("color", (), lambda: False)
    cache.forced_level((), lambda: None)
    cache.os_version(None, OsVersion)
    assert len(cache) == 3

    cache.clear()
    assert len(cache) == 0
    assert cache.forced_level((), lambda: ColorLevel.BASIC) == ColorLevel.BASIC


def test_concurrent_lookups_agree() -> None:
    cache = DetectionCache()
    results: list[bool] = []
    lock = threading.Lock()

    def worker() -> None:
        for _ in range(200):
            value = cache.flag("color", ("--color",), lambda: True)
            with lock:
                results.append(value)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 1600
    assert all(results)
    assert len(cache) == 1
