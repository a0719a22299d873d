"""Process-wide convenience entry points backed by one default resolver."""

from __future__ import annotations

from functools import cache

from colorlevel.core.resolver import ColorLevelResolver
from colorlevel.core.types import (
    DetectionOptions,
    ResolvedColorSupport,
    SignalSources,
    StreamDescriptor,
)

STDOUT_FD = 1
STDERR_FD = 2

_default_resolver = ColorLevelResolver()


def default_resolver() -> ColorLevelResolver:
    return _default_resolver


def resolve(
    stream: StreamDescriptor | None = None,
    options: DetectionOptions | None = None,
    sources: SignalSources | None = None,
) -> ResolvedColorSupport:
    """Resolve colour support for *stream* using the default resolver.

    ``sources`` defaults to a snapshot of the running process.
    """
    return _default_resolver.resolve(stream, options, sources)


@cache
def stdout_support() -> ResolvedColorSupport:
    """Colour support of file descriptor 1, computed once per process."""
    return resolve(StreamDescriptor.from_fd(STDOUT_FD))


@cache
def stderr_support() -> ResolvedColorSupport:
    """Colour support of file descriptor 2, computed once per process."""
    return resolve(StreamDescriptor.from_fd(STDERR_FD))


def clear_caches() -> None:
    """Forget every memoised result, e.g. after changing the environment in a test."""
    _default_resolver.clear()
    stdout_support.cache_clear()
    stderr_support.cache_clear()


__all__ = [
    "STDERR_FD",
    "STDOUT_FD",
    "clear_caches",
    "default_resolver",
    "resolve",
    "stderr_support",
    "stdout_support",
]
