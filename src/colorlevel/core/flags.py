"""Command-line flag signals (``--color``, ``--no-color``, ``--color=256`` ...)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from colorlevel.core.config import (
    ANSI256_FLAGS,
    ARGV_TERMINATOR,
    DISABLE_FLAGS,
    ENABLE_FLAGS,
    TRUECOLOR_FLAGS,
)
from colorlevel.core.types import ColorLevel

if TYPE_CHECKING:
    from collections.abc import Sequence

    from colorlevel.core.cache import DetectionCache


def flag_token(flag: str) -> str:
    """Return the argv token for *flag*: ``-x`` for one letter, ``--name`` otherwise."""
    if flag.startswith("-"):
        return flag
    return f"-{flag}" if len(flag) == 1 else f"--{flag}"


def _index(argv: Sequence[str], token: str) -> int:
    try:
        return argv.index(token)
    except ValueError:
        return -1


def has_flag(flag: str, argv: Sequence[str], *, cache: DetectionCache | None = None) -> bool:
    """Report whether *flag* occurs in *argv* before any ``--`` terminator."""
    snapshot = tuple(argv)

    def compute() -> bool:
        position = _index(snapshot, flag_token(flag))
        terminator = _index(snapshot, ARGV_TERMINATOR)
        return position != -1 and (terminator == -1 or position < terminator)

    if cache is None:
        return compute()
    return cache.flag(flag, snapshot, compute)


def _any_flag(flags: Sequence[str], argv: Sequence[str], cache: DetectionCache | None) -> bool:
    return any(has_flag(flag, argv, cache=cache) for flag in flags)


def resolve_flag_force_level(
    argv: Sequence[str],
    *,
    cache: DetectionCache | None = None,
) -> ColorLevel | None:
    """Return the level forced by on/off flags, or ``None`` when none is given.

    Disabling flags win over enabling ones. The result is reused for as long
    as *argv* is unchanged.
    """
    snapshot = tuple(argv)

    def compute() -> ColorLevel | None:
        if _any_flag(DISABLE_FLAGS, snapshot, cache):
            return ColorLevel.NONE
        if _any_flag(ENABLE_FLAGS, snapshot, cache):
            return ColorLevel.BASIC
        return None

    if cache is None:
        return compute()
    return cache.forced_level(snapshot, compute)


def resolve_flag_explicit_level(argv: Sequence[str], *, cache: DetectionCache | None = None) -> ColorLevel:
    """Return the elevated level requested with ``--color=256``/``--color=16m``, else ``NONE``."""
    if _any_flag(TRUECOLOR_FLAGS, argv, cache):
        return ColorLevel.TRUECOLOR
    if _any_flag(ANSI256_FLAGS, argv, cache):
        return ColorLevel.ANSI256
    return ColorLevel.NONE


__all__ = [
    "flag_token",
    "has_flag",
    "resolve_flag_explicit_level",
    "resolve_flag_force_level",
]
