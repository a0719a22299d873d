"""Value types shared by the signal parsers and the resolver."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from colorlevel.core.config import RECOGNIZED_ENV_VARS
from colorlevel.errors import InvalidColorLevelError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


# ---------------------------------------------------------------------------
# Levels
# ---------------------------------------------------------------------------


class ColorLevel(IntEnum):
    """Ordered ANSI colour capability; each level includes everything below it."""

    NONE = 0
    BASIC = 1
    ANSI256 = 2
    TRUECOLOR = 3

    @classmethod
    def clamp(cls, value: int) -> ColorLevel:
        """Floor/cap an arbitrary integer into the valid range."""
        return cls(min(max(int(value), cls.NONE), cls.TRUECOLOR))

    @classmethod
    def parse(cls, value: object) -> ColorLevel:
        """Convert a level number or label (``"256"``, ``"truecolor"``) into a level."""
        if isinstance(value, ColorLevel):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError as exc:
                msg = f"colour level out of range: {value!r}"
                raise InvalidColorLevelError(msg) from exc
        if isinstance(value, str):
            text = value.strip().lower()
            for level in cls:
                if text in {level.label, str(int(level)), level.name.lower()}:
                    return level
        msg = f"not a colour level: {value!r}"
        raise InvalidColorLevelError(msg)

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    ColorLevel.NONE: "none",
    ColorLevel.BASIC: "basic",
    ColorLevel.ANSI256: "256",
    ColorLevel.TRUECOLOR: "truecolor",
}


@dataclass(frozen=True, slots=True)
class ResolvedColorSupport:
    """Capability view derived from a :class:`ColorLevel`.

    An instance built from level ``0`` is the *unsupported* result and is
    falsy, so ``if support:`` reads naturally at call sites.
    """

    level: ColorLevel
    has_basic: bool
    has_256: bool
    has_16m: bool

    @classmethod
    def from_level(cls, level: int) -> ResolvedColorSupport:
        lvl = ColorLevel.parse(level)
        return cls(
            level=lvl,
            has_basic=lvl >= ColorLevel.BASIC,
            has_256=lvl >= ColorLevel.ANSI256,
            has_16m=lvl >= ColorLevel.TRUECOLOR,
        )

    @property
    def supported(self) -> bool:
        return self.level > ColorLevel.NONE

    def __bool__(self) -> bool:
        return self.supported

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": int(self.level),
            "has_basic": self.has_basic,
            "has_256": self.has_256,
            "has_16m": self.has_16m,
        }


UNSUPPORTED = ResolvedColorSupport.from_level(ColorLevel.NONE)


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class StreamDescriptor:
    """The one observable property of an output stream the resolver needs."""

    is_terminal: bool

    @classmethod
    def from_stream(cls, stream: object) -> StreamDescriptor:
        """Describe a file-like object; anything without a working ``isatty`` is not a terminal."""
        isatty = getattr(stream, "isatty", None)
        if isatty is None:
            return cls(is_terminal=False)
        try:
            return cls(is_terminal=bool(isatty()))
        except (OSError, ValueError):
            # closed or detached streams
            return cls(is_terminal=False)

    @classmethod
    def from_fd(cls, fd: int) -> StreamDescriptor:
        try:
            return cls(is_terminal=os.isatty(fd))
        except OSError:
            return cls(is_terminal=False)


@dataclass(frozen=True, slots=True)
class DetectionOptions:
    """Caller-supplied switches.

    Fields
    ------
    sniff_flags:
        Whether command-line flags participate in detection.
    stream_is_tty:
        When not ``None``, used instead of the stream's own terminal flag.
    """

    sniff_flags: bool = True
    stream_is_tty: bool | None = None


@dataclass(frozen=True, slots=True)
class OsVersion:
    """Dotted OS release split into numbers; unparseable parts are NaN."""

    major: float = 0.0
    minor: float = 0.0
    build: float = 0.0


@dataclass(frozen=True, slots=True)
class SignalSources:
    """Read-only snapshot of everything a single resolution looks at.

    ``env`` keeps only the recognised variable names and is exposed as a
    read-only mapping. ``os_release`` is the dotted release string
    (``"10.0.14931"``); ``None`` means "ask the host when needed".
    """

    argv: tuple[str, ...] = ()
    env: Mapping[str, str] = field(default_factory=dict, hash=False)
    platform: str = ""
    os_release: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "argv", tuple(self.argv))
        view = {key: str(value) for key, value in self.env.items() if key in RECOGNIZED_ENV_VARS}
        object.__setattr__(self, "env", MappingProxyType(view))

    @classmethod
    def from_host(cls, *, argv: Iterable[str] | None = None) -> SignalSources:
        """Snapshot the running process: ``sys.argv``, ``os.environ`` and ``sys.platform``."""
        return cls(
            argv=tuple(sys.argv[1:] if argv is None else argv),
            env=os.environ,
            platform=sys.platform,
        )


__all__ = [
    "UNSUPPORTED",
    "ColorLevel",
    "DetectionOptions",
    "OsVersion",
    "ResolvedColorSupport",
    "SignalSources",
    "StreamDescriptor",
]
