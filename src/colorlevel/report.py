"""Per-stream detection results as consumed by the CLI renderers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from colorlevel.api import STDERR_FD, STDOUT_FD
from colorlevel.core.types import StreamDescriptor

if TYPE_CHECKING:
    from collections.abc import Iterable

    from colorlevel.core.resolver import ColorLevelResolver
    from colorlevel.core.types import DetectionOptions, ResolvedColorSupport, SignalSources


class StreamName(StrEnum):
    STDOUT = "stdout"
    STDERR = "stderr"

    @property
    def fd(self) -> int:
        return STDOUT_FD if self is StreamName.STDOUT else STDERR_FD


@dataclass(frozen=True, slots=True)
class StreamReport:
    """Detected support for one standard stream."""

    stream: StreamName
    is_terminal: bool
    support: ResolvedColorSupport

    def to_dict(self) -> dict[str, Any]:
        return {
            "stream": self.stream.value,
            "is_terminal": self.is_terminal,
            "label": self.support.level.label,
            **self.support.to_dict(),
        }


def build_reports(
    streams: Iterable[StreamName],
    *,
    resolver: ColorLevelResolver,
    options: DetectionOptions,
    sources: SignalSources,
    descriptors: dict[StreamName, StreamDescriptor] | None = None,
) -> list[StreamReport]:
    """Resolve every stream in *streams* against the same signal snapshot."""
    reports: list[StreamReport] = []
    for name in streams:
        descriptor = (descriptors or {}).get(name) or StreamDescriptor.from_fd(name.fd)
        is_terminal = descriptor.is_terminal if options.stream_is_tty is None else options.stream_is_tty
        reports.append(
            StreamReport(
                stream=name,
                is_terminal=is_terminal,
                support=resolver.resolve(descriptor, options, sources),
            )
        )
    return reports


__all__ = ["StreamName", "StreamReport", "build_reports"]
