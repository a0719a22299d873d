from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from colorlevel.report import StreamReport


def _yes_no(value: bool, *, color: bool) -> str:  # noqa: FBT001
    text = "yes" if value else "no"
    if not color:
        return text
    return f"[green]{text}[/green]" if value else f"[red]{text}[/red]"


def _build_table(reports: Sequence[StreamReport], *, color: bool) -> Table:
    table = Table(title="Colour support", box=box.SIMPLE_HEAVY, header_style="bold" if color else "")

    table.add_column("Stream", style="cyan" if color else "")
    table.add_column("Terminal")
    table.add_column("Level", justify="right")
    table.add_column("Basic")
    table.add_column("256")
    table.add_column("16m")

    for report in reports:
        support = report.support
        table.add_row(
            report.stream.value,
            _yes_no(report.is_terminal, color=color),
            f"{int(support.level)} ({support.level.label})",
            _yes_no(support.has_basic, color=color),
            _yes_no(support.has_256, color=color),
            _yes_no(support.has_16m, color=color),
        )
    return table


def render_human(reports: Sequence[StreamReport], *, color: bool = False) -> str:
    """Return a Rich-rendered table describing *reports*.

    ``color`` only affects the table's own styling; it is normally the
    verdict for the stream the table is written to.
    """
    buf = StringIO()
    console = Console(
        file=buf,
        force_terminal=color,
        color_system="standard" if color else None,
        no_color=not color,
        width=10_000,
    )
    console.print(_build_table(reports, color=color))
    return buf.getvalue().rstrip()


def render_levels(reports: Sequence[StreamReport]) -> str:
    return "\n".join(str(int(report.support.level)) for report in reports)


__all__ = ["render_human", "render_levels"]
