"""Command line interface for ``colorlevel``."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import rich_click as click
from jsonschema import ValidationError

from colorlevel._meta import __version__, logger
from colorlevel.api import default_resolver
from colorlevel.core.config import LOG_FORMAT
from colorlevel.core.types import DetectionOptions, SignalSources, StreamDescriptor
from colorlevel.errors import ColorLevelError
from colorlevel.render import render_human, render_json, render_levels
from colorlevel.report import StreamName, build_reports

if TYPE_CHECKING:
    from collections.abc import Sequence

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "auto_envvar_prefix": "COLORLEVEL",
    "max_content_width": 100,
}

# --- rich-click configuration ---
click.rich_click.TEXT_MARKUP = "rich"
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.MAX_WIDTH = CONTEXT_SETTINGS["max_content_width"]

_OPTION_GROUPS_BASE = [
    {
        "name": "Detection",
        "options": ["--stream", "--sniff-flags", "--no-sniff-flags", "--assume-tty", "--assume-not-tty"],
    },
    {
        "name": "Output",
        "options": ["--format", "--level-only"],
    },
    {
        "name": "Logging & misc",
        "options": ["-q", "--quiet", "-v", "--verbose", "--debug", "--version", "--help"],
    },
]

click.rich_click.OPTION_GROUPS = {
    "colorlevel": _OPTION_GROUPS_BASE,
    "cli": _OPTION_GROUPS_BASE,
}
# ---------------------------------

EXIT_OK = 0
EXIT_GENERIC = 1
EXIT_DATAERR = 65

_STREAM_CHOICES = {
    "stdout": (StreamName.STDOUT,),
    "stderr": (StreamName.STDERR,),
    "both": (StreamName.STDOUT, StreamName.STDERR),
}


def _configure_logging(*, quiet: bool, verbose: bool, debug: bool) -> None:
    level = logging.ERROR if quiet else (logging.DEBUG if (debug or verbose) else logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    if debug:
        logger.debug("debug logging enabled")


def _output_is_colored() -> bool:
    # the table's own styling follows what the resolver says about our stdout
    support = default_resolver().resolve(
        StreamDescriptor.from_stream(sys.stdout),
        DetectionOptions(sniff_flags=False),
        SignalSources.from_host(argv=()),
    )
    return bool(support)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument("sniffed_argv", nargs=-1, metavar="[-- ARGV...]")
@click.option(
    "--stream",
    "stream_option",
    type=click.Choice(sorted(_STREAM_CHOICES), case_sensitive=False),
    default="both",
    show_default=True,
    envvar="COLORLEVEL_STREAM",
    help="Which standard stream(s) to inspect.",
)
@click.option(
    "--sniff-flags/--no-sniff-flags",
    default=True,
    show_default=True,
    help="Let colour flags in ARGV (given after `--`) take part in detection.",
)
@click.option(
    "--assume-tty/--assume-not-tty",
    "assume_tty",
    default=None,
    help="Treat the stream(s) as a terminal (or not) instead of asking the OS.",
)
@click.option(
    "--format",
    "format_option",
    type=click.Choice(["human", "json"], case_sensitive=False),
    default="human",
    show_default=True,
    envvar="COLORLEVEL_FORMAT",
    help="Output format.",
)
@click.option(
    "--level-only",
    is_flag=True,
    help="Print only the numeric level (0-3) of each stream, one per line.",
)
@click.option("-q", "--quiet", is_flag=True, help="Suppress non-essential output (errors only).")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging.")
@click.option("--debug", is_flag=True, help="Enable debug logging (includes tracebacks on errors).")
@click.version_option(__version__)
@click.pass_context
def cli(  # noqa: PLR0913
    ctx: click.Context,
    sniffed_argv: Sequence[str],
    stream_option: str,
    format_option: str,
    *,
    sniff_flags: bool = True,
    assume_tty: bool | None = None,
    level_only: bool = False,
    quiet: bool = False,
    verbose: bool = False,
    debug: bool = False,
) -> None:
    """Report which level of ANSI colour the standard streams support.

    Colour flags are only sniffed from arguments after a literal `--`, e.g.
    `colorlevel -- --color=256`.
    """
    if quiet and verbose:
        msg = "--quiet"
        raise click.BadOptionUsage(msg, "--quiet and --verbose cannot be combined")

    _configure_logging(quiet=quiet, verbose=verbose, debug=debug)

    options = DetectionOptions(sniff_flags=sniff_flags, stream_is_tty=assume_tty)
    sources = SignalSources.from_host(argv=sniffed_argv)
    logger.debug("sniffed argv: %s", list(sources.argv))

    try:
        reports = build_reports(
            _STREAM_CHOICES[stream_option.lower()],
            resolver=default_resolver(),
            options=options,
            sources=sources,
        )
        if level_only:
            text = render_levels(reports)
        elif format_option.lower() == "json":
            text = render_json(reports)
        else:
            text = render_human(reports, color=_output_is_colored())
    except ValidationError as exc:
        if debug:
            raise
        click.echo(f"ERROR: report does not match schema: {exc.message}", err=True)
        ctx.exit(EXIT_DATAERR)
    except ColorLevelError as exc:
        if debug:
            raise
        click.echo(f"ERROR: {exc}", err=True)
        ctx.exit(EXIT_GENERIC)

    click.echo(text)
    ctx.exit(EXIT_OK)


__all__ = ["EXIT_DATAERR", "EXIT_GENERIC", "EXIT_OK", "cli"]
