"""Central configuration and constants for ``colorlevel``."""

from __future__ import annotations

import json
import re
from functools import cache
from importlib import resources

from colorlevel.errors import UnknownSchemaVersionError

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"

# ---------------------------------------------------------------------------
# Environment variables
# ---------------------------------------------------------------------------

FULL_COLOR_CI_VARS: tuple[str, ...] = ("GITHUB_ACTIONS", "GITEA_ACTIONS", "CIRCLECI")
"""CI providers whose log viewers render 24-bit colour."""

BASIC_COLOR_CI_VARS: tuple[str, ...] = ("TRAVIS", "APPVEYOR", "GITLAB_CI", "BUILDKITE", "DRONE")
"""CI providers limited to the 16 basic ANSI colours."""

AZURE_PIPELINES_VARS: tuple[str, ...] = ("TF_BUILD", "AGENT_NAME")

TRUECOLOR_TERMS: frozenset[str] = frozenset({"xterm-kitty", "xterm-ghostty", "wezterm"})

RECOGNIZED_ENV_VARS: frozenset[str] = frozenset(
    {
        "FORCE_COLOR",
        "COLORTERM",
        "TERM",
        "TERM_PROGRAM",
        "TERM_PROGRAM_VERSION",
        "CI",
        "CI_NAME",
        "TEAMCITY_VERSION",
        *AZURE_PIPELINES_VARS,
        *BASIC_COLOR_CI_VARS,
        *FULL_COLOR_CI_VARS,
    }
)
"""The only environment keys the resolver ever reads."""

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

TERM_256_PATTERN = re.compile(r"-256(color)?\Z", re.IGNORECASE)
TERM_BASIC_PATTERN = re.compile(r"^screen|^xterm|^vt100|^vt220|^rxvt|color|ansi|cygwin|linux", re.IGNORECASE)
TEAMCITY_VERSION_PATTERN = re.compile(r"^(9\.(0*[1-9]\d*)\.|\d{2,}\.)", re.ASCII)
LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?[0-9]+)")

# ---------------------------------------------------------------------------
# Flags
# ---------------------------------------------------------------------------

ARGV_TERMINATOR = "--"

DISABLE_FLAGS: tuple[str, ...] = ("no-color", "no-colors", "color=false", "color=never")
ENABLE_FLAGS: tuple[str, ...] = ("color", "colors", "color=true", "color=always")
TRUECOLOR_FLAGS: tuple[str, ...] = ("color=16m", "color=full", "color=truecolor")
ANSI256_FLAGS: tuple[str, ...] = ("color=256",)

# ---------------------------------------------------------------------------
# Windows
# ---------------------------------------------------------------------------

WINDOWS_PLATFORM = "win32"
# Windows 10 build 10586 is the first release with 256-colour console support,
# build 14931 the first with 24-bit colour.
WINDOWS_MIN_MAJOR = 10
WINDOWS_256_BUILD = 10_586
WINDOWS_TRUECOLOR_BUILD = 14_931

# ---------------------------------------------------------------------------
# Structured output
# ---------------------------------------------------------------------------

_SCHEMA_FILES: dict[str, str] = {
    "v1": "schema.json",
}


@cache
def get_schema(version: str = "v1") -> dict[str, object]:
    """Load and cache the JSON schema for structured output."""
    try:
        filename = _SCHEMA_FILES[version]
    except KeyError as exc:
        choices = ", ".join(sorted(_SCHEMA_FILES))
        msg = f"Unsupported schema version: {version!r}. Available versions: {choices}"
        raise UnknownSchemaVersionError(msg) from exc
    return json.loads(resources.files("colorlevel.data").joinpath(filename).read_text(encoding="utf-8"))


__all__ = [
    "ANSI256_FLAGS",
    "ARGV_TERMINATOR",
    "AZURE_PIPELINES_VARS",
    "BASIC_COLOR_CI_VARS",
    "DISABLE_FLAGS",
    "ENABLE_FLAGS",
    "FULL_COLOR_CI_VARS",
    "LEADING_INT_PATTERN",
    "LOG_FORMAT",
    "RECOGNIZED_ENV_VARS",
    "TEAMCITY_VERSION_PATTERN",
    "TERM_256_PATTERN",
    "TERM_BASIC_PATTERN",
    "TRUECOLOR_FLAGS",
    "TRUECOLOR_TERMS",
    "WINDOWS_256_BUILD",
    "WINDOWS_MIN_MAJOR",
    "WINDOWS_PLATFORM",
    "WINDOWS_TRUECOLOR_BUILD",
    "get_schema",
]
