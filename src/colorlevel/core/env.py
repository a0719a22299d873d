"""Environment-variable signals: forced levels, CI providers and terminal types."""

from __future__ import annotations

from typing import TYPE_CHECKING

from colorlevel.core.config import (
    AZURE_PIPELINES_VARS,
    BASIC_COLOR_CI_VARS,
    FULL_COLOR_CI_VARS,
    LEADING_INT_PATTERN,
    TEAMCITY_VERSION_PATTERN,
    TERM_256_PATTERN,
    TERM_BASIC_PATTERN,
    TRUECOLOR_TERMS,
)
from colorlevel.core.types import ColorLevel

if TYPE_CHECKING:
    from collections.abc import Mapping


def parse_leading_int(text: str | None) -> int | None:
    """Parse the integer prefix of *text* (``"3.4.1"`` -> 3); ``None`` if there is none."""
    if text is None:
        return None
    match = LEADING_INT_PATTERN.match(text)
    return int(match.group(1)) if match else None


def resolve_env_force_level(env: Mapping[str, str]) -> ColorLevel | None:
    """Interpret ``FORCE_COLOR``.

    ``"true"`` and the empty string force basic colour, ``"false"`` disables
    colour, numbers are capped at 3. Anything else (negative numbers, text)
    leaves the level unforced.
    """
    if "FORCE_COLOR" not in env:
        return None
    value = env["FORCE_COLOR"]
    if value == "true":
        return ColorLevel.BASIC
    if value == "false":
        return ColorLevel.NONE
    if not value:
        return ColorLevel.BASIC

    parsed = parse_leading_int(value)
    if parsed is None:
        return None
    if parsed < ColorLevel.NONE:
        return None
    return ColorLevel.clamp(parsed)


def _iterm_level(env: Mapping[str, str]) -> ColorLevel:
    version = parse_leading_int(env.get("TERM_PROGRAM_VERSION", "").split(".")[0])
    if version is not None and version >= 3:  # noqa: PLR2004
        return ColorLevel.TRUECOLOR
    return ColorLevel.ANSI256


def resolve_terminal_type_level(env: Mapping[str, str]) -> ColorLevel:  # noqa: PLR0911
    """Guess the level from terminal identification variables; first match wins."""
    term = env.get("TERM")

    if env.get("COLORTERM") == "truecolor":
        return ColorLevel.TRUECOLOR
    if term in TRUECOLOR_TERMS:
        return ColorLevel.TRUECOLOR

    if "TERM_PROGRAM" in env:
        program = env["TERM_PROGRAM"]
        if program == "iTerm.app":
            return _iterm_level(env)
        if program == "Apple_Terminal":
            return ColorLevel.ANSI256

    if term is not None:
        if TERM_256_PATTERN.search(term):
            return ColorLevel.ANSI256
        if TERM_BASIC_PATTERN.search(term):
            return ColorLevel.BASIC

    if "COLORTERM" in env:
        return ColorLevel.BASIC
    return ColorLevel.NONE


def resolve_ci_color_level(env: Mapping[str, str], floor: ColorLevel) -> ColorLevel:
    """Return the level of a recognised CI provider, or *floor* unchanged."""
    if any(key in env for key in FULL_COLOR_CI_VARS):
        return ColorLevel.TRUECOLOR
    if any(key in env for key in BASIC_COLOR_CI_VARS) or env.get("CI_NAME") == "codeship":
        return ColorLevel.BASIC
    return floor


def resolve_teamcity_level(env: Mapping[str, str]) -> ColorLevel:
    """TeamCity renders ANSI colour from 9.1 on."""
    version = env.get("TEAMCITY_VERSION")
    if version is not None and TEAMCITY_VERSION_PATTERN.match(version):
        return ColorLevel.BASIC
    return ColorLevel.NONE


def is_azure_pipelines(env: Mapping[str, str]) -> bool:
    return all(key in env for key in AZURE_PIPELINES_VARS)


__all__ = [
    "is_azure_pipelines",
    "parse_leading_int",
    "resolve_ci_color_level",
    "resolve_env_force_level",
    "resolve_teamcity_level",
    "resolve_terminal_type_level",
]
