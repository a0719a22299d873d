"""Combine flag, environment and platform signals into one colour level.

The signals are consulted in a fixed order and the first decisive one wins:

1. ``FORCE_COLOR`` overrides ``--color``/``--no-color``; with flag sniffing
   disabled only ``FORCE_COLOR`` counts.
2. A forced level of 0 disables colour outright.
3. ``--color=256``/``--color=16m`` request an explicit level.
4. Azure Pipelines (``TF_BUILD`` + ``AGENT_NAME``) always gets basic colour,
   even on non-terminal streams.
5. A non-terminal stream without a forced level gets no colour.
6. ``TERM=dumb`` keeps whatever was forced.
7. Windows is decided by its build number.
8. CI providers, then TeamCity, then terminal identification.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from colorlevel._meta import logger
from colorlevel.core.cache import DetectionCache
from colorlevel.core.env import (
    is_azure_pipelines,
    resolve_ci_color_level,
    resolve_env_force_level,
    resolve_teamcity_level,
    resolve_terminal_type_level,
)
from colorlevel.core.flags import resolve_flag_explicit_level, resolve_flag_force_level
from colorlevel.core.system import host_os_release, is_windows, parse_os_release, resolve_windows_level
from colorlevel.core.types import (
    ColorLevel,
    DetectionOptions,
    OsVersion,
    ResolvedColorSupport,
    SignalSources,
    StreamDescriptor,
)

if TYPE_CHECKING:
    from collections.abc import Callable


class ColorLevelResolver:
    """Resolve the colour level for a stream.

    Each resolver owns its :class:`DetectionCache`; pass one in to share it,
    or let the resolver create a private one. ``sources`` defaults to a fresh
    snapshot of the running process on every call.
    """

    def __init__(
        self,
        cache: DetectionCache | None = None,
        *,
        sources: Callable[[], SignalSources] = SignalSources.from_host,
    ) -> None:
        self.cache = cache if cache is not None else DetectionCache()
        self._sources = sources

    def clear(self) -> None:
        self.cache.clear()

    # ------------------------------------------------------------------ #
    # Public API                                                         #
    # ------------------------------------------------------------------ #
    def resolve(
        self,
        stream: StreamDescriptor | None = None,
        options: DetectionOptions | None = None,
        sources: SignalSources | None = None,
    ) -> ResolvedColorSupport:
        return ResolvedColorSupport.from_level(self.level(stream, options, sources))

    def level(
        self,
        stream: StreamDescriptor | None = None,
        options: DetectionOptions | None = None,
        sources: SignalSources | None = None,
    ) -> ColorLevel:
        opts = options or DetectionOptions()
        src = sources if sources is not None else self._sources()
        level, reason = self._decide(stream, opts, src)
        logger.debug("colour level %d (%s): %s", level, level.label, reason)
        return level

    # ------------------------------------------------------------------ #
    # Internals                                                          #
    # ------------------------------------------------------------------ #
    def _os_version(self, sources: SignalSources) -> OsVersion:
        def compute() -> OsVersion:
            release = sources.os_release if sources.os_release is not None else host_os_release()
            return parse_os_release(release)

        return self.cache.os_version(sources.os_release, compute)

    def _decide(  # noqa: C901, PLR0911
        self,
        stream: StreamDescriptor | None,
        options: DetectionOptions,
        sources: SignalSources,
    ) -> tuple[ColorLevel, str]:
        env = sources.env
        env_force = resolve_env_force_level(env)
        if options.sniff_flags:
            flag_force = resolve_flag_force_level(sources.argv, cache=self.cache)
            force = env_force if env_force is not None else flag_force
        else:
            force = env_force

        if force == ColorLevel.NONE:
            return ColorLevel.NONE, "colour explicitly disabled"

        if options.sniff_flags:
            explicit = resolve_flag_explicit_level(sources.argv, cache=self.cache)
            if explicit > ColorLevel.NONE:
                return explicit, "explicit --color=<level> flag"

        if is_azure_pipelines(env):
            return ColorLevel.BASIC, "Azure Pipelines"

        if stream is not None:
            is_terminal = stream.is_terminal if options.stream_is_tty is None else options.stream_is_tty
            if not is_terminal and force is None:
                return ColorLevel.NONE, "stream is not a terminal"

        floor = force if force is not None else ColorLevel.NONE

        if env.get("TERM") == "dumb":
            return floor, "dumb terminal"

        if is_windows(sources.platform):
            version = self._os_version(sources)
            release = f"{version.major:g}.{version.minor:g}.{version.build:g}"
            return resolve_windows_level(version), f"Windows {release}"

        if "CI" in env:
            return resolve_ci_color_level(env, floor), "CI environment"

        if "TEAMCITY_VERSION" in env:
            return resolve_teamcity_level(env), "TeamCity"

        terminal = resolve_terminal_type_level(env)
        if terminal > ColorLevel.NONE:
            return terminal, "terminal identification"

        return floor, "no colour signal"


__all__ = ["ColorLevelResolver"]
