from __future__ import annotations

import pytest

from colorlevel import api
from colorlevel.core.types import (
    UNSUPPORTED,
    ColorLevel,
    DetectionOptions,
    ResolvedColorSupport,
    SignalSources,
    StreamDescriptor,
)


def _fake_isatty(monkeypatch: pytest.MonkeyPatch, *terminal_fds: int) -> list[int]:
    calls: list[int] = []

    def isatty(fd: int) -> bool:
        calls.append(fd)
        return fd in terminal_fds

    monkeypatch.setattr("colorlevel.core.types.os.isatty", isatty)
    return calls


def test_resolve_uses_host_snapshot(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("FORCE_COLOR", "2")
    support = api.resolve(StreamDescriptor(is_terminal=False))
    assert support == ResolvedColorSupport.from_level(2)


def test_resolve_with_explicit_sources(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("FORCE_COLOR", "0")
    sources = SignalSources(env={"TERM": "xterm-256color"}, platform="linux")
    assert api.resolve(StreamDescriptor(is_terminal=True), None, sources).level == ColorLevel.ANSI256


def test_resolve_sniffs_process_argv(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setattr("sys.argv", ["prog", "--color"])
    pipe = StreamDescriptor(is_terminal=False)
    assert api.resolve(pipe).level == ColorLevel.BASIC
    assert api.resolve(pipe, DetectionOptions(sniff_flags=False)) == UNSUPPORTED


def test_stdout_support_is_memoised(clean_env: pytest.MonkeyPatch) -> None:
    calls = _fake_isatty(clean_env, 1)
    clean_env.setenv("TERM", "xterm-256color")

    first = api.stdout_support()
    clean_env.setenv("TERM", "dumb")
    second = api.stdout_support()

    assert first is second
    assert first.level == ColorLevel.ANSI256
    assert calls == [1]


def test_stderr_support_uses_fd_2(clean_env: pytest.MonkeyPatch) -> None:
    calls = _fake_isatty(clean_env, 1)
    clean_env.setenv("TERM", "xterm")

    assert api.stderr_support() == UNSUPPORTED
    assert api.stdout_support().level == ColorLevel.BASIC
    assert sorted(calls) == [1, 2]


def test_clear_caches_recomputes_defaults(clean_env: pytest.MonkeyPatch) -> None:
    _fake_isatty(clean_env, 1, 2)
    clean_env.setenv("TERM", "xterm-256color")
    assert api.stdout_support().level == ColorLevel.ANSI256

    clean_env.setenv("FORCE_COLOR", "0")
    assert api.stdout_support().level == ColorLevel.ANSI256

    api.clear_caches()
    assert api.stdout_support() == UNSUPPORTED


def test_clear_caches_empties_default_resolver(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setattr("sys.argv", ["prog", "--color"])
    api.resolve(StreamDescriptor(is_terminal=True))
    assert len(api.default_resolver().cache) > 0

    api.clear_caches()
    assert len(api.default_resolver().cache) == 0


def test_clear_caches_does_not_change_answers(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("TERM", "screen-256color")
    clean_env.setattr("sys.argv", ["prog", "--color=16m"])
    tty = StreamDescriptor(is_terminal=True)
    before = api.resolve(tty)
    api.clear_caches()
    assert api.resolve(tty) == before == ResolvedColorSupport.from_level(3)
