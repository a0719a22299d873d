"""Tests for the level enumeration and the snapshot/value types."""

from __future__ import annotations

import io
import itertools

import pytest

from colorlevel.core.types import (
    UNSUPPORTED,
    ColorLevel,
    DetectionOptions,
    ResolvedColorSupport,
    SignalSources,
    StreamDescriptor,
)
from colorlevel.errors import ColorLevelError, InvalidColorLevelError


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (-4, ColorLevel.NONE),
        (0, ColorLevel.NONE),
        (2, ColorLevel.ANSI256),
        (3, ColorLevel.TRUECOLOR),
        (99, ColorLevel.TRUECOLOR),
    ],
)
def test_clamp_floors_and_caps(value: int, expected: int) -> None:
    assert ColorLevel.clamp(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1, ColorLevel.BASIC),
        ("256", ColorLevel.ANSI256),
        ("2", ColorLevel.ANSI256),
        ("TrueColor", ColorLevel.TRUECOLOR),
        (" none ", ColorLevel.NONE),
        ("ansi256", ColorLevel.ANSI256),
        (ColorLevel.BASIC, ColorLevel.BASIC),
    ],
)
def test_parse_accepts_numbers_and_labels(value: object, expected: ColorLevel) -> None:
    assert ColorLevel.parse(value) is expected


@pytest.mark.parametrize("value", [4, -1, "16", "", None, True, 2.0])
def test_parse_rejects_unknown_values(value: object) -> None:
    with pytest.raises(InvalidColorLevelError):
        ColorLevel.parse(value)


def test_invalid_level_error_is_a_value_error() -> None:
    assert issubclass(InvalidColorLevelError, ValueError)
    assert issubclass(InvalidColorLevelError, ColorLevelError)


def test_from_level_translation() -> None:
    assert ResolvedColorSupport.from_level(1) == ResolvedColorSupport(ColorLevel.BASIC, True, False, False)
    assert ResolvedColorSupport.from_level(2) == ResolvedColorSupport(ColorLevel.ANSI256, True, True, False)
    assert ResolvedColorSupport.from_level(3) == ResolvedColorSupport(ColorLevel.TRUECOLOR, True, True, True)


def test_level_zero_is_unsupported_and_falsy() -> None:
    support = ResolvedColorSupport.from_level(0)
    assert support == UNSUPPORTED
    assert not support
    assert not support.supported
    assert not (support.has_basic or support.has_256 or support.has_16m)


def test_capabilities_are_monotonic() -> None:
    for low, high in itertools.combinations(ColorLevel, 2):
        lo = ResolvedColorSupport.from_level(low)
        hi = ResolvedColorSupport.from_level(high)
        for flag in ("has_basic", "has_256", "has_16m"):
            if getattr(lo, flag):
                assert getattr(hi, flag), (low, high, flag)


def test_to_dict() -> None:
    assert ResolvedColorSupport.from_level(2).to_dict() == {
        "level": 2,
        "has_basic": True,
        "has_256": True,
        "has_16m": False,
    }


def test_labels() -> None:
    assert [level.label for level in ColorLevel] == ["none", "basic", "256", "truecolor"]


class _FakeTTY(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_stream_descriptor_from_stream() -> None:
    assert StreamDescriptor.from_stream(_FakeTTY()).is_terminal
    assert not StreamDescriptor.from_stream(io.StringIO()).is_terminal
    assert not StreamDescriptor.from_stream(object()).is_terminal


def test_stream_descriptor_from_closed_stream() -> None:
    stream = io.StringIO()
    stream.close()
    assert not StreamDescriptor.from_stream(stream).is_terminal


def test_stream_descriptor_from_bad_fd() -> None:
    assert not StreamDescriptor.from_fd(987_654).is_terminal


def test_detection_options_defaults() -> None:
    options = DetectionOptions()
    assert options.sniff_flags is True
    assert options.stream_is_tty is None


def test_signal_sources_keeps_only_recognised_keys() -> None:
    sources = SignalSources(argv=["--color"], env={"TERM": "xterm", "HOME": "/root", "CI": "1"})
    assert dict(sources.env) == {"TERM": "xterm", "CI": "1"}
    assert sources.argv == ("--color",)


def test_signal_sources_env_is_read_only() -> None:
    sources = SignalSources(env={"TERM": "xterm"})
    with pytest.raises(TypeError):
        sources.env["TERM"] = "dumb"  # type: ignore[index]


def test_signal_sources_snapshot_is_detached_from_input() -> None:
    env = {"TERM": "xterm"}
    argv = ["--color"]
    sources = SignalSources(argv=argv, env=env)
    env["TERM"] = "dumb"
    argv.append("--no-color")
    assert sources.env["TERM"] == "xterm"
    assert sources.argv == ("--color",)


def test_signal_sources_from_host(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TERM", "screen")
    monkeypatch.setattr("sys.argv", ["prog", "--color"])
    sources = SignalSources.from_host()
    assert sources.argv == ("--color",)
    assert sources.env["TERM"] == "screen"
    assert sources.os_release is None

    assert SignalSources.from_host(argv=["-x"]).argv == ("-x",)


def test_signal_sources_hash_ignores_env() -> None:
    first = SignalSources(argv=["--color"], env={"TERM": "xterm"}, platform="linux")
    second = SignalSources(argv=["--color"], env={"TERM": "xterm"}, platform="linux")
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1
