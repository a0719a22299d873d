from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence

import pytest
from click.testing import CliRunner

from colorlevel import api
from colorlevel.core.cache import DetectionCache
from colorlevel.core.config import RECOGNIZED_ENV_VARS
from colorlevel.core.resolver import ColorLevelResolver
from colorlevel.core.types import SignalSources


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def make_sources() -> Callable[..., SignalSources]:
    def build(
        env: Mapping[str, str] | None = None,
        argv: Sequence[str] = (),
        *,
        platform: str = "linux",
        os_release: str | None = None,
    ) -> SignalSources:
        return SignalSources(argv=tuple(argv), env=dict(env or {}), platform=platform, os_release=os_release)

    return build


@pytest.fixture
def resolver() -> ColorLevelResolver:
    return ColorLevelResolver(DetectionCache())


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Strip every variable the resolver reads from the real environment."""
    for key in RECOGNIZED_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("sys.argv", ["prog"])
    monkeypatch.setattr("sys.platform", "linux")
    api.clear_caches()
    yield monkeypatch
    api.clear_caches()
