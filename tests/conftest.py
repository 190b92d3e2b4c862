"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
from fakes import FakeFiles, FakeNetwork, FakeRunner
from wsctl.core.context import OperationContext

_PROXY_VARS = ("http_proxy", "HTTP_PROXY", "https_proxy", "HTTPS_PROXY", "no_proxy", "NO_PROXY")


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a temp directory and clear proxy settings."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    for var in _PROXY_VARS:
        monkeypatch.delenv(var, raising=False)
    return home


@pytest.fixture
def runner() -> FakeRunner:
    """Fake command runner with nothing installed."""
    return FakeRunner()


@pytest.fixture
def files() -> FakeFiles:
    """Empty in-memory file manager."""
    return FakeFiles()


@pytest.fixture
def network(files: FakeFiles) -> FakeNetwork:
    """Fake network client writing into the files fixture."""
    return FakeNetwork(files)


@pytest.fixture
def ctx() -> OperationContext:
    """A fresh background context."""
    return OperationContext.background()
