"""Shared test fixtures for colornope."""

import pytest

from colornope.terminal import Stream


class FakeTerminal:
    """Deterministic TerminalDetector that records every stream it is asked about."""

    def __init__(self, stdout: bool = True, stderr: bool = True) -> None:
        self.interactive = {Stream.STDOUT: stdout, Stream.STDERR: stderr}
        self.calls: list[Stream] = []

    def is_interactive(self, stream: Stream) -> bool:
        self.calls.append(stream)
        return self.interactive[stream]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Remove color-related env vars and argv flags from the host process.

    Every test starts with TERM and NO_COLOR unset, no COLORNOPE_* settings,
    and an argv that holds only a program name. Tests that need any of these
    set them explicitly.
    """
    for var in [
        "TERM",
        "NO_COLOR",
        "COLORNOPE_DISABLE_FLAG",
        "COLORNOPE_LOG_LEVEL",
    ]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("sys.argv", ["prog"])


@pytest.fixture
def make_terminal():
    """Build a FakeTerminal with per-stream interactivity."""
    return FakeTerminal


@pytest.fixture
def tty():
    """Both streams attached to a terminal."""
    return FakeTerminal(stdout=True, stderr=True)


@pytest.fixture
def piped():
    """Both streams redirected away from a terminal."""
    return FakeTerminal(stdout=False, stderr=False)
