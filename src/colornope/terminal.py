"""TTY detection for the standard output streams.

ColorDecision never checks a stream itself. It asks a TerminalDetector,
so tests can swap in a deterministic fake while production code uses
SystemTerminal.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import Protocol, runtime_checkable


class Stream(Enum):
    """Output stream a caller intends to write to."""

    STDOUT = "stdout"
    STDERR = "stderr"


@runtime_checkable
class TerminalDetector(Protocol):
    """Anything that can tell whether a stream is an interactive terminal."""

    def is_interactive(self, stream: Stream) -> bool: ...


class SystemTerminal:
    """TerminalDetector backed by the real ``sys`` streams.

    The stream object is looked up on every call, so a replaced or
    redirected ``sys.stdout`` is seen immediately.
    """

    def is_interactive(self, stream: Stream) -> bool:
        handle = getattr(sys, stream.value)
        # None under pythonw and some embedded interpreters
        if handle is None or not hasattr(handle, "isatty"):
            return False
        return bool(handle.isatty())
