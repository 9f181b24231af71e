"""Decide whether to emit colored output, following https://no-color.org/.

Precedence, first match wins:
- An explicit override (``--no-color`` flag, or a host CLI forcing color on).
- Otherwise color is enabled only when the target stream is a TTY, the
  terminal type allows color, and NO_COLOR is absent.

NO_COLOR is checked for presence only. ``NO_COLOR=`` (empty) still disables.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Self

from colornope.core.config import ColornopeSettings
from colornope.terminal import Stream, SystemTerminal, TerminalDetector

__all__ = [
    "ColorDecision",
    "OverrideState",
    "Platform",
    "Stream",
    "current_platform",
    "term_allows_color",
]


class OverrideState(Enum):
    """Explicit instruction that bypasses every other check."""

    FORCE_ON = "force_on"
    FORCE_OFF = "force_off"


class Platform(Enum):
    """Which TERM policy applies."""

    POSIX = "posix"
    WINDOWS = "windows"


def current_platform() -> Platform:
    """Return the platform this interpreter runs on."""
    return Platform.WINDOWS if os.name == "nt" else Platform.POSIX


def term_allows_color(platform: Platform, term: str | None) -> bool:
    """Return True if the TERM value permits color on the given platform.

    On POSIX an unset TERM means an unknown, probably minimal, terminal, so
    color is off. Windows consoles rarely set TERM at all, so an unset TERM
    allows color there. Either way only the exact value ``"dumb"`` disallows.
    """
    if term is None:
        return platform is Platform.WINDOWS
    return term != "dumb"


@dataclass(frozen=True)
class ColorDecision:
    """Snapshot of the color-related environment for one program run.

    Attributes:
        terminal_kind: Raw TERM value, None when unset.
        no_color_signal: Raw NO_COLOR value, None when unset. Its content
            is never looked at.
        override: Forced outcome, or None to fall through to the checks.
        platform: TERM policy to apply, defaults to the running platform.
    """

    terminal_kind: str | None
    no_color_signal: str | None
    override: OverrideState | None = None
    platform: Platform = field(default_factory=current_platform)

    @classmethod
    def from_env(cls, settings: ColornopeSettings | None = None) -> Self:
        """Capture TERM, NO_COLOR and the disable flag from the running process.

        The environment and ``sys.argv`` are read once, here. Later changes
        to either do not affect the returned instance.

        Args:
            settings: Source of the disable flag token. Loaded from
                COLORNOPE_* env vars when omitted.
        """
        if settings is None:
            settings = ColornopeSettings()

        override = None
        if settings.disable_flag in sys.argv[1:]:
            override = OverrideState.FORCE_OFF

        return cls(
            terminal_kind=os.environ.get("TERM"),
            no_color_signal=os.environ.get("NO_COLOR"),
            override=override,
        )

    def enable_color_for(
        self, stream: Stream, terminal: TerminalDetector | None = None
    ) -> bool:
        """Return True if color should be written to ``stream``.

        Args:
            stream: The stream actually being written to. Stdout and stderr
                can be redirected independently.
            terminal: TTY detector to consult. Defaults to SystemTerminal.
                It is not called when an override is set, and anything it
                raises propagates.
        """
        if self.override is OverrideState.FORCE_ON:
            return True
        if self.override is OverrideState.FORCE_OFF:
            return False

        if terminal is None:
            terminal = SystemTerminal()
        return (
            terminal.is_interactive(stream)
            and term_allows_color(self.platform, self.terminal_kind)
            and self.no_color_signal is None
        )
