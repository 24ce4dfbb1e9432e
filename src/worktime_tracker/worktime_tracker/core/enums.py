from __future__ import annotations

from enum import Enum


class ClockStatus(str, Enum):
    """Current clock state of a user, derived from today's open entry."""

    OUT = "out"
    IN = "in"
    BREAK = "break"

    @property
    def label(self) -> str:
        return {
            ClockStatus.OUT: "Clocked Out",
            ClockStatus.IN: "Clocked In",
            ClockStatus.BREAK: "On Break",
        }[self]
