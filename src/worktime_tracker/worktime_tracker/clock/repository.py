from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import TimeEntry


class TimeEntryRepository(Protocol):
    """Store of time entries.

    Mutations are guarded writes: they only apply when the entry is still in
    the state the caller expects, and report whether they applied.
    """

    def get_open_for_user_and_date(self, user_email: str, work_date: date) -> Optional[TimeEntry]:
        raise NotImplementedError

    def list_for_user_and_date(self, user_email: str, work_date: date) -> Sequence[TimeEntry]:
        """Entries of one user on one day, oldest clock-in first."""

        raise NotImplementedError

    def list_all(self) -> Sequence[TimeEntry]:
        """Every entry in creation order."""

        raise NotImplementedError

    def create_open_entry(
        self,
        *,
        user_email: str,
        user_name: str,
        work_date: date,
        clock_in: datetime,
    ) -> Optional[int]:
        """Insert a new open entry; None if the user already has one open that day."""

        raise NotImplementedError

    def mark_break_start(self, *, entry_id: int, break_start: datetime) -> bool:
        raise NotImplementedError

    def mark_break_end(self, *, entry_id: int, break_end: datetime) -> bool:
        raise NotImplementedError

    def close_entry(
        self,
        *,
        entry: TimeEntry,
        clock_out: datetime,
        break_end: Optional[datetime],
        total_hours: float,
    ) -> bool:
        """Close `entry` if its break fields still match what the caller read."""

        raise NotImplementedError
