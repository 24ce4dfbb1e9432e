from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import ClockStatus
from ..core.exceptions import ValidationError
from .calculator.base import HoursCalculator
from .calculator.standard_calculator import StandardHoursCalculator
from .model import TimeEntry
from .repository import TimeEntryRepository

logger = logging.getLogger(__name__)

CONFLICT_MESSAGE = "Your time entry was changed elsewhere. Please reload and try again."


class ClockService:
    """Clock state machine: OUT -> IN -> BREAK -> IN -> OUT.

    The status is never stored; it is derived from the user's open entry for
    the current day. Every transition goes through a guarded repository write,
    so a transition that lost a race with another writer is rejected instead
    of overwriting it.
    """

    def __init__(
        self,
        entries: TimeEntryRepository,
        *,
        calculator: Optional[HoursCalculator] = None,
    ):
        self._entries = entries
        self._calculator = calculator or StandardHoursCalculator()

    def current_entry(self, user_email: str, *, today: Optional[date] = None) -> Optional[TimeEntry]:
        today = today or now_local().date()
        return self._entries.get_open_for_user_and_date(user_email, today)

    def status(self, user_email: str, *, today: Optional[date] = None) -> ClockStatus:
        entry = self.current_entry(user_email, today=today)
        return entry.status if entry else ClockStatus.OUT

    def today_entries(self, user_email: str, *, today: Optional[date] = None) -> Sequence[TimeEntry]:
        today = today or now_local().date()
        return self._entries.list_for_user_and_date(user_email, today)

    def clock_in(self, *, user_email: str, user_name: str, now: Optional[datetime] = None) -> TimeEntry:
        now = now or now_local()
        today = now.date()

        if self._entries.get_open_for_user_and_date(user_email, today):
            raise ValidationError("You are already clocked in.")

        entry_id = self._entries.create_open_entry(
            user_email=user_email,
            user_name=user_name,
            work_date=today,
            clock_in=now,
        )
        if entry_id is None:
            raise ValidationError("You are already clocked in.")

        logger.info("%s clocked in (entry %s)", user_email, entry_id)
        return TimeEntry(
            entry_id=entry_id,
            user_email=user_email,
            user_name=user_name,
            work_date=today,
            clock_in=now,
        )

    def start_break(self, user_email: str, *, now: Optional[datetime] = None) -> TimeEntry:
        now = now or now_local()
        entry = self._require_open(user_email, now.date())

        if entry.on_break:
            raise ValidationError("You are already on a break.")
        if entry.break_start is not None:
            raise ValidationError("You have already taken your break for this entry.")

        if not self._entries.mark_break_start(entry_id=entry.entry_id, break_start=now):
            raise ValidationError(CONFLICT_MESSAGE)

        logger.info("%s started a break (entry %s)", user_email, entry.entry_id)
        return replace(entry, break_start=now)

    def end_break(self, user_email: str, *, now: Optional[datetime] = None) -> TimeEntry:
        now = now or now_local()
        entry = self._require_open(user_email, now.date())

        if not entry.on_break:
            raise ValidationError("You are not on a break.")

        if not self._entries.mark_break_end(entry_id=entry.entry_id, break_end=now):
            raise ValidationError(CONFLICT_MESSAGE)

        logger.info("%s ended a break (entry %s)", user_email, entry.entry_id)
        return replace(entry, break_end=now)

    def clock_out(self, user_email: str, *, now: Optional[datetime] = None) -> TimeEntry:
        now = now or now_local()
        entry = self._require_open(user_email, now.date())

        # Clocking out during a break closes the break at the same instant.
        break_end = now if entry.on_break else entry.break_end
        total_hours = self._calculator.total_hours(
            clock_in=entry.clock_in,
            clock_out=now,
            break_start=entry.break_start,
            break_end=break_end,
        )

        if not self._entries.close_entry(entry=entry, clock_out=now, break_end=break_end, total_hours=total_hours):
            raise ValidationError(CONFLICT_MESSAGE)

        logger.info("%s clocked out (entry %s, %.2f h)", user_email, entry.entry_id, total_hours)
        return replace(entry, clock_out=now, break_end=break_end, total_hours=total_hours)

    def _require_open(self, user_email: str, today: date) -> TimeEntry:
        entry = self._entries.get_open_for_user_and_date(user_email, today)
        if not entry:
            raise ValidationError("You are not clocked in.")
        return entry
