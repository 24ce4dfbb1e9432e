from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import to_iso
from ..core.enums import ClockStatus


@dataclass(frozen=True)
class TimeEntry:
    """Domain entity: one clock-in/out record.

    An entry is "open" while clock_out is unset. total_hours stays 0.0 until
    clock-out and is never recomputed afterwards.
    """

    entry_id: int
    user_email: str
    user_name: str
    work_date: date
    clock_in: datetime
    break_start: Optional[datetime] = None
    break_end: Optional[datetime] = None
    clock_out: Optional[datetime] = None
    total_hours: float = 0.0

    @property
    def is_open(self) -> bool:
        return self.clock_out is None

    @property
    def on_break(self) -> bool:
        return self.break_start is not None and self.break_end is None

    @property
    def status(self) -> ClockStatus:
        if not self.is_open:
            return ClockStatus.OUT
        return ClockStatus.BREAK if self.on_break else ClockStatus.IN

    def to_dict(self) -> dict:
        return {
            "id": str(self.entry_id),
            "userEmail": self.user_email,
            "userName": self.user_name,
            "date": self.work_date.isoformat(),
            "clockIn": to_iso(self.clock_in),
            "breakStart": to_iso(self.break_start),
            "breakEnd": to_iso(self.break_end),
            "clockOut": to_iso(self.clock_out),
            "totalHours": self.total_hours,
        }
