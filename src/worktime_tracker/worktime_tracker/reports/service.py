from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from ..clock.model import TimeEntry
from ..clock.repository import TimeEntryRepository
from ..common.datetime_utils import format_date, format_time
from ..core.constants import ACTIVE_PLACEHOLDER, EMPTY_PLACEHOLDER, FILTER_ALL


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    total_hours: float
    user_filter: str = FILTER_ALL
    date_filter: str = FILTER_ALL
    users: list[dict] = field(default_factory=list)
    dates: list[str] = field(default_factory=list)

    @property
    def total_label(self) -> str:
        return f"{self.total_hours:.2f}"


def filter_entries(
    entries: Iterable[TimeEntry],
    *,
    user_filter: str = FILTER_ALL,
    date_filter: str = FILTER_ALL,
) -> list[TimeEntry]:
    """Exact-match filter on user email and work date, newest first.

    Sorted by date descending, then clock-in descending.
    """
    out = list(entries)
    if user_filter != FILTER_ALL:
        out = [e for e in out if e.user_email == user_filter]
    if date_filter != FILTER_ALL:
        out = [e for e in out if e.work_date.isoformat() == date_filter]
    out.sort(key=lambda e: (e.work_date, e.clock_in), reverse=True)
    return out


def sum_hours(entries: Iterable[TimeEntry]) -> float:
    return round(sum(e.total_hours or 0.0 for e in entries), 2)


class ReportService:
    def __init__(self, entries: TimeEntryRepository):
        self._entries = entries

    def build_report(
        self,
        *,
        user_filter: Optional[str] = None,
        date_filter: Optional[str] = None,
    ) -> ReportData:
        user_filter = user_filter or FILTER_ALL
        date_filter = date_filter or FILTER_ALL

        all_entries = self._entries.list_all()
        filtered = filter_entries(all_entries, user_filter=user_filter, date_filter=date_filter)

        return ReportData(
            rows=[self._to_row(e) for e in filtered],
            total_hours=sum_hours(filtered),
            user_filter=user_filter,
            date_filter=date_filter,
            users=self._unique_users(all_entries),
            dates=self._unique_dates(all_entries),
        )

    @staticmethod
    def _unique_users(entries: Sequence[TimeEntry]) -> list[dict]:
        # First entry seen wins for the display name.
        seen: dict[str, dict] = {}
        for e in entries:
            if e.user_email not in seen:
                seen[e.user_email] = {"email": e.user_email, "name": e.user_name or e.user_email}
        return list(seen.values())

    @staticmethod
    def _unique_dates(entries: Sequence[TimeEntry]) -> list[str]:
        return [d.isoformat() for d in sorted({e.work_date for e in entries}, reverse=True)]

    @staticmethod
    def _to_row(e: TimeEntry) -> dict:
        return {
            "id": e.entry_id,
            "user_email": e.user_email,
            "user_name": e.user_name,
            "work_date": e.work_date.isoformat(),
            "date": format_date(e.work_date),
            "clock_in": format_time(e.clock_in),
            "break_start": format_time(e.break_start, EMPTY_PLACEHOLDER),
            "break_end": format_time(e.break_end, EMPTY_PLACEHOLDER),
            "clock_out": format_time(e.clock_out, ACTIVE_PLACEHOLDER),
            "total_hours": f"{e.total_hours:.2f}",
        }
