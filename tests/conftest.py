from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.worktime_tracker.worktime_tracker.clock.model import TimeEntry
from src.worktime_tracker.worktime_tracker.users.model import User


@dataclass
class InMemoryUsers:
    users_by_email: dict[str, User]

    def get_by_email(self, email: str) -> Optional[User]:
        return self.users_by_email.get(email)


class InMemoryTimeEntries:
    def __init__(self, entries=()):
        self._by_id: dict[int, TimeEntry] = {}
        self._id = 0
        for e in entries:
            self.add(e)

    def add(self, entry: TimeEntry) -> TimeEntry:
        self._id = max(self._id, entry.entry_id)
        self._by_id[entry.entry_id] = entry
        return entry

    def get(self, entry_id: int) -> TimeEntry:
        return self._by_id[entry_id]

    def get_open_for_user_and_date(self, user_email: str, work_date: date) -> Optional[TimeEntry]:
        for e in self._by_id.values():
            if e.user_email == user_email and e.work_date == work_date and e.clock_out is None:
                return e
        return None

    def list_for_user_and_date(self, user_email: str, work_date: date):
        items = [e for e in self._by_id.values() if e.user_email == user_email and e.work_date == work_date]
        items.sort(key=lambda e: e.clock_in)
        return items

    def list_all(self):
        return [self._by_id[k] for k in sorted(self._by_id)]

    def create_open_entry(self, *, user_email: str, user_name: str, work_date: date, clock_in: datetime):
        if self.get_open_for_user_and_date(user_email, work_date):
            return None
        self._id += 1
        self._by_id[self._id] = TimeEntry(
            entry_id=self._id,
            user_email=user_email,
            user_name=user_name,
            work_date=work_date,
            clock_in=clock_in,
        )
        return self._id

    def mark_break_start(self, *, entry_id: int, break_start: datetime) -> bool:
        e = self._by_id.get(entry_id)
        if not e or e.clock_out is not None or e.break_start is not None:
            return False
        self._by_id[entry_id] = replace(e, break_start=break_start)
        return True

    def mark_break_end(self, *, entry_id: int, break_end: datetime) -> bool:
        e = self._by_id.get(entry_id)
        if not e or e.clock_out is not None or e.break_start is None or e.break_end is not None:
            return False
        self._by_id[entry_id] = replace(e, break_end=break_end)
        return True

    def close_entry(self, *, entry: TimeEntry, clock_out: datetime, break_end, total_hours: float) -> bool:
        e = self._by_id.get(entry.entry_id)
        if (
            not e
            or e.clock_out is not None
            or e.break_start != entry.break_start
            or e.break_end != entry.break_end
        ):
            return False
        self._by_id[e.entry_id] = replace(e, clock_out=clock_out, break_end=break_end, total_hours=total_hours)
        return True


def make_entry(entry_id: int, email: str, name: str, day: date, start: tuple[int, int], *, hours=0.0, closed=True):
    clock_in = datetime(day.year, day.month, day.day, *start)
    return TimeEntry(
        entry_id=entry_id,
        user_email=email,
        user_name=name,
        work_date=day,
        clock_in=clock_in,
        clock_out=clock_in.replace(hour=min(start[0] + 8, 23)) if closed else None,
        total_hours=hours if closed else 0.0,
    )


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 9, 0, 0)


@pytest.fixture
def entries_repo() -> InMemoryTimeEntries:
    return InMemoryTimeEntries()


@pytest.fixture
def users_repo() -> InMemoryUsers:
    john = User(
        user_id=1,
        email="john@example.com",
        full_name="John Smith",
        password_hash=generate_password_hash("password1"),
    )
    jane = User(
        user_id=2,
        email="jane@example.com",
        full_name="Jane Doe",
        password_hash=generate_password_hash("password2"),
        is_active=False,
    )
    return InMemoryUsers({john.email: john, jane.email: jane})


@pytest.fixture
def make_time_entry():
    return make_entry


@pytest.fixture
def app(monkeypatch, users_repo, entries_repo):
    from src.worktime_tracker.worktime_tracker.container import build_services
    from src.worktime_tracker.worktime_tracker.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    container = build_services(users_repo=users_repo, entries_repo=entries_repo)
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logged_in_client(client):
    with client.session_transaction() as sess:
        sess["user_email"] = "john@example.com"
        sess["user_name"] = "John Smith"
    return client
