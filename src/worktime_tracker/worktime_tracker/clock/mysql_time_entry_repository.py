from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence

import mysql.connector

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import TimeEntry
from .repository import TimeEntryRepository

logger = logging.getLogger(__name__)

_COLUMNS = """
    entry_id, user_email, user_name, work_date,
    clock_in, break_start, break_end, clock_out, total_hours
"""


def _to_entry(r: dict) -> TimeEntry:
    return TimeEntry(
        entry_id=int(r["entry_id"]),
        user_email=r["user_email"],
        user_name=r["user_name"],
        work_date=r["work_date"],
        clock_in=r["clock_in"],
        break_start=r.get("break_start"),
        break_end=r.get("break_end"),
        clock_out=r.get("clock_out"),
        total_hours=float(r.get("total_hours") or 0),
    )


class MySQLTimeEntryRepository(TimeEntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_open_for_user_and_date(self, user_email: str, work_date: date) -> Optional[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM time_entries
                WHERE user_email=%s AND work_date=%s AND clock_out IS NULL
                """,
                (user_email, work_date),
            )
            r = fetchone(cur)
            return _to_entry(r) if r else None

    def list_for_user_and_date(self, user_email: str, work_date: date) -> Sequence[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM time_entries
                WHERE user_email=%s AND work_date=%s
                ORDER BY clock_in ASC, entry_id ASC
                """,
                (user_email, work_date),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM time_entries ORDER BY entry_id ASC")
            return [_to_entry(r) for r in fetchall(cur)]

    def create_open_entry(
        self,
        *,
        user_email: str,
        user_name: str,
        work_date: date,
        clock_in: datetime,
    ) -> Optional[int]:
        # uq_time_entries_open allows a single open row per (user_email, work_date).
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO time_entries(user_email, user_name, work_date, clock_in)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (user_email, user_name, work_date, clock_in),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            logger.warning("Open entry already exists for %s on %s: %s", user_email, work_date, e)
            return None

    def mark_break_start(self, *, entry_id: int, break_start: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE time_entries
                SET break_start=%s
                WHERE entry_id=%s AND clock_out IS NULL AND break_start IS NULL
                """,
                (break_start, int(entry_id)),
            )
            return cur.rowcount > 0

    def mark_break_end(self, *, entry_id: int, break_end: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE time_entries
                SET break_end=%s
                WHERE entry_id=%s AND clock_out IS NULL
                  AND break_start IS NOT NULL AND break_end IS NULL
                """,
                (break_end, int(entry_id)),
            )
            return cur.rowcount > 0

    def close_entry(
        self,
        *,
        entry: TimeEntry,
        clock_out: datetime,
        break_end: Optional[datetime],
        total_hours: float,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE time_entries
                SET clock_out=%s, break_end=%s, total_hours=%s
                WHERE entry_id=%s AND clock_out IS NULL
                  AND break_start <=> %s AND break_end <=> %s
                """,
                (
                    clock_out,
                    break_end,
                    total_hours,
                    int(entry.entry_id),
                    entry.break_start,
                    entry.break_end,
                ),
            )
            return cur.rowcount > 0
