from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional


class HoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked hours)."""

    @abstractmethod
    def total_hours(
        self,
        *,
        clock_in: datetime,
        clock_out: datetime,
        break_start: Optional[datetime],
        break_end: Optional[datetime],
    ) -> float:
        raise NotImplementedError
