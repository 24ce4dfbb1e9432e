from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from .base import HoursCalculator


class StandardHoursCalculator(HoursCalculator):
    """Standard rule: (out - in) - (break end - break start), two decimals.

    The break only counts when both of its ends are recorded. Ties round up
    (1.125 -> 1.13).
    """

    def total_hours(
        self,
        *,
        clock_in: datetime,
        clock_out: datetime,
        break_start: Optional[datetime],
        break_end: Optional[datetime],
    ) -> float:
        worked = clock_out - clock_in
        if break_start is not None and break_end is not None:
            worked -= break_end - break_start
        hours = Decimal(str(worked.total_seconds() / 3600))
        return float(hours.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
