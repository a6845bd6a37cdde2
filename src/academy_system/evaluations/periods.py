from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Optional

from ..core.constants import SEASON_START_DAY, SEASON_START_MONTH
from ..core.enums import StatsPeriod

DateRange = tuple[Optional[date], Optional[date]]


def date_range_for_period(period: StatsPeriod, today: date) -> DateRange:
    """Inclusive (start, end) dates for a stats period; (None, None) means no bound."""
    if period == StatsPeriod.THIS_MONTH:
        last_day = calendar.monthrange(today.year, today.month)[1]
        return date(today.year, today.month, 1), date(today.year, today.month, last_day)

    if period == StatsPeriod.THIS_SEASON:
        season_year = today.year
        if (today.month, today.day) < (SEASON_START_MONTH, SEASON_START_DAY):
            season_year -= 1
        start = date(season_year, SEASON_START_MONTH, SEASON_START_DAY)
        end = date(season_year + 1, SEASON_START_MONTH, SEASON_START_DAY) - timedelta(days=1)
        return start, end

    if period == StatsPeriod.THIS_YEAR:
        return date(today.year, 1, 1), date(today.year, 12, 31)

    return None, None
