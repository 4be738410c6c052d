"""
Month view of a staff schedule.
Builds the Sunday-first month grid used by the absences calendar and
resolves the status of each day in it.
"""

import calendar
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from .availability import (
    detect_conflicts,
    is_recurring_working_day,
    to_monday_first_weekday,
)
from .types import StaffSchedule


class DayStatus(str, Enum):
    LEAVE = "leave"
    HOLIDAY = "holiday"
    WEEKLY_OFF = "weekly_off"
    WORKING = "working"
    NON_WORKING = "non_working"


@dataclass(frozen=True)
class CalendarDay:
    date: date
    status: DayStatus
    is_conflict: bool
    selectable: bool  # weekly off-days can't take a leave


_sunday_first = calendar.Calendar(firstweekday=calendar.SUNDAY)


def month_grid(year: int, month: int) -> list[list[Optional[date]]]:
    """Weeks of 7 days starting on Sunday; days outside the month are None."""
    # padding days are 0; no dates outside year 1..9999 are built
    return [
        [date(year, month, d) if d else None for d in week]
        for week in _sunday_first.monthdayscalendar(year, month)
    ]


def describe_day(schedule: StaffSchedule, day: date, conflict_dates: Optional[set[date]] = None) -> CalendarDay:
    """
    Resolve the calendar status of one day.

    Leave wins over holiday, holiday over weekly off-day. conflict_dates can
    be passed in to avoid recomputing conflicts for every day of a month.
    """
    if conflict_dates is None:
        conflict_dates = {c.date for c in detect_conflicts(schedule)}

    weekday = to_monday_first_weekday(day)
    is_weekly_off = weekday in schedule.weekly_off_days

    if day in schedule.leaves:
        status = DayStatus.LEAVE
    elif day in schedule.holidays:
        status = DayStatus.HOLIDAY
    elif is_weekly_off:
        status = DayStatus.WEEKLY_OFF
    elif is_recurring_working_day(schedule, weekday):
        status = DayStatus.WORKING
    else:
        status = DayStatus.NON_WORKING

    return CalendarDay(
        date=day,
        status=status,
        is_conflict=day in conflict_dates,
        selectable=not is_weekly_off,
    )


def month_overview(schedule: StaffSchedule, year: int, month: int) -> list[list[Optional[CalendarDay]]]:
    conflict_dates = {c.date for c in detect_conflicts(schedule)}
    return [
        [describe_day(schedule, d, conflict_dates) if d else None for d in week]
        for week in month_grid(year, month)
    ]
