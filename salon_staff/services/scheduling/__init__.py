"""
Staff scheduling service package.

Usage:
    from datetime import date
    from salon_staff.services.scheduling import (
        default_schedule, toggle_leave_date, is_working_day, detect_conflicts,
    )

    schedule = default_schedule()
    schedule = toggle_leave_date(schedule, date(2024, 12, 24))

    is_working_day(schedule, date(2024, 12, 24))  # False
    detect_conflicts(schedule)  # [Conflict(date=2024-12-24, kind=LEAVE_ON_WORKING_DAY)]

    # Reading/writing the schedule stored on a staff record
    from salon_staff.services.scheduling.data_loader import load_staff_schedule, save_staff_schedule
"""

from .types import (
    WeekDay,
    WEEK_DAYS,
    DaySchedule,
    WeeklyHours,
    StaffSchedule,
    ConflictKind,
    Conflict,
    default_schedule,
)
from .availability import (
    ScheduleError,
    parse_iso_date,
    parse_time_of_day,
    to_monday_first_weekday,
    is_recurring_working_day,
    is_working_day,
    detect_conflicts,
    conflicting_weekdays,
    inverted_hours,
    set_weekly_off_day,
    toggle_leave_date,
    toggle_holiday_date,
    set_working_hours,
    set_working_day_flag,
)
from .month_view import DayStatus, CalendarDay, month_grid, describe_day, month_overview

__all__ = [
    # Types
    "WeekDay",
    "WEEK_DAYS",
    "DaySchedule",
    "WeeklyHours",
    "StaffSchedule",
    "ConflictKind",
    "Conflict",
    "DayStatus",
    "CalendarDay",
    "ScheduleError",
    "default_schedule",
    # Queries
    "to_monday_first_weekday",
    "is_recurring_working_day",
    "is_working_day",
    "detect_conflicts",
    "conflicting_weekdays",
    "inverted_hours",
    "month_grid",
    "describe_day",
    "month_overview",
    # Updates
    "set_weekly_off_day",
    "toggle_leave_date",
    "toggle_holiday_date",
    "set_working_hours",
    "set_working_day_flag",
    # Parsing
    "parse_iso_date",
    "parse_time_of_day",
]
