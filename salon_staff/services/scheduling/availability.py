"""
Availability checking utilities.
Determines whether a staff member works on a given date and flags
leaves/holidays that collide with recurring working days.

All functions are pure: schedules are never mutated, a new
StaffSchedule is returned for every change.
"""

import logging
from dataclasses import replace
from datetime import date, datetime, time
from typing import Literal, Optional, Union

from .types import (
    Conflict,
    ConflictKind,
    DaySchedule,
    StaffSchedule,
    WEEK_DAYS,
    WeekDay,
)


logger = logging.getLogger(__name__)


class ScheduleError(ValueError):
    pass


def parse_iso_date(value: Union[str, date]) -> date:
    """Parse a YYYY-MM-DD string. Datetimes are reduced to their calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        raise ScheduleError(f"Invalid date: {value!r} (expected YYYY-MM-DD)") from None


def parse_time_of_day(value: Union[str, time, None]) -> Optional[time]:
    """Parse HH:MM (24h) to time object. Empty string means no time set."""
    if value is None or isinstance(value, time):
        return value
    if value == "":
        return None
    parts = value.split(":")
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ScheduleError(f"Invalid time of day: {value!r} (expected HH:MM)")
    try:
        return time(int(parts[0]), int(parts[1]))
    except ValueError:
        raise ScheduleError(f"Invalid time of day: {value!r} (expected HH:MM)") from None


def to_monday_first_weekday(day: date) -> WeekDay:
    """Map a calendar date to its WeekDay using its own calendar fields."""
    return WEEK_DAYS[day.weekday()]


def is_recurring_working_day(schedule: StaffSchedule, weekday: WeekDay) -> bool:
    """Weekly off-days take precedence over the working-hours flag."""
    if weekday in schedule.weekly_off_days:
        return False
    return schedule.weekly_hours[weekday].is_working_day


def is_working_day(schedule: StaffSchedule, day: date) -> bool:
    """
    Check if the staff member is available to be booked on a date.

    Leaves and holidays win over everything, then weekly off-days,
    then the recurring working-hours flag.
    """
    if day in schedule.leaves or day in schedule.holidays:
        return False
    return is_recurring_working_day(schedule, to_monday_first_weekday(day))


def detect_conflicts(schedule: StaffSchedule) -> list[Conflict]:
    """
    Find leaves/holidays that fall on a recurring working day.

    Returns conflicts sorted by date; leaves sort before holidays on the
    same date. Dates on weekly off-days are never flagged.
    """
    absences = [(d, 0, ConflictKind.LEAVE_ON_WORKING_DAY) for d in schedule.leaves]
    absences += [(d, 1, ConflictKind.HOLIDAY_ON_WORKING_DAY) for d in schedule.holidays]

    conflicts = []
    for day, _, kind in sorted(absences, key=lambda a: (a[0], a[1])):
        if is_recurring_working_day(schedule, to_monday_first_weekday(day)):
            conflicts.append(Conflict(date=day, kind=kind))
    return conflicts


def conflicting_weekdays(schedule: StaffSchedule) -> set[WeekDay]:
    """Weekdays that have at least one conflicting leave or holiday."""
    return {to_monday_first_weekday(c.date) for c in detect_conflicts(schedule)}


def inverted_hours(schedule: StaffSchedule) -> list[WeekDay]:
    """Working days whose start time is not before their end time."""
    inverted = []
    for weekday, day_schedule in schedule.weekly_hours:
        if not is_recurring_working_day(schedule, weekday):
            continue
        if day_schedule.from_time and day_schedule.to_time:
            if day_schedule.from_time >= day_schedule.to_time:
                inverted.append(weekday)
    return inverted


def set_weekly_off_day(schedule: StaffSchedule, day: WeekDay, is_off: bool) -> StaffSchedule:
    """
    Mark or unmark a weekday as a weekly off-day.

    Marking a day off also clears its working-hours flag. Unmarking leaves
    the working-hours flag untouched.
    """
    day = WeekDay(day)
    if not is_off:
        return replace(schedule, weekly_off_days=schedule.weekly_off_days - {day})

    hours = schedule.weekly_hours
    weekly_hours = hours.with_day(day, replace(hours[day], is_working_day=False))
    return replace(
        schedule,
        weekly_off_days=schedule.weekly_off_days | {day},
        weekly_hours=weekly_hours,
    )


def toggle_leave_date(schedule: StaffSchedule, day: date) -> StaffSchedule:
    """
    Add or remove a leave date.

    Adding a leave removes the same date from holidays. Dates on weekly
    off-days are ignored and the schedule is returned unchanged.
    """
    if to_monday_first_weekday(day) in schedule.weekly_off_days:
        logger.debug(f"Ignoring leave toggle for {day}: weekly off-day")
        return schedule

    if day in schedule.leaves:
        return replace(schedule, leaves=schedule.leaves - {day})

    return replace(
        schedule,
        leaves=schedule.leaves | {day},
        holidays=schedule.holidays - {day},
    )


def toggle_holiday_date(schedule: StaffSchedule, day: date) -> StaffSchedule:
    """
    Add or remove a holiday date.

    A date that is already a leave keeps the leave, and weekly off-days
    are ignored. Both cases return the schedule unchanged.
    """
    if day in schedule.holidays:
        return replace(schedule, holidays=schedule.holidays - {day})

    if day in schedule.leaves:
        logger.debug(f"Ignoring holiday toggle for {day}: already a leave")
        return schedule
    if to_monday_first_weekday(day) in schedule.weekly_off_days:
        logger.debug(f"Ignoring holiday toggle for {day}: weekly off-day")
        return schedule

    return replace(schedule, holidays=schedule.holidays | {day})


def set_working_hours(
    schedule: StaffSchedule,
    day: WeekDay,
    field: Literal["from", "to"],
    value: Union[str, time, None],
) -> StaffSchedule:
    """Set the start ("from") or end ("to") time of a weekday. Ordering is not validated."""
    day = WeekDay(day)
    parsed = parse_time_of_day(value)
    current = schedule.weekly_hours[day]

    if field == "from":
        updated = replace(current, from_time=parsed)
    elif field == "to":
        updated = replace(current, to_time=parsed)
    else:
        raise ScheduleError(f"Unknown working hours field: {field!r}")

    return replace(schedule, weekly_hours=schedule.weekly_hours.with_day(day, updated))


def set_working_day_flag(schedule: StaffSchedule, day: WeekDay, is_working: bool) -> StaffSchedule:
    """Set the working-hours flag directly. Weekly off-days are not touched."""
    day = WeekDay(day)
    current: DaySchedule = schedule.weekly_hours[day]
    updated = replace(current, is_working_day=is_working)
    return replace(schedule, weekly_hours=schedule.weekly_hours.with_day(day, updated))
