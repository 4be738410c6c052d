"""
Internal data types for staff scheduling logic.
decoupled from SQLAlchemy models and pydantic schemas for cleaner logic.
"""

from dataclasses import dataclass, field, fields, replace
from datetime import date, time
from enum import Enum
from typing import Iterator, Optional


class WeekDay(str, Enum):
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


# Monday-first, same order as date.weekday()
WEEK_DAYS: tuple[WeekDay, ...] = tuple(WeekDay)


class ConflictKind(str, Enum):
    LEAVE_ON_WORKING_DAY = "leave_on_working_day"
    HOLIDAY_ON_WORKING_DAY = "holiday_on_working_day"


@dataclass(frozen=True)
class DaySchedule:
    is_working_day: bool
    from_time: Optional[time] = None  # None means no hours set
    to_time: Optional[time] = None


@dataclass(frozen=True)
class WeeklyHours:
    """One DaySchedule per weekday. Every field is required, so a sparse week can't be built."""
    monday: DaySchedule
    tuesday: DaySchedule
    wednesday: DaySchedule
    thursday: DaySchedule
    friday: DaySchedule
    saturday: DaySchedule
    sunday: DaySchedule

    def __getitem__(self, day: WeekDay) -> DaySchedule:
        return getattr(self, WeekDay(day).value)

    def __iter__(self) -> Iterator[tuple[WeekDay, DaySchedule]]:
        for f in fields(self):
            yield WeekDay(f.name), getattr(self, f.name)

    def with_day(self, day: WeekDay, schedule: DaySchedule) -> "WeeklyHours":
        return replace(self, **{WeekDay(day).value: schedule})


@dataclass(frozen=True)
class StaffSchedule:
    """
    Weekly hours plus the availability sets owned by one staff member.

    Values are immutable; every operation returns a new StaffSchedule.
    A date present in both leaves and holidays is kept as a leave only.
    """
    weekly_hours: WeeklyHours
    weekly_off_days: frozenset[WeekDay] = field(default_factory=frozenset)
    leaves: frozenset[date] = field(default_factory=frozenset)
    holidays: frozenset[date] = field(default_factory=frozenset)

    def __post_init__(self):
        off_days = frozenset(WeekDay(d) for d in self.weekly_off_days)
        leaves = frozenset(self.leaves)
        object.__setattr__(self, "weekly_off_days", off_days)
        object.__setattr__(self, "leaves", leaves)
        object.__setattr__(self, "holidays", frozenset(self.holidays) - leaves)


@dataclass(frozen=True)
class Conflict:
    """A leave or holiday that falls on a recurring working day."""
    date: date
    kind: ConflictKind


def default_schedule(saturday_working: bool = True) -> StaffSchedule:
    """
    Schedule attached to a newly created staff member.

    Mon-Fri 09:00-18:00, Sunday off. Saturday is 10:00-16:00 when
    saturday_working, otherwise a weekly off-day.
    """
    weekday = DaySchedule(True, time(9, 0), time(18, 0))
    if saturday_working:
        saturday = DaySchedule(True, time(10, 0), time(16, 0))
        off_days = {WeekDay.SUNDAY}
    else:
        saturday = DaySchedule(False, time(9, 0), time(18, 0))
        off_days = {WeekDay.SATURDAY, WeekDay.SUNDAY}

    return StaffSchedule(
        weekly_hours=WeeklyHours(
            monday=weekday,
            tuesday=weekday,
            wednesday=weekday,
            thursday=weekday,
            friday=weekday,
            saturday=saturday,
            sunday=DaySchedule(False),
        ),
        weekly_off_days=frozenset(off_days),
    )
