"""
Data loader for the scheduling service.
Converts the schedule document stored on a staff record to internal
types and back, and reads/writes it through the database session.
"""

import logging
from typing import Optional

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.orm import Session

from salon_staff.core.config import settings
from salon_staff.db.models.staff import Staff
from salon_staff.schemas.schedules import (
    DayScheduleSchema,
    StaffScheduleSchema,
    WeeklyHoursSchema,
)

from .availability import ScheduleError, parse_time_of_day
from .types import (
    DaySchedule,
    StaffSchedule,
    WEEK_DAYS,
    WeeklyHours,
    default_schedule,
)


logger = logging.getLogger(__name__)


def _format_time(t) -> str:
    return t.strftime("%H:%M") if t else ""


def schema_to_schedule(schema: StaffScheduleSchema) -> StaffSchedule:
    """Build a StaffSchedule from a validated document. Duplicates collapse into sets."""
    hours = {}
    for day in WEEK_DAYS:
        d = getattr(schema.weekly_hours, day.value)
        hours[day.value] = DaySchedule(
            is_working_day=d.is_working_day,
            from_time=parse_time_of_day(d.from_time),
            to_time=parse_time_of_day(d.to_time),
        )

    return StaffSchedule(
        weekly_hours=WeeklyHours(**hours),
        weekly_off_days=frozenset(schema.weekly_off_days),
        leaves=frozenset(schema.leaves),
        holidays=frozenset(schema.holidays),
    )


def schedule_to_schema(schedule: StaffSchedule) -> StaffScheduleSchema:
    """Sets are emitted sorted: weekdays Monday-first, dates ascending."""
    hours = {
        day.value: DayScheduleSchema(
            is_working_day=d.is_working_day,
            from_time=_format_time(d.from_time),
            to_time=_format_time(d.to_time),
        )
        for day, d in schedule.weekly_hours
    }
    return StaffScheduleSchema(
        weekly_hours=WeeklyHoursSchema(**hours),
        weekly_off_days=[d for d in WEEK_DAYS if d in schedule.weekly_off_days],
        leaves=sorted(schedule.leaves),
        holidays=sorted(schedule.holidays),
    )


def schedule_from_json(raw: Optional[dict]) -> StaffSchedule:
    """
    Parse a stored schedule document.

    A missing document yields the default schedule. A document that does not
    validate (e.g. a weekday missing from weeklyHours) raises ScheduleError.
    """
    if raw is None:
        return default_schedule(settings.DEFAULT_SATURDAY_WORKING)
    try:
        schema = StaffScheduleSchema.model_validate(raw)
    except ValidationError as e:
        logger.error(f"Malformed schedule document: {e}")
        raise ScheduleError(f"Malformed schedule: {e.error_count()} validation error(s)") from e
    return schema_to_schedule(schema)


def schedule_to_json(schedule: StaffSchedule) -> dict:
    return schedule_to_schema(schedule).model_dump(by_alias=True, mode="json")


def load_staff(db: Session, staff_id: int) -> Optional[Staff]:
    stmt = select(Staff).where(Staff.id == staff_id)
    return db.execute(stmt).scalars().first()


def load_staff_schedule(db: Session, staff_id: int) -> Optional[StaffSchedule]:
    """Load the schedule for a staff member, or None if the staff member doesn't exist."""
    staff = load_staff(db, staff_id)
    if staff is None:
        return None
    if staff.schedule is None:
        logger.warning(f"Staff {staff_id} has no stored schedule, using default")
    return schedule_from_json(staff.schedule)


def save_staff_schedule(db: Session, staff: Staff, schedule: StaffSchedule) -> Staff:
    """Replace the staff member's schedule wholesale and commit."""
    staff.schedule = schedule_to_json(schedule)
    db.commit()
    db.refresh(staff)
    return staff
