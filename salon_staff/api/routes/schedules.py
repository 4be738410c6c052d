import logging
from datetime import date
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from salon_staff.api.deps import get_db, get_staff_or_404
from salon_staff.db.models.staff import Staff
from salon_staff.schemas.schedules import (
    CalendarDayResponse,
    ConflictResponse,
    MonthCalendarResponse,
    ScheduleResponse,
    StaffScheduleSchema,
    WeeklyOffDayUpdate,
    WorkingDayResponse,
    WorkingHoursUpdate,
)
from salon_staff.services.scheduling.availability import (
    ScheduleError,
    detect_conflicts,
    inverted_hours,
    is_working_day,
    set_weekly_off_day,
    set_working_day_flag,
    set_working_hours,
    to_monday_first_weekday,
    toggle_holiday_date,
    toggle_leave_date,
)
from salon_staff.services.scheduling.data_loader import (
    save_staff_schedule,
    schedule_from_json,
    schedule_to_schema,
    schema_to_schedule,
)
from salon_staff.services.scheduling.month_view import month_overview
from salon_staff.services.scheduling.types import StaffSchedule, WeekDay

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/staff/{staff_id}/schedule", tags=["schedules"])


def _current_schedule(staff: Staff) -> StaffSchedule:
    try:
        return schedule_from_json(staff.schedule)
    except ScheduleError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


def _schedule_response(staff: Staff, schedule: StaffSchedule) -> ScheduleResponse:
    return ScheduleResponse(
        staff_id=staff.id,
        schedule=schedule_to_schema(schedule),
        conflicts=[ConflictResponse(date=c.date, kind=c.kind) for c in detect_conflicts(schedule)],
        inverted_hours=inverted_hours(schedule),
    )


def _save(db: Session, staff: Staff, schedule: StaffSchedule) -> ScheduleResponse:
    """Persist and report conflicts as warnings; they never block the save"""
    staff = save_staff_schedule(db, staff, schedule)
    response = _schedule_response(staff, schedule)
    logger.info(f"Saved schedule for staff {staff.id} ({len(response.conflicts)} conflict(s))")
    return response


@router.get("", response_model=ScheduleResponse)
def get_schedule(staff: Staff = Depends(get_staff_or_404)):
    return _schedule_response(staff, _current_schedule(staff))


@router.put("", response_model=ScheduleResponse)
def replace_schedule(
    payload: StaffScheduleSchema,
    staff: Staff = Depends(get_staff_or_404),
    db: Session = Depends(get_db),
):
    """Replace the whole schedule"""
    return _save(db, staff, schema_to_schedule(payload))


@router.get("/conflicts", response_model=List[ConflictResponse])
def get_conflicts(staff: Staff = Depends(get_staff_or_404)):
    schedule = _current_schedule(staff)
    return [ConflictResponse(date=c.date, kind=c.kind) for c in detect_conflicts(schedule)]


@router.get("/working-day", response_model=WorkingDayResponse)
def get_working_day(
    on: date = Query(..., description="Calendar date, YYYY-MM-DD"),
    staff: Staff = Depends(get_staff_or_404),
):
    schedule = _current_schedule(staff)
    return WorkingDayResponse(
        staff_id=staff.id,
        date=on,
        weekday=to_monday_first_weekday(on),
        is_working_day=is_working_day(schedule, on),
    )


@router.get("/calendar", response_model=MonthCalendarResponse)
def get_month_calendar(
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=1, le=12),
    staff: Staff = Depends(get_staff_or_404),
):
    weeks = month_overview(_current_schedule(staff), year, month)
    return MonthCalendarResponse(
        staff_id=staff.id,
        year=year,
        month=month,
        weeks=[
            [
                CalendarDayResponse(
                    date=d.date, status=d.status, is_conflict=d.is_conflict, selectable=d.selectable
                ) if d else None
                for d in week
            ]
            for week in weeks
        ],
    )


@router.post("/leaves/{leave_date}/toggle", response_model=ScheduleResponse)
def toggle_leave(
    leave_date: date,
    staff: Staff = Depends(get_staff_or_404),
    db: Session = Depends(get_db),
):
    """Toggle a leave day. Weekly off-days are left unchanged."""
    schedule = _current_schedule(staff)
    return _save(db, staff, toggle_leave_date(schedule, leave_date))


@router.post("/holidays/{holiday_date}/toggle", response_model=ScheduleResponse)
def toggle_holiday(
    holiday_date: date,
    staff: Staff = Depends(get_staff_or_404),
    db: Session = Depends(get_db),
):
    """Toggle a holiday. Leave days and weekly off-days are left unchanged."""
    schedule = _current_schedule(staff)
    return _save(db, staff, toggle_holiday_date(schedule, holiday_date))


@router.put("/off-days/{day}", response_model=ScheduleResponse)
def update_weekly_off_day(
    day: WeekDay,
    payload: WeeklyOffDayUpdate,
    staff: Staff = Depends(get_staff_or_404),
    db: Session = Depends(get_db),
):
    schedule = _current_schedule(staff)
    return _save(db, staff, set_weekly_off_day(schedule, day, payload.is_off))


@router.put("/hours/{day}", response_model=ScheduleResponse)
def update_working_hours(
    day: WeekDay,
    payload: WorkingHoursUpdate,
    staff: Staff = Depends(get_staff_or_404),
    db: Session = Depends(get_db),
):
    """Update the working flag and/or hours of one weekday. Fields left out are unchanged."""
    schedule = _current_schedule(staff)
    update_data = payload.model_dump(exclude_unset=True)

    if "is_working_day" in update_data and update_data["is_working_day"] is not None:
        schedule = set_working_day_flag(schedule, day, update_data["is_working_day"])
    if "from_time" in update_data:
        schedule = set_working_hours(schedule, day, "from", update_data["from_time"])
    if "to_time" in update_data:
        schedule = set_working_hours(schedule, day, "to", update_data["to_time"])

    return _save(db, staff, schedule)
