from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import date
from typing import List, Optional

from salon_staff.services.scheduling.availability import parse_iso_date, parse_time_of_day
from salon_staff.services.scheduling.types import ConflictKind, WeekDay
from salon_staff.services.scheduling.month_view import DayStatus


class DayScheduleSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_working_day: bool = Field(alias="isWorkingDay")
    from_time: str = Field(default="", alias="from")  # "HH:MM" or ""
    to_time: str = Field(default="", alias="to")

    @field_validator("from_time", "to_time")
    @classmethod
    def check_time_of_day(cls, value: str) -> str:
        parse_time_of_day(value)
        return value


class WeeklyHoursSchema(BaseModel):
    monday: DayScheduleSchema
    tuesday: DayScheduleSchema
    wednesday: DayScheduleSchema
    thursday: DayScheduleSchema
    friday: DayScheduleSchema
    saturday: DayScheduleSchema
    sunday: DayScheduleSchema


class StaffScheduleSchema(BaseModel):
    """Schedule document as stored on the staff record (camelCase keys)."""
    model_config = ConfigDict(populate_by_name=True)

    weekly_hours: WeeklyHoursSchema = Field(alias="weeklyHours")
    weekly_off_days: List[WeekDay] = Field(default_factory=list, alias="weeklyOffDays")
    leaves: List[date] = Field(default_factory=list)
    holidays: List[date] = Field(default_factory=list)

    @field_validator("leaves", "holidays", mode="before")
    @classmethod
    def check_dates(cls, value):
        if not isinstance(value, list):
            return value
        return [parse_iso_date(v) for v in value]


class ConflictResponse(BaseModel):
    date: date
    kind: ConflictKind


class ScheduleResponse(BaseModel):
    staff_id: int
    schedule: StaffScheduleSchema
    conflicts: List[ConflictResponse]
    inverted_hours: List[WeekDay]


class WorkingDayResponse(BaseModel):
    staff_id: int
    date: date
    weekday: WeekDay
    is_working_day: bool


class CalendarDayResponse(BaseModel):
    date: date
    status: DayStatus
    is_conflict: bool
    selectable: bool


class MonthCalendarResponse(BaseModel):
    staff_id: int
    year: int
    month: int
    weeks: List[List[Optional[CalendarDayResponse]]]


class WeeklyOffDayUpdate(BaseModel):
    is_off: bool


class WorkingHoursUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_working_day: Optional[bool] = None
    from_time: Optional[str] = Field(default=None, alias="from")
    to_time: Optional[str] = Field(default=None, alias="to")

    @field_validator("from_time", "to_time")
    @classmethod
    def check_time_of_day(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            parse_time_of_day(value)
        return value
