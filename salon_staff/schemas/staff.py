from pydantic import BaseModel
from datetime import datetime
from typing import Optional

from salon_staff.db.models.staff import StaffRole
from salon_staff.schemas.schedules import StaffScheduleSchema


class StaffBase(BaseModel):
    tenant_id: int
    name: str
    email: Optional[str] = None
    phone: str = ""
    role: StaffRole = StaffRole.STYLIST
    is_active: bool = True


class StaffCreate(StaffBase):
    schedule: Optional[StaffScheduleSchema] = None  # None = default schedule


class StaffUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[StaffRole] = None
    is_active: Optional[bool] = None


class StaffResponse(StaffBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
