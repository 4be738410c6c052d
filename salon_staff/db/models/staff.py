from typing import Optional
from enum import Enum
from datetime import datetime
from sqlalchemy import JSON, Boolean, DateTime, Enum as SQLEnum, Integer, String, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from salon_staff.db.database import Base


class StaffRole(str, Enum):
    STYLIST = "Stylist"
    COLORIST = "Colorist"
    NAIL_TECHNICIAN = "Nail Technician"
    ESTHETICIAN = "Esthetician"
    MASSAGE_THERAPIST = "Massage Therapist"
    MANAGER = "Manager"
    RECEPTIONIST = "Receptionist"


class Staff(Base):
    __tablename__ = "staff"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    tenant_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    phone: Mapped[str] = mapped_column(String, nullable=False, default="")
    role: Mapped[StaffRole] = mapped_column(SQLEnum(StaffRole, name="staff_role_enum"), nullable=False, default=StaffRole.STYLIST)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    # camelCase schedule document, see services.scheduling.data_loader
    schedule: Mapped[Optional[dict]] = mapped_column(JSON().with_variant(JSONB, "postgresql"), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
