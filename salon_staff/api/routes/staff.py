from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from salon_staff.api.deps import get_db, get_staff_or_404
from salon_staff.core.config import settings
from salon_staff.db.models.staff import Staff
from salon_staff.schemas.staff import StaffCreate, StaffUpdate, StaffResponse
from salon_staff.services.scheduling.data_loader import schedule_to_json, schema_to_schedule
from salon_staff.services.scheduling.types import default_schedule

router = APIRouter(prefix="/staff", tags=["staff"])


@router.post("", response_model=StaffResponse, status_code=status.HTTP_201_CREATED)
def create_staff(
    payload: StaffCreate,
    db: Session = Depends(get_db),
):
    """Create a staff member. Without a schedule the default one is attached."""
    if payload.schedule is not None:
        schedule = schema_to_schedule(payload.schedule)
    else:
        schedule = default_schedule(settings.DEFAULT_SATURDAY_WORKING)

    staff = Staff(**payload.model_dump(exclude={"schedule"}), schedule=schedule_to_json(schedule))
    db.add(staff)
    db.commit()
    db.refresh(staff)
    return staff


@router.get("/tenant/{tenant_id}", response_model=List[StaffResponse])
def list_staff_for_tenant(
    tenant_id: int,
    db: Session = Depends(get_db),
):
    return db.query(Staff).filter(
        Staff.tenant_id == tenant_id
    ).order_by(Staff.created_at.desc(), Staff.id.desc()).all()


@router.get("/{staff_id}", response_model=StaffResponse)
def get_staff(staff: Staff = Depends(get_staff_or_404)):
    return staff


@router.put("/{staff_id}", response_model=StaffResponse)
def update_staff(
    payload: StaffUpdate,
    staff: Staff = Depends(get_staff_or_404),
    db: Session = Depends(get_db),
):
    update_data = payload.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(staff, field, value)

    db.commit()
    db.refresh(staff)
    return staff


@router.delete("/{staff_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_staff(
    staff: Staff = Depends(get_staff_or_404),
    db: Session = Depends(get_db),
):
    """Deleting the staff record also drops its schedule"""
    db.delete(staff)
    db.commit()
