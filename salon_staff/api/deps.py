from typing import Generator
from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from salon_staff.db.database import SessionLocal
from salon_staff.db.models.staff import Staff
from salon_staff.services.scheduling.data_loader import load_staff


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_staff_or_404(
    staff_id: int,
    db: Session = Depends(get_db),
) -> Staff:
    """Resolve the staff_id path parameter to a Staff row"""
    staff = load_staff(db, staff_id)
    if not staff:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Staff not found")
    return staff
