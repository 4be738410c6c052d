from salon_staff.db.database import Base

# Import models
from salon_staff.db.models.staff import Staff, StaffRole

__all__ = [
    "Base",
    # Models
    "Staff",
    # Enums
    "StaffRole",
]
