"""
Seed script for the salon staff development database.

- Creates tables if they don't exist
- One tenant (id 1) with four staff members
- Default schedules, plus a few leaves/holidays so conflicts show up

Run with: python -m scripts.seed_staff
"""

from datetime import date

from salon_staff.core.config import settings
from salon_staff.db.database import SessionLocal, engine
from salon_staff.db.models import Base, Staff, StaffRole
from salon_staff.services.scheduling.availability import (
    set_weekly_off_day,
    toggle_holiday_date,
    toggle_leave_date,
)
from salon_staff.services.scheduling.data_loader import schedule_to_json
from salon_staff.services.scheduling.types import WeekDay, default_schedule


TENANT_ID = 1


def clear_staff(db):
    """Remove existing staff for the seed tenant."""
    print("Clearing staff...")
    db.query(Staff).filter(Staff.tenant_id == TENANT_ID).delete()
    db.commit()


def seed_staff(db):
    print("Seeding staff...")
    base = default_schedule(settings.DEFAULT_SATURDAY_WORKING)

    # Christmas on a Wednesday -> holiday conflict
    sara = toggle_holiday_date(base, date(2024, 12, 25))
    # Week off before new year -> leave conflicts
    layla = base
    for day in range(23, 28):
        layla = toggle_leave_date(layla, date(2024, 12, day))
    # Mondays off
    omar = set_weekly_off_day(base, WeekDay.MONDAY, True)

    staff = [
        Staff(tenant_id=TENANT_ID, name="Sara Ahmed", phone="+971500000001",
              role=StaffRole.STYLIST, schedule=schedule_to_json(sara)),
        Staff(tenant_id=TENANT_ID, name="Layla Haddad", phone="+971500000002",
              role=StaffRole.COLORIST, schedule=schedule_to_json(layla)),
        Staff(tenant_id=TENANT_ID, name="Omar Khalil", phone="+971500000003",
              role=StaffRole.MASSAGE_THERAPIST, schedule=schedule_to_json(omar)),
        Staff(tenant_id=TENANT_ID, name="Nadia Yousef", phone="+971500000004",
              role=StaffRole.RECEPTIONIST, schedule=None),
    ]
    db.add_all(staff)
    db.commit()
    print(f"Seeded {len(staff)} staff members.")


def main():
    print("\n" + "="*50)
    print("Salon staff seed")
    print("="*50 + "\n")

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        clear_staff(db)
        seed_staff(db)

        print("\n" + "="*50)
        print("Seeding complete!")
        print("="*50)
        print("\nStaff summary:")
        print("  Sara Ahmed   - default schedule, holiday 2024-12-25 (conflict)")
        print("  Layla Haddad - leave 2024-12-23..27 (conflicts)")
        print("  Omar Khalil  - Mondays off")
        print("  Nadia Yousef - no stored schedule (default applied on load)")
        print("="*50 + "\n")

    except Exception as e:
        db.rollback()
        print(f"\nError during seeding: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
