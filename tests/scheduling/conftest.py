import pytest
from datetime import date, time

from salon_staff.services.scheduling.types import (
    DaySchedule,
    StaffSchedule,
    WeekDay,
    WeeklyHours,
    default_schedule,
)


def get_test_monday() -> date:
    # returns a fixed Monday for deterministic tests (Christmas week 2024)
    return date(2024, 12, 23)


CHRISTMAS = date(2024, 12, 25)  # Wednesday
SUNDAY_AFTER = date(2024, 12, 29)


@pytest.fixture
def schedule() -> StaffSchedule:
    # Mon-Fri 09-18, Sat 10-16, Sunday weekly off
    return default_schedule()


@pytest.fixture
def disagreeing_schedule() -> StaffSchedule:
    # sunday is a weekly off-day but its working flag was left on
    hours = DaySchedule(True, time(9, 0), time(18, 0))
    return StaffSchedule(
        weekly_hours=WeeklyHours(
            monday=hours, tuesday=hours, wednesday=hours, thursday=hours,
            friday=hours, saturday=hours, sunday=hours,
        ),
        weekly_off_days=frozenset({WeekDay.SUNDAY}),
    )


@pytest.fixture()
def db():
    """In-memory SQLite session with the schema created, dropped after each test."""
    from sqlalchemy import create_engine
    from sqlalchemy.orm import sessionmaker
    from sqlalchemy.pool import StaticPool

    from salon_staff.db.models import Base

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
