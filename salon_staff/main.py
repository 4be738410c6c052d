import logging

from fastapi import FastAPI
from salon_staff.api.routes import schedules, staff
from salon_staff.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = FastAPI(title="Salon Staff API", version="0.1.0")

app.include_router(staff.router, prefix=settings.API_PREFIX)
app.include_router(schedules.router, prefix=settings.API_PREFIX)


@app.get("/health")
def health_check():
    return {"status": "ok"}
