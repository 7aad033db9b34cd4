from dataclasses import dataclass
from datetime import timedelta
from functools import partial

from flask import Flask, current_app

from src.scheduling import AppointmentCanceller, AppointmentScheduler, RandomPhysicianPicker
from src.scheduling.ports import PhysicianPicker
from src.services.clock import clinic_now
from src.services.db_context import BookingBoundary
from src.services.repositories import (
    SqlAppointmentRepository,
    SqlPatientRepository,
    SqlPhysicianRepository,
)

EXTENSION_KEY = "scheduling"


@dataclass
class SchedulingEngine:
    scheduler: AppointmentScheduler
    canceller: AppointmentCanceller


def init_scheduling(app: Flask, picker: PhysicianPicker | None = None) -> SchedulingEngine:
    """Wire the scheduler and canceller to the SQL stores and register them on `app`."""
    picker = picker or RandomPhysicianPicker()
    boundary = BookingBoundary()
    appointments = SqlAppointmentRepository()

    engine = SchedulingEngine(
        scheduler=AppointmentScheduler(
            patients=SqlPatientRepository(),
            physicians=SqlPhysicianRepository(),
            appointments=appointments,
            picker=picker,
            boundary=boundary,
        ),
        canceller=AppointmentCanceller(
            appointments=appointments,
            clock=partial(clinic_now, app.config["CLINIC_TIMEZONE"]),
            lead_time=timedelta(hours=app.config["CANCELLATION_LEAD_TIME_HOURS"]),
            boundary=boundary,
        ),
    )
    app.extensions[EXTENSION_KEY] = engine
    return engine


def get_engine() -> SchedulingEngine:
    return current_app.extensions[EXTENSION_KEY]
