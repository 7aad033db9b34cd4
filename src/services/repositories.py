"""
SQLAlchemy-backed stores for the scheduling engine.

These run inside whatever session scope the caller opened (see
`db_context` / `BookingBoundary`); none of them commit on their own.
`save` flushes so the new id is available before the commit.
"""
from datetime import datetime
from typing import Optional

from sqlalchemy import select

from extensions import db
from src.models import Appointment, Patient, Physician
from src.scheduling.entities import (
    Appointment as AppointmentEntity,
    AppointmentStatus,
    Patient as PatientEntity,
    Physician as PhysicianEntity,
    Specialty,
)
from src.scheduling.errors import NotFound


class SqlPatientRepository:
    def exists(self, patient_id: int) -> bool:
        # Soft-deleted patients cannot book.
        row = db.session.get(Patient, patient_id)
        return row is not None and row.active

    def get(self, patient_id: int) -> PatientEntity:
        row = db.session.get(Patient, patient_id)
        if row is None:
            raise NotFound("Patient", patient_id)
        return row.to_entity()


class SqlPhysicianRepository:
    def exists(self, physician_id: int) -> bool:
        return db.session.get(Physician, physician_id) is not None

    def get(self, physician_id: int) -> PhysicianEntity:
        row = db.session.get(Physician, physician_id)
        if row is None:
            raise NotFound("Physician", physician_id)
        return row.to_entity()

    def list_free(self, specialty: Specialty, date_time: datetime) -> list[PhysicianEntity]:
        busy = (
            select(Appointment.physician_id)
            .where(Appointment.date_time == date_time)
            .where(Appointment.status == AppointmentStatus.SCHEDULED.value)
        )
        stmt = (
            select(Physician)
            .where(Physician.active.is_(True))
            .where(Physician.specialty == Specialty(specialty).value)
            .where(Physician.id.not_in(busy))
            .order_by(Physician.id)
        )
        return [row.to_entity() for row in db.session.scalars(stmt)]

    def find_available(self, specialty: Specialty, date_time: datetime) -> Optional[PhysicianEntity]:
        # lowest free id
        candidates = self.list_free(specialty, date_time)
        return candidates[0] if candidates else None


class SqlAppointmentRepository:
    def exists(self, appointment_id: int) -> bool:
        return db.session.get(Appointment, appointment_id) is not None

    def get(self, appointment_id: int) -> AppointmentEntity:
        row = db.session.get(Appointment, appointment_id)
        if row is None:
            raise NotFound("Appointment", appointment_id)
        return row.to_entity()

    def save(self, appointment: AppointmentEntity) -> int:
        row = Appointment(
            patient_id=appointment.patient_id,
            physician_id=appointment.physician_id,
            date_time=appointment.date_time,
            status=appointment.status.value,
            cancellation_reason=(
                appointment.cancellation_reason.value if appointment.cancellation_reason else None
            ),
        )
        db.session.add(row)
        db.session.flush()
        return row.id

    def update(self, appointment: AppointmentEntity) -> None:
        row = db.session.get(Appointment, appointment.id)
        if row is None:
            raise NotFound("Appointment", appointment.id)
        row.status = appointment.status.value
        row.cancellation_reason = (
            appointment.cancellation_reason.value if appointment.cancellation_reason else None
        )
        db.session.add(row)
        db.session.flush()
