from datetime import datetime, timedelta

from src.scheduling.entities import Appointment
from src.scheduling.errors import (
    AlreadyCancelled,
    TooLateToCancel,
    UnknownAppointment,
    UnknownPatient,
    UnknownPhysician,
)
from src.scheduling.ports import AppointmentRepository, PatientRepository, PhysicianRepository


def require_patient(patients: PatientRepository, patient_id: int) -> None:
    if not patients.exists(patient_id):
        raise UnknownPatient(patient_id=patient_id)


def require_physician(physicians: PhysicianRepository, physician_id: int) -> None:
    if not physicians.exists(physician_id):
        raise UnknownPhysician(physician_id=physician_id)


def require_appointment(appointments: AppointmentRepository, appointment_id: int) -> Appointment:
    if not appointments.exists(appointment_id):
        raise UnknownAppointment(appointment_id=appointment_id)
    return appointments.get(appointment_id)


def require_cancellable(appointment: Appointment, now: datetime, lead_time: timedelta) -> None:
    """Reject cancelled appointments and those starting within `lead_time` of `now`."""
    if appointment.is_cancelled:
        raise AlreadyCancelled(appointment_id=appointment.id)
    if appointment.date_time - now < lead_time:
        raise TooLateToCancel(
            appointment_id=appointment.id,
            lead_time_hours=lead_time.total_seconds() / 3600,
        )
