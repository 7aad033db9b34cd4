"""In-memory stores implementing the repository contracts, for engine tests without Flask."""
import itertools
import time
from datetime import datetime
from typing import Optional

from src.scheduling.entities import (
    Appointment,
    AppointmentStatus,
    Patient,
    Physician,
    Specialty,
)
from src.scheduling.errors import NotFound
from src.scheduling.selection import FirstPhysicianPicker


class MemoryPatients:
    def __init__(self, *patients: Patient):
        self.rows = {p.id: p for p in patients}

    def exists(self, patient_id: int) -> bool:
        p = self.rows.get(patient_id)
        return p is not None and p.active

    def get(self, patient_id: int) -> Patient:
        if patient_id not in self.rows:
            raise NotFound("Patient", patient_id)
        return self.rows[patient_id]


class MemoryAppointments:
    def __init__(self, *appointments: Appointment):
        self._ids = itertools.count(1000)
        self.rows = {a.id: a for a in appointments}
        self.saved: list[Appointment] = []

    def exists(self, appointment_id: int) -> bool:
        return appointment_id in self.rows

    def get(self, appointment_id: int) -> Appointment:
        if appointment_id not in self.rows:
            raise NotFound("Appointment", appointment_id)
        return self.rows[appointment_id]

    def save(self, appointment: Appointment) -> int:
        new_id = next(self._ids)
        stored = Appointment(
            id=new_id,
            physician_id=appointment.physician_id,
            patient_id=appointment.patient_id,
            date_time=appointment.date_time,
            status=appointment.status,
            cancellation_reason=appointment.cancellation_reason,
        )
        self.rows[new_id] = stored
        self.saved.append(stored)
        return new_id

    def update(self, appointment: Appointment) -> None:
        if appointment.id not in self.rows:
            raise NotFound("Appointment", appointment.id)
        self.rows[appointment.id] = appointment


class MemoryPhysicians:
    def __init__(self, appointments: MemoryAppointments, *physicians: Physician, delay: float = 0.0):
        self.appointments = appointments
        self.rows = {p.id: p for p in physicians}
        self.delay = delay

    def exists(self, physician_id: int) -> bool:
        return physician_id in self.rows

    def get(self, physician_id: int) -> Physician:
        if physician_id not in self.rows:
            raise NotFound("Physician", physician_id)
        return self.rows[physician_id]

    def list_free(self, specialty: Specialty, date_time: datetime) -> list[Physician]:
        busy = {
            a.physician_id
            for a in list(self.appointments.rows.values())
            if a.date_time == date_time and a.status == AppointmentStatus.SCHEDULED
        }
        free = [
            p for p in self.rows.values()
            if p.active and p.specialty == specialty and p.id not in busy
        ]
        if self.delay:
            # widen the gap between the availability check and the insert
            time.sleep(self.delay)
        return free

    def find_available(self, specialty: Specialty, date_time: datetime) -> Optional[Physician]:
        free = self.list_free(specialty, date_time)
        return FirstPhysicianPicker().pick(free) if free else None
