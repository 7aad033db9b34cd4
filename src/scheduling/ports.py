from datetime import datetime
from typing import ContextManager, Hashable, Optional, Protocol, Sequence

from src.scheduling.entities import Appointment, Patient, Physician, Specialty


class PatientRepository(Protocol):
    def exists(self, patient_id: int) -> bool: ...

    def get(self, patient_id: int) -> Patient: ...


class PhysicianRepository(Protocol):
    def exists(self, physician_id: int) -> bool: ...

    def get(self, physician_id: int) -> Physician: ...

    def list_free(self, specialty: Specialty, date_time: datetime) -> list[Physician]:
        """Active physicians of `specialty` with no SCHEDULED appointment at `date_time`."""
        ...

    def find_available(self, specialty: Specialty, date_time: datetime) -> Optional[Physician]: ...


class AppointmentRepository(Protocol):
    def exists(self, appointment_id: int) -> bool: ...

    def get(self, appointment_id: int) -> Appointment: ...

    def save(self, appointment: Appointment) -> int: ...

    def update(self, appointment: Appointment) -> None: ...


class PhysicianPicker(Protocol):
    def pick(self, candidates: Sequence[Physician]) -> Physician: ...


class Boundary(Protocol):
    """Factory for the scope a schedule/cancel call validates and writes in."""

    def __call__(self, key: Hashable) -> ContextManager: ...
