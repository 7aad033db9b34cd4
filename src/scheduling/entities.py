from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Optional


class Specialty(str, Enum):
    ORTHOPEDICS = "orthopedics"
    CARDIOLOGY = "cardiology"
    GYNECOLOGY = "gynecology"
    DERMATOLOGY = "dermatology"


class AppointmentStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    CANCELLED = "CANCELLED"


class CancellationReason(str, Enum):
    PATIENT_CANCELLED = "PATIENT_CANCELLED"
    PHYSICIAN_CANCELLED = "PHYSICIAN_CANCELLED"
    OTHER = "OTHER"


@dataclass(frozen=True)
class Patient:
    id: int
    active: bool = True


@dataclass(frozen=True)
class Physician:
    id: int
    specialty: Specialty
    active: bool = True


@dataclass(frozen=True)
class Appointment:
    """Snapshot of a stored appointment. `id` is None until the store assigns one."""
    id: Optional[int]
    physician_id: int
    patient_id: int
    date_time: datetime
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    cancellation_reason: Optional[CancellationReason] = None

    @property
    def is_cancelled(self) -> bool:
        return self.status == AppointmentStatus.CANCELLED

    def cancelled(self, reason: CancellationReason) -> "Appointment":
        """Return the cancelled version of this snapshot; `self` is left untouched."""
        return replace(self, status=AppointmentStatus.CANCELLED, cancellation_reason=reason)


@dataclass(frozen=True)
class ScheduleRequest:
    patient_id: int
    date_time: datetime
    physician_id: Optional[int] = None
    specialty: Optional[Specialty] = None


@dataclass(frozen=True)
class CancelRequest:
    appointment_id: int
    reason: CancellationReason


@dataclass(frozen=True)
class AppointmentSummary:
    appointment_id: int
    physician_id: int
    patient_id: int
    date_time: datetime

    @classmethod
    def of(cls, appointment: Appointment) -> "AppointmentSummary":
        return cls(
            appointment_id=appointment.id,
            physician_id=appointment.physician_id,
            patient_id=appointment.patient_id,
            date_time=appointment.date_time,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.appointment_id,
            "physician_id": self.physician_id,
            "patient_id": self.patient_id,
            "date_time": self.date_time.isoformat(),
        }
