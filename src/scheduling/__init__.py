from src.scheduling.boundary import SlotLocks
from src.scheduling.canceller import AppointmentCanceller
from src.scheduling.entities import (
    Appointment,
    AppointmentStatus,
    AppointmentSummary,
    CancellationReason,
    CancelRequest,
    Patient,
    Physician,
    ScheduleRequest,
    Specialty,
)
from src.scheduling.errors import (
    AlreadyCancelled,
    NoPhysicianAvailable,
    NotFound,
    SchedulingError,
    SpecialtyRequired,
    TooLateToCancel,
    UnknownAppointment,
    UnknownPatient,
    UnknownPhysician,
)
from src.scheduling.scheduler import AppointmentScheduler
from src.scheduling.selection import FirstPhysicianPicker, RandomPhysicianPicker
