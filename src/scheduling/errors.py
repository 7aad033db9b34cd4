"""
Typed failures raised by the scheduling engine.

Every rejection is a `SchedulingError` subclass with a stable `code` so the
HTTP layer can map it without parsing messages.
"""


class SchedulingError(Exception):
    code = "SCHEDULING_ERROR"
    message = "The request could not be scheduled."

    def __init__(self, message: str | None = None, **details):
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)


class UnknownPatient(SchedulingError):
    code = "UNKNOWN_PATIENT"
    message = "Patient id does not exist."


class UnknownPhysician(SchedulingError):
    code = "UNKNOWN_PHYSICIAN"
    message = "Physician id does not exist."


class SpecialtyRequired(SchedulingError):
    code = "SPECIALTY_REQUIRED"
    message = "Specialty is required when no physician is chosen."


class NoPhysicianAvailable(SchedulingError):
    code = "NO_PHYSICIAN_AVAILABLE"
    message = "No physician of this specialty is free at the requested time."


class UnknownAppointment(SchedulingError):
    code = "UNKNOWN_APPOINTMENT"
    message = "Appointment id does not exist."


class AlreadyCancelled(SchedulingError):
    code = "ALREADY_CANCELLED"
    message = "Appointment is already cancelled."


class TooLateToCancel(SchedulingError):
    code = "TOO_LATE_TO_CANCEL"
    message = "Appointment is too close to be cancelled."


class NotFound(LookupError):
    """Raised by repositories when `get` is called for a missing record."""

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")
