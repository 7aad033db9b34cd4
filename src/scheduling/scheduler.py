import logging
from dataclasses import replace
from typing import Optional

from src.scheduling.boundary import no_boundary
from src.scheduling.entities import Appointment, AppointmentSummary, Physician, ScheduleRequest
from src.scheduling.errors import NoPhysicianAvailable, SchedulingError, SpecialtyRequired
from src.scheduling.ports import (
    AppointmentRepository,
    Boundary,
    PatientRepository,
    PhysicianPicker,
    PhysicianRepository,
)
from src.scheduling.selection import RandomPhysicianPicker
from src.scheduling.validation import require_patient, require_physician


logger = logging.getLogger("scheduling.scheduler")


class AppointmentScheduler:
    """
    Books new appointments.

    Every check runs before the single `save` call, so a rejected request
    leaves the stores untouched. Validation and the write share one
    boundary scope keyed by the requested timestamp.
    """

    def __init__(
        self,
        patients: PatientRepository,
        physicians: PhysicianRepository,
        appointments: AppointmentRepository,
        picker: Optional[PhysicianPicker] = None,
        boundary: Optional[Boundary] = None,
    ):
        self.patients = patients
        self.physicians = physicians
        self.appointments = appointments
        self.picker = picker or RandomPhysicianPicker()
        self.boundary = boundary or no_boundary

    def schedule(self, request: ScheduleRequest) -> AppointmentSummary:
        try:
            with self.boundary(request.date_time):
                require_patient(self.patients, request.patient_id)
                if request.physician_id is not None:
                    require_physician(self.physicians, request.physician_id)

                physician = self._choose_physician(request)
                appointment = Appointment(
                    id=None,
                    physician_id=physician.id,
                    patient_id=request.patient_id,
                    date_time=request.date_time,
                )
                appointment_id = self.appointments.save(appointment)
        except SchedulingError as e:
            logger.warning(
                f"[schedule] rejected patient_id={request.patient_id} "
                f"physician_id={request.physician_id} date_time={request.date_time}: {e.code}"
            )
            raise

        logger.info(
            f"[schedule] booked appointment_id={appointment_id} physician_id={physician.id} "
            f"patient_id={request.patient_id} date_time={request.date_time.isoformat()}"
        )
        return AppointmentSummary.of(replace(appointment, id=appointment_id))

    def _choose_physician(self, request: ScheduleRequest) -> Physician:
        if request.physician_id is not None:
            return self.physicians.get(request.physician_id)

        if request.specialty is None:
            raise SpecialtyRequired()

        candidates = self.physicians.list_free(request.specialty, request.date_time)
        if not candidates:
            raise NoPhysicianAvailable(
                specialty=request.specialty.value,
                date_time=request.date_time.isoformat(),
            )
        return self.picker.pick(candidates)
