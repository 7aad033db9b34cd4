import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from src.scheduling.boundary import no_boundary
from src.scheduling.entities import CancelRequest
from src.scheduling.errors import SchedulingError
from src.scheduling.ports import AppointmentRepository, Boundary
from src.scheduling.validation import require_appointment, require_cancellable


logger = logging.getLogger("scheduling.canceller")

DEFAULT_LEAD_TIME = timedelta(hours=2)


class AppointmentCanceller:
    """Marks a scheduled appointment as cancelled, keeping the reason."""

    def __init__(
        self,
        appointments: AppointmentRepository,
        clock: Callable[[], datetime],
        lead_time: timedelta = DEFAULT_LEAD_TIME,
        boundary: Optional[Boundary] = None,
    ):
        self.appointments = appointments
        self.clock = clock
        self.lead_time = lead_time
        self.boundary = boundary or no_boundary

    def cancel(self, request: CancelRequest) -> None:
        try:
            with self.boundary(("appointment", request.appointment_id)):
                appointment = require_appointment(self.appointments, request.appointment_id)
                require_cancellable(appointment, self.clock(), self.lead_time)
                self.appointments.update(appointment.cancelled(request.reason))
        except SchedulingError as e:
            logger.warning(f"[cancel] rejected appointment_id={request.appointment_id}: {e.code}")
            raise

        logger.info(
            f"[cancel] appointment_id={request.appointment_id} reason={request.reason.value}"
        )
