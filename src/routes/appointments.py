from flask import Blueprint, jsonify, request, url_for

from src.routes.schemas import CancelIn, ScheduleIn
from src.scheduling import CancelRequest, ScheduleRequest
from src.services.clinic_service import get_appointment
from src.services.scheduling_service import get_engine


appointments_bp = Blueprint("appointments", __name__, url_prefix="/appointments")


@appointments_bp.route("", methods=["POST"])
def schedule_appointment():
    """
    Book an appointment. When `physician_id` is omitted a free physician
    of the requested `specialty` is assigned.
    """
    payload = ScheduleIn.model_validate(request.get_json(silent=True) or {})

    summary = get_engine().scheduler.schedule(
        ScheduleRequest(
            patient_id=payload.patient_id,
            physician_id=payload.physician_id,
            specialty=payload.specialty,
            date_time=payload.date_time,
        )
    )

    response = jsonify(summary.to_dict())
    response.status_code = 201
    response.headers["Location"] = url_for(
        "appointments.appointment_detail", appointment_id=summary.appointment_id
    )
    return response


@appointments_bp.route("/<int:appointment_id>", methods=["GET"])
def appointment_detail(appointment_id: int):
    return jsonify(get_appointment(appointment_id).to_dict())


@appointments_bp.route("", methods=["DELETE"])
def cancel_appointment():
    """Cancel an appointment with one of the accepted reasons."""
    payload = CancelIn.model_validate(request.get_json(silent=True) or {})

    get_engine().canceller.cancel(
        CancelRequest(appointment_id=payload.appointment_id, reason=payload.reason)
    )
    return "", 204
