from flask import Blueprint, current_app, jsonify, request, url_for

from src.routes.schemas import PatientIn, PatientUpdate
from src.services import clinic_service


patients_bp = Blueprint("patients", __name__, url_prefix="/patients")


@patients_bp.route("", methods=["POST"])
def register():
    payload = PatientIn.model_validate(request.get_json(silent=True) or {})
    p = clinic_service.register_patient(payload.model_dump())

    response = jsonify(p.to_dict())
    response.status_code = 201
    response.headers["Location"] = url_for("patients.detail", patient_id=p.id)
    return response


@patients_bp.route("", methods=["GET"])
def list_active():
    """Active patients, paginated with `?page=&size=` and ordered by name."""
    page = request.args.get("page", 1, type=int)
    size = request.args.get("size", current_app.config["PAGE_SIZE"], type=int)
    return jsonify(clinic_service.list_patients(page=page, size=size))


@patients_bp.route("/<int:patient_id>", methods=["GET"])
def detail(patient_id: int):
    return jsonify(clinic_service.get_patient(patient_id).to_dict())


@patients_bp.route("", methods=["PUT"])
def update():
    """The patient id travels in the body."""
    payload = PatientUpdate.model_validate(request.get_json(silent=True) or {})
    data = payload.model_dump(exclude_unset=True, exclude_none=True)
    p = clinic_service.update_patient(data.pop("id"), data)
    return jsonify(p.to_dict())


@patients_bp.route("/<int:patient_id>", methods=["DELETE"])
def deactivate(patient_id: int):
    clinic_service.deactivate_patient(patient_id)
    return "", 204
