from flask import Blueprint, current_app, jsonify, request, url_for

from src.routes.schemas import PersonUpdate, PhysicianIn
from src.services import clinic_service


physicians_bp = Blueprint("physicians", __name__, url_prefix="/physicians")


@physicians_bp.route("", methods=["POST"])
def register():
    payload = PhysicianIn.model_validate(request.get_json(silent=True) or {})
    doc = clinic_service.register_physician(payload.model_dump())

    response = jsonify(doc.to_dict())
    response.status_code = 201
    response.headers["Location"] = url_for("physicians.detail", physician_id=doc.id)
    return response


@physicians_bp.route("", methods=["GET"])
def list_active():
    """Active physicians, paginated with `?page=&size=` and ordered by name."""
    page = request.args.get("page", 1, type=int)
    size = request.args.get("size", current_app.config["PAGE_SIZE"], type=int)
    return jsonify(clinic_service.list_physicians(page=page, size=size))


@physicians_bp.route("/<int:physician_id>", methods=["GET"])
def detail(physician_id: int):
    return jsonify(clinic_service.get_physician(physician_id).to_dict())


@physicians_bp.route("/<int:physician_id>", methods=["PUT"])
def update(physician_id: int):
    payload = PersonUpdate.model_validate(request.get_json(silent=True) or {})
    doc = clinic_service.update_physician(
        physician_id, payload.model_dump(exclude_unset=True, exclude_none=True)
    )
    return jsonify(doc.to_dict())


@physicians_bp.route("/<int:physician_id>", methods=["DELETE"])
def deactivate(physician_id: int):
    clinic_service.deactivate_physician(physician_id)
    return "", 204
