from sqlalchemy import select

from extensions import db
from src.models import Patient, Physician, Appointment
from src.scheduling.errors import NotFound
from src.services.db_context import db_context
import logging


logger = logging.getLogger("clinic_service")


def _paginate(stmt, page: int, size: int) -> dict:
    pagination = db.paginate(stmt, page=page, per_page=size, error_out=False)
    return {
        "items": [row.to_list_item() for row in pagination.items],
        "page": pagination.page,
        "size": pagination.per_page,
        "total": pagination.total,
        "pages": pagination.pages,
    }


def _get_active(model, entity_id: int):
    row = db.session.get(model, entity_id)
    if row is None or not row.active:
        raise NotFound(model.__name__, entity_id)
    return row


# -------------------------------
# 👤 PATIENT HELPERS
# -------------------------------

def register_patient(data: dict) -> Patient:
    """Create an active patient from a validated registration payload."""
    with db_context():
        p = Patient(
            name=data["name"],
            email=data["email"],
            phone=data["phone"],
            document=data["document"],
            active=True,
        )
        p.apply_address(data["address"])
        db.session.add(p)

    logger.info(f"[register_patient] created patient_id={p.id}")
    return p


def list_patients(page: int = 1, size: int = 10) -> dict:
    """Active patients, ordered by name."""
    stmt = select(Patient).where(Patient.active.is_(True)).order_by(Patient.name)
    return _paginate(stmt, page, size)


def get_patient(patient_id: int) -> Patient:
    return _get_active(Patient, patient_id)


def update_patient(patient_id: int, data: dict) -> Patient:
    """
    Update the mutable fields of a patient.
    - name / phone are replaced when present.
    - address is merged field by field.
    """
    with db_context():
        p = _get_active(Patient, patient_id)
        if data.get("name"):
            p.name = data["name"]
        if data.get("phone"):
            p.phone = data["phone"]
        if data.get("address"):
            p.apply_address(data["address"])

    logger.info(f"[update_patient] patient_id={patient_id}")
    return p


def deactivate_patient(patient_id: int) -> None:
    """Soft delete: the record stays for appointment history."""
    with db_context():
        p = _get_active(Patient, patient_id)
        p.active = False

    logger.info(f"[deactivate_patient] patient_id={patient_id}")


# -------------------------------
# 🩺 PHYSICIAN HELPERS
# -------------------------------

def register_physician(data: dict) -> Physician:
    """Create an active physician from a validated registration payload."""
    with db_context():
        doc = Physician(
            name=data["name"],
            email=data["email"],
            phone=data["phone"],
            license_number=data["license_number"],
            specialty=data["specialty"].value,
            active=True,
        )
        doc.apply_address(data["address"])
        db.session.add(doc)

    logger.info(f"[register_physician] created physician_id={doc.id} specialty={doc.specialty}")
    return doc


def list_physicians(page: int = 1, size: int = 10) -> dict:
    """Active physicians, ordered by name."""
    stmt = select(Physician).where(Physician.active.is_(True)).order_by(Physician.name)
    return _paginate(stmt, page, size)


def get_physician(physician_id: int) -> Physician:
    return _get_active(Physician, physician_id)


def update_physician(physician_id: int, data: dict) -> Physician:
    with db_context():
        doc = _get_active(Physician, physician_id)
        if data.get("name"):
            doc.name = data["name"]
        if data.get("phone"):
            doc.phone = data["phone"]
        if data.get("address"):
            doc.apply_address(data["address"])

    logger.info(f"[update_physician] physician_id={physician_id}")
    return doc


def deactivate_physician(physician_id: int) -> None:
    """Soft delete: an inactive physician is never picked for new appointments."""
    with db_context():
        doc = _get_active(Physician, physician_id)
        doc.active = False

    logger.info(f"[deactivate_physician] physician_id={physician_id}")


# -------------------------------
# 📅 APPOINTMENT HELPERS
# -------------------------------

def get_appointment(appointment_id: int) -> Appointment:
    appt = db.session.get(Appointment, appointment_id)
    if appt is None:
        raise NotFound("Appointment", appointment_id)
    return appt
