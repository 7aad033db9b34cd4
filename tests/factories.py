from datetime import datetime

from extensions import db
from src.models import Appointment, Patient, Physician

ADDRESS = {
    "street": "Rua das Flores",
    "number": "10",
    "complement": None,
    "neighborhood": "Centro",
    "city": "Sao Paulo",
    "state": "SP",
    "zip_code": "01001000",
}


def insert_patient(name: str = "Alice", email: str | None = None, document: str | None = None,
                   active: bool = True) -> Patient:
    seq = Patient.query.count() + 1
    p = Patient(
        name=name,
        email=email or f"patient{seq}@clinicmed.com.br",
        phone="11999990000",
        document=document or f"{seq:011d}",
        active=active,
    )
    p.apply_address(ADDRESS)
    db.session.add(p)
    db.session.commit()
    return p


def insert_physician(specialty: str = "cardiology", name: str = "Dr. House", active: bool = True) -> Physician:
    seq = Physician.query.count() + 1
    doc = Physician(
        name=name,
        email=f"doctor{seq}@clinicmed.com.br",
        phone="11988880000",
        license_number=f"{1000 + seq}",
        specialty=specialty,
        active=active,
    )
    doc.apply_address(ADDRESS)
    db.session.add(doc)
    db.session.commit()
    return doc


def insert_appointment(patient: Patient, physician: Physician, date_time: datetime,
                       status: str = "SCHEDULED", reason: str | None = None) -> Appointment:
    appt = Appointment(
        patient_id=patient.id,
        physician_id=physician.id,
        date_time=date_time,
        status=status,
        cancellation_reason=reason,
    )
    db.session.add(appt)
    db.session.commit()
    return appt
