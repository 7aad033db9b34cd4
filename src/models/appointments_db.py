from extensions import db
from datetime import datetime, timezone

from src.scheduling.entities import (
    Appointment as AppointmentEntity,
    AppointmentStatus,
    CancellationReason,
)


def _utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Appointment(db.Model):
    __tablename__ = "appointments"
    __table_args__ = (
        db.Index("ix_appointments_physician_slot", "physician_id", "date_time"),
    )

    id = db.Column(db.Integer, primary_key=True)
    patient_id = db.Column(db.Integer, db.ForeignKey('patients.id'), nullable=False)
    physician_id = db.Column(db.Integer, db.ForeignKey('physicians.id'), nullable=False)
    date_time = db.Column(db.DateTime, nullable=False)
    status = db.Column(db.String(20), nullable=False, default=AppointmentStatus.SCHEDULED.value)
    cancellation_reason = db.Column(db.String(30))
    created_at = db.Column(db.DateTime, default=_utcnow)
    updated_at = db.Column(db.DateTime, default=_utcnow, onupdate=_utcnow)

    patient = db.relationship('Patient', backref=db.backref('appointments', lazy=True))
    physician = db.relationship('Physician', backref=db.backref('appointments', lazy=True))

    def to_entity(self) -> AppointmentEntity:
        return AppointmentEntity(
            id=self.id,
            physician_id=self.physician_id,
            patient_id=self.patient_id,
            date_time=self.date_time,
            status=AppointmentStatus(self.status),
            cancellation_reason=(
                CancellationReason(self.cancellation_reason) if self.cancellation_reason else None
            ),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "physician_id": self.physician_id,
            "patient_id": self.patient_id,
            "date_time": self.date_time.isoformat(),
            "status": self.status,
            "cancellation_reason": self.cancellation_reason,
        }
