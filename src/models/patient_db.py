from extensions import db
from src.models.address import AddressMixin
from src.scheduling.entities import Patient as PatientEntity

class Patient(AddressMixin, db.Model):
    __tablename__ = "patients"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(100), unique=True, nullable=False)
    phone = db.Column(db.String(20), nullable=False)
    document = db.Column(db.String(11), unique=True, nullable=False)
    active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    def to_entity(self) -> PatientEntity:
        return PatientEntity(id=self.id, active=self.active)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "document": self.document,
            "active": self.active,
            "address": self.address_dict(),
        }

    def to_list_item(self) -> dict:
        return {"id": self.id, "name": self.name, "email": self.email, "document": self.document}
