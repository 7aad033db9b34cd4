from extensions import db
from src.models.address import AddressMixin
from src.scheduling.entities import Physician as PhysicianEntity, Specialty

class Physician(AddressMixin, db.Model):
    __tablename__ = "physicians"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(100), unique=True, nullable=False)
    phone = db.Column(db.String(20), nullable=False)
    license_number = db.Column(db.String(6), unique=True, nullable=False)
    specialty = db.Column(db.String(30), nullable=False, index=True)
    active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    def to_entity(self) -> PhysicianEntity:
        return PhysicianEntity(id=self.id, specialty=Specialty(self.specialty), active=self.active)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "license_number": self.license_number,
            "specialty": self.specialty,
            "active": self.active,
            "address": self.address_dict(),
        }

    def to_list_item(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "license_number": self.license_number,
            "specialty": self.specialty,
        }
