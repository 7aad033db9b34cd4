from extensions import db


class AddressMixin:
    """Embedded postal address shared by patients and physicians."""

    street = db.Column(db.String(120), nullable=False)
    number = db.Column(db.String(20))
    complement = db.Column(db.String(100))
    neighborhood = db.Column(db.String(100), nullable=False)
    city = db.Column(db.String(100), nullable=False)
    state = db.Column(db.String(2), nullable=False)
    zip_code = db.Column(db.String(8), nullable=False)

    ADDRESS_FIELDS = ("street", "number", "complement", "neighborhood", "city", "state", "zip_code")

    def address_dict(self) -> dict:
        return {field: getattr(self, field) for field in self.ADDRESS_FIELDS}

    def apply_address(self, data: dict):
        for field in self.ADDRESS_FIELDS:
            if field in data:
                setattr(self, field, data[field])
