"""Request payloads accepted by the HTTP layer."""
import re
from datetime import datetime
from typing import Annotated, Optional

from flask import current_app
from pydantic import AfterValidator, BaseModel, BeforeValidator, EmailStr, Field, field_validator

from src.scheduling.entities import CancellationReason, Specialty
from src.services.clock import clinic_now, to_clinic_time


def _state_code(v: str) -> str:
    if not re.match(r"^[A-Za-z]{2}$", v.strip()):
        raise ValueError("State must be a 2-letter code.")
    return v.strip().upper()


def _zip_code(v: str) -> str:
    clean = re.sub(r"[^\d]", "", v)
    if len(clean) != 8:
        raise ValueError("Zip code must contain 8 digits.")
    return clean


def _lower(v):
    return v.strip().lower() if isinstance(v, str) else v


StateCode = Annotated[str, AfterValidator(_state_code)]
ZipCode = Annotated[str, AfterValidator(_zip_code)]
SpecialtyIn = Annotated[Specialty, BeforeValidator(_lower)]


class AddressIn(BaseModel):
    street: str = Field(..., min_length=1, max_length=120)
    number: Optional[str] = Field(None, max_length=20)
    complement: Optional[str] = Field(None, max_length=100)
    neighborhood: str = Field(..., min_length=1, max_length=100)
    city: str = Field(..., min_length=1, max_length=100)
    state: StateCode
    zip_code: ZipCode


class AddressUpdate(BaseModel):
    street: Optional[str] = Field(None, min_length=1, max_length=120)
    number: Optional[str] = Field(None, max_length=20)
    complement: Optional[str] = Field(None, max_length=100)
    neighborhood: Optional[str] = Field(None, min_length=1, max_length=100)
    city: Optional[str] = Field(None, min_length=1, max_length=100)
    state: Optional[StateCode] = None
    zip_code: Optional[ZipCode] = None


class PersonBase(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    phone: str = Field(..., min_length=8, max_length=20)
    address: AddressIn

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return v.strip()


class PhysicianIn(PersonBase):
    license_number: str
    specialty: SpecialtyIn

    @field_validator("license_number")
    @classmethod
    def validate_license_number(cls, v):
        if not re.match(r"^\d{4,6}$", v.strip()):
            raise ValueError("License number must contain 4-6 digits.")
        return v.strip()


class PatientIn(PersonBase):
    document: str

    @field_validator("document")
    @classmethod
    def validate_document(cls, v):
        clean = re.sub(r"[^\d]", "", v)
        if len(clean) != 11:
            raise ValueError("Document must contain 11 digits.")
        return clean


class PersonUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    phone: Optional[str] = Field(None, min_length=8, max_length=20)
    address: Optional[AddressUpdate] = None


class PatientUpdate(PersonUpdate):
    id: int


class ScheduleIn(BaseModel):
    patient_id: int
    physician_id: Optional[int] = None
    specialty: Optional[SpecialtyIn] = None
    date_time: datetime

    @field_validator("date_time")
    @classmethod
    def validate_future(cls, v):
        tz_name = current_app.config["CLINIC_TIMEZONE"]
        local = to_clinic_time(v, tz_name)
        if local <= clinic_now(tz_name):
            raise ValueError("Appointment date must be in the future.")
        return local


class CancelIn(BaseModel):
    appointment_id: int
    reason: CancellationReason

    @field_validator("reason", mode="before")
    @classmethod
    def normalize_reason(cls, v):
        return v.strip().upper() if isinstance(v, str) else v


class LoginIn(BaseModel):
    login: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
