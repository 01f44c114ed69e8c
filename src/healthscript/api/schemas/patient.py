"""
Pydantic schemas for patient registration and lookup.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field, validator

from ...core.constants import BLOOD_GROUPS, GENDERS
from ...domain.entities.patient import Patient


class RegisterPatientRequest(BaseModel):
    """Request schema for patient registration."""

    name: str = Field(..., min_length=1, max_length=120, description="Patient full name")
    gender: str = Field(..., description="male, female or other")
    date_of_birth: date = Field(..., description="Date of birth (YYYY-MM-DD)")
    blood_group: str = Field(..., description="ABO blood group with Rh factor, e.g. O+")
    aadhaar: str = Field(..., description="12-digit Aadhaar number")

    @validator("name")
    def validate_name(cls, v):
        if not v or not v.strip():
            raise ValueError("Please enter patient name")
        return v.strip()

    @validator("gender")
    def validate_gender(cls, v):
        v = (v or "").strip().lower()
        if v not in GENDERS:
            raise ValueError(f"Gender must be one of: {', '.join(GENDERS)}")
        return v

    @validator("blood_group")
    def validate_blood_group(cls, v):
        v = (v or "").strip().upper()
        if v not in BLOOD_GROUPS:
            raise ValueError(f"Blood group must be one of: {', '.join(BLOOD_GROUPS)}")
        return v

    @validator("aadhaar")
    def validate_aadhaar(cls, v):
        v = (v or "").strip()
        if len(v) != 12 or not v.isdigit():
            raise ValueError("Please enter valid 12-digit Aadhaar number")
        return v


class PatientResponse(BaseModel):
    id: Optional[int] = None
    uhid: str
    name: str
    gender: str
    date_of_birth: date
    age: int
    blood_group: str
    aadhaar: str
    created_at: datetime

    @classmethod
    def from_domain(cls, patient: Patient) -> "PatientResponse":
        return cls(
            id=patient.id,
            uhid=patient.uhid.value,
            name=patient.name,
            gender=patient.gender,
            date_of_birth=patient.date_of_birth,
            age=patient.age,
            blood_group=patient.blood_group,
            aadhaar=patient.aadhaar,
            created_at=patient.created_at,
        )


class RegisterPatientResponse(BaseModel):
    uhid: str
    patient: PatientResponse
