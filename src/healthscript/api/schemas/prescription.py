"""
Pydantic schemas for prescriptions.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, validator

from ...core.constants import MEDICINE_TIMINGS
from ...domain.entities.prescription import Prescription


class MedicineIn(BaseModel):
    name: str = Field(..., min_length=1, description="Drug name")
    dosage: str = Field(..., min_length=1, description="Dosage, e.g. 500mg")
    days: int = Field(..., ge=1, description="Number of days")
    timing: List[str] = Field(default_factory=list, description="morning, afternoon, evening")
    before_food: bool = Field(False, description="Take before food")

    @validator("timing", each_item=True)
    def validate_timing(cls, v):
        v = (v or "").strip().lower()
        if v not in MEDICINE_TIMINGS:
            raise ValueError(f"Timing must be one of: {', '.join(MEDICINE_TIMINGS)}")
        return v


class CreatePrescriptionRequest(BaseModel):
    """Request schema for writing a prescription."""

    uhid: str = Field(..., description="14-digit patient UHID")
    medicines: List[MedicineIn] = Field(..., min_items=1)
    allergies: str = Field("", max_length=2000)
    symptoms: str = Field("", max_length=2000)
    hereditary_diseases: str = Field("", max_length=2000)


class MedicineOut(BaseModel):
    id: str
    name: str
    dosage: str
    days: int
    timing: List[str]
    before_food: bool


class DoctorOut(BaseModel):
    name: str
    email: str
    doctor_id: str
    department: str
    role: str


class PrescriptionResponse(BaseModel):
    id: Optional[int] = None
    uhid: str
    medicines: List[MedicineOut]
    doctor: DoctorOut
    allergies: str
    symptoms: str
    hereditary_diseases: str
    created_at: datetime

    @classmethod
    def from_domain(cls, prescription: Prescription) -> "PrescriptionResponse":
        return cls(
            id=prescription.id,
            uhid=prescription.uhid.value,
            medicines=[
                MedicineOut(
                    id=m.id,
                    name=m.name,
                    dosage=m.dosage,
                    days=m.days,
                    timing=list(m.timing),
                    before_food=m.before_food,
                )
                for m in prescription.medicines
            ],
            doctor=DoctorOut(
                name=prescription.doctor.name,
                email=prescription.doctor.email,
                doctor_id=prescription.doctor.doctor_id,
                department=prescription.doctor.department,
                role=prescription.doctor.role,
            ),
            allergies=prescription.allergies,
            symptoms=prescription.symptoms,
            hereditary_diseases=prescription.hereditary_diseases,
            created_at=prescription.created_at,
        )


class CreatePrescriptionResponse(BaseModel):
    prescription: PrescriptionResponse
    record_id: Optional[int] = None
    record_title: str


class PharmacyBookingResponse(BaseModel):
    """Medicines to order plus the pharmacy links to open."""

    prescription_id: int
    uhid: str
    medicines: List[str]
    order_url: str
    search_urls: List[str]
