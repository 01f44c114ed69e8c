"""MongoDB Beanie model for Prescription documents."""

from datetime import datetime, timezone
from typing import List, Optional

from beanie import Document, Indexed
from pydantic import BaseModel, Field


class MedicineMongo(BaseModel):
    """Embedded medicine line."""

    id: str = Field(..., description="Medicine line id")
    name: str
    timing: List[str] = Field(default_factory=list)
    before_food: bool = False
    dosage: str
    days: int


class DoctorInfoMongo(BaseModel):
    """Embedded snapshot of the prescribing doctor."""

    name: str = ""
    email: str = ""
    doctor_id: str = ""
    department: str = ""
    role: str = ""


class PrescriptionMongo(Document):
    """MongoDB model for Prescription entity."""

    id: Optional[int] = Field(default=None, description="Sequential prescription id")
    uhid: Indexed(str) = Field(..., description="Patient UHID")
    medicines: List[MedicineMongo] = Field(default_factory=list)
    allergies: str = ""
    symptoms: str = ""
    hereditary_diseases: str = ""
    doctor: DoctorInfoMongo = Field(default_factory=DoctorInfoMongo)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Settings:
        name = "prescriptions"
        indexes = [
            "created_at",
        ]
