"""MongoDB Beanie model for Patient documents."""

from datetime import datetime, timezone
from typing import Optional

from beanie import Document, Indexed
from pydantic import Field


class PatientMongo(Document):
    """MongoDB model for Patient entity."""

    id: Optional[int] = Field(default=None, description="Sequential patient id")
    uhid: Indexed(str, unique=True) = Field(..., description="14-digit UHID")
    name: Indexed(str) = Field(..., description="Patient full name")
    gender: str = Field(..., description="male, female or other")
    age: int = Field(..., description="Age in years at registration")
    date_of_birth: str = Field(..., description="ISO date of birth (YYYY-MM-DD)")
    blood_group: str = Field(..., description="ABO/Rh blood group")
    aadhaar: Indexed(str, unique=True) = Field(..., description="12-digit Aadhaar number")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Settings:
        name = "patients"
