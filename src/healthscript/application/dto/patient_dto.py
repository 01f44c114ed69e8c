"""Patient DTOs for API communication."""

from dataclasses import dataclass
from datetime import date


@dataclass
class RegisterPatientRequest:
    """Request DTO for patient registration."""

    name: str
    gender: str
    date_of_birth: date
    blood_group: str
    aadhaar: str
