"""Prescription DTOs."""

from dataclasses import dataclass, field
from typing import List

from ...domain.entities.prescription import Prescription
from ...domain.entities.record import Record


@dataclass
class MedicineInput:
    name: str
    dosage: str
    days: int
    timing: List[str] = field(default_factory=list)
    before_food: bool = False


@dataclass
class CreatePrescriptionRequest:
    """Request DTO for writing a prescription."""

    uhid: str
    medicines: List[MedicineInput]
    allergies: str = ""
    symptoms: str = ""
    hereditary_diseases: str = ""


@dataclass
class CreatePrescriptionResponse:
    """The saved prescription and the PDF record filed with it."""

    prescription: Prescription
    record: Record
