"""Prescription domain entities: prescribed medicines and the doctor snapshot."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from ...core.constants import MEDICINE_TIMINGS, NOT_AVAILABLE, UNKNOWN_DOCTOR_NAME
from ..errors import InvalidPrescriptionError
from ..value_objects.uhid import Uhid


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Medicine:
    """A single prescribed medicine line."""

    name: str
    dosage: str
    days: int
    timing: List[str] = field(default_factory=list)
    before_food: bool = False
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self) -> None:
        self.name = (self.name or "").strip()
        self.dosage = (self.dosage or "").strip()
        if not self.name:
            raise InvalidPrescriptionError("name", "Medicine name is required")
        if not self.dosage:
            raise InvalidPrescriptionError("dosage", f"Dosage is required for {self.name}")
        if not isinstance(self.days, int) or isinstance(self.days, bool) or self.days < 1:
            raise InvalidPrescriptionError(
                "days", f"Duration for {self.name} must be at least 1 day"
            )

        unknown = [t for t in self.timing if t not in MEDICINE_TIMINGS]
        if unknown:
            raise InvalidPrescriptionError(
                "timing", f"Unknown timing: {', '.join(unknown)}"
            )
        # Order as given, no duplicates
        self.timing = list(dict.fromkeys(self.timing))

    @property
    def food_instruction(self) -> str:
        return "Before food" if self.before_food else "After food"


@dataclass
class DoctorInfo:
    """Snapshot of the prescribing doctor at the time of writing."""

    name: str = ""
    email: str = ""
    doctor_id: str = ""
    department: str = ""
    role: str = ""

    @property
    def display_name(self) -> str:
        return self.name or UNKNOWN_DOCTOR_NAME

    def field_or_na(self, value: str) -> str:
        return value or NOT_AVAILABLE


@dataclass
class Prescription:
    """Prescription domain entity."""

    uhid: Uhid
    medicines: List[Medicine]
    doctor: DoctorInfo
    allergies: str = ""
    symptoms: str = ""
    hereditary_diseases: str = ""
    id: Optional[int] = None
    created_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if not self.medicines:
            raise InvalidPrescriptionError(
                "medicines", "Please add at least one medicine to the prescription"
            )
        self.allergies = (self.allergies or "").strip()
        self.symptoms = (self.symptoms or "").strip()
        self.hereditary_diseases = (self.hereditary_diseases or "").strip()

    @property
    def medicine_names(self) -> List[str]:
        return [m.name for m in self.medicines]
