"""Patient domain entity representing a registered patient."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Optional

from ...core.constants import AADHAAR_LENGTH, BLOOD_GROUPS, GENDERS
from ...core.utils.datetime_utils import get_age_from_birthdate
from ..errors import InvalidPatientDataError
from ..value_objects.uhid import Uhid


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Patient:
    """Patient domain entity."""

    uhid: Uhid
    name: str
    gender: str
    date_of_birth: date
    blood_group: str
    aadhaar: str
    age: Optional[int] = None
    id: Optional[int] = None
    created_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        """Validate patient data and derive age from date of birth."""
        self.name = (self.name or "").strip()
        self.aadhaar = (self.aadhaar or "").strip()
        self.gender = (self.gender or "").strip().lower()
        self._validate_patient_data()
        if self.age is None:
            self.age = get_age_from_birthdate(self.date_of_birth)

    def _validate_patient_data(self) -> None:
        """Validate patient data according to business rules."""
        if not self.name:
            raise InvalidPatientDataError("name", "Name is required", self.name)

        if len(self.name) > 120:
            raise InvalidPatientDataError(
                "name", f"Name too long (max 120 characters), got {len(self.name)}", self.name[:50]
            )

        if self.gender not in GENDERS:
            raise InvalidPatientDataError(
                "gender", f"Gender must be one of: {', '.join(GENDERS)}", self.gender
            )

        if not isinstance(self.date_of_birth, date):
            raise InvalidPatientDataError(
                "date_of_birth", "Date of birth is required", self.date_of_birth
            )
        if isinstance(self.date_of_birth, datetime):
            self.date_of_birth = self.date_of_birth.date()
        if self.date_of_birth > date.today():
            raise InvalidPatientDataError(
                "date_of_birth",
                "Date of birth cannot be in the future",
                self.date_of_birth.isoformat(),
            )

        if self.blood_group not in BLOOD_GROUPS:
            raise InvalidPatientDataError(
                "blood_group",
                f"Blood group must be one of: {', '.join(BLOOD_GROUPS)}",
                self.blood_group,
            )

        if len(self.aadhaar) != AADHAAR_LENGTH or not self.aadhaar.isdigit():
            raise InvalidPatientDataError(
                "aadhaar", "Aadhaar number must be exactly 12 digits", self.aadhaar
            )

        if self.age is not None and (self.age < 0 or self.age > 150):
            raise InvalidPatientDataError(
                "age", f"Age must be between 0 and 150, got {self.age}", self.age
            )
