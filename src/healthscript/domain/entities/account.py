"""Account entity for doctors, patients and medical stores."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from ...core.constants import DOCTOR_DEPARTMENTS, DOCTOR_ROLES, PHONE_LENGTH
from ..enums import UserRole
from ..errors import InvalidAccountDataError
from ..value_objects.uhid import Uhid

_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Account:
    """A login account.

    Doctors and medical stores sign in with their email, patients with their UHID.
    """

    role: UserRole
    name: str
    password_hash: str
    email: Optional[str] = None
    uhid: Optional[str] = None
    # Doctor
    doctor_id: Optional[str] = None
    department: Optional[str] = None
    designation: Optional[str] = None
    photo: Optional[str] = None
    # Medical store
    phone: Optional[str] = None
    license_number: Optional[str] = None
    address: Optional[str] = None
    id: Optional[int] = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        self.role = UserRole(self.role)
        self.name = (self.name or "").strip()
        if self.email:
            self.email = self.email.strip().lower()
        self._validate()

    def _validate(self) -> None:
        if not self.name:
            raise InvalidAccountDataError("name", "Name is required")
        if not self.password_hash:
            raise InvalidAccountDataError("password", "Password is required")

        if self.role == UserRole.PATIENT:
            if not self.uhid:
                raise InvalidAccountDataError("uhid", "UHID is required")
            Uhid(self.uhid)
            return

        if not self.email or not _EMAIL_RE.match(self.email):
            raise InvalidAccountDataError("email", "A valid email address is required")

        if self.role == UserRole.DOCTOR:
            self._validate_doctor()
        else:
            self._validate_medical_store()

    def _validate_doctor(self) -> None:
        if not self.doctor_id or not self.doctor_id.strip():
            raise InvalidAccountDataError("doctor_id", "Doctor ID is required")
        if self.department not in DOCTOR_DEPARTMENTS:
            raise InvalidAccountDataError(
                "department", f"Department must be one of: {', '.join(DOCTOR_DEPARTMENTS)}"
            )
        if self.designation not in DOCTOR_ROLES:
            raise InvalidAccountDataError(
                "designation", f"Role must be one of: {', '.join(DOCTOR_ROLES)}"
            )
        if not self.photo:
            raise InvalidAccountDataError("photo", "Please upload a photo")

    def _validate_medical_store(self) -> None:
        digits = self.phone or ""
        if len(digits) != PHONE_LENGTH or not digits.isdigit():
            raise InvalidAccountDataError(
                "phone", "Please enter a valid 10-digit phone number"
            )
        if not self.license_number or not self.license_number.strip():
            raise InvalidAccountDataError("license_number", "License number is required")
        if not self.address or not self.address.strip():
            raise InvalidAccountDataError("address", "Address is required")

    @property
    def login_identifier(self) -> str:
        if self.role == UserRole.PATIENT:
            return self.uhid or ""
        return self.email or ""

    def change_password(self, password_hash: str) -> None:
        if not password_hash:
            raise InvalidAccountDataError("password", "Password is required")
        self.password_hash = password_hash
        self.updated_at = _utcnow()

    def update_doctor_profile(
        self,
        name: Optional[str] = None,
        department: Optional[str] = None,
        designation: Optional[str] = None,
        photo: Optional[str] = None,
    ) -> None:
        """Apply profile edits and re-run validation."""
        if self.role != UserRole.DOCTOR:
            raise InvalidAccountDataError("role", "Only doctor accounts have a profile")
        if name is not None:
            self.name = name.strip()
        if department is not None:
            self.department = department
        if designation is not None:
            self.designation = designation
        if photo is not None:
            self.photo = photo
        self._validate()
        self.updated_at = _utcnow()
