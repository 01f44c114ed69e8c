"""Account DTOs for sign-up, login and password reset."""

from dataclasses import dataclass
from typing import Optional

from ...domain.entities.account import Account


@dataclass
class DoctorSignUpRequest:
    name: str
    email: str
    password: str
    confirm_password: str
    doctor_id: str
    department: str
    designation: str
    photo: Optional[bytes] = None
    photo_content_type: Optional[str] = None


@dataclass
class MedicalStoreSignUpRequest:
    name: str
    email: str
    password: str
    confirm_password: str
    phone: str
    license_number: str
    address: str


@dataclass
class PatientSignUpRequest:
    uhid: str
    password: str
    confirm_password: str


@dataclass
class LoginRequest:
    role: str
    identifier: str
    password: str


@dataclass
class LoginResponse:
    access_token: str
    token_type: str
    expires_in: int
    account: Account


@dataclass
class ResetPasswordRequest:
    role: str
    identifier: str
    new_password: str
    confirm_password: str


@dataclass
class UpdateDoctorProfileRequest:
    name: Optional[str] = None
    department: Optional[str] = None
    designation: Optional[str] = None
    photo: Optional[bytes] = None
    photo_content_type: Optional[str] = None
