"""
Pydantic schemas for authentication and accounts.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, validator

from ...domain.entities.account import Account


class MedicalStoreSignUpRequest(BaseModel):
    name: str = Field(..., min_length=1, description="Store name")
    email: str = Field(..., description="Login email")
    password: str
    confirm_password: str
    phone: str = Field(..., description="10-digit phone number")
    license_number: str
    address: str

    @validator("phone")
    def validate_phone(cls, v):
        v = (v or "").strip()
        if len(v) != 10 or not v.isdigit():
            raise ValueError("Please enter a valid 10-digit phone number")
        return v


class PatientSignUpRequest(BaseModel):
    uhid: str = Field(..., description="14-digit UHID issued at registration")
    password: str
    confirm_password: str


class LoginRequest(BaseModel):
    role: str = Field(..., description="doctor, patient or medical")
    identifier: str = Field(..., description="Email, or UHID for patients")
    password: str


class VerifyIdentifierRequest(BaseModel):
    role: str
    identifier: str


class ResetPasswordRequest(BaseModel):
    role: str
    identifier: str
    new_password: str
    confirm_password: str


class AccountResponse(BaseModel):
    id: Optional[int] = None
    role: str
    name: str
    email: Optional[str] = None
    uhid: Optional[str] = None
    doctor_id: Optional[str] = None
    department: Optional[str] = None
    designation: Optional[str] = None
    photo: Optional[str] = None
    phone: Optional[str] = None
    license_number: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_domain(cls, account: Account) -> "AccountResponse":
        return cls(
            id=account.id,
            role=account.role.value,
            name=account.name,
            email=account.email,
            uhid=account.uhid,
            doctor_id=account.doctor_id,
            department=account.department,
            designation=account.designation,
            photo=account.photo,
            phone=account.phone,
            license_number=account.license_number,
            address=account.address,
            created_at=account.created_at,
        )


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    account: AccountResponse


class VerifyIdentifierResponse(BaseModel):
    role: str
    identifier: str
    verified: bool


class SignUpOptionsResponse(BaseModel):
    roles: List[str]
    departments: List[str]
    designations: List[str]
    blood_groups: List[str]
    genders: List[str]
    timings: List[str]
