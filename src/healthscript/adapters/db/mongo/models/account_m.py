"""MongoDB Beanie model for login Account documents."""

from datetime import datetime, timezone
from typing import Optional

from beanie import Document
from pydantic import Field
from pymongo import ASCENDING, IndexModel


class AccountMongo(Document):
    """MongoDB model for Account entity (doctor, patient or medical store)."""

    id: Optional[int] = Field(default=None, description="Sequential account id")
    role: str = Field(..., description="doctor, patient or medical")
    name: str = Field(..., description="Display name")
    password_hash: str = Field(..., description="bcrypt password hash")
    email: Optional[str] = Field(None, description="Login email (doctor, medical)")
    uhid: Optional[str] = Field(None, description="Login UHID (patient)")
    doctor_id: Optional[str] = None
    department: Optional[str] = None
    designation: Optional[str] = None
    photo: Optional[str] = Field(None, description="Profile photo data URI")
    phone: Optional[str] = None
    license_number: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Settings:
        name = "accounts"
        indexes = [
            # Unique among accounts that have the field set
            IndexModel(
                [("email", ASCENDING)],
                name="email_unique",
                unique=True,
                partialFilterExpression={"email": {"$type": "string"}},
            ),
            IndexModel(
                [("uhid", ASCENDING)],
                name="uhid_unique",
                unique=True,
                partialFilterExpression={"uhid": {"$type": "string"}},
            ),
            "role",
        ]
