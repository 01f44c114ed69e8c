"""
Domain enumerations.
"""

from enum import Enum


class UserRole(str, Enum):
    DOCTOR = "doctor"
    PATIENT = "patient"
    MEDICAL = "medical"


class RecordType(str, Enum):
    PRESCRIPTION = "prescription"
    IMAGE = "image"
    PDF = "pdf"

    @classmethod
    def from_content_type(cls, content_type: str) -> "RecordType":
        """Uploads are pdf when the content type mentions pdf, otherwise image."""
        if "pdf" in (content_type or "").lower():
            return cls.PDF
        return cls.IMAGE


__all__ = ["UserRole", "RecordType"]
