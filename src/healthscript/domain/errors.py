"""
Domain-specific error types for business rule violations.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base domain error."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class PatientNotFoundError(DomainError):
    """Patient not found."""

    def __init__(self, identifier: str, field: str = "uhid") -> None:
        message = f"Patient with {field.upper()} '{identifier}' not found"
        super().__init__(message, "PATIENT_NOT_FOUND", {field: identifier})


class DuplicatePatientError(DomainError):
    """A patient with the same Aadhaar number is already registered."""

    def __init__(self, aadhaar: str, existing_uhid: str) -> None:
        message = f"Patient with this Aadhaar number already exists. UHID: {existing_uhid}"
        super().__init__(
            message,
            "DUPLICATE_PATIENT",
            {"aadhaar": aadhaar, "existing_uhid": existing_uhid},
        )


class InvalidPatientDataError(DomainError):
    """Invalid patient data."""

    def __init__(self, field: str, reason: str, value: Any = None) -> None:
        super().__init__(
            reason, "INVALID_PATIENT_DATA", {"field": field, "value": value}
        )


class InvalidUhidError(DomainError):
    """UHID is not a 14-digit identifier."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            "Please enter a valid 14-digit UHID", "INVALID_UHID", {"value": value}
        )


class PrescriptionNotFoundError(DomainError):
    """Prescription not found."""

    def __init__(self, prescription_id: int) -> None:
        message = f"Prescription with ID '{prescription_id}' not found"
        super().__init__(
            message, "PRESCRIPTION_NOT_FOUND", {"prescription_id": prescription_id}
        )


class InvalidPrescriptionError(DomainError):
    """Prescription or medicine violates a business rule."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(reason, "INVALID_PRESCRIPTION", {"field": field})


class RecordNotFoundError(DomainError):
    """Medical record not found."""

    def __init__(self, record_id: int) -> None:
        message = f"Record with ID '{record_id}' not found"
        super().__init__(message, "RECORD_NOT_FOUND", {"record_id": record_id})


class InvalidRecordError(DomainError):
    """Medical record upload is incomplete or malformed."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(reason, "INVALID_RECORD", {"field": field})


class AccountAlreadyExistsError(DomainError):
    """Login identifier is already taken."""

    def __init__(self, message: str, identifier: str) -> None:
        super().__init__(message, "ACCOUNT_EXISTS", {"identifier": identifier})


class InvalidAccountDataError(DomainError):
    """Sign-up or profile data violates a business rule."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(reason, "INVALID_ACCOUNT_DATA", {"field": field})


class AccountNotFoundError(DomainError):
    """No account or patient matches the identifier."""

    def __init__(self, identifier: str, message: Optional[str] = None) -> None:
        super().__init__(
            message or f"No account found for '{identifier}'",
            "ACCOUNT_NOT_FOUND",
            {"identifier": identifier},
        )


class InvalidCredentialsError(DomainError):
    """Login identifier, password or role did not match."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials", "INVALID_CREDENTIALS")


class NoTextRecognizedError(DomainError):
    """OCR produced no usable text."""

    def __init__(self) -> None:
        super().__init__(
            "No text was recognized. Please write more clearly.", "NO_TEXT_RECOGNIZED"
        )
