"""Sign-up use cases for doctors, medical stores and patients."""

import asyncio
import logging
from typing import Optional

from ...core.auth import AuthService
from ...core.utils.data_uri import encode_data_uri
from ...domain.entities.account import Account
from ...domain.enums import UserRole
from ...domain.errors import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    InvalidAccountDataError,
)
from ...domain.value_objects.uhid import Uhid
from ..dto.account_dto import (
    DoctorSignUpRequest,
    MedicalStoreSignUpRequest,
    PatientSignUpRequest,
)
from ..ports.repositories.account_repo import AccountRepository
from ..ports.repositories.patient_repo import PatientRepository

logger = logging.getLogger(__name__)


def check_new_password(password: str, confirm_password: str, min_length: int) -> None:
    if password != confirm_password:
        raise InvalidAccountDataError("confirm_password", "Passwords do not match")
    if len(password or "") < min_length:
        raise InvalidAccountDataError(
            "password", f"Password must be at least {min_length} characters long"
        )


def photo_to_data_uri(
    photo: Optional[bytes], content_type: Optional[str], max_size_bytes: int
) -> str:
    """Validate a profile photo upload and encode it for storage."""
    if not photo:
        raise InvalidAccountDataError("photo", "Please upload a photo")
    if len(photo) > max_size_bytes:
        raise InvalidAccountDataError(
            "photo",
            f"Photo size should be less than {max_size_bytes // (1024 * 1024)}MB",
        )
    content_type = (content_type or "").lower()
    if not content_type.startswith("image/"):
        raise InvalidAccountDataError("photo", "Photo must be an image")
    return encode_data_uri(photo, content_type)


class SignUpDoctorUseCase:
    def __init__(
        self,
        account_repository: AccountRepository,
        auth_service: AuthService,
        max_photo_size_bytes: int,
    ):
        self._account_repository = account_repository
        self._auth_service = auth_service
        self._max_photo_size_bytes = max_photo_size_bytes

    async def execute(self, request: DoctorSignUpRequest) -> Account:
        check_new_password(
            request.password,
            request.confirm_password,
            self._auth_service.settings.min_password_length,
        )
        email = (request.email or "").strip().lower()
        if await self._account_repository.find_by_email(email):
            raise AccountAlreadyExistsError("Email already exists", email)

        account = Account(
            role=UserRole.DOCTOR,
            name=request.name,
            email=email,
            password_hash=await asyncio.to_thread(
                self._auth_service.hash_password, request.password
            ),
            doctor_id=request.doctor_id,
            department=request.department,
            designation=request.designation,
            photo=photo_to_data_uri(
                request.photo, request.photo_content_type, self._max_photo_size_bytes
            ),
        )
        saved = await self._account_repository.save(account)
        logger.info(f"✅ Doctor account created: {email} ({saved.department})")
        return saved


class SignUpMedicalStoreUseCase:
    def __init__(self, account_repository: AccountRepository, auth_service: AuthService):
        self._account_repository = account_repository
        self._auth_service = auth_service

    async def execute(self, request: MedicalStoreSignUpRequest) -> Account:
        check_new_password(
            request.password,
            request.confirm_password,
            self._auth_service.settings.min_password_length,
        )
        email = (request.email or "").strip().lower()
        if await self._account_repository.find_by_email(email):
            raise AccountAlreadyExistsError("Email already exists", email)

        account = Account(
            role=UserRole.MEDICAL,
            name=request.name,
            email=email,
            password_hash=await asyncio.to_thread(
                self._auth_service.hash_password, request.password
            ),
            phone=(request.phone or "").strip(),
            license_number=(request.license_number or "").strip(),
            address=(request.address or "").strip(),
        )
        saved = await self._account_repository.save(account)
        logger.info(f"✅ Medical store account created: {email}")
        return saved


class SignUpPatientUseCase:
    """Patients may only sign up for a UHID issued at the hospital."""

    def __init__(
        self,
        account_repository: AccountRepository,
        patient_repository: PatientRepository,
        auth_service: AuthService,
    ):
        self._account_repository = account_repository
        self._patient_repository = patient_repository
        self._auth_service = auth_service

    async def execute(self, request: PatientSignUpRequest) -> Account:
        check_new_password(
            request.password,
            request.confirm_password,
            self._auth_service.settings.min_password_length,
        )
        uhid = Uhid((request.uhid or "").strip()).value

        patient = await self._patient_repository.find_by_uhid(uhid)
        if not patient:
            raise AccountNotFoundError(
                uhid, "UHID not found. Please register at the hospital first."
            )
        if await self._account_repository.find_by_uhid(uhid):
            raise AccountAlreadyExistsError("UHID is already registered", uhid)

        account = Account(
            role=UserRole.PATIENT,
            name=patient.name,
            uhid=uhid,
            password_hash=await asyncio.to_thread(
                self._auth_service.hash_password, request.password
            ),
        )
        saved = await self._account_repository.save(account)
        logger.info(f"✅ Patient account created for UHID {uhid}")
        return saved
