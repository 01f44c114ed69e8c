"""Forgotten password flow: verify the identifier, then set a new password."""

import asyncio
import logging

from ...core.auth import AuthService
from ...domain.entities.account import Account
from ...domain.enums import UserRole
from ...domain.errors import AccountNotFoundError, InvalidAccountDataError
from ...domain.value_objects.uhid import Uhid
from ..dto.account_dto import ResetPasswordRequest
from ..ports.repositories.account_repo import AccountRepository
from ..ports.repositories.patient_repo import PatientRepository
from .login import find_account
from .sign_up import check_new_password

logger = logging.getLogger(__name__)


def _parse_role(role: str) -> UserRole:
    try:
        return UserRole(role)
    except ValueError:
        raise InvalidAccountDataError("role", f"Unknown role: {role}")


class VerifyIdentifierUseCase:
    """Confirm an email (doctor/medical) or UHID (patient) is known."""

    def __init__(
        self, account_repository: AccountRepository, patient_repository: PatientRepository
    ):
        self._account_repository = account_repository
        self._patient_repository = patient_repository

    async def execute(self, role: str, identifier: str) -> bool:
        user_role = _parse_role(role)
        identifier = (identifier or "").strip()
        if user_role == UserRole.PATIENT:
            uhid = Uhid(identifier).value
            if not await self._patient_repository.exists_by_uhid(uhid):
                raise AccountNotFoundError(uhid, "UHID not found")
            return True

        account = await find_account(self._account_repository, user_role, identifier)
        if account is None or account.role != user_role:
            raise AccountNotFoundError(identifier, "Email not found")
        return True


class ResetPasswordUseCase:
    """Set a new password.

    A registered patient without an account gets one created on reset.
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        patient_repository: PatientRepository,
        auth_service: AuthService,
    ):
        self._account_repository = account_repository
        self._patient_repository = patient_repository
        self._auth_service = auth_service

    async def execute(self, request: ResetPasswordRequest) -> Account:
        role = _parse_role(request.role)
        check_new_password(
            request.new_password,
            request.confirm_password,
            self._auth_service.settings.min_password_length,
        )
        password_hash = await asyncio.to_thread(
            self._auth_service.hash_password, request.new_password
        )

        account = await find_account(self._account_repository, role, request.identifier)
        if account is not None and account.role == role:
            account.change_password(password_hash)
            saved = await self._account_repository.save(account)
            logger.info(f"Password reset for {role.value} {saved.login_identifier}")
            return saved

        if role == UserRole.PATIENT:
            uhid = Uhid((request.identifier or "").strip()).value
            patient = await self._patient_repository.find_by_uhid(uhid)
            if patient:
                saved = await self._account_repository.save(
                    Account(
                        role=UserRole.PATIENT,
                        name=patient.name,
                        uhid=uhid,
                        password_hash=password_hash,
                    )
                )
                logger.info(f"Patient account created during password reset for UHID {uhid}")
                return saved

        raise AccountNotFoundError(
            request.identifier, "Failed to reset password. Please try again."
        )
