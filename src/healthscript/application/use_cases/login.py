"""Login use case."""

import asyncio
import logging
from typing import Optional

from ...core.auth import AuthService
from ...domain.entities.account import Account
from ...domain.enums import UserRole
from ...domain.errors import InvalidCredentialsError
from ..dto.account_dto import LoginRequest, LoginResponse
from ..ports.repositories.account_repo import AccountRepository

logger = logging.getLogger(__name__)


async def find_account(
    account_repository: AccountRepository, role: UserRole, identifier: str
) -> Optional[Account]:
    """Patients are looked up by UHID, everyone else by email."""
    identifier = (identifier or "").strip()
    if not identifier:
        return None
    if role == UserRole.PATIENT:
        return await account_repository.find_by_uhid(identifier)
    return await account_repository.find_by_email(identifier.lower())


class LoginUseCase:
    def __init__(self, account_repository: AccountRepository, auth_service: AuthService):
        self._account_repository = account_repository
        self._auth_service = auth_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        try:
            role = UserRole(request.role)
        except ValueError:
            raise InvalidCredentialsError()

        account = await find_account(self._account_repository, role, request.identifier)
        if (
            account is None
            or account.role != role
            or not await asyncio.to_thread(
                self._auth_service.verify_password, request.password, account.password_hash
            )
        ):
            logger.warning(f"❌ Failed {role.value} login for '{request.identifier}'")
            raise InvalidCredentialsError()

        token = self._auth_service.create_access_token(
            account_id=account.id,
            role=account.role.value,
            identifier=account.login_identifier,
            name=account.name,
        )
        logger.info(f"✅ {role.value} login: {account.login_identifier}")
        return LoginResponse(
            access_token=token,
            token_type="bearer",
            expires_in=self._auth_service.settings.access_token_expire_minutes * 60,
            account=account,
        )
