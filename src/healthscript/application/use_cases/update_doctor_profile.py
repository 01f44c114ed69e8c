"""Update Doctor Profile use case."""

import logging

from ...domain.entities.account import Account
from ...domain.enums import UserRole
from ...domain.errors import AccountNotFoundError
from ..dto.account_dto import UpdateDoctorProfileRequest
from ..ports.repositories.account_repo import AccountRepository
from .sign_up import photo_to_data_uri

logger = logging.getLogger(__name__)


class UpdateDoctorProfileUseCase:
    def __init__(self, account_repository: AccountRepository, max_photo_size_bytes: int):
        self._account_repository = account_repository
        self._max_photo_size_bytes = max_photo_size_bytes

    async def execute(self, account_id: int, request: UpdateDoctorProfileRequest) -> Account:
        account = await self._account_repository.find_by_id(account_id)
        if account is None or account.role != UserRole.DOCTOR:
            raise AccountNotFoundError(str(account_id), "Doctor profile not found")

        photo = None
        if request.photo:
            photo = photo_to_data_uri(
                request.photo, request.photo_content_type, self._max_photo_size_bytes
            )

        account.update_doctor_profile(
            name=request.name,
            department=request.department,
            designation=request.designation,
            photo=photo,
        )
        saved = await self._account_repository.save(account)
        logger.info(f"Doctor profile updated: {saved.email}")
        return saved
