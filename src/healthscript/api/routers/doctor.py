"""Doctor profile endpoints."""

import logging
from typing import Optional

from fastapi import APIRouter, File, Form, Request, UploadFile

from ...application.dto.account_dto import UpdateDoctorProfileRequest
from ...application.use_cases.update_doctor_profile import UpdateDoctorProfileUseCase
from ..deps import AccountRepositoryDep, CurrentDoctor, SettingsDep
from ..schemas.auth import AccountResponse
from ..schemas.common import ApiResponse
from ..utils.responses import ok

router = APIRouter(prefix="/doctor", tags=["doctor"])
logger = logging.getLogger(__name__)


@router.get("/profile", response_model=ApiResponse[AccountResponse])
async def get_profile(request: Request, doctor: CurrentDoctor):
    return ok(request, data=AccountResponse.from_domain(doctor))


@router.patch("/profile", response_model=ApiResponse[AccountResponse])
async def update_profile(
    request: Request,
    doctor: CurrentDoctor,
    accounts: AccountRepositoryDep,
    settings: SettingsDep,
    name: Optional[str] = Form(None),
    department: Optional[str] = Form(None),
    designation: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
):
    """Update name, department, designation or photo. Omitted fields are kept."""
    photo_bytes = await photo.read() if photo else None
    use_case = UpdateDoctorProfileUseCase(
        accounts, settings.records.max_photo_size_mb * 1024 * 1024
    )
    account = await use_case.execute(
        doctor.id,
        UpdateDoctorProfileRequest(
            name=name,
            department=department,
            designation=designation,
            photo=photo_bytes,
            photo_content_type=photo.content_type if photo else None,
        ),
    )
    return ok(request, data=AccountResponse.from_domain(account), message="Profile updated")
