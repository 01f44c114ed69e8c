"""
Authentication endpoints: sign-up per role, login, password reset and the
current account.
"""

import logging
from typing import Optional

from fastapi import APIRouter, File, Form, Request, UploadFile, status

from ...application.dto.account_dto import (
    DoctorSignUpRequest,
    LoginRequest,
    MedicalStoreSignUpRequest,
    PatientSignUpRequest,
    ResetPasswordRequest,
)
from ...application.use_cases.login import LoginUseCase
from ...application.use_cases.reset_password import (
    ResetPasswordUseCase,
    VerifyIdentifierUseCase,
)
from ...application.use_cases.sign_up import (
    SignUpDoctorUseCase,
    SignUpMedicalStoreUseCase,
    SignUpPatientUseCase,
)
from ...core.constants import (
    BLOOD_GROUPS,
    DOCTOR_DEPARTMENTS,
    DOCTOR_ROLES,
    GENDERS,
    MEDICINE_TIMINGS,
)
from ...domain.enums import UserRole
from ...domain.errors import AccountNotFoundError
from ...observability.audit import audit_log_event
from ..deps import (
    AccountRepositoryDep,
    AuthServiceDep,
    CurrentUser,
    PatientRepositoryDep,
    SettingsDep,
)
from ..schemas import auth as schemas
from ..schemas.common import ApiResponse, ErrorResponse
from ..utils.responses import ok

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)

_SIGNUP_ERRORS = {
    409: {"model": ErrorResponse, "description": "Account already exists"},
    422: {"model": ErrorResponse, "description": "Validation error"},
}


@router.post(
    "/signup/doctor",
    response_model=ApiResponse[schemas.AccountResponse],
    status_code=status.HTTP_201_CREATED,
    responses=_SIGNUP_ERRORS,
)
async def sign_up_doctor(
    request: Request,
    accounts: AccountRepositoryDep,
    auth_service: AuthServiceDep,
    settings: SettingsDep,
    name: str = Form(...),
    email: str = Form(...),
    password: str = Form(...),
    confirm_password: str = Form(...),
    doctor_id: str = Form(...),
    department: str = Form(...),
    designation: str = Form(...),
    photo: Optional[UploadFile] = File(None, description="Profile photo"),
):
    """Create a doctor account. Multipart because of the profile photo."""
    photo_bytes = await photo.read() if photo else None
    use_case = SignUpDoctorUseCase(
        accounts, auth_service, settings.records.max_photo_size_mb * 1024 * 1024
    )
    account = await use_case.execute(
        DoctorSignUpRequest(
            name=name,
            email=email,
            password=password,
            confirm_password=confirm_password,
            doctor_id=doctor_id,
            department=department,
            designation=designation,
            photo=photo_bytes,
            photo_content_type=photo.content_type if photo else None,
        )
    )
    return ok(request, data=schemas.AccountResponse.from_domain(account), message="Signup successful!")


@router.post(
    "/signup/medical",
    response_model=ApiResponse[schemas.AccountResponse],
    status_code=status.HTTP_201_CREATED,
    responses=_SIGNUP_ERRORS,
)
async def sign_up_medical_store(
    request: Request,
    body: schemas.MedicalStoreSignUpRequest,
    accounts: AccountRepositoryDep,
    auth_service: AuthServiceDep,
):
    account = await SignUpMedicalStoreUseCase(accounts, auth_service).execute(
        MedicalStoreSignUpRequest(**body.model_dump())
    )
    return ok(request, data=schemas.AccountResponse.from_domain(account), message="Signup successful!")


@router.post(
    "/signup/patient",
    response_model=ApiResponse[schemas.AccountResponse],
    status_code=status.HTTP_201_CREATED,
    responses={**_SIGNUP_ERRORS, 404: {"model": ErrorResponse, "description": "UHID not registered"}},
)
async def sign_up_patient(
    request: Request,
    body: schemas.PatientSignUpRequest,
    accounts: AccountRepositoryDep,
    patient_repo: PatientRepositoryDep,
    auth_service: AuthServiceDep,
):
    """Patients sign up with the UHID issued at hospital registration."""
    account = await SignUpPatientUseCase(accounts, patient_repo, auth_service).execute(
        PatientSignUpRequest(**body.model_dump())
    )
    return ok(request, data=schemas.AccountResponse.from_domain(account), message="Signup successful!")


@router.post(
    "/login",
    response_model=ApiResponse[schemas.TokenResponse],
    responses={401: {"model": ErrorResponse, "description": "Invalid credentials"}},
)
async def login(
    request: Request,
    body: schemas.LoginRequest,
    accounts: AccountRepositoryDep,
    auth_service: AuthServiceDep,
):
    result = await LoginUseCase(accounts, auth_service).execute(
        LoginRequest(role=body.role, identifier=body.identifier, password=body.password)
    )
    await audit_log_event(
        event="login",
        uhid=result.account.uhid,
        user_id=str(result.account.id),
        role=result.account.role.value,
    )
    return ok(
        request,
        data=schemas.TokenResponse(
            access_token=result.access_token,
            token_type=result.token_type,
            expires_in=result.expires_in,
            account=schemas.AccountResponse.from_domain(result.account),
        ),
        message="Login successful",
    )


@router.post(
    "/verify",
    response_model=ApiResponse[schemas.VerifyIdentifierResponse],
    responses={404: {"model": ErrorResponse, "description": "Identifier not found"}},
)
async def verify_identifier(
    request: Request,
    body: schemas.VerifyIdentifierRequest,
    accounts: AccountRepositoryDep,
    patient_repo: PatientRepositoryDep,
):
    """First step of the forgotten password flow."""
    verified = await VerifyIdentifierUseCase(accounts, patient_repo).execute(
        body.role, body.identifier
    )
    return ok(
        request,
        data=schemas.VerifyIdentifierResponse(
            role=body.role, identifier=body.identifier.strip(), verified=verified
        ),
    )


@router.post(
    "/reset-password",
    response_model=ApiResponse[schemas.AccountResponse],
    responses={404: {"model": ErrorResponse, "description": "Identifier not found"}},
)
async def reset_password(
    request: Request,
    body: schemas.ResetPasswordRequest,
    accounts: AccountRepositoryDep,
    patient_repo: PatientRepositoryDep,
    auth_service: AuthServiceDep,
):
    account = await ResetPasswordUseCase(accounts, patient_repo, auth_service).execute(
        ResetPasswordRequest(**body.model_dump())
    )
    # Reset needs only the identifier, so every reset is flagged for review
    await audit_log_event(
        event="password_reset",
        uhid=account.uhid,
        user_id=str(account.id),
        role=account.role.value,
        payload={
            "authenticated": False,
            "identifier": account.login_identifier,
            "client": request.client.host if request.client else None,
        },
        level=logging.WARNING,
    )
    return ok(
        request,
        data=schemas.AccountResponse.from_domain(account),
        message="Password reset successful",
    )


@router.get("/options", response_model=ApiResponse[schemas.SignUpOptionsResponse])
async def sign_up_options(request: Request):
    """Choices for the sign-up and registration forms."""
    return ok(
        request,
        data=schemas.SignUpOptionsResponse(
            roles=[r.value for r in UserRole],
            departments=DOCTOR_DEPARTMENTS,
            designations=DOCTOR_ROLES,
            blood_groups=BLOOD_GROUPS,
            genders=GENDERS,
            timings=MEDICINE_TIMINGS,
        ),
    )


@router.get("/me", response_model=ApiResponse[schemas.AccountResponse])
async def current_account(request: Request, user: CurrentUser, accounts: AccountRepositoryDep):
    account = await accounts.find_by_id(user.account_id)
    if account is None:
        raise AccountNotFoundError(user.identifier)
    return ok(request, data=schemas.AccountResponse.from_domain(account))
