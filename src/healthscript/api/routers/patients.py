"""Patient registration and lookup endpoints."""

import logging

from fastapi import APIRouter, Request, status

from ...application.dto.patient_dto import RegisterPatientRequest
from ...application.use_cases.lookup_patient import LookupPatientUseCase
from ...application.use_cases.register_patient import RegisterPatientUseCase
from ...observability.audit import audit_log_event
from ..deps import CurrentUser, DoctorUser, PatientRepositoryDep, ensure_patient_access
from ..schemas.common import ApiResponse, ErrorResponse
from ..schemas.patient import PatientResponse, RegisterPatientResponse
from ..schemas.patient import RegisterPatientRequest as RegisterPatientRequestSchema
from ..utils.responses import ok

router = APIRouter(prefix="/patients", tags=["patients"])
logger = logging.getLogger(__name__)


@router.post(
    "",
    response_model=ApiResponse[RegisterPatientResponse],
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"model": ErrorResponse, "description": "Aadhaar already registered"},
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
async def register_patient(
    request: Request,
    body: RegisterPatientRequestSchema,
    user: DoctorUser,
    patient_repo: PatientRepositoryDep,
):
    """Register a new patient and issue a UHID. Doctors only."""
    use_case = RegisterPatientUseCase(patient_repo)
    patient = await use_case.execute(
        RegisterPatientRequest(
            name=body.name,
            gender=body.gender,
            date_of_birth=body.date_of_birth,
            blood_group=body.blood_group,
            aadhaar=body.aadhaar,
        )
    )
    await audit_log_event(
        event="patient_registered",
        uhid=patient.uhid.value,
        user_id=str(user.account_id),
        role=user.role,
        resource_id=patient.id,
    )
    return ok(
        request,
        data=RegisterPatientResponse(
            uhid=patient.uhid.value, patient=PatientResponse.from_domain(patient)
        ),
        message=f"Patient registered successfully! UHID: {patient.uhid}",
    )


@router.get(
    "/aadhaar/{aadhaar}",
    response_model=ApiResponse[PatientResponse],
    responses={404: {"model": ErrorResponse, "description": "Patient not found"}},
)
async def get_patient_by_aadhaar(
    request: Request, aadhaar: str, user: DoctorUser, patient_repo: PatientRepositoryDep
):
    patient = await LookupPatientUseCase(patient_repo).by_aadhaar(aadhaar)
    return ok(request, data=PatientResponse.from_domain(patient))


@router.get(
    "/{uhid}",
    response_model=ApiResponse[PatientResponse],
    responses={
        403: {"model": ErrorResponse, "description": "Not your record"},
        404: {"model": ErrorResponse, "description": "Patient not found"},
    },
)
async def get_patient(
    request: Request, uhid: str, user: CurrentUser, patient_repo: PatientRepositoryDep
):
    """Look up a patient by UHID."""
    ensure_patient_access(user, uhid.strip())
    patient = await LookupPatientUseCase(patient_repo).by_uhid(uhid)
    return ok(request, data=PatientResponse.from_domain(patient))
