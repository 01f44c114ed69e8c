"""
Prescription endpoints: write, list, preview as PDF, delete and book at a pharmacy.
"""

import asyncio
import logging
from typing import List
from urllib.parse import quote

from fastapi import APIRouter, Request, Response, status

from ...application.dto.prescription_dto import CreatePrescriptionRequest, MedicineInput
from ...application.use_cases.create_prescription import CreatePrescriptionUseCase
from ...domain.entities.prescription import Prescription
from ...domain.errors import PrescriptionNotFoundError
from ...domain.value_objects.uhid import Uhid
from ...observability.audit import audit_log_event
from ..deps import (
    CurrentDoctor,
    CurrentUser,
    DocumentServiceDep,
    DoctorUser,
    PatientRepositoryDep,
    PrescriptionRepositoryDep,
    RecordRepositoryDep,
    SettingsDep,
    ensure_patient_access,
)
from ..schemas.common import ApiResponse, DeletedResponse, ErrorResponse
from ..schemas.prescription import (
    CreatePrescriptionRequest as CreatePrescriptionRequestSchema,
)
from ..schemas.prescription import (
    CreatePrescriptionResponse,
    PharmacyBookingResponse,
    PrescriptionResponse,
)
from ..utils.responses import ok

router = APIRouter(prefix="/prescriptions", tags=["prescriptions"])
logger = logging.getLogger(__name__)


async def _load(prescription_repo, prescription_id: int, user) -> Prescription:
    prescription = await prescription_repo.find_by_id(prescription_id)
    if prescription is None:
        raise PrescriptionNotFoundError(prescription_id)
    ensure_patient_access(user, prescription.uhid.value)
    return prescription


@router.post(
    "",
    response_model=ApiResponse[CreatePrescriptionResponse],
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {"model": ErrorResponse, "description": "Patient not found"},
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
async def create_prescription(
    request: Request,
    body: CreatePrescriptionRequestSchema,
    doctor: CurrentDoctor,
    patient_repo: PatientRepositoryDep,
    prescription_repo: PrescriptionRepositoryDep,
    record_repo: RecordRepositoryDep,
    document_service: DocumentServiceDep,
):
    """
    Write a prescription for a registered patient.

    The rendered PDF is filed in the patient's records as
    ``Prescription_<date>``.
    """
    use_case = CreatePrescriptionUseCase(
        patient_repo, prescription_repo, record_repo, document_service
    )
    result = await use_case.execute(
        CreatePrescriptionRequest(
            uhid=body.uhid,
            medicines=[
                MedicineInput(
                    name=m.name,
                    dosage=m.dosage,
                    days=m.days,
                    timing=m.timing,
                    before_food=m.before_food,
                )
                for m in body.medicines
            ],
            allergies=body.allergies,
            symptoms=body.symptoms,
            hereditary_diseases=body.hereditary_diseases,
        ),
        doctor,
    )
    await audit_log_event(
        event="prescription_created",
        uhid=result.prescription.uhid.value,
        user_id=str(doctor.id),
        role=doctor.role.value,
        resource_id=result.prescription.id,
        payload={"medicines": result.prescription.medicine_names},
    )
    return ok(
        request,
        data=CreatePrescriptionResponse(
            prescription=PrescriptionResponse.from_domain(result.prescription),
            record_id=result.record.id,
            record_title=result.record.title,
        ),
        message="Prescription saved successfully",
    )


@router.get("/patient/{uhid}", response_model=ApiResponse[List[PrescriptionResponse]])
async def list_patient_prescriptions(
    request: Request, uhid: str, user: CurrentUser, prescription_repo: PrescriptionRepositoryDep
):
    """All prescriptions for a UHID, newest first."""
    value = Uhid(uhid.strip()).value
    ensure_patient_access(user, value)
    prescriptions = await prescription_repo.find_by_uhid(value)
    return ok(request, data=[PrescriptionResponse.from_domain(p) for p in prescriptions])


@router.get(
    "/{prescription_id}",
    response_model=ApiResponse[PrescriptionResponse],
    responses={404: {"model": ErrorResponse, "description": "Prescription not found"}},
)
async def get_prescription(
    request: Request,
    prescription_id: int,
    user: CurrentUser,
    prescription_repo: PrescriptionRepositoryDep,
):
    prescription = await _load(prescription_repo, prescription_id, user)
    return ok(request, data=PrescriptionResponse.from_domain(prescription))


@router.get(
    "/{prescription_id}/pdf",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
async def get_prescription_pdf(
    prescription_id: int,
    user: CurrentUser,
    prescription_repo: PrescriptionRepositoryDep,
    patient_repo: PatientRepositoryDep,
    document_service: DocumentServiceDep,
):
    """Render the prescription as a PDF for preview or printing."""
    prescription = await _load(prescription_repo, prescription_id, user)
    patient = await patient_repo.find_by_uhid(prescription.uhid.value)
    pdf = await asyncio.to_thread(document_service.render, prescription, patient)
    return Response(
        content=pdf,
        media_type=document_service.content_type,
        headers={
            "Content-Disposition": f'inline; filename="prescription_{prescription.uhid}.pdf"'
        },
    )


@router.get("/{prescription_id}/booking", response_model=ApiResponse[PharmacyBookingResponse])
async def get_pharmacy_booking(
    request: Request,
    prescription_id: int,
    user: CurrentUser,
    prescription_repo: PrescriptionRepositoryDep,
    settings: SettingsDep,
):
    """Links for ordering the prescribed medicines from the external pharmacy."""
    prescription = await _load(prescription_repo, prescription_id, user)
    pharmacy = settings.pharmacy
    names = prescription.medicine_names
    return ok(
        request,
        data=PharmacyBookingResponse(
            prescription_id=prescription.id,
            uhid=prescription.uhid.value,
            medicines=names,
            order_url=pharmacy.order_url,
            search_urls=[f"{pharmacy.search_url}{quote(name)}" for name in names],
        ),
    )


@router.delete(
    "/{prescription_id}",
    response_model=ApiResponse[DeletedResponse],
    responses={404: {"model": ErrorResponse, "description": "Prescription not found"}},
)
async def delete_prescription(
    request: Request,
    prescription_id: int,
    user: DoctorUser,
    prescription_repo: PrescriptionRepositoryDep,
):
    prescription = await prescription_repo.find_by_id(prescription_id)
    if prescription is None or not await prescription_repo.delete(prescription_id):
        raise PrescriptionNotFoundError(prescription_id)
    await audit_log_event(
        event="prescription_deleted",
        uhid=prescription.uhid.value,
        user_id=str(user.account_id),
        role=user.role,
        resource_id=prescription_id,
    )
    return ok(request, data=DeletedResponse(id=prescription_id), message="Prescription deleted")
