"""
Medical record endpoints: upload, list, view, download and delete.
"""

import logging
from typing import List

from fastapi import APIRouter, File, Form, Request, Response, UploadFile, status

from ...application.dto.record_dto import AddRecordRequest
from ...application.use_cases.add_record import AddRecordUseCase
from ...core.utils.data_uri import decode_data_uri
from ...domain.entities.record import Record
from ...domain.errors import RecordNotFoundError
from ...domain.value_objects.uhid import Uhid
from ...observability.audit import audit_log_event
from ..deps import (
    CurrentUser,
    PatientRepositoryDep,
    RecordRepositoryDep,
    SettingsDep,
    ensure_patient_access,
)
from ..schemas.common import ApiResponse, DeletedResponse, ErrorResponse
from ..schemas.record import RecordDetail, RecordSummary
from ..utils.responses import content_disposition, ok

router = APIRouter(prefix="/records", tags=["records"])
logger = logging.getLogger(__name__)


async def _load(record_repo, record_id: int, user) -> Record:
    record = await record_repo.find_by_id(record_id)
    if record is None:
        raise RecordNotFoundError(record_id)
    ensure_patient_access(user, record.uhid.value, allow_medical=False)
    return record


@router.post(
    "",
    response_model=ApiResponse[RecordSummary],
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {"model": ErrorResponse, "description": "Patient not found"},
        422: {"model": ErrorResponse, "description": "Missing title, empty or oversized file"},
    },
)
async def add_record(
    request: Request,
    user: CurrentUser,
    patient_repo: PatientRepositoryDep,
    record_repo: RecordRepositoryDep,
    settings: SettingsDep,
    uhid: str = Form(..., description="Patient UHID"),
    title: str = Form(..., description="Record title"),
    file: UploadFile = File(..., description="Image or PDF"),
):
    """Upload an image or PDF into a patient's records."""
    ensure_patient_access(user, uhid.strip(), allow_medical=False)
    content = await file.read()
    logger.info(
        f"Record upload for UHID {uhid}: {file.filename} ({file.content_type}, {len(content)} bytes)"
    )
    use_case = AddRecordUseCase(
        patient_repo,
        record_repo,
        max_size_bytes=settings.records.max_size_mb * 1024 * 1024,
        allowed_content_types=settings.records.allowed_content_types,
    )
    record = await use_case.execute(
        AddRecordRequest(
            uhid=uhid,
            title=title,
            content=content,
            content_type=file.content_type or "",
            filename=file.filename,
        )
    )
    await audit_log_event(
        event="record_added",
        uhid=record.uhid.value,
        user_id=str(user.account_id),
        role=user.role,
        resource_id=record.id,
        payload={"type": record.type.value, "title": record.title},
    )
    return ok(request, data=RecordSummary.from_domain(record), message="Record added successfully")


@router.get("/patient/{uhid}", response_model=ApiResponse[List[RecordSummary]])
async def list_patient_records(
    request: Request, uhid: str, user: CurrentUser, record_repo: RecordRepositoryDep
):
    """Record metadata for a UHID, newest first. File contents are not included."""
    value = Uhid(uhid.strip()).value
    ensure_patient_access(user, value, allow_medical=False)
    records = await record_repo.find_by_uhid(value)
    return ok(request, data=[RecordSummary.from_domain(r) for r in records])


@router.get(
    "/{record_id}",
    response_model=ApiResponse[RecordDetail],
    responses={404: {"model": ErrorResponse, "description": "Record not found"}},
)
async def get_record(
    request: Request, record_id: int, user: CurrentUser, record_repo: RecordRepositoryDep
):
    record = await _load(record_repo, record_id, user)
    return ok(request, data=RecordDetail.from_domain(record))


@router.get("/{record_id}/download", response_class=Response)
async def download_record(record_id: int, user: CurrentUser, record_repo: RecordRepositoryDep):
    """Raw file bytes as an attachment."""
    record = await _load(record_repo, record_id, user)
    mime, content = decode_data_uri(record.data)
    return Response(
        content=content,
        media_type=mime,
        headers={"Content-Disposition": content_disposition(record.download_filename)},
    )


@router.delete(
    "/{record_id}",
    response_model=ApiResponse[DeletedResponse],
    responses={
        403: {"model": ErrorResponse, "description": "Not your record"},
        404: {"model": ErrorResponse, "description": "Record not found"},
    },
)
async def delete_record(
    request: Request, record_id: int, user: CurrentUser, record_repo: RecordRepositoryDep
):
    """Delete a record. Doctors, or the patient who owns it."""
    record = await _load(record_repo, record_id, user)
    if not await record_repo.delete(record_id):
        raise RecordNotFoundError(record_id)
    await audit_log_event(
        event="record_deleted",
        uhid=record.uhid.value,
        user_id=str(user.account_id),
        role=user.role,
        resource_id=record_id,
    )
    return ok(request, data=DeletedResponse(id=record_id), message="Record deleted successfully")
