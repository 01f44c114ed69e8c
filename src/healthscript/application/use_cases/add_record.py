"""Add Record use case: store an uploaded file in a patient's records."""

import logging
from typing import List, Optional

from ...core.utils.data_uri import encode_data_uri
from ...domain.entities.record import Record
from ...domain.enums import RecordType
from ...domain.errors import InvalidRecordError, PatientNotFoundError
from ...domain.value_objects.uhid import Uhid
from ..dto.record_dto import AddRecordRequest
from ..ports.repositories.patient_repo import PatientRepository
from ..ports.repositories.record_repo import RecordRepository

logger = logging.getLogger(__name__)


class AddRecordUseCase:
    def __init__(
        self,
        patient_repository: PatientRepository,
        record_repository: RecordRepository,
        max_size_bytes: int,
        allowed_content_types: Optional[List[str]] = None,
    ):
        self._patient_repository = patient_repository
        self._record_repository = record_repository
        self._max_size_bytes = max_size_bytes
        self._allowed_content_types = [c.lower() for c in (allowed_content_types or [])]

    async def execute(self, request: AddRecordRequest) -> Record:
        if not (request.title or "").strip():
            raise InvalidRecordError("title", "Please enter a record title")
        if not request.content:
            raise InvalidRecordError("file", "Please select a file to upload")
        if len(request.content) > self._max_size_bytes:
            raise InvalidRecordError(
                "file",
                f"File too large. Maximum size: {self._max_size_bytes // (1024 * 1024)}MB",
            )

        content_type = (request.content_type or "").lower()
        if self._allowed_content_types and content_type not in self._allowed_content_types:
            raise InvalidRecordError(
                "file", f"Unsupported file type: {request.content_type or 'unknown'}"
            )

        uhid = Uhid((request.uhid or "").strip())
        if not await self._patient_repository.exists_by_uhid(uhid.value):
            raise PatientNotFoundError(uhid.value)

        record = Record(
            uhid=uhid,
            type=RecordType.from_content_type(content_type),
            title=request.title,
            data=encode_data_uri(request.content, content_type),
        )
        saved = await self._record_repository.save(record)
        logger.info(
            f"Record {saved.id} ({saved.type.value}, {len(request.content)} bytes) added for UHID {uhid}"
        )
        return saved
