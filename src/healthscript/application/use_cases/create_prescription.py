"""Create Prescription use case.

Renders the prescription with a snapshot of the prescribing doctor to PDF,
saves it and files the PDF in the patient's records.
"""

import asyncio
import logging

from ...core.constants import PRESCRIPTION_RECORD_PREFIX
from ...core.utils.data_uri import encode_data_uri
from ...core.utils.datetime_utils import format_date
from ...domain.entities.account import Account
from ...domain.entities.prescription import DoctorInfo, Medicine, Prescription
from ...domain.entities.record import Record
from ...domain.enums import RecordType, UserRole
from ...domain.errors import InvalidPrescriptionError, PatientNotFoundError
from ...domain.value_objects.uhid import Uhid
from ..dto.prescription_dto import CreatePrescriptionRequest, CreatePrescriptionResponse
from ..ports.repositories.patient_repo import PatientRepository
from ..ports.repositories.prescription_repo import PrescriptionRepository
from ..ports.repositories.record_repo import RecordRepository
from ..ports.services.prescription_document_service import PrescriptionDocumentService

logger = logging.getLogger(__name__)


def doctor_snapshot(doctor: Account) -> DoctorInfo:
    return DoctorInfo(
        name=doctor.name,
        email=doctor.email or "",
        doctor_id=doctor.doctor_id or "",
        department=doctor.department or "",
        role=doctor.designation or "",
    )


class CreatePrescriptionUseCase:
    """Use case for writing a digital prescription."""

    def __init__(
        self,
        patient_repository: PatientRepository,
        prescription_repository: PrescriptionRepository,
        record_repository: RecordRepository,
        document_service: PrescriptionDocumentService,
    ):
        self._patient_repository = patient_repository
        self._prescription_repository = prescription_repository
        self._record_repository = record_repository
        self._document_service = document_service

    async def execute(
        self, request: CreatePrescriptionRequest, doctor: Account
    ) -> CreatePrescriptionResponse:
        if doctor is None or doctor.role != UserRole.DOCTOR:
            raise InvalidPrescriptionError("doctor", "Doctor information not found")

        uhid = Uhid((request.uhid or "").strip())
        patient = await self._patient_repository.find_by_uhid(uhid.value)
        if not patient:
            raise PatientNotFoundError(uhid.value)

        medicines = [
            Medicine(
                name=m.name,
                dosage=m.dosage,
                days=m.days,
                timing=list(m.timing or []),
                before_food=m.before_food,
            )
            for m in request.medicines
        ]
        prescription = Prescription(
            uhid=uhid,
            medicines=medicines,
            doctor=doctor_snapshot(doctor),
            allergies=request.allergies,
            symptoms=request.symptoms,
            hereditary_diseases=request.hereditary_diseases,
        )

        # Nothing is saved unless the PDF renders
        pdf_bytes = await asyncio.to_thread(self._document_service.render, prescription, patient)

        saved = await self._prescription_repository.save(prescription)
        logger.info(
            f"✅ Prescription {saved.id} saved for UHID {uhid} with {len(medicines)} medicine(s)"
        )

        record = Record(
            uhid=uhid,
            type=RecordType.PDF,
            title=f"{PRESCRIPTION_RECORD_PREFIX}{format_date(saved.created_at)}",
            data=encode_data_uri(pdf_bytes, self._document_service.content_type),
        )
        saved_record = await self._record_repository.save(record)
        logger.info(f"Prescription PDF filed as record {saved_record.id}")

        return CreatePrescriptionResponse(prescription=saved, record=saved_record)
