"""Register Patient use case: issue a UHID for a new patient."""

import logging

from ...core.exceptions import DatabaseError
from ...domain.entities.patient import Patient
from ...domain.errors import DuplicatePatientError
from ...domain.value_objects.uhid import Uhid
from ..dto.patient_dto import RegisterPatientRequest
from ..ports.repositories.patient_repo import PatientRepository

logger = logging.getLogger(__name__)

MAX_UHID_ATTEMPTS = 20


class RegisterPatientUseCase:
    """Use case for registering a new patient at the hospital."""

    def __init__(self, patient_repository: PatientRepository):
        self._patient_repository = patient_repository

    async def _generate_unique_uhid(self) -> Uhid:
        for _ in range(MAX_UHID_ATTEMPTS):
            uhid = Uhid.generate()
            if not await self._patient_repository.exists_by_uhid(uhid.value):
                return uhid
        raise DatabaseError(
            "Could not allocate a unique UHID", {"attempts": MAX_UHID_ATTEMPTS}
        )

    async def execute(self, request: RegisterPatientRequest) -> Patient:
        """Execute the register patient use case."""
        aadhaar = (request.aadhaar or "").strip()
        existing = await self._patient_repository.find_by_aadhaar(aadhaar)
        if existing:
            logger.info(f"Duplicate Aadhaar registration attempt (existing UHID {existing.uhid})")
            raise DuplicatePatientError(aadhaar, existing.uhid.value)

        # Entity validates before a UHID is spent on it
        patient = Patient(
            uhid=await self._generate_unique_uhid(),
            name=request.name,
            gender=request.gender,
            date_of_birth=request.date_of_birth,
            blood_group=request.blood_group,
            aadhaar=aadhaar,
        )
        saved = await self._patient_repository.save(patient)
        logger.info(f"✅ Patient registered with UHID {saved.uhid}")
        return saved
