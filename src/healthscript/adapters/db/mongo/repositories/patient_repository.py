"""
MongoDB implementation of PatientRepository.
"""

from datetime import date
from typing import Optional

from healthscript.application.ports.repositories.patient_repo import PatientRepository
from healthscript.core.utils.datetime_utils import ensure_utc
from healthscript.domain.entities.patient import Patient
from healthscript.domain.value_objects.uhid import Uhid

from ..models.patient_m import PatientMongo
from ..sequences import next_sequence


class MongoPatientRepository(PatientRepository):
    """MongoDB implementation of PatientRepository."""

    async def save(self, patient: Patient) -> Patient:
        """Save a patient to MongoDB."""
        if patient.id is None:
            patient.id = await next_sequence(PatientMongo.Settings.name)
        patient_mongo = self._domain_to_mongo(patient)
        await patient_mongo.save()
        return self._mongo_to_domain(patient_mongo)

    async def find_by_uhid(self, uhid: str) -> Optional[Patient]:
        patient_mongo = await PatientMongo.find_one(PatientMongo.uhid == uhid)
        if not patient_mongo:
            return None
        return self._mongo_to_domain(patient_mongo)

    async def find_by_aadhaar(self, aadhaar: str) -> Optional[Patient]:
        patient_mongo = await PatientMongo.find_one(PatientMongo.aadhaar == aadhaar)
        if not patient_mongo:
            return None
        return self._mongo_to_domain(patient_mongo)

    async def exists_by_uhid(self, uhid: str) -> bool:
        count = await PatientMongo.find(PatientMongo.uhid == uhid).count()
        return count > 0

    def _domain_to_mongo(self, patient: Patient) -> PatientMongo:
        """Convert domain entity to MongoDB model."""
        return PatientMongo(
            id=patient.id,
            uhid=patient.uhid.value,
            name=patient.name,
            gender=patient.gender,
            age=patient.age,
            date_of_birth=patient.date_of_birth.isoformat(),
            blood_group=patient.blood_group,
            aadhaar=patient.aadhaar,
            created_at=patient.created_at,
        )

    def _mongo_to_domain(self, patient_mongo: PatientMongo) -> Patient:
        """Convert MongoDB model to domain entity."""
        return Patient(
            id=patient_mongo.id,
            uhid=Uhid(patient_mongo.uhid),
            name=patient_mongo.name,
            gender=patient_mongo.gender,
            age=patient_mongo.age,
            date_of_birth=date.fromisoformat(patient_mongo.date_of_birth),
            blood_group=patient_mongo.blood_group,
            aadhaar=patient_mongo.aadhaar,
            created_at=ensure_utc(patient_mongo.created_at),
        )
