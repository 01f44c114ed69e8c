"""
MongoDB implementation of PrescriptionRepository.
"""

from typing import List, Optional

from healthscript.application.ports.repositories.prescription_repo import (
    PrescriptionRepository,
)
from healthscript.core.utils.datetime_utils import ensure_utc
from healthscript.domain.entities.prescription import DoctorInfo, Medicine, Prescription
from healthscript.domain.value_objects.uhid import Uhid

from ..models.prescription_m import DoctorInfoMongo, MedicineMongo, PrescriptionMongo
from ..sequences import next_sequence


class MongoPrescriptionRepository(PrescriptionRepository):
    """MongoDB implementation of PrescriptionRepository."""

    async def save(self, prescription: Prescription) -> Prescription:
        if prescription.id is None:
            prescription.id = await next_sequence(PrescriptionMongo.Settings.name)
        prescription_mongo = self._domain_to_mongo(prescription)
        await prescription_mongo.save()
        return self._mongo_to_domain(prescription_mongo)

    async def find_by_id(self, prescription_id: int) -> Optional[Prescription]:
        prescription_mongo = await PrescriptionMongo.get(prescription_id)
        if not prescription_mongo:
            return None
        return self._mongo_to_domain(prescription_mongo)

    async def find_by_uhid(self, uhid: str) -> List[Prescription]:
        """All prescriptions for a patient, newest first."""
        docs = (
            await PrescriptionMongo.find(PrescriptionMongo.uhid == uhid)
            .sort("-created_at", "-_id")
            .to_list()
        )
        return [self._mongo_to_domain(doc) for doc in docs]

    async def delete(self, prescription_id: int) -> bool:
        prescription_mongo = await PrescriptionMongo.get(prescription_id)
        if not prescription_mongo:
            return False
        await prescription_mongo.delete()
        return True

    def _domain_to_mongo(self, prescription: Prescription) -> PrescriptionMongo:
        return PrescriptionMongo(
            id=prescription.id,
            uhid=prescription.uhid.value,
            medicines=[
                MedicineMongo(
                    id=m.id,
                    name=m.name,
                    timing=list(m.timing),
                    before_food=m.before_food,
                    dosage=m.dosage,
                    days=m.days,
                )
                for m in prescription.medicines
            ],
            allergies=prescription.allergies,
            symptoms=prescription.symptoms,
            hereditary_diseases=prescription.hereditary_diseases,
            doctor=DoctorInfoMongo(
                name=prescription.doctor.name,
                email=prescription.doctor.email,
                doctor_id=prescription.doctor.doctor_id,
                department=prescription.doctor.department,
                role=prescription.doctor.role,
            ),
            created_at=prescription.created_at,
        )

    def _mongo_to_domain(self, prescription_mongo: PrescriptionMongo) -> Prescription:
        doctor = prescription_mongo.doctor
        return Prescription(
            id=prescription_mongo.id,
            uhid=Uhid(prescription_mongo.uhid),
            medicines=[
                Medicine(
                    id=m.id,
                    name=m.name,
                    timing=list(m.timing),
                    before_food=m.before_food,
                    dosage=m.dosage,
                    days=m.days,
                )
                for m in prescription_mongo.medicines
            ],
            doctor=DoctorInfo(
                name=doctor.name,
                email=doctor.email,
                doctor_id=doctor.doctor_id,
                department=doctor.department,
                role=doctor.role,
            ),
            allergies=prescription_mongo.allergies,
            symptoms=prescription_mongo.symptoms,
            hereditary_diseases=prescription_mongo.hereditary_diseases,
            created_at=ensure_utc(prescription_mongo.created_at),
        )
