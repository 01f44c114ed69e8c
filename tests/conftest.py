"""
Shared fixtures: in-memory repositories, a fake OCR engine and an API client
wired to them through ``app.dependency_overrides``.
"""

import copy
import io
import os
from datetime import date
from typing import Dict, List, Optional

# Configure before healthscript reads settings
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("SECURITY_BCRYPT_ROUNDS", "4")
os.environ.setdefault("MONGO_SERVER_SELECTION_TIMEOUT_MS", "200")

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from healthscript.api import deps
from healthscript.app import create_app
from healthscript.application.ports.repositories.account_repo import AccountRepository
from healthscript.application.ports.repositories.patient_repo import PatientRepository
from healthscript.application.ports.repositories.prescription_repo import (
    PrescriptionRepository,
)
from healthscript.application.ports.repositories.record_repo import RecordRepository
from healthscript.application.ports.services.text_recognition_service import (
    TextRecognitionService,
)
from healthscript.core.auth import AuthService, get_auth_service
from healthscript.core.utils.drug_matching import DrugMatcher
from healthscript.domain.entities.account import Account
from healthscript.domain.entities.patient import Patient
from healthscript.domain.entities.prescription import Prescription
from healthscript.domain.entities.record import Record
from healthscript.domain.enums import UserRole
from healthscript.domain.value_objects.uhid import Uhid

DOCTOR_PASSWORD = "doctor-pass"
PATIENT_PASSWORD = "patient-pass"
MEDICAL_PASSWORD = "medical-pass"


class _Sequence:
    def __init__(self):
        self.value = 0

    def next(self) -> int:
        self.value += 1
        return self.value


class InMemoryPatientRepository(PatientRepository):
    def __init__(self):
        self.items: Dict[int, Patient] = {}
        self._ids = _Sequence()

    async def save(self, patient: Patient) -> Patient:
        if patient.id is None:
            patient.id = self._ids.next()
        self.items[patient.id] = copy.deepcopy(patient)
        return copy.deepcopy(patient)

    async def find_by_uhid(self, uhid: str) -> Optional[Patient]:
        for patient in self.items.values():
            if patient.uhid.value == uhid:
                return copy.deepcopy(patient)
        return None

    async def find_by_aadhaar(self, aadhaar: str) -> Optional[Patient]:
        for patient in self.items.values():
            if patient.aadhaar == aadhaar:
                return copy.deepcopy(patient)
        return None

    async def exists_by_uhid(self, uhid: str) -> bool:
        return await self.find_by_uhid(uhid) is not None


class InMemoryAccountRepository(AccountRepository):
    def __init__(self):
        self.items: Dict[int, Account] = {}
        self._ids = _Sequence()

    async def save(self, account: Account) -> Account:
        if account.id is None:
            account.id = self._ids.next()
        self.items[account.id] = copy.deepcopy(account)
        return copy.deepcopy(account)

    async def find_by_id(self, account_id: int) -> Optional[Account]:
        account = self.items.get(account_id)
        return copy.deepcopy(account) if account else None

    async def find_by_email(self, email: str) -> Optional[Account]:
        for account in self.items.values():
            if account.email and account.email.lower() == (email or "").strip().lower():
                return copy.deepcopy(account)
        return None

    async def find_by_uhid(self, uhid: str) -> Optional[Account]:
        for account in self.items.values():
            if account.role == UserRole.PATIENT and account.uhid == uhid:
                return copy.deepcopy(account)
        return None


class InMemoryPrescriptionRepository(PrescriptionRepository):
    def __init__(self):
        self.items: Dict[int, Prescription] = {}
        self._ids = _Sequence()

    async def save(self, prescription: Prescription) -> Prescription:
        if prescription.id is None:
            prescription.id = self._ids.next()
        self.items[prescription.id] = copy.deepcopy(prescription)
        return copy.deepcopy(prescription)

    async def find_by_id(self, prescription_id: int) -> Optional[Prescription]:
        prescription = self.items.get(prescription_id)
        return copy.deepcopy(prescription) if prescription else None

    async def find_by_uhid(self, uhid: str) -> List[Prescription]:
        found = [p for p in self.items.values() if p.uhid.value == uhid]
        found.sort(key=lambda p: (p.created_at, p.id), reverse=True)
        return copy.deepcopy(found)

    async def delete(self, prescription_id: int) -> bool:
        return self.items.pop(prescription_id, None) is not None


class InMemoryRecordRepository(RecordRepository):
    def __init__(self):
        self.items: Dict[int, Record] = {}
        self._ids = _Sequence()

    async def save(self, record: Record) -> Record:
        if record.id is None:
            record.id = self._ids.next()
        self.items[record.id] = copy.deepcopy(record)
        return copy.deepcopy(record)

    async def find_by_id(self, record_id: int) -> Optional[Record]:
        record = self.items.get(record_id)
        return copy.deepcopy(record) if record else None

    async def find_by_uhid(self, uhid: str) -> List[Record]:
        found = [r for r in self.items.values() if r.uhid.value == uhid]
        found.sort(key=lambda r: (r.created_at, r.id), reverse=True)
        return copy.deepcopy(found)

    async def delete(self, record_id: int) -> bool:
        return self.items.pop(record_id, None) is not None


class FakeTextRecognitionService(TextRecognitionService):
    """Returns canned OCR text and remembers what it was asked to read."""

    def __init__(self, handwriting: str = "", document: str = ""):
        self.handwriting = handwriting
        self.document = document
        self.calls: List[str] = []
        self.strokes = None

    async def read_handwriting(self, image_bytes: bytes) -> str:
        self.calls.append("handwriting")
        return self.handwriting

    async def read_strokes(self, strokes) -> str:
        self.calls.append("strokes")
        self.strokes = strokes
        return self.handwriting

    async def read_document(self, image_bytes: bytes) -> str:
        self.calls.append("document")
        return self.document


def png_bytes(size=(8, 8), color=(255, 0, 0)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png() -> bytes:
    return png_bytes()


@pytest.fixture
def patient_repo():
    return InMemoryPatientRepository()


@pytest.fixture
def account_repo():
    return InMemoryAccountRepository()


@pytest.fixture
def prescription_repo():
    return InMemoryPrescriptionRepository()


@pytest.fixture
def record_repo():
    return InMemoryRecordRepository()


@pytest.fixture
def ocr():
    return FakeTextRecognitionService()


@pytest.fixture
def auth_service() -> AuthService:
    return get_auth_service()


@pytest.fixture
def matcher() -> DrugMatcher:
    return DrugMatcher()


@pytest.fixture
def app(patient_repo, account_repo, prescription_repo, record_repo, ocr, matcher):
    application = create_app()
    application.dependency_overrides[deps.get_patient_repository] = lambda: patient_repo
    application.dependency_overrides[deps.get_account_repository] = lambda: account_repo
    application.dependency_overrides[deps.get_prescription_repository] = lambda: prescription_repo
    application.dependency_overrides[deps.get_record_repository] = lambda: record_repo
    application.dependency_overrides[deps.get_text_recognition_service] = lambda: ocr
    application.dependency_overrides[deps.get_matcher] = lambda: matcher
    return application


@pytest.fixture
def client(app):
    # No context manager: the lifespan would try to reach MongoDB
    return TestClient(app)


@pytest.fixture
def registered_patient(patient_repo):
    patient = Patient(
        uhid=Uhid("20240123456789"),
        name="Asha Verma",
        gender="female",
        date_of_birth=date(1990, 5, 17),
        blood_group="B+",
        aadhaar="123412341234",
    )
    patient.id = 1
    patient_repo._ids.value = 1
    patient_repo.items[1] = patient
    return patient


def _store_account(account_repo, account: Account) -> Account:
    account.id = account_repo._ids.next()
    account_repo.items[account.id] = account
    return account


@pytest.fixture
def doctor_account(account_repo, auth_service):
    return _store_account(
        account_repo,
        Account(
            role=UserRole.DOCTOR,
            name="Ravi Kumar",
            email="ravi@clinic.example",
            password_hash=auth_service.hash_password(DOCTOR_PASSWORD),
            doctor_id="DOC-42",
            department="Cardiology",
            designation="Consultant",
            photo="data:image/png;base64,iVBORw0KGgo=",
        ),
    )


@pytest.fixture
def medical_account(account_repo, auth_service):
    return _store_account(
        account_repo,
        Account(
            role=UserRole.MEDICAL,
            name="City Pharmacy",
            email="store@pharmacy.example",
            password_hash=auth_service.hash_password(MEDICAL_PASSWORD),
            phone="9876543210",
            license_number="LIC-7781",
            address="12 Market Road",
        ),
    )


@pytest.fixture
def patient_account(account_repo, auth_service, registered_patient):
    return _store_account(
        account_repo,
        Account(
            role=UserRole.PATIENT,
            name=registered_patient.name,
            uhid=registered_patient.uhid.value,
            password_hash=auth_service.hash_password(PATIENT_PASSWORD),
        ),
    )


def _headers_for(auth_service: AuthService, account: Account) -> Dict[str, str]:
    token = auth_service.create_access_token(
        account_id=account.id,
        role=account.role.value,
        identifier=account.login_identifier,
        name=account.name,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def doctor_headers(auth_service, doctor_account):
    return _headers_for(auth_service, doctor_account)


@pytest.fixture
def medical_headers(auth_service, medical_account):
    return _headers_for(auth_service, medical_account)


@pytest.fixture
def patient_headers(auth_service, patient_account):
    return _headers_for(auth_service, patient_account)
