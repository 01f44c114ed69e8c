"""FastAPI dependency providers.

Repositories and services are process-wide singletons; use cases are built
per request from them so tests can swap any provider through
``app.dependency_overrides``.
"""

from functools import lru_cache
from typing import Annotated, Callable

from fastapi import Depends, Request

from ..adapters.db.mongo.repositories.account_repository import MongoAccountRepository
from ..adapters.db.mongo.repositories.patient_repository import MongoPatientRepository
from ..adapters.db.mongo.repositories.prescription_repository import (
    MongoPrescriptionRepository,
)
from ..adapters.db.mongo.repositories.record_repository import MongoRecordRepository
from ..adapters.external.tesseract_ocr_service import TesseractTextRecognitionService
from ..adapters.services.prescription_pdf_service import ReportLabPrescriptionDocumentService
from ..application.ports.repositories.account_repo import AccountRepository
from ..application.ports.repositories.patient_repo import PatientRepository
from ..application.ports.repositories.prescription_repo import PrescriptionRepository
from ..application.ports.repositories.record_repo import RecordRepository
from ..application.ports.services.prescription_document_service import (
    PrescriptionDocumentService,
)
from ..application.ports.services.text_recognition_service import TextRecognitionService
from ..core.auth import AuthenticatedUser, AuthService, get_auth_service
from ..core.config import Settings, get_settings
from ..core.exceptions import AuthenticationError, AuthorizationError
from ..core.utils.drug_matching import DrugMatcher, get_drug_matcher
from ..domain.entities.account import Account
from ..domain.enums import UserRole


@lru_cache()
def get_patient_repository() -> PatientRepository:
    """Get patient repository instance."""
    return MongoPatientRepository()


@lru_cache()
def get_prescription_repository() -> PrescriptionRepository:
    """Get prescription repository instance."""
    return MongoPrescriptionRepository()


@lru_cache()
def get_record_repository() -> RecordRepository:
    """Get record repository instance."""
    return MongoRecordRepository()


@lru_cache()
def get_account_repository() -> AccountRepository:
    """Get account repository instance."""
    return MongoAccountRepository()


@lru_cache()
def get_document_service() -> PrescriptionDocumentService:
    return ReportLabPrescriptionDocumentService()


@lru_cache()
def get_text_recognition_service() -> TextRecognitionService:
    return TesseractTextRecognitionService(get_settings().recognition)


def get_matcher() -> DrugMatcher:
    return get_drug_matcher()


def get_auth() -> AuthService:
    return get_auth_service()


def get_app_settings() -> Settings:
    return get_settings()


def get_current_user(request: Request) -> AuthenticatedUser:
    """Identity attached by the authentication middleware."""
    user = getattr(request.state, "user", None)
    if user is None:
        raise AuthenticationError("Authentication required")
    return user


def require_roles(*roles: UserRole) -> Callable[..., AuthenticatedUser]:
    allowed = {r.value for r in roles}

    def _check(user: AuthenticatedUser = Depends(get_current_user)) -> AuthenticatedUser:
        if user.role not in allowed:
            raise AuthorizationError(
                "You do not have access to this resource",
                {"role": user.role, "allowed": sorted(allowed)},
            )
        return user

    return _check


def ensure_patient_access(user: AuthenticatedUser, uhid: str, allow_medical: bool = True) -> None:
    """Patients may only see their own UHID; doctors see all."""
    if user.is_doctor:
        return
    if user.is_medical and allow_medical:
        return
    if user.is_patient and user.identifier == uhid:
        return
    raise AuthorizationError(
        "You do not have access to this patient's data", {"uhid": uhid, "role": user.role}
    )


PatientRepositoryDep = Annotated[PatientRepository, Depends(get_patient_repository)]
PrescriptionRepositoryDep = Annotated[
    PrescriptionRepository, Depends(get_prescription_repository)
]
RecordRepositoryDep = Annotated[RecordRepository, Depends(get_record_repository)]
AccountRepositoryDep = Annotated[AccountRepository, Depends(get_account_repository)]
DocumentServiceDep = Annotated[PrescriptionDocumentService, Depends(get_document_service)]
TextRecognitionDep = Annotated[TextRecognitionService, Depends(get_text_recognition_service)]
DrugMatcherDep = Annotated[DrugMatcher, Depends(get_matcher)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth)]
SettingsDep = Annotated[Settings, Depends(get_app_settings)]

CurrentUser = Annotated[AuthenticatedUser, Depends(get_current_user)]
DoctorUser = Annotated[AuthenticatedUser, Depends(require_roles(UserRole.DOCTOR))]
ClinicalUser = Annotated[
    AuthenticatedUser, Depends(require_roles(UserRole.DOCTOR, UserRole.MEDICAL))
]


async def get_current_doctor(user: DoctorUser, accounts: AccountRepositoryDep) -> Account:
    """Full account of the signed-in doctor."""
    account = await accounts.find_by_id(user.account_id)
    if account is None or account.role != UserRole.DOCTOR:
        raise AuthenticationError("Doctor account no longer exists")
    return account


CurrentDoctor = Annotated[Account, Depends(get_current_doctor)]
