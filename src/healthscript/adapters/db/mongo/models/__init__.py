"""Beanie document models registered with ``init_beanie``."""

from .account_m import AccountMongo
from .counter_m import CounterMongo
from .patient_m import PatientMongo
from .prescription_m import PrescriptionMongo
from .record_m import RecordMongo

DOCUMENT_MODELS = [
    AccountMongo,
    CounterMongo,
    PatientMongo,
    PrescriptionMongo,
    RecordMongo,
]

__all__ = [
    "AccountMongo",
    "CounterMongo",
    "PatientMongo",
    "PrescriptionMongo",
    "RecordMongo",
    "DOCUMENT_MODELS",
]
