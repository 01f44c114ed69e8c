"""
Domain entities package.
"""

from .account import Account
from .patient import Patient
from .prescription import DoctorInfo, Medicine, Prescription
from .record import Record

__all__ = [
    "Account",
    "Patient",
    "Prescription",
    "Medicine",
    "DoctorInfo",
    "Record",
]
