"""
Patient repository interface for data access abstraction.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ....domain.entities.patient import Patient


class PatientRepository(ABC):
    """Abstract repository for patient data access."""

    @abstractmethod
    async def save(self, patient: Patient) -> Patient:
        """Save a patient, assigning an id on first insert."""
        pass

    @abstractmethod
    async def find_by_uhid(self, uhid: str) -> Optional[Patient]:
        """Find a patient by UHID."""
        pass

    @abstractmethod
    async def find_by_aadhaar(self, aadhaar: str) -> Optional[Patient]:
        """Find a patient by Aadhaar number."""
        pass

    @abstractmethod
    async def exists_by_uhid(self, uhid: str) -> bool:
        """Check if a UHID is already issued."""
        pass
