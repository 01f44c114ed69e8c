"""
Prescription repository interface.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ....domain.entities.prescription import Prescription


class PrescriptionRepository(ABC):
    """Abstract repository for prescription data access."""

    @abstractmethod
    async def save(self, prescription: Prescription) -> Prescription:
        """Save a prescription, assigning an id on first insert."""
        pass

    @abstractmethod
    async def find_by_id(self, prescription_id: int) -> Optional[Prescription]:
        pass

    @abstractmethod
    async def find_by_uhid(self, uhid: str) -> List[Prescription]:
        """All prescriptions for a patient, newest first."""
        pass

    @abstractmethod
    async def delete(self, prescription_id: int) -> bool:
        """Delete a prescription; False when it did not exist."""
        pass
