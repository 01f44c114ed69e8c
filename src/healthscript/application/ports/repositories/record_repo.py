"""
Medical record repository interface.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ....domain.entities.record import Record


class RecordRepository(ABC):
    """Abstract repository for medical record data access."""

    @abstractmethod
    async def save(self, record: Record) -> Record:
        """Save a record, assigning an id on first insert."""
        pass

    @abstractmethod
    async def find_by_id(self, record_id: int) -> Optional[Record]:
        pass

    @abstractmethod
    async def find_by_uhid(self, uhid: str) -> List[Record]:
        """All records for a patient, newest first."""
        pass

    @abstractmethod
    async def delete(self, record_id: int) -> bool:
        """Delete a record; False when it did not exist."""
        pass
