"""
Prescription document rendering service interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ....domain.entities.patient import Patient
from ....domain.entities.prescription import Prescription


class PrescriptionDocumentService(ABC):
    """Renders a prescription into a printable document."""

    content_type: str = "application/pdf"

    @abstractmethod
    def render(self, prescription: Prescription, patient: Optional[Patient]) -> bytes:
        """Render the prescription and return the document bytes."""
        pass
