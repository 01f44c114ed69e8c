"""
Text recognition (OCR) service interface.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

Stroke = Sequence[Tuple[float, float]]


class TextRecognitionService(ABC):
    """Extracts text from images of handwriting or printed prescriptions."""

    @abstractmethod
    async def read_handwriting(self, image_bytes: bytes) -> str:
        """OCR a single handwritten word (letters and digits only)."""
        pass

    @abstractmethod
    async def read_strokes(self, strokes: List[Stroke]) -> str:
        """Rasterise canvas strokes and OCR them as handwriting."""
        pass

    @abstractmethod
    async def read_document(self, image_bytes: bytes) -> str:
        """OCR a photographed prescription or label."""
        pass
