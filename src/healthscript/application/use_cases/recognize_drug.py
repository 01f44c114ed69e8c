"""Drug-name recognition from handwriting, voice transcripts and prescription scans."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ...core.utils.drug_matching import DrugMatcher, RecognitionResult
from ...domain.errors import NoTextRecognizedError
from ..ports.services.text_recognition_service import Stroke, TextRecognitionService

logger = logging.getLogger(__name__)


@dataclass
class HandwritingRecognition:
    text: str
    result: RecognitionResult


@dataclass
class ScanRecognition:
    text: str
    medicines: List[Tuple[str, float]] = field(default_factory=list)


class RecognizeHandwritingUseCase:
    def __init__(self, text_recognition: TextRecognitionService, matcher: DrugMatcher):
        self._text_recognition = text_recognition
        self._matcher = matcher

    async def execute(
        self,
        image_bytes: Optional[bytes] = None,
        strokes: Optional[List[Stroke]] = None,
    ) -> HandwritingRecognition:
        if strokes:
            raw = await self._text_recognition.read_strokes(strokes)
        elif image_bytes:
            raw = await self._text_recognition.read_handwriting(image_bytes)
        else:
            raise NoTextRecognizedError()

        text = (raw or "").strip()
        if not text:
            raise NoTextRecognizedError()

        result = self._matcher.recognize_handwriting(text)
        logger.info(
            f"Handwriting '{text}' -> {result.match or 'no match'} ({result.confidence:.2f})"
        )
        return HandwritingRecognition(text=text, result=result)


class ScanPrescriptionUseCase:
    def __init__(self, text_recognition: TextRecognitionService, matcher: DrugMatcher):
        self._text_recognition = text_recognition
        self._matcher = matcher

    async def execute(self, image_bytes: bytes) -> ScanRecognition:
        text = (await self._text_recognition.read_document(image_bytes) or "").strip()
        medicines = self._matcher.find_drugs_in_text(text) if text else []
        logger.info(f"Prescription scan found {len(medicines)} medicine(s)")
        return ScanRecognition(text=text, medicines=medicines)
