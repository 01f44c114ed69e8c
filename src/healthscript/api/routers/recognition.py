"""
Drug search and drug-name recognition from voice, handwriting and
prescription scans.
"""

import json
import logging
from typing import Optional

from fastapi import APIRouter, File, Query, Request, UploadFile
from pydantic import ValidationError as PydanticValidationError

from ...application.use_cases.recognize_drug import (
    RecognizeHandwritingUseCase,
    ScanPrescriptionUseCase,
)
from ..deps import CurrentUser, DrugMatcherDep, TextRecognitionDep
from ..errors import ValidationError
from ..schemas.common import ApiResponse, ErrorResponse
from ..schemas.recognition import (
    DrugSearchResponse,
    HandwritingResponse,
    ScannedMedicine,
    ScanResponse,
    StrokesRequest,
    VoiceRecognitionRequest,
    VoiceRecognitionResponse,
)
from ..utils.responses import ok

router = APIRouter(tags=["recognition"])
logger = logging.getLogger(__name__)


@router.get("/drugs/search", response_model=ApiResponse[DrugSearchResponse])
async def search_drugs(
    request: Request,
    user: CurrentUser,
    matcher: DrugMatcherDep,
    q: str = Query("", description="Part of a drug name"),
):
    """Autocomplete suggestions for the medicine name field."""
    return ok(request, data=DrugSearchResponse(query=q, suggestions=matcher.search(q)))


@router.post("/recognition/voice", response_model=ApiResponse[VoiceRecognitionResponse])
async def recognize_voice(
    request: Request,
    body: VoiceRecognitionRequest,
    user: CurrentUser,
    matcher: DrugMatcherDep,
):
    """Closest formulary drug for a speech transcript."""
    transcript = body.transcript.strip()
    match = matcher.find_closest_drug(transcript)
    logger.info(f"Voice '{transcript}' -> {match or 'no match'}")
    return ok(request, data=VoiceRecognitionResponse(transcript=transcript, match=match))


async def _read_strokes(request: Request) -> Optional[list]:
    try:
        payload = await request.json()
    except json.JSONDecodeError:
        raise ValidationError("Request body must be valid JSON")
    try:
        return StrokesRequest.model_validate(payload).strokes
    except PydanticValidationError as e:
        raise ValidationError("Invalid stroke data", {"errors": e.errors(include_url=False, include_context=False)})


@router.post(
    "/recognition/handwriting",
    response_model=ApiResponse[HandwritingResponse],
    responses={422: {"model": ErrorResponse, "description": "No text recognized"}},
)
async def recognize_handwriting(
    request: Request,
    user: CurrentUser,
    text_recognition: TextRecognitionDep,
    matcher: DrugMatcherDep,
    file: Optional[UploadFile] = File(None, description="Canvas image"),
):
    """
    Recognize a handwritten drug name.

    Accepts either a multipart canvas image (``file``) or a JSON body
    ``{"strokes": [[[x, y], ...], ...]}``.
    """
    strokes = None
    image_bytes = None
    if file is not None:
        image_bytes = await file.read()
    elif request.headers.get("content-type", "").startswith("application/json"):
        strokes = await _read_strokes(request)
    else:
        raise ValidationError("Provide a canvas image or a list of strokes")

    result = await RecognizeHandwritingUseCase(text_recognition, matcher).execute(
        image_bytes=image_bytes, strokes=strokes
    )
    return ok(
        request,
        data=HandwritingResponse(
            text=result.text,
            match=result.result.match,
            confidence=round(result.result.confidence, 4),
            alternatives=result.result.alternatives,
        ),
    )


@router.post("/recognition/scan", response_model=ApiResponse[ScanResponse])
async def scan_prescription(
    request: Request,
    user: CurrentUser,
    text_recognition: TextRecognitionDep,
    matcher: DrugMatcherDep,
    file: UploadFile = File(..., description="Photo of a prescription"),
):
    """Find every formulary drug mentioned on a scanned prescription."""
    image_bytes = await file.read()
    if not image_bytes:
        raise ValidationError("Please select an image to scan")
    result = await ScanPrescriptionUseCase(text_recognition, matcher).execute(image_bytes)
    return ok(
        request,
        data=ScanResponse(
            text=result.text,
            medicines=[
                ScannedMedicine(name=name, confidence=round(score, 4))
                for name, score in result.medicines
            ],
        ),
    )
