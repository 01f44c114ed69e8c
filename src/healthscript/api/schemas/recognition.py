"""
Pydantic schemas for drug search and recognition.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


class DrugSearchResponse(BaseModel):
    query: str
    suggestions: List[str]


class VoiceRecognitionRequest(BaseModel):
    transcript: str = Field(..., description="Speech-to-text transcript from the client")


class VoiceRecognitionResponse(BaseModel):
    transcript: str
    match: Optional[str] = None


class StrokesRequest(BaseModel):
    """Canvas strokes, each a list of [x, y] points."""

    strokes: List[List[Tuple[float, float]]] = Field(..., min_items=1)


class HandwritingResponse(BaseModel):
    text: str
    match: Optional[str] = None
    confidence: float
    alternatives: List[str]


class ScannedMedicine(BaseModel):
    name: str
    confidence: float


class ScanResponse(BaseModel):
    text: str
    medicines: List[ScannedMedicine]
