"""
Pydantic schemas for medical records.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from ...domain.entities.record import Record


class RecordSummary(BaseModel):
    """Record metadata without the file payload."""

    id: Optional[int] = None
    uhid: str
    type: str
    title: str
    content_type: str
    size_bytes: int
    created_at: datetime

    @classmethod
    def from_domain(cls, record: Record) -> "RecordSummary":
        return cls(
            id=record.id,
            uhid=record.uhid.value,
            type=record.type.value,
            title=record.title,
            content_type=record.content_type,
            size_bytes=record.size_bytes,
            created_at=record.created_at,
        )


class RecordDetail(RecordSummary):
    data: str

    @classmethod
    def from_domain(cls, record: Record) -> "RecordDetail":
        summary = RecordSummary.from_domain(record)
        return cls(**summary.model_dump(), data=record.data)
