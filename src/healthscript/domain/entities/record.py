"""Medical record entity: an uploaded scan, image or generated prescription PDF."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from ...core.utils.data_uri import (
    data_uri_mime_type,
    data_uri_size,
    extension_for_mime_type,
)
from ..enums import RecordType
from ..errors import InvalidRecordError
from ..value_objects.uhid import Uhid


@dataclass
class Record:
    """Medical record domain entity."""

    uhid: Uhid
    type: RecordType
    title: str
    data: str
    id: Optional[int] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        self.title = (self.title or "").strip()
        if not self.title:
            raise InvalidRecordError("title", "Record title is required")
        if not self.data or not self.data.startswith("data:"):
            raise InvalidRecordError("data", "Record data must be a data URI")
        self.type = RecordType(self.type)

    @property
    def content_type(self) -> str:
        return data_uri_mime_type(self.data)

    @property
    def size_bytes(self) -> int:
        return data_uri_size(self.data)

    @property
    def is_pdf(self) -> bool:
        return self.type == RecordType.PDF or "pdf" in self.content_type

    @property
    def download_filename(self) -> str:
        """``<title>.pdf`` for PDFs, otherwise the extension of the image type."""
        if self.is_pdf:
            return f"{self.title}.pdf"
        return f"{self.title}.{extension_for_mime_type(self.content_type)}"
