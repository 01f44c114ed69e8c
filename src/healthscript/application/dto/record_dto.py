"""Medical record DTOs."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class AddRecordRequest:
    """Request DTO for uploading a record file."""

    uhid: str
    title: str
    content: bytes
    content_type: str
    filename: Optional[str] = None
