"""MongoDB Beanie model for medical Record documents."""

from datetime import datetime, timezone
from typing import Optional

from beanie import Document, Indexed
from pydantic import Field


class RecordMongo(Document):
    """MongoDB model for Record entity."""

    id: Optional[int] = Field(default=None, description="Sequential record id")
    uhid: Indexed(str) = Field(..., description="Patient UHID")
    type: str = Field(..., description="prescription, image or pdf")
    title: str = Field(..., description="Record title")
    data: str = Field(..., description="Base64 data URI payload")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Settings:
        name = "records"
        indexes = [
            "created_at",
        ]
