"""MongoDB Beanie model for integer id sequences."""

from beanie import Document
from pydantic import Field


class CounterMongo(Document):
    """One document per collection; ``value`` is the last id issued."""

    id: str = Field(..., description="Sequence name")
    value: int = Field(default=0, description="Last issued value")

    class Settings:
        name = "counters"
