"""
UHID value object: the unique health identifier issued at registration.
Format: {YEAR}{10 RANDOM DIGITS}, 14 digits in total.
"""

import secrets
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

from ...core.constants import UHID_LENGTH, UHID_RANDOM_DIGITS
from ..errors import InvalidUhidError


@dataclass(frozen=True)
class Uhid:
    """Immutable UHID value object."""

    value: str

    def __post_init__(self) -> None:
        """Validate UHID format."""
        if not isinstance(self.value, str):
            raise InvalidUhidError(self.value)
        if len(self.value) != UHID_LENGTH or not self.value.isdigit():
            raise InvalidUhidError(self.value)

    def __str__(self) -> str:
        return self.value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Uhid):
            return False
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    @property
    def year(self) -> int:
        return int(self.value[:4])

    @classmethod
    def generate(cls, year: Optional[int] = None) -> "Uhid":
        """Generate a new UHID for the given (default: current) year."""
        year = year or datetime.now(timezone.utc).year
        random_part = str(secrets.randbelow(10 ** UHID_RANDOM_DIGITS)).zfill(UHID_RANDOM_DIGITS)
        return cls(f"{year:04d}{random_part}")

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        try:
            cls(value)
        except InvalidUhidError:
            return False
        return True
