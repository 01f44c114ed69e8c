"""
Utility functions for HealthScript application.
"""

from .data_uri import (
    data_uri_mime_type,
    data_uri_size,
    decode_data_uri,
    encode_data_uri,
    extension_for_mime_type,
)
from .datetime_utils import (
    ensure_utc,
    format_date,
    get_age_from_birthdate,
    parse_date,
)

__all__ = [
    # Datetime utilities
    "format_date",
    "parse_date",
    "get_age_from_birthdate",
    "ensure_utc",
    # Data URI utilities
    "encode_data_uri",
    "decode_data_uri",
    "data_uri_mime_type",
    "data_uri_size",
    "extension_for_mime_type",
]
