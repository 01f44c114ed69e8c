"""Helpers for base64 ``data:`` URIs used to store uploaded files."""

import base64
import binascii
import re
from typing import Tuple

_DATA_URI_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?P<params>(;[^;,]+)*?);base64,(?P<data>.*)$", re.S)


def encode_data_uri(content: bytes, content_type: str) -> str:
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{content_type or 'application/octet-stream'};base64,{encoded}"


def decode_data_uri(data_uri: str) -> Tuple[str, bytes]:
    """Split a base64 data URI into its mime type and raw bytes.

    Raises:
        ValueError: If the value is not a base64 data URI
    """
    match = _DATA_URI_RE.match(data_uri or "")
    if not match:
        raise ValueError("Not a base64 data URI")
    mime = match.group("mime") or "application/octet-stream"
    try:
        content = base64.b64decode(match.group("data"), validate=False)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid base64 payload: {e}")
    return mime, content


def data_uri_mime_type(data_uri: str) -> str:
    match = _DATA_URI_RE.match(data_uri or "")
    if not match:
        return "application/octet-stream"
    return match.group("mime") or "application/octet-stream"


def extension_for_mime_type(mime: str) -> str:
    """File extension for a mime type: its subtype, ``image/png`` -> ``png``."""
    if "/" not in (mime or ""):
        return "bin"
    return mime.split("/", 1)[1].lower() or "bin"


def data_uri_size(data_uri: str) -> int:
    """Decoded payload size in bytes, without decoding."""
    _, _, payload = (data_uri or "").partition(",")
    payload = payload.strip()
    padding = payload.count("=", max(len(payload) - 2, 0))
    return max((len(payload) * 3) // 4 - padding, 0)
