import re
from typing import Any
from urllib.parse import quote

from fastapi import Request

from ..schemas.common import ApiResponse

_UNSAFE_FILENAME_CHARS = re.compile(r'[^\x20-\x7e]|["\\]')


def ok(request: Request, data: Any = None, message: str = "") -> ApiResponse[Any]:
    req_id = getattr(request.state, "request_id", None)
    return ApiResponse(success=True, message=message, request_id=req_id or "", data=data)


def content_disposition(filename: str, disposition: str = "attachment") -> str:
    """Header value with an ASCII ``filename`` and the exact UTF-8 ``filename*``."""
    fallback = _UNSAFE_FILENAME_CHARS.sub("_", filename) or "download"
    return f"{disposition}; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"
