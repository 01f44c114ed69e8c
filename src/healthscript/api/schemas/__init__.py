"""API request and response schemas."""

from .common import ApiResponse, DeletedResponse, ErrorResponse

__all__ = ["ApiResponse", "DeletedResponse", "ErrorResponse"]
