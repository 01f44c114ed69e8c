"""
Value objects package for domain layer.
"""

from .uhid import Uhid

__all__ = [
    "Uhid",
]
