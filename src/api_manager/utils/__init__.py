"""Utility modules for API Manager."""

from .sanitizer import mask_sensitive_data, mask_url

__all__ = [
    "mask_sensitive_data",
    "mask_url",
]
