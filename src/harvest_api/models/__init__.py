"""
Data models for the Harvest API client.

This module provides Pydantic models for decoded responses and pagination
metadata.
"""

from .responses import DecodedResponse, PaginationInfo

__all__ = [
    'DecodedResponse',
    'PaginationInfo'
]
