"""
Response data models for the Harvest API client.

This module contains Pydantic models describing decoded responses and the
pagination metadata returned by list endpoints.
"""

from pydantic import BaseModel, Field
from typing import Any, Optional


class PaginationInfo(BaseModel):
    """Pagination metadata learned from a list response"""
    page: Optional[int] = Field(None, description="Page the response belongs to")
    per_page: Optional[int] = Field(None, description="Number of records per page")
    total_entries: Optional[int] = Field(None, description="Total number of records")
    total_pages: Optional[int] = Field(None, description="Total number of pages")
    next_page: Optional[int] = Field(None, description="Next page number, if any")
    previous_page: Optional[int] = Field(None, description="Previous page number, if any")

    def is_empty(self) -> bool:
        """Whether no pagination field was found at all"""
        return all(value is None for value in self.model_dump().values())


class DecodedResponse(BaseModel):
    """A response whose body was decoded according to its content type"""
    status_code: int = Field(..., description="HTTP status code")
    content_type: str = Field("", description="Value of the Content-Type header")
    body: Any = Field(None, description="Decoded JSON value or raw body text")

    @property
    def is_json(self) -> bool:
        return self.content_type.startswith('application/json')
