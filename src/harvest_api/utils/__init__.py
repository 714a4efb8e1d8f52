"""
Utility functions and classes for the Harvest API client.

This module provides date formatting, query and body serialization,
response decoding and declarative parameter validation.
"""

from .date_utils import DateFormatter
from .api_utils import (
    is_truthy,
    to_bool_string,
    build_query_params,
    build_query_string,
    encode_json_body,
    parse_response,
    decode_response,
    extract_pagination
)
from .validation import FieldRule, validate_fields, validate_id

__all__ = [
    # Date utilities
    'DateFormatter',

    # API utilities
    'is_truthy',
    'to_bool_string',
    'build_query_params',
    'build_query_string',
    'encode_json_body',
    'parse_response',
    'decode_response',
    'extract_pagination',

    # Validation
    'FieldRule',
    'validate_fields',
    'validate_id'
]
