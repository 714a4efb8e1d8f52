"""
API utilities for common request handling and response processing.

This module provides the normalization rules applied to query parameters,
JSON body encoding, and the decoding of responses and their pagination
metadata.
"""

import json
import logging
from typing import Any, Dict, Optional, Union
from urllib.parse import parse_qs, urlencode, urlparse
from datetime import date, datetime

from .date_utils import DateFormatter
from ..models.responses import DecodedResponse, PaginationInfo

# Setup logger
logger = logging.getLogger(__name__)

# Filters the API expects as the literal strings "true" / "false"
BOOLEAN_FILTERS = ('is_active', 'is_billed', 'is_running', 'is_billable', 'is_project_manager')

# Filters taking a full timestamp with UTC offset
DATETIME_FILTERS = ('updated_since',)

# Filters taking a plain YYYY-MM-DD date
DATE_FILTERS = ('from', 'to')

PAGINATION_FIELDS = ('page', 'per_page', 'total_entries', 'total_pages', 'next_page', 'previous_page')

_FALSE_STRINGS = ('', '0', 'false')


def is_truthy(value: Any) -> bool:
    """
    Apply truthy coercion to a boolean-like value

    Any string other than "", "0" or "false" (case-insensitive) is true.

    Args:
        value: Boolean-like input

    Returns:
        bool: Coerced value
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)


def to_bool_string(value: Any) -> str:
    """Normalize a boolean-like value to "true" or "false" """
    return 'true' if is_truthy(value) else 'false'


def build_query_params(params: Dict[str, Any]) -> Dict[str, str]:
    """
    Build query parameters with proper formatting

    Insertion order is kept so the resulting query string is deterministic.

    Args:
        params (Dict[str, Any]): Raw parameters

    Returns:
        Dict[str, str]: Formatted parameters
    """
    formatted_params = {}

    for key, value in params.items():
        if value is None:
            continue

        if key in BOOLEAN_FILTERS:
            formatted_params[key] = to_bool_string(value)
        elif key in DATETIME_FILTERS:
            formatted_params[key] = DateFormatter.format_datetime(value)
        elif key in DATE_FILTERS:
            formatted_params[key] = DateFormatter.format_date(value)
        elif isinstance(value, bool):
            formatted_params[key] = str(value).lower()
        elif isinstance(value, (list, tuple)):
            formatted_params[key] = ",".join(str(item) for item in value)
        elif isinstance(value, datetime):
            formatted_params[key] = DateFormatter.format_datetime(value)
        elif isinstance(value, date):
            formatted_params[key] = DateFormatter.format_date(value)
        else:
            formatted_params[key] = str(value)

    return formatted_params


def build_query_string(query_params: Dict[str, str]) -> str:
    """URL-encode already formatted query parameters, keeping their order"""
    return urlencode(list(query_params.items()))


def _json_default(value: Any) -> str:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_json_body(payload: Optional[Dict[str, Any]]) -> Optional[bytes]:
    """
    Encode a request payload as a UTF-8 JSON object

    An empty payload produces no body at all.

    Args:
        payload: Parameters to send

    Returns:
        Optional[bytes]: Encoded body, or None when there is nothing to send

    Raises:
        TypeError: If the payload contains a value that cannot be encoded
    """
    if not payload:
        return None
    return json.dumps(payload, default=_json_default).encode('utf-8')


def get_content_type(response: Any) -> str:
    headers = getattr(response, 'headers', None) or {}
    return headers.get('Content-Type', '') or ''


def parse_response(response: Any) -> Union[Dict[str, Any], list, str, Any]:
    """
    Decode a response body according to its content type

    JSON bodies are decoded when the Content-Type says so; anything else,
    including JSON that fails to parse, is returned as the raw text.

    Args:
        response: Response object exposing ``headers`` and ``text``

    Returns:
        The decoded JSON value, or the raw body string
    """
    body = response.text or ''

    if get_content_type(response).startswith('application/json'):
        try:
            return json.loads(body)
        except ValueError as e:
            logger.debug(f"Failed to parse JSON response: {e}")

    return body


def decode_response(response: Any) -> DecodedResponse:
    """Decode a response into a :class:`DecodedResponse`"""
    return DecodedResponse(
        status_code=response.status_code,
        content_type=get_content_type(response),
        body=parse_response(response)
    )


def _to_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _page_from_url(url: Any) -> Optional[int]:
    if not isinstance(url, str) or not url:
        return None
    values = parse_qs(urlparse(url).query).get('page')
    return _to_int(values[0]) if values else None


def extract_pagination(response: Any, content: Any = None) -> Optional[PaginationInfo]:
    """
    Extract pagination metadata from a list response

    The Harvest v2 list envelope carries ``page``, ``per_page``,
    ``total_entries``, ``total_pages``, ``next_page`` and ``previous_page``
    next to a ``links`` section. When the body has none of these, the
    ``Link``, ``X-Total-Count`` and ``X-Total-Pages`` headers are used.

    Args:
        response: Response object
        content: Already decoded body, to avoid decoding twice

    Returns:
        Optional[PaginationInfo]: Pagination metadata, or None if absent
    """
    if content is None:
        content = parse_response(response)

    values: Dict[str, Optional[int]] = dict.fromkeys(PAGINATION_FIELDS)

    if isinstance(content, dict):
        for field in PAGINATION_FIELDS:
            values[field] = _to_int(content.get(field))

        links = content.get('links')
        if isinstance(links, dict):
            if values['next_page'] is None:
                values['next_page'] = _page_from_url(links.get('next'))
            if values['previous_page'] is None:
                values['previous_page'] = _page_from_url(links.get('previous'))

    if all(value is None for value in values.values()):
        header_links = getattr(response, 'links', None) or {}
        if isinstance(header_links, dict):
            values['next_page'] = _page_from_url(header_links.get('next', {}).get('url'))
            previous = header_links.get('prev') or header_links.get('previous') or {}
            values['previous_page'] = _page_from_url(previous.get('url'))

        headers = getattr(response, 'headers', None) or {}
        values['total_entries'] = _to_int(headers.get('X-Total-Count'))
        values['total_pages'] = _to_int(headers.get('X-Total-Pages'))

    pagination = PaginationInfo(**values)
    if pagination.is_empty():
        return None
    return pagination
