"""
API error classes for handling Harvest API exceptions.

This module provides the exception hierarchy raised by the client and the
decision table that maps a completed HTTP exchange to one of those errors.
Errors raised before any request is sent (missing or invalid arguments)
are kept apart from errors reported by the remote API, so callers can tell
"fix the call" from "the server rejected it".
"""

import json
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Tag identifying the kind of a Harvest error"""
    MISSING_ARGUMENT = "missing_argument"
    INVALID_ARGUMENT = "invalid_argument"
    UNKNOWN_ENDPOINT = "unknown_endpoint"
    UNSUPPORTED_OPERATION = "unsupported_operation"
    TRANSPORT = "transport"
    CLIENT_ERROR = "client_error"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    RUNTIME = "runtime"
    SERVER_ERROR = "server_error"
    UNEXPECTED_RESULT = "unexpected_result"


class HarvestError(Exception):
    """Base exception for all Harvest client errors"""
    kind = ErrorKind.RUNTIME

    def __init__(self, message: str = "", status_code: Optional[int] = None,
                 details: Optional[Any] = None):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

    @property
    def is_retryable(self) -> bool:
        """Whether repeating the same call later could succeed"""
        return False


class MissingArgumentError(HarvestError):
    """Raised before any request when a required parameter is absent"""
    kind = ErrorKind.MISSING_ARGUMENT

    def __init__(self, field: str):
        self.field = field
        super().__init__(f'The "{field}" parameter is required.')


class InvalidArgumentError(HarvestError):
    """Raised before any request when a parameter has an invalid value"""
    kind = ErrorKind.INVALID_ARGUMENT


class UnknownEndpointError(InvalidArgumentError):
    """Raised when an endpoint name is not registered on the client"""
    kind = ErrorKind.UNKNOWN_ENDPOINT

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Undefined api instance called: "{name}"')


class UnsupportedOperationError(HarvestError):
    """Raised when an endpoint does not provide the requested operation"""
    kind = ErrorKind.UNSUPPORTED_OPERATION


class TransportError(HarvestError):
    """Raised when the request could not be executed at all"""
    kind = ErrorKind.TRANSPORT


class APIError(HarvestError):
    """Base exception for errors reported by the Harvest API"""


class ClientError(APIError):
    """Exception raised when the API rejects a malformed request (400)"""
    kind = ErrorKind.CLIENT_ERROR


class AuthenticationError(APIError):
    """Exception raised for authentication errors (401)"""
    kind = ErrorKind.AUTHENTICATION

    def __init__(self, message: str = "", status_code: Optional[int] = 401,
                 details: Optional[Any] = None):
        super().__init__(message, status_code, details)


class AuthorizationError(APIError):
    """Exception raised when the token lacks permission for a resource (403)"""
    kind = ErrorKind.AUTHORIZATION

    def __init__(self, message: str = "You do not have permission to access this resource.",
                 status_code: Optional[int] = 403, details: Optional[Any] = None):
        super().__init__(message, status_code, details)


class NotFoundError(APIError):
    """Exception raised when a resource is not found (404)"""
    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = "The requested resource was not found.",
                 status_code: Optional[int] = 404, details: Optional[Any] = None):
        super().__init__(message, status_code, details)


class ValidationFailedError(APIError):
    """Exception raised when the API refuses the submitted fields (422)"""
    kind = ErrorKind.VALIDATION_FAILED


class RateLimitExceededError(APIError):
    """Exception raised when the API rate limit is hit (429)"""
    kind = ErrorKind.RATE_LIMIT_EXCEEDED

    def __init__(self, message: str = "You have reached Harvest's API rate limit.",
                 status_code: Optional[int] = 429, details: Optional[Any] = None,
                 retry_after: Optional[int] = None):
        self.retry_after = retry_after
        super().__init__(message, status_code, details)

    @property
    def is_retryable(self) -> bool:
        return True


class HarvestRuntimeError(APIError):
    """Exception raised for any other failed API exchange"""
    kind = ErrorKind.RUNTIME


class ServerError(HarvestRuntimeError):
    """Exception raised for server errors (5xx)"""
    kind = ErrorKind.SERVER_ERROR

    @property
    def is_retryable(self) -> bool:
        return True


class UnexpectedResultError(HarvestRuntimeError):
    """Exception raised when a list response lacks its envelope key"""
    kind = ErrorKind.UNEXPECTED_RESULT

    def __init__(self, message: str = "Unexpected result.", status_code: Optional[int] = None,
                 details: Optional[Any] = None):
        super().__init__(message, status_code, details)


def _message_from(content: Any) -> str:
    """Take ``message`` from a decoded error body, else the JSON-encoded body"""
    if isinstance(content, dict) and content.get('message') is not None:
        return str(content['message'])
    return json.dumps(content)


def _parse_retry_after(headers: Optional[Dict[str, str]]) -> Optional[int]:
    if not headers:
        return None
    value = headers.get('Retry-After')
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def classify_status(status_code: int, content: Any,
                    headers: Optional[Dict[str, str]] = None) -> Optional[APIError]:
    """
    Map a completed HTTP exchange to the matching API error.

    Exactly one rule fires per status code; 429 is checked first and the
    body of a rate-limited response is never inspected.

    Args:
        status_code: HTTP status code of the response
        content: Decoded response body (JSON value or raw text)
        headers: Response headers

    Returns:
        Optional[APIError]: The error to raise, or None for a successful response
    """
    if status_code < 400 or status_code >= 600:
        return None

    if status_code == 429:
        return RateLimitExceededError(retry_after=_parse_retry_after(headers))

    if status_code == 400:
        return ClientError(_message_from(content), status_code, content)

    if status_code == 401:
        if isinstance(content, dict) and content.get('error_description') is not None:
            message = str(content['error_description'])
        else:
            message = content if isinstance(content, str) else json.dumps(content)
        return AuthenticationError(message, status_code, content)

    if status_code == 403:
        return AuthorizationError(details=content)

    if status_code == 404:
        return NotFoundError(details=content)

    if status_code == 422:
        return ValidationFailedError(_message_from(content), status_code, content)

    if status_code >= 500:
        return ServerError(_message_from(content), status_code, content)

    return HarvestRuntimeError(_message_from(content), status_code, content)
