"""
API request handler for composing and dispatching HTTP requests.

This module provides the request composer, which turns a path and caller
parameters into a :class:`RequestSpec`, and the request handler, which
authenticates, dispatches and classifies the result of that request.
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

from .errors import HarvestRuntimeError, classify_status
from .pagination import PaginationState
from .transport import Transport
from ..config import ClientConfig
from ..utils.api_utils import (
    build_query_params,
    build_query_string,
    encode_json_body,
    parse_response
)

# Setup logger
logger = logging.getLogger(__name__)

READ_METHODS = ('GET', 'HEAD')
WRITE_METHODS = ('POST', 'PATCH', 'PUT', 'DELETE')

Authenticator = Callable[[Dict[str, str]], Dict[str, str]]


@dataclass
class RequestSpec:
    """
    A fully composed request, built fresh for each call.

    ``json_payload`` holds the parameters to send as JSON; it is only
    encoded to bytes by :meth:`encode_body` when the request is sent.
    """
    method: str
    path: str
    query_params: Dict[str, str] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)
    json_payload: Optional[Dict[str, Any]] = None

    @property
    def url(self) -> str:
        """Path with the URL-encoded query string appended"""
        if not self.query_params:
            return self.path
        return f"{self.path}?{build_query_string(self.query_params)}"

    def encode_body(self) -> Optional[bytes]:
        """
        Encode the JSON body.

        Raises:
            HarvestRuntimeError: If the body contains a value that cannot be encoded
        """
        try:
            return encode_json_body(self.json_payload)
        except (TypeError, ValueError) as e:
            raise HarvestRuntimeError(f"Unable to encode request body: {e}") from e


def _has_header(headers: Dict[str, str], name: str) -> bool:
    return any(key.lower() == name.lower() for key in headers)


class RequestComposer:
    """
    Builds requests from caller parameters, pagination state and the
    configured default headers.
    """

    def __init__(self, config: Optional[ClientConfig] = None):
        self.config = config or ClientConfig()

    def _headers(self, headers: Optional[Dict[str, str]]) -> Dict[str, str]:
        merged = self.config.headers()
        if headers:
            merged.update(headers)
        return merged

    def build_get(self,
                  path: str,
                  params: Optional[Dict[str, Any]] = None,
                  headers: Optional[Dict[str, str]] = None,
                  pagination: Optional[PaginationState] = None) -> RequestSpec:
        """
        Build a GET request.

        The page and per-page values of the pagination state are added
        after the caller's parameters unless the caller already set them.

        Args:
            path: Request path
            params: Query parameters
            headers: Additional headers
            pagination: Pagination state of the calling endpoint

        Returns:
            RequestSpec: The composed request, without body
        """
        parameters = dict(params or {})

        if pagination is not None:
            if pagination.page is not None and 'page' not in parameters:
                parameters['page'] = pagination.page
            if pagination.per_page is not None and 'per_page' not in parameters:
                parameters['per_page'] = pagination.per_page

        return RequestSpec(
            method='GET',
            path=path,
            query_params=build_query_params(parameters),
            headers=self._headers(headers)
        )

    def build_head(self,
                   path: str,
                   params: Optional[Dict[str, Any]] = None,
                   headers: Optional[Dict[str, str]] = None) -> RequestSpec:
        """Build a HEAD request with query parameters"""
        return RequestSpec(
            method='HEAD',
            path=path,
            query_params=build_query_params(dict(params or {})),
            headers=self._headers(headers)
        )

    def build_write(self,
                    method: str,
                    path: str,
                    params: Optional[Dict[str, Any]] = None,
                    headers: Optional[Dict[str, str]] = None) -> RequestSpec:
        """
        Build a POST, PATCH, PUT or DELETE request with a JSON body.

        Args:
            method: HTTP method
            path: Request path
            params: Parameters to send as a JSON object; empty means no body
            headers: Additional headers; a Content-Type given here wins

        Returns:
            RequestSpec: The composed request
        """
        method = method.upper()
        if method not in WRITE_METHODS:
            raise ValueError(f"Unsupported write method: {method}")

        request_headers = self._headers(None)
        if not _has_header(headers or {}, 'Content-Type'):
            request_headers['Content-Type'] = 'application/json'
        if headers:
            request_headers.update(headers)

        return RequestSpec(
            method=method,
            path=path,
            headers=request_headers,
            json_payload=dict(params) if params else None
        )


class RequestHandler:
    """
    Handler for dispatching composed requests and classifying responses.
    """

    def __init__(self,
                 transport: Transport,
                 authentication: Optional[Authenticator] = None):
        """
        Initialize the request handler.

        Args:
            transport: Transport executing the HTTP requests
            authentication: Callable adding credentials to the request headers
        """
        self.transport = transport
        self.authentication = authentication

    def _get_correlation_id(self) -> str:
        """Generate a unique correlation ID for request tracing"""
        return str(uuid.uuid4())

    def _dispatch(self, spec: RequestSpec, headers: Dict[str, str], body: Optional[bytes]) -> Any:
        if spec.method == 'GET':
            return self.transport.get(spec.url, headers)
        if spec.method == 'HEAD':
            return self.transport.head(spec.url, headers)
        if spec.method == 'POST':
            return self.transport.post(spec.url, headers, body)
        if spec.method == 'PATCH':
            return self.transport.patch(spec.url, headers, body)
        if spec.method == 'PUT':
            return self.transport.put(spec.url, headers, body)
        if spec.method == 'DELETE':
            return self.transport.delete(spec.url, headers, body)
        raise ValueError(f"Unsupported method: {spec.method}")

    def send(self, spec: RequestSpec) -> Any:
        """
        Send a request and return the raw response.

        Args:
            spec: Composed request

        Returns:
            The transport's response object
        """
        correlation_id = self._get_correlation_id()
        headers = dict(spec.headers)
        headers['X-Correlation-ID'] = correlation_id
        if self.authentication is not None:
            headers = self.authentication(headers)

        body = spec.encode_body()

        logger.debug(f"API Request: {spec.method} {spec.url} | Correlation ID: {correlation_id}")
        return self._dispatch(spec, headers, body)

    def execute(self, spec: RequestSpec) -> Tuple[Any, Any]:
        """
        Send a request, raise for error responses and decode the body.

        Args:
            spec: Composed request

        Returns:
            Tuple: The raw response and its decoded content

        Raises:
            APIError: If the response status is 400 or above
            TransportError: If the transport could not execute the request
        """
        response = self.send(spec)
        content = parse_response(response)

        error = classify_status(response.status_code, content, response.headers)
        if error is not None:
            if error.is_retryable:
                logger.warning(f"API error ({response.status_code}) for {spec.method} {spec.path}: {error.message}")
            else:
                logger.error(f"API error ({response.status_code}) for {spec.method} {spec.path}: {error.message}")
            raise error

        return response, content
