"""
Base API client for Harvest API interactions.

This module provides the foundation for all API interactions with Harvest,
handling authentication, request composition, error classification and
response decoding.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from .authentication import HarvestAuthentication
from .request_handler import Authenticator, RequestComposer, RequestHandler, RequestSpec
from .transport import RequestsTransport, Transport
from ..config import ClientConfig
from ..models.responses import PaginationInfo
from ..utils.api_utils import extract_pagination

# Setup logger
logger = logging.getLogger(__name__)


class BaseAPIClient:
    """
    Base client for interacting with the Harvest API.

    This class provides the foundation for all API interactions, handling:
    - Authentication
    - Request formatting and execution
    - Error classification
    - Response parsing and pagination metadata
    """

    def __init__(self,
                 config: Optional[ClientConfig] = None,
                 transport: Optional[Transport] = None,
                 authentication: Optional[Authenticator] = None):
        """
        Initialize the API client.

        Args:
            config: Base URL, timeout and default headers
            transport: Transport executing the requests; a ``requests``
                based one is created from the configuration when omitted
            authentication: Callable adding credentials to each request
        """
        self.config = config or ClientConfig()
        self.transport = transport or RequestsTransport(
            base_url=self.config.base_url,
            timeout=self.config.timeout
        )
        self.composer = RequestComposer(self.config)
        self.request_handler = RequestHandler(self.transport, authentication)

        logger.debug(f"Initialized API client with base URL: {self.config.base_url}")

    @property
    def authentication(self) -> Optional[Authenticator]:
        return self.request_handler.authentication

    @authentication.setter
    def authentication(self, authentication: Optional[Authenticator]) -> None:
        self.request_handler.authentication = authentication

    def authenticate(self, account_id: str, access_token: str) -> 'BaseAPIClient':
        """
        Replace the credentials used for subsequent requests.

        Args:
            account_id: Harvest account ID
            access_token: Personal access token or OAuth2 bearer token

        Returns:
            BaseAPIClient: The client itself
        """
        self.authentication = HarvestAuthentication(account_id, access_token)
        logger.debug(f"Authenticated client for account {account_id}")
        return self

    def execute(self, spec: RequestSpec) -> Tuple[Any, Any]:
        """Send a composed request; returns the raw response and decoded content"""
        return self.request_handler.execute(spec)

    def extract_pagination(self, response: Any, content: Any = None) -> Optional[PaginationInfo]:
        return extract_pagination(response, content)

    def get(self,
            endpoint: str,
            params: Optional[Dict[str, Any]] = None,
            headers: Optional[Dict[str, str]] = None) -> Any:
        """
        Make a GET request to the API.

        Args:
            endpoint: API endpoint
            params: Query parameters
            headers: Additional headers

        Returns:
            Parsed response data
        """
        _, content = self.execute(self.composer.build_get(endpoint, params, headers))
        return content

    def head(self,
             endpoint: str,
             params: Optional[Dict[str, Any]] = None,
             headers: Optional[Dict[str, str]] = None) -> Any:
        """Make a HEAD request and return the raw response"""
        response, _ = self.execute(self.composer.build_head(endpoint, params, headers))
        return response

    def post(self,
             endpoint: str,
             data: Optional[Dict[str, Any]] = None,
             headers: Optional[Dict[str, str]] = None) -> Any:
        """
        Make a POST request to the API.

        Args:
            endpoint: API endpoint
            data: Request body data
            headers: Additional headers

        Returns:
            Parsed response data
        """
        _, content = self.execute(self.composer.build_write('POST', endpoint, data, headers))
        return content

    def put(self,
            endpoint: str,
            data: Optional[Dict[str, Any]] = None,
            headers: Optional[Dict[str, str]] = None) -> Any:
        """Make a PUT request to the API"""
        _, content = self.execute(self.composer.build_write('PUT', endpoint, data, headers))
        return content

    def patch(self,
              endpoint: str,
              data: Optional[Dict[str, Any]] = None,
              headers: Optional[Dict[str, str]] = None) -> Any:
        """Make a PATCH request to the API"""
        _, content = self.execute(self.composer.build_write('PATCH', endpoint, data, headers))
        return content

    def delete(self,
               endpoint: str,
               data: Optional[Dict[str, Any]] = None,
               headers: Optional[Dict[str, str]] = None) -> Any:
        """Make a DELETE request to the API"""
        _, content = self.execute(self.composer.build_write('DELETE', endpoint, data, headers))
        return content
