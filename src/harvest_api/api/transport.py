"""
HTTP transport used to execute composed requests.

The client only needs a small capability: send a method, a path relative
to the API base URL, headers and an optional body, and get back a response
exposing ``status_code``, ``headers`` and ``text``. :class:`RequestsTransport`
provides it on top of a ``requests`` session; tests and embedding
applications can inject any object with the same methods.
"""

import logging
from typing import Dict, Optional, Protocol

import requests

from .errors import TransportError
from ..config import DEFAULT_API_URL, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Capability executing HTTP requests against the API base URL"""

    def request(self, method: str, path: str, headers: Dict[str, str],
                body: Optional[bytes] = None) -> requests.Response:
        ...

    def get(self, path: str, headers: Dict[str, str]) -> requests.Response:
        ...

    def head(self, path: str, headers: Dict[str, str]) -> requests.Response:
        ...

    def post(self, path: str, headers: Dict[str, str], body: Optional[bytes] = None) -> requests.Response:
        ...

    def patch(self, path: str, headers: Dict[str, str], body: Optional[bytes] = None) -> requests.Response:
        ...

    def put(self, path: str, headers: Dict[str, str], body: Optional[bytes] = None) -> requests.Response:
        ...

    def delete(self, path: str, headers: Dict[str, str], body: Optional[bytes] = None) -> requests.Response:
        ...


class RequestsTransport:
    """
    Transport backed by a ``requests`` session.

    Redirects are followed by ``requests`` itself. Connection failures,
    timeouts and other ``requests`` exceptions are raised as
    :class:`TransportError`.
    """

    def __init__(self,
                 base_url: str = DEFAULT_API_URL,
                 timeout: float = DEFAULT_TIMEOUT,
                 session: Optional[requests.Session] = None):
        """
        Initialize the transport.

        Args:
            base_url: Base URL every path is appended to
            timeout: Request timeout in seconds
            session: Session to reuse; a new one is created when omitted
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def _prepare_url(self, path: str) -> str:
        if path.startswith('http://') or path.startswith('https://'):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, method: str, path: str, headers: Dict[str, str],
                body: Optional[bytes] = None) -> requests.Response:
        url = self._prepare_url(path)
        try:
            return self.session.request(
                method=method.upper(),
                url=url,
                data=body,
                headers=headers,
                timeout=self.timeout
            )
        except requests.RequestException as exc:
            logger.error(f"Request error: {exc}")
            raise TransportError(f"Failed to connect to {url}: {exc}") from exc

    def get(self, path: str, headers: Dict[str, str]) -> requests.Response:
        return self.request('GET', path, headers)

    def head(self, path: str, headers: Dict[str, str]) -> requests.Response:
        return self.request('HEAD', path, headers)

    def post(self, path: str, headers: Dict[str, str], body: Optional[bytes] = None) -> requests.Response:
        return self.request('POST', path, headers, body)

    def patch(self, path: str, headers: Dict[str, str], body: Optional[bytes] = None) -> requests.Response:
        return self.request('PATCH', path, headers, body)

    def put(self, path: str, headers: Dict[str, str], body: Optional[bytes] = None) -> requests.Response:
        return self.request('PUT', path, headers, body)

    def delete(self, path: str, headers: Dict[str, str], body: Optional[bytes] = None) -> requests.Response:
        return self.request('DELETE', path, headers, body)

    def close(self) -> None:
        self.session.close()
