"""
Configuration for the Harvest API client.

Settings are read with the following priority:
1. Values passed explicitly to the client
2. Environment variables (a ``.env`` file is loaded first)
3. Built-in defaults

Nothing here is global state: the resulting :class:`ClientConfig` is passed
to the client that uses it.
"""

import os
import logging
from typing import Any, Dict, Optional

import structlog
from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_API_URL = 'https://api.harvestapp.com/v2'
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = 'harvest-api-python-client'


class Credentials(BaseModel):
    """Model for Harvest API credentials"""
    account_id: str = Field(..., description="Harvest account ID")
    access_token: str = Field(..., description="Personal access token or OAuth2 bearer token")


class ClientConfig(BaseModel):
    """Base URL, timeout and headers applied to every request"""
    base_url: str = Field(DEFAULT_API_URL, description="Base URL of the Harvest API")
    timeout: float = Field(DEFAULT_TIMEOUT, description="Request timeout in seconds")
    user_agent: str = Field(DEFAULT_USER_AGENT, description="User-Agent header value")
    default_headers: Dict[str, str] = Field(default_factory=dict,
                                            description="Extra headers sent with every request")

    def headers(self) -> Dict[str, str]:
        """Default headers for a request, User-Agent first"""
        headers = {'User-Agent': self.user_agent}
        headers.update(self.default_headers)
        return headers

    @classmethod
    def from_env(cls, **overrides: Any) -> 'ClientConfig':
        """
        Build a configuration from environment variables

        Args:
            **overrides: Explicit values taking precedence over the environment

        Returns:
            ClientConfig: The configuration
        """
        settings = load_settings()
        values = {
            'base_url': settings['api_url'],
            'timeout': settings['timeout'],
            'user_agent': settings['user_agent'],
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)


def load_settings() -> Dict[str, Any]:
    """
    Read client settings from the environment

    Returns:
        Dict[str, Any]: Settings with defaults filled in
    """
    load_dotenv()

    return {
        'account_id': os.getenv('HARVEST_ACCOUNT_ID'),
        'access_token': os.getenv('HARVEST_ACCESS_TOKEN'),
        'api_url': os.getenv('HARVEST_API_URL', DEFAULT_API_URL),
        'timeout': float(os.getenv('HARVEST_API_TIMEOUT', str(DEFAULT_TIMEOUT))),
        'user_agent': os.getenv('HARVEST_USER_AGENT', DEFAULT_USER_AGENT),
        'log_level': os.getenv('LOG_LEVEL', 'INFO'),
    }


def load_credentials(account_id: Optional[str] = None,
                     access_token: Optional[str] = None) -> Optional[Credentials]:
    """
    Resolve credentials from arguments or the environment

    Args:
        account_id: Harvest account ID
        access_token: Harvest access token

    Returns:
        Optional[Credentials]: The credentials, or None if either value is unset
    """
    settings = load_settings()
    account_id = account_id or settings['account_id']
    access_token = access_token or settings['access_token']

    if not account_id or not access_token:
        return None
    return Credentials(account_id=account_id, access_token=access_token)


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure logging for the client

    Args:
        level: Log level name; defaults to the LOG_LEVEL environment variable
    """
    log_level = level or load_settings()['log_level']

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
