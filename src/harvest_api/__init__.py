"""
Python client for the Harvest time tracking and invoicing API v2.

This package provides the Harvest client, configuration loading, response
models and utility functions.
"""

# Import API clients
from .api import (
    HarvestClient,
    HarvestAuthentication,
    HarvestError,
    MissingArgumentError,
    InvalidArgumentError,
    UnknownEndpointError,
    UnsupportedOperationError,
    TransportError,
    APIError,
    ClientError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationFailedError,
    RateLimitExceededError,
    HarvestRuntimeError,
    ServerError,
    UnexpectedResultError
)

# Import configuration
from .config import ClientConfig, Credentials, load_settings, load_credentials, setup_logging

# Import models
from .models import DecodedResponse, PaginationInfo

# Import utilities
from .utils import DateFormatter

__version__ = "0.1.0"

__all__ = [
    # Client
    'HarvestClient',
    'HarvestAuthentication',

    # Configuration
    'ClientConfig',
    'Credentials',
    'load_settings',
    'load_credentials',
    'setup_logging',

    # Models
    'DecodedResponse',
    'PaginationInfo',

    # Utilities
    'DateFormatter',

    # Errors
    'HarvestError',
    'MissingArgumentError',
    'InvalidArgumentError',
    'UnknownEndpointError',
    'UnsupportedOperationError',
    'TransportError',
    'APIError',
    'ClientError',
    'AuthenticationError',
    'AuthorizationError',
    'NotFoundError',
    'ValidationFailedError',
    'RateLimitExceededError',
    'HarvestRuntimeError',
    'ServerError',
    'UnexpectedResultError'
]
