"""Kue JSON API client.

Thin client for the management API of the Kue job queue: issues HTTP
requests through httpx, decodes JSON responses, and either raises
typed errors or returns a sentinel on API failures.

Exports:
    Client: API client with request dispatch and resource accessors.
    ApiError: Raised on non-200 responses when throwing is enabled.
    NO_RESULT: Sentinel returned on non-200 responses otherwise.
    null_logger: Factory for the default, discarding logger.
"""

from .client import NO_RESULT, Client
from .exceptions import ApiError, KueClientError
from .log import Logger, null_logger

__version__ = "0.1.0"

__all__ = [
    "NO_RESULT",
    "ApiError",
    "Client",
    "KueClientError",
    "Logger",
    "null_logger",
]
