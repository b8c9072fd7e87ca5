"""Kue JSON API client.

Dispatches requests through the HTTP transport, classifies responses by
status code and applies the throw-or-return policy on failures.
"""

import threading
from typing import Any, TypeVar

import httpx

from .exceptions import ApiError
from .log import Logger, null_logger
from .resources.jobs import Job
from .transport import HttpTransport

R = TypeVar("R")


class _NoResult:
    """Type of the :data:`NO_RESULT` sentinel."""

    _instance: "_NoResult | None" = None

    def __new__(cls) -> "_NoResult":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_RESULT"


# Returned instead of a decoded body when a request fails and exceptions
# are disabled. Falsy, but never equal to a decoded JSON value.
NO_RESULT = _NoResult()


class Client:
    """Client for the Kue JSON API.

    Every API call, including the ones made by resource objects such as
    :meth:`jobs`, goes through :meth:`request`, so logging and the error
    policy are the same for all of them.

    Can be used as a context manager to close the HTTP transport.
    """

    def __init__(
        self,
        api_uri: str,
        client_options: dict[str, Any] | None = None,
        logger: Logger | None = None,
        throw_on_error: bool = False,
    ):
        """Initialize the client. No request is made.

        Args:
            api_uri: URI of the Kue JSON API server.
            client_options: httpx options applied to every request, e.g.
                proxy, auth, timeout or headers. Options passed to
                :meth:`request` override these key by key.
            logger: Structured logger (e.g., ``structlog.get_logger()``).
                Logging is disabled by default.
            throw_on_error: Whether to raise :class:`ApiError` on failed
                requests instead of returning :data:`NO_RESULT`.

        Raises:
            ValueError: If api_uri is empty or client_options has unknown keys.
        """
        self._transport = HttpTransport(api_uri, client_options)
        self._logger = logger
        self._throw_on_error = throw_on_error
        self._resources: dict[type, Any] = {}
        self._resources_lock = threading.Lock()

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and close the transport."""
        self.close()

    def close(self) -> None:
        """Close the HTTP transport."""
        self._transport.close()

    @property
    def transport(self) -> HttpTransport:
        """HTTP transport used for all requests."""
        return self._transport

    @property
    def logger(self) -> Logger:
        """Logger in use; a discarding logger is installed if none is set."""
        if self._logger is None:
            self._logger = null_logger()
        return self._logger

    @logger.setter
    def logger(self, logger: Logger | None) -> None:
        self._logger = logger

    @property
    def throw_on_error(self) -> bool:
        """Whether failed requests raise :class:`ApiError`."""
        return self._throw_on_error

    @throw_on_error.setter
    def throw_on_error(self, enabled: bool) -> None:
        self._throw_on_error = enabled

    def stats(self) -> Any:
        """Return job state counts and worker activity time in milliseconds.

        Returns:
            Decoded API response, or NO_RESULT if the request fails.

        Raises:
            ApiError: If the request fails and throw_on_error is enabled.
        """
        return self.request("GET", "stats")

    def jobs(self) -> Job:
        """Return the resource object for job commands.

        The object is created on first access and reused afterwards.
        """
        return self._resource(Job)

    def _resource(self, resource_class: type[R]) -> R:
        with self._resources_lock:
            if resource_class not in self._resources:
                self._resources[resource_class] = resource_class(self)
            return self._resources[resource_class]

    def request(
        self,
        method: str,
        path: str,
        options: dict[str, Any] | None = None,
    ) -> Any:
        """Execute a request against the Kue JSON API.

        Args:
            method: HTTP method (e.g., "GET", "POST").
            path: Request path relative to the API URI.
            options: Additional httpx request options (params, json,
                headers, ...).

        Returns:
            Decoded JSON body on a 200 response, otherwise NO_RESULT.

        Raises:
            ApiError: If the response is not 200 and throw_on_error is enabled.
            httpx.HTTPError: If the request could not be completed.
            json.JSONDecodeError: If a 200 response body is not valid JSON.
        """
        options = options or {}
        logger = self.logger

        logger.debug(
            "Executing Kue API request",
            method=method,
            path=path,
            options=options,
        )
        response = self._transport.send(method, path, options)

        if response.status_code == httpx.codes.OK:
            logger.debug("API request successfully completed", response=response.text)
            return response.json()

        logger.error(
            "Kue API error",
            status_code=response.status_code,
            reason=response.reason_phrase,
            body=response.text,
        )
        if self._throw_on_error:
            raise ApiError(response.status_code, response.text)

        return NO_RESULT
