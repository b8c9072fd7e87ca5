"""Exceptions raised by the Kue API client."""


class KueClientError(Exception):
    """Base class for Kue client errors."""


class ApiError(KueClientError):
    """Raised when the Kue API responds with a non-200 status code.

    Attributes:
        status_code: HTTP status code returned by the API.
        body: Raw response body.
    """

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Kue API error #{status_code}")
