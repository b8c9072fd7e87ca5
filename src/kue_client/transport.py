"""HTTP transport for the Kue JSON API.

Wraps an httpx.Client configured with the API base URL and default
request options. Network errors, timeouts and TLS are handled entirely
by httpx.
"""

from typing import Any

import httpx

# Options that httpx only accepts when constructing the client.
CLIENT_OPTIONS = frozenset(
    {
        "cert",
        "default_encoding",
        "event_hooks",
        "http1",
        "http2",
        "limits",
        "max_redirects",
        "mounts",
        "proxy",
        "transport",
        "trust_env",
        "verify",
    },
)

# Options accepted by httpx.Client.request.
REQUEST_OPTIONS = frozenset(
    {
        "auth",
        "content",
        "cookies",
        "data",
        "extensions",
        "files",
        "follow_redirects",
        "headers",
        "json",
        "params",
        "timeout",
    },
)

DEFAULT_HEADERS = {"Accept": "application/json"}


def _check_known(options: dict[str, Any], allowed: frozenset[str]) -> None:
    if unknown := sorted(set(options) - allowed):
        msg = f"Unknown options: {', '.join(unknown)}"
        raise ValueError(msg)


class HttpTransport:
    """Performs HTTP requests against the Kue API on behalf of the client.

    Request-level options given at construction (headers, params, auth,
    timeout, ...) are applied to every request. Options given for a single
    request replace defaults with the same top-level key and leave the
    others in place.
    """

    def __init__(
        self,
        base_url: str,
        options: dict[str, Any] | None = None,
        http_client: httpx.Client | None = None,
    ):
        """Initialize the transport.

        Args:
            base_url: Base URL of the Kue JSON API (e.g., "http://localhost:3000").
            options: Default options. Client-level httpx settings (proxy,
                verify, transport, ...) configure the underlying client;
                request options are used as per-request defaults.
            http_client: Preconfigured httpx client to use instead of
                creating one. Client-level options are ignored in that case.

        Raises:
            ValueError: If base_url is empty or options contain unknown keys.
        """
        if not base_url:
            msg = "base_url cannot be empty"
            raise ValueError(msg)

        options = dict(options or {})
        _check_known(options, CLIENT_OPTIONS | REQUEST_OPTIONS)
        client_options = {
            key: options.pop(key) for key in list(options) if key in CLIENT_OPTIONS
        }
        self._defaults = options

        if http_client is None:
            http_client = httpx.Client(
                base_url=base_url,
                headers=DEFAULT_HEADERS,
                **client_options,
            )
        else:
            # httpx fills in "Accept: */*" when no Accept header is given.
            for name, value in DEFAULT_HEADERS.items():
                if http_client.headers.get(name, "*/*") == "*/*":
                    http_client.headers[name] = value
        self._client = http_client

    @property
    def http_client(self) -> httpx.Client:
        """The underlying httpx client."""
        return self._client

    @property
    def defaults(self) -> dict[str, Any]:
        """Request options applied to every request."""
        return dict(self._defaults)

    def send(
        self,
        method: str,
        path: str,
        options: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send a request and return the response, whatever its status code.

        Args:
            method: HTTP method (e.g., "GET", "PUT").
            path: Path relative to the base URL.
            options: Request options merged over the defaults.

        Returns:
            The httpx response.

        Raises:
            ValueError: If options contain client-level settings or
                unknown keys.
            httpx.HTTPError: If the request could not be completed.
        """
        options = options or {}
        if invalid := sorted(CLIENT_OPTIONS.intersection(options)):
            msg = f"Client-level options cannot be set per request: {', '.join(invalid)}"
            raise ValueError(msg)
        _check_known(options, REQUEST_OPTIONS)

        return self._client.request(method, path, **{**self._defaults, **options})

    def close(self) -> None:
        """Close the underlying httpx client if open."""
        if not self._client.is_closed:
            self._client.close()
