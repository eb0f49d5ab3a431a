"""
HTTP client for the admin backend.

Wraps a single httpx.Client:
- CSRF headers are added by a request hook installed once at construction
- Responses are decoded from JSON
- Any non-2xx response or request failure (transport, decoding,
  redirects) becomes an ApiError, is sent to the ErrorReporter, then
  raised to the caller
"""
import logging
from typing import Any, Optional

import httpx

from ..config.settings import Settings, get_settings
from .errors import ApiError, ErrorReporter


logger = logging.getLogger(__name__)


class CsrfHeaders:
    """Request hook adding the AJAX marker and the CSRF header/token pair."""

    def __init__(self, header: str, token: Optional[str]):
        self.header = header
        self.token = token

    def __call__(self, request: httpx.Request) -> None:
        request.headers['X-Requested-With'] = 'XMLHttpRequest'
        if self.header and self.token:
            request.headers[self.header] = self.token


class HttpClient:
    """
    Uniform get/post/put/delete access to the admin REST API.

    An injected httpx.Client is taken over: its CSRF hook is replaced by
    one built from `settings`, so the last HttpClient wrapping it wins.
    The caller keeps ownership and closes it.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        reporter: Optional[ErrorReporter] = None,
        client: Optional[httpx.Client] = None
    ):
        self.settings = settings or get_settings()
        self.reporter = reporter or ErrorReporter()

        self._owns_client = client is None
        if client is None:
            client = httpx.Client(
                base_url=self.settings.api_base_url,
                timeout=self.settings.timeout,
            )
        hooks = [hook for hook in client.event_hooks['request'] if not isinstance(hook, CsrfHeaders)]
        hooks.append(CsrfHeaders(self.settings.csrf_header, self.settings.csrf_token))
        client.event_hooks['request'] = hooks
        self._client = client

    def get(self, path: str, params: Optional[dict] = None) -> Any:
        return self.request('GET', path, params=params)

    def post(self, path: str, json: Any = None) -> Any:
        return self.request('POST', path, json=json)

    def put(self, path: str, json: Any = None) -> Any:
        return self.request('PUT', path, json=json)

    def delete(self, path: str) -> Any:
        return self.request('DELETE', path)

    def request(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None,
        json: Any = None
    ) -> Any:
        """Send a request and return the decoded body, or report and raise ApiError."""
        logger.debug("%s %s", method, path)
        try:
            response = self._client.request(method, path, params=params, json=json)
        except httpx.RequestError as e:
            error = ApiError(str(e) or type(e).__name__, method=method, url=path)
            self.reporter.handle(error)
            raise error from e

        if not response.is_success:
            error = self._error_from_response(method, path, response)
            self.reporter.handle(error)
            raise error

        return self._decode(response)

    def close(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> 'HttpClient':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def _error_from_response(self, method: str, path: str, response: httpx.Response) -> ApiError:
        payload = self._decode(response)

        if isinstance(payload, dict) and payload.get('message'):
            message = str(payload['message'])
        elif isinstance(payload, str) and payload.strip():
            message = payload.strip()
        else:
            message = response.reason_phrase or f"HTTP {response.status_code}"

        return ApiError(
            message,
            status_code=response.status_code,
            method=method,
            url=path,
            payload=payload,
        )
