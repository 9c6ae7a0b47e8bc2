"""Rate-limited HTTP client for the Todoist REST API."""

from __future__ import annotations

import logging
import time
from typing import Any, Optional

import httpx

from todoist_bridge.api.errors import (
    InvalidRequestError,
    MalformedResponse,
    RateLimitExceeded,
    RemoteAPIError,
    TransportError,
)
from todoist_bridge.api.rate_limiter import TokenBucket

DEFAULT_BASE_URL = "https://api.todoist.com/rest/v2"

logger = logging.getLogger(__name__)


class APIClient:
    """Executes single authenticated, rate-gated requests against Todoist.

    Args:
        token: Todoist personal API token.
        base_url: Override API base URL (useful for testing).
        timeout: Per-request timeout in seconds; ``None`` waits indefinitely.
        rate_limiter: Token bucket shared by every request of this client.
            Pass the same bucket to several clients to share one quota.
        transport: Optional httpx transport (tests use ``httpx.MockTransport``).
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        rate_limiter: Optional[TokenBucket] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not token:
            raise InvalidRequestError("A Todoist API token is required")
        self._token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.rate_limiter = rate_limiter or TokenBucket()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_headers(self, extra: Optional[dict[str, str]] = None) -> httpx.Headers:
        """Build request headers. The client's own token always wins."""
        headers = httpx.Headers({"Content-Type": "application/json"})
        if extra:
            headers.update(extra)
        headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> APIClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def execute(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Any] = None,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """Make one API call and return the decoded body.

        A 204 response yields an empty dict. Raises :class:`RateLimitExceeded`
        without touching the network when the bucket is empty,
        :class:`RemoteAPIError` for non-2xx statuses,
        :class:`MalformedResponse` when a 2xx body is not JSON and
        :class:`TransportError` for network failures. Nothing is retried.
        """
        # The bucket logs the denial itself
        if not self.rate_limiter.try_consume(1):
            raise RateLimitExceeded()

        url = path if path.startswith("/") else f"/{path}"
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        client = self._get_client()
        start = time.monotonic()
        try:
            response = await client.request(
                method=method,
                url=url,
                json=json,
                params=params or None,
                headers=self._get_headers(headers),
            )
        except httpx.RequestError as e:
            logger.error("transport failure: %s %s - %s", method, url, e)
            raise TransportError(f"Request to {url} failed: {e}") from e

        elapsed_ms = (time.monotonic() - start) * 1000
        logger.debug(
            "%s %s -> %d (%.1fms)", method, url, response.status_code, elapsed_ms
        )

        if not response.is_success:
            logger.warning(
                "API error: %s %s -> %d", method, url, response.status_code
            )
            raise RemoteAPIError(response.status_code, response.text)

        if response.status_code == 204:
            return {}

        try:
            return response.json()
        except ValueError as e:
            logger.error("malformed JSON from %s %s", method, url)
            raise MalformedResponse(response.status_code, response.text) from e

    async def get(self, path: str, *, params: Optional[dict[str, Any]] = None) -> Any:
        """Make a GET request."""
        return await self.execute("GET", path, params=params)

    async def post(self, path: str, *, json: Optional[Any] = None) -> Any:
        """Make a POST request."""
        return await self.execute("POST", path, json=json)

    async def delete(self, path: str) -> Any:
        """Make a DELETE request."""
        return await self.execute("DELETE", path)
