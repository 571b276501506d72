"""HTTP client helper."""

from __future__ import annotations

import asyncio
from typing import Any, Dict, Optional

import aiohttp

from ..core.exceptions import (
    PermanentCallFailure,
    ProviderError,
    RateLimitError,
    TransientCallFailure,
)

# Error bodies are echoed into exception messages, truncated to this length
MAX_ERROR_BODY = 500


def error_for_status(status: int, body: str, retry_after: Optional[str] = None) -> ProviderError:
    """Map an HTTP error status onto the exception taxonomy."""
    detail = body[:MAX_ERROR_BODY]
    if status == 429:
        try:
            wait = int(retry_after) if retry_after is not None else 60
        except ValueError:
            wait = 60
        return RateLimitError(f"Rate limited (HTTP 429): {detail}", retry_after=wait)
    if status == 408 or status >= 500:
        return TransientCallFailure(
            f"Transient failure (HTTP {status}): {detail}", status_code=status
        )
    return PermanentCallFailure(f"Request rejected (HTTP {status}): {detail}", status_code=status)


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/") if base_url else base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = dict(headers or {})
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    async def get(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """GET request returning the decoded JSON body.

        Raises:
            RateLimitError: On HTTP 429
            TransientCallFailure: On 408, 5xx, connection errors and timeouts
            PermanentCallFailure: On any other 4xx
        """
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            url = f"{self.base_url}{url}"

        try:
            async with self.session.get(url, params=params, headers=headers) as response:
                if response.status >= 400:
                    body = await response.text()
                    raise error_for_status(
                        response.status, body, response.headers.get("Retry-After")
                    )
                return await response.json(content_type=None)
        except asyncio.TimeoutError as e:
            raise TransientCallFailure(f"Request timed out: {url}") from e
        except aiohttp.ClientError as e:
            raise TransientCallFailure(f"Connection error: {e}") from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "HTTPClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
