"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from postmark_client.kernel.errors import SendError, SendTimeoutError, TransportError


class HttpxHttpClient:
    """Thin async httpx wrapper that maps transport failures to ``SendError``.

    HTTP status codes are *not* interpreted here; the send pipeline decides
    what a response means. An injected ``httpx.AsyncClient`` belongs to the
    caller and is not closed by :meth:`aclose`.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> "HttpxHttpClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def post_json(self, path: str, payload: Any, *, headers: dict[str, str]) -> httpx.Response:
        url = f"{self._base_url}{path}"
        try:
            return await self._client.post(url, json=payload, headers=headers, timeout=self._timeout)
        except httpx.TimeoutException as exc:
            raise SendTimeoutError(
                f"HTTP request timed out after {self._timeout}s: POST {path}",
                timeout_seconds=self._timeout,
                cause=exc,
            ) from exc
        except httpx.TransportError as exc:
            raise TransportError(f"HTTP transport failure on POST {path}: {exc}", cause=exc) from exc
        except httpx.HTTPError as exc:
            raise SendError(f"HTTP failure on POST {path}: {exc}", cause=exc) from exc


HttpClient = HttpxHttpClient

__all__ = ["HttpClient", "HttpxHttpClient"]
