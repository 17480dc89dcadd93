"""Client – process-wide configuration shared by every send.

Usage::

    client = (
        Client.builder()
        .sender("no-reply@example.com")
        .auth_token(os.environ["POSTMARK_SERVER_TOKEN"])
        .build()
        .unwrap()
    )
    async with client:
        result = await client.send(body)
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any
from urllib.parse import urlsplit

import httpx

from postmark_client.adapters.http import HttpxHttpClient, pipeline, wire
from postmark_client.application.email import MAX_BATCH_SIZE, OutboundEmailBody, SendReceipt
from postmark_client.config.settings import DEFAULT_BASE_URL, PostmarkSettings
from postmark_client.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from postmark_client.kernel.errors import SendError
from postmark_client.kernel.types import EmailAddress, Err, Ok, Result, SecretToken
from postmark_client.observability.logging import get_logger
from postmark_client.resilience.retry import EqualJitter, ExponentialBackoff, RetryPolicy

DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_BACKOFF_BASE_SECONDS = 0.5
DEFAULT_BACKOFF_MAX_SECONDS = 8.0

logger = get_logger(__name__)


class Client:
    """Immutable Postmark client; safe to share across concurrent sends.

    Build it with :meth:`builder`. The only mutable resource inside is the
    httpx connection pool, whose concurrency httpx manages.
    """

    __slots__ = (
        "_base_url",
        "_sender",
        "_auth_token",
        "_timeout",
        "_max_retries",
        "_retry_policy",
        "_batch_size",
        "_batch_concurrency",
        "_http",
    )

    def __init__(
        self,
        *,
        base_url: str,
        sender: EmailAddress,
        auth_token: SecretToken,
        timeout: float,
        retry_policy: RetryPolicy,
        batch_size: int,
        batch_concurrency: int,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url
        self._sender = sender
        self._auth_token = auth_token
        self._timeout = timeout
        self._max_retries = retry_policy.max_attempts - 1
        self._retry_policy = retry_policy
        self._batch_size = batch_size
        self._batch_concurrency = batch_concurrency
        self._http = HttpxHttpClient(base_url, timeout, client=http_client)

    @staticmethod
    def builder() -> ClientBuilder:
        return ClientBuilder()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def sender(self) -> EmailAddress:
        return self._sender

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def max_retries(self) -> int:
        return self._max_retries

    @property
    def retry_policy(self) -> RetryPolicy:
        return self._retry_policy

    @property
    def batch_size(self) -> int:
        return self._batch_size

    @property
    def batch_concurrency(self) -> int:
        return self._batch_concurrency

    @property
    def http(self) -> HttpxHttpClient:
        return self._http

    def request_headers(self) -> dict[str, str]:
        """Headers for one API call; the only place the token is exposed."""
        return {
            "Accept": "application/json",
            wire.TOKEN_HEADER: self._auth_token.expose(),
        }

    async def send(
        self,
        body: OutboundEmailBody,
        *,
        deadline: float | None = None,
    ) -> Result[SendReceipt, SendError]:
        return await pipeline.send(self, body, deadline=deadline)

    async def send_batch(
        self,
        bodies: Iterable[OutboundEmailBody],
        *,
        deadline: float | None = None,
    ) -> Result[list[Result[SendReceipt, SendError]], SendError]:
        return await pipeline.send_batch(self, bodies, deadline=deadline)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return (
            f"Client(base_url={self._base_url!r}, sender={str(self._sender)!r}, "
            f"auth_token={self._auth_token!r}, timeout={self._timeout}, max_retries={self._max_retries})"
        )


class ClientBuilder:
    """Collects client configuration; ``build()`` validates it once."""

    def __init__(self) -> None:
        self._base_url = DEFAULT_BASE_URL
        self._sender: EmailAddress | None = None
        self._auth_token: SecretToken | None = None
        self._timeout = DEFAULT_TIMEOUT_SECONDS
        self._max_retries = DEFAULT_MAX_RETRIES
        self._backoff_base = DEFAULT_BACKOFF_BASE_SECONDS
        self._backoff_max = DEFAULT_BACKOFF_MAX_SECONDS
        self._retry_policy: RetryPolicy | None = None
        self._batch_size = MAX_BATCH_SIZE
        self._batch_concurrency = 1
        self._http_client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(cls, settings: PostmarkSettings) -> ClientBuilder:
        logger.debug("postmark.settings.loaded", **settings.safe_dict())
        return (
            cls()
            .base_url(settings.base_url)
            .sender(settings.sender)
            .auth_token(settings.server_token)
            .timeout(settings.timeout_seconds)
            .max_retries(settings.max_retries)
            .backoff(settings.backoff_base_seconds, settings.backoff_max_seconds)
            .batch_concurrency(settings.batch_concurrency)
        )

    def base_url(self, url: str | httpx.URL) -> ClientBuilder:
        self._base_url = str(url)
        return self

    def sender(self, sender: EmailAddress | str) -> ClientBuilder:
        self._sender = EmailAddress.coerce(sender)
        return self

    def auth_token(self, token: SecretToken | str) -> ClientBuilder:
        self._auth_token = token if isinstance(token, SecretToken) else SecretToken(token)
        return self

    def timeout(self, seconds: float) -> ClientBuilder:
        self._timeout = seconds
        return self

    def max_retries(self, retries: int) -> ClientBuilder:
        self._max_retries = retries
        return self

    def backoff(self, base_delay: float, max_delay: float) -> ClientBuilder:
        self._backoff_base = base_delay
        self._backoff_max = max_delay
        return self

    def retry_policy(self, policy: RetryPolicy) -> ClientBuilder:
        """Replace the policy derived from max_retries/backoff entirely."""
        self._retry_policy = policy
        return self

    def batch_size(self, size: int) -> ClientBuilder:
        self._batch_size = size
        return self

    def batch_concurrency(self, limit: int) -> ClientBuilder:
        self._batch_concurrency = limit
        return self

    def http_client(self, client: httpx.AsyncClient) -> ClientBuilder:
        """Use a caller-owned httpx client (its pool is not closed by the Client)."""
        self._http_client = client
        return self

    def _validate(self) -> None:
        if urlsplit(self._base_url).scheme not in ("http", "https"):
            raise InvalidSettingValueError("base_url", self._base_url, "must be an http(s) URL")
        if self._sender is None:
            raise MissingRequiredSettingError("sender")
        if self._auth_token is None:
            raise MissingRequiredSettingError("auth_token")
        if self._timeout <= 0:
            raise InvalidSettingValueError("timeout", self._timeout, "must be positive")
        if self._max_retries < 0:
            raise InvalidSettingValueError("max_retries", self._max_retries, "must not be negative")
        if not 0 <= self._backoff_base <= self._backoff_max:
            raise InvalidSettingValueError("backoff", (self._backoff_base, self._backoff_max), "need 0 <= base <= max")
        if not 1 <= self._batch_size <= MAX_BATCH_SIZE:
            raise InvalidSettingValueError("batch_size", self._batch_size, f"must be between 1 and {MAX_BATCH_SIZE}")
        if self._batch_concurrency < 1:
            raise InvalidSettingValueError("batch_concurrency", self._batch_concurrency, "must be at least 1")

    def build(self) -> Result[Client, ConfigError]:
        try:
            self._validate()
        except ConfigError as exc:
            logger.warning("postmark.client.invalid_config", **exc.log_fields())
            return Err(exc)
        policy = self._retry_policy or RetryPolicy(
            max_attempts=self._max_retries + 1,
            backoff=ExponentialBackoff(self._backoff_base, self._backoff_max),
            jitter=EqualJitter(),
            retryable_exceptions=(SendError,),
        )
        return Ok(
            Client(
                base_url=self._base_url.rstrip("/"),
                sender=self._sender,  # type: ignore[arg-type]
                auth_token=self._auth_token,  # type: ignore[arg-type]
                timeout=self._timeout,
                retry_policy=policy,
                batch_size=self._batch_size,
                batch_concurrency=self._batch_concurrency,
                http_client=self._http_client,
            )
        )


__all__ = ["Client", "ClientBuilder"]
