"""HTTP adapter – the send pipeline.

Turns validated bodies into requests against the single and batch
endpoints, wraps every HTTP call in the client's :class:`RetryPolicy`, and
maps the outcome to ``Ok(SendReceipt)`` / ``Err(SendError)``.

Per attempt: ``Pending -> InFlight -> Success | PermanentFailure |
RetryableFailure -> (backoff) -> InFlight``. Only ``transient`` errors are
retried, so 4xx responses other than 429 surface on the first attempt.
"""
from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from postmark_client.adapters.http import wire
from postmark_client.application.email import OutboundEmailBody, SendReceipt, partition
from postmark_client.kernel.errors import AuthenticationError, PayloadError, SendError, SendTimeoutError
from postmark_client.kernel.types import Err, Ok, Result
from postmark_client.observability.logging import get_logger
from postmark_client.resilience.timeouts import TimeoutPolicy

if TYPE_CHECKING:
    from postmark_client.client import Client

logger = get_logger(__name__)


async def send(
    client: Client,
    body: OutboundEmailBody,
    *,
    deadline: float | None = None,
) -> Result[SendReceipt, SendError]:
    """Send one message through the single-send endpoint.

    *deadline* (seconds) bounds the whole call, retries and backoff included.
    """
    log = logger.bind(endpoint=wire.SINGLE_PATH)
    try:
        payload = wire.encode_body(body, client.sender)
    except PayloadError as exc:
        log.warning("postmark.send.rejected", **exc.log_fields())
        return Err(exc)

    log = log.bind(recipients=len(body.all_recipients()), attachments=len(body.attachments))

    async def attempt() -> SendReceipt:
        response = await client.http.post_json(wire.SINGLE_PATH, payload, headers=client.request_headers())
        return wire.decode_single(response)

    log.debug("postmark.send.start")
    try:
        receipt = await TimeoutPolicy(deadline).execute(lambda: client.retry_policy.execute(attempt))
    except SendError as exc:
        log.warning("postmark.send.failed", **exc.log_fields())
        return Err(exc)
    log.info("postmark.send.ok", message_id=receipt.message_id)
    return Ok(receipt)


async def send_batch(
    client: Client,
    bodies: Iterable[OutboundEmailBody],
    *,
    deadline: float | None = None,
) -> Result[list[Result[SendReceipt, SendError]], SendError]:
    """Send *bodies* through the batch endpoint, one request per chunk.

    Returns one result per input body, in input order, whatever order the
    chunks complete in. A body that cannot be encoded, or that the API
    rejects, fails on its own. A chunk whose request fails after retries
    fails all of its bodies. An authentication failure stops dispatching and
    becomes the outer ``Err``. When *deadline* expires, bodies without an
    outcome yet fail with ``SendTimeoutError`` while finished ones keep theirs.
    """
    items = list(bodies)
    results: list[Result[SendReceipt, SendError] | None] = [None] * len(items)

    encoded: list[tuple[int, dict[str, Any]]] = []
    for index, body in enumerate(items):
        try:
            encoded.append((index, wire.encode_body(body, client.sender)))
        except PayloadError as exc:
            results[index] = Err(exc)

    chunks = partition(encoded, client.batch_size)
    semaphore = asyncio.Semaphore(client.batch_concurrency)
    aborted: list[AuthenticationError] = []

    async def dispatch(number: int, chunk: tuple[tuple[int, dict[str, Any]], ...]) -> None:
        async with semaphore:
            if aborted:
                return
            log = logger.bind(endpoint=wire.BATCH_PATH, chunk=number, size=len(chunk))
            payload = [message for _, message in chunk]

            async def attempt() -> list[Result[SendReceipt, SendError]]:
                response = await client.http.post_json(wire.BATCH_PATH, payload, headers=client.request_headers())
                return wire.decode_batch(response, len(chunk))

            try:
                outcomes = await client.retry_policy.execute(attempt)
            except AuthenticationError as exc:
                log.error("postmark.batch.unauthorized", **exc.log_fields())
                aborted.append(exc)
                return
            except SendError as exc:
                log.warning("postmark.batch.chunk_failed", **exc.log_fields())
                outcomes = [Err(exc) for _ in chunk]
            else:
                log.info("postmark.batch.chunk", failed=sum(1 for o in outcomes if o.is_err()))
            for (index, _), outcome in zip(chunk, outcomes):
                results[index] = outcome

    async def run() -> None:
        async with asyncio.TaskGroup() as group:
            for number, chunk in enumerate(chunks):
                group.create_task(dispatch(number, chunk))

    try:
        await TimeoutPolicy(deadline).execute(run)
    except SendTimeoutError as exc:
        logger.warning("postmark.batch.deadline", **exc.log_fields())
        results = [r if r is not None else Err(exc) for r in results]

    if aborted:
        return Err(aborted[0])
    # Every slot is filled once dispatch completed without an abort.
    return Ok(list(results))  # type: ignore[arg-type]


__all__ = ["send", "send_batch"]
