"""Request dispatch with response classification and retry for the ActorHub API."""

import asyncio
import sys
import threading
import time
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

import httpx

from actorhub._internal.dispatch.classify import classify_response
from actorhub._internal.dispatch.models import (
    JSON_CONTENT_TYPE,
    RequestEnvelope,
    attempt_count,
    backoff_delay,
)
from actorhub._internal.dispatch.redaction import summarize_payload
from actorhub._internal.http import create_async_http_client, create_http_client
from actorhub.config import ClientConfig
from actorhub.exceptions import ActorHubError, CancellationError, TransportError


class _DispatcherBase:
    """Envelope preparation and debug output shared by both dispatchers."""

    def __init__(self, config: ClientConfig) -> None:
        self._config = config

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._config.debug:
            print(f"[actorhub-sdk] {message}", file=sys.stderr)

    def _prepare(
        self,
        method: str,
        path: str,
        payload: Any,
        params: Mapping[str, str] | None,
    ) -> tuple[RequestEnvelope, bytes | None, dict[str, str]]:
        """Build the envelope and encode its body once for all attempts."""
        envelope = RequestEnvelope(
            method=method.upper(),
            path=path,
            payload=payload,
            params=dict(params) if params else None,
        )
        try:
            body = envelope.encode_body()
        except (TypeError, ValueError) as e:
            raise TransportError(f"Failed to encode request body: {e}") from e

        headers = {"Content-Type": JSON_CONTENT_TYPE} if body is not None else {}
        if body is not None and self._config.debug:
            self._log_debug(
                f"{envelope.method} {envelope.path} payload: "
                f"{summarize_payload(envelope.json_data())}"
            )
        return envelope, body, headers

    def _retry_delay(self, error: ActorHubError, attempt: int, attempts: int) -> float | None:
        """Backoff before the next attempt, or None if the error should surface now."""
        if not error.kind.retryable:
            self._log_debug(f"Request failed: {error}")
            return None
        if attempt + 1 >= attempts:
            self._log_debug(f"Giving up after {attempts} attempt(s): {error}")
            return None
        delay = backoff_delay(attempt)
        self._log_debug(f"Attempt {attempt + 1}/{attempts} failed ({error}), retrying in {delay:g}s")
        return delay


class Dispatcher(_DispatcherBase):
    """Sends API requests over a pooled httpx.Client.

    Each call runs a strictly sequential retry loop: rate-limit and server
    errors are retried with exponential backoff (capped at 10 seconds), every
    other outcome is returned or raised on first occurrence.

    Cancellation is cooperative through a ``threading.Event``: it is checked
    before every attempt and interrupts the backoff wait.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: httpx.BaseTransport | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            config: Client configuration.
            transport: Optional httpx transport override.
            sleep: Backoff wait used when no cancellation event is supplied.
        """
        super().__init__(config)
        self._http = create_http_client(config, transport=transport)
        self._sleep = sleep or time.sleep

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._http.close()

    def send(
        self,
        method: str,
        path: str,
        payload: Any = None,
        *,
        response_type: Any = None,
        params: Mapping[str, str] | None = None,
        cancel: threading.Event | None = None,
    ) -> Any:
        """Send a request, retrying transient failures.

        Args:
            method: HTTP method.
            path: Path relative to the configured base URL.
            payload: Optional request body (pydantic model or JSON-compatible data).
            response_type: Type to decode a successful body into.
            params: Optional query parameters.
            cancel: Optional event; once set, the call aborts with CancellationError.

        Returns:
            The decoded response body, or None when there is none.

        Raises:
            ActorHubError: The classified failure, a TransportError, or a
                CancellationError.
        """
        envelope, body, headers = self._prepare(method, path, payload, params)
        attempts = attempt_count(self._config.max_retries)

        attempt = 0
        while True:
            try:
                return self._send_once(envelope, body, headers, response_type, cancel)
            except ActorHubError as e:
                delay = self._retry_delay(e, attempt, attempts)
                if delay is None:
                    raise
            self._wait(delay, cancel)
            attempt += 1

    def _send_once(
        self,
        envelope: RequestEnvelope,
        body: bytes | None,
        headers: dict[str, str],
        response_type: Any,
        cancel: threading.Event | None,
    ) -> Any:
        if cancel is not None and cancel.is_set():
            raise CancellationError()

        self._log_debug(f"Sending {envelope.method} {envelope.path}")
        try:
            response = self._http.request(
                envelope.method,
                envelope.path,
                content=body,
                params=envelope.params,
                headers=headers,
            )
        except httpx.TransportError as e:
            raise TransportError(f"Failed to send request: {e}") from e

        self._log_debug(f"Received HTTP {response.status_code}")
        return classify_response(response, response_type)

    def _wait(self, delay: float, cancel: threading.Event | None) -> None:
        if cancel is None:
            self._sleep(delay)
        elif cancel.wait(delay):
            raise CancellationError("Request cancelled during retry backoff")


class AsyncDispatcher(_DispatcherBase):
    """Asyncio counterpart of Dispatcher over a pooled httpx.AsyncClient.

    A set ``asyncio.Event`` aborts both an in-flight request and a backoff
    wait with CancellationError. Cancelling the awaiting task itself
    propagates asyncio.CancelledError as usual.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Callable[[float], Awaitable[None]] | None = None,
    ) -> None:
        super().__init__(config)
        self._http = create_async_http_client(config, transport=transport)
        self._sleep = sleep or asyncio.sleep

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()

    async def send(
        self,
        method: str,
        path: str,
        payload: Any = None,
        *,
        response_type: Any = None,
        params: Mapping[str, str] | None = None,
        cancel: asyncio.Event | None = None,
    ) -> Any:
        """Send a request, retrying transient failures. See Dispatcher.send."""
        envelope, body, headers = self._prepare(method, path, payload, params)
        attempts = attempt_count(self._config.max_retries)

        attempt = 0
        while True:
            try:
                return await self._send_once(envelope, body, headers, response_type, cancel)
            except ActorHubError as e:
                delay = self._retry_delay(e, attempt, attempts)
                if delay is None:
                    raise
            await self._wait(delay, cancel)
            attempt += 1

    async def _send_once(
        self,
        envelope: RequestEnvelope,
        body: bytes | None,
        headers: dict[str, str],
        response_type: Any,
        cancel: asyncio.Event | None,
    ) -> Any:
        if cancel is not None and cancel.is_set():
            raise CancellationError()

        self._log_debug(f"Sending {envelope.method} {envelope.path}")
        request = self._http.request(
            envelope.method,
            envelope.path,
            content=body,
            params=envelope.params,
            headers=headers,
        )
        try:
            response = await self._until_cancelled(request, cancel)
        except httpx.TransportError as e:
            raise TransportError(f"Failed to send request: {e}") from e

        self._log_debug(f"Received HTTP {response.status_code}")
        return classify_response(response, response_type)

    async def _until_cancelled(
        self, request: Awaitable[httpx.Response], cancel: asyncio.Event | None
    ) -> httpx.Response:
        """Await the request unless the cancel event fires first."""
        if cancel is None:
            return await request

        request_task = asyncio.ensure_future(request)
        cancel_task = asyncio.ensure_future(cancel.wait())
        try:
            done, _ = await asyncio.wait(
                {request_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            for task in (request_task, cancel_task):
                if not task.done():
                    task.cancel()

        if request_task in done:
            return request_task.result()
        raise CancellationError()

    async def _wait(self, delay: float, cancel: asyncio.Event | None) -> None:
        if cancel is None:
            await self._sleep(delay)
            return
        try:
            await asyncio.wait_for(cancel.wait(), timeout=delay)
        except TimeoutError:
            return
        raise CancellationError("Request cancelled during retry backoff")
