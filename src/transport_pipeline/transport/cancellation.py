"""Cancellation signal carried on a request.

A ``CancellationToken`` travels in ``request.extensions["cancellation"]``. The
retry layer races its inter-attempt wait against it, so a caller can abandon a
request that is sleeping between attempts, either explicitly or by deadline.

Example:
    ```python
    token = CancellationToken(timeout=10.0)

    async with httpx.AsyncClient(transport=transport) as client:
        task = asyncio.create_task(
            client.get("https://api.example.com/items", extensions={"cancellation": token})
        )
        ...
        token.cancel()  # the pending retry wait raises RequestCancelledError
    ```
"""

import asyncio
import time

import httpx

from transport_pipeline.errors.exceptions import RequestCancelledError

CANCELLATION_EXTENSION = "cancellation"


class CancellationToken:
    """Explicit cancel signal plus an optional deadline.

    Args:
        timeout: Seconds from now after which the token counts as cancelled.
            None means no deadline.
    """

    def __init__(self, *, timeout: float | None = None) -> None:
        self._event = asyncio.Event()
        self._deadline = time.monotonic() + timeout if timeout is not None else None

    @classmethod
    def from_request(cls, request: httpx.Request) -> "CancellationToken | None":
        return request.extensions.get(CANCELLATION_EXTENSION)

    def attach(self, request: httpx.Request) -> httpx.Request:
        request.extensions[CANCELLATION_EXTENSION] = self
        return request

    def cancel(self) -> None:
        self._event.set()

    def remaining(self) -> float | None:
        """Seconds left until the deadline, or None without one."""
        if self._deadline is None:
            return None
        return max(self._deadline - time.monotonic(), 0.0)

    @property
    def cancelled(self) -> bool:
        return self._event.is_set() or self.remaining() == 0.0

    async def sleep(self, delay: float) -> None:
        """Wait ``delay`` seconds unless cancellation comes first.

        Raises:
            RequestCancelledError: If the token is cancelled, or its deadline
                passes, before the delay has elapsed.
        """
        if self._event.is_set():
            raise RequestCancelledError(reason="cancelled")

        remaining = self.remaining()
        if remaining == 0.0:
            raise RequestCancelledError("Request deadline exceeded", reason="deadline exceeded")
        deadline_first = remaining is not None and remaining < delay
        timeout = remaining if deadline_first else delay

        try:
            await asyncio.wait_for(self._event.wait(), timeout=timeout)
        except TimeoutError:
            if deadline_first:
                raise RequestCancelledError("Request deadline exceeded", reason="deadline exceeded") from None
            return

        raise RequestCancelledError(reason="cancelled")


async def wait_between_attempts(request: httpx.Request, delay: float) -> None:
    """Sleep before the next attempt, honouring the request's token if it has one."""
    token = CancellationToken.from_request(request)
    if token is None:
        await asyncio.sleep(delay)
        return
    await token.sleep(delay)
