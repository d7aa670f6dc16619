"""Retry transport for transient failures.

``RetryTransport`` re-issues a request up to ``RetryPolicy.max_attempts`` times
(first attempt included), waiting a fixed ``inter_attempt_delay`` between
attempts. The wait is the only place a request can be cancelled by its
``CancellationToken``.

## What gets retried

| Outcome of the previous attempt | Retried? |
|---------------------------------|----------|
| `httpx.TimeoutException` (connect/read/write/pool) | ✅ |
| Response 429 | ✅ |
| Response 500, 501, 502, 503, 504 | ✅ |
| Any other transport error (e.g. `httpx.ConnectError`) | ❌ raised immediately |
| Any other status (2xx, 3xx, 4xx, 505+) | ❌ returned immediately |

When the attempts run out the last outcome is handed back as it is: the last
response is returned, or the last exception re-raised. There is no separate
"retries exhausted" error; returned responses carry the number of attempts
made in ``response.extensions["retry_attempts"]``.

Every method is retried by default, including POST and PATCH. Set
``RetryPolicy(idempotent_only=True)`` to limit retries to idempotent methods.

## Example

```python
from transport_pipeline.transport.retry import RetryPolicy, RetryTransport
import httpx

retry_transport = RetryTransport(
    httpx.AsyncHTTPTransport(),
    RetryPolicy(max_attempts=3, inter_attempt_delay=0.5),
)

async with httpx.AsyncClient(transport=retry_transport) as client:
    response = await client.get("https://api.example.com")
```
"""

import logging
from dataclasses import dataclass

import httpx

from transport_pipeline.errors.exceptions import RequestCancelledError
from transport_pipeline.errors.handler import RETRY_ATTEMPTS_EXTENSION
from transport_pipeline.transport.cancellation import wait_between_attempts

logger = logging.getLogger(__name__)

# Rate limiting plus the 5xx range up to Gateway Timeout
RETRY_STATUS_CODES: frozenset[int] = frozenset([429, 500, 501, 502, 503, 504])

# Idempotent HTTP methods (per RFC 7231)
IDEMPOTENT_METHODS: frozenset[str] = frozenset(["HEAD", "GET", "PUT", "DELETE", "OPTIONS", "TRACE"])


@dataclass(frozen=True)
class RetryPolicy:
    """Immutable retry configuration for one ``RetryTransport``.

    Attributes:
        max_attempts: Total attempts including the first. Must be at least 1.
        inter_attempt_delay: Seconds to wait before each attempt after the first.
        idempotent_only: Only retry idempotent methods (GET, HEAD, PUT, DELETE,
            OPTIONS, TRACE).
    """

    max_attempts: int = 3
    inter_attempt_delay: float = 1.0
    idempotent_only: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.max_attempts, bool) or not isinstance(self.max_attempts, int) or self.max_attempts < 1:
            raise ValueError(f"max_attempts must be a positive integer, got {self.max_attempts!r}")
        if self.inter_attempt_delay < 0:
            raise ValueError(f"inter_attempt_delay must be non-negative, got {self.inter_attempt_delay!r}")

    def allows_retry_of(self, request: httpx.Request) -> bool:
        return not self.idempotent_only or request.method in IDEMPOTENT_METHODS


def is_retry_eligible(
    response: httpx.Response | None = None,
    error: Exception | None = None,
) -> bool:
    """Classify one attempt's outcome as transient or final.

    Args:
        response: The response the attempt produced, if any.
        error: The exception the attempt raised, if any.

    Returns:
        True for timeouts and for 429/500-504 responses, False otherwise.
    """
    if error is not None:
        return isinstance(error, httpx.TimeoutException)
    if response is not None:
        return response.status_code in RETRY_STATUS_CODES
    return False


def _describe(response: httpx.Response | None, error: Exception | None) -> str:
    if response is not None:
        return str(response.status_code)
    return f"{type(error).__name__}: {error}"


class RetryTransport(httpx.AsyncBaseTransport):
    """Transport that retries transient failures of the transport it wraps.

    Args:
        wrapped_transport: The transport each attempt is delegated to.
        policy: Attempt bound and delay. Defaults to ``RetryPolicy()``.
    """

    def __init__(
        self,
        wrapped_transport: httpx.AsyncBaseTransport,
        policy: RetryPolicy | None = None,
    ) -> None:
        self._wrapped_transport = wrapped_transport
        self.policy = policy or RetryPolicy()

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Send ``request``, retrying eligible outcomes.

        Returns:
            The first non-eligible response, or the last response once the
            attempts are spent.

        Raises:
            httpx.TransportError: The first non-eligible transport error, or the
                last timeout once the attempts are spent.
            RequestCancelledError: If the request's cancellation token fires
                while waiting between attempts.
        """
        policy = self.policy
        attempt = 0
        response: httpx.Response | None = None
        error: httpx.TransportError | None = None

        while attempt < policy.max_attempts:
            if attempt > 0:
                if not (policy.allows_retry_of(request) and is_retry_eligible(response, error)):
                    return self._finish(response, error, attempt)

                logger.warning(
                    f"Request {request.method} {request.url} failed with {_describe(response, error)}, "
                    f"retrying in {policy.inter_attempt_delay}s (attempt {attempt + 1}/{policy.max_attempts})"
                )

                # Release the superseded response before anything else can happen
                if response is not None:
                    await response.aclose()

                try:
                    await wait_between_attempts(request, policy.inter_attempt_delay)
                except RequestCancelledError as exc:
                    exc.request = request
                    exc.attempts = attempt
                    logger.info(f"Request {request.method} {request.url} {exc.reason} after {attempt} attempt(s)")
                    raise

            response, error = None, None
            try:
                response = await self._wrapped_transport.handle_async_request(request)
            except httpx.TransportError as exc:
                error = exc
            attempt += 1

        if attempt > 1 and is_retry_eligible(response, error):
            logger.warning(
                f"Request {request.method} {request.url} still failing with {_describe(response, error)} "
                f"after {attempt} attempts, giving up"
            )
        return self._finish(response, error, attempt)

    def _finish(
        self,
        response: httpx.Response | None,
        error: httpx.TransportError | None,
        attempts: int,
    ) -> httpx.Response:
        if error is not None:
            raise error
        assert response is not None
        response.extensions[RETRY_ATTEMPTS_EXTENSION] = attempts
        return response
