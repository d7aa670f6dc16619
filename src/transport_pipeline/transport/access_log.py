"""Access logging transport.

``LoggingTransport`` writes one log record per request it delegates: method,
URL, status code, reason phrase and duration. The same fields are attached to
the record as attributes (``http_method``, ``http_url``, ``http_status_code``,
``http_reason_phrase``, ``duration_ms``) for structured formatters.

Example:
    ```python
    import logging

    transport = LoggingTransport(
        httpx.AsyncHTTPTransport(),
        logger=logging.getLogger("myapp.http"),
    )
    # INFO myapp.http: GET https://api.example.com/items 200 OK, duration: 41.20ms
    ```

Headers are never logged, so injected credentials stay out of the log.
"""

import logging
import time

import httpx

# Default sink when no logger is injected
DEFAULT_LOGGER = logging.getLogger(__name__)


class LoggingTransport(httpx.AsyncBaseTransport):
    """Transport that logs every exchange of the transport it wraps.

    Args:
        wrapped_transport: The transport requests are delegated to.
        logger: Where records go. Defaults to this module's logger.
        level: Level for completed exchanges. Failures are logged at WARNING.
        log_start: Also log a ``start`` line before delegating, pairing with
            the summary line as its finish.
    """

    def __init__(
        self,
        wrapped_transport: httpx.AsyncBaseTransport,
        *,
        logger: logging.Logger | None = None,
        level: int = logging.INFO,
        log_start: bool = False,
    ) -> None:
        self._wrapped_transport = wrapped_transport
        self.logger = logger or DEFAULT_LOGGER
        self.level = level
        self.log_start = log_start

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        method = request.method
        url = str(request.url)

        if self.log_start:
            self.logger.log(self.level, f"start {method} {url}", extra={"http_method": method, "http_url": url})

        start = time.perf_counter()
        try:
            response = await self._wrapped_transport.handle_async_request(request)
        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            self.logger.warning(
                f"{method} {url} failed ({type(exc).__name__}), duration: {duration_ms:.2f}ms",
                extra=_fields(method, url, None, None, duration_ms),
            )
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        status_code = response.status_code
        reason_phrase = response.reason_phrase
        self.logger.log(
            self.level,
            f"{method} {url} {status_code} {reason_phrase}, duration: {duration_ms:.2f}ms",
            extra=_fields(method, url, status_code, reason_phrase, duration_ms),
        )
        return response


def _fields(
    method: str,
    url: str,
    status_code: int | None,
    reason_phrase: str | None,
    duration_ms: float,
) -> dict[str, object]:
    return {
        "http_method": method,
        "http_url": url,
        "http_status_code": status_code,
        "http_reason_phrase": reason_phrase,
        "duration_ms": duration_ms,
    }
