"""Structured exceptions for pipeline and API errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class PipelineError(Exception):
    """Base exception for errors raised by the transport pipeline itself."""

    pass


class RequestCancelledError(PipelineError):
    """Raised when a request is cancelled while waiting between attempts.

    This is distinct from ``httpx.TimeoutException``: it is raised by the
    pipeline, never by the network, and is never retried.

    Attributes:
        request: The request that was cancelled.
        reason: ``"cancelled"`` or ``"deadline exceeded"``.
        attempts: Attempts made before cancellation was observed.
    """

    def __init__(
        self,
        message: str = "Request cancelled",
        *,
        request: "httpx.Request | None" = None,
        reason: str = "cancelled",
        attempts: int | None = None,
    ):
        super().__init__(message)
        self.request = request
        self.reason = reason
        self.attempts = attempts


class APIError(Exception):
    """Base exception for API errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        attempts: int | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.attempts = attempts

    @property
    def retried(self) -> bool:
        """Whether the failing response was produced after more than one attempt."""
        return self.attempts is not None and self.attempts > 1


class ClientError(APIError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """5xx server errors."""

    pass
