"""Turn pipeline responses into exceptions on the caller's side.

The retry layer returns the last failing response once its attempts are spent,
so a 503 handed back to the caller may be the result of one attempt or of
several. ``raise_for_status`` reads the attempt count the retry layer leaves on
the response and carries it on the raised exception.
"""

import httpx

from transport_pipeline.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
)

RETRY_ATTEMPTS_EXTENSION = "retry_attempts"

_EXCEPTION_MAP: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


def attempts_made(response: httpx.Response) -> int | None:
    """Return how many attempts produced ``response``.

    Returns None when the response did not pass through a retry layer.
    """
    return response.extensions.get(RETRY_ATTEMPTS_EXTENSION)


def raise_for_status(response: httpx.Response) -> None:
    """Raise appropriate exception for HTTP error responses.

    Args:
        response: HTTP response object

    Raises:
        APIError subclass based on status code
    """
    if response.is_success:
        return

    status_code = response.status_code

    if status_code in _EXCEPTION_MAP:
        exc_class = _EXCEPTION_MAP[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = APIError

    attempts = attempts_made(response)
    message = f"HTTP {status_code} {response.reason_phrase}".rstrip()
    if attempts is not None and attempts > 1:
        message += f" after {attempts} attempts"

    if exc_class is RateLimitError:
        retry_after = None
        if "retry-after" in response.headers:
            try:
                retry_after = int(response.headers["retry-after"])
            except (ValueError, TypeError):
                # HTTP-date form is not converted here
                retry_after = None
        raise RateLimitError(
            message,
            retry_after=retry_after,
            status_code=status_code,
            response=response,
            attempts=attempts,
        )

    raise exc_class(
        message,
        status_code=status_code,
        response=response,
        attempts=attempts,
    )
