"""Tests for structured pipeline and API exceptions."""

import httpx
import pytest
from httpx import Response

from transport_pipeline.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    PipelineError,
    RateLimitError,
    RequestCancelledError,
    ServerError,
    UnauthorizedError,
)


@pytest.mark.unit
def test_api_error_instantiation():
    """Test APIError can be instantiated with all attributes."""
    response = Response(status_code=500)

    error = APIError(
        message="Test error",
        status_code=500,
        response=response,
        attempts=3,
    )

    assert str(error) == "Test error"
    assert error.status_code == 500
    assert error.response == response
    assert error.attempts == 3
    assert error.retried


@pytest.mark.unit
def test_api_error_defaults():
    error = APIError("Test error")

    assert error.status_code is None
    assert error.response is None
    assert error.attempts is None
    assert not error.retried


@pytest.mark.unit
def test_exception_inheritance():
    """Test exception inheritance chain."""
    assert issubclass(ClientError, APIError)

    assert issubclass(BadRequestError, ClientError)
    assert issubclass(UnauthorizedError, ClientError)
    assert issubclass(ForbiddenError, ClientError)
    assert issubclass(NotFoundError, ClientError)
    assert issubclass(ConflictError, ClientError)
    assert issubclass(RateLimitError, ClientError)

    assert issubclass(ServerError, APIError)

    assert issubclass(RequestCancelledError, PipelineError)


@pytest.mark.unit
def test_cancellation_is_not_a_transport_timeout():
    """Cancellation must never be mistaken for a retryable timeout."""
    assert not issubclass(RequestCancelledError, httpx.TimeoutException)
    assert not issubclass(RequestCancelledError, httpx.TransportError)


@pytest.mark.unit
def test_request_cancelled_error_defaults():
    error = RequestCancelledError()

    assert str(error) == "Request cancelled"
    assert error.reason == "cancelled"
    assert error.request is None
    assert error.attempts is None


@pytest.mark.unit
def test_request_cancelled_error_attributes():
    request = httpx.Request("GET", "https://api.example.com/test")
    error = RequestCancelledError("Request deadline exceeded", request=request, reason="deadline exceeded", attempts=2)

    assert error.request is request
    assert error.reason == "deadline exceeded"
    assert error.attempts == 2


@pytest.mark.unit
def test_rate_limit_error_with_retry_after():
    """Test RateLimitError stores retry_after value."""
    error = RateLimitError(message="Too many requests", retry_after=60)

    assert str(error) == "Too many requests"
    assert error.retry_after == 60


@pytest.mark.unit
def test_rate_limit_error_without_retry_after():
    """Test RateLimitError without retry_after value."""
    error = RateLimitError(message="Too many requests")

    assert str(error) == "Too many requests"
    assert error.retry_after is None
