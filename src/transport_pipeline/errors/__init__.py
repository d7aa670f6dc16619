"""Error types for the transport pipeline and caller-side status handling."""

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
from transport_pipeline.errors.handler import RETRY_ATTEMPTS_EXTENSION, attempts_made, raise_for_status

__all__ = [
    "RETRY_ATTEMPTS_EXTENSION",
    "APIError",
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "ForbiddenError",
    "NotFoundError",
    "PipelineError",
    "RateLimitError",
    "RequestCancelledError",
    "ServerError",
    "UnauthorizedError",
    "attempts_made",
    "raise_for_status",
]
