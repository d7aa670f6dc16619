"""Transport Pipeline - composable outbound HTTP transports for httpx.

This library wraps a base httpx transport in independent layers:
- Access logging of every exchange (method, URL, status, duration)
- Credential injection (basic, bearer, custom header)
- Retry of timeouts and 429/5xx responses with a fixed, cancellable delay

Example:
    ```python
    from transport_pipeline import BasicCredentials, RetryPolicy, create_transport_stack

    transport = create_transport_stack(
        credentials=BasicCredentials(username="user", password="pass"),
        retry_policy=RetryPolicy(max_attempts=3, inter_attempt_delay=1.0),
    )

    async with httpx.AsyncClient(transport=transport) as client:
        response = await client.get("https://api.example.com")
    ```
"""

from transport_pipeline.auth import BasicCredentials, BearerToken, HeaderCredentials
from transport_pipeline.client import create_client
from transport_pipeline.config import PipelineSettings
from transport_pipeline.errors import RequestCancelledError, raise_for_status
from transport_pipeline.transport import (
    AuthTransport,
    CancellationToken,
    LoggingTransport,
    RetryPolicy,
    RetryTransport,
    compose,
    create_transport_stack,
)

__version__ = "0.1.0"

__all__ = [
    "AuthTransport",
    "BasicCredentials",
    "BearerToken",
    "CancellationToken",
    "HeaderCredentials",
    "LoggingTransport",
    "PipelineSettings",
    "RequestCancelledError",
    "RetryPolicy",
    "RetryTransport",
    "__version__",
    "compose",
    "create_client",
    "create_transport_stack",
    "raise_for_status",
]
