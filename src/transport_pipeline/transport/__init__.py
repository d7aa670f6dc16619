"""Transport layer components for composable HTTP middleware.

Each layer is an ``httpx.AsyncBaseTransport`` holding the transport it wraps,
so any subset can be stacked in any order and the result handed to
``httpx.AsyncClient(transport=...)``.

Modules:
    access_log: Per-exchange access logging
    auth: Credential header injection
    retry: Bounded retry with a fixed delay
    cancellation: Cancellation token raced against the retry wait
    factory: Composition helpers and the common transport stack

Example:
    ```python
    from transport_pipeline.transport import RetryPolicy, create_transport_stack

    transport = create_transport_stack(
        retry_policy=RetryPolicy(max_attempts=3, inter_attempt_delay=1.0),
        log_each_attempt=True,
    )
    ```
"""

from transport_pipeline.transport.access_log import LoggingTransport
from transport_pipeline.transport.auth import AuthTransport
from transport_pipeline.transport.cancellation import CancellationToken
from transport_pipeline.transport.factory import (
    auth_layer,
    compose,
    create_transport_stack,
    logging_layer,
    retry_layer,
)
from transport_pipeline.transport.retry import RetryPolicy, RetryTransport, is_retry_eligible

__all__ = [
    "AuthTransport",
    "CancellationToken",
    "LoggingTransport",
    "RetryPolicy",
    "RetryTransport",
    "auth_layer",
    "compose",
    "create_transport_stack",
    "is_retry_eligible",
    "logging_layer",
    "retry_layer",
]
