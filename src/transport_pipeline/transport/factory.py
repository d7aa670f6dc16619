"""Assemble decorator layers around a base transport.

Layers are listed outermost first, the order requests travel through them.
Order changes behaviour: with retry outside logging every attempt is logged;
with logging outside retry only the final outcome is.

Example:
    ```python
    from transport_pipeline.transport.factory import auth_layer, compose, logging_layer, retry_layer

    transport = compose(
        httpx.AsyncHTTPTransport(),
        retry_layer(RetryPolicy(max_attempts=3, inter_attempt_delay=0.5)),
        logging_layer(),
        auth_layer(BearerToken(token="abc123")),
    )
    ```
"""

import logging
from collections.abc import Callable

import httpx

from transport_pipeline.auth.credentials import Credentials
from transport_pipeline.transport.access_log import LoggingTransport
from transport_pipeline.transport.auth import AuthTransport
from transport_pipeline.transport.retry import RetryPolicy, RetryTransport

Layer = Callable[[httpx.AsyncBaseTransport], httpx.AsyncBaseTransport]


def compose(base: httpx.AsyncBaseTransport, *layers: Layer) -> httpx.AsyncBaseTransport:
    """Wrap ``base`` in ``layers``, the first layer ending up outermost."""
    transport = base
    for layer in reversed(layers):
        transport = layer(transport)
    return transport


def logging_layer(
    logger: logging.Logger | None = None,
    *,
    level: int = logging.INFO,
    log_start: bool = False,
) -> Layer:
    def wrap(inner: httpx.AsyncBaseTransport) -> httpx.AsyncBaseTransport:
        return LoggingTransport(inner, logger=logger, level=level, log_start=log_start)

    return wrap


def auth_layer(credentials: Credentials) -> Layer:
    def wrap(inner: httpx.AsyncBaseTransport) -> httpx.AsyncBaseTransport:
        return AuthTransport(inner, credentials)

    return wrap


def retry_layer(policy: RetryPolicy | None = None) -> Layer:
    def wrap(inner: httpx.AsyncBaseTransport) -> httpx.AsyncBaseTransport:
        return RetryTransport(inner, policy)

    return wrap


def create_transport_stack(
    *,
    base_transport: httpx.AsyncBaseTransport | None = None,
    credentials: Credentials | None = None,
    retry_policy: RetryPolicy | None = None,
    enable_logging: bool = True,
    log_each_attempt: bool = True,
    logger: logging.Logger | None = None,
) -> httpx.AsyncBaseTransport:
    """Build the common retry/logging/auth stack.

    Args:
        base_transport: Transport doing the network exchange. Defaults to
            ``httpx.AsyncHTTPTransport()``.
        credentials: Adds an auth layer directly above the base transport.
        retry_policy: Adds a retry layer. No retries without one.
        enable_logging: Adds a logging layer.
        log_each_attempt: Put logging inside retry so every attempt is logged.
            When False only the final outcome of each request is logged.
        logger: Logger for the logging layer.

    Returns:
        The outermost transport, ready for ``httpx.AsyncClient(transport=...)``.
    """
    layers: list[Layer] = []

    if enable_logging and not log_each_attempt:
        layers.append(logging_layer(logger))
    if retry_policy is not None:
        layers.append(retry_layer(retry_policy))
    if enable_logging and log_each_attempt:
        layers.append(logging_layer(logger))
    if credentials is not None:
        layers.append(auth_layer(credentials))

    return compose(base_transport or httpx.AsyncHTTPTransport(), *layers)
