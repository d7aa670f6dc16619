"""Client construction on top of the transport pipeline."""

import logging
from typing import Any

import httpx

from transport_pipeline.config import PipelineSettings
from transport_pipeline.transport.factory import create_transport_stack


def create_client(
    settings: PipelineSettings | None = None,
    *,
    base_transport: httpx.AsyncBaseTransport | None = None,
    logger: logging.Logger | None = None,
    **client_kwargs: Any,
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` whose transport is the configured pipeline.

    Args:
        settings: Pipeline settings. Read from the environment when omitted.
        base_transport: Transport doing the network exchange. Defaults to
            ``httpx.AsyncHTTPTransport()``.
        logger: Logger for the access log layer.
        **client_kwargs: Passed through to ``httpx.AsyncClient`` (``base_url``,
            ``timeout``, ...).

    Example:
        ```python
        async with create_client(base_url="https://api.example.com") as client:
            response = await client.get("/items")
        ```
    """
    settings = settings or PipelineSettings.from_env()
    transport = create_transport_stack(
        base_transport=base_transport,
        credentials=settings.credentials(),
        retry_policy=settings.retry_policy(),
        log_each_attempt=settings.log_each_attempt,
        logger=logger,
    )
    return httpx.AsyncClient(transport=transport, **client_kwargs)
