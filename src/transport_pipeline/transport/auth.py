"""Credential-injecting transport."""

import httpx

from transport_pipeline.auth.credentials import Credentials


class AuthTransport(httpx.AsyncBaseTransport):
    """Set an authentication header on every request, then delegate.

    The header named by ``credentials.header_name`` is overwritten (any earlier
    values for it are replaced); no other header is touched. Errors from the
    wrapped transport pass through unchanged.

    Args:
        wrapped_transport: The transport requests are delegated to.
        credentials: Static credentials, fixed for the life of the transport.

    Example:
        ```python
        transport = AuthTransport(
            httpx.AsyncHTTPTransport(),
            BasicCredentials(username="user", password="pass"),
        )
        ```
    """

    def __init__(self, wrapped_transport: httpx.AsyncBaseTransport, credentials: Credentials) -> None:
        self._wrapped_transport = wrapped_transport
        self._credentials = credentials

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._wrapped_transport!r}, {self._credentials!r})"

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        request.headers[self._credentials.header_name] = self._credentials.header_value()
        return await self._wrapped_transport.handle_async_request(request)
