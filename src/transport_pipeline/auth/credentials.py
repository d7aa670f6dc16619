"""Credential values injected into outgoing requests by ``AuthTransport``.

Each credential type knows which header it writes and how to render its value.
Secrets are kept out of ``repr`` so a credential object can appear in a log line
or traceback without leaking.

Example:
    ```python
    from transport_pipeline.auth import BasicCredentials, BearerToken, HeaderCredentials

    basic = BasicCredentials(username="user", password="pass")
    basic.header_value()  # 'Basic dXNlcjpwYXNz'

    token = BearerToken(token="abc123")
    api_key = HeaderCredentials(header_name="X-Api-Key", value="k-123")
    ```
"""

from base64 import b64encode
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@runtime_checkable
class Credentials(Protocol):
    """Anything that can render a single authentication header."""

    @property
    def header_name(self) -> str: ...

    def header_value(self) -> str: ...


@dataclass(frozen=True)
class BasicCredentials:
    """HTTP Basic authentication (RFC 7617) username/password pair."""

    username: str
    password: str = field(repr=False)

    @property
    def header_name(self) -> str:
        return "Authorization"

    def header_value(self) -> str:
        # Same encoding httpx.BasicAuth uses
        userpass = f"{self.username}:{self.password}".encode()
        return f"Basic {b64encode(userpass).decode('ascii')}"


@dataclass(frozen=True)
class BearerToken:
    """OAuth2-style bearer token."""

    token: str = field(repr=False)

    @property
    def header_name(self) -> str:
        return "Authorization"

    def header_value(self) -> str:
        return f"Bearer {self.token}"


@dataclass(frozen=True)
class HeaderCredentials:
    """Static secret sent in a custom header, for APIs with non-standard auth."""

    header_name: str
    value: str = field(repr=False)

    def header_value(self) -> str:
        return self.value
