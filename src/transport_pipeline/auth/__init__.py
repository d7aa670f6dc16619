"""Authentication components for the transport pipeline.

This module provides:
- Credential types rendered into a single request header (basic, bearer, custom header)
- Multi-source resolution of the static values they are built from

Example:
    ```python
    from transport_pipeline.auth import BasicCredentials, CredentialResolver

    resolver = CredentialResolver()
    credentials = BasicCredentials(
        username=resolver.resolve(env_var_name="TRANSPORT_PIPELINE_USERNAME", required=True),
        password=resolver.resolve(env_var_name="TRANSPORT_PIPELINE_PASSWORD", required=True),
    )
    ```
"""

from transport_pipeline.auth.credentials import BasicCredentials, BearerToken, Credentials, HeaderCredentials
from transport_pipeline.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)
from transport_pipeline.auth.resolver import CredentialResolver

__all__ = [
    "BasicCredentials",
    "BearerToken",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "Credentials",
    "HeaderCredentials",
]
