"""Exceptions raised while resolving credentials for the auth layer.

Example:
    ```python
    from transport_pipeline.auth.exceptions import CredentialNotFoundError

    if password is None:
        raise CredentialNotFoundError("Password not found", env_var_name="TRANSPORT_PIPELINE_PASSWORD")
    ```
"""


class CredentialError(Exception):
    """Base exception for credential-related errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved from any source.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a credential file is missing or unreadable."""

    pass
