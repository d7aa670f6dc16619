"""Environment-driven settings for building a transport pipeline.

Variables (all optional):

| Variable | Meaning | Default |
|----------|---------|---------|
| `TRANSPORT_PIPELINE_MAX_ATTEMPTS` | Attempts per request, first included | `3` |
| `TRANSPORT_PIPELINE_RETRY_DELAY` | Seconds between attempts | `1.0` |
| `TRANSPORT_PIPELINE_RETRY_IDEMPOTENT_ONLY` | Only retry idempotent methods | `false` |
| `TRANSPORT_PIPELINE_LOG_EACH_ATTEMPT` | Log every attempt, not just the outcome | `true` |
| `TRANSPORT_PIPELINE_USERNAME` / `TRANSPORT_PIPELINE_PASSWORD` | Basic auth | unset |
| `TRANSPORT_PIPELINE_TOKEN` | Bearer token, used when no username is set | unset |

Values in a ``.env`` file are honoured through ``CredentialResolver``.
"""

from dataclasses import dataclass, field

from transport_pipeline.auth.credentials import BasicCredentials, BearerToken, Credentials
from transport_pipeline.auth.resolver import CredentialResolver
from transport_pipeline.transport.retry import RetryPolicy

ENV_PREFIX = "TRANSPORT_PIPELINE_"

_TRUE_VALUES = frozenset(["1", "true", "yes", "on"])
_FALSE_VALUES = frozenset(["0", "false", "no", "off"])


@dataclass(frozen=True)
class PipelineSettings:
    """Settings for ``create_transport_stack`` and ``create_client``."""

    max_attempts: int = 3
    inter_attempt_delay: float = 1.0
    idempotent_only: bool = False
    log_each_attempt: bool = True
    username: str | None = None
    password: str | None = field(default=None, repr=False)
    token: str | None = field(default=None, repr=False)

    @classmethod
    def from_env(cls, resolver: CredentialResolver | None = None) -> "PipelineSettings":
        """Read settings from the environment.

        Raises:
            ValueError: If a variable holds an unparseable value.
            CredentialNotFoundError: If a username is set without a password.
        """
        resolver = resolver or CredentialResolver()

        def setting(name: str) -> str | None:
            return resolver.resolve(env_var_name=ENV_PREFIX + name, secret=False)

        username = setting("USERNAME")
        password = None
        if username is not None:
            password = resolver.resolve(env_var_name=ENV_PREFIX + "PASSWORD", required=True)

        return cls(
            max_attempts=_parse_int(ENV_PREFIX + "MAX_ATTEMPTS", setting("MAX_ATTEMPTS"), cls.max_attempts),
            inter_attempt_delay=_parse_float(
                ENV_PREFIX + "RETRY_DELAY", setting("RETRY_DELAY"), cls.inter_attempt_delay
            ),
            idempotent_only=_parse_bool(
                ENV_PREFIX + "RETRY_IDEMPOTENT_ONLY", setting("RETRY_IDEMPOTENT_ONLY"), cls.idempotent_only
            ),
            log_each_attempt=_parse_bool(
                ENV_PREFIX + "LOG_EACH_ATTEMPT", setting("LOG_EACH_ATTEMPT"), cls.log_each_attempt
            ),
            username=username,
            password=password,
            token=resolver.resolve(env_var_name=ENV_PREFIX + "TOKEN"),
        )

    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy(
            max_attempts=self.max_attempts,
            inter_attempt_delay=self.inter_attempt_delay,
            idempotent_only=self.idempotent_only,
        )

    def credentials(self) -> Credentials | None:
        """Basic credentials when a username is set, else a bearer token, else None."""
        if self.username is not None:
            return BasicCredentials(username=self.username, password=self.password or "")
        if self.token is not None:
            return BearerToken(token=self.token)
        return None


def _parse_int(name: str, raw: str | None, default: int) -> int:
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _parse_float(name: str, raw: str | None, default: float) -> float:
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _parse_bool(name: str, raw: str | None, default: bool) -> bool:
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")
