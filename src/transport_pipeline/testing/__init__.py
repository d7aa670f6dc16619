"""Testing utilities for code built on the transport pipeline.

Example:
    ```python
    from transport_pipeline.testing import ScriptedTransport


    async def test_retries_then_succeeds():
        base = ScriptedTransport([503, 503, 200])
        transport = RetryTransport(base, RetryPolicy(max_attempts=3, inter_attempt_delay=0))

        async with httpx.AsyncClient(transport=transport) as client:
            response = await client.get("https://api.example.com/test")

        assert response.status_code == 200
        assert base.call_count == 3
    ```
"""

from collections.abc import Iterable

import httpx

__all__ = ["ScriptedTransport"]


class ScriptedTransport(httpx.MockTransport):
    """Mock transport replaying a fixed script of outcomes.

    Each entry is a status code, a ready-made ``httpx.Response``, or an
    exception instance to raise. The last entry repeats once the script runs
    out.

    Attributes:
        requests: Every request received, in order.
        responses: Every response handed out, in order.
    """

    def __init__(self, script: Iterable[int | httpx.Response | Exception]) -> None:
        self._script = list(script)
        if not self._script:
            raise ValueError("script must contain at least one outcome")
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response] = []
        super().__init__(self._next_outcome)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def _next_outcome(self, request: httpx.Request) -> httpx.Response:
        outcome = self._script[min(len(self.requests), len(self._script) - 1)]
        self.requests.append(request)

        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, int):
            outcome = httpx.Response(outcome, request=request)
        self.responses.append(outcome)
        return outcome
