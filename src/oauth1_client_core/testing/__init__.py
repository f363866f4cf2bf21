"""Testing utilities for code that uses OAuth1-signed clients.

Example:
    ```python
    from oauth1_client_core import ProtectedResourceClientFactory
    from oauth1_client_core.testing import RecordingSigner, recording_transport


    def test_fetch_profile(credentials):
        signer = RecordingSigner()
        transport, seen = recording_transport()
        client = ProtectedResourceClientFactory(signer=signer).create(credentials, transport=transport)

        client.get("https://api.example.com/me")

        assert seen[0].headers["Authorization"] == signer.expected("GET", "https://api.example.com/me", credentials)
    ```
"""

from collections.abc import Callable
from dataclasses import dataclass, field

import httpx

from oauth1_client_core.auth.credentials import OAuth1Credentials


@dataclass
class SignCall:
    """Arguments of one `RecordingSigner.sign` call."""

    method: str
    url: str
    credentials: OAuth1Credentials
    form_body: str | None = None


@dataclass
class RecordingSigner:
    """Deterministic signer that records every call.

    The header value is derived only from its inputs, so tests can compute
    the expected value with `expected()`.
    """

    calls: list[SignCall] = field(default_factory=list)

    def sign(
        self,
        method: str,
        url: str,
        credentials: OAuth1Credentials,
        *,
        form_body: str | None = None,
    ) -> str:
        self.calls.append(SignCall(method, url, credentials, form_body))
        return self.expected(method, url, credentials)

    @staticmethod
    def expected(method: str, url: str, credentials: OAuth1Credentials) -> str:
        return f'OAuth method="{method}", url="{url}", oauth_consumer_key="{credentials.consumer_key}", oauth_token="{credentials.access_token}"'


def recording_transport(
    handler: Callable[[httpx.Request], httpx.Response] | None = None,
) -> tuple[httpx.MockTransport, list[httpx.Request]]:
    """Create a mock transport that records the requests it receives.

    Args:
        handler: Produces the response; a 200 with an empty JSON body by default.

    Returns:
        Tuple of (transport, list the received requests are appended to).
    """
    seen: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if handler is not None:
            return handler(request)
        return httpx.Response(200, json={})

    return httpx.MockTransport(record), seen


__all__ = ["RecordingSigner", "SignCall", "recording_transport"]
