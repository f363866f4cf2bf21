"""Signing transport for hosts without a usable interceptor mechanism.

`OAuth1SigningTransport` wraps another httpx transport and stamps the OAuth1
Authorization header on every request before handing it on. It implements
both the sync and async transport interfaces, so it can wrap whichever
transport the client uses.

Example:
    ```python
    import httpx

    from oauth1_client_core.transport import OAuth1SigningTransport

    transport = OAuth1SigningTransport(
        wrapped_transport=httpx.HTTPTransport(),
        credentials=credentials,
        signer=OAuthlibSigner(),
    )

    with httpx.Client(transport=transport) as client:
        response = client.get("https://api.example.com/resource")
    ```
"""

import logging

import httpx

from oauth1_client_core.auth.credentials import OAuth1Credentials
from oauth1_client_core.auth.signer import Signer
from oauth1_client_core.signing import sign_request

logger = logging.getLogger(__name__)


class OAuth1SigningTransport(httpx.BaseTransport, httpx.AsyncBaseTransport):
    """Transport that signs each request, then delegates to the wrapped transport.

    Requests leaving this transport differ from what the wrapped transport
    would otherwise receive only by the Authorization header.

    Args:
        wrapped_transport: The underlying transport to wrap
        credentials: Credentials to sign with
        signer: Signer producing the header value
    """

    def __init__(
        self,
        *,
        wrapped_transport: httpx.BaseTransport | httpx.AsyncBaseTransport,
        credentials: OAuth1Credentials,
        signer: Signer,
    ) -> None:
        self._wrapped_transport = wrapped_transport
        self.credentials = credentials
        self.signer = signer

    @property
    def wrapped_transport(self) -> httpx.BaseTransport | httpx.AsyncBaseTransport:
        return self._wrapped_transport

    def __enter__(self):
        """Enter context, delegating to wrapped transport."""
        self._wrapped_transport.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context, delegating to wrapped transport."""
        self._wrapped_transport.__exit__(exc_type, exc_val, exc_tb)

    async def __aenter__(self):
        """Enter async context, delegating to wrapped transport."""
        await self._wrapped_transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context, delegating to wrapped transport."""
        await self._wrapped_transport.__aexit__(exc_type, exc_val, exc_tb)

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        sign_request(request, self.credentials, self.signer)
        return self._wrapped_transport.handle_request(request)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        sign_request(request, self.credentials, self.signer)
        return await self._wrapped_transport.handle_async_request(request)

    def close(self) -> None:
        self._wrapped_transport.close()

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()
