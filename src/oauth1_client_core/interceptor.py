"""Request interceptor that signs requests inside the client's pipeline.

The interceptor is a plain callable taking and returning an `httpx.Request`,
so it fits both of httpx's per-request extension points:

- as a request event hook (`client.event_hooks = {"request": [interceptor]}`)
- in the auth slot (`client.auth = interceptor`); httpx wraps callables in
  its function-based auth flow

Example:
    ```python
    interceptor = OAuth1RequestInterceptor(credentials, OAuthlibSigner())

    client = httpx.Client(event_hooks={"request": [interceptor]})
    async_client = httpx.AsyncClient(event_hooks={"request": [interceptor.as_async_hook()]})
    ```
"""

from collections.abc import Awaitable, Callable

import httpx

from oauth1_client_core.auth.credentials import OAuth1Credentials
from oauth1_client_core.auth.signer import Signer
from oauth1_client_core.signing import sign_request


class OAuth1RequestInterceptor:
    """Adds the OAuth1 Authorization header to each request before it is sent.

    Args:
        credentials: Credentials to sign with.
        signer: Signer producing the header value.
    """

    def __init__(self, credentials: OAuth1Credentials, signer: Signer) -> None:
        self.credentials = credentials
        self.signer = signer

    def __call__(self, request: httpx.Request) -> httpx.Request:
        return sign_request(request, self.credentials, self.signer)

    def as_async_hook(self) -> Callable[[httpx.Request], Awaitable[None]]:
        """Return a coroutine hook for `httpx.AsyncClient` event hooks."""

        async def oauth1_request_hook(request: httpx.Request) -> None:
            self(request)

        oauth1_request_hook.interceptor = self
        return oauth1_request_hook

    def __repr__(self) -> str:
        return f"{type(self).__name__}(consumer_key={self.credentials.consumer_key!r})"
