"""Factory for httpx clients that sign every request with OAuth1.

The factory hides which decoration mechanism the installed httpx offers.
Depending on the process-wide `CapabilityDecision`, a client is signed either
by an interceptor registered on the client or by a transport wrapping the
real one. Exactly one of the two is attached to every client.

Parameter encoding:
    The signature covers the URL exactly as httpx sends it, including query
    parameters added via `params=`, and the body of form-encoded requests.
    Streamed bodies are not read and so are not part of the signature.

Example:
    ```python
    from oauth1_client_core import OAuth1Credentials, create_client

    credentials = OAuth1Credentials.from_env()

    with create_client(credentials, base_url="https://api.example.com") as client:
        response = client.get("/1.1/account/verify_credentials.json")
    ```
"""

import logging
from typing import Any, TypeVar

import httpx

from oauth1_client_core.auth.credentials import OAuth1Credentials
from oauth1_client_core.auth.signer import OAuthlibSigner, Signer
from oauth1_client_core.capability import (
    CapabilityDecision,
    RegistrationShape,
    get_capability_decision,
)
from oauth1_client_core.interceptor import OAuth1RequestInterceptor
from oauth1_client_core.transport.signing import OAuth1SigningTransport

logger = logging.getLogger(__name__)

TransportT = TypeVar("TransportT", httpx.BaseTransport, httpx.AsyncBaseTransport)


class ProtectedResourceClientFactory:
    """Builds clients for resources protected by OAuth1.

    Args:
        signer: Signer used by every client built here (default: `OAuthlibSigner()`).
        decision: Decoration strategy. Defaults to the process-wide decision
            from `get_capability_decision()`, looked up on each use.

    Example:
        ```python
        factory = ProtectedResourceClientFactory(signer=OAuthlibSigner(signature_method="HMAC-SHA256"))
        client = factory.create(credentials)
        ```
    """

    def __init__(self, *, signer: Signer | None = None, decision: CapabilityDecision | None = None) -> None:
        self.signer = signer if signer is not None else OAuthlibSigner()
        self._decision = decision

    @property
    def decision(self) -> CapabilityDecision:
        return self._decision if self._decision is not None else get_capability_decision()

    def interceptor(self, credentials: OAuth1Credentials) -> OAuth1RequestInterceptor:
        """Build an interceptor for `credentials` using this factory's signer."""
        return OAuth1RequestInterceptor(credentials, self.signer)

    def add_oauth_signing(self, transport: TransportT, credentials: OAuth1Credentials) -> TransportT:
        """Add OAuth1 signing to a caller-owned transport, if needed.

        When clients are signed through an interceptor, no wrapping is
        necessary and the same transport is returned; register the
        interceptor with `set_interceptor()` on the client built from it.
        Otherwise the transport is wrapped in `OAuth1SigningTransport`.

        Args:
            transport: The transport to sign requests for.
            credentials: Credentials to sign with.

        Returns:
            `transport` itself, or a signing wrapper around it.
        """
        if self.decision.uses_interceptor:
            return transport
        return OAuth1SigningTransport(wrapped_transport=transport, credentials=credentials, signer=self.signer)

    def set_interceptor(
        self,
        client: httpx.Client | httpx.AsyncClient,
        interceptor: OAuth1RequestInterceptor,
    ) -> bool:
        """Register `interceptor` on `client` using the decided registration shape.

        The `auth` slot holds a single value: any `auth=` already set on the
        client is replaced (a warning is logged). httpx runs the auth flow
        once per `send()`, so with this shape a redirect that httpx follows
        is sent with the Authorization header of the original request, not
        re-signed for the new URL. Event hooks and transport wrapping sign
        every request, redirects included.

        Returns:
            True if registered, False if registration is unavailable or failed.
        """
        shape = self.decision.registration_shape
        try:
            if shape is RegistrationShape.EVENT_HOOKS:
                hook = interceptor.as_async_hook() if isinstance(client, httpx.AsyncClient) else interceptor
                hooks = client.event_hooks
                client.event_hooks = {**hooks, "request": [*hooks.get("request", []), hook]}
            elif shape is RegistrationShape.AUTH_SLOT:
                if client.auth is not None:
                    logger.warning(f"Replacing existing client auth {client.auth!r} with OAuth1 signing")
                client.auth = interceptor
            else:
                return False
        except (AttributeError, TypeError) as e:
            logger.warning(f"Failed to register OAuth1 interceptor via {shape.value}: {e}")
            return False
        logger.debug(f"Registered {interceptor!r} via {shape.value}")
        return True

    def _build(
        self,
        client_class: type[httpx.Client] | type[httpx.AsyncClient],
        credentials: OAuth1Credentials,
        transport: httpx.BaseTransport | httpx.AsyncBaseTransport,
        client_kwargs: dict[str, Any],
    ) -> httpx.Client | httpx.AsyncClient:
        if self.decision.uses_interceptor:
            client = client_class(transport=transport, **client_kwargs)
            if self.set_interceptor(client, self.interceptor(credentials)):
                return client
            # Not closed: it shares `transport` with the replacement below.
            logger.warning("Falling back to OAuth1 transport wrapping")

        signing_transport = OAuth1SigningTransport(
            wrapped_transport=transport,
            credentials=credentials,
            signer=self.signer,
        )
        logger.debug(f"Built {client_class.__name__} with OAuth1 transport wrapping")
        return client_class(transport=signing_transport, **client_kwargs)

    def create(
        self,
        credentials: OAuth1Credentials,
        *,
        transport: httpx.BaseTransport | None = None,
        **client_kwargs: Any,
    ) -> httpx.Client:
        """Construct an `httpx.Client` that signs each request before it is sent.

        Args:
            credentials: Credentials to sign with.
            transport: Transport to send through (default: `httpx.HTTPTransport()`).
            **client_kwargs: Passed on to `httpx.Client` (base_url, timeout, headers, ...).
        """
        return self._build(httpx.Client, credentials, transport or httpx.HTTPTransport(), client_kwargs)

    def create_async(
        self,
        credentials: OAuth1Credentials,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        **client_kwargs: Any,
    ) -> httpx.AsyncClient:
        """Async counterpart of `create()`, returning an `httpx.AsyncClient`."""
        return self._build(httpx.AsyncClient, credentials, transport or httpx.AsyncHTTPTransport(), client_kwargs)


def create_client(credentials: OAuth1Credentials, **kwargs: Any) -> httpx.Client:
    """Shortcut for `ProtectedResourceClientFactory().create(...)`."""
    return ProtectedResourceClientFactory().create(credentials, **kwargs)


def create_async_client(credentials: OAuth1Credentials, **kwargs: Any) -> httpx.AsyncClient:
    """Shortcut for `ProtectedResourceClientFactory().create_async(...)`."""
    return ProtectedResourceClientFactory().create_async(credentials, **kwargs)


def add_oauth_signing(transport: TransportT, credentials: OAuth1Credentials) -> TransportT:
    """Shortcut for `ProtectedResourceClientFactory().add_oauth_signing(...)`."""
    return ProtectedResourceClientFactory().add_oauth_signing(transport, credentials)
