"""OAuth1 Client Core - httpx clients that sign every request with OAuth1.

This library builds httpx clients that attach an OAuth1 Authorization header
to each outgoing request:
- Interceptor-based signing through the client's event hooks or auth slot
- Transport wrapping when no interceptor mechanism is usable
- One-time, thread-safe detection of which of the two the installed httpx supports
- Credentials from explicit values, environment variables or a .env file

Example:
    ```python
    from oauth1_client_core import OAuth1Credentials, create_client

    credentials = OAuth1Credentials(
        consumer_key="ck",
        consumer_secret="cs",
        access_token="at",
        access_token_secret="ats",
    )

    with create_client(credentials) as client:
        response = client.get("https://api.example.com/resource")
    ```
"""

from oauth1_client_core.auth import (
    CredentialError,
    CredentialNotFoundError,
    OAuth1Credentials,
    OAuthlibSigner,
    Signer,
    SigningError,
)
from oauth1_client_core.capability import (
    CapabilityDecision,
    RegistrationShape,
    get_capability_decision,
)
from oauth1_client_core.client import (
    ProtectedResourceClientFactory,
    add_oauth_signing,
    create_async_client,
    create_client,
)
from oauth1_client_core.interceptor import OAuth1RequestInterceptor
from oauth1_client_core.transport import OAuth1SigningTransport

__version__ = "0.1.0"

__all__ = [
    "CapabilityDecision",
    "CredentialError",
    "CredentialNotFoundError",
    "OAuth1Credentials",
    "OAuth1RequestInterceptor",
    "OAuth1SigningTransport",
    "OAuthlibSigner",
    "ProtectedResourceClientFactory",
    "RegistrationShape",
    "Signer",
    "SigningError",
    "__version__",
    "add_oauth_signing",
    "create_async_client",
    "create_client",
    "get_capability_decision",
]
