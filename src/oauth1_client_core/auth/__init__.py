"""OAuth1 credentials and signing.

This package provides:
- The immutable `OAuth1Credentials` value (explicit or from the environment)
- The `Signer` protocol the request decorators call
- `OAuthlibSigner`, the default oauthlib-backed signer

Example:
    ```python
    from oauth1_client_core.auth import OAuth1Credentials, OAuthlibSigner

    credentials = OAuth1Credentials.from_env()
    header = OAuthlibSigner().sign("GET", "https://api.example.com/me", credentials)
    ```
"""

from oauth1_client_core.auth.credentials import CredentialResolver, OAuth1Credentials
from oauth1_client_core.auth.exceptions import (
    CredentialError,
    CredentialNotFoundError,
    SigningError,
)
from oauth1_client_core.auth.signer import OAuthlibSigner, Signer

__all__ = [
    "CredentialError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "OAuth1Credentials",
    "OAuthlibSigner",
    "Signer",
    "SigningError",
]
