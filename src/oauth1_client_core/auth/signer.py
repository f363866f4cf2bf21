"""Signer protocol and the default oauthlib-backed signer.

A signer turns a request's method and URL (plus, for form posts, the
url-encoded body) into an OAuth1 `Authorization` header value. The rest of
the library treats it as opaque.

Example:
    ```python
    from oauth1_client_core.auth import OAuth1Credentials, OAuthlibSigner

    signer = OAuthlibSigner(signature_method="HMAC-SHA256")
    header = signer.sign("GET", "https://api.example.com/resource", credentials)
    # 'OAuth oauth_nonce="...", oauth_timestamp="...", ...'
    ```
"""

import logging
from typing import Protocol, runtime_checkable

from oauthlib.oauth1 import SIGNATURE_HMAC, SIGNATURE_TYPE_AUTH_HEADER, Client

from oauth1_client_core.auth.credentials import CredentialResolver, OAuth1Credentials
from oauth1_client_core.auth.exceptions import SigningError

logger = logging.getLogger(__name__)

FORM_URLENCODED = "application/x-www-form-urlencoded"

SIGNATURE_METHOD_ENV_VAR = "OAUTH1_SIGNATURE_METHOD"


@runtime_checkable
class Signer(Protocol):
    """Produces an Authorization header value for a request."""

    def sign(
        self,
        method: str,
        url: str,
        credentials: OAuth1Credentials,
        *,
        form_body: str | None = None,
    ) -> str: ...


class OAuthlibSigner:
    """Signer that delegates to `oauthlib.oauth1.Client`.

    Nonce and timestamp are generated per call by oauthlib unless fixed
    values are given, which is only useful for reproducible output in tests.

    Args:
        signature_method: oauthlib signature method name. Defaults to the
            `OAUTH1_SIGNATURE_METHOD` environment variable, then HMAC-SHA1.
        realm: Optional realm included in the header.
        rsa_key: Private key for RSA-SHA1/RSA-SHA256.
        nonce: Fixed nonce.
        timestamp: Fixed timestamp.
    """

    def __init__(
        self,
        *,
        signature_method: str | None = None,
        realm: str | None = None,
        rsa_key: str | None = None,
        nonce: str | None = None,
        timestamp: str | None = None,
    ) -> None:
        if signature_method is None:
            signature_method = CredentialResolver(load_dotenv=False).resolve(
                env_var_name=SIGNATURE_METHOD_ENV_VAR,
                default=SIGNATURE_HMAC,
                mask_in_logs=False,
            )
        self.signature_method = signature_method
        self.realm = realm
        self._rsa_key = rsa_key
        self._nonce = nonce
        self._timestamp = timestamp

    def _client(self, credentials: OAuth1Credentials) -> Client:
        return Client(
            credentials.consumer_key,
            client_secret=credentials.consumer_secret,
            resource_owner_key=credentials.access_token,
            resource_owner_secret=credentials.access_token_secret,
            signature_method=self.signature_method,
            signature_type=SIGNATURE_TYPE_AUTH_HEADER,
            rsa_key=self._rsa_key,
            realm=self.realm,
            nonce=self._nonce,
            timestamp=self._timestamp,
        )

    def sign(
        self,
        method: str,
        url: str,
        credentials: OAuth1Credentials,
        *,
        form_body: str | None = None,
    ) -> str:
        """Return the Authorization header value for `method` and `url`.

        Raises:
            SigningError: If oauthlib rejects the request or credentials.
        """
        headers = {"Content-Type": FORM_URLENCODED} if form_body is not None else None
        try:
            _, signed_headers, _ = self._client(credentials).sign(
                url,
                http_method=method,
                body=form_body,
                headers=headers,
            )
        except ValueError as e:
            raise SigningError(f"Cannot sign {method} {url}: {e}", method=method, url=url) from e

        logger.debug(f"Signed {method} {url} with {self.signature_method}")
        return signed_headers["Authorization"]
