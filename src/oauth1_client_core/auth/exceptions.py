"""Exceptions for OAuth1 credentials and request signing.

Example:
    ```python
    from oauth1_client_core.auth.exceptions import CredentialNotFoundError

    if not consumer_key:
        raise CredentialNotFoundError("Consumer key not found", env_var_name="OAUTH1_CONSUMER_KEY")
    ```
"""


class CredentialError(Exception):
    """Base exception for credential and signing errors.

    Catch this to handle anything raised by the auth package.
    """

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).

    Example:
        ```python
        try:
            credentials = OAuth1Credentials.from_env()
        except CredentialNotFoundError as e:
            print(f"Missing credential: {e.env_var_name}")
        ```
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class SigningError(CredentialError):
    """Raised by a signer that cannot produce an Authorization header.

    The original error from the signing library is chained as ``__cause__``.

    Attributes:
        method: HTTP method of the request being signed.
        url: URL of the request being signed.
    """

    def __init__(self, message: str, method: str | None = None, url: str | None = None):
        super().__init__(message)
        self.method = method
        self.url = url
