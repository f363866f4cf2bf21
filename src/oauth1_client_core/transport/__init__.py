"""Transport layer components for OAuth1 request signing.

Modules:
    signing: Transport wrapper that signs every request it handles

Example:
    ```python
    from oauth1_client_core import add_oauth_signing

    # Returns the transport unchanged when the client can sign through an
    # interceptor, otherwise an OAuth1SigningTransport around it.
    transport = add_oauth_signing(httpx.HTTPTransport(), credentials)
    ```
"""

from oauth1_client_core.transport.signing import OAuth1SigningTransport

__all__ = ["OAuth1SigningTransport"]
