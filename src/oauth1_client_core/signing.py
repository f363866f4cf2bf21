"""The signing step shared by the interceptor and the wrapping transport."""

import logging

import httpx

from oauth1_client_core.auth.credentials import OAuth1Credentials
from oauth1_client_core.auth.signer import FORM_URLENCODED, Signer

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "Authorization"


BODYLESS_METHODS = frozenset(["GET", "HEAD"])


def _form_body(request: httpx.Request) -> str | None:
    """Return the form body to include in the signature, if any.

    Only a non-empty, loaded, UTF-8 form body of a method that may carry
    one is returned; everything else is signed from method and URL alone.
    """
    if request.method.upper() in BODYLESS_METHODS:
        return None
    content_type = request.headers.get("Content-Type", "")
    if not content_type.lower().startswith(FORM_URLENCODED):
        return None
    try:
        content = request.content
    except httpx.RequestNotRead:
        # Streaming body; sign without the form parameters.
        return None
    if not content:
        return None
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug(f"Form body of {request.method} {request.url} is not UTF-8; signing without it")
        return None


def sign_request(request: httpx.Request, credentials: OAuth1Credentials, signer: Signer) -> httpx.Request:
    """Set the OAuth1 Authorization header on `request` in place.

    Only the Authorization header is written. Errors raised by the signer
    propagate unchanged.

    Args:
        request: Outgoing request.
        credentials: Credentials to sign with.
        signer: Signer producing the header value.

    Returns:
        The same request object.
    """
    request.headers[AUTHORIZATION_HEADER] = signer.sign(
        request.method,
        str(request.url),
        credentials,
        form_body=_form_body(request),
    )
    logger.debug(f"Added OAuth1 Authorization header to {request.method} {request.url}")
    return request
