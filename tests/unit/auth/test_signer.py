"""Tests for the oauthlib-backed signer."""

import pytest

from oauth1_client_core.auth import OAuthlibSigner, Signer, SigningError
from oauth1_client_core.testing import RecordingSigner

URL = "https://api.example.com/resource"


def _params(header: str) -> dict[str, str]:
    assert header.startswith("OAuth ")
    pairs = [item.strip().split("=", 1) for item in header[len("OAuth ") :].split(",")]
    return {key: value.strip('"') for key, value in pairs}


class TestOAuthlibSigner:
    """Test Authorization header generation through oauthlib."""

    def test_satisfies_signer_protocol(self):
        assert isinstance(OAuthlibSigner(), Signer)
        assert isinstance(RecordingSigner(), Signer)

    def test_header_contains_oauth_parameters(self, credentials):
        header = OAuthlibSigner().sign("GET", URL, credentials)
        params = _params(header)

        assert params["oauth_consumer_key"] == "consumer-key"
        assert params["oauth_token"] == "access-token"
        assert params["oauth_signature_method"] == "HMAC-SHA1"
        assert params["oauth_version"] == "1.0"
        assert params["oauth_signature"]
        assert params["oauth_nonce"]
        assert params["oauth_timestamp"]

    def test_secrets_not_in_header(self, credentials):
        header = OAuthlibSigner().sign("GET", URL, credentials)

        assert "consumer-secret" not in header
        assert "access-token-secret" not in header

    def test_deterministic_with_fixed_nonce_and_timestamp(self, credentials):
        signer = OAuthlibSigner(nonce="fixed-nonce", timestamp="1318622958")

        assert signer.sign("GET", URL, credentials) == signer.sign("GET", URL, credentials)

    def test_signature_depends_on_method_and_url(self, credentials):
        signer = OAuthlibSigner(nonce="fixed-nonce", timestamp="1318622958")

        get_sig = _params(signer.sign("GET", URL, credentials))["oauth_signature"]
        post_sig = _params(signer.sign("POST", URL, credentials))["oauth_signature"]
        other_sig = _params(signer.sign("GET", URL + "/other", credentials))["oauth_signature"]

        assert len({get_sig, post_sig, other_sig}) == 3

    def test_form_body_changes_signature(self, credentials):
        signer = OAuthlibSigner(nonce="fixed-nonce", timestamp="1318622958")

        without_body = _params(signer.sign("POST", URL, credentials))["oauth_signature"]
        with_body = _params(signer.sign("POST", URL, credentials, form_body="status=hello"))["oauth_signature"]

        assert without_body != with_body

    def test_signature_method_from_argument(self, credentials):
        header = OAuthlibSigner(signature_method="HMAC-SHA256").sign("GET", URL, credentials)

        assert _params(header)["oauth_signature_method"] == "HMAC-SHA256"

    def test_signature_method_from_environment(self, monkeypatch, credentials):
        monkeypatch.setenv("OAUTH1_SIGNATURE_METHOD", "PLAINTEXT")

        signer = OAuthlibSigner()

        assert signer.signature_method == "PLAINTEXT"
        assert _params(signer.sign("GET", URL, credentials))["oauth_signature_method"] == "PLAINTEXT"

    def test_realm_included(self, credentials):
        header = OAuthlibSigner(realm="photos").sign("GET", URL, credentials)

        assert _params(header)["realm"] == "photos"

    def test_invalid_signature_method_raises_signing_error(self, credentials):
        with pytest.raises(SigningError) as exc_info:
            OAuthlibSigner(signature_method="NOT-A-METHOD").sign("GET", URL, credentials)

        assert exc_info.value.method == "GET"
        assert exc_info.value.url == URL
        assert isinstance(exc_info.value.__cause__, ValueError)
