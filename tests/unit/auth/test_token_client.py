"""
Tests for the OAuth2 token client.
"""
from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest
import requests

from regreddit.auth.token_client import AccessToken, TokenClient
from regreddit.errors import AuthError
from tests.unit.fixtures.mock_responses import make_response


@pytest.fixture
def http():
    return MagicMock(spec=requests.Session)


@pytest.mark.unit
class TestFetchToken:
    """Test TokenClient.fetch_token()."""

    def test_success(self, http, credentials):
        """Test a 200 response yields an AccessToken."""
        http.post.return_value = make_response(
            200, {"access_token": "tok", "token_type": "bearer", "expires_in": 3600, "scope": "*"}
        )
        client = TokenClient(http=http, token_url="https://example.test/token", user_agent="ua")

        token = client.fetch_token(credentials)

        assert token.value == "tok"
        assert token.scope == "*"
        assert not token.is_expired()

    def test_request_uses_password_grant_and_basic_auth(self, http, credentials):
        """Test the request carries the password grant form and client basic auth."""
        http.post.return_value = make_response(200, {"access_token": "tok"})
        client = TokenClient(http=http, token_url="https://example.test/token", user_agent="ua/1.0")

        client.fetch_token(credentials)

        args, kwargs = http.post.call_args
        assert args[0] == "https://example.test/token"
        assert kwargs["auth"] == ("abc123", "s3cr3t")
        assert kwargs["data"] == {
            "grant_type": "password",
            "username": "testuser",
            "password": "hunter2",  # pragma: allowlist secret
        }
        assert kwargs["headers"]["User-Agent"] == "ua/1.0"

    def test_missing_expires_in_uses_default(self, http, credentials):
        """Test the default lifetime applies when expires_in is absent."""
        http.post.return_value = make_response(200, {"access_token": "tok"})

        token = TokenClient(http=http).fetch_token(credentials)

        remaining = token.expires_at - datetime.now()
        assert timedelta(minutes=59) < remaining <= timedelta(hours=1)

    @pytest.mark.parametrize("status", [401, 403])
    def test_rejected_credentials(self, http, credentials, status):
        """Test 401/403 raise AuthError with the status code."""
        http.post.return_value = make_response(status, {"message": "Unauthorized"})

        with pytest.raises(AuthError) as exc_info:
            TokenClient(http=http).fetch_token(credentials)

        assert exc_info.value.status_code == status

    def test_server_error(self, http, credentials):
        """Test other non-200 statuses raise AuthError."""
        http.post.return_value = make_response(503, None, text="unavailable")

        with pytest.raises(AuthError, match="503"):
            TokenClient(http=http).fetch_token(credentials)

    def test_invalid_grant_body(self, http, credentials):
        """Test a 200 body with an error field (wrong password) raises AuthError."""
        http.post.return_value = make_response(200, {"error": "invalid_grant"})

        with pytest.raises(AuthError, match="invalid_grant"):
            TokenClient(http=http).fetch_token(credentials)

    @pytest.mark.parametrize("expires_in", ["soon", [3600], {"s": 1}])
    def test_invalid_expires_in(self, http, credentials, expires_in):
        """Test a non-numeric expires_in raises AuthError."""
        http.post.return_value = make_response(
            200, {"access_token": "tok", "expires_in": expires_in}
        )

        with pytest.raises(AuthError, match="expires_in"):
            TokenClient(http=http).fetch_token(credentials)

    def test_missing_access_token(self, http, credentials):
        """Test a body without access_token raises AuthError."""
        http.post.return_value = make_response(200, {"token_type": "bearer"})

        with pytest.raises(AuthError, match="access_token"):
            TokenClient(http=http).fetch_token(credentials)

    def test_invalid_json(self, http, credentials):
        """Test an unparsable body raises AuthError."""
        http.post.return_value = make_response(200, None, text="<html>")

        with pytest.raises(AuthError, match="invalid JSON"):
            TokenClient(http=http).fetch_token(credentials)

    def test_unreachable(self, http, credentials):
        """Test network failures raise AuthError chained to the cause."""
        http.post.side_effect = requests.ConnectionError("no route to host")

        with pytest.raises(AuthError, match="Could not reach") as exc_info:
            TokenClient(http=http).fetch_token(credentials)

        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)


@pytest.mark.unit
class TestAccessToken:
    """Test AccessToken helpers."""

    def test_is_expired(self):
        token = AccessToken(value="tok", expires_at=datetime(2020, 1, 1))
        assert token.is_expired()
        assert not token.is_expired(now=datetime(2019, 12, 31))

    def test_authorization_header(self):
        token = AccessToken(value="tok", expires_at=datetime(2020, 1, 1))
        assert token.authorization_header == "bearer tok"

    def test_value_hidden_from_repr(self):
        token = AccessToken(value="supersecret", expires_at=datetime(2020, 1, 1))
        assert "supersecret" not in repr(token)
