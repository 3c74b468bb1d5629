"""
Pytest configuration and shared fixtures for unit tests.
"""
from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest

from regreddit.auth.api_session import ApiSession
from regreddit.auth.credentials import Credentials
from regreddit.auth.token_client import AccessToken
from regreddit.models import COMMENT, POST, Item

# Note: pytest_plugins is defined in the root tests/conftest.py
# to comply with pytest's requirement that it be at the top level


@pytest.fixture
def credentials():
    """Credentials matching the valid config fixture."""
    return Credentials(
        client_id="abc123",
        secret="s3cr3t",  # pragma: allowlist secret
        username="testuser",
        password="hunter2",  # pragma: allowlist secret
    )


@pytest.fixture
def access_token():
    """An AccessToken valid for one hour."""
    return AccessToken(value="fake-token", expires_at=datetime.now() + timedelta(hours=1))


@pytest.fixture
def mock_session():
    """
    Create a mock ApiSession.

    get() and post() return MagicMock responses with status 200 by default;
    tests override return_value or side_effect as needed.
    """
    session = MagicMock(spec=ApiSession)
    session.get.return_value.status_code = 200
    session.post.return_value.status_code = 200
    return session


@pytest.fixture
def post_item():
    return Item(kind=POST, item_id="abc1", subreddit="rust", label="A post")


@pytest.fixture
def comment_item():
    return Item(kind=COMMENT, item_id="def2", subreddit="golang", label="A comment")
