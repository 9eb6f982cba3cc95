"""
Unit tests for GitHub authentication handlers.

Why: Every request carries HTTP Basic credentials supplied by the caller.

What: Tests BasicAuth and TokenAuth validation and the requests auth
      handlers they produce.

How: Builds providers directly and inspects the resulting handlers.
"""

import pytest
from requests.auth import HTTPBasicAuth

from githubapi.auth import AuthProvider, BasicAuth, TokenAuth


class TestBasicAuth:
    """Test BasicAuth provider."""

    def test_basic_auth_handler(self) -> None:
        auth = BasicAuth("octocat", "hunter2")

        assert isinstance(auth, AuthProvider)
        assert auth.to_requests_auth() == HTTPBasicAuth("octocat", "hunter2")

    def test_username_required(self) -> None:
        with pytest.raises(ValueError):
            BasicAuth("", "hunter2")

    def test_repr_hides_password(self) -> None:
        """Test the password never appears in the representation."""
        assert "hunter2" not in repr(BasicAuth("octocat", "hunter2"))


class TestTokenAuth:
    """Test TokenAuth provider."""

    def test_token_sent_as_password(self) -> None:
        """
        Why: GitHub accepts a personal access token in place of a password.
        What: Tests the token becomes the Basic auth password.
        How: Creates TokenAuth with and without an explicit username.
        """
        assert TokenAuth("ghp_token").to_requests_auth() == HTTPBasicAuth(
            TokenAuth.DEFAULT_USERNAME, "ghp_token"
        )
        assert TokenAuth("ghp_token", username="octocat").to_requests_auth() == (
            HTTPBasicAuth("octocat", "ghp_token")
        )

    def test_token_required(self) -> None:
        with pytest.raises(ValueError):
            TokenAuth("")
