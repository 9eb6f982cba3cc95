"""GitHub authentication handlers."""

from abc import ABC, abstractmethod

from requests.auth import AuthBase, HTTPBasicAuth


class AuthProvider(ABC):
    """Abstract base class for authentication providers."""

    @abstractmethod
    def to_requests_auth(self) -> AuthBase:
        """Get the requests auth handler applied to every request."""
        pass


class BasicAuth(AuthProvider):
    """HTTP Basic authentication with username and password."""

    def __init__(self, username: str, password: str):
        """Initialize Basic authentication.

        Args:
            username: GitHub username
            password: Password or personal access token
        """
        if not username:
            raise ValueError("Username is required for Basic authentication")
        self.username = username
        self._password = password

    def to_requests_auth(self) -> AuthBase:
        return HTTPBasicAuth(self.username, self._password)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(username={self.username!r})"


class TokenAuth(BasicAuth):
    """Personal access token sent as the Basic authentication password."""

    DEFAULT_USERNAME = "x-access-token"

    def __init__(self, token: str, username: str | None = None):
        """Initialize token authentication.

        Args:
            token: GitHub personal access token
            username: Username to pair with the token
        """
        if not token:
            raise ValueError("Token is required for token authentication")
        super().__init__(username or self.DEFAULT_USERNAME, token)
