"""GitHub API client exceptions."""


class GitHubApiError(Exception):
    """Base exception for GitHub API errors."""

    def __init__(self, message: str):
        """Initialize GitHub API error.

        Args:
            message: Error message
        """
        super().__init__(message)
        self.message = message


class GitHubTransportError(GitHubApiError):
    """Raised when the HTTP round trip itself fails.

    Covers DNS, TLS, connection resets, timeouts and response bodies that
    cannot be read as text.
    """

    def __init__(self, message: str, detail: str | None = None):
        """Initialize transport error.

        Args:
            message: Error message
            detail: Description of the underlying transport fault
        """
        super().__init__(message)
        self.detail = detail or message


class GitHubDecodeError(GitHubApiError):
    """Raised when a response body does not match the expected shape."""

    def __init__(self, message: str, detail: str, raw_body: str):
        """Initialize decode error.

        Args:
            message: Error message
            detail: Structural error reported by the decoder
            raw_body: Response body text that failed to decode
        """
        super().__init__(message)
        self.detail = detail
        self.raw_body = raw_body


class GitHubUpstreamError(GitHubApiError):
    """Raised for non-2xx responses when status checking is enabled."""

    def __init__(
        self,
        message: str,
        status_code: int,
        status_line: str,
        raw_body: str,
    ):
        """Initialize upstream error.

        Args:
            message: Error message
            status_code: HTTP status code
            status_line: Status code and reason phrase, e.g. ``404 Not Found``
            raw_body: Response body text
        """
        super().__init__(message)
        self.status_code = status_code
        self.status_line = status_line
        self.raw_body = raw_body


class GitHubNotImplementedError(GitHubApiError):
    """Raised for endpoints that are not wired up."""

    pass
