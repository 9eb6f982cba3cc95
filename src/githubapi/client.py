"""GitHub API client with authentication, rate limit reporting, and pagination."""

import logging
import threading
import time
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import urljoin

import requests

from .auth import AuthProvider, BasicAuth
from .decoding import decode
from .endpoints import (
    LICENSE,
    PULL_REQUESTS,
    RATE_LIMIT,
    RELEASES,
    TAGS,
    Endpoint,
    get_endpoint,
)
from .envelope import ApiResponse
from .exceptions import GitHubApiError, GitHubTransportError, GitHubUpstreamError
from .headers import extract_pagination, extract_rate_limit, find_next_page
from .models import LicenseResponse, PullRequest, RateLimitResponse, Release, Tag
from .pagination import PaginationLink, Paginator
from .rate_limiting import RateLimit

if TYPE_CHECKING:
    from .config.models import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_PER_PAGE = 100


@dataclass
class GitHubClientConfig:
    """Configuration for GitHub client."""

    base_url: str = "https://api.github.com"
    timeout: int = 30
    per_page: int = MAX_PER_PAGE
    user_agent: str = "githubapi-python/0.1"
    accept: str = "application/vnd.github.v3+json"
    raise_for_status: bool = False


@dataclass(frozen=True)
class RawPage:
    """Undecoded result of one GET request."""

    text: str
    rate_limit: RateLimit | None
    next_page: int | None
    status_code: int
    reason: str = ""
    links: list[PaginationLink] = field(default_factory=list)

    @property
    def status_line(self) -> str:
        return f"{self.status_code} {self.reason}".strip()

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class GitHubClient:
    """Synchronous, read-only GitHub API client."""

    def __init__(
        self,
        auth: AuthProvider,
        config: GitHubClientConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize GitHub client.

        Args:
            auth: Authentication provider
            config: Client configuration
            session: HTTP session to use instead of creating one
        """
        self.auth = auth
        self.config = config or GitHubClientConfig()

        if not 1 <= self.config.per_page <= MAX_PER_PAGE:
            raise ValueError(f"per_page must be between 1 and {MAX_PER_PAGE}")

        # HTTP session will be initialized on first use unless one is injected;
        # an injected session belongs to the caller and is never closed here.
        self._session: requests.Session | None = session
        self._owns_session = session is None
        self._session_lock = threading.Lock()

    @classmethod
    def from_credentials(
        cls,
        username: str,
        password: str,
        config: GitHubClientConfig | None = None,
    ) -> "GitHubClient":
        """Create a client using HTTP Basic authentication."""
        return cls(auth=BasicAuth(username, password), config=config)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "GitHubClient":
        """Create a client from loaded configuration settings."""
        credentials = settings.credentials
        return cls(
            auth=BasicAuth(credentials.username, credentials.password),
            config=settings.to_client_config(),
        )

    def __enter__(self) -> "GitHubClient":
        """Context manager entry."""
        self._ensure_session()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit."""
        self.close()

    def _ensure_session(self) -> requests.Session:
        """Ensure HTTP session is initialized, once across threads."""
        session = self._session
        if session is not None:
            return session
        with self._session_lock:
            if self._session is None:
                self._session = requests.Session()
                self._owns_session = True
            return self._session

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        with self._session_lock:
            if self._session is not None and self._owns_session:
                self._session.close()
                self._session = None

    def _generate_correlation_id(self) -> str:
        """Generate correlation ID for request tracking."""
        return str(uuid.uuid4())[:8]

    def _request_headers(self) -> dict[str, str]:
        return {"User-Agent": self.config.user_agent, "Accept": self.config.accept}

    def _build_url(self, path: str) -> str:
        return urljoin(self.config.base_url.rstrip("/") + "/", path.lstrip("/"))

    def fetch(self, path: str, page: int = 1, per_page: int | None = None) -> RawPage:
        """Perform one authenticated GET request.

        HTTP error statuses are returned like any other response unless
        ``raise_for_status`` is enabled in the configuration.

        Args:
            path: API path (e.g., 'repos/owner/repo/tags')
            page: 1-based page number
            per_page: Items per page, defaults to the configured page size

        Returns:
            Body text with the rate limit and next page cursor of the response

        Raises:
            GitHubTransportError: If the request fails or the body is not text
            GitHubUpstreamError: For non-2xx responses with raise_for_status
        """
        if page < 1:
            raise ValueError(f"page must be a positive integer, got {page}")
        if per_page is None:
            per_page = self.config.per_page
        if not 1 <= per_page <= MAX_PER_PAGE:
            raise ValueError(f"per_page must be between 1 and {MAX_PER_PAGE}")

        url = self._build_url(path)
        params = {"per_page": per_page, "page": page}
        correlation_id = self._generate_correlation_id()
        session = self._ensure_session()

        logger.debug(f"GitHub API request [{correlation_id}] GET {url} {params}")
        start_time = time.time()

        try:
            response = session.get(
                url,
                params=params,
                headers=self._request_headers(),
                auth=self.auth.to_requests_auth(),
                timeout=self.config.timeout,
            )
            encoding = response.encoding or "utf-8"
            text = response.content.decode(encoding)
        except requests.RequestException as e:
            raise GitHubTransportError(
                f"Request failed for GET {url}: {e}", detail=str(e)
            ) from e
        except (UnicodeDecodeError, LookupError) as e:
            raise GitHubTransportError(
                f"Response body of GET {url} is not valid text: {e}", detail=str(e)
            ) from e

        rate_limit = extract_rate_limit(response.headers)
        links = extract_pagination(response.headers)
        raw_page = RawPage(
            text=text,
            rate_limit=rate_limit,
            next_page=find_next_page(links),
            status_code=response.status_code,
            reason=response.reason or "",
            links=links,
        )

        logger.debug(
            f"GitHub API response [{correlation_id}] {raw_page.status_line} "
            f"in {time.time() - start_time:.2f}s, "
            f"remaining={rate_limit.remaining if rate_limit else 'n/a'}"
        )

        if self.config.raise_for_status and not raw_page.ok:
            raise GitHubUpstreamError(
                f"GitHub API returned {raw_page.status_line} for GET {url}",
                status_code=raw_page.status_code,
                status_line=raw_page.status_line,
                raw_body=text,
            )

        return raw_page

    def get_page(
        self,
        path: str,
        element_type: type[T],
        page: int = 1,
        owner: str | None = None,
        repository: str | None = None,
        per_page: int | None = None,
    ) -> ApiResponse[list[T]]:
        """Fetch and decode one page of a collection resource.

        Args:
            path: API path of the collection
            element_type: Type each array element decodes to
            page: 1-based page number
            owner: Repository owner recorded on the response
            repository: Repository name recorded on the response
            per_page: Items per page

        Returns:
            Decoded page with its rate limit and next page cursor

        Raises:
            GitHubApiError: If the request or the decode fails
        """
        raw_page = self.fetch(path, page=page, per_page=per_page)
        return ApiResponse(
            payload=decode(raw_page.text, list[element_type]),  # type: ignore[valid-type]
            raw_body=raw_page.text,
            rate_limit=raw_page.rate_limit,
            owner=owner,
            repository=repository,
            next_page=raw_page.next_page,
        )

    def get_object(
        self,
        path: str,
        model: type[T],
        owner: str | None = None,
        repository: str | None = None,
    ) -> ApiResponse[T]:
        """Fetch and decode a resource that is a single object.

        Raises:
            GitHubApiError: If the request or the decode fails
        """
        raw_page = self.fetch(path)
        return ApiResponse(
            payload=decode(raw_page.text, model),
            raw_body=raw_page.text,
            rate_limit=raw_page.rate_limit,
            owner=owner,
            repository=repository,
            next_page=None,
        )

    def paginate(
        self,
        path: str,
        element_type: type[T],
        owner: str | None = None,
        repository: str | None = None,
        max_pages: int | None = None,
        on_error: Callable[[GitHubApiError], Any] | None = None,
    ) -> Paginator[T]:
        """Create paginator for a GitHub API collection.

        Args:
            path: API path of the collection
            element_type: Type each array element decodes to
            owner: Repository owner recorded on every page
            repository: Repository name recorded on every page
            max_pages: Maximum pages to fetch
            on_error: Callback receiving the error that ends iteration

        Returns:
            Paginator starting at page 1
        """
        return Paginator(
            client=self,
            path=path,
            element_type=element_type,
            owner=owner,
            repository=repository,
            max_pages=max_pages,
            on_error=on_error,
        )

    def get_next(
        self, response: ApiResponse[list[Any]], endpoint: Endpoint | str
    ) -> ApiResponse[list[Any]]:
        """Fetch the page following a previously fetched page.

        Args:
            response: Page of a repository collection
            endpoint: Endpoint (or its name) the page was fetched from

        Returns:
            The next page

        Raises:
            ValueError: If the response has no next page
        """
        if isinstance(endpoint, str):
            endpoint = get_endpoint(endpoint)
        if response.next_page is None:
            raise ValueError("Response has no next page")

        return self.get_page(
            endpoint.path(response.owner, response.repository),
            endpoint.model,
            page=response.next_page,
            owner=response.owner,
            repository=response.repository,
        )

    def get_resource(
        self, name: str, owner: str | None = None, repository: str | None = None
    ) -> ApiResponse[Any] | Paginator[Any]:
        """Access an endpoint by name.

        Returns:
            Paginator for collections, decoded response for single objects

        Raises:
            GitHubNotImplementedError: If the endpoint is not wired up
        """
        endpoint = get_endpoint(name)
        path = endpoint.path(owner, repository)
        if endpoint.paginated:
            return self.paginate(path, endpoint.model, owner, repository)
        return self.get_object(path, endpoint.model, owner, repository)

    # Convenience methods for the wired up GitHub API endpoints

    def get_rate_limit(self) -> ApiResponse[RateLimitResponse]:
        """Get current rate limit status."""
        return self.get_object(RATE_LIMIT.path(), RateLimitResponse)

    def get_tags_page(
        self, owner: str, repository: str, page: int = 1
    ) -> ApiResponse[list[Tag]]:
        """Get one page of repository tags."""
        return self.get_page(TAGS.path(owner, repository), Tag, page, owner, repository)

    def get_tags(self, owner: str, repository: str) -> Paginator[Tag]:
        """Iterate over the pages of repository tags."""
        return self.paginate(TAGS.path(owner, repository), Tag, owner, repository)

    def get_tags_next(self, response: ApiResponse[list[Tag]]) -> ApiResponse[list[Tag]]:
        """Get the page of tags following the given one."""
        return self.get_next(response, TAGS)

    def get_releases_page(
        self, owner: str, repository: str, page: int = 1
    ) -> ApiResponse[list[Release]]:
        """Get one page of repository releases."""
        return self.get_page(
            RELEASES.path(owner, repository), Release, page, owner, repository
        )

    def get_releases(self, owner: str, repository: str) -> Paginator[Release]:
        """Iterate over the pages of repository releases."""
        return self.paginate(
            RELEASES.path(owner, repository), Release, owner, repository
        )

    def get_pull_requests_page(
        self, owner: str, repository: str, page: int = 1
    ) -> ApiResponse[list[PullRequest]]:
        """Get one page of repository pull requests."""
        return self.get_page(
            PULL_REQUESTS.path(owner, repository), PullRequest, page, owner, repository
        )

    def get_pull_requests(self, owner: str, repository: str) -> Paginator[PullRequest]:
        """Iterate over the pages of repository pull requests."""
        return self.paginate(
            PULL_REQUESTS.path(owner, repository), PullRequest, owner, repository
        )

    def get_license(self, owner: str, repository: str) -> ApiResponse[LicenseResponse]:
        """Get the license file of a repository."""
        return self.get_object(
            LICENSE.path(owner, repository), LicenseResponse, owner, repository
        )
