"""GitHub API client package."""

from .auth import AuthProvider, BasicAuth, TokenAuth
from .client import GitHubClient, GitHubClientConfig, RawPage
from .decoding import decode
from .endpoints import ENDPOINTS, Endpoint, get_endpoint
from .envelope import ApiResponse
from .exceptions import (
    GitHubApiError,
    GitHubDecodeError,
    GitHubNotImplementedError,
    GitHubTransportError,
    GitHubUpstreamError,
)
from .headers import (
    extract_next_page,
    extract_pagination,
    extract_rate_limit,
    is_paginated,
)
from .models import (
    GenericPerson,
    LicenseResponse,
    OpenClosed,
    PullRequest,
    RateLimitResponse,
    Release,
    ReleaseAsset,
    Tag,
)
from .pagination import LinkHeader, LinkRelation, PaginationLink, Paginator
from .rate_limiting import RateLimit

__all__ = [
    "ENDPOINTS",
    "ApiResponse",
    "AuthProvider",
    "BasicAuth",
    "Endpoint",
    "GenericPerson",
    "GitHubApiError",
    "GitHubClient",
    "GitHubClientConfig",
    "GitHubDecodeError",
    "GitHubNotImplementedError",
    "GitHubTransportError",
    "GitHubUpstreamError",
    "LicenseResponse",
    "LinkHeader",
    "LinkRelation",
    "OpenClosed",
    "PaginationLink",
    "Paginator",
    "PullRequest",
    "RateLimit",
    "RateLimitResponse",
    "RawPage",
    "Release",
    "ReleaseAsset",
    "Tag",
    "TokenAuth",
    "decode",
    "extract_next_page",
    "extract_pagination",
    "extract_rate_limit",
    "get_endpoint",
    "is_paginated",
]
