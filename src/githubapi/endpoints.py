"""Declarative table of the GitHub API endpoints wired into the client."""

from dataclasses import dataclass
from typing import Any

from .exceptions import GitHubNotImplementedError
from .models import LicenseResponse, PullRequest, RateLimitResponse, Release, Tag


@dataclass(frozen=True)
class Endpoint:
    """One GitHub API resource.

    Attributes:
        name: Short resource name
        template: Path template, formatted with ``owner`` and ``repository``
        model: Type of one element (paginated) or of the whole payload
        paginated: Whether the resource is a collection walked page by page
    """

    name: str
    template: str
    model: type[Any]
    paginated: bool = True

    @property
    def is_repository_scoped(self) -> bool:
        return "{owner}" in self.template or "{repository}" in self.template

    def path(self, owner: str | None = None, repository: str | None = None) -> str:
        """Format the path template.

        Raises:
            ValueError: If the template needs coordinates that were not given
        """
        if self.is_repository_scoped and not (owner and repository):
            raise ValueError(f"Endpoint '{self.name}' requires owner and repository")
        return self.template.format(owner=owner, repository=repository)


TAGS = Endpoint("tags", "repos/{owner}/{repository}/tags", Tag)
RELEASES = Endpoint("releases", "repos/{owner}/{repository}/releases", Release)
PULL_REQUESTS = Endpoint("pulls", "repos/{owner}/{repository}/pulls", PullRequest)
LICENSE = Endpoint(
    "license", "repos/{owner}/{repository}/license", LicenseResponse, paginated=False
)
RATE_LIMIT = Endpoint("rate_limit", "rate_limit", RateLimitResponse, paginated=False)

ENDPOINTS: dict[str, Endpoint] = {
    endpoint.name: endpoint
    for endpoint in (TAGS, RELEASES, PULL_REQUESTS, LICENSE, RATE_LIMIT)
}


def get_endpoint(name: str) -> Endpoint:
    """Look up an endpoint by name.

    Raises:
        GitHubNotImplementedError: If no endpoint with that name is wired up
    """
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise GitHubNotImplementedError(
            f"Endpoint '{name}' is not implemented"
        ) from None
