"""Pydantic models for GitHub API resources.

Models declare the fields the client cares about. Any other keys in the
JSON payload are kept and exposed through ``extra_fields`` so that schema
additions on GitHub's side survive a decode.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GitHubModel(BaseModel):
    """Base model for GitHub API payloads."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @property
    def extra_fields(self) -> dict[str, Any]:
        """Get JSON keys that are not declared on the model."""
        return dict(self.model_extra or {})


class OpenClosed(str, Enum):
    """State of an issue or pull request."""

    OPEN = "open"
    CLOSED = "closed"


# Rate limit


class LimitRemainingReset(GitHubModel):
    """Quota of one rate limit resource."""

    limit: int
    remaining: int
    reset: int


class RateLimitResources(GitHubModel):
    """Quotas per rate limit resource."""

    core: LimitRemainingReset
    search: LimitRemainingReset
    graphql: LimitRemainingReset | None = None
    integration_manifest: LimitRemainingReset | None = None


class RateLimitResponse(GitHubModel):
    """Payload of ``GET /rate_limit``."""

    resources: RateLimitResources
    # Deprecated by GitHub in favour of resources.core.
    rate: LimitRemainingReset | None = None


# Tags


class TagCommit(GitHubModel):
    sha: str
    url: str


class Tag(GitHubModel):
    """Repository tag."""

    name: str
    zipball_url: str
    tarball_url: str
    commit: TagCommit
    node_id: str


# Releases


class GenericPerson(GitHubModel):
    """User or organization as embedded in other resources."""

    login: str
    id: int
    node_id: str
    avatar_url: str
    gravatar_id: str | None = None
    url: str
    html_url: str
    followers_url: str | None = None
    following_url: str | None = None
    gists_url: str | None = None
    starred_url: str | None = None
    subscriptions_url: str | None = None
    organizations_url: str | None = None
    repos_url: str | None = None
    events_url: str | None = None
    received_events_url: str | None = None
    type: str
    site_admin: bool = False


class ReleaseAsset(GitHubModel):
    """File attached to a release."""

    url: str
    id: int
    node_id: str
    name: str
    label: str | None = None
    uploader: GenericPerson | None = None
    content_type: str
    state: str
    size: int
    download_count: int
    created_at: str
    updated_at: str
    browser_download_url: str


class Release(GitHubModel):
    """Repository release."""

    url: str
    assets_url: str
    upload_url: str
    html_url: str
    id: int
    node_id: str
    tag_name: str
    target_commitish: str
    name: str | None = None
    draft: bool
    author: GenericPerson
    prerelease: bool
    created_at: str
    published_at: str | None = None
    assets: list[ReleaseAsset] = Field(default_factory=list)
    tarball_url: str | None = None
    zipball_url: str | None = None
    body: str | None = None


# Pull requests


class PullRequestRef(GitHubModel):
    """Head or base branch of a pull request."""

    label: str
    ref: str
    sha: str


class PullRequest(GitHubModel):
    """Pull request as listed by ``GET /repos/{owner}/{repo}/pulls``."""

    url: str
    id: int
    node_id: str
    html_url: str
    number: int
    state: OpenClosed
    locked: bool = False
    title: str
    user: GenericPerson | None = None
    body: str | None = None
    created_at: str
    updated_at: str
    closed_at: str | None = None
    merged_at: str | None = None
    merge_commit_sha: str | None = None
    draft: bool = False
    head: PullRequestRef
    base: PullRequestRef


# License


class LicenseLinks(GitHubModel):
    self_link: str = Field(alias="self")
    git: str | None = None
    html: str | None = None


class LicenseInfo(GitHubModel):
    """License identification as detected by GitHub."""

    key: str
    name: str
    spdx_id: str | None = None
    url: str | None = None
    node_id: str


class LicenseResponse(GitHubModel):
    """Payload of ``GET /repos/{owner}/{repo}/license``."""

    name: str
    path: str
    sha: str
    size: int
    url: str
    html_url: str | None = None
    git_url: str | None = None
    download_url: str | None = None
    type: str
    content: str
    encoding: str
    links: LicenseLinks = Field(alias="_links")
    license: LicenseInfo | None = None
