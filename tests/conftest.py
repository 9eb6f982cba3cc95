"""
Test configuration and fixtures for the GitHub API client tests.

Provides canned HTTP responses and a client wired to a mock requests
session so no test touches the network.
"""

import json
from collections.abc import Callable
from typing import Any
from unittest.mock import Mock

import pytest
from requests.structures import CaseInsensitiveDict

from githubapi.auth import BasicAuth
from githubapi.client import GitHubClient, GitHubClientConfig


def make_response(
    body: Any = None,
    status_code: int = 200,
    headers: dict[str, str] | None = None,
    text: str | None = None,
    content: bytes | None = None,
    encoding: str | None = "utf-8",
    reason: str = "OK",
) -> Mock:
    """Create a mock requests response."""
    if content is None:
        if text is None:
            text = json.dumps(body if body is not None else [])
        content = text.encode("utf-8")

    response = Mock()
    response.status_code = status_code
    response.reason = reason
    response.headers = CaseInsensitiveDict(headers or {})
    response.encoding = encoding
    response.content = content
    return response


@pytest.fixture
def response_factory() -> Callable[..., Mock]:
    """Factory for mock requests responses."""
    return make_response


@pytest.fixture
def mock_session() -> Mock:
    """Mock requests session; tests set ``get.return_value`` or ``side_effect``."""
    session = Mock()
    session.get = Mock(return_value=make_response([]))
    return session


@pytest.fixture
def github_client(mock_session: Mock) -> GitHubClient:
    """GitHubClient using Basic auth and the mock session."""
    return GitHubClient(
        auth=BasicAuth("octocat", "secret-token"),
        config=GitHubClientConfig(base_url="https://api.github.com"),
        session=mock_session,
    )


@pytest.fixture
def rate_limit_headers() -> dict[str, str]:
    """Complete set of rate limit headers."""
    return {
        "x-ratelimit-limit": "60",
        "x-ratelimit-remaining": "59",
        "x-ratelimit-reset": "1700000000",
    }


@pytest.fixture
def tag_payload() -> dict[str, Any]:
    """One tag as returned by the tags endpoint."""
    return {
        "name": "v1.0.0",
        "zipball_url": "https://api.github.com/repos/octocat/hello/zipball/v1.0.0",
        "tarball_url": "https://api.github.com/repos/octocat/hello/tarball/v1.0.0",
        "commit": {
            "sha": "c5b97d5ae6c19d5c5df71a34c7fbeeda2479ccbc",
            "url": "https://api.github.com/repos/octocat/hello/commits/c5b97d5",
        },
        "node_id": "MDM6UmVmcmVmcy90YWdzL3YxLjAuMA==",
    }


@pytest.fixture
def license_payload() -> dict[str, Any]:
    """Payload of the repository license endpoint."""
    return {
        "name": "LICENSE",
        "path": "LICENSE",
        "sha": "401c59dcc4570b954dd6d345e76199e1f4e76266",
        "size": 1077,
        "url": "https://api.github.com/repos/octocat/hello/contents/LICENSE?ref=main",
        "html_url": "https://github.com/octocat/hello/blob/main/LICENSE",
        "git_url": "https://api.github.com/repos/octocat/hello/git/blobs/401c59d",
        "download_url": "https://raw.githubusercontent.com/octocat/hello/main/LICENSE",
        "type": "file",
        "content": "TUlUIExpY2Vuc2U=\n",
        "encoding": "base64",
        "_links": {
            "self": "https://api.github.com/repos/octocat/hello/contents/LICENSE",
            "git": "https://api.github.com/repos/octocat/hello/git/blobs/401c59d",
            "html": "https://github.com/octocat/hello/blob/main/LICENSE",
        },
        "license": {
            "key": "mit",
            "name": "MIT License",
            "spdx_id": "MIT",
            "url": "https://api.github.com/licenses/mit",
            "node_id": "MDc6TGljZW5zZW1pdA==",
        },
    }


@pytest.fixture
def pull_request_payload() -> dict[str, Any]:
    """One pull request as listed by the pulls endpoint."""
    ref = {
        "label": "octocat:main",
        "ref": "main",
        "sha": "6dcb09b5b57875f334f61aebed695e2e4193db5e",
    }
    return {
        "url": "https://api.github.com/repos/octocat/hello/pulls/1347",
        "id": 1,
        "node_id": "MDExOlB1bGxSZXF1ZXN0MQ==",
        "html_url": "https://github.com/octocat/hello/pull/1347",
        "number": 1347,
        "state": "open",
        "title": "Amazing new feature",
        "created_at": "2011-01-26T19:01:12Z",
        "updated_at": "2011-01-26T19:01:12Z",
        "head": ref,
        "base": ref,
    }
