"""
Unit tests for the response envelope and payload decoding.

Why: Envelopes hand callers the decoded payload together with the raw body
     and request metadata; decoding failures must keep the raw body.

What: Tests ApiResponse immutability and JSON serialization, and the decode
      helper's success and failure paths.

How: Builds envelopes directly and decodes literal JSON strings.
"""

import dataclasses
import json
from typing import Any

import pytest

from githubapi.decoding import decode
from githubapi.envelope import ApiResponse
from githubapi.exceptions import GitHubDecodeError
from githubapi.models import Tag
from githubapi.rate_limiting import RateLimit


class TestApiResponse:
    def test_defaults(self) -> None:
        response = ApiResponse(payload=[], raw_body="[]")

        assert response.rate_limit is None
        assert response.owner is None
        assert response.repository is None
        assert not response.has_next_page

    def test_immutable(self) -> None:
        response = ApiResponse(payload=[], raw_body="[]", next_page=2)

        with pytest.raises(dataclasses.FrozenInstanceError):
            response.next_page = 3  # type: ignore[misc]

    def test_to_json_string(self, tag_payload: dict[str, Any]) -> None:
        """
        Why: Callers re-serialize decoded payloads for storage or display.
        What: Tests models in the payload serialize back to their JSON shape.
        How: Decodes a tag list and compares the re-serialized JSON.
        """
        tags = decode(json.dumps([tag_payload]), list[Tag])
        response = ApiResponse(
            payload=tags,
            raw_body=json.dumps([tag_payload]),
            rate_limit=RateLimit(60, 59, 1700000000),
            owner="octocat",
            repository="hello",
            next_page=2,
        )

        assert json.loads(response.to_json_string()) == [tag_payload]
        assert response.has_next_page


class TestDecode:
    def test_decode_list(self, tag_payload: dict[str, Any]) -> None:
        tags = decode(json.dumps([tag_payload, tag_payload]), list[Tag])

        assert [tag.name for tag in tags] == ["v1.0.0", "v1.0.0"]

    def test_malformed_json(self) -> None:
        """Test malformed JSON raises GitHubDecodeError carrying the text."""
        with pytest.raises(GitHubDecodeError) as exc_info:
            decode("not json", list[Tag])

        assert exc_info.value.raw_body == "not json"
        assert exc_info.value.detail

    def test_wrong_shape(self) -> None:
        with pytest.raises(GitHubDecodeError) as exc_info:
            decode('{"message": "Not Found"}', list[Tag])

        assert "list[" in str(exc_info.value)
