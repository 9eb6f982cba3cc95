"""Response envelope binding a decoded payload to its request metadata."""

import json
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from .rate_limiting import RateLimit

T = TypeVar("T")


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list | tuple):
        return [_to_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {key: _to_jsonable(item) for key, item in value.items()}
    return value


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Decoded GitHub API response.

    Attributes:
        payload: Decoded response body
        raw_body: Response body text as received
        rate_limit: Quota reported by the response, if complete
        owner: Repository owner the request was made for
        repository: Repository name the request was made for
        next_page: Page number of the next page, if any
    """

    payload: T
    raw_body: str
    rate_limit: RateLimit | None = None
    owner: str | None = None
    repository: str | None = None
    next_page: int | None = None

    @property
    def has_next_page(self) -> bool:
        """Check if there's a next page."""
        return self.next_page is not None

    def to_json_string(self, indent: int | None = None) -> str:
        """Serialize the payload back to JSON text.

        Args:
            indent: Indentation passed to ``json.dumps``

        Returns:
            JSON representation of the payload
        """
        return json.dumps(_to_jsonable(self.payload), indent=indent)
