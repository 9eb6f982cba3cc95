"""Extraction of rate limit and pagination metadata from response headers."""

from collections.abc import Mapping

from requests.structures import CaseInsensitiveDict

from .pagination import LinkHeader, LinkRelation, PaginationLink
from .rate_limiting import RateLimit

RATE_LIMIT_LIMIT = "x-ratelimit-limit"
RATE_LIMIT_REMAINING = "x-ratelimit-remaining"
RATE_LIMIT_RESET = "x-ratelimit-reset"
LINK = "Link"


def _normalize(headers: Mapping[str, str]) -> Mapping[str, str]:
    if isinstance(headers, CaseInsensitiveDict):
        return headers
    return CaseInsensitiveDict(headers)


def get_header_int(headers: Mapping[str, str], name: str) -> int | None:
    """Read a header as a non-negative integer.

    Args:
        headers: Response headers
        name: Header name, matched case-insensitively

    Returns:
        Parsed value, or None if the header is missing or not an unsigned
        decimal integer
    """
    value = _normalize(headers).get(name)
    if value is None:
        return None

    # Plain ASCII digits only; int() would also take signs, underscores,
    # surrounding whitespace and non-ASCII digits.
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)


def extract_rate_limit(headers: Mapping[str, str]) -> RateLimit | None:
    """Extract the rate limit quota from response headers.

    All three ``x-ratelimit-*`` headers must be present and valid, otherwise
    no rate limit is reported.

    Args:
        headers: Response headers

    Returns:
        RateLimit, or None if any counter is missing or invalid
    """
    headers = _normalize(headers)
    limit = get_header_int(headers, RATE_LIMIT_LIMIT)
    remaining = get_header_int(headers, RATE_LIMIT_REMAINING)
    reset = get_header_int(headers, RATE_LIMIT_RESET)

    if limit is None or remaining is None or reset is None:
        return None

    try:
        return RateLimit(limit=limit, remaining=remaining, reset=reset)
    except ValueError:
        return None


def is_paginated(headers: Mapping[str, str]) -> bool:
    """Check if the response carries a Link header."""
    return LINK in _normalize(headers)


def extract_pagination(headers: Mapping[str, str]) -> list[PaginationLink]:
    """Extract all pagination links from the Link header.

    Args:
        headers: Response headers

    Returns:
        Links in header order, empty if there is no Link header
    """
    return LinkHeader(_normalize(headers).get(LINK)).links


def extract_next_page(headers: Mapping[str, str]) -> int | None:
    """Get the page number of the first ``next`` link, if any."""
    return find_next_page(extract_pagination(headers))


def find_next_page(links: list[PaginationLink]) -> int | None:
    """Get the page number of the first ``next`` link in a parsed list."""
    for link in links:
        if link.relation is LinkRelation.NEXT:
            return link.page
    return None
