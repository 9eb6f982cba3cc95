"""GitHub API pagination utilities."""

import logging
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .envelope import ApiResponse
from .exceptions import GitHubApiError

if TYPE_CHECKING:
    from .client import GitHubClient

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Link header format: <url?page=2>; rel="next", <url?page=5>; rel="last"
LINK_PATTERN = re.compile(r'<[^>]*?[?&]page=(\d+)[^>]*>\s*;\s*rel="([^"]*)"')


class LinkRelation(str, Enum):
    """Relation of a pagination link to the current page."""

    FIRST = "first"
    PREVIOUS = "prev"
    NEXT = "next"
    LAST = "last"
    OTHER = "other"


@dataclass(frozen=True)
class PaginationLink:
    """One entry of a Link header: a relation and the page it points to."""

    relation: LinkRelation
    page: int
    name: str

    @classmethod
    def from_rel(cls, rel: str, page: int) -> "PaginationLink":
        """Build a link from a raw ``rel`` value, keeping unknown names."""
        try:
            relation = LinkRelation(rel)
        except ValueError:
            relation = LinkRelation.OTHER
        if relation is LinkRelation.OTHER:
            return cls(LinkRelation.OTHER, page, rel)
        return cls(relation, page, relation.value)

    @classmethod
    def first(cls, page: int) -> "PaginationLink":
        return cls(LinkRelation.FIRST, page, LinkRelation.FIRST.value)

    @classmethod
    def previous(cls, page: int) -> "PaginationLink":
        return cls(LinkRelation.PREVIOUS, page, LinkRelation.PREVIOUS.value)

    @classmethod
    def next(cls, page: int) -> "PaginationLink":
        return cls(LinkRelation.NEXT, page, LinkRelation.NEXT.value)

    @classmethod
    def last(cls, page: int) -> "PaginationLink":
        return cls(LinkRelation.LAST, page, LinkRelation.LAST.value)

    @classmethod
    def other(cls, name: str, page: int) -> "PaginationLink":
        return cls(LinkRelation.OTHER, page, name)


def parse_link_header(link_header: str | None) -> list[PaginationLink]:
    """Parse a Link header value into pagination links, in header order.

    Entries without a ``page`` query parameter are skipped.

    Args:
        link_header: Raw Link header value

    Returns:
        List of parsed links, empty if the header is absent
    """
    if not link_header:
        return []

    return [
        PaginationLink.from_rel(rel, int(page))
        for page, rel in LINK_PATTERN.findall(link_header)
    ]


class LinkHeader:
    """Parser for GitHub Link headers."""

    def __init__(self, link_header: str | None = None):
        """Initialize Link header parser.

        Args:
            link_header: Raw Link header value from response
        """
        self.links: list[PaginationLink] = parse_link_header(link_header)

    def find(self, relation: LinkRelation) -> PaginationLink | None:
        """Get the first link with the given relation."""
        for link in self.links:
            if link.relation is relation:
                return link
        return None

    def _page(self, relation: LinkRelation) -> int | None:
        link = self.find(relation)
        return link.page if link else None

    @property
    def next_page(self) -> int | None:
        """Get page number of the next page."""
        return self._page(LinkRelation.NEXT)

    @property
    def previous_page(self) -> int | None:
        """Get page number of the previous page."""
        return self._page(LinkRelation.PREVIOUS)

    @property
    def first_page(self) -> int | None:
        """Get page number of the first page."""
        return self._page(LinkRelation.FIRST)

    @property
    def last_page(self) -> int | None:
        """Get page number of the last page."""
        return self._page(LinkRelation.LAST)

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.next_page is not None

    @property
    def has_prev(self) -> bool:
        """Check if there's a previous page."""
        return self.previous_page is not None


class Paginator(Generic[T]):
    """Iterator over the pages of one GitHub collection resource.

    Each pull performs one request for the current cursor page and yields
    the decoded page as an :class:`ApiResponse`. The cursor starts at page 1
    and follows the ``next`` link of every page until a page has none.

    Failures end the sequence. Without ``on_error`` the error is raised from
    ``__next__``; with it the error is passed to the callback and iteration
    stops normally. In both cases the error is kept in :attr:`error`.
    """

    def __init__(
        self,
        client: "GitHubClient",
        path: str,
        element_type: type[T],
        owner: str | None = None,
        repository: str | None = None,
        max_pages: int | None = None,
        on_error: Callable[[GitHubApiError], Any] | None = None,
    ):
        """Initialize paginator.

        Args:
            client: GitHub client instance
            path: API path of the collection, e.g. ``repos/o/r/tags``
            element_type: Type each array element decodes to
            owner: Repository owner recorded on every page
            repository: Repository name recorded on every page
            max_pages: Maximum number of pages to fetch
            on_error: Callback receiving the error that ends iteration
        """
        if max_pages is not None and max_pages < 1:
            raise ValueError("max_pages must be a positive integer")

        self.client = client
        self.path = path
        self.element_type = element_type
        self.owner = owner
        self.repository = repository
        self.max_pages = max_pages
        self.on_error = on_error

        self._next_page: int | None = 1
        self._pages_fetched = 0
        self._error: GitHubApiError | None = None

    @property
    def next_page(self) -> int | None:
        """Page number the next pull will request."""
        return self._next_page

    @property
    def pages_fetched(self) -> int:
        """Number of pages yielded so far."""
        return self._pages_fetched

    @property
    def exhausted(self) -> bool:
        """Check if no further pages will be fetched."""
        return self._next_page is None

    @property
    def error(self) -> GitHubApiError | None:
        """Error that ended iteration, if any."""
        return self._error

    def __iter__(self) -> "Paginator[T]":
        return self

    def __next__(self) -> ApiResponse[list[T]]:
        if self._next_page is None:
            raise StopIteration

        if self.max_pages is not None and self._pages_fetched >= self.max_pages:
            self._next_page = None
            raise StopIteration

        page_number = self._next_page
        try:
            page = self.client.get_page(
                self.path,
                self.element_type,
                page=page_number,
                owner=self.owner,
                repository=self.repository,
            )
        except GitHubApiError as e:
            self._next_page = None
            self._error = e
            if self.on_error is None:
                raise
            logger.debug(f"Pagination of {self.path} stopped at page {page_number}: {e}")
            self.on_error(e)
            raise StopIteration from None

        self._pages_fetched += 1
        self._next_page = self._advance(page_number, page.next_page)
        return page

    def _advance(self, current: int, cursor: int | None) -> int | None:
        # The cursor must move forward, otherwise the sequence could loop.
        if cursor is not None and cursor <= current:
            logger.debug(
                f"Ignoring non-advancing next page {cursor} after page {current} "
                f"of {self.path}"
            )
            return None
        if cursor is not None:
            logger.debug(f"Advancing {self.path} from page {current} to {cursor}")
        return cursor

    def has_items(self) -> bool:
        """Check whether the collection has at least one element.

        Fetches page 1 with a page size of one. The cursor is left untouched.

        Returns:
            True if the first page is not empty
        """
        probe = self.client.get_page(
            self.path,
            self.element_type,
            page=1,
            owner=self.owner,
            repository=self.repository,
            per_page=1,
        )
        return len(probe.payload) > 0

    def items(self) -> Iterator[T]:
        """Iterate over the elements of all remaining pages."""
        for page in self:
            yield from page.payload

    def collect_all(self) -> list[T]:
        """Collect all elements from all remaining pages.

        Returns:
            List of all elements
        """
        return list(self.items())

    def collect_pages(self, num_pages: int) -> list[T]:
        """Collect elements from at most the given number of pages.

        Args:
            num_pages: Number of pages to collect

        Returns:
            List of elements from the pages
        """
        items: list[T] = []
        for _ in range(num_pages):
            try:
                page = next(self)
            except StopIteration:
                break
            items.extend(page.payload)
        return items
