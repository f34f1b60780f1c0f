"""
Pagination and id parsing shared by the blog and comment services.

Query values arrive as raw strings. Anything that does not start with a
positive integer falls back to the default instead of failing the request;
only an explicitly oversized page size is rejected.
"""

from dataclasses import dataclass
from math import ceil
from re import compile as re_compile

from blogger.configs.settings import DEFAULT_PAGE, MAX_PER_PAGE
from blogger.errors.resource import BadRequestError, NotFoundError

_LEADING_INT = re_compile(r"^\s*([+-]?\d+)")
_PLAIN_ID = re_compile(r"^\d+$")

# Integer primary keys and the BIGINT OFFSET bound what the database accepts
MAX_ID = 2**31 - 1
MAX_OFFSET = 2**63 - 1

type RawValue = str | int | None


def parse_int(value: RawValue) -> int | None:
    """
    Parse the leading integer of ``value``.

    ``"12"``, ``" 12"`` and ``"12abc"`` all give ``12``; ``"abc"`` and
    ``None`` give ``None``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if match := _LEADING_INT.match(value):
        return int(match.group(1))
    return None


def parse_positive_int(value: RawValue, default: int) -> int:
    """Parse ``value`` and fall back to ``default`` unless it is >= 1."""
    parsed = parse_int(value)
    return parsed if parsed is not None and parsed > 0 else default


def parse_id(value: RawValue) -> int | None:
    """
    Parse a resource id taken from the URL path.

    Only plain positive decimal integers within the primary-key range are
    accepted; anything else cannot name a stored row.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        if not _PLAIN_ID.match(value):
            return None
        value = int(value)
    if value is None:
        return None
    return value if 0 < value <= MAX_ID else None


@dataclass(frozen=True)
class PageRequest:
    """A validated page selection."""

    page: int = DEFAULT_PAGE
    per_page: int = MAX_PER_PAGE

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        return self.per_page


def build_page_request(
    page: RawValue,
    per_page: RawValue,
    *,
    too_large_message: str,
    not_found_message: str,
) -> PageRequest:
    """
    Turn raw ``page``/``perPage`` values into a ``PageRequest``.

    Args:
        page: Requested page number (1-indexed).
        per_page: Requested page size.
        too_large_message: Message used when the page size exceeds the maximum.
        not_found_message: Message used when the page lies past any storable row.

    Returns:
        PageRequest: Page and size with defaults applied.

    Raises:
        BadRequestError: If the page size is greater than ``MAX_PER_PAGE``.
        NotFoundError: If the page offset is beyond what the database accepts.
    """
    size = parse_positive_int(per_page, MAX_PER_PAGE)
    if size > MAX_PER_PAGE:
        raise BadRequestError(too_large_message)

    request = PageRequest(page=parse_positive_int(page, DEFAULT_PAGE), per_page=size)
    if request.offset > MAX_OFFSET:
        raise NotFoundError(not_found_message)
    return request


def total_pages(total_count: int, per_page: int) -> int:
    """Number of pages needed to hold ``total_count`` items."""
    return ceil(total_count / per_page) if per_page else 0


@dataclass(frozen=True)
class Page[ItemT]:
    """One page of results plus the numbers needed to render an envelope."""

    items: list[ItemT]
    total_count: int
    page: int
    per_page: int

    @property
    def total_pages(self) -> int:
        return total_pages(self.total_count, self.per_page)
