"""Offset based paging over result sets of known size.

A pagination describes one window ``[start, end)`` of an ordered result
set. Navigation needs the total number of elements of the unpaginated
result and answers with a new pagination, or ``None`` when there is no
page in that direction. Nothing here raises: out-of-range input is
clamped to something usable.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from urllib.parse import parse_qs

from sensorweb.core.config import settings

DEFAULT_LIMIT = 100
MAX_LIMIT = settings.max_limit


class Pagination(ABC):
    offset: int
    limit: int
    start: int
    end: int

    @abstractmethod
    def first(self, elements: int) -> "Pagination | None":
        ...

    @abstractmethod
    def previous(self, elements: int) -> "Pagination | None":
        ...

    @abstractmethod
    def next(self, elements: int) -> "Pagination | None":
        ...

    @abstractmethod
    def last(self, elements: int) -> "Pagination | None":
        ...


@dataclass(frozen=True)
class OffsetBasedPagination(Pagination):
    offset: int = 0
    limit: int = 0
    start: int = field(init=False, repr=False, compare=False)
    end: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        limit = DEFAULT_LIMIT if self.limit <= 0 else min(self.limit, MAX_LIMIT)
        offset = 0 if self.offset <= 0 else self.offset
        object.__setattr__(self, "limit", limit)
        object.__setattr__(self, "offset", offset)
        object.__setattr__(self, "start", offset)
        object.__setattr__(self, "end", offset + limit)

    @classmethod
    def create(cls, offset: int = 0, limit: int = 0) -> "OffsetBasedPagination":
        return cls(offset=offset, limit=limit)

    @classmethod
    def from_query(cls, query: str | None) -> "OffsetBasedPagination":
        """Read ``offset``/``limit`` from a query string such as ``offset=20&limit=10``.

        Missing or malformed values fall back to the constructor defaults.
        """
        params = parse_qs(query or "", keep_blank_values=True)
        return cls(
            offset=_first_int(params.get("offset")),
            limit=_first_int(params.get("limit")),
        )

    def first(self, elements: int) -> "OffsetBasedPagination | None":
        # compares against limit, not zero: a page at offset <= limit gets no first link
        if self.offset <= self.limit or self.offset >= elements:
            return None
        return OffsetBasedPagination(0, self.limit)

    def previous(self, elements: int) -> "OffsetBasedPagination | None":
        if self.offset == 0 or self.offset >= elements:
            return None
        return OffsetBasedPagination(self.offset - self.limit, self.limit)

    def next(self, elements: int) -> "OffsetBasedPagination | None":
        if self.offset + self.limit > elements:
            return None
        return OffsetBasedPagination(self.offset + self.limit, self.limit)

    def last(self, elements: int) -> "OffsetBasedPagination | None":
        # exact multiples of limit yield max_offset == elements, one page past the data
        max_offset = elements - (elements % self.limit)
        if self.offset >= max_offset:
            return None
        return OffsetBasedPagination(max_offset, self.limit)

    def __str__(self) -> str:
        return f"offset={self.offset}&limit={self.limit}"


def _first_int(values: list[str] | None) -> int:
    if not values:
        return 0
    try:
        return int(values[0].strip())
    except ValueError:
        return 0
