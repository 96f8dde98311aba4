"""Pagination over result lists."""

from __future__ import annotations

import re
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

PER_PAGE = 32

_INTEGER = re.compile(r"[+-]?[0-9]+")


class PageOutOfRange(LookupError):
    """Raised when a page past the end of an empty result set is requested."""


def _change_page(url: str, page: int) -> str:
    parts = urlsplit(url)
    values: dict[str, list[str]] = {}
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        values.setdefault(key, []).append(value)

    values.pop("page", None)
    if page != 1:
        values["page"] = [str(page)]

    query = urlencode([(key, value) for key in sorted(values) for value in values[key]])
    return urlunsplit(parts._replace(query=query))


class Pager:
    """Tracks a page of results and links to its neighbours."""

    def __init__(self, url: str, page: int) -> None:
        if page < 1:
            raise ValueError(f"page must be at least 1, got {page}")
        self.url = url
        self.page = page
        self.offset = (page - 1) * PER_PAGE
        self.total = 0
        self.first = 0
        self.last = 0
        self.prev: str | None = None
        self.next: str | None = None

    def calculate(self) -> None:
        """Fill in first, last, prev and next from the total; raise PageOutOfRange past an empty end."""
        if self.total == 0 and self.page > 1:
            raise PageOutOfRange(f"page {self.page} of an empty result set")

        last_page = -(-self.total // PER_PAGE) or 1

        if self.total > 0:
            self.first = (self.page - 1) * PER_PAGE + 1

        self.last = self.total if self.page == last_page else self.page * PER_PAGE

        if self.page > 1:
            self.prev = _change_page(self.url, self.page - 1)
        if self.page < last_page:
            self.next = _change_page(self.url, self.page + 1)


def new_pager(url: str) -> Pager:
    """Create a pager for a request URL, reading the page from its query string."""
    page = 0
    for key, value in parse_qsl(urlsplit(url).query, keep_blank_values=True):
        if key == "page":
            if _INTEGER.fullmatch(value):
                page = int(value)
            break
    return Pager(url, max(page, 1))