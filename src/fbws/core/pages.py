"""Compiled pages and the page set served by the router.

A PageSet is built once at startup and shared read-only by every
request handler, so it exposes no mutation API.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from fbws.core.types import URLPath

HOME_SLOT = 0
NOT_FOUND_SLOT = 1


@dataclass(frozen=True)
class Page:
    """Rendered HTML document and its canonical URL path."""

    url_path: URLPath
    body: str


class PageSet:
    """Ordered, immutable collection of compiled pages.

    Slot 0 holds the home page and slot 1 the not-found page. Content
    pages follow in compilation order. Lookups by URL path are O(1);
    when two pages share a path the one compiled last wins.
    """

    __slots__ = ("_pages", "_path_index")

    def __init__(self, home: Page, not_found: Page, content: Iterable[Page] = ()) -> None:
        """Initialize page set.

        Args:
            home: Page served for the root path
            not_found: Page served for unmatched requests
            content: Pages compiled from the content directory
        """
        self._pages: tuple[Page, ...] = (home, not_found, *content)
        self._path_index = {page.url_path: i for i, page in enumerate(self._pages)}

    @property
    def home(self) -> Page:
        return self._pages[HOME_SLOT]

    @property
    def not_found(self) -> Page:
        return self._pages[NOT_FOUND_SLOT]

    @property
    def content(self) -> tuple[Page, ...]:
        """Pages compiled from the content directory."""
        return self._pages[NOT_FOUND_SLOT + 1 :]

    def get(self, path: str) -> Page | None:
        """Get page by exact URL path.

        Matching is case-sensitive with no trailing-slash normalization.

        Args:
            path: Request path (e.g., "/about")

        Returns:
            Page if found, None otherwise
        """
        idx = self._path_index.get(URLPath(path))
        if idx is None:
            return None
        return self._pages[idx]

    def __getitem__(self, idx: int) -> Page:
        return self._pages[idx]

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self) -> Iterator[Page]:
        return iter(self._pages)

    def __repr__(self) -> str:
        paths = ", ".join(page.url_path for page in self._pages)
        return f"PageSet([{paths}])"
