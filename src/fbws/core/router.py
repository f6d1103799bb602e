"""Request router.

Dispatch is a pure function of the immutable PageSet, so it is safe to
call from any number of concurrent handlers.
"""

from typing import NamedTuple

from fbws.core.pages import PageSet

HTTP_OK = 200
HTTP_NOT_FOUND = 404


class DispatchResult(NamedTuple):
    """Status code and HTML body for a request."""

    status: int
    body: str


def dispatch(method: str, path: str, pages: PageSet) -> DispatchResult:
    """Select the page for a request.

    Any method other than GET gets the not-found page with 404 rather than
    405. The root path always serves the home page, whatever URL path was
    derived for it. Other paths are matched exactly against page URL paths.

    Args:
        method: HTTP method
        path: Request path without query string
        pages: Compiled pages

    Returns:
        DispatchResult with 200 and the matched page, or 404 and the
        not-found page
    """
    if method != "GET":
        return DispatchResult(HTTP_NOT_FOUND, pages.not_found.body)

    if path == "/":
        return DispatchResult(HTTP_OK, pages.home.body)

    page = pages.get(path)
    if page is None:
        return DispatchResult(HTTP_NOT_FOUND, pages.not_found.body)
    return DispatchResult(HTTP_OK, page.body)
