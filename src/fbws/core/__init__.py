"""Core page compilation and routing."""

from fbws.core.compiler import build_page, compile_site
from fbws.core.errors import BuildError, DirUnreadableError, NotUtf8Error, ReadFailedError
from fbws.core.pages import Page, PageSet
from fbws.core.router import DispatchResult, dispatch

__all__ = [
    "BuildError",
    "DirUnreadableError",
    "DispatchResult",
    "NotUtf8Error",
    "Page",
    "PageSet",
    "ReadFailedError",
    "build_page",
    "compile_site",
    "dispatch",
]
