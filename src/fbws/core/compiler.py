"""View compiler.

Turns the project layout on disk into a PageSet. Every source fragment
is wrapped in the shared theme stylesheet and header once, at startup;
nothing is re-read afterwards.
"""

import logging
from pathlib import Path

from fbws.core.errors import DirUnreadableError, NotUtf8Error, ReadFailedError
from fbws.core.pages import Page, PageSet
from fbws.core.types import URLPath

logger = logging.getLogger(__name__)

HOME_FILENAME = "home.html"
NOT_FOUND_FILENAME = "404.html"

DOCUMENT_TEMPLATE = """<html>
<head>
<style>
{theme}
</style>
<title>{title}</title>
</head>
<body>
<header>
{header}
</header>
{content}
</body>
</html>
"""


def derive_url_path(file_path: Path, content_dir: Path) -> URLPath:
    """Derive the canonical URL path for a source file.

    Files inside the content directory map to their relative path without
    extension ("pages/about.html" -> "/about"). Any other file maps to its
    bare file name ("home.html" -> "/home").

    Args:
        file_path: Source file path
        content_dir: Content directory root

    Returns:
        URL path starting with "/"
    """
    if file_path.is_relative_to(content_dir):
        relative = file_path.relative_to(content_dir).with_suffix("")
        return URLPath(f"/{relative.as_posix()}")
    return URLPath(f"/{file_path.stem}")


def read_source(path: Path) -> str:
    """Read a source file as UTF-8 text.

    Raises:
        ReadFailedError: If the file cannot be read
        NotUtf8Error: If the file content is not valid UTF-8
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ReadFailedError(path) from e
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise NotUtf8Error(path) from e


def render_document(content: str, theme: str, title: str, header: str) -> str:
    """Assemble a full HTML document.

    Values are substituted verbatim: sources are trusted and nothing is escaped.
    """
    return DOCUMENT_TEMPLATE.format(
        theme=theme,
        title=title,
        header=header,
        content=content,
    )


def build_page(
    file_path: Path,
    theme_path: Path,
    site_title: str,
    header_path: Path,
    *,
    content_dir: Path,
) -> Page:
    """Compile a single source file into a Page.

    Args:
        file_path: Fragment file to compile
        theme_path: Stylesheet inlined into the document
        site_title: Site title used in the document title
        header_path: Header fragment placed above the content
        content_dir: Content directory root, used for URL path derivation

    Returns:
        Compiled Page

    Raises:
        ReadFailedError: If any of the three files cannot be read
        NotUtf8Error: If any of the three files is not valid UTF-8
    """
    url_path = derive_url_path(file_path, content_dir)
    content = read_source(file_path)
    theme = read_source(theme_path)
    header = read_source(header_path)

    title = f"{url_path.removeprefix('/')} on {site_title}"
    body = render_document(content, theme, title, header)

    logger.debug("Compiled %s -> %s", file_path, url_path)
    return Page(url_path=url_path, body=body)


def compile_site(
    content_dir: Path,
    theme_path: Path,
    site_title: str,
    header_path: Path,
    *,
    home_path: Path | None = None,
    not_found_path: Path | None = None,
) -> PageSet:
    """Compile the home page, the not-found page and all content pages.

    Entry files default to home.html and 404.html next to the content
    directory. Only direct entries of the content directory are compiled;
    subdirectories and other non-regular entries (FIFOs, sockets) are skipped
    and enumeration continues. Entries are processed in file name order.

    Args:
        content_dir: Directory of content fragments
        theme_path: Stylesheet inlined into every page
        site_title: Site title used in every document title
        header_path: Header fragment placed on every page
        home_path: Home entry file
        not_found_path: Not-found entry file

    Returns:
        PageSet with home at slot 0 and not-found at slot 1

    Raises:
        BuildError: If any file cannot be compiled or the content directory
            cannot be read. Compilation is all-or-nothing.
    """
    project_dir = content_dir.parent
    if home_path is None:
        home_path = project_dir / HOME_FILENAME
    if not_found_path is None:
        not_found_path = project_dir / NOT_FOUND_FILENAME

    def build(file_path: Path) -> Page:
        return build_page(
            file_path,
            theme_path,
            site_title,
            header_path,
            content_dir=content_dir,
        )

    home = build(home_path)
    not_found = build(not_found_path)

    try:
        entries = sorted(content_dir.iterdir())
    except OSError as e:
        raise DirUnreadableError(content_dir) from e

    content: list[Page] = []
    for entry in entries:
        if entry.is_dir():
            logger.debug("Skipping subdirectory %s", entry)
            continue
        # Broken symlinks fall through so the read reports them
        if entry.exists() and not entry.is_file():
            logger.debug("Skipping non-regular file %s", entry)
            continue
        content.append(build(entry))

    pages = PageSet(home, not_found, content)
    logger.info("Compiled %d pages from %s", len(pages), content_dir)
    return pages
