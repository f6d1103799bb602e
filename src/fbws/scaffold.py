"""New project scaffolding."""

import logging
from pathlib import Path

from fbws.config import CONFIG_FILENAME, CONTENT_DIRNAME
from fbws.core.compiler import HOME_FILENAME, NOT_FOUND_FILENAME

logger = logging.getLogger(__name__)

THEME_FILENAME = "theme.css"
HEADER_FILENAME = "header.html"
DEFAULT_PORT = 8080


def create_project(path: Path) -> Path:
    """Create a new project directory with starter files.

    Args:
        path: Directory to create; its name becomes the site title

    Returns:
        Path of the created project

    Raises:
        FileExistsError: If the directory already exists
    """
    path.mkdir()

    starter_files = {
        HOME_FILENAME: "<h1>Home page!</h1>",
        NOT_FOUND_FILENAME: "<h1>404 Page!</h1>",
        THEME_FILENAME: "/* Add your style here */",
        HEADER_FILENAME: "<!--Use this file to add a header across all pages-->",
        CONFIG_FILENAME: _project_toml(path.name),
    }
    for filename, content in starter_files.items():
        (path / filename).write_text(content, encoding="utf-8")

    (path / CONTENT_DIRNAME).mkdir()

    logger.debug("Created project skeleton in %s", path)
    return path


def _project_toml(title: str) -> str:
    escaped = title.replace("\\", "\\\\").replace('"', '\\"')
    return (
        f'title = "{escaped}"\n'
        f'theme = "{THEME_FILENAME}"\n'
        f"port = {DEFAULT_PORT}\n"
        f'header = "{HEADER_FILENAME}"\n'
    )
