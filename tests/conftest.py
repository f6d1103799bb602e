"""Shared test fixtures."""

from pathlib import Path

import pytest
from fbws.config import Config


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a minimal project tree.

    Contains entry files, theme, header, config and an empty pages dir.
    """
    project = tmp_path / "site"
    project.mkdir()
    (project / "home.html").write_text("<h1>Welcome</h1>")
    (project / "404.html").write_text("<h1>Not here</h1>")
    (project / "theme.css").write_text("body{color:red}")
    (project / "header.html").write_text("<nav>Home</nav>")
    (project / "project.toml").write_text(
        'title = "Demo"\ntheme = "theme.css"\nport = 8080\nheader = "header.html"\n',
    )
    (project / "pages").mkdir()
    return project


@pytest.fixture
def pages_dir(project_dir: Path) -> Path:
    return project_dir / "pages"


@pytest.fixture
def test_config(project_dir: Path) -> Config:
    return Config.load(project_dir / "project.toml")
