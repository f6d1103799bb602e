"""Tests for configuration loading."""

from pathlib import Path

import pytest
from fbws.config import Config

VALID_CONFIG = 'title = "Demo"\ntheme = "theme.css"\nport = 3000\nheader = "header.html"\n'


class TestConfigLoad:
    """Tests for Config.load()."""

    def test__explicit_path__loads_config(self, tmp_path: Path) -> None:
        config_file = tmp_path / "project.toml"
        config_file.write_text(VALID_CONFIG)

        config = Config.load(config_file)

        assert config.server.host == "127.0.0.1"
        assert config.server.port == 3000
        assert config.site.title == "Demo"
        assert config.site.theme_path == tmp_path / "theme.css"
        assert config.site.header_path == tmp_path / "header.html"
        assert config.site.content_dir == tmp_path / "pages"
        assert config.site.home_path == tmp_path / "home.html"
        assert config.site.not_found_path == tmp_path / "404.html"
        assert config.config_path == config_file
        assert config.project_dir == tmp_path

    def test__explicit_path_missing__raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            Config.load(tmp_path / "project.toml")

    def test__discovers_config_in_parent(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "project.toml").write_text(VALID_CONFIG)
        nested = tmp_path / "pages" / "deep"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        config = Config.load()

        assert config.config_path == tmp_path / "project.toml"

    def test__no_config_found__raises(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(Config, "_discover_config", classmethod(lambda cls: None))

        with pytest.raises(FileNotFoundError, match="Not a valid FBWS project"):
            Config.load()

    @pytest.mark.parametrize("missing", ["title", "theme", "header", "port"])
    def test__missing_required_option__raises(self, tmp_path: Path, missing: str) -> None:
        lines = [line for line in VALID_CONFIG.splitlines() if not line.startswith(missing)]
        config_file = tmp_path / "project.toml"
        config_file.write_text("\n".join(lines))

        with pytest.raises(ValueError, match=f"Missing required option '{missing}'"):
            Config.load(config_file)

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ('title = 1\ntheme = "t"\nport = 1\nheader = "h"', "title must be a string"),
            ('title = "t"\ntheme = 1\nport = 1\nheader = "h"', "theme must be a string"),
            ('title = "t"\ntheme = "t"\nport = 1\nheader = []', "header must be a string"),
            ('title = "t"\ntheme = "t"\nport = "80"\nheader = "h"', "port must be an integer"),
            ('title = "t"\ntheme = "t"\nport = true\nheader = "h"', "port must be an integer"),
            ('title = "t"\ntheme = "t"\nport = 70000\nheader = "h"', "port must be between"),
        ],
    )
    def test__invalid_value__raises(self, tmp_path: Path, content: str, message: str) -> None:
        config_file = tmp_path / "project.toml"
        config_file.write_text(content)

        with pytest.raises(ValueError, match=message):
            Config.load(config_file)

    def test__invalid_toml__raises_value_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / "project.toml"
        config_file.write_text("title = ")

        with pytest.raises(ValueError, match="Invalid TOML"):
            Config.load(config_file)


class TestWithOverrides:
    """Tests for Config.with_overrides()."""

    def test__port__overrides(self, test_config: Config) -> None:
        config = test_config.with_overrides(port=9000)

        assert config.server.port == 9000
        assert test_config.server.port == 8080
        assert config.site == test_config.site

    def test__no_overrides__returns_same(self, test_config: Config) -> None:
        assert test_config.with_overrides() is test_config
