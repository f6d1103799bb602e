"""Configuration management for FBWS.

Reads the project.toml file at the project root with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

from fbws.core.compiler import HOME_FILENAME, NOT_FOUND_FILENAME

CONFIG_FILENAME = "project.toml"
CONTENT_DIRNAME = "pages"
DEFAULT_HOST = "127.0.0.1"


@dataclass(frozen=True)
class ServerConfig:
    """Server configuration."""

    port: int
    host: str = DEFAULT_HOST


@dataclass(frozen=True)
class SiteConfig:
    """Site sources and presentation settings."""

    title: str
    theme_path: Path
    header_path: Path
    content_dir: Path
    home_path: Path
    not_found_path: Path


@dataclass(frozen=True)
class Config:
    """Project configuration."""

    server: ServerConfig
    site: SiteConfig
    config_path: Path

    @property
    def project_dir(self) -> Path:
        return self.config_path.parent

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for project.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If no config file exists
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            raise FileNotFoundError(
                f"Not a valid FBWS project: no {CONFIG_FILENAME} in {Path.cwd()} or its parents",
            )

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        project_dir = path.parent

        return cls(
            server=cls._parse_server(data),
            site=cls._parse_site(data, project_dir),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: dict[str, object]) -> ServerConfig:
        """Parse server settings.

        Args:
            data: Raw configuration data

        Returns:
            ServerConfig instance
        """
        port = _require(data, "port")
        # bool is a subclass of int
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("port must be an integer")
        if not 0 <= port <= 65535:
            raise ValueError(f"port must be between 0 and 65535, got {port}")

        return ServerConfig(port=port)

    @classmethod
    def _parse_site(cls, data: dict[str, object], project_dir: Path) -> SiteConfig:
        """Parse site settings.

        Args:
            data: Raw configuration data
            project_dir: Directory containing config file (for relative paths)

        Returns:
            SiteConfig instance
        """
        title = _require(data, "title")
        if not isinstance(title, str):
            raise ValueError("title must be a string")

        theme = _require(data, "theme")
        if not isinstance(theme, str):
            raise ValueError("theme must be a string")

        header = _require(data, "header")
        if not isinstance(header, str):
            raise ValueError("header must be a string")

        return SiteConfig(
            title=title,
            theme_path=project_dir / theme,
            header_path=project_dir / header,
            content_dir=project_dir / CONTENT_DIRNAME,
            home_path=project_dir / HOME_FILENAME,
            not_found_path=project_dir / NOT_FOUND_FILENAME,
        )

    def with_overrides(self, *, port: int | None = None) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config.

        Args:
            port: Override server.port

        Returns:
            New Config instance with overrides applied
        """
        if port is None:
            return self
        return replace(self, server=replace(self.server, port=port))


def _require(data: dict[str, object], key: str) -> object:
    if key not in data:
        raise ValueError(f"Missing required option '{key}' in {CONFIG_FILENAME}")
    return data[key]
