"""Build errors raised while compiling pages.

Every error carries the path that caused it so the CLI can report it
before aborting startup.
"""

from pathlib import Path


class BuildError(Exception):
    """Base class for page compilation failures."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class ReadFailedError(BuildError):
    """A required source file could not be read from disk."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, "Failed to read file")


class NotUtf8Error(BuildError):
    """A required source file is not valid UTF-8 text."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, "File is not valid UTF-8")


class DirUnreadableError(BuildError):
    """The content directory could not be enumerated."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, "Cannot read content directory")
