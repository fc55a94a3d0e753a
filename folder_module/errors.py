"""Exception types raised by the folder-module pipeline."""

from __future__ import annotations

from pathlib import Path


class FolderModuleError(Exception):
    """Base class for every error the pipeline raises on purpose."""


class ConfigurationError(FolderModuleError):
    """The invocation is missing something it needs, e.g. the input directory."""


class FileSystemError(FolderModuleError):
    """Listing the input directory or writing the output file failed."""


class IdentifierError(FolderModuleError, ValueError):
    """A converted filename is not a legal export name."""

    def __init__(self, identifier: str, source: Path):
        self.identifier = identifier
        self.source = source
        super().__init__(
            f"Name {identifier!r} is not a valid identifier (from {source})"
        )


class CollisionError(FolderModuleError, ValueError):
    """Two files converted to the same export name."""

    def __init__(self, identifier: str, source: Path, previous_source: Path):
        self.identifier = identifier
        self.source = source
        self.previous_source = previous_source
        super().__init__(
            f"Name {identifier!r} is generated by both {source} and {previous_source}"
        )
