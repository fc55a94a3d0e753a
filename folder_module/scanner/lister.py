"""List the regular files directly inside a directory."""

from __future__ import annotations

from pathlib import Path

from folder_module.errors import FileSystemError


def list_files(directory: str | Path) -> list[Path]:
    """Return ``directory / name`` for every immediate entry that is a file.

    Symlinks to files are kept, subdirectories and symlinks to directories are not.
    Entries come back sorted by name so the generated module is stable across runs.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FileSystemError(f"Input directory {directory} does not exist or is not a directory")

    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise FileSystemError(f"Cannot read directory {directory}: {e}") from e

    return [path for path in entries if path.is_file()]
