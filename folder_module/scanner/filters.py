"""Default exclusion rules for directory entries."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterable

logger = logging.getLogger(__name__)


def split_extension(filename: str) -> tuple[str, str]:
    """Split ``filename`` into (name, extension) the way Node's ``path.parse`` does.

    ``.env`` has no extension, ``foo.`` has the extension ``.``.
    """
    return os.path.splitext(filename)


def default_ignore(filename: str, out_file: Path) -> bool:
    """Return True if ``filename`` should not become an export."""
    return (
        "/" in filename
        or filename.startswith("--")
        or filename.startswith(".")
        or split_extension(filename)[1] == ""
    )


def filter_entries(
    paths: Iterable[Path],
    ignore: Callable[[str, Path], bool],
    out_file: Path,
) -> list[Path]:
    """Drop ignored entries and the output file itself."""
    target = os.path.abspath(out_file)
    kept: list[Path] = []
    for path in paths:
        if os.path.abspath(path) == target:
            logger.debug("skipping output file %s", path)
            continue
        if ignore(path.name, out_file):
            logger.debug("ignoring %s", path)
            continue
        kept.append(path)
    return kept
