"""Write a generated module to disk."""

from __future__ import annotations

import logging
from pathlib import Path

from folder_module.errors import FileSystemError
from folder_module.models import GeneratedModule

logger = logging.getLogger(__name__)


def write_module(module: GeneratedModule) -> Path:
    """Create parent directories and overwrite ``module.out_file``.

    The content is encoded before the file is opened, so an encoding failure
    leaves the previous output untouched. ``surrogateescape`` round-trips
    filenames that are not valid UTF-8 back to their original bytes.
    """
    out_file = module.out_file
    try:
        data = module.content.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError as e:
        raise FileSystemError(f"Cannot encode {out_file}: {e}") from e

    try:
        out_file.parent.mkdir(parents=True, exist_ok=True)
        out_file.write_bytes(data)
    except OSError as e:
        raise FileSystemError(f"Cannot write {out_file}: {e}") from e

    logger.info("wrote %d export(s) to %s", module.exports, out_file)
    return out_file
