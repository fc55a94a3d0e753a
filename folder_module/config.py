"""Run configuration and its defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from folder_module.naming.converter import default_convert
from folder_module.scanner.filters import default_ignore

ConvertFunc = Callable[[str], str]
IgnoreFunc = Callable[[str, Path], bool]

DEFAULT_INDEX_NAME = "index.js"


def default_out_file(directory: str | Path) -> Path:
    """Index file placed inside the scanned directory: ``widgets`` -> ``widgets/index.js``."""
    return Path(directory) / DEFAULT_INDEX_NAME


@dataclass(frozen=True)
class ModuleConfig:
    """Configuration for one run.

    ``out_file=None`` means derive it from the scanned directory. ``convert`` and
    ``ignore`` replace the default conversion and exclusion rules entirely.
    """
    out_file: Path | None = None
    convert: ConvertFunc = default_convert
    ignore: IgnoreFunc = default_ignore

    def resolve_out_file(self, directory: str | Path) -> Path:
        if self.out_file is not None:
            return Path(self.out_file)
        return default_out_file(directory)
