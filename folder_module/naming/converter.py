"""Derive export identifiers from filenames."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, Iterable

from folder_module.models import Mapping
from folder_module.scanner.filters import split_extension

_WHITESPACE = re.compile(r"\s+")
_HYPHEN_LETTER = re.compile(r"-([a-zA-Z])")


def default_convert(filename: str) -> str:
    """Convert ``my-file.js`` to ``myFile``.

    Only the first run of whitespace is removed (``a b c.js`` -> ``ab c``), while
    every ``-<letter>`` is camel-cased. Names that still contain whitespace are
    rejected later by identifier validation.
    """
    name = split_extension(filename)[0]
    name = _WHITESPACE.sub("", name, count=1)
    return _HYPHEN_LETTER.sub(lambda m: m.group(1).upper(), name)


def convert_entries(paths: Iterable[Path], convert: Callable[[str], str]) -> list[Mapping]:
    return [Mapping(source=path, identifier=convert(path.name)) for path in paths]
