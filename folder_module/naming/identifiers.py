"""Identifier validation and duplicate detection."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from folder_module.errors import CollisionError, IdentifierError
from folder_module.models import Mapping

# Always allowed, on top of the Unicode start/continue classes
_EXTRA_START = frozenset("$_")
_EXTRA_CONTINUE = frozenset("$_\u200c\u200d")


def _is_id_start(ch: str) -> bool:
    return ch in _EXTRA_START or ch.isidentifier()


def _is_id_continue(ch: str) -> bool:
    return ch in _EXTRA_CONTINUE or f"_{ch}".isidentifier()


def is_valid_identifier(name: str) -> bool:
    """True if ``name`` is usable as an export name in an ES module.

    ``str.isidentifier`` checks the XID classes, which drop a few ID_Start and
    ID_Continue code points: U+037A, U+309B and U+309C anywhere, and U+FF9E
    and U+FF9F as the first character. Names using those are rejected here.
    """
    if not name:
        return False
    return _is_id_start(name[0]) and all(_is_id_continue(ch) for ch in name[1:])


def validate_mappings(mappings: Iterable[Mapping]) -> dict[str, Path]:
    """Check every mapping in order and stop at the first bad one.

    Returns the identifier -> source map in insertion order.
    """
    seen: dict[str, Path] = {}
    for mapping in mappings:
        if not is_valid_identifier(mapping.identifier):
            raise IdentifierError(mapping.identifier, mapping.source)
        if mapping.identifier in seen:
            raise CollisionError(mapping.identifier, mapping.source, seen[mapping.identifier])
        seen[mapping.identifier] = mapping.source
    return seen
