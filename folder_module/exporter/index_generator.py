"""Render the re-export statements of the index module."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Iterable

from folder_module.models import GeneratedModule, Mapping


def relative_import(source: Path, out_file: Path) -> str:
    """Import specifier for ``source`` as seen from the directory of ``out_file``.

    Always ``./``-prefixed and forward-slashed, whether the inputs were relative or
    absolute.
    """
    out_dir = os.path.dirname(os.path.abspath(out_file))
    rel = os.path.relpath(os.path.abspath(source), out_dir)
    return "./" + rel.replace(os.sep, "/")


def _string_literal(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def render_export(mapping: Mapping, out_file: Path) -> str:
    specifier = _string_literal(relative_import(mapping.source, out_file))
    return f"export {{ default as {mapping.identifier} }} from {specifier};"


def generate_module(mappings: Iterable[Mapping], out_file: Path) -> GeneratedModule:
    """Build the module text, one statement per mapping, in mapping order."""
    mappings = list(mappings)
    lines = [render_export(mapping, out_file) for mapping in mappings]
    return GeneratedModule(out_file=Path(out_file), mappings=mappings, text="\n".join(lines))
