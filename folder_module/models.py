"""Data models for the folder-module pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Mapping:
    """One source file and the name it is exported under."""
    source: Path
    identifier: str


@dataclass
class GeneratedModule:
    """Result from the generator stage, and of the whole run."""
    out_file: Path
    mappings: list[Mapping] = field(default_factory=list)
    text: str = ""

    @property
    def content(self) -> str:
        return f"{self.text}\n"

    @property
    def exports(self) -> int:
        return len(self.mappings)
