"""Pipeline orchestrator: list -> filter -> convert -> validate -> generate -> write."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from folder_module.config import ModuleConfig
from folder_module.errors import ConfigurationError
from folder_module.exporter import generate_module, write_module
from folder_module.models import GeneratedModule
from folder_module.naming import convert_entries, validate_mappings
from folder_module.scanner import filter_entries, list_files

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


def build_module(
    directory: str | Path | None,
    config: ModuleConfig | None = None,
    progress: ProgressCallback | None = None,
) -> GeneratedModule:
    """Run every stage except the write and return the module held in memory."""
    if directory is None or str(directory) == "":
        raise ConfigurationError("Input directory must be specified")
    config = config or ModuleConfig()
    directory = Path(directory)
    out_file = config.resolve_out_file(directory)

    # Stage 1: List
    if progress:
        progress("Listing", 0, 1)
    entries = list_files(directory)
    if progress:
        progress("Listing", 1, 1)

    # Stage 2: Filter
    kept = filter_entries(entries, config.ignore, out_file)
    logger.debug("%d of %d file(s) in %s kept", len(kept), len(entries), directory)

    # Stage 3: Convert
    mappings = convert_entries(kept, config.convert)
    for mapping in mappings:
        logger.debug("%s -> %s", mapping.source, mapping.identifier)

    # Stage 4: Validate
    if progress:
        progress("Validating", 0, len(mappings))
    validate_mappings(mappings)
    if progress:
        progress("Validating", len(mappings), len(mappings))

    # Stage 5: Generate
    return generate_module(mappings, out_file)


def folder_module(
    directory: str | Path | None,
    config: ModuleConfig | None = None,
    progress: ProgressCallback | None = None,
) -> GeneratedModule:
    """Generate the index module for ``directory`` and write it.

    Nothing is written unless every earlier stage succeeded, so a failed run
    leaves any previous output file as it was.
    """
    module = build_module(directory, config, progress=progress)

    # Stage 6: Write
    if progress:
        progress("Writing", 0, 1)
    write_module(module)
    if progress:
        progress("Writing", 1, 1)

    return module
