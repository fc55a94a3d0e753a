"""Exporter layer."""

from folder_module.exporter.index_generator import generate_module, relative_import, render_export
from folder_module.exporter.writer import write_module

__all__ = ["generate_module", "relative_import", "render_export", "write_module"]
