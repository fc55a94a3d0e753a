"""Naming layer: filenames to export identifiers."""

from folder_module.naming.converter import convert_entries, default_convert
from folder_module.naming.identifiers import is_valid_identifier, validate_mappings

__all__ = [
    "convert_entries",
    "default_convert",
    "is_valid_identifier",
    "validate_mappings",
]
