"""Scanner layer: list the directory, drop what should not be exported."""

from folder_module.scanner.filters import default_ignore, filter_entries
from folder_module.scanner.lister import list_files

__all__ = ["default_ignore", "filter_entries", "list_files"]
