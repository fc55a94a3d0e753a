"""folder-module: generate an index module that re-exports every file in a directory."""

from folder_module.config import ModuleConfig, default_out_file
from folder_module.errors import (
    CollisionError,
    ConfigurationError,
    FileSystemError,
    FolderModuleError,
    IdentifierError,
)
from folder_module.models import GeneratedModule, Mapping
from folder_module.pipeline import build_module, folder_module

__version__ = "0.1.0"

__all__ = [
    "CollisionError",
    "ConfigurationError",
    "FileSystemError",
    "FolderModuleError",
    "GeneratedModule",
    "IdentifierError",
    "Mapping",
    "ModuleConfig",
    "build_module",
    "default_out_file",
    "folder_module",
]
