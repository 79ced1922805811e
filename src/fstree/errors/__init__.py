"""Public error exports for fstree."""

from __future__ import annotations

from .exceptions import (
    DuplicateNameError,
    FsTreeError,
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
    StorageError,
    duplicate_name,
    path_not_found,
)

__all__ = [
    "FsTreeError",
    "NotFoundError",
    "DuplicateNameError",
    "InvalidStateError",
    "InvalidArgumentError",
    "StorageError",
    "duplicate_name",
    "path_not_found",
]
