"""Exception hierarchy for fstree."""

from __future__ import annotations

from typing import Any, Optional, Sequence


class FsTreeError(Exception):
    """
    Base exception for fstree.

    Attributes:
        details: Optional structured information (e.g., path, offending name).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class NotFoundError(FsTreeError):
    """Raised when a path segment does not resolve to an existing child."""


class DuplicateNameError(FsTreeError):
    """Raised when two siblings would share a name (case-insensitive)."""


class InvalidStateError(FsTreeError):
    """Raised when a structural rule is violated (child of a file, root delete, ...)."""


class InvalidArgumentError(FsTreeError):
    """Raised for blank names, bad sizes, and moves that are not allowed."""


class StorageError(FsTreeError):
    """Raised when the persisted text file cannot be read or written."""


def path_not_found(path: Sequence[str]) -> NotFoundError:
    """Build the NotFoundError for a path, naming the full attempted path."""
    parts = list(path)
    return NotFoundError(
        f"Path not found: {'/'.join(parts)}",
        details={"path": parts},
    )


def duplicate_name(name: str, parent_name: Optional[str] = None) -> DuplicateNameError:
    """Build the DuplicateNameError raised for a sibling collision."""
    details: dict[str, Any] = {"name": name}
    if parent_name is not None:
        details["parent"] = parent_name
    return DuplicateNameError(f"Duplicate name: {name}", details=details)
