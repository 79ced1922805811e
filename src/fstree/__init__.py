"""fstree public API."""

from __future__ import annotations

import logging

from fstree.codec import (
    decode_lines,
    decode_text,
    encode_lines,
    encode_text,
    guess_kind,
    load_tree,
    save_tree,
)
from fstree.config import TreeConfig
from fstree.errors import (
    DuplicateNameError,
    FsTreeError,
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
    StorageError,
)
from fstree.manager import FileTreeManager
from fstree.models import Node, NodeKind, Stats
from fstree.service import TreeService

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # High-level
    "FileTreeManager",
    "TreeService",
    "TreeConfig",
    # Models
    "Node",
    "NodeKind",
    "Stats",
    # Codec
    "decode_lines",
    "encode_lines",
    "decode_text",
    "encode_text",
    "guess_kind",
    "load_tree",
    "save_tree",
    # Errors
    "FsTreeError",
    "NotFoundError",
    "DuplicateNameError",
    "InvalidStateError",
    "InvalidArgumentError",
    "StorageError",
]
