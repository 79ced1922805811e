"""Load/save the text format from/to disk."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from fstree.errors import StorageError
from fstree.models import Node

from .text_format import decode_text, encode_text

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def load_tree(path: PathLike, *, encoding: str = "utf-8") -> Node:
    """
    Read a text file and decode it into an invisible root.

    Raises:
        StorageError: if the file cannot be read or decoded with encoding.
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise StorageError(
            f"Cannot read tree file: {file_path}",
            details={"file": str(file_path), "encoding": encoding},
            cause=exc,
        ) from exc

    root = decode_text(text)
    logger.debug("loaded tree from %s", file_path)
    return root


def save_tree(root: Node, path: PathLike, *, encoding: str = "utf-8") -> int:
    """
    Encode the tree and write the whole file.

    Parent directories are created as needed.

    Returns:
        Number of lines written.

    Raises:
        StorageError: if the file cannot be written.
    """
    file_path = Path(path)
    text = encode_text(root)
    written = text.count("\n")
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(text, encoding=encoding)
    except (OSError, UnicodeEncodeError) as exc:
        raise StorageError(
            f"Cannot write tree file: {file_path}",
            details={"file": str(file_path), "encoding": encoding},
            cause=exc,
        ) from exc

    logger.info("saved %d lines to %s", written, file_path)
    return written
