"""FileTreeManager: orchestrates load -> edit -> explicit save."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fstree.codec import load_tree, new_root, save_tree
from fstree.config import TreeConfig
from fstree.errors import InvalidStateError
from fstree.models import Node
from fstree.service import TreeService

logger = logging.getLogger(__name__)


class FileTreeManager:
    """
    Holds the process-lifetime tree for a display layer.

    The tree is read once by open(), mutated through the service, and written
    back only when save() is called. There is no autosave.
    """

    def __init__(self, config: Optional[TreeConfig] = None) -> None:
        self._config = config or TreeConfig()
        self._service: Optional[TreeService] = None
        self._saved_revision = 0

    @classmethod
    def from_service(
        cls,
        service: TreeService,
        config: Optional[TreeConfig] = None,
    ) -> "FileTreeManager":
        """Create a manager around an existing service (useful for tests)."""
        obj = cls(config)
        obj._service = service
        obj._saved_revision = service.revision
        return obj

    @property
    def config(self) -> TreeConfig:
        return self._config

    @property
    def service(self) -> TreeService:
        """Return the current service. Requires open() first."""
        if self._service is None:
            raise InvalidStateError("Tree is not loaded. Call open() first.")
        return self._service

    @property
    def root(self) -> Node:
        return self.service.root

    @property
    def has_unsaved_changes(self) -> bool:
        if self._service is None:
            return False
        return self._service.revision != self._saved_revision

    def open(self, *, force: bool = False) -> TreeService:
        """
        Load the configured text file and build a fresh service.

        Raises:
            InvalidStateError: if unsaved changes exist and force is False.
            StorageError: if the file cannot be read (and create_if_missing
                does not apply).
        """
        if self.has_unsaved_changes and not force:
            raise InvalidStateError("Unsaved changes exist. Save or reopen with force=True.")

        path = Path(self._config.text_file)
        if self._config.create_if_missing and not path.exists():
            logger.info("%s does not exist, starting with an empty tree", path)
            root = new_root()
        else:
            root = load_tree(path, encoding=self._config.encoding)

        self._service = TreeService(
            root,
            placeholder_folders=self._config.placeholder_folders,
        )
        self._saved_revision = self._service.revision
        return self._service

    def reload(self) -> TreeService:
        """Discard in-memory changes and read the file again."""
        return self.open(force=True)

    def save(self) -> int:
        """
        Write the current tree to the configured text file.

        Returns:
            Number of lines written.
        """
        service = self.service
        written = save_tree(
            service.root,
            self._config.text_file,
            encoding=self._config.encoding,
        )
        self._saved_revision = service.revision
        return written
