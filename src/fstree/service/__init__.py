"""Public service exports for fstree."""

from __future__ import annotations

from .tree_service import TreePath, TreeService

__all__ = ["TreeService", "TreePath"]
