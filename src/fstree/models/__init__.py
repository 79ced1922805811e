"""Public model exports for fstree."""

from __future__ import annotations

from .node import Node, NodeKind
from .stats import Stats

__all__ = [
    "Node",
    "NodeKind",
    "Stats",
]
