"""Aggregate subtree statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .node import NodeKind


@dataclass(slots=True)
class Stats:
    """
    Read-only report over a subtree.

    Notes:
        - total_nodes includes the start node.
        - Drives are counted in neither folders nor files.
        - Depths are relative to the start node (start node = 0).
        - nodes_per_depth[d] and kinds_per_depth[d] break the counts down by
          depth; both have max_depth + 1 entries.
    """

    total_nodes: int = 0
    folders: int = 0
    files: int = 0
    max_depth: int = 0
    total_size_bytes: int = 0

    nodes_per_depth: list[int] = field(default_factory=list)
    kinds_per_depth: list[dict[NodeKind, int]] = field(default_factory=list)

    def record(self, kind: NodeKind, depth: int, size_bytes: int = 0) -> None:
        """Account for one visited node."""
        self.total_nodes += 1
        if depth > self.max_depth:
            self.max_depth = depth

        if kind is NodeKind.FILE:
            self.files += 1
            self.total_size_bytes += size_bytes
        elif kind is NodeKind.FOLDER:
            self.folders += 1

        while len(self.nodes_per_depth) <= depth:
            self.nodes_per_depth.append(0)
            self.kinds_per_depth.append({k: 0 for k in NodeKind})
        self.nodes_per_depth[depth] += 1
        self.kinds_per_depth[depth][kind] += 1

    def as_dict(self) -> dict[str, Any]:
        return {
            "total_nodes": self.total_nodes,
            "folders": self.folders,
            "files": self.files,
            "max_depth": self.max_depth,
            "total_size_bytes": self.total_size_bytes,
            "nodes_per_depth": list(self.nodes_per_depth),
            "kinds_per_depth": [
                {k.value: v for k, v in row.items()} for row in self.kinds_per_depth
            ],
        }
