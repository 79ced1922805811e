"""Validation helpers for TreeService."""

from __future__ import annotations

from typing import Optional

from fstree.errors import InvalidArgumentError, InvalidStateError, duplicate_name
from fstree.models import Node


def validate_not_root(root: Node, target: Node, action: str) -> None:
    if target is root:
        raise InvalidStateError(f"Root is protected: cannot {action} root")


def validate_can_have_children(node: Node, what: str) -> None:
    if not node.can_have_children():
        raise InvalidArgumentError(
            f"{what} must be a drive or folder: {node.name}",
            details={"kind": node.kind.value},
        )


def validate_move_no_cycle(target: Node, new_parent: Node) -> None:
    """
    Reject cycles: if target appears on the ancestor chain of new_parent.

    Walks from new_parent towards the root; hitting target means the move
    would put a node inside itself.
    """
    if target is new_parent:
        raise InvalidArgumentError("MOVE would create a cycle (target == new_parent)")

    for ancestor in new_parent.ancestors():
        if ancestor is target:
            raise InvalidArgumentError(
                "MOVE would create a cycle",
                details={"target": target.name, "new_parent": new_parent.name},
            )


def validate_unique_name(parent: Node, name: str, exclude: Optional[Node] = None) -> None:
    """
    Reject a name already used by another child of parent (case-insensitive).

    exclude is the node being renamed or moved; its own entry never counts
    as a collision.
    """
    existing = parent.child_by_name(name)
    if existing is not None and existing is not exclude:
        raise duplicate_name(name, parent.name)
