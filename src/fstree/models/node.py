"""Tree node model: drives, folders and files."""

from __future__ import annotations

import weakref
from enum import Enum
from typing import Iterator, Optional

from fstree.errors import InvalidArgumentError, InvalidStateError, duplicate_name
from fstree.util.names import SIZE_SEPARATOR, extension_of, normalize_name, same_name


class NodeKind(str, Enum):
    """Kinds of tree nodes. Only FILE is barred from having children."""

    DRIVE = "DRIVE"
    FOLDER = "FOLDER"
    FILE = "FILE"


_CONTAINER_KINDS: frozenset[NodeKind] = frozenset({NodeKind.DRIVE, NodeKind.FOLDER})


class Node:
    """
    A node of the logical filesystem tree.

    Notes:
        - The parent owns its children list; the child's parent link is a weak
          reference used only for upward walks and cycle checks.
        - Names are trimmed on every assignment and compared case-insensitively
          among siblings.
        - size_bytes is a FILE-only payload; drives and folders always report 0.
    """

    __slots__ = ("_name", "_kind", "_size_bytes", "_children", "_parent_ref", "__weakref__")

    def __init__(self, name: str, kind: NodeKind, size_bytes: int = 0) -> None:
        kind = _validate_kind(kind)
        self._name = _validate_name(kind, name)
        self._kind = kind
        self._size_bytes = _validate_size(kind, size_bytes)
        self._children: list[Node] = []
        self._parent_ref: Optional[weakref.ref[Node]] = None

    @classmethod
    def placeholder(cls) -> Node:
        """
        Create the legacy empty-named FILE (size 0) some folders carry.

        This is the only way to get a node with an empty name.
        """
        obj = cls.__new__(cls)
        obj._name = ""
        obj._kind = NodeKind.FILE
        obj._size_bytes = 0
        obj._children = []
        obj._parent_ref = None
        return obj

    # ----------------------------
    # Attributes
    # ----------------------------
    @property
    def name(self) -> str:
        return self._name

    @property
    def kind(self) -> NodeKind:
        return self._kind

    @property
    def size_bytes(self) -> int:
        return self._size_bytes

    @property
    def children(self) -> tuple[Node, ...]:
        """Children in insertion order (read-only view)."""
        return tuple(self._children)

    @property
    def parent(self) -> Optional[Node]:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_placeholder(self) -> bool:
        return self._kind is NodeKind.FILE and self._name == ""

    @property
    def extension(self) -> str:
        """File extension without the dot ("" for non-files or no extension)."""
        if self._kind is not NodeKind.FILE:
            return ""
        return extension_of(self._name)

    def can_have_children(self) -> bool:
        return self._kind in _CONTAINER_KINDS

    # ----------------------------
    # Mutations
    # ----------------------------
    def add_child(self, child: Node) -> None:
        """
        Attach a standalone node as the last child.

        Raises:
            InvalidStateError: if this node is a FILE, the child already has a
                parent, or the child is this node or one of its ancestors.
            DuplicateNameError: if a sibling with the same name (any case) exists.
        """
        if not self.can_have_children():
            raise InvalidStateError(
                "Files cannot have children",
                details={"parent": self._name, "child": child.name},
            )
        if child.parent is not None:
            raise InvalidStateError(
                "Node is already attached to a parent",
                details={"child": child.name, "parent": child.parent.name},
            )
        if child is self or any(a is child for a in self.ancestors()):
            raise InvalidStateError(
                "A node cannot become its own descendant",
                details={"child": child.name},
            )
        if self.child_by_name(child.name) is not None:
            raise duplicate_name(child.name, self._name)

        self._children.append(child)
        child._parent_ref = weakref.ref(self)

    def remove_child(self, child: Node) -> None:
        """Detach child if present; no-op otherwise."""
        for i, existing in enumerate(self._children):
            if existing is child:
                del self._children[i]
                child._parent_ref = None
                return

    def rename(self, new_name: str) -> None:
        """
        Trim and assign a new name.

        Sibling uniqueness is NOT checked here; TreeService.rename does that.

        Raises:
            InvalidArgumentError: if new_name is None, blank, contains a line
                break, or (for drives and folders) contains the size separator.
        """
        self._name = _validate_name(self._kind, new_name)

    def set_size(self, size_bytes: int) -> None:
        """Update the size of a FILE node."""
        self._size_bytes = _validate_size(self._kind, size_bytes)

    # ----------------------------
    # Queries
    # ----------------------------
    def child_by_name(self, name: str) -> Optional[Node]:
        """Case-insensitive lookup among direct children (first match)."""
        for child in self._children:
            if same_name(child.name, name):
                return child
        return None

    def ancestors(self) -> Iterator[Node]:
        """Yield the parent chain, nearest first."""
        cur = self.parent
        while cur is not None:
            yield cur
            cur = cur.parent

    def path(self) -> list[str]:
        """
        Names from just below the top-most ancestor down to this node.

        The top-most ancestor (normally the invisible root) is not included,
        so a root or a standalone node has an empty path.
        """
        chain = [self, *self.ancestors()]
        return [n.name for n in reversed(chain[:-1])]

    def walk(self) -> Iterator[tuple[Node, int]]:
        """
        Pre-order traversal of this subtree, yielding (node, relative_depth).

        Children are visited in insertion order. Iterative, so deep trees do
        not hit the recursion limit.
        """
        stack: list[tuple[Node, int]] = [(self, 0)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            for child in reversed(node._children):
                stack.append((child, depth + 1))

    def __repr__(self) -> str:
        if self._kind is NodeKind.FILE:
            return f"Node(name={self._name!r}, kind={self._kind.value}, size_bytes={self._size_bytes})"
        return f"Node(name={self._name!r}, kind={self._kind.value}, children={len(self._children)})"

    def __str__(self) -> str:
        return self._name


def _validate_size(kind: NodeKind, size_bytes: int) -> int:
    if isinstance(size_bytes, bool) or not isinstance(size_bytes, int):
        raise InvalidArgumentError(
            "size_bytes must be an integer",
            details={"size_bytes": size_bytes},
        )
    if size_bytes < 0:
        raise InvalidArgumentError(
            "size_bytes must be non-negative",
            details={"size_bytes": size_bytes},
        )
    if size_bytes and kind is not NodeKind.FILE:
        raise InvalidArgumentError(
            "Only files carry a size",
            details={"kind": kind.value, "size_bytes": size_bytes},
        )
    return size_bytes


def _validate_kind(kind: NodeKind) -> NodeKind:
    try:
        return NodeKind(kind)
    except ValueError as exc:
        raise InvalidArgumentError(
            f"Unknown node kind: {kind!r}",
            details={"kind": kind},
            cause=exc,
        ) from exc


def _validate_name(kind: NodeKind, name: str) -> str:
    clean = normalize_name(name)
    # only FILE lines carry a size after the separator
    if kind is not NodeKind.FILE and SIZE_SEPARATOR in clean:
        raise InvalidArgumentError(
            f"{kind.value.capitalize()} names must not contain {SIZE_SEPARATOR!r}",
            details={"name": clean, "kind": kind.value},
        )
    return clean
