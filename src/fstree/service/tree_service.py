"""TreeService: path-addressed operations over the invisible root."""

from __future__ import annotations

from typing import Optional, Sequence

from fstree.errors import InvalidArgumentError, InvalidStateError, path_not_found
from fstree.models import Node, NodeKind, Stats
from fstree.util.names import normalize_name

from .validators import (
    validate_can_have_children,
    validate_move_no_cycle,
    validate_not_root,
    validate_unique_name,
)

TreePath = Sequence[str]


class TreeService:
    """
    Mutations and queries over a tree, addressed by name paths.

    A path is the sequence of names from just below the invisible root down
    to the target, e.g. ["C:", "docs", "notes.txt"]. The empty path is the
    invisible root itself.

    The service is single-threaded: hosts that mutate from several places
    must serialize calls themselves.
    """

    def __init__(self, root: Node, *, placeholder_folders: bool = False) -> None:
        self._root = root
        self._placeholder_folders = placeholder_folders
        self._revision = 0

    @property
    def root(self) -> Node:
        return self._root

    @property
    def placeholder_folders(self) -> bool:
        return self._placeholder_folders

    @property
    def revision(self) -> int:
        """Counter bumped once per successful mutation."""
        return self._revision

    # ----------------------------
    # Read APIs
    # ----------------------------
    def find(self, path: Optional[TreePath]) -> Node:
        """
        Walk path from the root.

        Raises:
            NotFoundError: at the first missing segment (names the full path).
                Placeholder entries never resolve.
            InvalidArgumentError: if path is a bare string instead of a sequence.
        """
        if isinstance(path, str):
            raise InvalidArgumentError(
                "Path must be a sequence of names, not a string",
                details={"path": path},
            )
        cur = self._root
        for part in path or ():
            nxt = cur.child_by_name(part)
            if nxt is None or nxt.is_placeholder:
                raise path_not_found(path or ())
            cur = nxt
        return cur

    def path_of(self, node: Node) -> list[str]:
        return node.path()

    def stats(self, path: Optional[TreePath] = None) -> Stats:
        """
        Aggregate counts over the subtree at path, start node included.

        With an empty path the whole tree is aggregated: the invisible root
        is not counted and top-level nodes sit at depth 0.

        Placeholder entries are skipped, so an otherwise empty folder reports
        files == 0 whether or not it carries one.
        """
        starts = [self.find(path)] if path else list(self._root.children)

        stats = Stats()
        for start in starts:
            for node, depth in start.walk():
                if node.is_placeholder:
                    continue
                stats.record(node.kind, depth, node.size_bytes)
        return stats

    # ----------------------------
    # Mutation APIs
    # ----------------------------
    def create_folder(
        self,
        parent_path: TreePath,
        name: str,
        *,
        with_placeholder: Optional[bool] = None,
    ) -> Node:
        """
        Create a folder under parent_path.

        with_placeholder=None uses the service default. When enabled the new
        folder gets an empty-named FILE child (size 0).

        Raises:
            NotFoundError, InvalidStateError, DuplicateNameError, InvalidArgumentError
        """
        parent = self.find(parent_path)
        node = Node(name, NodeKind.FOLDER)

        if with_placeholder is None:
            with_placeholder = self._placeholder_folders
        if with_placeholder:
            node.add_child(Node.placeholder())

        parent.add_child(node)
        self._touch()
        return node

    def create_file(self, parent_path: TreePath, name: str, size_bytes: int = 0) -> Node:
        """
        Create a file under parent_path.

        Raises:
            NotFoundError, InvalidStateError, DuplicateNameError, InvalidArgumentError
        """
        parent = self.find(parent_path)
        node = Node(name, NodeKind.FILE, size_bytes)
        parent.add_child(node)
        self._touch()
        return node

    def rename(self, path: TreePath, new_name: str) -> Node:
        """
        Rename the node at path.

        The node's own entry is ignored by the duplicate check, so renaming
        to the same name or changing only its case is allowed.

        Raises:
            NotFoundError, InvalidStateError (root), InvalidArgumentError (blank),
            DuplicateNameError
        """
        node = self.find(path)
        validate_not_root(self._root, node, "RENAME")

        clean = normalize_name(new_name)
        parent = node.parent
        if parent is not None:
            validate_unique_name(parent, clean, exclude=node)

        node.rename(clean)
        self._touch()
        return node

    def delete(self, path: TreePath) -> Node:
        """
        Detach the node at path from its parent and return it.

        Drives may be deleted here; refusing that is a display-layer choice.

        Raises:
            NotFoundError, InvalidStateError (root)
        """
        node = self.find(path)
        parent = node.parent
        if parent is None:
            raise InvalidStateError("Root is protected: cannot DELETE root")

        parent.remove_child(node)
        self._touch()
        return node

    def move_node(self, node: Optional[Node], new_parent: Optional[Node]) -> None:
        """
        Move node under new_parent.

        No-op if either argument is None. Every check runs before anything is
        mutated, so a failed move leaves the tree unchanged.

        Raises:
            InvalidArgumentError: moving the root, a destination that is a
                FILE, or a destination inside node.
            DuplicateNameError: destination already has a same-named child.
        """
        if node is None or new_parent is None:
            return

        if node is self._root:
            raise InvalidArgumentError("Root is protected: cannot MOVE root")
        validate_can_have_children(new_parent, "New parent")
        validate_move_no_cycle(node, new_parent)
        validate_unique_name(new_parent, node.name, exclude=node)

        old_parent = node.parent
        if old_parent is not None:
            old_parent.remove_child(node)
        new_parent.add_child(node)
        self._touch()

    def move(self, path: TreePath, new_parent_path: TreePath) -> Node:
        """Path-addressed form of move_node. Returns the moved node."""
        node = self.find(path)
        new_parent = self.find(new_parent_path)
        self.move_node(node, new_parent)
        return node

    # ----------------------------
    # Internals
    # ----------------------------
    def _touch(self) -> None:
        self._revision += 1
