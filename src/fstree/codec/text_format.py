"""
Indented text format for fstree.

One node per line, 3 spaces per nesting level. Files carry their size after
the last "//":

    C:
       docs
          notes.txt//120

The invisible root is never written; top-level lines are its children. The
format has no kind tag, so kinds are guessed from names (see guess_kind).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional

from fstree.errors import InvalidArgumentError
from fstree.models import Node, NodeKind
from fstree.util.names import SIZE_SEPARATOR

logger = logging.getLogger(__name__)

INDENT_UNIT: str = "   "
ROOT_NAME: str = "(root)"

_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class ParsedLine:
    """A non-blank line split into its parts."""

    level: int
    name: str
    size_bytes: int = 0


def new_root() -> Node:
    """Create an empty invisible root."""
    return Node(ROOT_NAME, NodeKind.FOLDER)


def guess_kind(name: str) -> NodeKind:
    """
    Infer a node kind from its name.

    Rules (in order): trailing ':' -> DRIVE, contains '.' -> FILE, else FOLDER.
    A folder literally named "archive.old" therefore reloads as a FILE.
    """
    if name.endswith(":"):
        return NodeKind.DRIVE
    if "." in name:
        return NodeKind.FILE
    return NodeKind.FOLDER


def parse_line(line: str) -> Optional[ParsedLine]:
    """
    Parse one line of the text format.

    Returns None for blank / whitespace-only lines. A missing, empty or
    malformed size after the separator decodes as 0. Tabs are not indentation.
    """
    line = line.rstrip("\r\n")
    if not line.strip():
        return None

    leading = len(line) - len(line.lstrip(" "))
    level = leading // len(INDENT_UNIT)
    content = line[leading:]

    sep = content.rfind(SIZE_SEPARATOR)
    if sep == -1:
        return ParsedLine(level=level, name=content.strip())

    name = content[:sep].strip()
    size_text = content[sep + len(SIZE_SEPARATOR) :].strip()
    size = int(size_text) if _DIGITS.fullmatch(size_text) else 0
    return ParsedLine(level=level, name=name, size_bytes=size)


def decode_lines(lines: Iterable[str]) -> Node:
    """
    Decode text lines into a fresh invisible root.

    Single pass. Each new node becomes the parent for the next level down; a
    level with no registered parent falls back to the root. Lines the tree
    cannot hold (empty name, child of a file, duplicate sibling) are skipped
    with a warning so a hand-edited file always loads.
    """
    root = new_root()
    parent_by_level: dict[int, Node] = {0: root}
    count = 0

    for lineno, raw in enumerate(lines, start=1):
        parsed = parse_line(raw)
        if parsed is None:
            continue

        next_level = parsed.level + 1
        name, kind = _settle_name(parsed.name)
        if not name:
            logger.warning("line %d: empty name, skipped", lineno)
            parent_by_level.pop(next_level, None)
            continue

        parent = parent_by_level.get(parsed.level, root)
        if not parent.can_have_children():
            logger.warning(
                "line %d: %r is nested under file %r, skipped",
                lineno,
                name,
                parent.name,
            )
            parent_by_level.pop(next_level, None)
            continue

        existing = parent.child_by_name(name)
        if existing is not None:
            logger.warning(
                "line %d: duplicate name %r under %r, merged into existing entry",
                lineno,
                name,
                parent.name,
            )
            parent_by_level[next_level] = existing
            continue

        size = parsed.size_bytes if kind is NodeKind.FILE else 0
        try:
            node = Node(name, kind, size)
        except InvalidArgumentError as exc:
            logger.warning("line %d: %s, skipped", lineno, exc)
            parent_by_level.pop(next_level, None)
            continue
        parent.add_child(node)
        parent_by_level[next_level] = node
        count += 1

    logger.debug("decoded %d nodes", count)
    return root


def _settle_name(name: str) -> tuple[str, NodeKind]:
    # drives and folders never keep a separator; "a//b//c.txt" settles to folder "a"
    kind = guess_kind(name)
    while name and kind is not NodeKind.FILE and SIZE_SEPARATOR in name:
        name = name[: name.rfind(SIZE_SEPARATOR)].strip()
        kind = guess_kind(name)
    return name, kind


def encode_lines(root: Node) -> list[str]:
    """
    Encode the tree under root, pre-order, one line per node.

    The root itself and placeholder entries are never written.
    """
    lines: list[str] = []
    for node, depth in root.walk():
        if depth == 0 or node.is_placeholder:
            continue
        line = INDENT_UNIT * (depth - 1) + node.name
        if node.kind is NodeKind.FILE:
            line += f"{SIZE_SEPARATOR}{node.size_bytes}"
        lines.append(line)
    return lines


def decode_text(text: str) -> Node:
    """Decode a whole document."""
    return decode_lines(text.split("\n"))


def encode_text(root: Node) -> str:
    """Encode a whole document; every line is newline-terminated."""
    lines = encode_lines(root)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
