from __future__ import annotations

from typing import Optional

from fstree.errors import InvalidArgumentError

SIZE_SEPARATOR: str = "//"


def normalize_name(value: Optional[str]) -> str:
    """
    Trim a node name and reject empty / whitespace-only values.

    Raises:
        InvalidArgumentError: if value is None, not a string, blank, or
            contains a line break (one name is one line of the text format).
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(
            "Name must be a non-empty string",
            details={"name": value},
        )
    if "\n" in value or "\r" in value:
        raise InvalidArgumentError(
            "Name must not contain line breaks",
            details={"name": value},
        )
    return value.strip()


def name_key(name: str) -> str:
    """Key used for case-insensitive sibling comparison."""
    return name.casefold()


def same_name(a: str, b: str) -> bool:
    """Return True if two names collide as siblings (case-insensitive)."""
    return name_key(a) == name_key(b)


def extension_of(name: str) -> str:
    """
    Return the text after the last '.' in name.

    Returns "" when there is no dot or the dot is the last character.
    """
    dot = name.rfind(".")
    if dot == -1 or dot == len(name) - 1:
        return ""
    return name[dot + 1 :]
