"""Configuration for FileTreeManager."""

from __future__ import annotations

import codecs
from dataclasses import dataclass, fields
from typing import Any, Mapping

DEFAULT_TEXT_FILE: str = "structure.txt"
DEFAULT_ENCODING: str = "utf-8"


@dataclass(slots=True, frozen=True)
class TreeConfig:
    """
    Settings for loading, editing and saving one tree file.

    Fields:
        text_file: path of the indented text file.
        encoding: text encoding of that file (UTF-8 by default).
        placeholder_folders: new folders get an empty-named placeholder file.
        create_if_missing: open() starts from an empty tree when text_file
            does not exist, instead of failing.
    """

    text_file: str = DEFAULT_TEXT_FILE
    encoding: str = DEFAULT_ENCODING
    placeholder_folders: bool = False
    create_if_missing: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.text_file, str) or not self.text_file.strip():
            raise ValueError("TreeConfig.text_file must be a non-empty string")

        if not isinstance(self.encoding, str) or not self.encoding.strip():
            raise ValueError("TreeConfig.encoding must be a non-empty string")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {self.encoding}") from exc

        for key in ("placeholder_folders", "create_if_missing"):
            if not isinstance(getattr(self, key), bool):
                raise TypeError(f"TreeConfig.{key} must be a bool")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TreeConfig:
        """Build a config from a mapping (e.g. parsed JSON). Unknown keys are rejected."""
        if not isinstance(data, Mapping):
            raise TypeError("TreeConfig data must be a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown TreeConfig keys: {', '.join(unknown)}")
        return cls(**dict(data))
