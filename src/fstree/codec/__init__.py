"""Public codec exports for fstree."""

from __future__ import annotations

from .repository import load_tree, save_tree
from .text_format import (
    INDENT_UNIT,
    ROOT_NAME,
    SIZE_SEPARATOR,
    ParsedLine,
    decode_lines,
    decode_text,
    encode_lines,
    encode_text,
    guess_kind,
    new_root,
    parse_line,
)

__all__ = [
    "INDENT_UNIT",
    "SIZE_SEPARATOR",
    "ROOT_NAME",
    "ParsedLine",
    "new_root",
    "guess_kind",
    "parse_line",
    "decode_lines",
    "encode_lines",
    "decode_text",
    "encode_text",
    "load_tree",
    "save_tree",
]
