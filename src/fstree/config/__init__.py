from __future__ import annotations

from .tree_config import DEFAULT_ENCODING, DEFAULT_TEXT_FILE, TreeConfig

__all__ = ["TreeConfig", "DEFAULT_TEXT_FILE", "DEFAULT_ENCODING"]
