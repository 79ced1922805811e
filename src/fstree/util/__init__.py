from .names import extension_of, name_key, normalize_name, same_name

__all__ = [
    "normalize_name",
    "name_key",
    "same_name",
    "extension_of",
]
