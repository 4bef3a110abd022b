"""Dotted key path navigation over nested settings dicts.

A key path such as ``"database.pool.size"`` addresses
``root["database"]["pool"]["size"]``. Writes repair the path by creating
intermediate dicts; reads and deletes treat a broken path as "not found".
"""
from typing import Any, Dict, List

from configweave.exceptions.config import InvalidKeyPathError


KEY_PATH_SEPARATOR = "."


def split_key_path(key_path: str) -> List[str]:
    """Split a key path into its segments.

    Args:
        key_path: Dotted key path (e.g., "nested.section.key")

    Returns:
        List of non-empty segments

    Raises:
        InvalidKeyPathError: Path is not a string, is empty, or has an empty segment
    """
    if not isinstance(key_path, str):
        raise InvalidKeyPathError(
            message=f"Key path must be a string, got {type(key_path).__name__}",
            key_path=key_path,
        )

    segments = key_path.split(KEY_PATH_SEPARATOR)

    if any(segment == "" for segment in segments):
        raise InvalidKeyPathError(
            message=f"Key path contains an empty segment: {key_path!r}",
            key_path=key_path,
        )

    return segments


def set_value(root: Dict[str, Any], key_path: str, value: Any) -> None:
    """Assign a value at the key path, creating intermediate dicts.

    Any non-dict value found on the way (scalar, list, None) is replaced
    with an empty dict.
    """
    *parents, last = split_key_path(key_path)
    current = root

    for segment in parents:
        if not isinstance(current.get(segment), dict):
            current[segment] = {}
        current = current[segment]

    current[last] = value


def has_value(root: Dict[str, Any], key_path: str) -> bool:
    """Check whether every segment of the key path resolves."""
    current: Any = root

    for segment in split_key_path(key_path):
        if not isinstance(current, dict) or segment not in current:
            return False
        current = current[segment]

    return True


def get_value(root: Dict[str, Any], key_path: str, default: Any = None) -> Any:
    """Get the value at the key path.

    Args:
        root: Settings tree to read from
        key_path: Dotted key path
        default: Returned when the path does not resolve

    Returns:
        Resolved value, or default
    """
    current: Any = root

    for segment in split_key_path(key_path):
        if not isinstance(current, dict) or segment not in current:
            return default
        current = current[segment]

    return current


def remove_value(root: Dict[str, Any], key_path: str) -> None:
    """Delete the value at the key path.

    No-op when the path runs through a non-dict or the key is absent.
    """
    *parents, last = split_key_path(key_path)
    current: Any = root

    for segment in parents:
        current = current.get(segment)
        if not isinstance(current, dict):
            return

    current.pop(last, None)
