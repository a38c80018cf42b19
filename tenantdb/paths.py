"""
Dotted path access into a JSON tree.

A path like `profile.name` addresses `tree["profile"]["name"]`. Only objects
(dicts) are traversed; a path through any other value is a conflict.
"""

from typing import Any

from tenantdb.exceptions import PathConflict

SEPARATOR = "."

MISSING = object()
"""Sentinel for a path that does not resolve"""


def split(path: str) -> list[str]:
    parts = str(path).split(SEPARATOR)
    if not all(parts):
        raise PathConflict(f"Invalid path: `{path}`")
    return parts


def get(tree: dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Get the value at `path` or `default` if it doesn't resolve

    Examples:
        >>> get({"a": {"b": 1}}, "a.b")
        1
        >>> get({"a": 1}, "a.b") is None
        True
    """
    node: Any = tree
    for part in split(path):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return node


def put(tree: dict[str, Any], path: str, value: Any) -> dict[str, Any]:
    """
    Set `value` at `path`, creating missing intermediate objects. Siblings of
    any node along the path are left untouched.

    Raises:
        PathConflict: If an intermediate node exists but is not an object
    """
    *parents, key = split(path)
    node = tree
    for part in parents:
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise PathConflict(
                f"Can't set `{path}`: `{part}` is a {type(child).__name__}"
            )
        node = child
    node[key] = value
    return tree


def delete(tree: dict[str, Any], path: str) -> bool:
    """Delete the value at `path`, return if there was anything to delete"""
    *parents, key = split(path)
    node = get(tree, SEPARATOR.join(parents), MISSING) if parents else tree
    if not isinstance(node, dict) or key not in node:
        return False
    del node[key]
    return True


def is_empty(value: Any) -> bool:
    """
    Values that don't count as stored: `None`, `False`, zero and the empty
    string. Empty lists and objects are stored values.
    """
    if value is None or value is False or value is MISSING:
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    if isinstance(value, str):
        return value == ""
    return False
