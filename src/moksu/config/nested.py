"""Dotted-path access into a partially populated settings document.

``set_nested_value`` never mutates its input: every dict along the path is
shallow-copied, untouched branches are shared. Parents emptied by a delete are
left in place; ``clean_settings`` prunes them at export time.
"""

from __future__ import annotations

from typing import Any

Document = dict[str, Any]


def is_empty_value(value: Any) -> bool:
    """Values that mean "unset" when written at a leaf."""
    if value is None:
        return True
    if isinstance(value, str) and value == "":
        return True
    return isinstance(value, list) and not value


def get_nested_value(doc: Any, path: str) -> Any:
    cursor: Any = doc
    for key in path.split("."):
        if not isinstance(cursor, dict):
            return None
        cursor = cursor.get(key)
        if cursor is None:
            return None
    return cursor


def set_nested_value(doc: Document, path: str, value: Any) -> Document:
    keys = path.split(".")
    result = dict(doc)

    cursor = result
    for key in keys[:-1]:
        nested = cursor.get(key)
        copied = dict(nested) if isinstance(nested, dict) else {}
        cursor[key] = copied
        cursor = copied

    leaf = keys[-1]
    if is_empty_value(value):
        cursor.pop(leaf, None)
    else:
        cursor[leaf] = value
    return result


def delete_nested_value(doc: Document, path: str) -> Document:
    return set_nested_value(doc, path, None)
