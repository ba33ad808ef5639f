"""Canonical export of settings documents.

``clean_settings`` drops every value that means "unset" (``None``, blank
strings, empty lists and dicts) bottom-up, so a delete deep in the tree can
take its emptied ancestors with it. Hooks get a pass of their own first: a
matcher group without a usable handler is dropped as a whole.
"""

from __future__ import annotations

import json
import math
from typing import Any

from moksu.config.nested import Document


def create_empty_settings() -> Document:
    return {}


def is_settings_empty(doc: Document) -> bool:
    return len(doc) == 0


def _blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def is_valid_handler(handler: Any) -> bool:
    """Whether a hook handler carries the field its ``type`` requires."""
    if not isinstance(handler, dict):
        return False
    kind = handler.get("type")
    if kind == "command":
        return not _blank(handler.get("command"))
    if kind in ("prompt", "agent"):
        return not _blank(handler.get("prompt"))
    return False


def clean_hooks(hooks: dict[str, Any]) -> dict[str, Any] | None:
    cleaned: dict[str, Any] = {}
    for event, groups in hooks.items():
        if not isinstance(groups, list):
            continue

        kept: list[dict[str, Any]] = []
        for group in groups:
            if not isinstance(group, dict):
                continue
            handlers = group.get("hooks")
            if not isinstance(handlers, list):
                handlers = []
            valid = [handler for handler in handlers if is_valid_handler(handler)]
            if not valid:
                continue

            result: dict[str, Any] = {"hooks": valid}
            matcher = group.get("matcher")
            if not _blank(matcher):
                result["matcher"] = matcher.strip()
            kept.append(result)

        if kept:
            cleaned[event] = kept

    return cleaned or None


def _non_finite(value: Any) -> bool:
    return isinstance(value, float) and not math.isfinite(value)


def _clean_element(item: Any) -> Any:
    if isinstance(item, dict):
        return _clean_value(item) or {}
    if _non_finite(item):
        # NaN and infinities have no JSON spelling; they serialize as null.
        return None
    return item


def _clean_value(value: Any) -> Any:
    """Cleaned copy of ``value``, or ``None`` when nothing is left of it."""
    if value is None:
        return None
    if isinstance(value, str):
        return value if value.strip() else None
    if _non_finite(value):
        return None
    if isinstance(value, list):
        if not value:
            return None
        # Only the list's own length decides; elements are never dropped.
        return [_clean_element(item) for item in value]
    if isinstance(value, dict):
        cleaned: dict[str, Any] = {}
        for key, nested in value.items():
            nested = _clean_value(nested)
            if nested is not None:
                cleaned[key] = nested
        return cleaned or None
    return value


def clean_settings(doc: Document) -> Document:
    preprocessed = dict(doc)
    hooks = preprocessed.get("hooks")
    if isinstance(hooks, dict):
        cleaned_hooks = clean_hooks(hooks)
        if cleaned_hooks is None:
            del preprocessed["hooks"]
        else:
            preprocessed["hooks"] = cleaned_hooks

    return _clean_value(preprocessed) or {}


def reject_json_constant(name: str) -> Any:
    """``parse_constant`` hook: ``NaN`` and the infinities are not JSON."""
    raise ValueError(f"{name} is not valid JSON")


def serialize_settings(doc: Document) -> str:
    return json.dumps(doc, indent=2, ensure_ascii=False, allow_nan=False)
