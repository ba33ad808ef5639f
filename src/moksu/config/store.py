"""In-memory settings store driving the editor.

A host constructs one ``SettingsStore`` at start-up and routes every edit
through it. The store never touches the filesystem: ``export_settings`` and
``export_persistable`` hand back text, and the host decides where it goes.

States move as follows:

* ``clean``: empty document, nothing edited since construction or reset.
* ``dirty``: edited or imported since the last validation.
* ``valid`` / ``invalid``: result of the last ``validate_settings`` call.
"""

from __future__ import annotations

import copy
import json
from typing import Any, Callable, Literal

from moksu.config.cleaning import (
    clean_settings,
    is_settings_empty,
    reject_json_constant,
    serialize_settings,
)
from moksu.config.nested import Document, get_nested_value, is_empty_value, set_nested_value
from moksu.config.validation import ValidationIssue, validate_all
from moksu.runtime_logging import RuntimeLogger, describe_value, get_runtime_logger

StoreState = Literal["clean", "dirty", "valid", "invalid"]
Listener = Callable[["SettingsStore"], None]

PERSIST_VERSION = 1


def _parse_object(text: str) -> dict[str, Any] | None:
    try:
        parsed = json.loads(text, parse_constant=reject_json_constant)
    except (TypeError, ValueError):
        return None
    if not isinstance(parsed, dict):
        return None
    return parsed


class SettingsStore:
    def __init__(self, logger: RuntimeLogger | None = None) -> None:
        self.logger = (logger if logger is not None else get_runtime_logger()).bind(component="store")
        self._settings: Document = {}
        self._errors: list[ValidationIssue] = []
        self._state: StoreState = "clean"
        self._listeners: list[Listener] = []

    @property
    def settings(self) -> Document:
        return copy.deepcopy(self._settings)

    @property
    def validation_errors(self) -> list[ValidationIssue]:
        return list(self._errors)

    @property
    def state(self) -> StoreState:
        return self._state

    def get(self, path: str) -> Any:
        return copy.deepcopy(get_nested_value(self._settings, path))

    def is_empty(self) -> bool:
        return is_settings_empty(self._settings)

    def errors_for(self, path: str) -> list[ValidationIssue]:
        prefix = f"{path}."
        return [issue for issue in self._errors if issue.path == path or issue.path.startswith(prefix)]

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _edited(self, settings: Document, path: str, value: Any) -> None:
        self._settings = settings
        self._state = "dirty"
        self.logger.emit(
            "settings.updated",
            path=path,
            removed=is_empty_value(value),
            value=describe_value(value),
        )
        self._notify()

    def update_setting(self, key: str, value: Any) -> None:
        """Set a top-level key; ``key`` is never split on dots."""
        settings = dict(self._settings)
        if is_empty_value(value):
            settings.pop(key, None)
        else:
            settings[key] = value
        self._edited(settings, key, value)

    def update_nested_setting(self, path: str, value: Any) -> None:
        self._edited(set_nested_value(self._settings, path, value), path, value)

    def validate_settings(self) -> bool:
        self._errors = validate_all(self._settings)
        self._state = "invalid" if self._errors else "valid"
        self.logger.emit("settings.validated", error_count=len(self._errors))
        self._notify()
        return not self._errors

    def export_settings(self) -> str:
        return serialize_settings(clean_settings(self._settings))

    def _replace(self, settings: Document, event: str) -> None:
        self._settings = settings
        self._errors = []
        self._state = "clean" if is_settings_empty(settings) else "dirty"
        self.logger.emit(event, key_count=len(settings))
        self._notify()

    def import_settings(self, text: str) -> bool:
        parsed = _parse_object(text)
        if parsed is None:
            self.logger.emit("settings.import_failed", length=len(text or ""))
            return False
        self._replace(parsed, "settings.imported")
        return True

    def reset_settings(self) -> None:
        self._settings = {}
        self._errors = []
        self._state = "clean"
        self.logger.emit("settings.reset")
        self._notify()

    def export_persistable(self) -> str:
        payload = {"state": {"settings": self._settings}, "version": PERSIST_VERSION}
        return json.dumps(payload, ensure_ascii=False)

    def import_persistable(self, text: str) -> bool:
        payload = _parse_object(text)
        state = payload.get("state") if payload is not None else None
        settings = state.get("settings") if isinstance(state, dict) else None
        if not isinstance(settings, dict):
            self.logger.emit("settings.rehydrate_failed", length=len(text or ""))
            return False
        self._replace(settings, "settings.rehydrated")
        return True
