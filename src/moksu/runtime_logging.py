"""JSONL event log for moksu.

Each record is one JSON object per line: timestamp, level, event name, pid,
the context the emitting logger was bound to, and the event's own fields.
Store and state-file events carry fixed levels (``EVENT_LEVELS``), so callers
name the event and the level follows.

Setting values never reach the log. Helper commands, proxy credentials and
``env`` maps routinely hold secrets, so edits are recorded by shape only
(``describe_value``).
"""

from __future__ import annotations

import json
import os
import threading
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Literal

from moksu.paths import state_root

LogLevel = Literal["off", "error", "warning", "info", "debug"]

_SEVERITY: dict[str, int] = {"debug": 10, "info": 20, "warning": 30, "error": 40, "off": 100}
_ALIASES = {"warn": "warning", "none": "off", "disabled": "off", "0": "off"}

EVENT_LEVELS: dict[str, LogLevel] = {
    "logging.configured": "info",
    "settings.updated": "debug",
    "settings.validated": "info",
    "settings.imported": "info",
    "settings.rehydrated": "info",
    "settings.reset": "info",
    "settings.import_failed": "warning",
    "settings.rehydrate_failed": "warning",
    "state.loaded": "debug",
    "state.saved": "debug",
    "state.corrupt": "warning",
}

LOG_FILE_NAME = "moksu.runtime.jsonl"

_active: RuntimeLogger | None = None


def parse_level(value: str | None, default: LogLevel = "warning") -> LogLevel:
    if not value:
        return default
    normalized = value.strip().lower()
    normalized = _ALIASES.get(normalized, normalized)
    return normalized if normalized in _SEVERITY else default  # type: ignore[return-value]


def resolve_log_file(path: str | Path | None) -> Path:
    if path is None:
        return state_root() / "logs" / LOG_FILE_NAME
    return Path(path).expanduser().resolve()


def describe_value(value: Any) -> dict[str, Any]:
    """Loggable shape of a setting value: its JSON kind and size, never its content."""
    if value is None:
        return {"kind": "null"}
    if isinstance(value, bool):
        return {"kind": "boolean"}
    if isinstance(value, (int, float)):
        return {"kind": "number"}
    if isinstance(value, str):
        return {"kind": "string", "size": len(value)}
    if isinstance(value, list):
        return {"kind": "array", "size": len(value)}
    if isinstance(value, dict):
        return {"kind": "object", "size": len(value)}
    return {"kind": type(value).__name__}


@dataclass(slots=True)
class RuntimeLogger:
    level: LogLevel
    sink_path: Path
    context: dict[str, Any] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def enabled(self, level: str) -> bool:
        threshold = _SEVERITY.get(self.level, _SEVERITY["warning"])
        if threshold >= _SEVERITY["off"]:
            return False
        return _SEVERITY.get(level, _SEVERITY["debug"]) >= threshold

    def bind(self, **context: Any) -> RuntimeLogger:
        """Logger writing to the same sink with ``context`` added to every record."""
        return RuntimeLogger(self.level, self.sink_path, {**self.context, **context}, self._lock)

    def emit(self, event: str, **fields: Any) -> None:
        self.log(EVENT_LEVELS.get(event, "debug"), event, **fields)

    def log(self, level: str, event: str, **fields: Any) -> None:
        if not self.enabled(level):
            return
        record = {
            "ts": datetime.now(UTC).isoformat(),
            "level": level,
            "event": event,
            "pid": os.getpid(),
            **self.context,
            **fields,
        }
        self._append(json.dumps(record, sort_keys=True, default=str))

    def _append(self, line: str) -> None:
        with self._lock:
            self.sink_path.parent.mkdir(parents=True, exist_ok=True)
            with self.sink_path.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")


class DisabledLogger(RuntimeLogger):
    def __init__(self) -> None:
        super().__init__(level="off", sink_path=Path(os.devnull))

    def bind(self, **context: Any) -> RuntimeLogger:  # noqa: ARG002
        return self

    def log(self, level: str, event: str, **fields: Any) -> None:  # noqa: ARG002
        return


def configure_runtime_logging(
    *,
    level: str | None = None,
    log_file: str | Path | None = None,
) -> RuntimeLogger:
    """Install the process-wide logger.

    Explicit arguments win over ``MOKSU_LOG_LEVEL`` and ``MOKSU_LOG_FILE``.
    Level ``off`` installs a ``DisabledLogger`` and never resolves a sink.
    """
    global _active

    effective_level = parse_level(level or os.getenv("MOKSU_LOG_LEVEL"))
    if effective_level == "off":
        _active = DisabledLogger()
        return _active

    sink = resolve_log_file(log_file or os.getenv("MOKSU_LOG_FILE"))
    _active = RuntimeLogger(level=effective_level, sink_path=sink)
    _active.emit("logging.configured", configured_level=effective_level, sink_path=str(sink))
    return _active


def get_runtime_logger() -> RuntimeLogger:
    if _active is None:
        return configure_runtime_logging()
    return _active
