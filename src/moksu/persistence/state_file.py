"""Load/save persisted editor state for a ``SettingsStore``."""

from __future__ import annotations

from pathlib import Path

from moksu.config.store import SettingsStore
from moksu.paths import state_path


class StateFile:
    def __init__(self, path: Path | None = None) -> None:
        self.path = path or state_path()

    def load_into(self, store: SettingsStore) -> bool:
        if not self.path.exists():
            return False

        raw = self.path.read_bytes()
        try:
            text: str | None = raw.decode("utf-8")
        except UnicodeDecodeError:
            text = None
        log = store.logger.bind(component="state_file")
        if text is not None and store.import_persistable(text):
            log.emit("state.loaded", path=str(self.path))
            return True

        # Keep the corrupt payload for debugging and carry on with what the store holds.
        backup = self.path.with_suffix(".corrupt.json")
        backup.write_bytes(raw)
        log.emit("state.corrupt", path=str(self.path), backup=str(backup))
        return False

    def save(self, store: SettingsStore) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(f"{store.export_persistable()}\n", encoding="utf-8")
        store.logger.bind(component="state_file").emit("state.saved", path=str(self.path))
