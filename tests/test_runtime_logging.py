from __future__ import annotations

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from moksu.config.store import SettingsStore
from moksu.persistence.state_file import StateFile
from moksu.runtime_logging import (
    DisabledLogger,
    configure_runtime_logging,
    describe_value,
    parse_level,
)


def _records(path: Path) -> list[dict]:
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


class RuntimeLoggingTests(unittest.TestCase):
    def test_writes_jsonl_and_filters_by_level(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "runtime.jsonl"
            logger = configure_runtime_logging(level="info", log_file=path)
            logger.emit("settings.updated", path="model")
            logger.emit("settings.reset")

            events = [item["event"] for item in _records(path)]
            self.assertEqual(events, ["logging.configured", "settings.reset"])

    def test_unknown_events_log_at_debug(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "runtime.jsonl"
            configure_runtime_logging(level="debug", log_file=path).emit("custom.event", n=1)

            record = _records(path)[-1]
            self.assertEqual((record["event"], record["level"], record["n"]), ("custom.event", "debug", 1))

    def test_uses_environment_variables(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "from-env.jsonl"
            with patch.dict(
                os.environ,
                {"MOKSU_LOG_LEVEL": "debug", "MOKSU_LOG_FILE": str(path)},
                clear=False,
            ):
                logger = configure_runtime_logging()
                logger.emit("state.saved", path="x")

            self.assertTrue(any(item["event"] == "state.saved" for item in _records(path)))

    def test_bound_context_is_added_to_records(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "runtime.jsonl"
            base = configure_runtime_logging(level="info", log_file=path)
            base.bind(component="store").bind(run=7).emit("settings.reset")

            record = _records(path)[-1]
            self.assertEqual(record["component"], "store")
            self.assertEqual(record["run"], 7)
            self.assertNotIn("component", base.context)

    def test_off_returns_disabled_logger(self) -> None:
        logger = configure_runtime_logging(level="none")
        self.assertIsInstance(logger, DisabledLogger)
        self.assertFalse(logger.enabled("error"))
        self.assertIs(logger.bind(component="store"), logger)

    def test_parse_level_aliases(self) -> None:
        self.assertEqual(parse_level("WARN"), "warning")
        self.assertEqual(parse_level("disabled"), "off")
        self.assertEqual(parse_level("bogus", default="info"), "info")
        self.assertEqual(parse_level(None), "warning")

    def test_describe_value_hides_content(self) -> None:
        self.assertEqual(describe_value("sk-secret"), {"kind": "string", "size": 9})
        self.assertEqual(describe_value({"TOKEN": "abc"}), {"kind": "object", "size": 1})
        self.assertEqual(describe_value(["a", "b"]), {"kind": "array", "size": 2})
        self.assertEqual(describe_value(True), {"kind": "boolean"})
        self.assertEqual(describe_value(None), {"kind": "null"})


class StoreEventLoggingTests(unittest.TestCase):
    def test_store_events_are_logged_without_values(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "store.jsonl"
            store = SettingsStore(logger=configure_runtime_logging(level="debug", log_file=path))
            store.update_nested_setting("env.API_TOKEN", "sk-very-secret")
            store.update_nested_setting("permissions.allow", [])
            store.validate_settings()
            store.import_settings("{broken")

            self.assertNotIn("sk-very-secret", path.read_text(encoding="utf-8"))
            records = _records(path)
            updates = [item for item in records if item["event"] == "settings.updated"]
            self.assertEqual([item["path"] for item in updates], ["env.API_TOKEN", "permissions.allow"])
            self.assertEqual(updates[0]["value"], {"kind": "string", "size": 14})
            self.assertEqual([item["removed"] for item in updates], [False, True])
            self.assertTrue(all(item["component"] == "store" for item in updates))

            by_name = {item["event"]: item for item in records}
            self.assertEqual(by_name["settings.validated"]["error_count"], 0)
            self.assertEqual(by_name["settings.import_failed"]["level"], "warning")

    def test_state_file_events(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "state.jsonl"
            state = StateFile(Path(tmp) / "editor-state.json")
            store = SettingsStore(logger=configure_runtime_logging(level="debug", log_file=log_path))
            store.update_setting("model", "opus")
            state.save(store)
            state.path.write_text("{", encoding="utf-8")
            state.load_into(store)

            records = [item for item in _records(log_path) if item["event"].startswith("state.")]
            self.assertEqual([item["event"] for item in records], ["state.saved", "state.corrupt"])
            self.assertEqual(records[1]["level"], "warning")
            self.assertTrue(all(item["component"] == "state_file" for item in records))


if __name__ == "__main__":
    unittest.main()
