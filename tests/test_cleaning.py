from __future__ import annotations

import json
import unittest

from moksu.config.cleaning import (
    clean_hooks,
    clean_settings,
    create_empty_settings,
    is_settings_empty,
    is_valid_handler,
    serialize_settings,
)
from moksu.config.nested import set_nested_value
from moksu.config.validation import validate_all

SAMPLES: list[dict] = [
    {},
    {"model": "opus", "language": "  ", "env": {}},
    {"a": {"b": {"c": ""}}, "keep": 0, "flag": False},
    {"permissions": {"allow": [], "deny": ["Read(./.env)"], "ask": None}},
    {
        "hooks": {
            "PreToolUse": [
                {"matcher": "  Bash  ", "hooks": [{"type": "command", "command": "lint", "statusMessage": ""}]},
                {"matcher": "Edit", "hooks": [{"type": "command"}]},
            ],
            "Stop": [{"hooks": []}],
        }
    },
    {"companyAnnouncements": ["", "Welcome"], "items": [{"x": ""}, {"y": 1}]},
]


class CleanSettingsTests(unittest.TestCase):
    def test_empty_document(self) -> None:
        self.assertEqual(clean_settings({}), {})
        self.assertEqual(create_empty_settings(), {})

    def test_removes_empty_values_at_every_depth(self) -> None:
        doc = {
            "model": "opus",
            "language": "",
            "outputStyle": "   ",
            "apiKeyHelper": None,
            "companyAnnouncements": [],
            "env": {},
            "sandbox": {"enabled": False, "network": {"allowedDomains": []}},
            "statusLine": {"padding": 0},
        }
        self.assertEqual(
            clean_settings(doc),
            {"model": "opus", "sandbox": {"enabled": False}, "statusLine": {"padding": 0}},
        )

    def test_cascading_prune_of_emptied_ancestors(self) -> None:
        doc = set_nested_value({"a": {"b": {"c": "x"}}}, "a.b.c", "")
        self.assertEqual(clean_settings(doc), {})

    def test_lists_judged_by_length_only(self) -> None:
        doc = {"companyAnnouncements": ["", "Welcome"], "items": [{"x": ""}, {"y": 1}]}
        self.assertEqual(
            clean_settings(doc),
            {"companyAnnouncements": ["", "Welcome"], "items": [{}, {"y": 1}]},
        )

    def test_non_finite_numbers_are_removed(self) -> None:
        doc = {"statusLine": {"padding": float("inf")}, "items": [float("nan"), 2]}
        self.assertEqual(clean_settings(doc), {"items": [None, 2]})

    def test_does_not_mutate_input(self) -> None:
        doc = {"model": "", "permissions": {"allow": []}}
        clean_settings(doc)
        self.assertEqual(doc, {"model": "", "permissions": {"allow": []}})

    def test_unknown_keys_pass_through(self) -> None:
        self.assertEqual(clean_settings({"teammateMode": "tmux", "future": {"x": 1}}), {
            "teammateMode": "tmux",
            "future": {"x": 1},
        })

    def test_idempotent(self) -> None:
        for sample in SAMPLES:
            with self.subTest(sample=sample):
                once = clean_settings(sample)
                self.assertEqual(clean_settings(once), once)

    def test_serialized_round_trip(self) -> None:
        for sample in SAMPLES:
            with self.subTest(sample=sample):
                cleaned = clean_settings(sample)
                self.assertEqual(json.loads(serialize_settings(cleaned)), cleaned)

    def test_cleaning_does_not_fix_type_errors(self) -> None:
        doc = {"cleanupPeriodDays": "thirty", "language": ""}
        self.assertNotEqual(validate_all(clean_settings(doc)), [])
        self.assertEqual(validate_all(clean_settings({"language": ""})), [])


class CleanHooksTests(unittest.TestCase):
    def test_group_without_valid_handler_is_removed_with_its_event(self) -> None:
        doc = {"model": "opus", "hooks": {"PreToolUse": [{"hooks": [{"type": "command"}]}]}}
        self.assertEqual(clean_settings(doc), {"model": "opus"})

    def test_keeps_valid_groups_and_trims_matcher(self) -> None:
        doc = {
            "hooks": {
                "PreToolUse": [
                    {"matcher": "  Bash  ", "hooks": [{"type": "command", "command": "lint"}]},
                    {"matcher": "Edit", "hooks": [{"type": "prompt", "prompt": " "}]},
                ],
                "Stop": [
                    {"matcher": "   ", "hooks": [{"type": "agent", "prompt": "Summarize"}]},
                ],
            }
        }
        self.assertEqual(
            clean_settings(doc),
            {
                "hooks": {
                    "PreToolUse": [{"matcher": "Bash", "hooks": [{"type": "command", "command": "lint"}]}],
                    "Stop": [{"hooks": [{"type": "agent", "prompt": "Summarize"}]}],
                }
            },
        )

    def test_invalid_handlers_are_dropped_individually(self) -> None:
        hooks = {
            "PostToolUse": [
                {
                    "hooks": [
                        {"type": "command", "command": "fmt"},
                        {"type": "prompt"},
                        {"type": "script", "command": "x"},
                        "echo raw",
                    ]
                }
            ]
        }
        self.assertEqual(
            clean_hooks(hooks),
            {"PostToolUse": [{"hooks": [{"type": "command", "command": "fmt"}]}]},
        )

    def test_handler_empty_optional_fields_are_cleaned(self) -> None:
        doc = {
            "hooks": {
                "Stop": [{"hooks": [{"type": "command", "command": "notify", "statusMessage": "", "timeout": 5}]}]
            }
        }
        self.assertEqual(
            clean_settings(doc)["hooks"]["Stop"][0]["hooks"],
            [{"type": "command", "command": "notify", "timeout": 5}],
        )

    def test_non_list_events_are_dropped(self) -> None:
        self.assertIsNone(clean_hooks({"Stop": "echo done", "PreToolUse": []}))

    def test_is_valid_handler(self) -> None:
        self.assertTrue(is_valid_handler({"type": "command", "command": "x"}))
        self.assertTrue(is_valid_handler({"type": "agent", "prompt": "x"}))
        self.assertFalse(is_valid_handler({"type": "agent", "command": "x"}))
        self.assertFalse(is_valid_handler({"type": "command", "command": 3}))
        self.assertFalse(is_valid_handler(None))


class SerializeTests(unittest.TestCase):
    def test_exact_layout(self) -> None:
        self.assertEqual(serialize_settings({"model": "opus"}), '{\n  "model": "opus"\n}')
        self.assertEqual(serialize_settings({}), "{}")

    def test_preserves_insertion_order_and_unicode(self) -> None:
        text = serialize_settings({"language": "日本語", "model": "opus"})
        self.assertLess(text.index("language"), text.index("model"))
        self.assertIn("日本語", text)

    def test_rejects_non_finite_numbers(self) -> None:
        with self.assertRaises(ValueError):
            serialize_settings({"ratio": float("nan")})

    def test_matcher_group_layout(self) -> None:
        doc = {"hooks": {"Stop": [{"matcher": " * ", "hooks": [{"type": "command", "command": "say"}]}]}}
        text = serialize_settings(clean_settings(doc))
        self.assertLess(text.index('"hooks": ['), text.index('"matcher": "*"'))

    def test_equal_content_serializes_identically(self) -> None:
        first = clean_settings({"model": "opus", "env": {"A": "1"}, "language": ""})
        second = clean_settings({"model": "opus", "env": {"A": "1"}})
        self.assertEqual(serialize_settings(first), serialize_settings(second))


class IsSettingsEmptyTests(unittest.TestCase):
    def test_counts_top_level_keys_only(self) -> None:
        self.assertTrue(is_settings_empty({}))
        self.assertFalse(is_settings_empty({"permissions": {}}))


if __name__ == "__main__":
    unittest.main()
