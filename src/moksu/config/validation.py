"""Validation of settings documents and single fields against the schema.

Nothing here raises for bad input: problems come back as ``ValidationIssue``
lists or a ``FieldCheck``. Paths without a rule are accepted so keys the
schema does not know yet never block editing.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from types import NoneType, UnionType
from typing import Any, Union, get_args, get_origin

from pydantic import BaseModel, TypeAdapter, ValidationError

from moksu.config.models import HANDLER_TYPES, ClaudeSettings

_TYPE_ERRORS: dict[str, str] = {
    "string_type": "string",
    "int_type": "integer",
    "int_from_float": "integer",
    "bool_type": "boolean",
    "list_type": "array",
    "dict_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
}


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    path: str
    message: str


@dataclass(frozen=True, slots=True)
class FieldCheck:
    valid: bool
    error: str | None = None


def _nested_model(annotation: Any) -> type[BaseModel] | None:
    if get_origin(annotation) in (Union, UnionType):
        members = [arg for arg in get_args(annotation) if arg is not NoneType]
        if len(members) != 1:
            return None
        annotation = members[0]
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    return None


def _collect_rules(model: type[BaseModel], prefix: str, rules: dict[str, TypeAdapter[Any]]) -> None:
    for name, info in model.model_fields.items():
        key = info.alias or name
        path = f"{prefix}.{key}" if prefix else key
        rules[path] = TypeAdapter(info.annotation)
        nested = _nested_model(info.annotation)
        if nested is not None:
            _collect_rules(nested, path, rules)


@lru_cache(maxsize=1)
def field_rules() -> dict[str, TypeAdapter[Any]]:
    """Validation rule per dotted path, for every field declared on the models."""
    rules: dict[str, TypeAdapter[Any]] = {}
    _collect_rules(ClaudeSettings, "", rules)
    return rules


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _strip_handler_tags(loc: tuple[int | str, ...]) -> list[int | str]:
    # Discriminated unions report the matched tag as an extra segment right
    # after the handler index: hooks.<event>.<i>.hooks.<j>.<tag>.<field>
    path: list[int | str] = []
    for index, segment in enumerate(loc):
        if (
            index >= 2
            and segment in HANDLER_TYPES
            and isinstance(loc[index - 1], int)
            and loc[index - 2] == "hooks"
        ):
            continue
        path.append(segment)
    return path


def _describe(error: Any) -> str:
    kind = error["type"]
    ctx = error.get("ctx") or {}
    if kind == "missing" or kind == "union_tag_not_found":
        return "Required"
    if kind in _TYPE_ERRORS:
        return f"Expected {_TYPE_ERRORS[kind]}, received {_json_type(error.get('input'))}"
    if kind == "literal_error":
        return f"Invalid: allowed values are {ctx.get('expected')}"
    if kind == "union_tag_invalid":
        return f"Invalid: handler type must be one of {ctx.get('expected_tags')}"
    if kind == "greater_than_equal":
        return f"Number must be greater than or equal to {ctx.get('ge')}"
    if kind == "less_than_equal":
        return f"Number must be less than or equal to {ctx.get('le')}"
    return str(error["msg"])


def issues_from_error(exc: ValidationError) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for error in exc.errors(include_url=False):
        segments = _strip_handler_tags(tuple(error["loc"]))
        if error["type"] == "union_tag_not_found":
            segments.append("type")
        path = ".".join(str(segment) for segment in segments)
        issues.append(ValidationIssue(path=path, message=_describe(error)))
    return issues


def validate_all(doc: Any) -> list[ValidationIssue]:
    try:
        ClaudeSettings.model_validate(doc)
    except ValidationError as exc:
        return issues_from_error(exc)
    return []


def validate_field(path: str, value: Any) -> FieldCheck:
    rule = field_rules().get(path)
    if rule is None:
        return FieldCheck(valid=True)
    try:
        rule.validate_python(value)
    except ValidationError as exc:
        issues = issues_from_error(exc)
        return FieldCheck(valid=False, error=issues[0].message if issues else "Invalid value")
    return FieldCheck(valid=True)


def format_validation_error(message: str) -> str:
    """Reword a raw validator message for display. Safe to apply twice."""
    if message == "Required":
        return "This field is required"
    if message.startswith("Expected "):
        return "Must be " + message[len("Expected ") :]
    if message.startswith("Invalid") and not message.startswith("Invalid value"):
        return "Invalid value" + message[len("Invalid") :]
    return message
