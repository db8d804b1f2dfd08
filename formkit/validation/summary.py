"""Validation summaries: the accumulated result of one validation pass.

A summary is created fresh for each form being validated (nested forms get
their own), mutated while rules run, then handed back read-only. ``valid`` is
derived from ``error_count`` so the two can never disagree.

Per-field errors are a closed sum::

    match summary.errors.keys["address"]:
        case MessageError(message=message):
            ...
        case NestedError(summary=nested):
            ...
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class MessageError:
    """A leaf field's failure: the message of its first failing rule."""
    message: str
    rule: str | None = None


@dataclass(frozen=True, slots=True)
class NestedError:
    """A composite field's failure: the nested form's own summary."""
    summary: ValidationSummary


FieldError = Union[MessageError, NestedError]


@dataclass(slots=True)
class SummaryErrors:
    keys: dict[str, FieldError] = field(default_factory=dict)
    missing_properties: list[str] = field(default_factory=list)
    redundant_properties: list[str] = field(default_factory=list)
    root: str | None = None


@dataclass(slots=True)
class ValidationSummary:
    """Aggregated pass/fail result for one form."""
    error_count: int = 0
    errors: SummaryErrors = field(default_factory=SummaryErrors)

    @classmethod
    def new(cls) -> ValidationSummary:
        return cls()

    @property
    def valid(self) -> bool:
        return self.error_count == 0

    def __bool__(self) -> bool:
        """Falsy when invalid, so ``if not summary:`` reads naturally."""
        return self.valid

    def fail(self) -> None:
        self.error_count += 1

    def set_root(self, message: str) -> None:
        """Record a structural failure; no field checks follow."""
        self.errors.root = message
        self.fail()

    def add_error(self, key: str, error: MessageError) -> bool:
        """Record *error* under *key* unless the key already has one.

        Returns True when the error was recorded.
        """
        if key in self.errors.keys:
            return False
        self.errors.keys[key] = error
        self.fail()
        return True

    def merge_nested(self, key: str, nested: ValidationSummary) -> None:
        """Embed an invalid nested summary; valid ones contribute nothing."""
        if nested.valid:
            return
        self.error_count += nested.error_count
        self.errors.keys[key] = NestedError(nested)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the summary tree to plain data."""
        keys: dict[str, Any] = {}
        for key, error in self.errors.keys.items():
            match error:
                case MessageError(message=message, rule=rule):
                    keys[key] = {"message": message, "rule": rule}
                case NestedError(summary=nested):
                    keys[key] = {"nested": nested.to_dict()}
        return {
            "valid": self.valid,
            "error_count": self.error_count,
            "errors": {
                "keys": keys,
                "missing_properties": list(self.errors.missing_properties),
                "redundant_properties": list(self.errors.redundant_properties),
                "root": self.errors.root,
            },
        }
