"""Rules: named predicates with static or computed failure messages.

A rule's validator is called as ``validator(value, key, obj)`` and returns a
truthy value when the field is acceptable. The message is either a plain
string or a callable ``(value, key, obj, meta) -> str``, where ``meta`` is a
``RuleMeta`` exposing the rule's name without its validator or message.

Usage::

    from formkit.validation.rules import rule, required, max_length

    name_rules = [
        required(),
        max_length(50),
        rule("no_digits", lambda v, k, o: not any(c.isdigit() for c in v),
             lambda v, k, o, meta: f"{k} must not contain digits ({meta.name})"),
    ]
"""
from __future__ import annotations

import re
from collections.abc import Sized
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, field_validator

Validator = Callable[[Any, str, Any], Any]


class RuleMeta(BaseModel):
    """A rule stripped of its validator and message."""
    model_config = ConfigDict(frozen=True)

    name: str


class StaticMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str

    def render(self, value: Any, key: str, obj: Any, meta: RuleMeta) -> str:
        return self.text


class ComputedMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    fn: Callable[..., str]

    def render(self, value: Any, key: str, obj: Any, meta: RuleMeta) -> str:
        return self.fn(value, key, obj, meta)


Message = StaticMessage | ComputedMessage


class Rule(BaseModel):
    """A single named validation check for one field."""
    model_config = ConfigDict(frozen=True)

    name: str
    validator: Callable[..., Any]
    message: Message

    @field_validator("message", mode="before")
    @classmethod
    def coerce_message(cls, v: Any) -> Any:
        if isinstance(v, (StaticMessage, ComputedMessage)):
            return v
        if isinstance(v, str):
            return StaticMessage(text=v)
        if callable(v):
            return ComputedMessage(fn=v)
        return v

    @property
    def meta(self) -> RuleMeta:
        return RuleMeta(name=self.name)

    def render_message(self, value: Any, key: str, obj: Any) -> str:
        return self.message.render(value, key, obj, self.meta)


def rule(name: str, validator: Validator, message: str | Callable[..., str]) -> Rule:
    """Build a rule from a predicate and a message."""
    return Rule(name=name, validator=validator, message=message)


# ============================================================================
# Presence
# ============================================================================

def _is_filled(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, Sized):
        return len(value) > 0
    return True


def required(message: str = "This field cannot be empty") -> Rule:
    """Value must not be blank: no whitespace-only strings or empty collections."""
    return rule("required", lambda v, k, o: _is_filled(v), message)


# ============================================================================
# Type
# ============================================================================

def of_type(*types: type, message: str | None = None) -> Rule:
    """Value must be an instance of one of *types*. ``bool`` never passes for ``int``."""
    names = ", ".join(t.__name__ for t in types)

    def check(v: Any, k: str, o: Any) -> bool:
        if isinstance(v, bool) and bool not in types:
            return False
        return isinstance(v, types)

    return rule(
        f"of_type[{names}]",
        check,
        message or (lambda v, k, o, meta: f"Must be of type {names}, not {type(v).__name__}"),
    )


# ============================================================================
# Length
# ============================================================================

def min_length(n: int) -> Rule:
    """Value must have at least *n* items or characters."""
    return rule(
        f"min_length[{n}]",
        lambda v, k, o: len(v) >= n,
        lambda v, k, o, meta: f"Must be at least {n} characters" if isinstance(v, str) else f"Must have at least {n} items",
    )


def max_length(n: int) -> Rule:
    """Value must have at most *n* items or characters."""
    return rule(
        f"max_length[{n}]",
        lambda v, k, o: len(v) <= n,
        lambda v, k, o, meta: f"Must be at most {n} characters" if isinstance(v, str) else f"Must have at most {n} items",
    )


# ============================================================================
# Format
# ============================================================================

_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$")


def matches(pattern: str, message: str | None = None, *, flags: int = 0) -> Rule:
    """String value must match the regex *pattern* from its start."""
    compiled = re.compile(pattern, flags)
    return rule(
        f"pattern[{pattern}]",
        lambda v, k, o: isinstance(v, str) and compiled.match(v) is not None,
        message or f"Must match pattern: {pattern}",
    )


def email(message: str = "Must be a valid email address") -> Rule:
    """Basic structural email check, not deliverability."""
    return rule("email", lambda v, k, o: isinstance(v, str) and _EMAIL_RE.match(v) is not None, message)


# ============================================================================
# Choice and range
# ============================================================================

def one_of(*choices: Any) -> Rule:
    """Value must equal one of *choices*."""
    allowed = tuple(choices)
    listed = ", ".join(str(c) for c in allowed)
    return rule(
        "one_of",
        lambda v, k, o: v in allowed,
        lambda v, k, o, meta: f"Must be one of: {listed}",
    )


def in_range(min_value: float | None = None, max_value: float | None = None) -> Rule:
    """Number must lie within the inclusive bounds given."""
    parts = []
    if min_value is not None:
        parts.append(f">={min_value}")
    if max_value is not None:
        parts.append(f"<={max_value}")

    def check(v: Any, k: str, o: Any) -> bool:
        if min_value is not None and v < min_value:
            return False
        if max_value is not None and v > max_value:
            return False
        return True

    def describe(v: Any, k: str, o: Any, meta: RuleMeta) -> str:
        if min_value is not None and max_value is not None:
            return f"Must be between {min_value} and {max_value}"
        if min_value is not None:
            return f"Must be at least {min_value}"
        return f"Must be at most {max_value}"

    return rule(f"range[{', '.join(parts)}]", check, describe)
