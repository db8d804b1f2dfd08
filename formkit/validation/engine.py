"""Validation Engine

Walks a candidate mapping against a ``Form`` and returns a
``ValidationSummary``. Nested forms are handled by plain recursion: each
nested call builds its own summary, which is merged into the parent only
when invalid.

Policy:
- Presence is ``None``-based: a field explicitly set to ``None`` is missing.
- Within a field every rule runs; only the first error per field is kept and
  counted.
- ``early_stop`` is checked before each field, so the field that causes the
  first failure is evaluated in full.
- Exceptions raised by rule validators or message functions are converted to
  field errors through the form's ``validation_error_handler``.
- Nesting depth is unbounded. Only a form revisiting the very same mapping
  (cyclic form plus cyclic data) raises ``FormCycleError``.
- Non-string extra keys are reported by their ``str()``.

The engine performs no I/O and never logs.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, overload

from .form import EffectiveOptions, Form, FormField, RuleErrorContext, RulesField, resolve_options
from .rules import Rule
from .structural import exists, is_object, present_keys, type_name
from .summary import MessageError, ValidationSummary

_UNSET: Any = object()


class FormCycleError(RecursionError):
    """A self-referential form met self-referential data and would never terminate."""

    def __init__(self, form_name: str, path: tuple[str, ...]):
        self.form_name, self.path = form_name, path
        super().__init__(
            f"Form '{form_name}' revisits the same value at '{'.'.join(path)}'; cyclic data is not supported"
        )


@dataclass(frozen=True, slots=True)
class PreCheck:
    """Classification of a candidate's properties against a form."""
    missing: tuple[str, ...]
    redundant: tuple[str, ...]
    props_to_check: tuple[str, ...]


def precheck_props(form: Form, candidate: Mapping[str, Any]) -> PreCheck:
    """Classify *candidate*'s properties before any rule runs."""
    present = present_keys(candidate)
    present_set = set(present)
    return PreCheck(
        missing=tuple(key for key in form.required_fields if key not in present_set),
        redundant=tuple(str(key) for key in present if key not in form.definition),
        props_to_check=tuple(key for key in form.definition if key in present_set),
    )


@overload
def validate(form: Form) -> Callable[[Any], ValidationSummary]: ...
@overload
def validate(form: Form, candidate: Any) -> ValidationSummary: ...


def validate(form, candidate=_UNSET):
    """Validate *candidate* against *form*.

    Called with the form alone, returns a one-argument validator::

        check_user = validate(user_form)
        summary = check_user({"name": "Ada"})
    """
    if candidate is _UNSET:
        return partial(validate, form)
    return _validate(form, candidate, active=(), path=())


def _validate(
    form: Form,
    candidate: Any,
    active: tuple[tuple[int, int], ...],
    path: tuple[str, ...],
) -> ValidationSummary:
    summary = ValidationSummary.new()

    if not is_object(candidate):
        if form.options.is_optional and not exists(candidate):
            return summary
        summary.set_root(f"Value must be an object, not {type_name(candidate)}")
        return summary

    # Only a (form, value) pair already on the stack recurses without end.
    frame = (id(form), id(candidate))
    if frame in active:
        raise FormCycleError(form.name, path)

    options = resolve_options(form.options)
    pre = precheck_props(form, candidate)

    if pre.missing:
        summary.fail()
        summary.errors.missing_properties = list(pre.missing)

    if pre.redundant:
        summary.errors.redundant_properties = list(pre.redundant)
        if options.no_redundant_properties:
            summary.fail()

    for key in pre.props_to_check:
        if options.early_stop and not summary.valid:
            return summary

        value = candidate[key]
        match form.definition[key]:
            case RulesField(rules=rules):
                _apply_rules(summary, rules, key, value, candidate, options)
            case FormField(form=nested_form):
                summary.merge_nested(key, _validate(nested_form, value, (*active, frame), (*path, key)))

    return summary


def _apply_rules(
    summary: ValidationSummary,
    rules: tuple[Rule, ...],
    key: str,
    value: Any,
    candidate: Mapping[str, Any],
    options: EffectiveOptions,
) -> None:
    for rule in rules:
        try:
            if rule.validator(value, key, candidate):
                continue
            message = rule.render_message(value, key, candidate)
        except Exception as exc:
            message = options.validation_error_handler(
                RuleErrorContext(key=key, value=value, rule_name=rule.name, error=exc)
            )
        summary.add_error(key, MessageError(message, rule=rule.name))
