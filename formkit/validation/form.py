"""Forms: declarative schemas mapping field names to field specifications.

A field is either checked against an ordered list of rules (``RulesField``)
or validated recursively against another form (``FormField``). Plain dict
literals are accepted and coerced, so both spellings below are equivalent::

    address = Form(name="address", definition={
        "city": RulesField(rules=[required()]),
    })
    customer = Form(name="customer", definition={
        "name": {"rules": [required()]},
        "address": {"form": address},
        "nickname": {"rules": [max_length(20)], "is_optional": True},
    }, options={"early_stop": True})

A field carrying both ``rules`` and ``form`` (or neither) is rejected when the
form is built.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

from .rules import Rule


@dataclass(frozen=True, slots=True)
class RuleErrorContext:
    """What a validation error handler receives when a rule raises."""
    key: str
    value: Any
    rule_name: str
    error: Exception


ErrorHandler = Callable[[RuleErrorContext], str]


def default_error_handler(ctx: RuleErrorContext) -> str:
    return f'Error while validating property "{ctx.key}" with rule "{ctx.rule_name}": {ctx.error}'


class Options(BaseModel):
    """Per-form validation options. ``None`` means "use the default"."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    no_redundant_properties: bool | None = None
    early_stop: bool | None = None
    is_optional: bool | None = None
    validation_error_handler: ErrorHandler | None = None


@dataclass(frozen=True, slots=True)
class EffectiveOptions:
    """Options with every field resolved."""
    no_redundant_properties: bool = True
    early_stop: bool = False
    is_optional: bool = False
    validation_error_handler: ErrorHandler = default_error_handler


def resolve_options(options: Options | None) -> EffectiveOptions:
    """Fill unset options with the documented defaults."""
    if options is None:
        return EffectiveOptions()
    defaults = EffectiveOptions()
    return EffectiveOptions(
        no_redundant_properties=(defaults.no_redundant_properties
            if options.no_redundant_properties is None else options.no_redundant_properties),
        early_stop=defaults.early_stop if options.early_stop is None else options.early_stop,
        is_optional=defaults.is_optional if options.is_optional is None else options.is_optional,
        validation_error_handler=options.validation_error_handler or defaults.validation_error_handler,
    )


class RulesField(BaseModel):
    """Leaf field checked against rules in declared order."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    rules: tuple[Rule, ...]
    is_optional: bool = False


class FormField(BaseModel):
    """Composite field validated recursively against a nested form."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    form: Form
    is_optional: bool = False


FieldSpec = RulesField | FormField


class Form(BaseModel):
    """A named collection of field specifications plus options."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    definition: dict[str, FieldSpec]
    options: Options = Field(default_factory=Options)

    @property
    def required_fields(self) -> list[str]:
        return [key for key, spec in self.definition.items() if not spec.is_optional]


FormField.model_rebuild()
Form.model_rebuild()
