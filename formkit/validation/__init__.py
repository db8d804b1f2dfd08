"""Declarative Form Validation

Forms map field names to either an ordered list of rules or a nested form.
``validate`` walks a candidate mapping and returns a ``ValidationSummary``
tree; the query functions turn that tree into messages and flat maps.

Usage:
    from formkit.validation import Form, validate, get_errors_flat, required, email

    signup = Form(name="signup", definition={
        "email": {"rules": [required(), email()]},
        "nickname": {"rules": [required()], "is_optional": True},
    })

    summary = validate(signup, {"email": "not-an-email"})
    if not summary:
        errors = get_errors_flat(summary)  # {"email": "Must be a valid email address"}
"""
from .form import (
    Form,
    FieldSpec,
    RulesField,
    FormField,
    Options,
    EffectiveOptions,
    RuleErrorContext,
    default_error_handler,
    resolve_options,
)
from .rules import (
    Rule,
    RuleMeta,
    Message,
    StaticMessage,
    ComputedMessage,
    rule,
    required,
    of_type,
    min_length,
    max_length,
    matches,
    email,
    one_of,
    in_range,
)
from .summary import (
    ValidationSummary,
    SummaryErrors,
    FieldError,
    MessageError,
    NestedError,
)
from .engine import (
    PreCheck,
    FormCycleError,
    precheck_props,
    validate,
)
from .queries import (
    get_error_messages,
    get_errors_flat,
    get_field_errors,
    has_field_error,
    has_missing_fields,
    get_first_error,
)
from .errors import (
    DetailKind,
    ValidationErrorDetail,
    FormValidationError,
    collect_details,
)
from .boundaries import (
    FormBoundary,
    parse_form,
    ensure_valid,
    parse_batch,
    validated,
    ValidationBoundary,
)

__all__ = [
    # Forms
    "Form",
    "FieldSpec",
    "RulesField",
    "FormField",
    "Options",
    "EffectiveOptions",
    "RuleErrorContext",
    "default_error_handler",
    "resolve_options",
    # Rules
    "Rule",
    "RuleMeta",
    "Message",
    "StaticMessage",
    "ComputedMessage",
    "rule",
    "required",
    "of_type",
    "min_length",
    "max_length",
    "matches",
    "email",
    "one_of",
    "in_range",
    # Summaries
    "ValidationSummary",
    "SummaryErrors",
    "FieldError",
    "MessageError",
    "NestedError",
    # Engine
    "PreCheck",
    "FormCycleError",
    "precheck_props",
    "validate",
    # Queries
    "get_error_messages",
    "get_errors_flat",
    "get_field_errors",
    "has_field_error",
    "has_missing_fields",
    "get_first_error",
    # Errors
    "DetailKind",
    "ValidationErrorDetail",
    "FormValidationError",
    "collect_details",
    # Boundaries
    "FormBoundary",
    "parse_form",
    "ensure_valid",
    "parse_batch",
    "validated",
    "ValidationBoundary",
]
