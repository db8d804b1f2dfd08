"""Monadic Error Handling

- Result[T, E]: container for success/failure
- AppError: error type with code, metadata and tracing context
- ErrorCode: error code taxonomy
- Builder functions: ergonomic validation error construction

Usage:
    from formkit.errors import Ok, Err, AppError

    match parse_form(signup_form, payload):
        case Ok(data):
            create_account(data)
        case Err(error):
            log.warning(error.message, code=error.code.name)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    ok,
    err,
    from_exception,
)

from .builders import (
    validation_error,
    required_field,
    unexpected_field,
    invalid_structure,
    rule_failed,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "ok",
    "err",
    "from_exception",
    "validation_error",
    "required_field",
    "unexpected_field",
    "invalid_structure",
    "rule_failed",
]
