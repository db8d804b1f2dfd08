"""Validation Error Builders

Ergonomic constructors for typed validation errors. Each builder returns an
``Err`` wrapping an ``AppError`` with the matching code and metadata.
"""
from .types import AppError, ErrorCode, ErrorContext, Err


def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def required_field(field: str, origin: str = "") -> Err[AppError]:
    return validation_error(
        f"Required field '{field}' is missing",
        code=ErrorCode.E2001_REQUIRED_FIELD_MISSING,
        field=field,
        origin=origin,
    )


def unexpected_field(field: str, origin: str = "") -> Err[AppError]:
    return validation_error(
        f"Field '{field}' is not allowed",
        code=ErrorCode.E2006_UNEXPECTED_FIELD,
        field=field,
        origin=origin,
    )


def invalid_structure(message: str, field: str | None = None, origin: str = "") -> Err[AppError]:
    return validation_error(
        message,
        code=ErrorCode.E2004_INVALID_TYPE,
        field=field,
        origin=origin,
    )


def rule_failed(field: str, rule: str, message: str, origin: str = "") -> Err[AppError]:
    return validation_error(
        message,
        code=ErrorCode.E2007_RULE_FAILED,
        field=field,
        rule=rule,
        origin=origin,
    )
