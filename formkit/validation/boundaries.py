"""Validation at System Boundaries

Helpers for the edges of an application, where payloads arrive as plain
mappings and callers want a Result, an exception, or a decorator rather than
a raw summary:

- ``FormBoundary`` / ``parse_form``: Result-returning parsing
- ``ensure_valid``: raise ``FormValidationError`` on failure
- ``parse_batch``: validate many payloads, collecting indexed errors
- ``validated``: decorator guarding one argument of a function
- ``ValidationBoundary``: context manager validating several named payloads

Failures are logged here; the engine itself stays silent.
"""
from __future__ import annotations

from collections.abc import Mapping
from functools import wraps
from inspect import signature
from typing import Any, Callable, TypeVar

from formkit.errors import AppError, Err, ErrorCode, Ok, Result, from_exception
from formkit.logging import boundary_logger, validation_logger

from .engine import FormCycleError, validate
from .errors import FormValidationError, ValidationErrorDetail, collect_details
from .form import Form
from .queries import get_errors_flat
from .summary import ValidationSummary

T = TypeVar("T")


# ============================================================================
# Boundary Validators
# ============================================================================

class FormBoundary:
    """Stateless boundary validator for a specific form.

    Usage:
        signup = FormBoundary(signup_form)
        match signup.parse(payload):
            case Ok(data): ...
            case Err(error): ...
    """

    __slots__ = ("form", "origin")

    def __init__(self, form: Form, origin: str = "ingress"):
        self.form, self.origin = form, origin

    def check(self, data: Any) -> ValidationSummary:
        """Validate and return the raw summary, logging failures."""
        summary = validate(self.form, data)
        if not summary.valid:
            boundary_logger().info("form_validation_failed", form=self.form.name, origin=self.origin,
                error_count=summary.error_count, errors=get_errors_flat(summary))
        return summary

    def parse(self, data: Any) -> Result[Mapping[str, Any], AppError]:
        """Ok with the original payload when valid, Err with a typed AppError otherwise.

        A cyclic form meeting cyclic data also comes back as Err.
        """
        try:
            summary = self.check(data)
        except FormCycleError as exc:
            boundary_logger().error("form_cycle_detected", form=self.form.name, path=".".join(exc.path))
            return from_exception(exc, ErrorCode.E9000_INTERNAL_GENERIC, origin=self.origin, form=self.form.name)
        if summary.valid:
            return Ok(data)
        error = FormValidationError.from_summary(self.form.name, summary)
        return Err(error.to_app_error().with_origin(self.origin))

    def ensure(self, data: Any) -> ValidationSummary:
        """Return the summary when valid, raise FormValidationError otherwise."""
        summary = self.check(data)
        if not summary.valid:
            raise FormValidationError.from_summary(self.form.name, summary)
        return summary


def parse_form(form: Form, data: Any, *, origin: str = "ingress") -> Result[Mapping[str, Any], AppError]:
    """Parse and validate incoming data.

    Usage:
        result = parse_form(user_form, request_json)
        if result.is_err():
            return error_response(result.unwrap_err())
        user = result.unwrap()
    """
    return FormBoundary(form, origin).parse(data)


def ensure_valid(form: Form, data: Any) -> ValidationSummary:
    """Validate *data*, raising FormValidationError if it fails."""
    return FormBoundary(form).ensure(data)


# ============================================================================
# Batch Validation
# ============================================================================

def parse_batch(
    form: Form,
    items: list[Any],
    *,
    max_errors: int = 50,
) -> Result[list[Any], list[tuple[int, AppError]]]:
    """Validate a batch of payloads.

    Returns Ok with all items if every one is valid, or Err with
    (index, error) pairs. Stops collecting after *max_errors* failures.

    Usage:
        match parse_batch(user_form, rows):
            case Ok(users):
                store(users)
            case Err(errors):
                for idx, error in errors:
                    log.warning("bad_row", index=idx, error=error.message)
    """
    boundary = FormBoundary(form, origin="batch")
    valid: list[Any] = []
    errors: list[tuple[int, AppError]] = []

    for idx, item in enumerate(items):
        if len(errors) >= max_errors:
            break
        match boundary.parse(item):
            case Ok(data):
                valid.append(data)
            case Err(error):
                errors.append((idx, error.with_metadata(batch_index=idx)))

    if errors:
        boundary_logger().warning("form_batch_failed", form=form.name, failed=len(errors), total=len(items))
        return Err(errors)
    return Ok(valid)


# ============================================================================
# Decorator-based Boundary Validation
# ============================================================================

def validated(form: Form, arg: str = "data") -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Decorator validating argument *arg* against *form* before the call.

    Usage:
        @validated(user_form, arg="payload")
        def create_user(payload: dict) -> User:
            ...
    """
    boundary = FormBoundary(form, origin="call")

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        sig = signature(func)
        if arg not in sig.parameters:
            raise TypeError(f"{func.__qualname__}() has no parameter named '{arg}'")

        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()
            boundary.ensure(bound.arguments.get(arg))
            return func(*args, **kwargs)
        return wrapper
    return decorator


# ============================================================================
# Context Manager for Multiple Validations
# ============================================================================

class ValidationBoundary:
    """Context manager for validating several payloads with accumulation.

    Usage:
        with ValidationBoundary() as boundary:
            boundary.check("user", user_data, user_form)
            boundary.check("billing", billing_data, address_form)
        # Raises FormValidationError if any payload failed
    """

    def __init__(self, max_errors: int = 50):
        self.max_errors = max_errors
        self._details: list[ValidationErrorDetail] = []
        self._summaries: dict[str, ValidationSummary] = {}

    def __enter__(self) -> ValidationBoundary:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is None and self._details:
            validation_logger().info("validation_boundary_failed", payloads=sorted(
                name for name, summary in self._summaries.items() if not summary.valid),
                error_count=len(self._details))
            raise FormValidationError(message="Validation failed", details=list(self._details))
        return False

    def check(self, name: str, data: Any, form: Form) -> bool:
        """Validate *data* under *name*, accumulating prefixed details. Returns validity."""
        summary = validate(form, data)
        self._summaries[name] = summary
        if summary.valid:
            return True
        for detail in collect_details(summary):
            if len(self._details) >= self.max_errors:
                break
            self._details.append(detail.prefixed(name))
        return False

    def get(self, name: str) -> ValidationSummary | None:
        """Get the summary recorded for *name*."""
        return self._summaries.get(name)

    @property
    def has_errors(self) -> bool:
        return bool(self._details)

    @property
    def errors(self) -> list[ValidationErrorDetail]:
        return list(self._details)
