"""Validation Error Objects

Structured, exception-friendly views of a ValidationSummary for callers that
prefer raising over inspecting summaries.

Error Format:
{
    "error": {
        "type": "validation_error",
        "message": "Form 'customer' is invalid",
        "form": "customer",
        "error_count": 1,
        "errors": [
            {"field": "address.city", "constraint": "required", "message": "This field is required"}
        ]
    }
}
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from formkit.errors import AppError, ErrorCode
from formkit.errors.builders import invalid_structure, required_field, rule_failed, unexpected_field

from .queries import NOT_ALLOWED_MESSAGE, REQUIRED_MESSAGE, ROOT_KEY
from .summary import MessageError, NestedError, ValidationSummary

ROOT_CONSTRAINT = "object"
REQUIRED_CONSTRAINT = "required"
NOT_ALLOWED_CONSTRAINT = "not_allowed"


class DetailKind(Enum):
    """Where in a summary a detail came from."""
    ROOT = "root"
    MISSING = "missing"
    REDUNDANT = "redundant"
    RULE = "rule"


@dataclass(frozen=True, slots=True)
class ValidationErrorDetail:
    """A single field failure with its dotted path and violated constraint."""
    field_path: str
    constraint: str
    message: str = ""
    kind: DetailKind = DetailKind.RULE

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field_path, "constraint": self.constraint, "message": self.message}

    def prefixed(self, prefix: str) -> ValidationErrorDetail:
        return ValidationErrorDetail(field_path=f"{prefix}.{self.field_path}", constraint=self.constraint,
            message=self.message, kind=self.kind)

    def to_app_error(self) -> AppError:
        """Convert to the matching typed AppError."""
        match self.kind:
            case DetailKind.ROOT:
                return invalid_structure(self.message, field=self.field_path).unwrap_err()
            case DetailKind.MISSING:
                return required_field(self.field_path).unwrap_err()
            case DetailKind.REDUNDANT:
                return unexpected_field(self.field_path).unwrap_err()
            case DetailKind.RULE:
                return rule_failed(self.field_path, self.constraint, self.message).unwrap_err()


def collect_details(summary: ValidationSummary, prefix: str = "") -> list[ValidationErrorDetail]:
    """Walk a summary into a flat list of details, nested paths dot-joined."""
    if summary.valid:
        return []
    join = (lambda key: f"{prefix}.{key}") if prefix else (lambda key: key)
    errors = summary.errors
    if errors.root is not None:
        return [ValidationErrorDetail(join(ROOT_KEY), ROOT_CONSTRAINT, errors.root, DetailKind.ROOT)]

    details = [ValidationErrorDetail(join(key), REQUIRED_CONSTRAINT, REQUIRED_MESSAGE, DetailKind.MISSING)
        for key in errors.missing_properties]
    details.extend(ValidationErrorDetail(join(key), NOT_ALLOWED_CONSTRAINT, NOT_ALLOWED_MESSAGE,
            DetailKind.REDUNDANT)
        for key in errors.redundant_properties)
    for key, error in errors.keys.items():
        match error:
            case MessageError(message=message, rule=rule):
                details.append(ValidationErrorDetail(join(key), rule or "rule", message))
            case NestedError(summary=nested):
                details.extend(collect_details(nested, join(key)))
    return details


@dataclass
class FormValidationError(Exception):
    """Raised when a candidate fails its form and the caller asked to raise.

    Carries the full summary alongside a flat detail list.
    """
    message: str
    details: list[ValidationErrorDetail]
    form_name: str | None = None
    summary: ValidationSummary | None = field(default=None, compare=False)

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self) -> str:
        if not self.details: return self.message
        if len(self.details) == 1: return f"{(d := self.details[0]).field_path}: {d.message}"
        return f"{self.message} ({len(self.details)} errors)"

    @classmethod
    def from_summary(cls, form_name: str, summary: ValidationSummary) -> FormValidationError:
        return cls(message=f"Form '{form_name}' is invalid", details=collect_details(summary),
            form_name=form_name, summary=summary)

    @property
    def field_errors(self) -> dict[str, list[ValidationErrorDetail]]:
        """Group errors by field path."""
        result: dict[str, list[ValidationErrorDetail]] = {}
        for detail in self.details: result.setdefault(detail.field_path, []).append(detail)
        return result

    @property
    def first_error(self) -> ValidationErrorDetail | None: return self.details[0] if self.details else None

    def to_app_error(self) -> AppError:
        """Convert to AppError for Result-based callers."""
        if len(self.details) == 1:
            return self.details[0].to_app_error().with_metadata(form=self.form_name)
        return AppError(code=ErrorCode.E2000_VALIDATION_GENERIC,
            message=f"Validation failed: {len(self.details)} errors",
            metadata={"form": self.form_name, "error_count": len(self.details),
                "errors": [d.to_dict() for d in self.details]})

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API responses."""
        return {"error": {"type": "validation_error", "message": self.message, "form": self.form_name,
            "error_count": len(self.details), "errors": [d.to_dict() for d in self.details]}}
