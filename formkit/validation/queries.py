"""Read-only queries over a (possibly nested) ValidationSummary.

None of these mutate the summary. Nested summaries are flattened lazily here,
never during validation.
"""
from __future__ import annotations

from .summary import MessageError, NestedError, ValidationSummary

ROOT_KEY = "_root"
REQUIRED_MESSAGE = "This field is required"
NOT_ALLOWED_MESSAGE = "This field is not allowed"


def _join(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


def get_error_messages(summary: ValidationSummary) -> list[str]:
    """Human-readable messages, nested ones prefixed with their parent key.

    A root error suppresses everything else.
    """
    if summary.valid:
        return []
    errors = summary.errors
    if errors.root is not None:
        return [errors.root]

    messages: list[str] = []
    if errors.missing_properties:
        messages.append(f"Missing required fields: {', '.join(errors.missing_properties)}")
    if errors.redundant_properties:
        messages.append(f"Unexpected fields: {', '.join(errors.redundant_properties)}")

    for key, error in errors.keys.items():
        match error:
            case MessageError(message=message):
                messages.append(f"{key}: {message}")
            case NestedError(summary=nested):
                messages.extend(f"{key}: {message}" for message in get_error_messages(nested))
    return messages


def get_errors_flat(summary: ValidationSummary, prefix: str = "") -> dict[str, str]:
    """Flat ``dotted.path -> message`` map.

    A root error yields only ``{"_root": message}`` (``"<prefix>._root"``
    inside a nested summary).
    """
    if summary.valid:
        return {}
    errors = summary.errors
    if errors.root is not None:
        return {_join(prefix, ROOT_KEY): errors.root}

    flat: dict[str, str] = {}
    for key in errors.missing_properties:
        flat[_join(prefix, key)] = REQUIRED_MESSAGE
    for key in errors.redundant_properties:
        flat[_join(prefix, key)] = NOT_ALLOWED_MESSAGE
    for key, error in errors.keys.items():
        match error:
            case MessageError(message=message):
                flat[_join(prefix, key)] = message
            case NestedError(summary=nested):
                flat.update(get_errors_flat(nested, _join(prefix, key)))
    return flat


def get_field_errors(summary: ValidationSummary, field_path: str) -> list[str]:
    """Messages for every flat key starting with *field_path*.

    This is a plain string-prefix match: ``"name"`` also matches
    ``"nameExtra"``.
    """
    return [message for key, message in get_errors_flat(summary).items() if key.startswith(field_path)]


def has_field_error(summary: ValidationSummary, field_path: str) -> bool:
    return len(get_field_errors(summary, field_path)) > 0


def has_missing_fields(summary: ValidationSummary) -> bool:
    return len(summary.errors.missing_properties) > 0


def get_first_error(summary: ValidationSummary) -> str | None:
    messages = get_error_messages(summary)
    return messages[0] if messages else None
