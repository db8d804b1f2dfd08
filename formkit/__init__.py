"""formkit: declarative object validation with queryable, nested summaries."""
from formkit.config import settings, get_settings
from formkit.logging import (
    configure_logging,
    get_logger,
    bind_context,
    clear_context,
    unbind_context,
)
from formkit.validation import (
    Form,
    RulesField,
    FormField,
    Options,
    Rule,
    rule,
    ValidationSummary,
    validate,
    precheck_props,
    get_error_messages,
    get_errors_flat,
    get_field_errors,
    has_field_error,
    has_missing_fields,
    get_first_error,
    FormValidationError,
    parse_form,
    ensure_valid,
)

__version__ = "0.1.0"
