"""Shared forms for the validation tests."""
import pytest

from formkit.validation import Form, rule


def non_empty_string(message: str):
    return rule("required", lambda v, k, o: isinstance(v, str) and len(v) > 0, message)


@pytest.fixture
def user_form() -> Form:
    return Form(
        name="userForm",
        definition={
            "name": {"rules": [non_empty_string("Name is required")]},
            "age": {
                "rules": [
                    rule("isNumber", lambda v, k, o: isinstance(v, int), "Age must be a number"),
                    rule("isAdult", lambda v, k, o: v >= 18, "Must be at least 18 years old"),
                ]
            },
        },
        options={"no_redundant_properties": True},
    )


@pytest.fixture
def address_form() -> Form:
    return Form(
        name="addressForm",
        definition={
            "street": {"rules": [non_empty_string("Street is required")]},
            "city": {"rules": [non_empty_string("City is required")]},
        },
    )


@pytest.fixture
def customer_form(address_form: Form) -> Form:
    return Form(
        name="customerForm",
        definition={
            "name": {"rules": [non_empty_string("Name is required")]},
            "address": {"form": address_form},
        },
    )
