"""Tests for formkit.validation.rules: rule model and built-in rules."""
from formkit.validation import (
    ComputedMessage,
    Form,
    Rule,
    StaticMessage,
    email,
    in_range,
    matches,
    max_length,
    min_length,
    of_type,
    one_of,
    required,
    rule,
    validate,
)


def passes(r: Rule, value) -> bool:
    return bool(r.validator(value, "field", {"field": value}))


# ---------------------------------------------------------------------------
# Rule model
# ---------------------------------------------------------------------------


class TestRuleModel:
    def test_string_message_becomes_static(self) -> None:
        r = rule("r", lambda v, k, o: True, "plain")
        assert isinstance(r.message, StaticMessage)
        assert r.render_message(1, "field", {}) == "plain"

    def test_callable_message_becomes_computed(self) -> None:
        r = rule("r", lambda v, k, o: True, lambda v, k, o, meta: f"{meta.name}:{k}:{v}")
        assert isinstance(r.message, ComputedMessage)
        assert r.render_message(3, "field", {}) == "r:field:3"

    def test_meta_has_only_name(self) -> None:
        r = rule("named", lambda v, k, o: True, "m")
        assert r.meta.model_dump() == {"name": "named"}

    def test_dict_literal(self) -> None:
        r = Rule.model_validate({"name": "r", "validator": lambda v, k, o: True, "message": "m"})
        assert r.name == "r"


# ---------------------------------------------------------------------------
# Built-in rules
# ---------------------------------------------------------------------------


class TestRequired:
    def test_empty_string(self) -> None:
        assert not passes(required(), "")

    def test_whitespace_only(self) -> None:
        assert not passes(required(), "   ")

    def test_empty_list(self) -> None:
        assert not passes(required(), [])

    def test_zero_is_filled(self) -> None:
        assert passes(required(), 0)

    def test_valid(self) -> None:
        assert passes(required(), "hello")


class TestOfType:
    def test_matching_type(self) -> None:
        assert passes(of_type(int, float), 3.5)

    def test_bool_is_not_int(self) -> None:
        assert not passes(of_type(int), True)

    def test_bool_when_asked(self) -> None:
        assert passes(of_type(bool), False)

    def test_message(self) -> None:
        assert of_type(int).render_message("x", "age", {}) == "Must be of type int, not str"


class TestLength:
    def test_min_length(self) -> None:
        assert passes(min_length(3), "abc")
        assert not passes(min_length(3), "ab")

    def test_max_length(self) -> None:
        assert passes(max_length(2), [1, 2])
        assert not passes(max_length(2), [1, 2, 3])

    def test_messages(self) -> None:
        assert min_length(3).render_message("ab", "k", {}) == "Must be at least 3 characters"
        assert max_length(2).render_message([1, 2, 3], "k", {}) == "Must have at most 2 items"

    def test_unsized_value_goes_through_error_handler(self) -> None:
        form = Form(name="f", definition={"n": {"rules": [min_length(2)]}})
        summary = validate(form, {"n": 5})
        assert summary.errors.keys["n"].message.startswith('Error while validating property "n" with rule "min_length[2]"')


class TestFormat:
    def test_email(self) -> None:
        assert passes(email(), "user@example.com")
        assert not passes(email(), "userexample.com")
        assert not passes(email(), 12)

    def test_matches(self) -> None:
        assert passes(matches(r"^\d{3}$"), "123")
        assert not passes(matches(r"^\d{3}$"), "12")

    def test_matches_custom_message(self) -> None:
        assert matches(r"^\d+$", message="Numbers only").render_message("abc", "k", {}) == "Numbers only"


class TestChoiceAndRange:
    def test_one_of(self) -> None:
        r = one_of("red", "green")
        assert passes(r, "red")
        assert not passes(r, "blue")
        assert r.render_message("blue", "k", {}) == "Must be one of: red, green"

    def test_in_range(self) -> None:
        r = in_range(0, 10)
        assert passes(r, 0)
        assert passes(r, 10)
        assert not passes(r, 11)
        assert r.render_message(11, "k", {}) == "Must be between 0 and 10"

    def test_open_ended_range(self) -> None:
        assert passes(in_range(min_value=5), 500)
        assert in_range(max_value=5).render_message(6, "k", {}) == "Must be at most 5"
