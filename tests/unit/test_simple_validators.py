"""
Unit tests for phone number, social security, string and regular expression validation.
"""
import pytest

from fieldcheck.core.errors import ConfigurationError, ErrorCode
from fieldcheck.validators import (
    OutcomeKind,
    PhoneNumberConfig,
    PhoneNumberValidator,
    RegExpConfig,
    RegExpValidationResult,
    RegExpValidator,
    SocialSecurityConfig,
    SocialSecurityValidator,
    StringConfig,
    StringValidator,
    validate_phone_number,
    validate_regexp,
    validate_social_security,
    validate_string,
)


class TestPhoneNumber:
    @pytest.mark.parametrize("value", ["(555) 555-1234", "555.555.1234", "+1 555 555 1234", "5555551234"])
    def test_valid(self, value):
        assert validate_phone_number(PhoneNumberConfig(), value) == []

    def test_digit_grouping_is_not_checked(self):
        assert validate_phone_number(PhoneNumberConfig(), "(1234) 567-89.01") == []

    def test_invalid_char(self):
        [result] = validate_phone_number(PhoneNumberConfig(), "555-555-123x")
        assert result.error_code == "invalidChar"

    def test_too_few_digits(self):
        [result] = validate_phone_number(PhoneNumberConfig(), "555-1234")
        assert result.error_code == "wrongLength"
        assert result.error_message == "Your telephone number must contain at least 10 digits."

    def test_min_digits(self):
        config = PhoneNumberConfig(min_digits=7)
        assert validate_phone_number(config, "555-1234") == []
        [result] = validate_phone_number(PhoneNumberConfig(min_digits=12), "5555551234")
        assert "12 digits" in result.error_message

    def test_validator(self):
        v = PhoneNumberValidator(allowed_format_chars="-")
        assert v.validate("555-555-1234").is_valid
        assert v.validate("(555) 555-1234").error_codes == ["invalidChar"]

    def test_digits_in_format_chars_rejected(self):
        with pytest.raises(ConfigurationError):
            PhoneNumberValidator(allowed_format_chars="()5")


class TestSocialSecurity:
    def codes(self, value, **options):
        return [r.error_code for r in validate_social_security(SocialSecurityConfig(**options), value)]

    @pytest.mark.parametrize("value", ["123-45-6789", "123 45 6789", "123456789"])
    def test_valid(self, value):
        assert self.codes(value) == []

    def test_invalid_char(self):
        assert self.codes("123-45-678x") == ["invalidChar"]
        assert self.codes("123.45.6789") == ["invalidChar"]

    def test_wrong_format(self):
        assert self.codes("12345678") == ["wrongFormat"]
        assert self.codes("1234-5-6789") == ["wrongFormat"]
        assert self.codes("123-456789") == ["wrongFormat"]
        assert self.codes("12345-6789") == ["wrongFormat"]

    def test_zero_start(self):
        assert self.codes("000-12-3456") == ["zeroStart"]
        assert self.codes("000123456") == ["zeroStart"]

    def test_custom_format_chars(self):
        assert self.codes("123.45.6789", allowed_format_chars=".") == []

    def test_validator(self):
        v = SocialSecurityValidator()
        assert v.validate("123-45-6789").is_valid
        assert v.validate("000-45-6789").message == (
            "Invalid Social Security number; the number cannot start with 000.")


class TestString:
    def test_bounds(self):
        config = StringConfig(min_length=2, max_length=4)
        assert validate_string(config, "abc") == []
        assert [r.error_code for r in validate_string(config, "a")] == ["tooShort"]
        assert [r.error_code for r in validate_string(config, "abcde")] == ["tooLong"]

    def test_unbounded_by_default(self):
        assert validate_string(StringConfig(), "x" * 10_000) == []

    def test_messages_carry_bounds(self):
        [too_long] = validate_string(StringConfig(max_length=3), "abcd")
        [too_short] = validate_string(StringConfig(min_length=5), "abcd")
        assert too_long.error_message.endswith("This must be less than 3 characters long.")
        assert too_short.error_message.endswith("This must be at least 5 characters long.")

    def test_custom_message_placeholders(self):
        config = StringConfig(max_length=3, too_long_error="At most {max_length} ({0}) please, not {other}")
        [result] = validate_string(config, "abcd")
        assert result.error_message == "At most 3 (3) please, not {other}"

    def test_validator(self):
        v = StringValidator(max_length=3)
        assert v.validate("abc").is_valid
        assert v.validate("abcd").error_codes == ["tooLong"]


class TestRegExp:
    def test_single_match(self):
        [result] = validate_regexp(RegExpConfig(expression=r"(\d+)-(\d+)"), "call 555-1234 now")
        assert isinstance(result, RegExpValidationResult)
        assert result.is_error is False
        assert (result.matched_string, result.matched_index, result.matched_substrings) == ("555-1234", 5, ("555", "1234"))

    def test_global_collects_every_match_in_order(self):
        results = validate_regexp(RegExpConfig(expression=r"(\w)(\d)", flags="g"), "a1 b2 c3")
        assert [(r.matched_string, r.matched_index, r.matched_substrings) for r in results] == [
            ("a1", 0, ("a", "1")),
            ("b2", 3, ("b", "2")),
            ("c3", 6, ("c", "3")),
        ]

    def test_non_participating_group(self):
        [result] = validate_regexp(RegExpConfig(expression=r"(a)|(b)"), "b")
        assert result.matched_substrings == (None, "b")

    def test_no_match(self):
        [result] = validate_regexp(RegExpConfig(expression=r"^\d+$"), "abc")
        assert (result.is_error, result.error_code) == (True, "noMatch")

    def test_no_expression(self):
        [result] = validate_regexp(RegExpConfig(), "abc")
        assert result.error_code == "noExpression"

    def test_flags(self):
        assert validate_regexp(RegExpConfig(expression="^abc$", flags="i"), "ABC") != []
        assert validate_regexp(RegExpConfig(expression="^b", flags="m"), "a\nb")[0].matched_index == 2
        assert validate_regexp(RegExpConfig(expression="a.b", flags="s"), "a\nb")[0].matched_string == "a\nb"

    def test_flags_apply_when_set_after_expression(self):
        config = RegExpConfig(expression="^abc$")
        config.flags = "i"
        assert validate_regexp(config, "ABC")[0].matched_string == "ABC"

    def test_invalid_expression(self):
        with pytest.raises(ConfigurationError) as exc:
            RegExpConfig(expression="(unclosed")
        assert exc.value.code is ErrorCode.E2003_INVALID_EXPRESSION

    def test_invalid_flags(self):
        with pytest.raises(ConfigurationError) as exc:
            RegExpConfig(flags="gq")
        assert exc.value.code is ErrorCode.E2004_INVALID_FLAGS

    @pytest.mark.parametrize("options", [
        {"flags": "x", "expression": "a#("},
        {"expression": "a#(", "flags": "x"},
    ])
    def test_expression_compiles_with_flags_given_in_any_order(self, options):
        v = RegExpValidator(**options)
        assert v.validate("a").is_valid
        assert RegExpValidator().configure(**options).validate("a").is_valid

    def test_flags_change_that_breaks_expression_is_rejected(self):
        v = RegExpValidator(flags="x", expression="a#(")
        with pytest.raises(ConfigurationError) as exc:
            v.flags = ""
        assert exc.value.code is ErrorCode.E2003_INVALID_EXPRESSION
        assert v.flags == "x"
        assert v.validate("a").is_valid

    def test_rejected_configure_keeps_previous_options(self):
        v = RegExpValidator(flags="i", expression="^abc$")
        with pytest.raises(ConfigurationError):
            v.configure(expression="(unclosed", flags="g")
        assert (v.flags, v.expression) == ("i", "^abc$")
        assert v.validate("ABC").is_valid

    def test_match_results_surface_on_valid_outcome(self):
        outcome = RegExpValidator(expression=r"\d", flags="g").validate("a1b2")
        assert outcome.kind is OutcomeKind.VALID
        assert [r.matched_string for r in outcome.results] == ["1", "2"]
        assert outcome.message == ""

    def test_no_match_outcome(self):
        outcome = RegExpValidator(expression=r"\d").validate("abc")
        assert outcome.kind is OutcomeKind.INVALID
        assert outcome.message == "The field is invalid."

    def test_result_serialization(self):
        [result] = validate_regexp(RegExpConfig(expression=r"b"), "abc")
        assert result.to_dict() == {
            "valid": True, "sub_field": "", "matched_string": "b", "matched_index": 1, "matched_substrings": []}
