"""
Unit tests for number and currency validation.
"""
from decimal import Decimal

import pytest

from fieldcheck.core.errors import ConfigurationError, ErrorCode
from fieldcheck.validators import (
    AlignSymbol,
    CurrencyConfig,
    CurrencyValidator,
    NumberConfig,
    NumberDomain,
    NumberValidator,
    validate_currency,
    validate_number,
)
from fieldcheck.validators.numeric import as_text, char_at, to_float


def number_codes(value, **options):
    return [r.error_code for r in validate_number(NumberConfig(**options), value)]


def currency_codes(value, **options):
    return [r.error_code for r in validate_currency(CurrencyConfig(**options), value)]


class TestNumber:
    @pytest.mark.parametrize("value", ["0", "42", "-42", "3.14", ".5", "5.", "1,234", "1,234,567.89", 17, -2.5])
    def test_valid(self, value):
        assert number_codes(value) == []

    def test_min_value(self):
        assert number_codes("28", min_value=29) == ["lowerThanMin"]
        assert number_codes("29", min_value=29) == []
        assert number_codes("30", min_value=29) == []

    def test_max_value(self):
        assert number_codes("1,001", max_value=1000) == ["exceedsMax"]
        assert number_codes("-1,001", min_value=-1000) == ["lowerThanMin"]

    def test_nan_bounds_are_unset(self):
        assert number_codes("5", min_value=float("nan"), max_value=float("nan")) == []

    def test_negative_notation(self):
        assert number_codes("-") == ["invalidChar"]
        assert number_codes("-.") == ["invalidChar"]
        assert number_codes("-5", allow_negative=False) == ["negative"]
        assert number_codes("5-") == ["invalidChar"]
        assert number_codes("--5") == ["invalidChar"]

    def test_invalid_characters(self):
        assert number_codes("12a") == ["invalidChar"]
        assert number_codes("1e5") == ["invalidChar"]
        assert number_codes(".") == ["invalidChar"]
        assert number_codes(",123") == ["invalidChar"]

    def test_decimal_point_count(self):
        assert number_codes("1.2.3") == ["decimalPointCount"]

    def test_digits_after_decimal(self):
        assert number_codes("1.2,5") == ["invalidChar"]

    def test_precision(self):
        assert number_codes("1.234", precision=2) == ["precision"]
        assert number_codes("1.23", precision=2) == []
        assert number_codes("1.23456789") == []

    def test_integer_domain(self):
        assert number_codes("5.1", domain=NumberDomain.INT) == ["integer"]
        assert number_codes("5.0", domain="int") == []

    def test_separation(self):
        assert number_codes("1,23") == ["separation"]
        assert number_codes("1,2345") == ["separation"]
        assert number_codes("1,,000") == ["separation"]
        assert number_codes("1,000,00") == ["separation"]

    def test_custom_separators(self):
        assert number_codes("1.234,5", decimal_separator=",", thousands_separator=".") == []
        assert number_codes("1.234,5", decimal_separator=",", thousands_separator=".", max_value=1000) == ["exceedsMax"]

    @pytest.mark.parametrize("options", [
        {"decimal_separator": ",", "thousands_separator": ","},
        {"decimal_separator": "1"},
        {"thousands_separator": "-"},
        {"decimal_separator": ".."},
    ])
    def test_invalid_format_chars(self, options):
        assert number_codes("5", **options) == ["invalidFormatChar"]

    def test_unknown_domain_is_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc:
            NumberConfig(domain="complex")
        assert exc.value.code is ErrorCode.E2002_INVALID_DOMAIN


class TestCurrency:
    @pytest.mark.parametrize("value", ["$5", "5", "$1,234.56", "-$5.00", "($5.00)", "(5)", "0.99", "$.99"])
    def test_valid(self, value):
        assert currency_codes(value) == []

    def test_default_precision_is_two(self):
        assert currency_codes("$1.234") == ["precision"]
        assert currency_codes("$1.234", precision=-1) == []

    def test_symbol_alignment(self):
        assert currency_codes("5$") == ["currencySymbol"]
        assert currency_codes("5$", align_symbol=AlignSymbol.RIGHT) == []
        assert currency_codes("$5", align_symbol="right") == ["currencySymbol"]
        assert currency_codes("$5", align_symbol=AlignSymbol.ANY) == []
        assert currency_codes("5$", align_symbol=AlignSymbol.ANY) == []
        assert currency_codes("5$5", align_symbol=AlignSymbol.ANY) == ["currencySymbol"]

    def test_repeated_symbol(self):
        assert currency_codes("$$5") == ["currencySymbol"]

    def test_multi_character_symbol(self):
        assert currency_codes("5 EUR", currency_symbol=" EUR", align_symbol=AlignSymbol.RIGHT) == []

    def test_negative_notation(self):
        assert currency_codes("(5") == ["invalidChar"]
        assert currency_codes("()") == ["invalidChar"]
        assert currency_codes("-") == ["invalidChar"]
        assert currency_codes("$-5") == ["invalidChar"]
        assert currency_codes("($5)", allow_negative=False) == ["negative"]

    def test_bounds(self):
        assert currency_codes("$10.00", max_value=9.99) == ["exceedsMax"]
        assert currency_codes("($10.00)", min_value=-5) == ["lowerThanMin"]

    def test_exceeds_max_message(self):
        [result] = validate_currency(CurrencyConfig(max_value=1), "$2")
        assert result.error_message == "The amount entered is too large."

    def test_invalid_format_chars(self):
        assert currency_codes("$5", currency_symbol=".") == ["invalidFormatChar"]
        assert currency_codes("$5", currency_symbol="(") == ["invalidFormatChar"]
        assert currency_codes("$5", currency_symbol="") == ["invalidFormatChar"]

    def test_invalid_characters(self):
        assert currency_codes("$5a") == ["invalidChar"]
        assert currency_codes("$") == ["invalidChar"]


class TestHelpers:
    def test_char_at(self):
        assert char_at("abc", 0) == "a"
        assert char_at("abc", -1) == "c"
        assert char_at("abc", 3) == ""
        assert char_at("", -1) == ""

    def test_to_float(self):
        config = NumberConfig(decimal_separator=",", thousands_separator=".")
        assert to_float(config, "1.234,5", negative=True) == -1234.5

    @pytest.mark.parametrize("value, text", [
        (0.00001, "0.00001"), (1e16, "10000000000000000"), (-2.5, "-2.5"),
        (Decimal("1E+3"), "1000"), (7, "7"), (True, "True"), ("1e5", "1e5"),
    ])
    def test_as_text(self, value, text):
        assert as_text(NumberConfig(), value) == text

    def test_as_text_uses_decimal_separator(self):
        assert as_text(NumberConfig(decimal_separator=",", thousands_separator="."), 1.5) == "1,5"


class TestNumericValidators:
    def test_number_validator(self):
        v = NumberValidator(min_value=29)
        assert v.validate("28").error_codes == ["lowerThanMin"]
        assert v.validate(29).is_valid

    def test_currency_validator(self):
        v = CurrencyValidator(currency_symbol="€", align_symbol="any")
        assert v.validate("12.50€").is_valid
        assert v.validate("€12.50").is_valid
        assert v.validate("12€50").error_codes == ["currencySymbol"]

    def test_numbers_too_small_or_large_for_plain_str(self):
        v = NumberValidator()
        assert v.validate(0.00001).is_valid
        assert v.validate(1e16).is_valid
        assert v.validate(Decimal("2.5E-7")).is_valid
        assert NumberValidator(max_value=1e15).validate(1e16).error_codes == ["exceedsMax"]
        assert NumberValidator(precision=4).validate(0.00001).error_codes == ["precision"]

    def test_currency_renders_floats_positionally(self):
        assert CurrencyValidator().validate(1e-05).error_codes == ["precision"]
        assert CurrencyValidator().validate(1e16).is_valid
        assert CurrencyValidator(decimal_separator=",", thousands_separator=".").validate(12.5).is_valid
