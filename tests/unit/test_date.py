"""
Unit tests for date mask parsing and date validation.
"""
from datetime import date

import pytest

from fieldcheck.core.errors import ConfigurationError
from fieldcheck.validators import DateConfig, DateValidator, validate_date
from fieldcheck.validators.date import days_in_month, parse_mask, split_input


def codes(value, **options):
    return [r.error_code for r in validate_date(DateConfig(**options), value)]


class TestParseMask:
    @pytest.mark.parametrize("mask", ["MM/DD/YYYY", "mm/dd/yyyy", "DD.MM.YY", "YYYY-MM-DD", "MMDDYYYY", "M/D/YY", "MM/YYYY", "MM/DD"])
    def test_accepted_shapes(self, mask):
        assert parse_mask(mask, "/- .") is not None

    @pytest.mark.parametrize("mask", ["MMM/DD/YYYY", "MM/DD/YYY", "DD/YYYY", "MM", "MM/DD/YYYYY", "MM/DD/MM", "MM:DD:YYYY", "MM/DDD/YYYY"])
    def test_rejected_shapes(self, mask):
        assert parse_mask(mask, "/- .") is None

    def test_runs(self):
        mask = parse_mask("YYYY-MM-DD", "-")
        assert mask.runs == (("year", 4), ("-", 1), ("month", 2), ("-", 1), ("day", 2))
        assert mask.separated
        assert not parse_mask("MMDDYYYY", "").separated


class TestSplitInput:
    def test_separated_variable_width(self):
        mask = parse_mask("MM/DD/YYYY", "/")
        assert split_input("7/4/1989", mask) == {"month": "7", "day": "4", "year": "1989"}

    def test_any_allowed_separator_matches(self):
        mask = parse_mask("MM/DD/YYYY", "/- .")
        assert split_input("07-31-1989", mask) == {"month": "07", "day": "31", "year": "1989"}

    def test_fixed_width(self):
        mask = parse_mask("YYYYMMDD", "")
        assert split_input("19890731", mask) == {"year": "1989", "month": "07", "day": "31"}
        assert split_input("1989731", mask) is None

    def test_shape_mismatches(self):
        mask = parse_mask("MM/DD/YYYY", "/")
        assert split_input("07/31/89", mask) is None
        assert split_input("07/31", mask) is None
        assert split_input("007/31/1989", mask) is None
        assert split_input("07//31/1989", mask) is None


class TestStringMode:
    def test_valid_default_format(self):
        assert codes("07/31/1989") == []

    def test_wrong_month(self):
        assert codes("13/31/1989") == ["wrongMonth"]
        assert codes("00/31/1989") == ["wrongMonth"]

    def test_wrong_day(self):
        assert codes("04/31/1989") == ["wrongDay"]
        assert codes("07/00/1989") == ["wrongDay"]

    def test_leap_years(self):
        assert codes("02/29/2000") == []
        assert codes("02/29/1900") == ["wrongDay"]
        assert codes("02/29/2024") == []
        assert codes("02/29/2023") == ["wrongDay"]

    def test_two_digit_year(self):
        assert codes("02/29/24", input_format="MM/DD/YY") == []
        assert codes("02/29/23", input_format="MM/DD/YY") == ["wrongDay"]
        assert codes("02/29/2024", input_format="MM/DD/YY") == ["wrongLength"]

    def test_month_and_year_only(self):
        assert codes("12/1999", input_format="MM/YYYY") == []
        assert codes("13/1999", input_format="MM/YYYY") == ["wrongMonth"]

    def test_invalid_char(self):
        assert codes("07/31/198a") == ["invalidChar"]
        assert codes("07_31_1989") == ["invalidChar"]

    def test_wrong_length_message_names_format(self):
        [result] = validate_date(DateConfig(input_format="DD.MM.YYYY"), "31.07.89")
        assert result.error_code == "wrongLength"
        assert result.error_message == "Type the date in the format DD.MM.YYYY."

    def test_bad_mask_is_format_error_for_any_input(self):
        assert codes("07/31/1989", input_format="MM/DD/YYY") == ["format"]
        assert codes("garbage", input_format="QQ") == ["format"]

    def test_surrounding_whitespace_ignored(self):
        assert codes(" 07/31/1989 ") == []


class TestStructuredMode:
    def test_mapping(self):
        assert codes({"month": 7, "day": 31, "year": 1989}) == []
        assert codes({"month": "13", "day": "1", "year": "1989"}) == ["wrongMonth"]

    def test_date_object(self):
        assert codes(date(1989, 7, 31)) == []

    def test_custom_property_names(self):
        value = {"mon": 2, "dd": 30, "yyyy": 2000}
        assert codes(value, month_property="mon", day_property="dd", year_property="yyyy") == ["wrongDay"]

    def test_missing_parts_are_required(self):
        results = validate_date(DateConfig(), {"month": 7})
        assert [(r.sub_field, r.error_code) for r in results] == [("day", "requiredField"), ("year", "requiredField")]

    def test_non_numeric_parts(self):
        results = validate_date(DateConfig(), {"month": "July", "day": 31, "year": 1989})
        assert [(r.sub_field, r.error_code) for r in results] == [("month", "invalidChar")]

    def test_year_range(self):
        assert codes({"month": 1, "day": 1, "year": 10000}) == ["wrongYear"]
        assert codes({"month": 1, "day": 1, "year": 0}) == []

    def test_string_read_structurally_when_not_validating_as_string(self):
        results = validate_date(DateConfig(validate_as_string=False), "07/31/1989")
        assert {r.error_code for r in results} == {"requiredField"}

    def test_base_field_prefix(self):
        [result] = validate_date(DateConfig(), {"month": 13, "day": 1, "year": 1989}, "birth")
        assert result.sub_field == "birth.month"


class TestDaysInMonth:
    def test_february(self):
        assert days_in_month(2, 2000) == 29
        assert days_in_month(2, 2100) == 28
        assert days_in_month(2, 0) == 29

    def test_thirty_day_months(self):
        assert [days_in_month(m, 2001) for m in (4, 6, 9, 11)] == [30, 30, 30, 30]


class TestDateValidator:
    def test_valid(self):
        assert DateValidator().validate("07/31/1989").is_valid

    def test_invalid_pads_day_and_year(self):
        outcome = DateValidator().validate("13/31/1989")
        assert outcome.results[0].error_code == "wrongMonth"
        assert [(r.sub_field, r.is_error) for r in outcome.results[1:]] == [("day", False), ("year", False)]

    def test_invalid_char_pads_every_subfield(self):
        outcome = DateValidator().validate("07/31/198a")
        assert [r.sub_field for r in outcome.results] == ["", "day", "month", "year"]

    def test_input_format_change_takes_effect(self):
        v = DateValidator()
        v.input_format = "DD/MM/YYYY"
        assert v.validate("31/07/1989").is_valid

    def test_digits_in_format_chars_rejected(self):
        with pytest.raises(ConfigurationError):
            DateValidator(allowed_format_chars="/1")
