"""
Exception hierarchy tests.
"""
import pytest

from shukujitsu.exceptions import (
    ConfigError,
    InvalidDateError,
    InvalidRangeError,
    ShukujitsuError,
)


class TestExceptionCodes:
    @pytest.mark.parametrize("cls,code", [
        (ShukujitsuError, "SJ_INTERNAL_ERROR"),
        (InvalidDateError, "SJ_INVALID_DATE"),
        (InvalidRangeError, "SJ_INVALID_RANGE"),
        (ConfigError, "SJ_CONFIG_ERROR"),
    ])
    def test_default_codes(self, cls, code):
        err = cls(message="boom")
        assert err.code == code
        assert isinstance(err, ShukujitsuError)
        assert isinstance(err, Exception)

    def test_str_includes_code_and_value(self):
        err = InvalidDateError(message="Not a date", value="2024-99-99")
        assert str(err) == "[SJ_INVALID_DATE] Not a date (value: '2024-99-99')"

    def test_str_without_value(self):
        assert str(ConfigError(message="bad")) == "[SJ_CONFIG_ERROR] bad"

    def test_to_dict(self):
        err = InvalidRangeError(message="too long", details={"max_range_days": 10})
        assert err.to_dict() == {
            "code": "SJ_INVALID_RANGE",
            "message": "too long",
            "details": {"max_range_days": 10},
        }

    def test_raise_and_catch_as_base(self):
        with pytest.raises(ShukujitsuError) as exc_info:
            raise InvalidRangeError(message="nope")
        assert exc_info.value.message == "nope"
