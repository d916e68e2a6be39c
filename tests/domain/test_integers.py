"""Tests for the non-negative integer value types."""

from datetime import timedelta

import pytest

from commontypes.domain.errors import InvalidValue
from commontypes.domain.integers import Age, Count, Duration


class TestNonNegative:
    @pytest.mark.parametrize("cls", [Age, Count, Duration])
    def test_accepts_zero_and_positive(self, cls: type[Age]) -> None:
        assert cls(0).to_int() == 0
        assert int(cls.from_int(42)) == 42
        assert str(cls(7)) == "7"

    @pytest.mark.parametrize(
        ("cls", "field"), [(Age, "age"), (Count, "count"), (Duration, "duration")]
    )
    def test_negative_names_the_type(self, cls: type[Age], field: str) -> None:
        with pytest.raises(InvalidValue, match="a positive integer, or zero") as exc_info:
            cls(-1)
        assert exc_info.value.field == field

    @pytest.mark.parametrize("value", [True, 1.5, "3", None])
    def test_rejects_non_integers(self, value: object) -> None:
        with pytest.raises(InvalidValue, match="an integer"):
            Count(value)  # type: ignore[arg-type]

    def test_serialize_is_int(self) -> None:
        assert Age(30).serialize() == 30

    def test_value_semantics(self) -> None:
        assert Count(3) == Count(3)
        assert Count(3) != Age(3)
        assert Count(2) < Count(3)
        assert len({Count(3), Count(3)}) == 1

    def test_is_valid(self) -> None:
        assert Age.is_valid(0)
        assert Age.is_valid(120)
        assert not Age.is_valid(-1)
        assert not Age.is_valid(True)
        assert not Age.is_valid("12")
        assert not Age.is_valid(1.0)


class TestDuration:
    def test_constructors(self) -> None:
        assert Duration.from_seconds(90).to_seconds() == 90
        assert Duration.from_minutes(2).to_seconds() == 120
        assert Duration.from_hours(1).to_seconds() == 3600

    def test_from_timedelta_drops_fraction(self) -> None:
        assert Duration.from_timedelta(timedelta(minutes=1, seconds=5, milliseconds=900)) == (
            Duration(65)
        )

    def test_from_timedelta_rejects_negative(self) -> None:
        with pytest.raises(InvalidValue):
            Duration.from_timedelta(timedelta(seconds=-1))

    @pytest.mark.parametrize("method", [Duration.from_minutes, Duration.from_hours])
    def test_unit_constructors_reject_non_integers(self, method: object) -> None:
        with pytest.raises(InvalidValue):
            method(1.5)  # type: ignore[operator]

    def test_negative_minutes(self) -> None:
        with pytest.raises(InvalidValue) as exc_info:
            Duration.from_minutes(-1)
        assert exc_info.value.field == "duration"

    def test_to_timedelta(self) -> None:
        assert Duration(125).to_timedelta() == timedelta(minutes=2, seconds=5)

    def test_format(self) -> None:
        assert Duration(125).format() == "2:5"
        assert Duration(3600).format("m ") == "60m 0"
        assert Duration(0).format() == "0:0"
