"""Tests for the shared value-object contract and pydantic integration."""

import json
from datetime import UTC, datetime

import pytest
from pydantic import BaseModel, ValidationError

from commontypes.domain.date import Date
from commontypes.domain.errors import InvalidValue
from commontypes.domain.instant import Instant
from commontypes.domain.integers import Age, Duration


class Visit(BaseModel):
    day: Date
    arrived: Instant
    age: Age
    stay: Duration | None = None


class TestIsValid:
    @pytest.mark.parametrize(
        ("cls", "value", "expected"),
        [
            (Date, "2020-02-29", True),
            (Date, "2021-02-29", False),
            (Date, "2020-1-1", False),
            (Date, "2020-01-12\n", False),
            (Date, 20200229, False),
            (Date, None, False),
            (Instant, "2020-01-12T11:22:33+02:00", True),
            (Instant, "2020-01-12T11:22:33", False),
            (Instant, "2020-01-12T11:22:33+00:00\n", False),
            (Instant, True, False),
        ],
    )
    def test_never_raises(self, cls: type[Date], value: object, expected: bool) -> None:
        assert cls.is_valid(value) is expected


class TestInvalidValue:
    def test_is_value_error(self) -> None:
        assert issubclass(InvalidValue, ValueError)

    def test_message_and_detail(self) -> None:
        exc = InvalidValue("hours", 24, "between [0-23]")
        assert str(exc) == 'Invalid "hours" value (24), it must be between [0-23]'
        assert exc.to_detail() == {"field": "hours", "value": "24", "expected": "between [0-23]"}


class TestPydanticFields:
    def test_validates_raw_scalars(self) -> None:
        visit = Visit(day="2020-01-12", arrived="2020-01-12T11:22:33+02:00", age=30)
        assert visit.day == Date.from_values(2020, 1, 12)
        assert str(visit.arrived) == "2020-01-12T09:22:33+00:00"
        assert visit.age == Age(30)
        assert visit.stay is None

    def test_accepts_instances(self) -> None:
        day = Date.from_values(2020, 1, 12)
        visit = Visit(day=day, arrived=Instant.from_values(2020, 1, 12), age=Age(1))
        assert visit.day is day

    def test_accepts_datetime(self) -> None:
        visit = Visit(day="2020-01-12", arrived=datetime(2020, 1, 12, 8, tzinfo=UTC), age=0)
        assert visit.arrived.hour == 8

    def test_json_dump_uses_canonical_forms(self) -> None:
        visit = Visit(
            day="2020-01-12",
            arrived="2020-01-12T11:22:33+02:00",
            age=30,
            stay=90,
        )
        data = json.loads(visit.model_dump_json())
        assert data == {
            "day": "2020-01-12",
            "arrived": "2020-01-12T09:22:33+00:00",
            "age": 30,
            "stay": 90,
        }
        assert visit.model_dump(mode="json")["day"] == "2020-01-12"

    def test_python_dump_uses_canonical_forms(self) -> None:
        visit = Visit(day="2020-01-12", arrived="2020-01-12T11:22:33+02:00", age=30, stay=90)
        assert visit.model_dump() == {
            "day": "2020-01-12",
            "arrived": "2020-01-12T09:22:33+00:00",
            "age": 30,
            "stay": 90,
        }

    def test_python_dump_round_trips(self) -> None:
        visit = Visit(day="2020-01-12", arrived="2020-01-12T00:00:00+00:00", age=30)
        assert Visit.model_validate(visit.model_dump()) == visit

    def test_round_trip_through_json(self) -> None:
        visit = Visit(day="2020-01-12", arrived="2020-01-12T11:22:33+02:00", age=30)
        assert Visit.model_validate_json(visit.model_dump_json()) == visit

    @pytest.mark.parametrize(
        "overrides",
        [{"day": "2021-02-29"}, {"arrived": "yesterday"}, {"age": -1}, {"age": "30"}],
    )
    def test_invalid_raises_validation_error(self, overrides: dict[str, object]) -> None:
        fields: dict[str, object] = {
            "day": "2020-01-12",
            "arrived": "2020-01-12T00:00:00+00:00",
            "age": 30,
        }
        fields.update(overrides)
        with pytest.raises(ValidationError):
            Visit(**fields)
