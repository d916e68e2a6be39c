"""Tests for TemporalService."""

import pytest

from commontypes.domain.clock import FixedClock
from commontypes.domain.date import Date
from commontypes.domain.instant import Instant
from commontypes.domain.zone import offset_zone
from commontypes.services.temporal import TemporalService, describe_date, describe_instant


@pytest.fixture
def service(monday_clock: FixedClock) -> TemporalService:
    return TemporalService(monday_clock)


class TestDescribe:
    def test_describe_date(self) -> None:
        data = describe_date(Date.from_values(2020, 1, 12))
        assert data == {
            "value": "2020-01-12",
            "year": 2020,
            "month": 1,
            "day": 12,
            "day_of_week": 7,
            "weekday": "Sunday",
            "day_of_year": 12,
            "week": 2,
            "timestamp": 1578787200,
        }

    def test_display_format(self) -> None:
        data = describe_date(Date.from_values(2020, 1, 12), "%d/%m/%Y")
        assert data["formatted"] == "12/01/2020"

    def test_describe_instant(self) -> None:
        data = describe_instant(Instant.from_values(2020, 1, 12, 11, 22, 33, 44))
        assert data["value"] == "2020-01-12T11:22:33+00:00"
        assert data["date"] == "2020-01-12"
        assert (data["hour"], data["minute"], data["second"]) == (11, 22, 33)
        assert data["microsecond"] == 44


class TestParse:
    def test_parse_date(self, service: TemporalService) -> None:
        result = service.parse("date", "2020-01-12")
        assert result.ok
        assert result.op == "parse_date"
        assert result.data["week"] == 2

    def test_parse_date_with_pattern(self, service: TemporalService) -> None:
        result = service.parse("date", "12/01/2020", pattern="%d/%m/%Y")
        assert result.data["value"] == "2020-01-12"

    def test_parse_instant_normalizes(self, service: TemporalService) -> None:
        result = service.parse("instant", "2020-01-12T11:22:33+02:00")
        assert result.ok
        assert result.op == "parse_instant"
        assert result.data["value"] == "2020-01-12T09:22:33+00:00"

    def test_parse_instant_pattern_and_offset(self, service: TemporalService) -> None:
        result = service.parse(
            "instant", "2020-01-02 11:22", pattern="%Y-%m-%d %H:%M", offset="+01:00"
        )
        assert result.data["value"] == "2020-01-02T10:22:00+00:00"

    def test_invalid_value(self, service: TemporalService) -> None:
        result = service.parse("date", "2021-02-29")
        assert not result.ok
        assert result.op == "parse_date"
        assert result.error is not None
        assert result.error.code == "INVALID_VALUE"
        assert result.error.detail == {
            "field": "day",
            "value": "29",
            "expected": "between [1-28] for 2021-02",
        }

    def test_invalid_offset(self, service: TemporalService) -> None:
        result = service.parse("instant", "2020-01-02", pattern="%Y-%m-%d", offset="+30:00")
        assert not result.ok
        assert result.error is not None
        assert result.error.detail["field"] == "offset"


class TestRelativeDay:
    @pytest.mark.parametrize(
        ("which", "expected"),
        [("today", "2020-01-06"), ("yesterday", "2020-01-05"), ("tomorrow", "2020-01-07")],
    )
    def test_date(self, service: TemporalService, which: str, expected: str) -> None:
        result = service.relative_day("date", which)  # type: ignore[arg-type]
        assert result.op == f"date_{which}"
        assert result.data["value"] == expected

    def test_instant(self, service: TemporalService) -> None:
        result = service.relative_day("instant", "today")
        assert result.data["value"] == "2020-01-06T00:00:00+00:00"

    def test_offset_argument(self) -> None:
        late = FixedClock(Instant.from_string("2020-01-06T23:30:00+00:00").to_datetime())
        service = TemporalService(late)
        assert service.relative_day("date", "today", offset="+02:00").data["value"] == "2020-01-07"

    def test_service_zone(self) -> None:
        late = FixedClock(Instant.from_string("2020-01-06T23:30:00+00:00").to_datetime())
        service = TemporalService(late, offset_zone("+02:00"))
        assert service.relative_day("date", "today").data["value"] == "2020-01-07"

    def test_bad_offset(self, service: TemporalService) -> None:
        result = service.relative_day("date", "today", offset="Europe/Paris")
        assert not result.ok


class TestNowAndWeekdays:
    def test_now(self, service: TemporalService) -> None:
        result = service.now()
        assert result.op == "instant_now"
        assert result.data["value"] == "2020-01-06T10:00:00+00:00"

    def test_last(self, service: TemporalService) -> None:
        result = service.weekday("date", "monday", mode="last")
        assert result.op == "date_last"
        assert result.data["value"] == "2019-12-30"

    def test_this_week(self, service: TemporalService) -> None:
        result = service.weekday("instant", "Fri", mode="this_week")
        assert result.op == "instant_this_week"
        assert result.data["value"] == "2020-01-10T00:00:00+00:00"

    def test_unknown_weekday(self, service: TemporalService) -> None:
        result = service.weekday("date", "funday", mode="last")
        assert not result.ok
        assert result.error is not None
        assert result.error.detail["field"] == "weekday"


class TestShiftAndEndOfDay:
    def test_shift_date(self, service: TemporalService) -> None:
        result = service.shift("date", "2020-01-31", "+1 month")
        assert result.op == "shift_date"
        assert result.data["value"] == "2020-02-29"
        assert result.data["original"] == "2020-01-31"
        assert result.data["modifier"] == "+1 month"
        assert result.warnings == ["day 31 clamped to 29, the last day of the month"]

    def test_shift_without_clamp_has_no_warning(self, service: TemporalService) -> None:
        assert service.shift("date", "2020-01-15", "+1 month").warnings == []
        assert service.shift("date", "2020-01-31", "+1 month +1 day").warnings == []

    def test_shift_instant(self, service: TemporalService) -> None:
        result = service.shift("instant", "2020-01-12T23:00:00+00:00", "+90 minutes")
        assert result.data["value"] == "2020-01-13T00:30:00+00:00"

    def test_shift_bad_modifier(self, service: TemporalService) -> None:
        result = service.shift("date", "2020-01-31", "whenever")
        assert not result.ok
        assert result.error is not None
        assert result.error.detail["field"] == "modifier"

    def test_end_of_day(self, service: TemporalService) -> None:
        result = service.end_of_day("2020-11-12T11:22:33+00:00")
        assert result.op == "end_of_day"
        assert result.data["value"] == "2020-11-12T23:59:59+00:00"
        assert result.data["precise"] == "2020-11-12 23:59:59.999999"

    def test_end_of_day_small_year(self, service: TemporalService) -> None:
        result = service.end_of_day("0007-03-09T11:22:33+00:00")
        assert result.data["precise"] == "0007-03-09 23:59:59.999999"

    def test_end_of_day_invalid(self, service: TemporalService) -> None:
        assert not service.end_of_day("2020-11-12").ok


class TestCheck:
    @pytest.mark.parametrize(
        ("kind", "value", "valid"),
        [
            ("date", "2020-02-29", True),
            ("date", "2021-02-29", False),
            ("instant", "2020-01-12T11:22:33+02:00", True),
            ("instant", "2020-01-12", False),
            ("age", "42", True),
            ("age", "-1", False),
            ("count", "abc", False),
            ("duration", "0", True),
            ("count", " 5 ", False),
            ("count", "1_000", False),
            ("count", "+5", False),
            ("count", "\u0665", False),
        ],
    )
    def test_kinds(self, service: TemporalService, kind: str, value: str, valid: bool) -> None:
        result = service.check(kind, value)
        assert result.ok
        assert result.op == "check"
        assert result.data == {"kind": kind, "value": value, "valid": valid}

    def test_unknown_kind(self, service: TemporalService) -> None:
        result = service.check("money", "12")
        assert not result.ok
        assert result.error is not None
        assert result.error.detail["field"] == "kind"


class TestClockMeta:
    def test_relative_day_reports_clock_and_zone(self, service: TemporalService) -> None:
        result = service.relative_day("date", "today", offset="+02:00")
        assert result.meta == {
            "clock": "fixed",
            "now": "2020-01-06T10:00:00+00:00",
            "zone": "+02:00",
        }

    def test_now_uses_service_zone(self, monday_clock: FixedClock) -> None:
        service = TemporalService(monday_clock, offset_zone("-05:00"))
        meta = service.now().meta
        assert meta is not None
        assert meta["zone"] == "-05:00"

    def test_weekday_has_meta(self, service: TemporalService) -> None:
        meta = service.weekday("date", "friday", mode="last").meta
        assert meta is not None
        assert meta["clock"] == "fixed"

    def test_parse_has_no_meta(self, service: TemporalService) -> None:
        assert service.parse("date", "2020-01-12").meta is None
