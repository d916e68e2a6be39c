"""Tests for the pydantic config section models."""

import pytest
from pydantic import ValidationError

from commontypes.config.models import ClockConfig, OutputConfig
from commontypes.domain.instant import Instant


class TestClockConfig:
    def test_defaults(self) -> None:
        cfg = ClockConfig()
        assert cfg.fixed_now is None
        assert cfg.offset == "+00:00"

    def test_fixed_now_is_an_instant(self) -> None:
        cfg = ClockConfig(fixed_now="2020-01-06T12:00:00+02:00")
        assert isinstance(cfg.fixed_now, Instant)
        assert str(cfg.fixed_now) == "2020-01-06T10:00:00+00:00"

    @pytest.mark.parametrize("offset", ["+24:00", "2:00", "CET"])
    def test_rejects_bad_offset(self, offset: str) -> None:
        with pytest.raises(ValidationError):
            ClockConfig(offset=offset)

    def test_rejects_bad_instant(self) -> None:
        with pytest.raises(ValidationError):
            ClockConfig(fixed_now="2020-01-06")

    def test_frozen(self) -> None:
        cfg = ClockConfig()
        with pytest.raises(ValidationError):
            cfg.offset = "+01:00"  # type: ignore[misc]


class TestOutputConfig:
    def test_defaults(self) -> None:
        cfg = OutputConfig()
        assert cfg.date_format is None
        assert cfg.instant_format is None

    def test_sparse_section(self) -> None:
        cfg = OutputConfig.model_validate({"instant_format": "%H:%M"})
        assert cfg.instant_format == "%H:%M"
        assert cfg.date_format is None


class TestClockConfigDump:
    def test_json_dump(self) -> None:
        cfg = ClockConfig.model_validate({"fixed_now": "2020-01-06T10:00:00+00:00"})
        assert cfg.model_dump(mode="json") == {
            "fixed_now": "2020-01-06T10:00:00+00:00",
            "offset": "+00:00",
        }
