"""Tests for unit-aware display formatting."""

import pytest

from weatherapp.models.common import UnitSystem
from weatherapp.transform.display import (
    format_day_label,
    format_humidity,
    format_temperature,
    format_wind,
    icon_url,
)
from weatherapp.transform.grouper import InvalidTimestampError


class TestFormatTemperature:
    def test_metric_suffix(self):
        assert format_temperature(27.4, UnitSystem.METRIC, UnitSystem.METRIC) == "27.4°C"

    def test_imperial_suffix(self):
        assert format_temperature(81.3, UnitSystem.IMPERIAL, UnitSystem.IMPERIAL) == "81.3°F"

    def test_imperial_value_not_reconverted(self):
        # 77°F fetched in imperial stays 77°F; never run through C->F again
        assert format_temperature(77.0, UnitSystem.IMPERIAL, UnitSystem.IMPERIAL) == "77°F"

    def test_converts_when_units_differ(self):
        assert format_temperature(25.0, UnitSystem.METRIC, UnitSystem.IMPERIAL) == "77°F"
        assert format_temperature(77.0, UnitSystem.IMPERIAL, UnitSystem.METRIC) == "25°C"

    def test_rounds_to_one_decimal(self):
        assert format_temperature(21.0, UnitSystem.METRIC, UnitSystem.IMPERIAL) == "69.8°F"
        assert format_temperature(70.0, UnitSystem.IMPERIAL, UnitSystem.METRIC) == "21.1°C"

    def test_no_negative_zero(self):
        assert format_temperature(-0.04, UnitSystem.METRIC, UnitSystem.METRIC) == "0°C"
        assert format_temperature(31.95, UnitSystem.IMPERIAL, UnitSystem.METRIC) == "0°C"

    def test_small_negative_kept(self):
        assert format_temperature(-0.06, UnitSystem.METRIC, UnitSystem.METRIC) == "-0.1°C"


class TestOtherFormatters:
    def test_wind(self):
        assert format_wind(3.6, UnitSystem.METRIC) == "3.6 m/s"
        assert format_wind(8.05, UnitSystem.IMPERIAL) == "8.05 mph"

    def test_humidity(self):
        assert format_humidity(61) == "61%"

    def test_day_label(self):
        assert format_day_label("2026-10-19 12:00:00") == "Mon 19 Oct"

    def test_day_label_bad_timestamp(self):
        with pytest.raises(InvalidTimestampError):
            format_day_label("19/10/2026")

    def test_icon_url(self):
        assert icon_url("10d") == "https://openweathermap.org/img/wn/10d@2x.png"

    def test_icon_url_custom_base(self):
        assert icon_url("01n", "https://cdn.example.com/icons/") == (
            "https://cdn.example.com/icons/01n@2x.png"
        )
