"""Tests for provider response parsing."""

import pytest

from weatherapp.ingest.owm_client import ProviderError
from weatherapp.ingest.parsers import parse_current, parse_forecast
from weatherapp.models.common import UnitSystem


class TestParseCurrent:
    def test_fields(self, current_raw: dict):
        cur = parse_current(current_raw, UnitSystem.METRIC)
        assert cur.location_name == "Pune"
        assert cur.temperature == 27.4
        assert cur.humidity == 61
        assert cur.wind_speed == 3.6
        assert cur.condition == "Clouds"
        assert cur.description == "scattered clouds"
        assert cur.icon == "03d"
        assert cur.unit == UnitSystem.METRIC

    def test_records_fetch_unit(self, current_raw: dict):
        cur = parse_current(current_raw, UnitSystem.IMPERIAL)
        assert cur.unit == UnitSystem.IMPERIAL
        assert cur.temperature == 27.4

    def test_missing_field(self, current_raw: dict):
        del current_raw["main"]
        with pytest.raises(ProviderError, match="current-weather"):
            parse_current(current_raw, UnitSystem.METRIC)

    def test_empty_weather_array(self, current_raw: dict):
        current_raw["weather"] = []
        with pytest.raises(ProviderError):
            parse_current(current_raw, UnitSystem.METRIC)


class TestParseForecast:
    def test_samples(self, forecast_raw: dict):
        samples = parse_forecast(forecast_raw, UnitSystem.METRIC)
        assert len(samples) == 40
        first = samples[0]
        assert first.timestamp == "2026-10-19 00:00:00"
        assert first.temperature == 20.0
        assert first.condition == "Clouds"
        assert first.icon == "04n"

    def test_chronological_order_kept(self, forecast_raw: dict):
        samples = parse_forecast(forecast_raw, UnitSystem.METRIC)
        timestamps = [s.timestamp for s in samples]
        assert timestamps == sorted(timestamps)

    def test_empty_list(self):
        assert parse_forecast({"list": []}, UnitSystem.METRIC) == []

    def test_missing_list(self):
        with pytest.raises(ProviderError, match="forecast"):
            parse_forecast({"cod": "200"}, UnitSystem.METRIC)

    def test_bad_temperature(self, forecast_raw: dict):
        forecast_raw["list"][3]["main"]["temp"] = "warm"
        with pytest.raises(ProviderError):
            parse_forecast(forecast_raw, UnitSystem.METRIC)
