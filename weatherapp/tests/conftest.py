"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weatherapp.config.schema import AppConfig, ProviderConfig
from weatherapp.models.common import UnitSystem
from weatherapp.models.forecast import ForecastSample

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def _make_sample(
    timestamp: str,
    temperature: float = 20.0,
    condition: str = "Clouds",
    unit: UnitSystem = UnitSystem.METRIC,
) -> ForecastSample:
    return ForecastSample(
        timestamp=timestamp,
        temperature=temperature,
        condition=condition,
        description=condition.lower(),
        icon="04d",
        unit=unit,
    )


@pytest.fixture(autouse=True)
def _no_env_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's real key out of the tests."""
    monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
    monkeypatch.delenv("WEATHERAPP_UNITS", raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def current_raw() -> dict:
    with open(FIXTURE_DIR / "owm_current_pune.json") as f:
        return json.load(f)


@pytest.fixture
def forecast_raw() -> dict:
    with open(FIXTURE_DIR / "owm_forecast_pune.json") as f:
        return json.load(f)


@pytest.fixture
def app_config() -> AppConfig:
    """Config pointed at a fake provider host with a dummy key."""
    return AppConfig(
        provider=ProviderConfig(
            api_key="test-key-123",
            base_url="https://test-owm.example.com",
        )
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {"country_code": "GB"},
        "display": {"default_unit": "imperial"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def make_sample():
    """Factory for ForecastSample objects with sensible defaults."""
    return _make_sample
