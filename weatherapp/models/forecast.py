"""OpenWeatherMap current-conditions and forecast models."""

from dataclasses import dataclass
from typing import TypeAlias

from weatherapp.models.common import UnitSystem


@dataclass(frozen=True)
class ForecastSample:
    timestamp: str  # "YYYY-MM-DD HH:MM:SS"
    temperature: float
    condition: str
    description: str
    icon: str
    unit: UnitSystem = UnitSystem.METRIC


# One sample picked to stand for a calendar day
DailyForecast: TypeAlias = ForecastSample


@dataclass(frozen=True)
class CurrentConditions:
    location_name: str
    temperature: float
    humidity: int
    wind_speed: float
    condition: str
    description: str
    icon: str
    unit: UnitSystem = UnitSystem.METRIC


@dataclass(frozen=True)
class WeatherReport:
    current: CurrentConditions
    daily: list[DailyForecast]
    unit: UnitSystem
