"""Common types shared across models."""

from enum import StrEnum


class UnitSystem(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"

    @property
    def temperature_suffix(self) -> str:
        return "°C" if self is UnitSystem.METRIC else "°F"

    @property
    def wind_suffix(self) -> str:
        return "m/s" if self is UnitSystem.METRIC else "mph"
