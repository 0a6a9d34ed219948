"""Parse the consumed subset of OpenWeatherMap responses into models."""

import logging

from weatherapp.ingest.owm_client import ProviderError
from weatherapp.models.common import UnitSystem
from weatherapp.models.forecast import CurrentConditions, ForecastSample

logger = logging.getLogger(__name__)


def parse_current(raw: dict, unit: UnitSystem) -> CurrentConditions:
    """Extract current conditions from a /weather response."""
    try:
        weather = raw["weather"][0]
        return CurrentConditions(
            location_name=raw["name"],
            temperature=float(raw["main"]["temp"]),
            humidity=int(raw["main"]["humidity"]),
            wind_speed=float(raw["wind"]["speed"]),
            condition=weather["main"],
            description=weather["description"],
            icon=weather["icon"],
            unit=unit,
        )
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise ProviderError(f"Malformed current-weather response: {e!r}") from e


def parse_forecast(raw: dict, unit: UnitSystem) -> list[ForecastSample]:
    """Extract the chronological sample list from a /forecast response."""
    try:
        entries = raw["list"]
        samples = [_parse_sample(entry, unit) for entry in entries]
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise ProviderError(f"Malformed forecast response: {e!r}") from e

    logger.debug("Parsed %d forecast samples", len(samples))
    return samples


def _parse_sample(entry: dict, unit: UnitSystem) -> ForecastSample:
    weather = entry["weather"][0]
    return ForecastSample(
        timestamp=entry["dt_txt"],
        temperature=float(entry["main"]["temp"]),
        condition=weather["main"],
        description=weather["description"],
        icon=weather["icon"],
        unit=unit,
    )
