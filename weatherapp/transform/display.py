"""Unit-aware display formatting for temperatures, wind and labels."""

from datetime import datetime

from weatherapp.models.common import UnitSystem
from weatherapp.transform.converter import convert
from weatherapp.transform.grouper import InvalidTimestampError

ICON_BASE_URL = "https://openweathermap.org/img/wn"


def format_temperature(
    value: float, value_unit: UnitSystem, display_unit: UnitSystem
) -> str:
    """Format a temperature for display in ``display_unit``.

    The value is converted only when it was fetched in a different unit
    system than the one being displayed.
    """
    if value_unit != display_unit:
        value = convert(value, value_unit, display_unit)
    return f"{round_temperature(value):g}{display_unit.temperature_suffix}"


def round_temperature(value: float) -> float:
    """Round to one decimal; a value that rounds to zero is never -0."""
    return round(value, 1) + 0.0


def format_wind(speed: float, unit: UnitSystem) -> str:
    return f"{speed:g} {unit.wind_suffix}"


def format_humidity(humidity: int) -> str:
    return f"{humidity}%"


def format_day_label(timestamp: str) -> str:
    """Short calendar label for a sample timestamp, e.g. 'Mon 21 Oct'."""
    try:
        dt = datetime.strptime(timestamp, "%Y-%m-%d %H:%M:%S")
    except ValueError as e:
        raise InvalidTimestampError(f"Unparseable timestamp {timestamp!r}") from e
    return dt.strftime("%a %d %b")


def icon_url(icon: str, base_url: str = ICON_BASE_URL) -> str:
    return f"{base_url.rstrip('/')}/{icon}@2x.png"
