"""Plain-text and JSON views of a lookup's outcome."""

from weatherapp.models.common import UnitSystem
from weatherapp.models.forecast import WeatherReport
from weatherapp.models.view import Phase, ViewState
from weatherapp.transform.classifier import classify
from weatherapp.transform.converter import convert
from weatherapp.transform.display import (
    format_day_label,
    format_humidity,
    format_temperature,
    format_wind,
    icon_url,
)
from weatherapp.transform.grouper import date_key


def format_report_text(state: ViewState) -> str:
    """Plain text summary for the terminal."""
    if state.phase == Phase.ERROR:
        return f"Error: {state.error}"
    if state.report is None:
        return "No weather loaded."

    report = state.report
    cur = report.current
    unit = state.unit
    lines = [
        f"=== {cur.location_name} ===",
        f"Temperature: {format_temperature(cur.temperature, cur.unit, unit)}",
        f"Weather: {cur.description}",
        f"Humidity: {format_humidity(cur.humidity)}",
        f"Wind Speed: {format_wind(cur.wind_speed, cur.unit)}",
        "",
        "5-Day Forecast",
    ]
    for day in report.daily:
        lines.append(
            f"  {format_day_label(day.timestamp)}: "
            f"{format_temperature(day.temperature, day.unit, unit)}  {day.description}"
        )
    return "\n".join(lines)


def report_to_dict(
    report: WeatherReport, display_unit: UnitSystem, icon_base_url: str
) -> dict:
    """JSON payload for the API, temperatures expressed in ``display_unit``."""
    cur = report.current
    return {
        "units": display_unit.value,
        "fetched_units": report.unit.value,
        "backdrop": classify(cur.condition).value,
        "current": {
            "name": cur.location_name,
            "temperature": convert(cur.temperature, cur.unit, display_unit),
            "temperature_display": format_temperature(cur.temperature, cur.unit, display_unit),
            "humidity": cur.humidity,
            "wind_speed": cur.wind_speed,
            "wind_display": format_wind(cur.wind_speed, cur.unit),
            "condition": cur.condition,
            "description": cur.description,
            "icon_url": icon_url(cur.icon, icon_base_url),
        },
        "forecast": [
            {
                "date": date_key(day.timestamp),
                "timestamp": day.timestamp,
                "temperature": convert(day.temperature, day.unit, display_unit),
                "temperature_display": format_temperature(
                    day.temperature, day.unit, display_unit
                ),
                "condition": day.condition,
                "description": day.description,
                "icon_url": icon_url(day.icon, icon_base_url),
            }
            for day in report.daily
        ],
    }


def state_to_dict(state: ViewState) -> dict:
    return {
        "phase": state.phase.value,
        "city": state.city,
        "units": state.unit.value,
        "error": state.error,
        "generation": state.generation,
        "has_report": state.report is not None,
    }
