"""HTML page rendered as a pure function of the view state."""

from html import escape

from weatherapp.config.schema import AppConfig
from weatherapp.models.common import UnitSystem
from weatherapp.models.forecast import CurrentConditions, DailyForecast
from weatherapp.models.view import ViewState
from weatherapp.reporting.chart import render_chart_svg
from weatherapp.transform.classifier import classify
from weatherapp.transform.display import (
    format_day_label,
    format_humidity,
    format_temperature,
    format_wind,
    icon_url,
)

STYLE = """
body { font-family: Roboto, Helvetica, Arial, sans-serif; margin: 0; }
.container { max-width: 600px; margin: 0 auto; padding: 32px 16px; text-align: center; }
.bg-cloudy { background: #d7dde4; }
.bg-sunny { background: #fff4c2; }
.bg-rainy { background: #c9d6e8; }
.bg-default { background: #f5f5f5; }
form input, form select, form button { width: 100%; padding: 10px; margin: 6px 0; box-sizing: border-box; }
.card { background: #fff; border-radius: 4px; box-shadow: 0 1px 3px rgba(0,0,0,.2); padding: 16px; margin-top: 16px; }
.grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(240px, 1fr)); gap: 16px; }
.error { color: #d32f2f; margin-top: 16px; }
"""


def render_page(state: ViewState, config: AppConfig) -> str:
    """Render the whole page for ``state``. No I/O, no side effects."""
    report = state.report
    backdrop = classify(report.current.condition).value if report else ""
    icons = config.provider.icon_base_url

    body = [
        f"<h1>{escape(config.display.title)}</h1>",
        _render_form(state),
    ]
    if state.error:
        body.append(f'<p class="error">{escape(state.error)}</p>')
    if report is not None:
        body.append(_render_current(report.current, state.unit, icons))
        if report.daily:
            body.append(
                _render_forecast(report.daily, state.unit, icons, config.display.chart_height)
            )

    return (
        "<!DOCTYPE html>\n"
        '<html lang="en"><head><meta charset="utf-8">'
        f"<title>{escape(config.display.title)}</title>"
        f"<style>{STYLE}</style></head>"
        f'<body><div class="container {backdrop}">'
        + "\n".join(body)
        + "</div></body></html>"
    )


def _render_form(state: ViewState) -> str:
    options = "".join(
        f'<option value="{u.value}"{" selected" if u == state.unit else ""}>'
        f"{u.value.title()} ({u.temperature_suffix})</option>"
        for u in UnitSystem
    )
    disabled = " disabled" if state.loading else ""
    label = "Loading..." if state.loading else "Get Weather"
    return (
        '<form method="get" action="/">'
        f'<input type="text" name="city" placeholder="Enter city name" '
        f'value="{escape(state.city)}">'
        f'<select name="units">{options}</select>'
        f'<button type="submit"{disabled}>{label}</button>'
        "</form>"
    )


def _render_current(cur: CurrentConditions, unit: UnitSystem, icons: str) -> str:
    return (
        '<div class="card current">'
        f'<h2>{escape(cur.location_name)}</h2>'
        f'<img src="{escape(icon_url(cur.icon, icons))}" alt="{escape(cur.description)}">'
        f"<p>Temperature: {format_temperature(cur.temperature, cur.unit, unit)}</p>"
        f"<p>Weather: {escape(cur.description)}</p>"
        f"<p>Humidity: {format_humidity(cur.humidity)}</p>"
        f"<p>Wind Speed: {format_wind(cur.wind_speed, cur.unit)}</p>"
        "</div>"
    )


def _render_forecast(
    daily: list[DailyForecast], unit: UnitSystem, icons: str, chart_height: int
) -> str:
    cards = "".join(
        '<div class="card day">'
        f"<p>{format_day_label(day.timestamp)}</p>"
        f'<img src="{escape(icon_url(day.icon, icons))}" alt="{escape(day.description)}">'
        f"<p>Temp: {format_temperature(day.temperature, day.unit, unit)}</p>"
        f"<p>{escape(day.description)}</p>"
        "</div>"
        for day in daily
    )
    return (
        '<section class="forecast">'
        "<h3>5-Day Forecast</h3>"
        f'<div class="grid">{cards}</div>'
        f'<div class="chart">{render_chart_svg(daily, unit, chart_height)}</div>'
        "</section>"
    )
