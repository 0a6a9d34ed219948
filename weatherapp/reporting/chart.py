"""Temperature-over-days line chart for the grouped forecast."""

import io

import matplotlib
from matplotlib.figure import Figure

from weatherapp.models.common import UnitSystem
from weatherapp.models.forecast import DailyForecast
from weatherapp.transform.converter import convert
from weatherapp.transform.display import format_day_label, round_temperature

LINE_COLOR = "#8884d8"
DPI = 100


def chart_series(
    daily: list[DailyForecast], display_unit: UnitSystem
) -> list[tuple[str, float]]:
    """(day label, temperature) pairs in display units, one per day."""
    return [
        (
            format_day_label(day.timestamp),
            round_temperature(convert(day.temperature, day.unit, display_unit)),
        )
        for day in daily
    ]


def render_chart_svg(
    daily: list[DailyForecast], display_unit: UnitSystem, height: int = 300
) -> str:
    """Render the forecast as an inline SVG line chart. Empty input gives ''."""
    series = chart_series(daily, display_unit)
    if not series:
        return ""

    labels = [label for label, _ in series]
    temps = [temp for _, temp in series]

    fig = Figure(figsize=(6.0, height / DPI), dpi=DPI)
    ax = fig.add_subplot()
    ax.plot(labels, temps, color=LINE_COLOR, marker="o", markersize=6)
    ax.grid(True, linestyle="--", linewidth=0.5)
    ax.set_ylabel(f"Temperature ({display_unit.temperature_suffix})")
    for label, temp in series:
        ax.annotate(
            f"{temp:g}{display_unit.temperature_suffix}", (label, temp),
            textcoords="offset points", xytext=(0, 8), ha="center", fontsize=8,
        )
    fig.tight_layout()

    buf = io.BytesIO()
    # Labels stay <text> elements rather than glyph paths
    with matplotlib.rc_context({"svg.fonttype": "none"}):
        fig.savefig(buf, format="svg")
    svg = buf.getvalue().decode("utf-8")
    # Drop the XML prolog so the chart can be inlined into the page
    return svg[svg.index("<svg"):]
