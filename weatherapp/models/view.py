"""View state and the pure transitions between lookup phases.

A lookup moves Idle -> Loading -> Success | Error. Every transition returns a
new ViewState; nothing is mutated in place.
"""

from dataclasses import dataclass, replace
from enum import StrEnum

from weatherapp.models.common import UnitSystem
from weatherapp.models.forecast import WeatherReport

FETCH_ERROR_MESSAGE = "Could not fetch weather data. Please check the city name."
EMPTY_CITY_MESSAGE = "Please enter a city name."


class Phase(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class ViewState:
    phase: Phase = Phase.IDLE
    city: str = ""
    unit: UnitSystem = UnitSystem.METRIC
    report: WeatherReport | None = None
    error: str = ""
    generation: int = 0

    @property
    def loading(self) -> bool:
        return self.phase == Phase.LOADING


def idle(unit: UnitSystem = UnitSystem.METRIC) -> ViewState:
    return ViewState(phase=Phase.IDLE, unit=unit)


def start_loading(state: ViewState, city: str, generation: int) -> ViewState:
    """Enter Loading. Any previously loaded report stays visible until replaced."""
    return replace(state, phase=Phase.LOADING, city=city, error="", generation=generation)


def succeed(state: ViewState, report: WeatherReport) -> ViewState:
    return replace(state, phase=Phase.SUCCESS, report=report, error="")


def fail(state: ViewState, message: str) -> ViewState:
    """Enter Error. Current conditions and forecast are cleared together."""
    return replace(state, phase=Phase.ERROR, report=None, error=message)


def switch_unit(state: ViewState, unit: UnitSystem) -> ViewState:
    return replace(state, unit=unit)
