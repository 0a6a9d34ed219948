"""Lookup controller: drives the view state through one city lookup."""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass

from weatherapp.ingest.owm_client import OpenWeatherClient, ProviderError
from weatherapp.ingest.parsers import parse_current, parse_forecast
from weatherapp.models.common import UnitSystem
from weatherapp.models.forecast import CurrentConditions, WeatherReport
from weatherapp.models.view import (
    EMPTY_CITY_MESSAGE,
    FETCH_ERROR_MESSAGE,
    ViewState,
    fail,
    idle,
    start_loading,
    succeed,
    switch_unit,
)
from weatherapp.transform.grouper import group_by_day

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LookupResult:
    outcome: ViewState  # what this submission produced
    latest: ViewState  # shared state after settling
    superseded: bool = False


class WeatherLookup:
    """Owns the process-wide ViewState and the submission counter.

    Each submission gets a generation number. Only the latest generation may
    write its outcome, so a slow earlier lookup can never overwrite a newer
    one.
    """

    def __init__(self, client: OpenWeatherClient, unit: UnitSystem = UnitSystem.METRIC):
        self.client = client
        self._lock = threading.Lock()
        self._generation = 0
        self._state = idle(unit)

    @property
    def state(self) -> ViewState:
        with self._lock:
            return self._state

    def set_unit(self, unit: UnitSystem) -> ViewState:
        """Change the unit for future requests and for display of loaded data."""
        with self._lock:
            self._state = switch_unit(self._state, UnitSystem(unit))
            return self._state

    def submit(self, city: str) -> ViewState:
        """Look up ``city`` and return the newest state.

        Both provider calls must succeed before the report is swapped in; if
        either fails, current conditions and forecast are cleared together.
        """
        return self.run(city).latest

    def run(self, city: str) -> LookupResult:
        """Look up ``city`` and report this submission's own outcome.

        ``outcome`` always describes ``city``, even when a newer submission
        has since taken over the shared state; ``superseded`` says so.
        """
        city = city.strip()
        with self._lock:
            self._generation += 1
            generation = self._generation
            if not city:
                self._state = fail(self._state, EMPTY_CITY_MESSAGE)
                return LookupResult(outcome=self._state, latest=self._state)
            self._state = start_loading(self._state, city, generation)
            loading = self._state

        logger.info("Lookup #%d: %s (%s)", generation, city, loading.unit)
        try:
            report = self._fetch_report(city, loading.unit)
        except ProviderError as e:
            logger.warning("Lookup #%d for %s failed: %s", generation, city, e)
            return self._settle(generation, loading, lambda s: fail(s, FETCH_ERROR_MESSAGE))
        except Exception:
            logger.exception("Lookup #%d for %s crashed", generation, city)
            self._settle(generation, loading, lambda s: fail(s, FETCH_ERROR_MESSAGE))
            raise

        logger.info(
            "Lookup #%d: %s, %d forecast days", generation, report.current.location_name,
            len(report.daily),
        )
        return self._settle(generation, loading, lambda s: succeed(s, report))

    def locate(self, lat: float, lon: float) -> CurrentConditions:
        """Current conditions at a coordinate pair (browser geolocation hook)."""
        logger.info("Fetching weather for coordinates: %s, %s", lat, lon)
        unit = self.state.unit
        raw = self.client.get_current_by_coords(lat, lon, unit)
        return parse_current(raw, unit)

    def _fetch_report(self, city: str, unit: UnitSystem) -> WeatherReport:
        current_raw = self.client.get_current(city, unit)
        forecast_raw = self.client.get_forecast(city, unit)
        current = parse_current(current_raw, unit)
        daily = group_by_day(parse_forecast(forecast_raw, unit))
        return WeatherReport(current=current, daily=daily, unit=unit)

    def _settle(
        self,
        generation: int,
        loading: ViewState,
        transition: Callable[[ViewState], ViewState],
    ) -> LookupResult:
        with self._lock:
            if generation != self._generation:
                logger.info(
                    "Discarding lookup #%d, superseded by #%d",
                    generation, self._generation,
                )
                return LookupResult(
                    outcome=transition(loading), latest=self._state, superseded=True
                )
            self._state = transition(self._state)
            return LookupResult(outcome=self._state, latest=self._state)
