"""OpenWeatherMap REST client for current conditions and the 5-day forecast."""

import logging
import os

import httpx

from weatherapp.models.common import UnitSystem

logger = logging.getLogger(__name__)

OWM_BASE_URL = "https://api.openweathermap.org"
DEFAULT_COUNTRY_CODE = "IN"
DEFAULT_USER_AGENT = "weatherapp/0.1.0"


class ProviderError(Exception):
    """Raised when either provider call fails: network, non-2xx or bad body."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class OpenWeatherClient:
    """Thin wrapper over the two OpenWeatherMap 2.5 endpoints we consume.

    No retries: a failed call surfaces immediately as ProviderError.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = OWM_BASE_URL,
        country_code: str = DEFAULT_COUNTRY_CODE,
        timeout: float = 5.0,
    ):
        self.api_key = api_key or os.environ.get("OPENWEATHER_API_KEY", "")
        if not self.api_key:
            raise ProviderError("OPENWEATHER_API_KEY not set")
        self.base_url = base_url.rstrip("/")
        self.country_code = country_code
        self.timeout = timeout

    def get_current(self, city: str, unit: UnitSystem) -> dict:
        """Fetch current conditions for a city."""
        return self._get("/data/2.5/weather", self._city_params(city, unit))

    def get_forecast(self, city: str, unit: UnitSystem) -> dict:
        """Fetch the 5-day / 3-hour forecast for a city."""
        return self._get("/data/2.5/forecast", self._city_params(city, unit))

    def get_current_by_coords(self, lat: float, lon: float, unit: UnitSystem) -> dict:
        """Fetch current conditions for a coordinate pair."""
        params = {"lat": lat, "lon": lon, "appid": self.api_key, "units": unit.value}
        return self._get("/data/2.5/weather", params)

    def _city_params(self, city: str, unit: UnitSystem) -> dict[str, str]:
        return {
            "q": f"{city},{self.country_code}",
            "appid": self.api_key,
            "units": unit.value,
        }

    def _get(self, endpoint: str, params: dict) -> dict:
        url = f"{self.base_url}{endpoint}"
        headers = {"User-Agent": DEFAULT_USER_AGENT, "Accept": "application/json"}
        try:
            resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("OpenWeatherMap request failed: GET %s -> %s", endpoint, e)
            raise ProviderError(f"Request failed: {e}") from e

        if resp.status_code >= 400:
            logger.error(
                "OpenWeatherMap %d: GET %s -> %s", resp.status_code, endpoint, resp.text
            )
            raise ProviderError(f"HTTP {resp.status_code}: {resp.text}", resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            raise ProviderError(f"Invalid JSON from {endpoint}") from e
        if not isinstance(data, dict):
            raise ProviderError(f"Unexpected payload from {endpoint}")
        return data
