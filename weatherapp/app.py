"""Weather lookup web app: FastAPI serving the page and a small JSON API."""

import logging
from dataclasses import asdict

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from weatherapp.config.schema import AppConfig
from weatherapp.ingest.owm_client import OpenWeatherClient, ProviderError
from weatherapp.models.common import UnitSystem
from weatherapp.models.view import FETCH_ERROR_MESSAGE, Phase
from weatherapp.reporting.formatters import report_to_dict, state_to_dict
from weatherapp.reporting.page import render_page
from weatherapp.service.lookup import WeatherLookup

logger = logging.getLogger(__name__)

SUPERSEDED_MESSAGE = "Lookup superseded by a newer request."


class UnitUpdate(BaseModel):
    units: UnitSystem


class Coordinates(BaseModel):
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)


def build_lookup(config: AppConfig) -> WeatherLookup:
    client = OpenWeatherClient(
        api_key=config.provider.api_key,
        base_url=config.provider.base_url,
        country_code=config.provider.country_code,
        timeout=config.provider.timeout,
    )
    return WeatherLookup(client, unit=config.display.default_unit)


def create_app(config: AppConfig, lookup: WeatherLookup | None = None) -> FastAPI:
    lookup = lookup or build_lookup(config)
    icons = config.provider.icon_base_url

    app = FastAPI(title=config.display.title, version="0.1.0")

    # ── Page ────────────────────────────────────────────────────────

    @app.get("/", response_class=HTMLResponse)
    def index(city: str | None = None, units: UnitSystem | None = None):
        """Render the page; a ``city`` query parameter triggers a lookup."""
        if units is not None:
            lookup.set_unit(units)
        state = lookup.submit(city) if city is not None else lookup.state
        return HTMLResponse(render_page(state, config))

    # ── Data endpoints ──────────────────────────────────────────────

    @app.get("/api/weather")
    def get_weather(city: str, units: UnitSystem | None = None):
        """Current conditions plus the per-day forecast for a city."""
        if not city.strip():
            raise HTTPException(422, "city must not be blank")
        if units is not None:
            lookup.set_unit(units)
        result = lookup.run(city)
        if result.superseded:
            raise HTTPException(409, SUPERSEDED_MESSAGE)
        own = result.outcome
        if own.phase != Phase.SUCCESS or own.report is None:
            raise HTTPException(502, own.error or FETCH_ERROR_MESSAGE)
        return report_to_dict(own.report, own.unit, icons)

    @app.get("/api/state")
    def get_state():
        return state_to_dict(lookup.state)

    @app.post("/api/units")
    def update_units(update: UnitUpdate):
        return state_to_dict(lookup.set_unit(update.units))

    @app.post("/api/geolocation")
    def geolocation(coords: Coordinates):
        """Browser geolocation hook: conditions at the reported position."""
        try:
            current = lookup.locate(coords.lat, coords.lon)
        except ProviderError as e:
            logger.warning("Geolocation lookup failed: %s", e)
            raise HTTPException(502, FETCH_ERROR_MESSAGE) from e
        return asdict(current)

    @app.get("/api/health")
    def get_health():
        return {
            "ok": True,
            "api_key_configured": bool(config.provider.api_key),
            "phase": lookup.state.phase.value,
        }

    return app
