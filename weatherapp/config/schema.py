"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from weatherapp.models.common import UnitSystem


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.openweathermap.org"
    icon_base_url: str = "https://openweathermap.org/img/wn"
    country_code: str = Field(default="IN", min_length=2, max_length=2)
    api_key: str = ""
    timeout: float = Field(default=5.0, gt=0.0)  # httpx's own default


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    title: str = "Weather App"
    default_unit: UnitSystem = UnitSystem.METRIC
    chart_height: int = Field(default=300, ge=100, le=1200)


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8777, ge=1, le=65535)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    display: DisplayConfig = DisplayConfig()
    server: ServerConfig = ServerConfig()
