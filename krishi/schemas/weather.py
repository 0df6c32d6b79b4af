"""Weather payloads read back from the generation service."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Lenient(BaseModel):
    """Unknown keys from the service are ignored."""

    model_config = ConfigDict(extra="ignore")


class WeatherSnapshot(_Lenient):
    """Dashboard weather card."""

    temperature: Optional[float] = None
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None
    condition: Optional[str] = None
    farming_advice: Optional[str] = None
    location: Optional[str] = None


class CurrentConditions(_Lenient):
    temperature: Optional[float] = None
    condition: Optional[str] = None
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None
    wind_direction: Optional[str] = None
    pressure: Optional[float] = None
    uv_index: Optional[float] = None
    visibility: Optional[float] = None
    sunrise: Optional[str] = None
    sunset: Optional[str] = None
    location: Optional[str] = None


class DailyForecast(_Lenient):
    day: Optional[str] = None
    date: Optional[str] = None
    high_temp: Optional[float] = None
    low_temp: Optional[float] = None
    condition: Optional[str] = None
    precipitation_chance: Optional[float] = None
    wind_speed: Optional[float] = None
    humidity: Optional[float] = None


class BestTimes(_Lenient):
    watering: Optional[str] = None
    spraying: Optional[str] = None
    harvesting: Optional[str] = None
    planting: Optional[str] = None


class WeatherRisks(_Lenient):
    pest_risk: Optional[str] = None
    disease_risk: Optional[str] = None
    frost_risk: Optional[str] = None


class WeatherReport(_Lenient):
    """Full weather page payload."""

    current: Optional[CurrentConditions] = None
    forecast: list[DailyForecast] = Field(default_factory=list)
    farming_advice: Optional[str] = None
    alerts: list[str] = Field(default_factory=list)
    best_times: BestTimes = Field(default_factory=BestTimes)
    risks: WeatherRisks = Field(default_factory=WeatherRisks)

    @field_validator("forecast", "alerts", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return [] if v is None else v

    @field_validator("best_times", "risks", mode="before")
    @classmethod
    def none_as_blank(cls, v):
        return {} if v is None else v
