"""Weather information synthesized by the generation service."""

import logging
from typing import Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from krishi.core.exceptions import MalformedResponseError
from krishi.schemas.weather import WeatherReport, WeatherSnapshot
from krishi.services.llm.generation_client import StructuredGenerationClient
from krishi.services.llm.prompts import (
    WEATHER_REPORT_PROMPT,
    WEATHER_REPORT_SCHEMA,
    WEATHER_SNAPSHOT_PROMPT,
    WEATHER_SNAPSHOT_SCHEMA,
    with_location,
)

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class WeatherService:
    """Asks the generation service for weather grounded in live data."""

    def __init__(self, client: StructuredGenerationClient):
        self.client = client

    async def _ask(
        self, prompt: str, schema: dict, model: Type[PayloadT]
    ) -> PayloadT:
        data = await self.client.invoke(
            prompt,
            response_json_schema=schema,
            add_context_from_internet=True,
        )
        if not isinstance(data, dict):
            raise MalformedResponseError(
                f"Expected a JSON object for weather, got {type(data).__name__}"
            )
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error(f"Weather payload has unusable fields: {e}")
            raise MalformedResponseError(f"Unusable weather payload: {e}") from e

    async def current(self, location: Optional[str] = None) -> WeatherSnapshot:
        """Short snapshot shown on the dashboard."""
        return await self._ask(
            with_location(WEATHER_SNAPSHOT_PROMPT, location),
            WEATHER_SNAPSHOT_SCHEMA,
            WeatherSnapshot,
        )

    async def forecast(self, location: Optional[str] = None) -> WeatherReport:
        """Current conditions, 7-day forecast, alerts, best times and risks."""
        report = await self._ask(
            with_location(WEATHER_REPORT_PROMPT, location),
            WEATHER_REPORT_SCHEMA,
            WeatherReport,
        )
        logger.info(
            f"Weather report: {len(report.forecast)} day(s), {len(report.alerts)} alert(s)"
        )
        return report
