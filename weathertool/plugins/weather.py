"""Weather tool plugin returning a canned report for a city"""
from __future__ import annotations

import logging
from typing import Optional

from ..domain.models.tool import InvalidArgument, WeatherArgs
from ..infrastructure.config.settings import get_settings

WEATHER_TEMPLATE = "The weather in {city} is {condition}, {temperature}°C"

TOOL_SCHEMA = {
    "type": "function",
    "function": {
        "name": "get_weather",
        "description": "Get the current weather for a city.",
        "parameters": WeatherArgs.json_schema(),
    }
}


class WeatherTool:
    """Stub weather lookup.

    Condition and temperature default to the configured placeholders and are
    read at call time so settings reloads take effect.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        condition: Optional[str] = None,
        temperature_c: Optional[int] = None,
    ) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._condition = condition
        self._temperature_c = temperature_c

    def __call__(self, city: str) -> str:
        if not isinstance(city, str) or not city.strip():
            raise InvalidArgument("argument 'city' must be a non-empty string")

        weather = get_settings().weather
        condition = self._condition if self._condition is not None else weather.condition
        temperature = self._temperature_c if self._temperature_c is not None else weather.temperature_c

        self._logger.info(f"[Tool] Getting weather for {city}...")
        return WEATHER_TEMPLATE.format(city=city, condition=condition, temperature=temperature)


TOOL_IMPLEMENTATION = WeatherTool()
TOOL_AUTHOR = "core"
TOOL_VERSION = "1.0.0"
