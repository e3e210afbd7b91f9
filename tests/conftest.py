"""Shared fixtures: a small weather registry used across the test suite."""

import pytest

from toolhost.mcp import MCPHandler, Tool, ToolRegistry, param


class GetWeather(Tool):
    """Current weather for a city."""

    parameters = [
        param("city", "string", required=True, description="City name"),
        param("date", "String", format="date"),
    ]

    def call(self) -> str:
        return "Sunny"


class Forecast(Tool):
    description = "Multi-day forecast."

    parameters = [
        param("days", "Integer", required=True),
        param("from_", format="date", description="First day"),
    ]

    def call(self) -> dict:
        return {"days": self.arguments["days"], "outlook": ["Sunny", "Rain"]}


class Broken(Tool):
    """Always fails."""

    def call(self) -> str:
        raise RuntimeError("boom")


@pytest.fixture
def registry() -> ToolRegistry:
    return (
        ToolRegistry("weather-server", "1.2.3")
        .add_tool(GetWeather)
        .add_tool(Forecast)
        .add_tool(Broken)
        .add_prompt("p1")
        .add_prompt("p2")
    )


@pytest.fixture
def handler(registry: ToolRegistry) -> MCPHandler:
    return MCPHandler(registry)
