"""Registry of tools and prompts served over MCP.

Built once at startup with chained calls and only read afterwards::

    registry = (
        ToolRegistry("weather", "1.0.0")
        .add_tool(GetWeather)
        .add_prompt("Ask me about the weather")
    )
"""

import logging

from .tools import Tool

logger = logging.getLogger(__name__)


def camel_case_name(name: str) -> str:
    """Public tool name: first character lowered, rest unchanged."""
    if not name:
        return name
    return name[0].lower() + name[1:]


class ToolRegistry:
    """Server identity plus the ordered tools and prompts it exposes."""

    def __init__(self, name: str, version: str):
        self.name = name
        self.version = version
        self._tools: list[type[Tool]] = []
        self._lookup: dict[str, type[Tool]] = {}
        self._prompts: list[str] = []

    @property
    def tools(self) -> tuple[type[Tool], ...]:
        """Registered tools in registration order."""
        return tuple(self._tools)

    @property
    def prompts(self) -> tuple[str, ...]:
        """Registered prompt texts in registration order."""
        return tuple(self._prompts)

    def add_tool(self, tool: type[Tool]) -> "ToolRegistry":
        """Register a tool under its camelCase name (last one wins on collision)."""
        public_name = camel_case_name(tool.name)
        if public_name in self._lookup:
            logger.warning(f"Tool '{public_name}' registered twice, replacing {self._lookup[public_name].__name__}")
        self._tools.append(tool)
        self._lookup[public_name] = tool
        return self

    def add_prompt(self, text: str) -> "ToolRegistry":
        """Register a static prompt."""
        self._prompts.append(text)
        return self

    def get_tool(self, name: str) -> type[Tool] | None:
        """Look up a tool by its public name, or None if unknown."""
        return self._lookup.get(name)
