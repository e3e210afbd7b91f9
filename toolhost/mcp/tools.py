"""Tool capability interface.

A tool is a class that declares its parameters up front and is
constructed once per ``tools/call`` from the caller's arguments::

    class GetWeather(Tool):
        \"\"\"Current weather for a city.\"\"\"

        parameters = [param("city", "string", required=True)]

        def call(self) -> str:
            return lookup(self.arguments["city"])

The registry only ever relies on ``name``, ``describe()``, ``parameters``,
the constructor and ``call()``.
"""

import inspect
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from ..models import ParamSpec


def param(
    name: str,
    type: str | None = None,
    *,
    required: bool = False,
    format: str | None = None,
    description: str | None = None,
) -> ParamSpec:
    """Shorthand for declaring a ParamSpec in a tool's ``parameters`` list."""
    return ParamSpec(
        name=name,
        type=type,
        format=format,
        required=required,
        description=description,
    )


class Tool(ABC):
    """Base class for tools exposed over MCP."""

    # Canonical name; defaults to the class name
    name: ClassVar[str] = ""
    # Falls back to the class docstring when empty
    description: ClassVar[str] = ""
    parameters: ClassVar[list[ParamSpec]] = []

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if not cls.__dict__.get("name"):
            cls.name = cls.__name__

    def __init__(self, arguments: dict[str, Any]):
        self.arguments = arguments

    @classmethod
    def describe(cls) -> str:
        """Documentation text for tools/list.

        The class's own ``description`` wins; otherwise its own docstring
        is used. Neither is inherited from a base class.
        """
        description = cls.__dict__.get("description")
        if description:
            return description
        doc = cls.__dict__.get("__doc__")
        if doc:
            return inspect.cleandoc(doc)
        return ""

    @abstractmethod
    def call(self) -> Any:
        """Run the tool and return a value convertible to text."""
