"""Tool metadata and input schema models for tools/list."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Trailing marker allowed on declared identifiers that shadow Python keywords
# or builtins (``type_``, ``from_``); it is not part of the published name.
PARAM_MARKER_SUFFIX = "_"


class ParamSpec(BaseModel):
    """Declared metadata for one tool parameter."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Declared parameter identifier")
    type: str | None = Field(default=None, description="Declared type name, e.g. 'String' or 'integer'")
    format: str | None = Field(default=None, description="JSON Schema format, e.g. 'date-time'")
    required: bool = Field(default=False, description="Whether callers must supply the parameter")
    description: str | None = Field(default=None, description="Parameter documentation")

    @property
    def public_name(self) -> str:
        """Name published in the input schema (marker suffix stripped)."""
        stripped = self.name.rstrip(PARAM_MARKER_SUFFIX)
        return stripped or self.name


class PropertySchema(BaseModel):
    """JSON Schema fragment describing a single tool argument."""

    description: str | None = None
    type: str = "string"
    format: str | None = None


class InputSchema(BaseModel):
    """JSON Schema object describing a tool's accepted arguments."""

    type: str = "object"
    properties: dict[str, PropertySchema] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)


class ToolDescriptor(BaseModel):
    """Entry returned by tools/list."""

    name: str
    description: str = ""
    input_schema: InputSchema = Field(default_factory=InputSchema, alias="inputSchema")

    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Serialize with MCP field names, omitting absent optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
