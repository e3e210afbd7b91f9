"""Input schema synthesis for tools/list.

Each tool's declared ParamSpec list is turned into a JSON Schema object:
the declared type is lower-cased (``"string"`` when absent), descriptions
and formats are only emitted when declared, and required parameters are
collected into ``required``. Properties keep declaration order.
"""

from ..models import InputSchema, ParamSpec, PropertySchema, ToolDescriptor
from .registry import camel_case_name
from .tools import Tool

DEFAULT_PARAM_TYPE = "string"


def build_property(spec: ParamSpec) -> PropertySchema:
    """Schema fragment for a single declared parameter."""
    return PropertySchema(
        description=spec.description,
        type=spec.type.lower() if spec.type else DEFAULT_PARAM_TYPE,
        format=spec.format,
    )


def build_input_schema(parameters: list[ParamSpec]) -> InputSchema:
    """Object schema covering all declared parameters of a tool."""
    schema = InputSchema()
    for spec in parameters:
        public_name = spec.public_name
        schema.properties[public_name] = build_property(spec)
        if spec.required and public_name not in schema.required:
            schema.required.append(public_name)
    return schema


def build_tool_descriptor(tool: type[Tool]) -> ToolDescriptor:
    """tools/list entry for a registered tool."""
    return ToolDescriptor(
        name=camel_case_name(tool.name),
        description=tool.describe(),
        input_schema=build_input_schema(tool.parameters),
    )
