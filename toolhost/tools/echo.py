"""Echo tool: returns its input text, optionally upper-cased."""

from ..mcp.tools import Tool, param


class Echo(Tool):
    """Echo the given text back to the caller."""

    parameters = [
        param("text", "String", required=True, description="Text to echo"),
        param("upper", "Boolean", description="Upper-case the text before returning it"),
    ]

    def call(self) -> str:
        text = str(self.arguments["text"])
        if self.arguments.get("upper"):
            return text.upper()
        return text
