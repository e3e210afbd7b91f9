"""Built-in tools registered on the default server."""

from .echo import Echo

BUILTIN_TOOLS = [Echo]

__all__ = ["Echo", "BUILTIN_TOOLS"]
