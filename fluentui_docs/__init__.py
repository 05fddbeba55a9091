"""FluentUI documentation index and MCP server."""

__version__ = "1.0.0"
