"""MCP server with blank-line cleanup commands and a release-based plugin installer."""

__version__ = "0.1.0"
