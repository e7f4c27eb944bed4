from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from .editor_commands import register_editor_commands
from .plugin_install import register_plugin_install

def register(mcp: FastMCP) -> None:
    register_editor_commands(mcp)
    register_plugin_install(mcp)
