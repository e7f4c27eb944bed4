# File: src/mcp_swiss_army_knife/server.py
from __future__ import annotations

import logging
import os
from typing import Any, Dict

from mcp.server.fastmcp import FastMCP

from .commands import COMMANDS
from .settings import Settings
from .tools import register as register_tools

log = logging.getLogger(os.getenv("SERVICE_NAME", "mcp.swiss.server"))

# One FastMCP instance for the process; __main__.py runs it.
mcp = FastMCP("swiss-army-knife")

register_tools(mcp)


def describe_server(settings: Settings) -> Dict[str, Any]:
    """Registered tool ids and the settings they run with."""
    return {
        "tools": [c.id for c in COMMANDS],
        "vault": settings.vault_path,
        "plugins_root": settings.plugins_root,
        "cors_relay": settings.use_cors_relay,
    }


log.info("server.registered", extra=describe_server(Settings.from_env()))
