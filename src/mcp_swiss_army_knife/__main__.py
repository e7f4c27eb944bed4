from __future__ import annotations
import logging
import os
import sys

from .utils.logging import setup_logging

def main() -> None:
    """
    Run the swiss-army-knife MCP server using the official SDK runner.

    Examples:
      # stdio (default; for MCP Inspector and desktop hosts)
      VAULT_PATH=~/notes python -m mcp_swiss_army_knife

      # streamable HTTP on 0.0.0.0:8020 mounted at /mcp
      MCP_TRANSPORT=streamable-http MCP_PORT=8020 python -m mcp_swiss_army_knife
    """
    if any(a in ("-h", "--help") for a in sys.argv[1:]):
        sys.stderr.write(
            "mcp-swiss-army-knife: blank-line cleanup and release-based plugin installs over MCP.\n"
        )
        sys.stderr.flush()
        return

    setup_logging()
    log = logging.getLogger(os.getenv("SERVICE_NAME", "mcp.swiss"))

    from .server import mcp

    transport = os.getenv("MCP_TRANSPORT", "stdio").strip().lower()
    host = os.getenv("MCP_HOST", "0.0.0.0")
    port = int(os.getenv("MCP_PORT", "8020"))

    mcp.settings.host = host
    mcp.settings.port = port

    if transport == "streamable-http":
        mcp.settings.streamable_http_path = os.getenv("MCP_MOUNT_PATH", "/mcp")
    elif transport == "sse":
        mcp.settings.sse_path = os.getenv("MCP_SSE_PATH", "/sse")

    if os.getenv("MCP_STATELESS_JSON", "").lower() in {"1", "true", "yes"}:
        mcp.settings.stateless_http = True
        mcp.settings.json_response = True

    log.info("server.start", extra={"transport": transport, "host": host, "port": port})
    mcp.run(transport=transport)

if __name__ == "__main__":
    main()
