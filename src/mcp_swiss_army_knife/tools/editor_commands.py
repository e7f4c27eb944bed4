from __future__ import annotations

import logging
from typing import Any, Callable, Dict

from mcp.server.fastmcp import FastMCP

from ..commands import REMOVE_EMPTY_LINES, REPLACE_DOUBLED_EMPTY_LINES
from ..host.vault import LocalVault, VaultDocument
from ..settings import Settings
from ..text.normalize import apply_to_document, collapse_doubled_blank_lines, remove_blank_lines

log = logging.getLogger("mcp.swiss.tools.editor")


def run_on_vault_file(path: str, transform: Callable[[str], str], settings: Settings) -> Dict[str, Any]:
    document = VaultDocument(LocalVault(settings.vault_path), path)
    changed = apply_to_document(document, transform)
    length = len(document.get_value())
    log.info("editor.apply", extra={"path": path, "transform": transform.__name__, "changed": changed})
    return {"path": path, "changed": changed, "length": length}


def register_editor_commands(mcp: FastMCP) -> None:
    @mcp.tool(name=REPLACE_DOUBLED_EMPTY_LINES.id, title=REPLACE_DOUBLED_EMPTY_LINES.name)
    def replace_doubled_empty_lines(path: str) -> Dict[str, Any]:
        """Collapse runs of blank lines in the vault note at `path` into a single blank line."""
        return run_on_vault_file(path, collapse_doubled_blank_lines, Settings.from_env())

    @mcp.tool(name=REMOVE_EMPTY_LINES.id, title=REMOVE_EMPTY_LINES.name)
    def remove_empty_lines(path: str) -> Dict[str, Any]:
        """Remove every blank line from the vault note at `path`."""
        return run_on_vault_file(path, remove_blank_lines, Settings.from_env())
