# File: src/mcp_swiss_army_knife/tools/plugin_install.py
from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

import httpx
from mcp.server.fastmcp import FastMCP

from ..commands import FETCH_PLUGIN_VERSION
from ..errors import KnifeError
from ..host.base import HostUI, PromptField, Vault
from ..host.preset import PresetUI
from ..host.vault import LocalVault
from ..models.params import LATEST, ReleaseRequest
from ..models.release import InstallOutcome
from ..settings import Settings
from .installer import install
from .release_fetch import build_client, fetch_assets, resolve

log = logging.getLogger("mcp.swiss.tools.plugin_install")

URL_FIELD = "repository_url"
VERSION_FIELD = "version"

PROMPT_FIELDS = [
    PromptField(URL_FIELD, label="GH repo url"),
    PromptField(VERSION_FIELD, label="version", default=LATEST),
]


def success_message(plugin_name: str, version: str) -> str:
    return (
        f"Successfully installed {plugin_name} version: {version}. "
        "Please restart Obsidian to make changes visible."
    )


async def install_release(
    ui: HostUI,
    vault: Vault,
    settings: Settings,
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[InstallOutcome]:
    """
    Prompt for a repository and version, then download and install its release.

    Every failure ends here: it is logged and shown to the user as one message.
    Returns None when the prompt was dismissed.
    """
    values = ui.prompt_for_text(PROMPT_FIELDS)
    if values is None:
        log.info("install.cancelled")
        return None

    version = values.get(VERSION_FIELD) or LATEST
    try:
        request = ReleaseRequest(repository_url=values.get(URL_FIELD) or "", version_label=version)
        if client is None:
            async with build_client(settings) as own_client:
                outcome = await _run(request, vault, settings, own_client)
        else:
            outcome = await _run(request, vault, settings, client)
    except Exception as e:
        log.warning("install.failed", extra={"error": str(e), "url": values.get(URL_FIELD)})
        error = e.to_dict() if isinstance(e, KnifeError) else None
        outcome = InstallOutcome(ok=False, message=str(e), version=version, error=error)

    ui.show_message(outcome.message)
    return outcome


async def _run(
    request: ReleaseRequest,
    vault: Vault,
    settings: Settings,
    client: httpx.AsyncClient,
) -> InstallOutcome:
    release = await resolve(request, client)
    assets = await fetch_assets(release.download_base_url, client, settings)
    result = await asyncio.to_thread(install, release.plugin_name, assets, vault, settings)
    log.info("install.done", extra={"plugin": result.plugin_name, "files": result.files})
    return InstallOutcome(
        ok=True,
        message=success_message(release.plugin_name, request.version_label),
        version=request.version_label,
        release=release,
        result=result,
    )


def register_plugin_install(mcp: FastMCP) -> None:
    @mcp.tool(name=FETCH_PLUGIN_VERSION.id, title=FETCH_PLUGIN_VERSION.name)
    async def fetch_plugin_version(repository_url: str, version: str = LATEST) -> Dict[str, Any]:
        """
        Download main.js, manifest.json and styles.css from a release of the
        given repository and install them as a plugin in the vault.
        """
        settings = Settings.from_env()
        ui = PresetUI({URL_FIELD: repository_url, VERSION_FIELD: version})
        outcome = await install_release(ui, LocalVault(settings.vault_path), settings)
        return outcome.model_dump(exclude_none=True) if outcome else {"ok": False, "message": "Cancelled"}
