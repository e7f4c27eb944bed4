from __future__ import annotations

import logging
from typing import Iterable

from ..errors import FilesystemError
from ..host.base import Vault
from ..models.release import AssetFile, InstallResult
from ..settings import Settings

log = logging.getLogger("mcp.swiss.installer")


def plugin_directory(plugin_name: str, settings: Settings) -> str:
    """Vault-relative folder a plugin is installed into."""
    name = (plugin_name or "").strip()
    if not name or name in {".", ".."} or "/" in name or "\\" in name:
        raise FilesystemError(f"Invalid plugin name: {plugin_name!r}", data={"plugin": plugin_name})
    return f"{settings.plugins_root.rstrip('/')}/{name}"


def install(
    plugin_name: str,
    assets: Iterable[AssetFile],
    vault: Vault,
    settings: Settings,
) -> InstallResult:
    """
    Create the plugin folder, then write each asset into it (overwriting).

    Files are written one by one; a failure part way leaves whatever was
    already written in place.
    """
    directory = plugin_directory(plugin_name, settings)
    try:
        vault.create_folder(directory)
        log.info("install.mkdir", extra={"dir": directory})

        written = []
        for asset in assets:
            path = f"{directory}/{asset.name}"
            vault.write_file(path, asset.content)
            written.append(asset.name)
            log.info("install.write", extra={"path": path, "chars": len(asset.content)})
    except OSError as e:
        raise FilesystemError(f"Install into {directory} failed: {e}", data={"dir": directory}) from e

    return InstallResult(plugin_name=plugin_name, directory=directory, files=written)
