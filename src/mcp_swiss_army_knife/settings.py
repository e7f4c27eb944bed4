# File: src/mcp_swiss_army_knife/settings.py
from __future__ import annotations
import os
from dataclasses import dataclass

DEFAULT_PLUGINS_ROOT = ".obsidian/plugins"
DEFAULT_CORS_RELAY_URL = "https://cors-anywhere.herokuapp.com/"
DEFAULT_NOT_FOUND_MARKER = "Not Found"

def _truthy(v: str | None) -> bool:
    return str(v or "").strip().lower() in {"1", "true", "yes", "y", "on"}

def _optional_float_env(name: str) -> float | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except Exception:
        return None

@dataclass
class Settings:
    # Vault (the host filesystem the plugins live in)
    vault_path: str = "."
    plugins_root: str = DEFAULT_PLUGINS_ROOT

    # HTTP client; None means no timeout at all
    http_timeout_seconds: float | None = None
    http_follow_redirects: bool = True

    # Cross-origin restricted environments route asset downloads via a relay
    use_cors_relay: bool = False
    cors_relay_url: str = DEFAULT_CORS_RELAY_URL

    # Body text the hosting service puts on its missing-asset page
    not_found_marker: str = DEFAULT_NOT_FOUND_MARKER

    @classmethod
    def from_env(cls) -> "Settings":
        vault = (os.getenv("VAULT_PATH") or "").strip() or "."
        plugins_root = (os.getenv("PLUGINS_ROOT") or "").strip().strip("/") or DEFAULT_PLUGINS_ROOT
        timeout = _optional_float_env("HTTP_TIMEOUT_SECONDS")
        redirects = _truthy(os.getenv("HTTP_FOLLOW_REDIRECTS", "true"))
        relay = _truthy(os.getenv("USE_CORS_RELAY"))
        relay_url = (os.getenv("CORS_RELAY_URL") or "").strip() or DEFAULT_CORS_RELAY_URL
        marker = os.getenv("NOT_FOUND_MARKER") or DEFAULT_NOT_FOUND_MARKER
        return cls(
            vault_path=vault,
            plugins_root=plugins_root,
            http_timeout_seconds=timeout,
            http_follow_redirects=redirects,
            use_cors_relay=relay,
            cors_relay_url=relay_url,
            not_found_marker=marker,
        )
