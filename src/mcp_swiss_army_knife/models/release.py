# File: src/mcp_swiss_army_knife/models/release.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ResolvedRelease(BaseModel):
    """
    A release page the hosting service redirected us to, broken into its parts.
    download_base_url is the tag page rewritten to the asset download prefix.
    """
    model_config = ConfigDict(frozen=True)

    release_url: str = Field(min_length=1, description="Final tag-scoped URL after redirects")
    download_base_url: str = Field(min_length=1)
    owner: str = Field(min_length=1)
    plugin_name: str = Field(min_length=1, description="Repository name, used as the install folder")
    tag: str = Field(min_length=1)


class AssetFile(BaseModel):
    name: str = Field(min_length=1)
    content: str


class InstallResult(BaseModel):
    plugin_name: str
    directory: str
    files: List[str] = Field(default_factory=list)


class InstallOutcome(BaseModel):
    ok: bool
    message: str
    version: Optional[str] = None
    release: Optional[ResolvedRelease] = None
    result: Optional[InstallResult] = None
    error: Optional[Dict[str, Any]] = None
