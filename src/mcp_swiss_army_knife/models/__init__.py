from __future__ import annotations

from .params import LATEST, ReleaseRequest
from .release import AssetFile, InstallOutcome, InstallResult, ResolvedRelease

__all__ = [
    "LATEST",
    "ReleaseRequest",
    "AssetFile",
    "InstallOutcome",
    "InstallResult",
    "ResolvedRelease",
]
