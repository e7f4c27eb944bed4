from __future__ import annotations

from .base import Document, HostUI, PromptField, Vault
from .preset import PresetUI
from .vault import LocalVault, VaultDocument

__all__ = [
    "Document",
    "HostUI",
    "PromptField",
    "Vault",
    "PresetUI",
    "LocalVault",
    "VaultDocument",
]
