"""Vault backed by a plain directory on disk."""

import logging
from pathlib import Path, PurePosixPath

from ..errors import FilesystemError

log = logging.getLogger("mcp.swiss.vault")


class LocalVault:
    """Vault rooted at a local directory.

    Paths are resolved against the root; anything that would land outside it
    is refused.
    """

    def __init__(self, root: str):
        if not root:
            raise FilesystemError("Vault path cannot be empty")
        self.root = Path(root).expanduser().resolve()

    def resolve(self, path: str) -> Path:
        """Map a vault-relative path to an absolute one inside the root.

        Raises:
            FilesystemError: If the path escapes the vault root
        """
        rel = PurePosixPath(str(path).replace("\\", "/").lstrip("/"))
        resolved = (self.root / rel).resolve()
        try:
            resolved.relative_to(self.root)
        except ValueError:
            raise FilesystemError(f"Path escapes vault: {path}", data={"path": path})
        return resolved

    def exists(self, path: str) -> bool:
        return self.resolve(path).exists()

    def create_folder(self, path: str) -> None:
        target = self.resolve(path)
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError(f"Failed to create folder {path}: {e}", data={"path": path}) from e
        log.debug("vault.mkdir", extra={"path": path})

    def write_file(self, path: str, content: str) -> None:
        target = self.resolve(path)
        try:
            target.write_text(content, encoding="utf-8")
        except OSError as e:
            raise FilesystemError(f"Failed to write {path}: {e}", data={"path": path}) from e
        log.debug("vault.write", extra={"path": path, "chars": len(content)})

    def read_file(self, path: str) -> str:
        target = self.resolve(path)
        try:
            return target.read_text(encoding="utf-8")
        except OSError as e:
            raise FilesystemError(f"Failed to read {path}: {e}", data={"path": path}) from e


class VaultDocument:
    """A vault file viewed as the currently open document."""

    def __init__(self, vault: LocalVault, path: str):
        self.vault = vault
        self.path = path

    def get_value(self) -> str:
        return self.vault.read_file(self.path)

    def set_value(self, text: str) -> None:
        self.vault.write_file(self.path, text)
