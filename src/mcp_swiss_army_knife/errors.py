"""Error kinds raised by the release install flow."""

from typing import Any, Dict, Optional


class KnifeError(Exception):
    """Base exception for swiss-army-knife failures."""

    def __init__(self, message: str, data: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.data = data or {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for a tool response."""
        out: Dict[str, Any] = {
            "kind": type(self).__name__,
            "message": self.message,
        }
        if self.data:
            out["data"] = self.data
        return out


class ResolutionError(KnifeError):
    """Repository or version could not be resolved to a tagged release page."""


class NetworkError(KnifeError):
    """A request was rejected (connectivity, relay or transport failure)."""


class FilesystemError(KnifeError):
    """Directory or file creation failed inside the vault."""
