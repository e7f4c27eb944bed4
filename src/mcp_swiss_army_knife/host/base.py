"""Capabilities the commands need from whatever hosts them."""

from typing import Dict, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class Document(Protocol):
    """The full text of the currently open document."""

    def get_value(self) -> str:
        ...

    def set_value(self, text: str) -> None:
        ...


@runtime_checkable
class Vault(Protocol):
    """Filesystem rooted at the host's storage; paths are vault-relative POSIX strings."""

    def exists(self, path: str) -> bool:
        ...

    def create_folder(self, path: str) -> None:
        """Create the folder; no error if it already exists."""
        ...

    def write_file(self, path: str, content: str) -> None:
        """Create or overwrite a text file."""
        ...

    def read_file(self, path: str) -> str:
        ...


class PromptField:
    """One text input of a prompt dialog."""

    def __init__(self, name: str, label: Optional[str] = None, default: str = ""):
        self.name = name
        self.label = label or name
        self.default = default

    def __repr__(self) -> str:
        return f"PromptField(name={self.name!r}, default={self.default!r})"


@runtime_checkable
class HostUI(Protocol):
    """Modal prompts and messages."""

    def prompt_for_text(self, fields: List[PromptField]) -> Optional[Dict[str, str]]:
        """Ask for every field; None when the user dismisses the prompt."""
        ...

    def show_message(self, text: str) -> None:
        ...
