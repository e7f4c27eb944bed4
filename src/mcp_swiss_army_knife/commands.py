from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    id: str
    name: str


REPLACE_DOUBLED_EMPTY_LINES = Command(
    id="replace-doubled-empty-lines-with-single",
    name="Replace doubled empty lines with single",
)
REMOVE_EMPTY_LINES = Command(
    id="remove-empty-lines",
    name="Remove empty lines",
)
FETCH_PLUGIN_VERSION = Command(
    id="fetch-plugin-version",
    name="Fetch plugin version",
)

COMMANDS = (REPLACE_DOUBLED_EMPTY_LINES, REMOVE_EMPTY_LINES, FETCH_PLUGIN_VERSION)
