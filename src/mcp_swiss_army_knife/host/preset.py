from __future__ import annotations

from typing import Dict, List, Optional

from .base import PromptField


class PresetUI:
    """
    HostUI for non-interactive hosts: prompts are answered from preset values
    (falling back to each field's default) and messages are collected in order.
    """

    def __init__(self, values: Optional[Dict[str, Optional[str]]] = None, dismiss: bool = False):
        self.values = dict(values or {})
        self.dismiss = dismiss
        self.prompts: List[List[PromptField]] = []
        self.messages: List[str] = []

    def prompt_for_text(self, fields: List[PromptField]) -> Optional[Dict[str, str]]:
        self.prompts.append(list(fields))
        if self.dismiss:
            return None
        answers: Dict[str, str] = {}
        for f in fields:
            v = self.values.get(f.name)
            answers[f.name] = f.default if v is None else v
        return answers

    def show_message(self, text: str) -> None:
        self.messages.append(text)

    @property
    def last_message(self) -> Optional[str]:
        return self.messages[-1] if self.messages else None
