"""Removal confirmation modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static


class ConfirmRemoveModal(ModalScreen[bool]):
    """Ask before removing a dish. Dismisses with True to confirm."""

    CSS = """
    ConfirmRemoveModal {
        align: center middle;
        background: $background 60%;
    }

    #confirm-dialog {
        width: 56;
        height: auto;
        border: round $error;
        background: $panel;
        padding: 1 2;
    }

    #confirm-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #confirm-prompt {
        color: white;
        margin-bottom: 1;
    }

    #confirm-help {
        color: #dddddd;
    }
    """

    def __init__(self, dish_name: str) -> None:
        super().__init__()
        self.dish_name = dish_name

    def compose(self) -> ComposeResult:
        with Container(id="confirm-dialog"):
            yield Static("Remove Item", id="confirm-title")
            yield Static(f'Remove "{self.dish_name}" from menu?', id="confirm-prompt")
            yield Static("Y/Enter remove. N/Esc cancel.", id="confirm-help")

    def on_key(self, event: Key) -> None:
        if event.key in {"y", "enter"}:
            self.dismiss(True)
            event.stop()
            return

        if event.key in {"n", "escape", "q", "ctrl+c"}:
            self.dismiss(False)
            event.stop()
            return

        # Swallow everything else so the menu underneath stays put.
        event.stop()
