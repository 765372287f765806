"""Add-dish form modal screen."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from chefs_menu.models import COURSES, Course, MenuCandidate
from chefs_menu.store import ValidationError

_TEXT_FIELDS = ("dish_name", "description", "price")
_FIELD_ORDER = ("dish_name", "description", "course", "price")
_FIELD_LABELS = {
    "dish_name": "Dish Name",
    "description": "Description",
    "course": "Course",
    "price": "Price",
}
_FIELD_LIMITS = {"dish_name": 60, "description": 200, "price": 12}


class AddItemModal(ModalScreen[bool]):
    """Collect a new dish and hand it to the menu. Dismisses with True once added."""

    CSS = """
    AddItemModal {
        align: center middle;
        background: $background 60%;
    }

    #add-dialog {
        width: 72;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #add-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #add-form {
        color: white;
        margin-bottom: 1;
    }

    #add-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #add-help {
        color: #dddddd;
    }
    """

    def __init__(self, submit: Callable[[MenuCandidate], object]) -> None:
        super().__init__()
        self.submit = submit
        self.values: dict[str, str] = {name: "" for name in _TEXT_FIELDS}
        self.course: Course | None = None
        self.field_index = 0
        self.error = ""

    @property
    def current_field(self) -> str:
        return _FIELD_ORDER[self.field_index]

    def compose(self) -> ComposeResult:
        with Container(id="add-dialog"):
            yield Static("Add New Menu Item", id="add-title")
            yield Static(id="add-form")
            yield Static(id="add-error")
            yield Static(
                "Tab/↑/↓ move. ←/→ pick course. Enter add. Backspace delete. Esc cancel.",
                id="add-help",
            )

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        event.stop()

        if event.key in {"escape", "ctrl+c"}:
            self.dismiss(False)
            return

        if event.key == "enter":
            self._confirm()
            return

        if event.key in {"tab", "down"}:
            self._move_field(1)
            return

        if event.key in {"shift+tab", "up"}:
            self._move_field(-1)
            return

        field = self.current_field
        if field == "course":
            if event.key in {"left", "right"}:
                self._cycle_course(-1 if event.key == "left" else 1)
            return

        if event.key == "backspace":
            if self.values[field]:
                self.values[field] = self.values[field][:-1]
                self.error = ""
                self._refresh_content()
            return

        if event.is_printable and event.character:
            limit = _FIELD_LIMITS[field]
            if len(self.values[field]) < limit:
                self.values[field] += event.character
                self.error = ""
            else:
                self.error = f"{_FIELD_LABELS[field]} is limited to {limit} characters."
            self._refresh_content()

    def _move_field(self, delta: int) -> None:
        self.field_index = (self.field_index + delta) % len(_FIELD_ORDER)
        self._refresh_content()

    def _cycle_course(self, delta: int) -> None:
        # Position 0 is the empty "Select Course" choice.
        choices: list[Course | None] = [None, *COURSES]
        idx = choices.index(self.course)
        self.course = choices[(idx + delta) % len(choices)]
        self.error = ""
        self._refresh_content()

    def candidate(self) -> MenuCandidate:
        """Current form buffer as a raw candidate."""
        return MenuCandidate(
            dish_name=self.values["dish_name"],
            description=self.values["description"],
            course=self.course or "",
            price=self.values["price"],
        )

    def _confirm(self) -> None:
        try:
            self.submit(self.candidate())
        except ValidationError as exc:
            self.error = exc.message
            self._refresh_content()
            return

        self.dismiss(True)

    def _refresh_content(self) -> None:
        form = Text()
        for idx, field in enumerate(_FIELD_ORDER):
            if idx > 0:
                form.append("\n")
            active = field == self.current_field
            pointer = "➤ " if active else "  "
            form.append(f"{pointer}{_FIELD_LABELS[field]}: ", style="bold" if active else "")
            if field == "course":
                label = self.course.value if self.course is not None else "Select Course"
                form.append(f"‹ {label} ›" if active else label)
            else:
                cursor = "|" if active else ""
                form.append(f"{self.values[field]}{cursor}")

        self.query_one("#add-form", Static).update(form)
        self.query_one("#add-error", Static).update(self.error or "")
