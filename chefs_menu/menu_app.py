"""Main Textual app class."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from chefs_menu.add_item_modal import AddItemModal
from chefs_menu.config import DEBUG_LOG_PATH, SEED_DEMO_MENU
from chefs_menu.confirm_remove_modal import ConfirmRemoveModal
from chefs_menu.models import ALL, COURSES, Course, MenuCandidate, MenuItem
from chefs_menu.rendering import format_filter_bar, format_menu_cards, format_overview
from chefs_menu.store import IndexOutOfRange, MenuStore, ValidationError
from chefs_menu.views import filter_by_course

_FILTER_CHOICES: tuple[Course | str, ...] = (ALL, *COURSES)
_CARD_HEIGHT = 4


class ChefsMenuApp(App):
    """A Textual app for managing the menu and letting guests browse it by course."""

    TITLE = "THE Chef's Menu"
    SUB_TITLE = "Starters / Mains / Desserts"

    CSS = """
    Screen {
        layout: vertical;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: 3;
    }

    #menu-pane {
        height: 1fr;
        border: round $primary;
        padding: 1;
    }

    #overview {
        height: auto;
        margin-bottom: 1;
    }

    #filter-bar {
        height: auto;
        margin-bottom: 1;
    }

    #menu-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    active_view = reactive("home")
    selected_index = reactive(None)
    course_filter = reactive(ALL)

    BINDINGS = [
        ("up", "move_selection(-1)", "Previous dish"),
        ("down", "move_selection(1)", "Next dish"),
        ("left", "cycle_filter(-1)", "Previous course"),
        ("right", "cycle_filter(1)", "Next course"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        store: MenuStore | None = None,
        seed_demo: bool | None = None,
        debug_log_path: str | Path | None = None,
    ) -> None:
        super().__init__()
        if store is None:
            seed = SEED_DEMO_MENU if seed_demo is None else seed_demo
            store = MenuStore.with_demo_menu() if seed else MenuStore()
        self.store = store
        self.system_status = ""
        self._debug_log_path = Path(debug_log_path or DEBUG_LOG_PATH)
        self._log_debug(f"app_init items={len(self.store)}")

    def _log_debug(self, message: str) -> None:
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self._debug_log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._debug_log_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except OSError:
            # Logging must never interfere with app flow.
            return

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="status-bar")
        with Vertical(id="menu-pane"):
            yield Static("Menu Overview", id="pane-title", classes="pane-title")
            yield Static(id="overview")
            yield Static(id="filter-bar")
            yield Static(id="menu-list")

    def on_mount(self) -> None:
        self._refresh_all()

    def _modal_open(self) -> bool:
        return isinstance(self.screen, ModalScreen)

    def on_key(self, event: Key) -> None:
        if self._modal_open():
            return

        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        key = event.character.lower()
        if key == "h":
            self._set_view("home")
        elif key == "g":
            self._set_view("filter")
        elif key == "a":
            self._open_add_form()
        elif key == "j":
            self.action_move_selection(1)
        elif key == "k":
            self.action_move_selection(-1)
        elif key == "d":
            self._confirm_remove_selected()
        elif key == "c":
            self.action_cycle_filter(1)
        else:
            return
        event.stop()

    def action_move_selection(self, delta: int) -> None:
        if self._modal_open() or self.active_view != "home":
            return
        total = len(self.store)
        if not total:
            return

        if self.selected_index is None:
            self.selected_index = 0 if delta > 0 else total - 1
        else:
            self.selected_index = (self.selected_index + delta) % total
        self._refresh_menu()

    def action_cycle_filter(self, delta: int) -> None:
        if self._modal_open() or self.active_view != "filter":
            return
        idx = _FILTER_CHOICES.index(self.course_filter)
        self.course_filter = _FILTER_CHOICES[(idx + delta) % len(_FILTER_CHOICES)]
        self._log_debug(f"filter_changed selector={self.course_filter!s}")
        self._refresh_all()

    def _set_view(self, view: str) -> None:
        if view == self.active_view:
            return
        self.active_view = view
        self.system_status = ""
        self._log_debug(f"view_changed view={view}")
        self._refresh_all()

    def add_candidate(self, candidate: MenuCandidate) -> MenuItem:
        """Add a dish through the store; ValidationError propagates to the form."""
        try:
            snapshot = self.store.add(candidate)
        except ValidationError as exc:
            self._log_debug(f"add_rejected reason={exc.reason.value}")
            raise
        item = snapshot[-1]
        self.system_status = f'Added "{item.dish_name}"'
        self._log_debug(f"item_added dish={item.dish_name!r} course={item.course!s} items={len(snapshot)}")
        return item

    def _open_add_form(self) -> None:
        self.push_screen(AddItemModal(self.add_candidate), self._on_add_closed)

    def _on_add_closed(self, added: bool | None) -> None:
        if added:
            self.active_view = "home"
            self.selected_index = len(self.store) - 1
        self._refresh_all()

    def _selected_item(self) -> MenuItem | None:
        snapshot = self.store.snapshot()
        if self.selected_index is None or not (0 <= self.selected_index < len(snapshot)):
            return None
        return snapshot[self.selected_index]

    def _confirm_remove_selected(self) -> None:
        if self.active_view != "home":
            return
        item = self._selected_item()
        if item is None:
            self.system_status = "Select a dish with J/K first"
            self._refresh_status()
            return
        self.push_screen(ConfirmRemoveModal(item.dish_name), self._on_remove_answered)

    def _on_remove_answered(self, confirmed: bool | None) -> None:
        if not confirmed or self.selected_index is None:
            self._refresh_all()
            return

        idx = self.selected_index
        removed = self._selected_item()
        try:
            snapshot = self.store.remove(idx)
        except IndexOutOfRange as exc:
            self.system_status = str(exc)
            self._log_debug(f"remove_rejected index={idx} size={exc.size}")
            self.selected_index = None
            self._refresh_all()
            return

        if removed is not None:
            self.system_status = f'Removed "{removed.dish_name}"'
        self._log_debug(f"item_removed index={idx} items={len(snapshot)}")
        self.selected_index = min(idx, len(snapshot) - 1) if snapshot else None
        self._refresh_all()

    def visible_items(self) -> tuple[MenuItem, ...]:
        """Items for the active view."""
        snapshot = self.store.snapshot()
        if self.active_view == "filter":
            return filter_by_course(snapshot, self.course_filter)
        return snapshot

    def _refresh_all(self) -> None:
        self._refresh_status()
        self._refresh_menu()

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        if self.active_view == "filter":
            hint = "Guest filter. ←/→ or C change course. H home, A add, Ctrl+Q quit."
        else:
            hint = "J/K select, D remove. A add, G guest filter, Ctrl+Q quit."
        bar.update(f"{hint}\n{self.system_status or 'Ready'}")

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height // _CARD_HEIGHT)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            start = selected - rows // 2
            start = max(0, start)
            start = min(start, total - rows)

        return (start, start + rows)

    def _refresh_menu(self) -> None:
        try:
            title = self.query_one("#pane-title", Static)
            overview = self.query_one("#overview", Static)
            filter_bar = self.query_one("#filter-bar", Static)
            menu_list = self.query_one("#menu-list", Static)
        except NoMatches:
            return

        snapshot = self.store.snapshot()
        if self.active_view == "filter":
            title.update("Guest Menu Filter")
            overview.display = False
            filter_bar.display = True
            filter_bar.update(format_filter_bar(self.course_filter))
        else:
            title.update("Menu Overview")
            overview.display = True
            filter_bar.display = False
            overview.update(format_overview(snapshot))

        items = self.visible_items()
        if not items:
            empty = "No menu items to display." if self.active_view == "filter" else "No menu items added yet."
            self.selected_index = None
            menu_list.update(empty)
            return

        selected = self.selected_index if self.active_view == "home" else None
        if selected is not None and selected >= len(items):
            selected = self.selected_index = len(items) - 1

        start, end = self._window_bounds(len(items), self._visible_rows(menu_list), selected)
        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")
        window_selected = None if selected is None else selected - start
        lines.append_text(format_menu_cards(items[start:end], window_selected))
        if end < len(items):
            lines.append("\n⋮", style="dim")
        menu_list.update(lines)
