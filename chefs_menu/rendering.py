"""Rendering helpers for menu cards and statistics."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from rich.text import Text

from chefs_menu.config import CURRENCY_SYMBOL
from chefs_menu.data import badge_style_for_course, plural_label_for_course
from chefs_menu.models import ALL, COURSES, Course, MenuItem
from chefs_menu.views import course_averages, round_cents


def format_price(price: Decimal | str, symbol: str = CURRENCY_SYMBOL) -> str:
    """Render a price with the currency prefix and two decimals."""
    if isinstance(price, str):
        return f"{symbol}{price}"
    return f"{symbol}{round_cents(price)}"


def format_course_badge(course: Course) -> Text:
    """Render a colored course tag."""
    return Text(f" {course.value} ", style=badge_style_for_course(course))


def format_menu_card(item: MenuItem, selected: bool = False) -> Text:
    """Render one dish as a multi-line card."""
    pointer = "➤ " if selected else "  "
    text = Text()
    text.append(pointer)
    text.append(item.dish_name, style="bold")
    text.append(" ")
    text.append_text(format_course_badge(item.course))
    text.append(f"\n    {item.description}")
    text.append(f"\n    {format_price(item.price)}", style="bold")
    return text


def format_menu_cards(items: Sequence[MenuItem], selected_index: int | None = None) -> Text:
    """Render a list of cards separated by blank lines."""
    text = Text()
    for idx, item in enumerate(items):
        if idx > 0:
            text.append("\n\n")
        text.append_text(format_menu_card(item, selected=idx == selected_index))
    return text


def format_overview(items: Sequence[MenuItem]) -> Text:
    """Render total count and per-course average prices."""
    text = Text()
    text.append(f"Total menu items: {len(items)}\n\n")
    text.append("Average Prices:", style="bold")
    for course, average in course_averages(items).items():
        text.append(f"\n  {plural_label_for_course(course)}: {format_price(average)}")
    return text


def format_filter_bar(selector: Course | str) -> Text:
    """Render the guest filter selector with the active choice highlighted."""
    text = Text("Course: ")
    choices: list[Course | str] = [ALL, *COURSES]
    for idx, choice in enumerate(choices):
        if idx > 0:
            text.append(" ")
        label = choice.value if isinstance(choice, Course) else choice
        if choice == selector:
            text.append(f"[{label}]", style="bold reverse")
        else:
            text.append(f" {label} ", style="dim")
    return text
