"""Domain models for chefs-menu."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping


class Course(str, Enum):
    """Fixed menu categories. The value doubles as the display label."""

    STARTER = "Starter"
    MAIN = "Main"
    DESSERT = "Dessert"

    def __str__(self) -> str:
        return self.value


COURSES: tuple[Course, ...] = (Course.STARTER, Course.MAIN, Course.DESSERT)

ALL = "All"
"""Filter sentinel that selects every course."""

Selector = Course | str


@dataclass(frozen=True)
class MenuItem:
    """A validated dish on the menu."""

    dish_name: str
    description: str
    course: Course
    price: Decimal


@dataclass(frozen=True)
class MenuCandidate:
    """Raw form input for a dish, before validation."""

    dish_name: str | None = ""
    description: str | None = ""
    course: Course | str | None = ""
    price: Any = ""

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> MenuCandidate:
        """Build a candidate from snake_case or camelCase keys."""
        return cls(
            dish_name=raw.get("dish_name", raw.get("dishName", "")),
            description=raw.get("description", ""),
            course=raw.get("course", ""),
            price=raw.get("price", ""),
        )


def course_from_label(label: str) -> Course | None:
    """Resolve a course label (case-insensitive). Returns None if unknown."""
    wanted = label.strip().lower()
    for course in COURSES:
        if course.value.lower() == wanted:
            return course
    return None


def coerce_selector(selector: Selector) -> Course | str:
    """Normalize a filter selector to a Course or the ALL sentinel."""
    if isinstance(selector, Course):
        return selector
    if isinstance(selector, str):
        if selector.strip().lower() == ALL.lower():
            return ALL
        course = course_from_label(selector)
        if course is not None:
            return course
    raise ValueError(f"Unknown course selector: {selector!r}")
