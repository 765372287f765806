"""Static demo menu data."""

from __future__ import annotations

from chefs_menu.constant import COURSE_BADGE_STYLES, COURSE_PLURAL_LABELS, DEMO_MENU
from chefs_menu.models import Course, MenuCandidate

DEMO_MENU_CANDIDATES: list[MenuCandidate] = [MenuCandidate.from_mapping(raw) for raw in DEMO_MENU]


def plural_label_for_course(course: Course) -> str:
    """Heading label for a course, e.g. "Starters"."""
    return COURSE_PLURAL_LABELS.get(course.value, f"{course.value}s")


def badge_style_for_course(course: Course) -> str:
    """Badge style for a course tag."""
    return COURSE_BADGE_STYLES.get(course.value, "bold")
