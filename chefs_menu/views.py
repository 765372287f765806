"""Derived, read-only views over a menu snapshot."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Iterable

from chefs_menu.models import ALL, COURSES, Course, MenuItem, Selector, coerce_selector

_CENTS = Decimal("0.01")


def round_cents(value: Decimal) -> Decimal:
    """Round to two decimals, half away from zero, at any magnitude."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(_CENTS, rounding=ROUND_HALF_UP)


def average_price(snapshot: Iterable[MenuItem], course: Course | str) -> str:
    """
    Average price of one course, formatted with exactly two decimals.

    Rounds half away from zero. A course with no dishes averages to "0.00"
    rather than raising.
    """
    wanted = coerce_selector(course)
    if wanted == ALL:
        raise ValueError("average_price needs a specific course, not 'All'")

    prices = [item.price for item in snapshot if item.course == wanted]
    if not prices:
        return "0.00"
    mean = sum(prices, Decimal(0)) / len(prices)
    return str(round_cents(mean))


def course_averages(snapshot: Iterable[MenuItem]) -> dict[Course, str]:
    """Average price for every course, in display order."""
    items = tuple(snapshot)
    return {course: average_price(items, course) for course in COURSES}


def filter_by_course(snapshot: Iterable[MenuItem], selector: Selector) -> tuple[MenuItem, ...]:
    """Stable filter of a snapshot by course; ALL keeps everything."""
    wanted = coerce_selector(selector)
    items = tuple(snapshot)
    if wanted == ALL:
        return items
    return tuple(item for item in items if item.course == wanted)
