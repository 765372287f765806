"""In-memory menu collection and its add/remove contract."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Iterable, Iterator, Mapping

from chefs_menu.data import DEMO_MENU_CANDIDATES
from chefs_menu.models import Course, MenuCandidate, MenuItem, course_from_label

MISSING_FIELDS_MESSAGE = "Please fill all fields."
INVALID_PRICE_MESSAGE = "Price must be a valid positive number."
UNKNOWN_COURSE_MESSAGE = "Course must be one of Starter, Main or Dessert."

# Largest price a dish may carry.
MAX_PRICE = Decimal("1000000000")


class ValidationReason(str, Enum):
    """Which constraint a rejected candidate failed."""

    EMPTY_DISH_NAME = "empty_dish_name"
    EMPTY_DESCRIPTION = "empty_description"
    MISSING_COURSE = "missing_course"
    UNKNOWN_COURSE = "unknown_course"
    MISSING_PRICE = "missing_price"
    INVALID_PRICE = "invalid_price"
    NON_POSITIVE_PRICE = "non_positive_price"

    @property
    def is_missing_field(self) -> bool:
        return self in _MISSING_FIELD_REASONS


_MISSING_FIELD_REASONS = frozenset(
    {
        ValidationReason.EMPTY_DISH_NAME,
        ValidationReason.EMPTY_DESCRIPTION,
        ValidationReason.MISSING_COURSE,
        ValidationReason.MISSING_PRICE,
    }
)


class ValidationError(ValueError):
    """A candidate dish was rejected; the store is unchanged."""

    def __init__(self, reason: ValidationReason) -> None:
        self.reason = reason
        if reason.is_missing_field:
            self.message = MISSING_FIELDS_MESSAGE
        elif reason is ValidationReason.UNKNOWN_COURSE:
            self.message = UNKNOWN_COURSE_MESSAGE
        else:
            self.message = INVALID_PRICE_MESSAGE
        super().__init__(f"{self.message} ({reason.value})")

    @property
    def is_missing_field(self) -> bool:
        return self.reason.is_missing_field


class IndexOutOfRange(IndexError):
    """A removal targeted a position outside the current menu."""

    def __init__(self, index: object, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Menu index {index!r} out of range for {size} item(s)")


def _clean_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def parse_course(value: Course | str | None) -> Course:
    """Resolve a course selection or raise ValidationError."""
    if isinstance(value, Course):
        return value
    label = _clean_text(value)
    if not label:
        raise ValidationError(ValidationReason.MISSING_COURSE)
    course = course_from_label(label)
    if course is None:
        raise ValidationError(ValidationReason.UNKNOWN_COURSE)
    return course


def parse_price(value: Any) -> Decimal:
    """
    Parse a price from form text or a number.

    Text is stripped and read as a decimal literal. NaN, infinities, booleans,
    anything not strictly positive and anything above MAX_PRICE are rejected.
    """
    if value is None:
        raise ValidationError(ValidationReason.MISSING_PRICE)
    if isinstance(value, bool):
        raise ValidationError(ValidationReason.INVALID_PRICE)

    if isinstance(value, Decimal):
        price = value
    elif isinstance(value, int):
        price = Decimal(value)
    elif isinstance(value, float):
        price = Decimal(repr(value))
    else:
        text = str(value).strip()
        if not text:
            raise ValidationError(ValidationReason.MISSING_PRICE)
        try:
            price = Decimal(text)
        except InvalidOperation:
            raise ValidationError(ValidationReason.INVALID_PRICE) from None

    if not price.is_finite():
        raise ValidationError(ValidationReason.INVALID_PRICE)
    if price <= 0:
        raise ValidationError(ValidationReason.NON_POSITIVE_PRICE)
    if price > MAX_PRICE:
        raise ValidationError(ValidationReason.INVALID_PRICE)
    return price


def validate_candidate(candidate: MenuCandidate | Mapping[str, Any]) -> MenuItem:
    """Turn raw input into a MenuItem, checking fields in form order."""
    if not isinstance(candidate, MenuCandidate):
        candidate = MenuCandidate.from_mapping(candidate)

    dish_name = _clean_text(candidate.dish_name)
    if not dish_name:
        raise ValidationError(ValidationReason.EMPTY_DISH_NAME)
    description = _clean_text(candidate.description)
    if not description:
        raise ValidationError(ValidationReason.EMPTY_DESCRIPTION)

    course = parse_course(candidate.course)
    price = parse_price(candidate.price)
    return MenuItem(dish_name=dish_name, description=description, course=course, price=price)


class MenuStore:
    """Ordered, append-only-on-add menu for one session."""

    def __init__(self, items: Iterable[MenuCandidate | Mapping[str, Any]] = ()) -> None:
        self._items: list[MenuItem] = []
        for candidate in items:
            self.add(candidate)

    @classmethod
    def with_demo_menu(cls) -> MenuStore:
        """Create a store pre-seeded with the demonstration dishes."""
        return cls(DEMO_MENU_CANDIDATES)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self.snapshot())

    def snapshot(self) -> tuple[MenuItem, ...]:
        """Return the current items in insertion order."""
        return tuple(self._items)

    def add(self, candidate: MenuCandidate | Mapping[str, Any]) -> tuple[MenuItem, ...]:
        """Validate a candidate and append it to the end of the menu."""
        item = validate_candidate(candidate)
        self._items.append(item)
        return self.snapshot()

    def remove(self, index: int) -> tuple[MenuItem, ...]:
        """Delete the item at a zero-based position; later items shift down."""
        size = len(self._items)
        if isinstance(index, bool) or not isinstance(index, int) or not (0 <= index < size):
            raise IndexOutOfRange(index, size)
        del self._items[index]
        return self.snapshot()
