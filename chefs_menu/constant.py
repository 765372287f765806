"""Editable static menu configuration."""

from __future__ import annotations

COURSE_PLURAL_LABELS: dict[str, str] = {
    "Starter": "Starters",
    "Main": "Mains",
    "Dessert": "Desserts",
}

COURSE_BADGE_STYLES: dict[str, str] = {
    "Starter": "bold #0b1f0f on #5fbf72",
    "Main": "bold #ffffff on #b23a48",
    "Dessert": "bold #ffffff on #2f6db5",
}

# Seed dishes shown to guests when the demo menu is enabled.
DEMO_MENU: list[dict[str, object]] = [
    {
        "dish_name": "Tomato Soup",
        "description": "Fresh tomatoes, herbs, and cream",
        "course": "Starter",
        "price": "45",
    },
    {
        "dish_name": "Grilled Chicken",
        "description": "Succulent chicken with herbs and spices",
        "course": "Main",
        "price": "120",
    },
    {
        "dish_name": "Chocolate Brownie",
        "description": "Rich chocolate brownie with ice cream",
        "course": "Dessert",
        "price": "55",
    },
]
