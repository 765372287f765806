"""Entry point for the chefs-menu Textual app."""

from __future__ import annotations

from chefs_menu.menu_app import ChefsMenuApp


def main() -> None:
    """Run the Textual application."""
    ChefsMenuApp().run()


if __name__ == "__main__":
    main()
