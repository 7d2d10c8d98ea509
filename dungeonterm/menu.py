"""Keyboard navigation for simple and spinner menus drawn on a screen."""

from __future__ import annotations

import enum

from .input import InputKind
from .screen import Menu, Screen, SpinnerMenu


class MenuResult(enum.IntEnum):
    """Outcomes of a menu step that are not an option index."""

    CLOSED = -1
    QUIT = -2


def _require_options(count: int) -> None:
    if count <= 0:
        raise ValueError("menu has no options to navigate")


def handle_simple_menu(screen: Screen, key: InputKind, x: int, y: int, menu: Menu) -> int:
    """Draw ``menu`` at (x, y), then apply ``key`` to it.

    Returns the selected index on ENTER, ``MenuResult.CLOSED`` on ESCAPE,
    ``MenuResult.QUIT`` on QUIT, and the number of options for any other
    input, which means the menu stays open.
    """
    if menu is None:
        raise TypeError("menu to handle must not be None")

    screen.print_simple_menu(x, y, menu)

    count = menu.option_count
    if key is InputKind.UP:
        _require_options(count)
        menu.selected_index = (menu.selected_index - 1 + count) % count
    elif key is InputKind.DOWN:
        _require_options(count)
        menu.selected_index = (menu.selected_index + 1) % count
    elif key is InputKind.ENTER:
        return menu.selected_index
    elif key is InputKind.ESCAPE:
        return MenuResult.CLOSED
    elif key is InputKind.QUIT:
        return MenuResult.QUIT
    return count


def handle_spinner_menu(
    screen: Screen, key: InputKind, x: int, y: int, spinner: SpinnerMenu
) -> int:
    """Draw ``spinner`` at (x, y), then apply ``key`` to it.

    The selection has two positions per option: even indices mark the left
    symbol, odd indices the right one. UP and DOWN move between options and
    keep the side; LEFT and RIGHT switch the side.

    Returns the selected position on ENTER, ``MenuResult.CLOSED`` on ESCAPE,
    ``MenuResult.QUIT`` on QUIT, and twice the number of options for any
    other input, which means the menu stays open.
    """
    if spinner is None:
        raise TypeError("spinner menu to handle must not be None")
    if spinner.menu is None:
        raise TypeError("spinner menu has no menu")

    screen.print_spinner_menu(x, y, spinner)

    menu = spinner.menu
    positions = menu.option_count * 2
    if key is InputKind.UP:
        _require_options(positions)
        menu.selected_index = (menu.selected_index - 2 + positions) % positions
    elif key is InputKind.DOWN:
        _require_options(positions)
        menu.selected_index = (menu.selected_index + 2) % positions
    elif key is InputKind.LEFT:
        if menu.selected_index % 2 != 0:
            menu.selected_index -= 1
    elif key is InputKind.RIGHT:
        if menu.selected_index % 2 == 0:
            menu.selected_index += 1
    elif key is InputKind.ENTER:
        return menu.selected_index
    elif key is InputKind.ESCAPE:
        return MenuResult.CLOSED
    elif key is InputKind.QUIT:
        return MenuResult.QUIT
    return positions