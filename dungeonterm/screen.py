"""An in-memory character screen with text and menu rendering."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

_log = logging.getLogger(__name__)


class Color(enum.IntEnum):
    DEFAULT = 0
    BLACK = 1
    RED = 2
    GREEN = 3
    YELLOW = 4
    BLUE = 5
    MAGENTA = 6
    CYAN = 7
    WHITE = 8


@dataclass(frozen=True)
class Cell:
    ch: str = " "
    fg: Color = Color.DEFAULT
    bg: Color = Color.DEFAULT


_BLANK = Cell()


@dataclass(frozen=True)
class MenuArgs:
    """Colors of a menu and whether it shows its selection."""

    active: bool = True
    selected_fg: Color = Color.BLACK
    selected_bg: Color = Color.WHITE
    unselected_fg: Color = Color.WHITE
    unselected_bg: Color = Color.DEFAULT


@dataclass
class Menu:
    title: str
    options: list[str] = field(default_factory=list)
    selected_index: int = 0
    tailing_text: str = ""
    args: MenuArgs | None = None

    @property
    def option_count(self) -> int:
        return len(self.options)


@dataclass
class SpinnerMenu:
    """A menu whose options each carry a left and a right spinner symbol."""

    menu: Menu
    left_symbol: str = "<"
    right_symbol: str = ">"
    max_option_length: int = 0


class Screen:
    """A grid of colored cells; drawing outside it is silently clipped."""

    def __init__(self, width: int = 80, height: int = 24) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("screen dimensions must be positive")
        self.width = width
        self.height = height
        self._cells = [[_BLANK] * width for _ in range(height)]

    def clear(self) -> None:
        """Reset every cell to a blank with default colors."""
        self._cells = [[_BLANK] * self.width for _ in range(self.height)]

    def _set(self, x: int, y: int, cell: Cell) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self._cells[y][x] = cell

    def _draw(self, x: int, y: int, fg: Color, bg: Color, text: str) -> None:
        cx, cy = x, y
        for ch in text:
            if ch == "\n":
                cx, cy = x, cy + 1
                continue
            self._set(cx, cy, Cell(ch, Color(fg), Color(bg)))
            cx += 1

    def clear_line(self, y: int, x_start: int, x_end: int) -> None:
        """Blank the cells of row ``y`` from ``x_start`` up to, not including, ``x_end``."""
        for x in range(x_start, x_end):
            self._set(x, y, _BLANK)

    @staticmethod
    def _anchor(x: int, y: int) -> tuple[int, int]:
        if x < 0 or y < 0:
            _log.warning("Invalid anchor position: (%d, %d), set to (0, 0)", x, y)
            return 0, 0
        return x, y

    def print_text(self, x: int, y: int, fg: Color, bg: Color, text: str) -> None:
        """Draw ``text`` at (x, y); a negative coordinate moves the anchor to (0, 0)."""
        x, y = self._anchor(x, y)
        self._draw(x, y, fg, bg, text)

    def cell(self, x: int, y: int) -> Cell:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the screen")
        return self._cells[y][x]

    def row_text(self, y: int) -> str:
        """Return the characters of row ``y`` as a string."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} is outside the screen")
        return "".join(cell.ch for cell in self._cells[y])

    def print_simple_menu(self, x: int, y: int, menu: Menu) -> None:
        """Draw a title, one option per row and the tailing text two rows below."""
        x, y = self._anchor(x, y)
        args = menu.args or MenuArgs()
        self._draw(x, y, args.unselected_fg, args.unselected_bg, menu.title)
        y += 1
        for index, option in enumerate(menu.options):
            if index == menu.selected_index and args.active:
                self._draw(x, y, args.selected_fg, args.selected_bg, f"> {option}")
            else:
                self._draw(x, y, args.unselected_fg, args.unselected_bg, f"  {option}")
            y += 1
        self._draw(x, y + 2, args.unselected_fg, args.unselected_bg, menu.tailing_text)

    def print_spinner_menu(self, x: int, y: int, spinner: SpinnerMenu) -> None:
        """Draw a menu whose options are followed by highlighted spinner symbols.

        ``menu.selected_index`` counts two positions per option: even values
        mark the left symbol, odd values the right one.
        """
        if spinner.max_option_length < 0:
            raise ValueError("max_option_length must not be negative")
        x, y = self._anchor(x, y)
        menu = spinner.menu
        args = menu.args or MenuArgs()
        uns = (args.unselected_fg, args.unselected_bg)
        sel = (args.selected_fg, args.selected_bg)
        spinner_x = x + spinner.max_option_length + 1

        self._draw(x, y, *uns, menu.title)
        y += 1
        selected_row, selected_side = divmod(menu.selected_index, 2)
        for index, option in enumerate(menu.options):
            self._draw(x, y, *uns, option)
            marked = args.active and index == selected_row
            left = sel if marked and selected_side == 0 else uns
            right = sel if marked and selected_side == 1 else uns
            self._draw(spinner_x, y, *left, spinner.left_symbol)
            self._draw(spinner_x + 2, y, *right, spinner.right_symbol)
            y += 1
        self._draw(x, y + 2, *uns, menu.tailing_text)