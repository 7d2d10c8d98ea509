import pytest

from dungeonterm.screen import Cell, Color, Menu, MenuArgs, Screen, SpinnerMenu


def test_new_screen_is_blank():
    screen = Screen(10, 3)
    assert screen.row_text(1) == " " * 10
    assert screen.cell(4, 2) == Cell(" ", Color.DEFAULT, Color.DEFAULT)


def test_invalid_dimensions():
    with pytest.raises(ValueError):
        Screen(0, 5)


def test_print_text_sets_cells():
    screen = Screen(20, 5)
    screen.print_text(2, 1, Color.RED, Color.BLUE, "hello")
    assert screen.row_text(1)[2:7] == "hello"
    assert screen.cell(2, 1) == Cell("h", Color.RED, Color.BLUE)
    assert screen.cell(7, 1) == Cell()


def test_print_text_negative_anchor_moves_to_origin():
    screen = Screen(20, 5)
    screen.print_text(5, -1, Color.WHITE, Color.DEFAULT, "abc")
    assert screen.row_text(0).startswith("abc")


def test_print_text_clips_and_handles_newline():
    screen = Screen(5, 3)
    screen.print_text(3, 0, Color.WHITE, Color.DEFAULT, "abcd\nxy")
    assert screen.row_text(0) == "   ab"
    assert screen.row_text(1) == "   xy"


def test_cell_out_of_range():
    screen = Screen(5, 3)
    with pytest.raises(IndexError):
        screen.cell(5, 0)
    with pytest.raises(IndexError):
        screen.row_text(3)


def test_clear_and_clear_line():
    screen = Screen(10, 2)
    screen.print_text(0, 0, Color.GREEN, Color.DEFAULT, "abcdefgh")
    screen.clear_line(0, 2, 5)
    assert screen.row_text(0) == "ab   fgh  "
    assert screen.cell(3, 0) == Cell()
    screen.clear()
    assert screen.row_text(0) == " " * 10


def test_simple_menu_layout():
    screen = Screen(30, 10)
    menu = Menu("Title", ["one", "two"], selected_index=1, tailing_text="tail")
    screen.print_simple_menu(1, 0, menu)
    assert screen.row_text(0)[1:].rstrip() == "Title"
    assert screen.row_text(1)[1:].rstrip() == "  one"
    assert screen.row_text(2)[1:].rstrip() == "> two"
    assert screen.row_text(5)[1:].rstrip() == "tail"
    defaults = MenuArgs()
    assert screen.cell(1, 2) == Cell(">", defaults.selected_fg, defaults.selected_bg)
    assert screen.cell(1, 1) == Cell(" ", defaults.unselected_fg, defaults.unselected_bg)


def test_simple_menu_inactive_has_no_marker():
    screen = Screen(30, 10)
    menu = Menu("T", ["one", "two"], selected_index=0, args=MenuArgs(active=False))
    screen.print_simple_menu(0, 0, menu)
    assert screen.row_text(1).rstrip() == "  one"
    assert ">" not in "".join(screen.row_text(y) for y in range(10))


def test_spinner_menu_marks_left_symbol():
    screen = Screen(30, 10)
    menu = Menu("Opts", ["ab", "cd"], selected_index=2, tailing_text="end")
    spinner = SpinnerMenu(menu, "<", ">", max_option_length=4)
    screen.print_spinner_menu(0, 0, spinner)
    defaults = MenuArgs()
    assert screen.row_text(1).rstrip() == "ab   < >"
    assert screen.row_text(2).rstrip() == "cd   < >"
    assert screen.cell(5, 2) == Cell("<", defaults.selected_fg, defaults.selected_bg)
    assert screen.cell(7, 2) == Cell(">", defaults.unselected_fg, defaults.unselected_bg)
    assert screen.cell(5, 1) == Cell("<", defaults.unselected_fg, defaults.unselected_bg)
    assert screen.row_text(5).rstrip() == "end"


def test_spinner_menu_marks_right_symbol():
    screen = Screen(30, 10)
    menu = Menu("Opts", ["ab", "cd"], selected_index=1)
    spinner = SpinnerMenu(menu, "-", "+", max_option_length=2)
    screen.print_spinner_menu(0, 0, spinner)
    defaults = MenuArgs()
    assert screen.cell(3, 1) == Cell("-", defaults.unselected_fg, defaults.unselected_bg)
    assert screen.cell(5, 1) == Cell("+", defaults.selected_fg, defaults.selected_bg)


def test_spinner_menu_rejects_negative_length():
    screen = Screen(30, 10)
    spinner = SpinnerMenu(Menu("T", ["a"]), "<", ">", max_option_length=-1)
    with pytest.raises(ValueError):
        screen.print_spinner_menu(0, 0, spinner)


def test_menu_option_count():
    assert Menu("T", ["a", "b", "c"]).option_count == 3