# dungeonterm

Building blocks for a terminal role-playing game. Each module can be used on
its own; only `dungeonterm.menu` builds on others (`input` and `screen`).
There are no third-party dependencies.

## Modules

- `dungeonterm.ringbuffer.RingBuffer(capacity=40, max_message_size=384)`:
  a bounded, thread-safe FIFO of strings. `write(message)` returns `False`
  and drops the message when the buffer is full, and cuts messages to
  `max_message_size - 1` characters. `read(timeout=None)` waits for the
  oldest message and raises `TimeoutError` if none arrives in time.
  `len(buffer)` gives the number of queued messages.

- `dungeonterm.logger`: `Logger(directory="log", max_files=5,
  max_file_size=102400)` writes lines of the form
  `[YYYY-MM-DD HH:MM:SS] [LEVEL] [module] : message` on a background thread.
  `start()` reopens the most recently modified `log-<n>.txt` in the directory
  (see `latest_file_id(directory, max_files)`, which also creates the
  directory) for appending. When a file reaches `max_file_size` the logger
  moves on to the next id, wrapping round after `max_files`, and starts that
  file afresh. `log(level, module, message, *args)` formats with `%`, uses
  `LogLevel` (`DEBUG`, `FINE`, `INFO`, `WARNING`, `ERROR`; unknown levels are
  written as `INFO`) and does nothing while the logger is not running.
  `shutdown()` writes out what is queued and closes the file. The logger is
  a context manager. `start_simple_thread(func)` runs a function on a daemon
  thread.

- `dungeonterm.memory.MemoryPool(size)`: a first-fit allocator over one byte
  area of at least 1 MiB. `alloc(size)` returns an integer offset to the
  data area, splitting the block when enough is left over; `free(ptr)`
  releases a block and merges neighbouring free blocks; `realloc(ptr,
  new_size)` moves the data to a larger block, zeroes the added bytes and
  returns the new offset, or `None` when the block is already large enough.
  `view(ptr)` gives a writable `memoryview` of an allocated block and
  `blocks()` yields `MemoryBlock` copies in address order. Failures raise
  `MemoryPoolError`. `close()` releases the pool; it is also a context
  manager.

- `dungeonterm.localization.Localizer(directory="resources/local",
  language=Language.EN)`: reads `local_en.properties` or
  `local_de.properties` and answers `get(key)` from lines of the form
  `KEY="value"`, skipping blank lines and `#` comments; an unknown key is
  returned unchanged. `set_language(language)` loads the other file and
  then calls every callback registered with `observe(callback)`, in order.
  A missing file or use after `close()` raises `LocalizationError`.

- `dungeonterm.input`: `translate_event(event)` maps a `KeyEvent` (a special
  `Key` or a character `ch`) to an `InputKind`: arrows or `w`/`a`/`s`/`d`,
  `m`, `i`, `c`, `y`/`Y`, backspace, enter, escape and Ctrl-C (`QUIT`);
  anything else is `NO_INPUT`. `InputHandler(capacity=16)` buffers up to
  `capacity - 1` inputs, dropping the oldest when full; `push_event(event)`
  records an event and `next_input()` returns the oldest input or
  `NO_INPUT`. Between `start_text_input(max_length)` and
  `end_text_input()`, typed characters (at most `max_length - 1`, backspace
  deletes) are collected and available from `text()`.

- `dungeonterm.screen`: `Screen(width=80, height=24)` is an in-memory grid
  of `Cell`s (character, foreground and background `Color`). Drawing outside
  the grid is clipped, a negative anchor is moved to (0, 0), and `\n` in
  text starts a new row at the anchor column. It offers `clear()`,
  `clear_line(y, x_start, x_end)`, `print_text(x, y, fg, bg, text)`,
  `cell(x, y)`, `row_text(y)`, `print_simple_menu(x, y, menu)` and
  `print_spinner_menu(x, y, spinner)`. A `Menu` has a title, options, a
  selected index, tailing text and optional `MenuArgs` colours; a
  `SpinnerMenu` adds left and right symbols after each option.

- `dungeonterm.menu`: `handle_simple_menu(screen, key, x, y, menu)` and
  `handle_spinner_menu(screen, key, x, y, spinner)` draw the menu, then apply
  one `InputKind`. They return the selection on `ENTER`,
  `MenuResult.CLOSED` (-1) on `ESCAPE`, `MenuResult.QUIT` (-2) on `QUIT`,
  and otherwise the number of positions (options, or twice the options for
  a spinner menu) to mean "still open". In a spinner menu `UP`/`DOWN` move
  between options and `LEFT`/`RIGHT` choose the left (even) or right (odd)
  symbol.

## Install

```
pip install .
```

## Example

```python
from dungeonterm.input import InputKind
from dungeonterm.menu import handle_simple_menu
from dungeonterm.screen import Menu, Screen

screen = Screen(80, 24)
menu = Menu(title="Main menu", options=["New game", "Load", "Quit"])

handle_simple_menu(screen, InputKind.DOWN, 2, 2, menu)
choice = handle_simple_menu(screen, InputKind.ENTER, 2, 2, menu)
print(choice)               # 1
print(screen.row_text(2))   # the row holding the menu title
```

Logging to rotating files:

```python
from dungeonterm.logger import Logger, LogLevel

with Logger("log", max_files=5, max_file_size=100 * 1024) as logger:
    logger.log(LogLevel.INFO, "Game", "started with %d players", 1)
```

## What it does not do

This package is a set of components, not a playable game. It has no command
to run, no game loop, no maps, characters, items or combat, and no saving or
loading of games. `Screen` only holds cells in memory: nothing here draws
to a real terminal or reads keys from one, so feeding `KeyEvent`s to an
`InputHandler` and showing a `Screen` is left to the program that uses it.

## Tests

```
pip install .[test]
pytest
```