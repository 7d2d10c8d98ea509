"""A rotating file logger whose writes happen on a background thread."""

from __future__ import annotations

import enum
import os
import re
import threading
import time
from collections.abc import Callable
from pathlib import Path
from typing import IO

from .ringbuffer import BUFFER_SIZE, MAX_HEADER_SIZE, MAX_MSG_SIZE, RingBuffer

MAX_N_FILES = 5
MAX_FILE_SIZE = 100 * 1024

LOG_DIRECTORY = "log"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_FILE_NAME_RE = re.compile(r"log-\s*([+-]?\d+)")
_POLL_INTERVAL = 0.05


class LogLevel(enum.IntEnum):
    DEBUG = 0
    FINE = 1
    INFO = 2
    WARNING = 3
    ERROR = 4


def start_simple_thread(func: Callable[[], object]) -> threading.Thread:
    """Run ``func`` on a new daemon thread and return that thread."""
    thread = threading.Thread(target=func, daemon=True)
    thread.start()
    return thread


def _log_file_name(file_id: int) -> str:
    return f"log-{file_id}.txt"


def latest_file_id(directory: str | os.PathLike[str], max_files: int = MAX_N_FILES) -> int:
    """Return the id of the most recently modified log file in ``directory``.

    The directory is created if missing. Returns 0 when no log file is found.
    """
    path = Path(directory)
    path.mkdir(parents=True, exist_ok=True)

    latest_id = 0
    latest_time = 0.0
    for entry in os.scandir(path):
        match = _FILE_NAME_RE.match(entry.name)
        if not match:
            continue
        file_id = int(match.group(1))
        if not 0 <= file_id < max_files:
            continue
        try:
            mtime = entry.stat().st_mtime
        except OSError:
            continue
        if mtime > latest_time:
            latest_time = mtime
            latest_id = file_id
    return latest_id


class Logger:
    """Writes formatted log lines to a set of rotating files in a directory."""

    def __init__(
        self,
        directory: str | os.PathLike[str] = LOG_DIRECTORY,
        max_files: int = MAX_N_FILES,
        max_file_size: int = MAX_FILE_SIZE,
    ) -> None:
        if max_files <= 0:
            raise ValueError("max_files must be positive")
        self._directory = Path(directory)
        self._max_files = max_files
        self._max_file_size = max_file_size
        self._buffer = RingBuffer(BUFFER_SIZE, MAX_MSG_SIZE)
        self._file: IO[str] | None = None
        self._file_id = 0
        self._running = False
        self._thread: threading.Thread | None = None

    @property
    def file_id(self) -> int:
        return self._file_id

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Open the latest log file for appending and start the writer thread."""
        if self._file is not None or self._running:
            return
        self._file_id = latest_file_id(self._directory, self._max_files)
        self._open_log_file(remove_existing=False)
        self._running = True
        self._thread = start_simple_thread(self._writer)

    def log(self, level: LogLevel | int, module: str, message: str, *args: object) -> None:
        """Queue a log line; does nothing while the logger is not running."""
        if self._file is None or not self._running:
            return
        try:
            level_name = LogLevel(level).name
        except ValueError:
            level_name = LogLevel.INFO.name
        text = message % args if args else message
        text = text[: MAX_MSG_SIZE - MAX_HEADER_SIZE - 1]
        timestamp = time.strftime(TIMESTAMP_FORMAT)
        self._buffer.write(f"[{timestamp}] [{level_name}] [{module}] : {text}\n")

    def shutdown(self) -> None:
        """Stop accepting messages, flush what is queued and close the file."""
        self._running = False
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def __enter__(self) -> Logger:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    def _open_log_file(self, remove_existing: bool) -> None:
        path = self._directory / _log_file_name(self._file_id)
        if remove_existing and path.exists():
            path.unlink()
        self._file = open(path, "a", encoding="utf-8")

    def _check_log_file(self) -> None:
        if self._file is None:
            return
        self._file.seek(0, os.SEEK_END)
        if self._file.tell() >= self._max_file_size:
            self._file.close()
            self._file = None
            self._file_id = (self._file_id + 1) % self._max_files
            try:
                self._open_log_file(remove_existing=True)
            except OSError:
                self._file = None

    def _writer(self) -> None:
        try:
            while True:
                try:
                    message = self._buffer.read(timeout=_POLL_INTERVAL)
                except TimeoutError:
                    if not self._running:
                        break
                    continue
                self._check_log_file()
                if self._file is not None:
                    self._file.write(message)
                    self._file.flush()
        finally:
            if self._file is not None:
                self._file.close()
                self._file = None