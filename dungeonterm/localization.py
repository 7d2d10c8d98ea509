"""Localized strings loaded from per-language properties files."""

from __future__ import annotations

import enum
import os
from collections.abc import Callable
from pathlib import Path

LOCAL_DIRECTORY = os.path.join("resources", "local")


class Language(enum.IntEnum):
    EN = 0
    DE = 1

    @property
    def file_name(self) -> str:
        return f"local_{self.name.lower()}.properties"


class LocalizationError(Exception):
    """Raised when the localizer is not usable or a language file cannot be read."""


class Localizer:
    """Looks up ``KEY="value"`` entries in the current language's file."""

    def __init__(
        self,
        directory: str | os.PathLike[str] = LOCAL_DIRECTORY,
        language: Language | int = Language.EN,
    ) -> None:
        self._directory = Path(directory)
        self._language = Language(language)
        self._observers: list[Callable[[], object]] = []
        self._lines: list[str] | None = None
        self._load()

    def _load(self) -> None:
        path = self._directory / self._language.file_name
        try:
            with open(path, encoding="utf-8") as handle:
                self._lines = handle.readlines()
        except OSError as exc:
            self._lines = None
            raise LocalizationError(f"failed to open local file {path}") from exc

    def _require_open(self) -> list[str]:
        if self._lines is None:
            raise LocalizationError("localizer is not initialized")
        return self._lines

    def get(self, key: str) -> str:
        """Return the localized string for ``key``, or ``key`` itself if absent."""
        key_len = len(key)
        for line in self._require_open():
            if not line or line[0] in "\n#":
                continue
            if len(line) <= key_len or line[key_len] != "=" or not line.startswith(key):
                continue
            start = line.find('"')
            if start == -1:
                continue
            end = line.find('"', start + 1)
            if end == -1:
                continue
            return line[start + 1:end]
        return key

    def set_language(self, language: Language | int) -> None:
        """Switch to ``language`` and notify every observer in registration order."""
        self._require_open()
        language = Language(language)
        self._language = language
        self._load()
        for callback in self._observers:
            callback()

    @property
    def language(self) -> Language:
        """The current language; English when the localizer is not initialized."""
        if self._lines is None:
            return Language.EN
        return self._language

    def observe(self, callback: Callable[[], object]) -> None:
        """Register ``callback`` to be called after each language change."""
        self._require_open()
        if not callable(callback):
            raise TypeError("observer must be callable")
        self._observers.append(callback)

    def close(self) -> None:
        """Drop the loaded strings and all observers."""
        self._observers.clear()
        self._lines = None

    def __enter__(self) -> Localizer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()