"""Persistent user settings stored in an INI file."""

from __future__ import annotations

import configparser
from dataclasses import dataclass
from pathlib import Path

_UX = "UX"
_SUBTITLE = "Subtitle"

_DEFAULT_LANGUAGE = "hu_HU"


@dataclass(frozen=True)
class TimingSettings:
    """Subtitle timing adjustments, all in milliseconds."""

    padding_left: int = 200
    padding_right: int = 200
    offset: int = 0
    merge: int = 1000


def _to_bool(text: str) -> bool:
    return text.strip().lower() not in ("", "0", "false")


def _to_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


class Settings:
    """User settings kept in an INI file with ``UX`` and ``Subtitle`` sections.

    Opening the settings writes the colour scheme and interface language back
    at once, so the file always holds them after the first start.
    """

    def __init__(self, path) -> None:
        self.path = Path(path)
        self._parser = configparser.ConfigParser(interpolation=None)
        self._parser.optionxform = str  # keep key case as written
        if self.path.exists():
            self._parser.read(self.path, encoding="utf-8")
        self._restart_notified = False

        self.dark_mode = _to_bool(self._get(_UX, "DarkMode", "false"))
        self.set_dark_mode(self.dark_mode)

        self.language = self._get(_UX, "Language", _DEFAULT_LANGUAGE)
        self._set(_UX, "Language", self.language)
        self._save()

        self.timing = TimingSettings()

    def _get(self, section: str, key: str, default: str) -> str:
        return self._parser.get(section, key, fallback=default)

    def _set(self, section: str, key: str, value: str) -> None:
        if not self._parser.has_section(section):
            self._parser.add_section(section)
        self._parser.set(section, key, value)

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as handle:
            self._parser.write(handle, space_around_delimiters=False)

    def load_timing(self) -> TimingSettings:
        """Read the subtitle timing settings, falling back to the defaults."""
        defaults = TimingSettings()
        self.timing = TimingSettings(
            padding_left=_to_int(self._get(_SUBTITLE, "PaddingLeft", str(defaults.padding_left))),
            padding_right=_to_int(self._get(_SUBTITLE, "PaddingRight", str(defaults.padding_right))),
            offset=_to_int(self._get(_SUBTITLE, "Offset", str(defaults.offset))),
            merge=_to_int(self._get(_SUBTITLE, "Merge", str(defaults.merge))),
        )
        return self.timing

    def update_timing(self, timing: TimingSettings) -> None:
        """Store new subtitle timing settings."""
        self.timing = timing
        self._set(_SUBTITLE, "PaddingLeft", str(int(timing.padding_left)))
        self._set(_SUBTITLE, "PaddingRight", str(int(timing.padding_right)))
        self._set(_SUBTITLE, "Offset", str(int(timing.offset)))
        self._set(_SUBTITLE, "Merge", str(int(timing.merge)))
        self._save()

    def set_language(self, language: str) -> bool:
        """Store the interface language.

        The change takes effect after a restart. Returns True the first time
        a restart is called for, and False on later changes.
        """
        self.language = str(language)
        self._set(_UX, "Language", self.language)
        self._save()

        if self._restart_notified:
            return False
        self._restart_notified = True
        return True

    def set_dark_mode(self, enabled: bool) -> None:
        """Store whether the dark colour scheme is used."""
        self.dark_mode = bool(enabled)
        self._set(_UX, "DarkMode", "true" if self.dark_mode else "false")
        self._save()