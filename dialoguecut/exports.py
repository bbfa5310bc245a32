"""Helpers for exporting subtitles, slide collections and remuxed streams."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dialoguecut.timecode import string_to_milliseconds

_TIMESTAMP_WIDTH = 12
_WIDE_IMAGE = 1920
_LARGE_FONT = 48
_SMALL_FONT = 24


@dataclass(frozen=True)
class SlideRequest:
    """One slide to render: a frame time, its caption and its image number.

    ``timestamp`` is None when the time line could not be read.
    """

    timestamp: Optional[int]
    caption: str
    number: int

    @property
    def filename(self) -> str:
        """Name of the PNG image this slide is saved as."""
        return f"{self.number}.png"


def format_filter(prefix: str, extensions: Optional[str]) -> str:
    """Build a file dialog filter entry such as ``Audio (*.mp3);;``.

    ``extensions`` is a comma separated list as reported by a muxer, or
    None when no matching output format is known, which gives ``(*)``.
    """
    if extensions is None:
        patterns = "*"
    else:
        patterns = " ".join(f"*.{ext}" for ext in extensions.split(","))
    return f"{prefix} ({patterns});;"


def slide_requests(text: str) -> list[SlideRequest]:
    """Read subtitle text of alternating time and caption lines into slides.

    Each time line starts with an ``HH:mm:ss.zzz`` timestamp. A trailing
    line without a partner is ignored. Raises ValueError when the text has
    fewer than two lines.
    """
    lines = text.split("\n")
    if len(lines) < 2:
        raise ValueError("There is nothing to make a visual novel out of!")

    requests = []
    for number, (time_line, caption) in enumerate(zip(lines[::2], lines[1::2]), start=1):
        try:
            timestamp: Optional[int] = string_to_milliseconds(time_line[:_TIMESTAMP_WIDTH])
        except ValueError:
            timestamp = None
        requests.append(SlideRequest(timestamp, caption, number))
    return requests


def caption_font_size(width: int) -> int:
    """Point size of the caption font for an image ``width`` pixels wide."""
    return _LARGE_FONT if width > _WIDE_IMAGE else _SMALL_FONT


def caption_box(width: int, height: int) -> tuple[int, int, int, int]:
    """Rectangle ``(left, top, right, bottom)`` the caption is drawn in.

    The box keeps the same margin on the left and right and covers the
    lower part of the image.
    """
    left = 17 * width // 200
    top = 17 * height // 24
    right = (200 - 17) * width // 200
    bottom = 23 * height // 24
    return left, top, right, bottom


def write_plaintext(path: Union[str, Path], text: str) -> Path:
    """Write ``text`` to ``path``, replacing any existing content.

    Raises OSError when the file cannot be written.
    """
    target = Path(path)
    with target.open("w", encoding="utf-8") as handle:
        handle.write(text)
    return target