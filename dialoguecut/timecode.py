"""Conversion between millisecond offsets and ``HH:mm:ss.zzz`` time strings."""

from __future__ import annotations

import re

_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND
_MS_PER_HOUR = 60 * _MS_PER_MINUTE
_MS_PER_DAY = 24 * _MS_PER_HOUR

_TIME_PATTERN = re.compile(r"(\d{2}):(\d{2}):(\d{2})\.(\d{3})")


def milliseconds_to_string(ms: int) -> str:
    """Format ``ms`` as ``HH:mm:ss.zzz`` on a 24-hour clock.

    Values outside a single day wrap around midnight, in both directions.
    """
    ms = int(ms) % _MS_PER_DAY
    hours, ms = divmod(ms, _MS_PER_HOUR)
    minutes, ms = divmod(ms, _MS_PER_MINUTE)
    seconds, millis = divmod(ms, _MS_PER_SECOND)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"


def string_to_milliseconds(text: str) -> int:
    """Parse an ``HH:mm:ss.zzz`` time of day into milliseconds.

    Raises ValueError if the text is not a valid time of day.
    """
    match = _TIME_PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"not a time in HH:mm:ss.zzz form: {text!r}")

    hours, minutes, seconds, millis = (int(group) for group in match.groups())
    if hours >= 24 or minutes >= 60 or seconds >= 60:
        raise ValueError(f"time of day out of range: {text!r}")

    return (
        hours * _MS_PER_HOUR
        + minutes * _MS_PER_MINUTE
        + seconds * _MS_PER_SECOND
        + millis
    )