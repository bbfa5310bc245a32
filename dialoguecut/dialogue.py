"""Turning subtitle timings into padded, merged dialogue intervals."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence


@dataclass(frozen=True)
class Interval:
    """A span of time in milliseconds; ``start`` may exceed ``end``."""

    start: int
    end: int


@dataclass(frozen=True)
class SubEntry:
    """One subtitle line with its start and end in milliseconds."""

    start: int
    end: int
    text: str = ""


@dataclass
class DialogueResult:
    """Intervals produced from a subtitle track.

    ``dialogue`` holds the merged spans to extract, ``subtitle`` the shifted
    subtitle spans, ``padding`` a before/after pair for every subtitle and
    ``gap`` the silences that were merged into a dialogue span.
    """

    dialogue: list[Interval] = field(default_factory=list)
    subtitle: list[Interval] = field(default_factory=list)
    padding: list[Interval] = field(default_factory=list)
    gap: list[Interval] = field(default_factory=list)


def process_dialogue(
    subs: Sequence[SubEntry],
    left: int,
    right: int,
    offset: int,
    min_gap: int,
) -> DialogueResult:
    """Build dialogue intervals from ``subs``.

    Each subtitle is shifted by ``offset`` and widened by ``left`` and
    ``right``; neighbouring spans separated by less than ``min_gap`` are
    merged. Spans of non-positive length are dropped from the dialogue.
    Whether the result fits the audio track is left to the caller.
    """
    result = DialogueResult()
    if not subs:
        return result

    first, *rest = subs
    start = first.start + offset - left
    end = first.end + offset + right

    result.subtitle.append(Interval(first.start + offset, first.end + offset))
    result.padding.append(Interval(start, first.start + offset))
    result.padding.append(Interval(first.end + offset, end))

    for sub in rest:
        next_start = sub.start + offset - left
        next_end = sub.end + offset + right

        result.subtitle.append(Interval(sub.start + offset, sub.end + offset))
        result.padding.append(Interval(next_start, sub.start + offset))
        result.padding.append(Interval(sub.end + offset, next_end))

        if next_start >= next_end:
            continue

        if end + min_gap <= next_start:
            if start < end:
                result.dialogue.append(Interval(start, end))
            start, end = next_start, next_end
        else:
            if start < end:
                if end < next_start:
                    result.gap.append(Interval(end, next_start))
            else:
                start = next_start
            end = next_end

    if start < end:
        result.dialogue.append(Interval(start, end))

    return result