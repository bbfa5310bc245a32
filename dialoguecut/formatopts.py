"""Encoder option presets offered for dialogue export."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CodecId(Enum):
    """Audio codecs available for export, valued by their codec names."""

    MP3 = "mp3"
    AAC = "aac"
    OPUS = "opus"
    FLAC = "flac"
    PCM_S16LE = "pcm_s16le"
    PCM_S24LE = "pcm_s24le"
    PCM_S32LE = "pcm_s32le"


@dataclass(frozen=True)
class Option:
    """A single encoder option: the codec and one key/value setting."""

    codec: CodecId
    key: str
    value: str


def _bitrates(codec: CodecId, rates: list[int]) -> list[Option]:
    return [Option(codec, "b", str(rate)) for rate in rates]


_WIDE_RATES = [
    32000, 48000, 64000, 96000, 128000, 160000, 192000,
    224000, 256000, 320000, 384000, 448000,
]


def lossy_options() -> dict[str, list[Option]]:
    """Bitrate presets for lossy formats, keyed by format name in sorted order."""
    options = {
        "mp3": _bitrates(CodecId.MP3, [96000, 128000, 192000, 256000, 320000]),
        "aac": _bitrates(CodecId.AAC, _WIDE_RATES + [512000]),
        "opus": _bitrates(CodecId.OPUS, _WIDE_RATES + [510000]),
    }
    return dict(sorted(options.items()))


def lossless_options() -> dict[str, list[Option]]:
    """Presets for lossless formats, keyed by format name in sorted order."""
    options = {
        "flac": [
            Option(CodecId.FLAC, "compression_level", str(level))
            for level in range(9)
        ],
        "wav": [
            Option(CodecId.PCM_S16LE, "format", "PCM_S16LE"),
            Option(CodecId.PCM_S24LE, "format", "PCM_S24LE"),
            Option(CodecId.PCM_S32LE, "format", "PCM_S32LE"),
        ],
    }
    return dict(sorted(options.items()))