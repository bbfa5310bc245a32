"""Extracting the first audio channel from decoded sample buffers."""

from __future__ import annotations

import struct
from enum import Enum


class SampleFormat(Enum):
    """Decoded sample layouts: struct code, byte size, scale and planarity."""

    U8 = ("B", 255.0, False)
    S16 = ("h", 32767.0, False)
    S32 = ("i", 2147483647.0, False)
    S64 = ("q", 9223372036854775807.0, False)
    FLT = ("f", 1.0, False)
    DBL = ("d", 1.0, False)
    U8P = ("B", 255.0, True)
    S16P = ("h", 32767.0, True)
    S32P = ("i", 2147483647.0, True)
    S64P = ("q", 9223372036854775807.0, True)
    FLTP = ("f", 1.0, True)
    DBLP = ("d", 1.0, True)

    def __init__(self, code: str, scale: float, planar: bool) -> None:
        self.code = code
        self.scale = scale
        self.planar = planar
        self.itemsize = struct.calcsize("=" + code)

    def is_planar(self) -> bool:
        """Whether each channel is stored in its own plane."""
        return self.planar


def first_channel_samples(data: bytes, sample_format: SampleFormat, channels: int) -> list[float]:
    """Return the first channel of ``data`` as floats.

    For planar formats ``data`` is the first channel's plane and every sample
    is kept; for interleaved formats every ``channels``-th sample is kept.
    Integer samples are divided by their type's maximum; float samples are
    kept as they are. Bytes that do not make a whole sample are ignored.
    """
    if not isinstance(sample_format, SampleFormat):
        raise ValueError(f"unknown sample format: {sample_format!r}")
    if channels < 1:
        raise ValueError(f"channel count must be positive, got {channels}")

    view = memoryview(bytes(data))
    usable = len(view) - len(view) % sample_format.itemsize
    values = (v for (v,) in struct.iter_unpack("=" + sample_format.code, view[:usable]))

    step = 1 if sample_format.planar else channels
    scale = sample_format.scale
    if scale == 1.0:
        return [float(v) for i, v in enumerate(values) if i % step == 0]
    return [v / scale for i, v in enumerate(values) if i % step == 0]