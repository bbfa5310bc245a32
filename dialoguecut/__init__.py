"""Dialogue intervals from subtitle timings, with timecode, preset, sample, stream, settings and export helpers."""

__version__ = "1.1.2"

__all__ = [
    "timecode",
    "formatopts",
    "dialogue",
    "settings",
    "samples",
    "streams",
    "exports",
]