"""Stream discovery and selection for an opened media file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union

logger = logging.getLogger(__name__)

_DEFAULT_SAMPLE_RATE = 48000
_UNKNOWN_LANGUAGE = "N/A"


class MediaType(Enum):
    """Kind of data a container stream carries."""

    UNKNOWN = "unknown"
    VIDEO = "video"
    AUDIO = "audio"
    DATA = "data"
    SUBTITLE = "subtitle"
    ATTACHMENT = "attachment"


@dataclass(frozen=True)
class StreamDescription:
    """What the container reports about one of its streams."""

    index: int
    media_type: MediaType
    codec_name: str = ""
    sample_rate: int = 0
    bits_per_raw_sample: int = 0
    bits_per_coded_sample: int = 0
    bit_rate: int = 0
    channels: int = 0
    lossless: bool = False
    language: Optional[str] = None


@dataclass(frozen=True)
class AudioInfo:
    """Summary of an audio stream; ``bitrate`` is in kbit/s."""

    index: int
    samplerate: int
    bitdepth: int
    bitrate: int
    channels: int
    lossless: bool
    codec_name: str
    lang: str

    @classmethod
    def from_stream(cls, stream: StreamDescription) -> "AudioInfo":
        return cls(
            index=stream.index,
            samplerate=stream.sample_rate,
            bitdepth=stream.bits_per_raw_sample or stream.bits_per_coded_sample,
            bitrate=stream.bit_rate // 1000,
            channels=stream.channels,
            lossless=stream.lossless,
            codec_name=stream.codec_name,
            lang=stream.language or _UNKNOWN_LANGUAGE,
        )


@dataclass(frozen=True)
class SubInfo:
    """Summary of a subtitle stream."""

    index: int
    codec_name: str
    lang: str

    @classmethod
    def from_stream(cls, stream: StreamDescription) -> "SubInfo":
        return cls(
            index=stream.index,
            codec_name=stream.codec_name,
            lang=stream.language or _UNKNOWN_LANGUAGE,
        )


_Index = Union[int, str, None]


def _parse_index(index: _Index) -> Optional[int]:
    """Return the index as an int, or None when nothing was chosen."""
    if index is None:
        return None
    if isinstance(index, str):
        if not index.strip():
            return None
        return int(index)
    return int(index)


class StreamSelection:
    """The streams of the open file and the user's choice among them.

    An index of -1 means that nothing of that kind is selected.
    """

    def __init__(self) -> None:
        self.streams: list[StreamDescription] = []
        self.audio_streams: list[AudioInfo] = []
        self.sub_streams: list[SubInfo] = []
        self.video_index = -1
        self.audio_index = -1
        self.subtitle_index = -1
        self.sub_layer_index = -1
        self.dialogue_ready = False

    @property
    def has_video(self) -> bool:
        return self.video_index != -1

    def load(self, streams: Iterable[StreamDescription]) -> None:
        """Replace the known streams with those of a newly opened file.

        Clears every selection and invalidates any prepared dialogue. The
        first video stream found becomes the selected video.
        """
        self.streams = list(streams)
        self.audio_streams = []
        self.sub_streams = []
        self.video_index = -1
        self.audio_index = -1
        self.subtitle_index = -1
        self.sub_layer_index = -1
        self.dialogue_ready = False

        for position, stream in enumerate(self.streams):
            if stream.media_type is MediaType.VIDEO:
                if self.video_index == -1:
                    self.video_index = position
            elif stream.media_type is MediaType.AUDIO:
                self.audio_streams.append(AudioInfo.from_stream(stream))
            elif stream.media_type is MediaType.SUBTITLE:
                self.sub_streams.append(SubInfo.from_stream(stream))

        logger.info(
            "Found a total of %d subtitle and %d audio streams",
            len(self.sub_streams),
            len(self.audio_streams),
        )
        if not self.has_video:
            logger.warning("This file contains no video!")
        if not self.audio_streams:
            logger.warning("This file contains no audio!")
        if not self.sub_streams:
            logger.warning("This file contains no subtitles!")

    def select_audio(self, index: _Index) -> Optional[AudioInfo]:
        """Select the audio stream with ``index`` and return its summary.

        An empty, negative or unknown index leaves no audio selected and
        returns None. A non-numeric string raises ValueError.
        """
        self.audio_index = -1
        idx = _parse_index(index)
        if idx is None:
            return None
        if idx < 0:
            logger.info("No audio stream selected")
            return None
        for info in self.audio_streams:
            if info.index == idx:
                self.audio_index = idx
                return info
        return None

    def select_subtitle(self, index: _Index) -> Optional[SubInfo]:
        """Select the subtitle stream with ``index`` and return its summary.

        An empty, negative or unknown index leaves no subtitle selected and
        returns None. A non-numeric string raises ValueError.
        """
        self.subtitle_index = -1
        idx = _parse_index(index)
        if idx is None:
            return None
        if idx < 0:
            logger.info("No subtitle stream selected")
            return None
        for info in self.sub_streams:
            if info.index == idx:
                self.subtitle_index = idx
                return info
        return None

    def select_sub_layer(self, index: _Index) -> Optional[int]:
        """Select a subtitle layer; returns it, or None if none was chosen."""
        self.sub_layer_index = -1
        idx = _parse_index(index)
        if idx is None:
            return None
        if idx < 0:
            logger.info("No subtitle layer selected")
            return None
        self.sub_layer_index = idx
        return idx

    def sample_rate(self) -> int:
        """Sample rate of the selected audio, or 48000 if it reports none.

        Raises LookupError when no audio stream is selected.
        """
        for stream in self.streams:
            if stream.index == self.audio_index and self.audio_index != -1:
                if stream.sample_rate > 1:
                    return stream.sample_rate
                return _DEFAULT_SAMPLE_RATE
        raise LookupError("no audio stream selected")

    def mark_dialogue_ready(self) -> None:
        """Record that dialogue intervals are ready for the current file."""
        self.dialogue_ready = True

    def can_export_dialogue(self) -> bool:
        """Whether the file has audio and its dialogue has been prepared."""
        return bool(self.audio_streams) and self.dialogue_ready