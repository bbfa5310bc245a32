# dialoguecut

Tools for finding the spoken parts of a video from its subtitle track.
Given subtitle entries with start and end times, `dialoguecut` works out
which stretches of audio hold dialogue: each line is shifted by an offset,
padded on the left and right, and neighbouring lines closer together than a
minimum gap are merged into one interval.

Alongside that it offers timecode conversion, encoder option presets,
first-channel sample extraction for waveforms, stream selection bookkeeping,
persistent settings and small helpers for exports.

## Installation

```
pip install dialoguecut
```

The package has no runtime dependencies.

## Dialogue intervals

```python
from dialoguecut.dialogue import SubEntry, process_dialogue

subs = [
    SubEntry(0, 1000, "This subtitle lasted for 1 second."),
    SubEntry(1000, 1500, "No gap, yet a new line."),
    SubEntry(2100, 5000, "A slight pause."),
    SubEntry(10000, 12000, "After a longer pause."),
]

result = process_dialogue(subs, left=0, right=0, offset=0, min_gap=1000)
result.dialogue   # [Interval(0, 5000), Interval(10000, 12000)]
result.subtitle   # each subtitle span with the offset applied
result.padding    # a before/after Interval pair for every subtitle
result.gap        # [Interval(1500, 2100)], silence merged into a dialogue span
```

`process_dialogue` returns a `DialogueResult` whose four fields are lists of
`Interval(start, end)`. All times are in milliseconds. Padding and offset may
be negative, so a padding `Interval` may have `start` greater than `end`; a
line whose padded length is not positive is left out of the dialogue. Whether
the intervals fit inside the audio track is left to the caller.

## Timecodes

```python
from dialoguecut.timecode import milliseconds_to_string, string_to_milliseconds

milliseconds_to_string(123456789)       # "10:17:36.789" (wraps at midnight)
milliseconds_to_string(-3600000)        # "23:00:00.000"
string_to_milliseconds("12:34:56.789")  # 45296789
```

`string_to_milliseconds` accepts only a valid `HH:mm:ss.zzz` time of day and
raises `ValueError` otherwise.

## Encoder presets

```python
from dialoguecut.formatopts import CodecId, lossless_options, lossy_options

lossy_options()["mp3"][0]    # Option(codec=CodecId.MP3, key="b", value="96000")
lossless_options()["flac"]   # compression levels "0" to "8"
```

`lossy_options()` holds bitrates for `aac`, `mp3` and `opus`;
`lossless_options()` holds FLAC compression levels and the three WAV sample
formats (`PCM_S16LE`, `PCM_S24LE`, `PCM_S32LE`). Both return a dict keyed by
format name in sorted order.

## Waveform samples

```python
import struct
from dialoguecut.samples import SampleFormat, first_channel_samples

data = struct.pack("=hhhh", 32767, 0, -32767, 0)   # two interleaved channels
first_channel_samples(data, SampleFormat.S16, channels=2)   # [1.0, -1.0]
```

Data is read in native byte order. Integer samples are divided by their
type's maximum, float samples are kept as they are. For planar formats
(`SampleFormat.is_planar()`) the data is taken to be the first channel's plane
and every sample is kept. A channel count below one raises `ValueError`.

## Stream selection

```python
from dialoguecut.streams import MediaType, StreamDescription, StreamSelection

selection = StreamSelection()
selection.load([
    StreamDescription(0, MediaType.VIDEO),
    StreamDescription(1, MediaType.AUDIO, codec_name="aac", sample_rate=44100,
                      bit_rate=128000, channels=2, language="eng"),
    StreamDescription(2, MediaType.SUBTITLE, codec_name="subrip"),
])

selection.select_audio("1")      # AudioInfo(index=1, ..., bitrate=128, lang="eng")
selection.select_subtitle(2)     # SubInfo(index=2, codec_name="subrip", lang="N/A")
selection.sample_rate()          # 44100
selection.mark_dialogue_ready()
selection.can_export_dialogue()  # True
```

An index of `-1` means nothing is selected. Empty, negative or unknown
indices leave the selection cleared and return `None`; `sample_rate()` falls
back to 48000 when the stream reports none and raises `LookupError` when no
audio is selected. Loading new streams clears every selection and the
dialogue-ready flag.

## Settings

```python
from dialoguecut.settings import Settings, TimingSettings

settings = Settings("settings.ini")
settings.load_timing()   # TimingSettings(padding_left=200, padding_right=200, offset=0, merge=1000)
settings.update_timing(TimingSettings(padding_left=300, padding_right=300, offset=-50, merge=800))
settings.set_dark_mode(True)
settings.set_language("en_US")   # True the first time: a restart is needed
```

Settings live in an INI file with `UX` (`DarkMode`, `Language`, default
`hu_HU`) and `Subtitle` (`PaddingLeft`, `PaddingRight`, `Offset`, `Merge`)
sections. Opening the file writes the colour scheme and language back at once.

## Export helpers

```python
from dialoguecut.exports import (
    caption_box, caption_font_size, format_filter, slide_requests, write_plaintext,
)

format_filter("Audio", "mp3,mp2")   # "Audio (*.mp3 *.mp2);;"
format_filter("Video", None)        # "Video (*);;"

slides = slide_requests("00:00:01.500 --> 00:00:03.000\nHello there")
slides[0].timestamp, slides[0].caption, slides[0].filename   # 1500, "Hello there", "1.png"

caption_font_size(3840)    # 48
caption_box(3840, 2160)    # (326, 1530, 3513, 2070)

write_plaintext("subtitles.txt", "00:00:01.500\nHello there")
```

`slide_requests` raises `ValueError` for text of fewer than two lines; a time
line that cannot be read gives a `timestamp` of `None`.

## What the package does not do

`dialoguecut` does not open, decode, demux, remux or transcode media files,
and it does not grab or render video frames. `StreamSelection` works with
`StreamDescription` values you supply, `first_channel_samples` with sample
buffers you have already decoded, and the export helpers only prepare file
names, filters, captions and layout. There is no graphical interface and no
command-line program.

## Running the tests

```
pip install "dialoguecut[test]"
pytest
```