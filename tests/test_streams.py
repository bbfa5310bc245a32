import pytest

from dialoguecut.streams import (
    AudioInfo,
    MediaType,
    StreamDescription,
    StreamSelection,
    SubInfo,
)


def _streams():
    return [
        StreamDescription(0, MediaType.VIDEO, codec_name="h264"),
        StreamDescription(
            1,
            MediaType.AUDIO,
            codec_name="flac",
            sample_rate=44100,
            bits_per_raw_sample=24,
            bits_per_coded_sample=32,
            bit_rate=192000,
            channels=2,
            lossless=True,
            language="jpn",
        ),
        StreamDescription(
            2,
            MediaType.AUDIO,
            codec_name="aac",
            sample_rate=0,
            bits_per_raw_sample=0,
            bits_per_coded_sample=16,
            channels=6,
        ),
        StreamDescription(3, MediaType.SUBTITLE, codec_name="ass", language="eng"),
        StreamDescription(4, MediaType.VIDEO, codec_name="mjpeg"),
        StreamDescription(5, MediaType.ATTACHMENT),
    ]


@pytest.fixture
def selection():
    sel = StreamSelection()
    sel.load(_streams())
    return sel


def test_initial_state_has_nothing_selected():
    sel = StreamSelection()
    assert (sel.video_index, sel.audio_index, sel.subtitle_index, sel.sub_layer_index) == (-1, -1, -1, -1)
    assert sel.can_export_dialogue() is False


def test_load_picks_first_video_and_collects_streams(selection):
    assert selection.video_index == 0
    assert selection.has_video
    assert [a.index for a in selection.audio_streams] == [1, 2]
    assert [s.index for s in selection.sub_streams] == [3]


def test_audio_info_fields(selection):
    first, second = selection.audio_streams
    assert first.samplerate == 44100
    assert first.bitdepth == 24
    assert first.bitrate == 192
    assert first.channels == 2
    assert first.lossless is True
    assert first.codec_name == "flac"
    assert first.lang == "jpn"
    assert second.bitdepth == 16
    assert second.lang == "N/A"


def test_sub_info_fields(selection):
    assert selection.sub_streams == [SubInfo(3, "ass", "eng")]


def test_load_without_video_or_audio():
    sel = StreamSelection()
    sel.load([StreamDescription(0, MediaType.SUBTITLE, codec_name="srt")])
    assert sel.video_index == -1
    assert not sel.has_video
    assert sel.audio_streams == []
    assert sel.sub_streams[0].lang == "N/A"


def test_select_audio_returns_info(selection):
    info = selection.select_audio("1")
    assert isinstance(info, AudioInfo) and info.index == 1
    assert selection.audio_index == 1
    assert selection.select_audio(2).codec_name == "aac"
    assert selection.audio_index == 2


@pytest.mark.parametrize("index", ["", None, "-1", -3, "3", 99])
def test_select_audio_without_match_clears(selection, index):
    selection.select_audio(1)
    assert selection.select_audio(index) is None
    assert selection.audio_index == -1


def test_select_audio_rejects_non_numeric(selection):
    with pytest.raises(ValueError):
        selection.select_audio("abc")


def test_select_subtitle(selection):
    assert selection.select_subtitle("3") == SubInfo(3, "ass", "eng")
    assert selection.subtitle_index == 3
    assert selection.select_subtitle("1") is None
    assert selection.subtitle_index == -1


def test_select_sub_layer(selection):
    assert selection.select_sub_layer("4") == 4
    assert selection.sub_layer_index == 4
    assert selection.select_sub_layer("-1") is None
    assert selection.sub_layer_index == -1
    selection.select_sub_layer(2)
    assert selection.select_sub_layer("") is None
    assert selection.sub_layer_index == -1


def test_sample_rate_reported(selection):
    selection.select_audio(1)
    assert selection.sample_rate() == 44100


def test_sample_rate_falls_back(selection):
    selection.select_audio(2)
    assert selection.sample_rate() == 48000


def test_sample_rate_without_selection(selection):
    with pytest.raises(LookupError):
        selection.sample_rate()


def test_dialogue_export_needs_flag_and_audio(selection):
    assert selection.can_export_dialogue() is False
    selection.mark_dialogue_ready()
    assert selection.can_export_dialogue() is True


def test_dialogue_export_needs_audio():
    sel = StreamSelection()
    sel.load([StreamDescription(0, MediaType.VIDEO)])
    sel.mark_dialogue_ready()
    assert sel.can_export_dialogue() is False


def test_reload_clears_selection_and_flag(selection):
    selection.select_audio(1)
    selection.select_subtitle(3)
    selection.select_sub_layer(0)
    selection.mark_dialogue_ready()
    selection.load(_streams())
    assert (selection.audio_index, selection.subtitle_index, selection.sub_layer_index) == (-1, -1, -1)
    assert selection.can_export_dialogue() is False
    assert len(selection.audio_streams) == 2