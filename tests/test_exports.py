import pytest

from dialoguecut.exports import (
    SlideRequest,
    caption_box,
    caption_font_size,
    format_filter,
    slide_requests,
    write_plaintext,
)
from dialoguecut.timecode import string_to_milliseconds


def test_format_filter_single_extension():
    assert format_filter("Audio", "mp3") == "Audio (*.mp3);;"


def test_format_filter_several_extensions():
    assert format_filter("Video", "mp4,m4a") == "Video (*.mp4 *.m4a);;"


def test_format_filter_without_format():
    assert format_filter("Subtitle", None) == "Subtitle (*);;"


def test_format_filter_counts_patterns():
    result = format_filter("Audio", "a,b,c,d")
    assert result.count("*.") == 4
    assert result.startswith("Audio (")
    assert result.endswith(");;")


def test_slide_requests_pairs_lines():
    text = "00:00:01.500 --> 00:00:02.000\nHello\n00:01:00.250 --> 00:01:01.000\nWorld"
    requests = slide_requests(text)
    assert [r.caption for r in requests] == ["Hello", "World"]
    assert [r.number for r in requests] == [1, 2]
    assert requests[0].timestamp == string_to_milliseconds("00:00:01.500")
    assert requests[1].timestamp == string_to_milliseconds("00:01:00.250")


def test_slide_requests_ignores_unpaired_trailing_line():
    requests = slide_requests("00:00:00.000\nfirst\n00:00:05.000")
    assert len(requests) == 1
    assert requests[0].caption == "first"


def test_slide_requests_invalid_time_gives_none():
    requests = slide_requests("garbage line\ncaption")
    assert requests[0].timestamp is None
    assert requests[0].caption == "caption"


@pytest.mark.parametrize("text", ["", "only one line"])
def test_slide_requests_too_short(text):
    with pytest.raises(ValueError):
        slide_requests(text)


def test_slide_filename_uses_number():
    request = SlideRequest(0, "x", 7)
    assert request.filename.endswith(".png")
    assert request.filename.startswith("7")


@pytest.mark.parametrize(
    "width, expected",
    [(1920, 24), (1280, 24), (1921, 48), (3840, 48)],
)
def test_caption_font_size(width, expected):
    assert caption_font_size(width) == expected


def test_caption_box_is_symmetric_and_inside_image():
    width, height = 4000, 2400
    left, top, right, bottom = caption_box(width, height)
    assert left + right == width
    assert 0 < left < right < width
    assert 0 < top < bottom < height


def test_caption_box_lower_part():
    _, top, _, bottom = caption_box(3840, 2160)
    assert top > 2160 // 2
    assert bottom <= 2160


def test_write_plaintext_round_trip(tmp_path):
    target = tmp_path / "subs.txt"
    written = write_plaintext(target, "line one\nline two")
    assert written == target
    assert target.read_text(encoding="utf-8") == "line one\nline two"


def test_write_plaintext_truncates(tmp_path):
    target = tmp_path / "subs.txt"
    write_plaintext(target, "a much longer earlier content")
    write_plaintext(target, "short")
    assert target.read_text(encoding="utf-8") == "short"


def test_write_plaintext_missing_directory(tmp_path):
    with pytest.raises(OSError):
        write_plaintext(tmp_path / "missing" / "subs.txt", "text")