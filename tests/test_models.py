import pytest

from vttmerge.errors import ConfigurationError, ParsingError
from vttmerge.models import Cue, MergeConfig, SpeakerSource, Timerange, Timestamp
from vttmerge.utils import seconds_to_timestamp, timestamp_to_seconds


def test_timestamp_parse_hours_minutes_seconds():
    assert Timestamp.parse("00:00:01.000").milliseconds == 1000
    assert Timestamp.parse("01:02:03.456").milliseconds == 3723456


def test_timestamp_parse_variable_component_count():
    assert Timestamp.parse("5.5").milliseconds == 5500
    assert Timestamp.parse("1:30").milliseconds == 90000
    # Fourth component counts 60**3 seconds
    assert Timestamp.parse("1:00:00:00.000").format() == "60:00:00.000"


def test_timestamp_truncates_to_milliseconds():
    assert Timestamp.parse("00:00:01.2349").milliseconds == 1234
    assert Timestamp.parse("00:00:01.001").milliseconds == 1001


def test_timestamp_format_is_canonical():
    assert Timestamp.parse("1:2:3.4").format() == "01:02:03.400"
    assert Timestamp(100 * 3600 * 1000 + 5).format() == "100:00:00.005"
    assert str(Timestamp(0)) == "00:00:00.000"


def test_timestamp_reparse_of_format_is_stable():
    for text in ["3.5", "59:59.999", "2:03:04.0051", "1:0:0:1.5"]:
        parsed = Timestamp.parse(text)
        reparsed = Timestamp.parse(parsed.format())
        assert abs(reparsed.milliseconds - parsed.milliseconds) <= 1
        assert len(parsed.format().split(':')) == 3


def test_timestamp_ordering():
    assert Timestamp.parse("00:00:01.000") < Timestamp.parse("00:00:01.001")
    assert Timestamp.parse("01:00.000") == Timestamp.parse("00:01:00.000")


def test_timestamp_rejects_bad_seconds():
    with pytest.raises(ParsingError) as exc_info:
        Timestamp.parse("00:00:xx")
    assert exc_info.value.expected == "a decimal number"
    assert exc_info.value.found == "xx"


def test_timestamp_rejects_bad_integer_component():
    with pytest.raises(ParsingError) as exc_info:
        Timestamp.parse("00:0a:01.000")
    assert exc_info.value.expected == "a number"
    assert exc_info.value.found == "0a"


def test_timestamp_rejects_empty_and_negative():
    with pytest.raises(ParsingError) as exc_info:
        Timestamp.parse("")
    assert exc_info.value.found == ""

    with pytest.raises(ParsingError):
        Timestamp.parse("00:00:-1.000")
    with pytest.raises(ParsingError):
        Timestamp.parse("-1:00:01.000")


def test_timerange_parse_and_format():
    timerange = Timerange.parse("00:00:01.000 --> 00:00:02.500")
    assert timerange.start == Timestamp(1000)
    assert timerange.end == Timestamp(2500)
    assert timerange.format() == "00:00:01.000 --> 00:00:02.500"


def test_timerange_ignores_trailing_tokens():
    timerange = Timerange.parse("00:00:01.000 --> 00:00:02.000 align:start")
    assert timerange.end == Timestamp(2000)


def test_timerange_does_not_require_ordered_bounds():
    timerange = Timerange.parse("00:00:05.000 --> 00:00:01.000")
    assert timerange.start > timerange.end


def test_timerange_wrong_arrow():
    with pytest.raises(ParsingError) as exc_info:
        Timerange.parse("00:00:01.000 => 00:00:02.000")
    assert exc_info.value.expected == "-->"
    assert exc_info.value.found == "=>"
    assert str(exc_info.value) == "parsing error: expected -->, got '=>'"


def test_timerange_missing_tokens():
    with pytest.raises(ParsingError) as exc_info:
        Timerange.parse("00:00:01.000")
    assert (exc_info.value.expected, exc_info.value.found) == ("-->", "")

    with pytest.raises(ParsingError) as exc_info:
        Timerange.parse("00:00:01.000 -->")
    assert (exc_info.value.expected, exc_info.value.found) == ("a end time", "")

    with pytest.raises(ParsingError) as exc_info:
        Timerange.parse(" --> 00:00:01.000")
    assert (exc_info.value.expected, exc_info.value.found) == ("a starting time", "")


def test_cue_format_with_and_without_speaker():
    timerange = Timerange.parse("00:00:01.000 --> 00:00:02.000")
    cue = Cue.from_line(timerange, "hello")
    assert cue.speaker is None
    assert cue.format() == "\n00:00:01.000 --> 00:00:02.000\nhello\n"

    cue.speaker = "A"
    assert cue.format() == "\n00:00:01.000 --> 00:00:02.000\n<v A>hello\n"


def test_seconds_helpers():
    assert timestamp_to_seconds("00:01:30.500") == 90.5
    assert seconds_to_timestamp(90.5) == "00:01:30.500"
    with pytest.raises(ValueError):
        seconds_to_timestamp(-1)


def test_merge_config_pairs_files_with_speakers():
    config = MergeConfig.from_lists(["a.vtt", "b.vtt"], ["A", "B"], timeout=5)
    assert config.sources == [SpeakerSource("A", "a.vtt"), SpeakerSource("B", "b.vtt")]
    assert config.timeout == 5
    assert config.output_path is None


def test_merge_config_rejects_length_mismatch():
    with pytest.raises(ConfigurationError, match="differing number of speakers and files"):
        MergeConfig.from_lists(["a.vtt"], ["A", "B"])


def test_timestamp_rejects_non_finite_seconds():
    with pytest.raises(ParsingError) as exc_info:
        Timestamp.parse("1e1000000")
    assert exc_info.value.expected == "a decimal number"
    assert exc_info.value.found == "1e1000000"

    with pytest.raises(ParsingError) as exc_info:
        Timestamp.parse("1e5000")
    assert exc_info.value.expected == "a decimal number"


def test_timestamp_rejects_oversized_components():
    with pytest.raises(ParsingError):
        Timestamp.parse("1" * 5000 + ":00.000")

    with pytest.raises(ParsingError) as exc_info:
        Timestamp.parse("300000000000000000000")
    assert exc_info.value.expected == "a timestamp"

    with pytest.raises(ParsingError):
        Timestamp.parse("1:" + "0:" * 20 + "00.000")


def test_timestamp_accepts_large_hours():
    assert Timestamp.parse("1000000:00:00.000").format() == "1000000:00:00.000"
