"""
Unit tests for ISO-8601 duration parsing and formatting.
"""
import pytest

from app.core.exceptions import DurationParseError
from app.services.duration import format_duration, parse_duration, sum_durations


@pytest.mark.parametrize(
    "encoding, expected",
    [
        ("PT1H2M3S", 3723),
        ("PT45S", 45),
        ("PT10M", 600),
        ("PT2H", 7200),
        ("PT1H5S", 3605),
        ("P1DT2H", 93600),
        ("P0D", 0),
    ],
)
def test_parse_duration(encoding, expected):
    assert parse_duration(encoding) == expected


@pytest.mark.parametrize("encoding", ["PT", "", None, "garbage", "1:02:03"])
def test_parse_duration_lenient_defaults_to_zero(encoding):
    """Encodings without any component count as zero instead of failing."""
    assert parse_duration(encoding) == 0


@pytest.mark.parametrize("encoding", ["PT", "", None, "garbage"])
def test_parse_duration_strict_raises(encoding):
    with pytest.raises(DurationParseError):
        parse_duration(encoding, strict=True)


def test_parse_duration_strict_accepts_valid_encoding():
    assert parse_duration("PT3M", strict=True) == 180


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (3723, "1h 2m 3s"),
        (90, "1m 30s"),
        (0, "0s"),
        (45, "45s"),
        (3180, "53m"),
        (1590, "26m 30s"),
        (3600, "1h"),
        (3601, "1h 1s"),
        (90000, "25h"),
    ],
)
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


def test_format_duration_rejects_negative():
    with pytest.raises(ValueError):
        format_duration(-1)


def test_sum_durations_correlates_by_id():
    durations = {"b": "PT2M", "a": "PT1M"}
    assert sum_durations(["a", "b"], durations) == 180


def test_sum_durations_counts_duplicates_per_occurrence():
    assert sum_durations(["a", "a", "b"], {"a": "PT1M", "b": "PT10S"}) == 130


def test_sum_durations_skips_missing_and_malformed():
    durations = {"a": "PT1M", "b": "", "c": "nonsense"}
    assert sum_durations(["a", "b", "c", "deleted"], durations) == 60


@pytest.mark.parametrize(
    "encoding, expected",
    [
        ("xPxPT5M", 300),
        ("Playtime PT1H", 3600),
        ("duration=PT2M30S", 150),
    ],
)
def test_parse_duration_skips_stray_p(encoding, expected):
    """A "P" that does not start a duration does not hide a later one."""
    assert parse_duration(encoding) == expected
