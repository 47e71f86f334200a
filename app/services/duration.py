"""
Helpers for working with ISO-8601 durations returned by the YouTube API.

Parsing is lenient by default: YouTube occasionally returns an empty or
unexpected ``contentDetails.duration`` (live streams, premieres, removed
videos) and one odd item must not fail a whole playlist. Such encodings
count as zero seconds. Pass ``strict=True`` to get a ``DurationParseError``
instead.
"""
import re
from typing import Iterable, Mapping, Optional

from loguru import logger

from app.core.exceptions import DurationParseError


_ISO_DURATION_RE = re.compile(
    # A "P" only starts a duration when followed by a day count or "T"
    r"P(?=\d+D|T)"
    r"(?:(?P<days>\d+)D)?"
    r"(?:T"
    r"(?:(?P<hours>\d+)H)?"
    r"(?:(?P<minutes>\d+)M)?"
    r"(?:(?P<seconds>\d+)S)?"
    r")?"
)

_UNITS = ("days", "hours", "minutes", "seconds")


def parse_duration(encoding: Optional[str], strict: bool = False) -> int:
    """
    Convert an ISO-8601 duration such as ``PT1H2M3S`` into total seconds.

    Missing components count as zero. An encoding without any component
    (``""``, ``"PT"``, garbage) yields 0, or raises when ``strict`` is set.

    Args:
        encoding: The duration string, e.g. ``contentDetails.duration``.
        strict: Raise ``DurationParseError`` instead of returning 0.

    Returns:
        The duration in whole seconds.
    """
    match = _ISO_DURATION_RE.search(encoding) if encoding else None
    groups = match.groupdict() if match else {}

    if not any(groups.get(unit) for unit in _UNITS):
        if strict:
            raise DurationParseError(encoding)
        logger.debug(f"Duration {encoding!r} has no components, counting it as 0s")
        return 0

    days, hours, minutes, seconds = (int(groups[unit] or 0) for unit in _UNITS)
    return days * 86400 + hours * 3600 + minutes * 60 + seconds


def format_duration(total_seconds: int) -> str:
    """
    Render seconds as ``"1h 2m 3s"``.

    Zero units are left out, except that seconds are always shown when there
    are no hours or minutes, so ``0`` renders as ``"0s"``.
    """
    if total_seconds < 0:
        raise ValueError(f"Duration cannot be negative: {total_seconds}")

    hours, remainder = divmod(int(total_seconds), 3600)
    minutes, seconds = divmod(remainder, 60)

    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if seconds or not parts:
        parts.append(f"{seconds}s")
    return " ".join(parts)


def sum_durations(video_ids: Iterable[str], durations: Mapping[str, Optional[str]]) -> int:
    """
    Sum the durations of ``video_ids``, looking each one up by id.

    A video listed twice in a playlist is counted twice. Ids absent from
    ``durations`` (deleted or private videos) contribute nothing.
    """
    total = 0
    missing = 0
    for video_id in video_ids:
        if video_id not in durations:
            missing += 1
            continue
        total += parse_duration(durations[video_id])

    if missing:
        logger.warning(f"{missing} playlist items had no duration (deleted or private videos)")
    return total
