"""Duration normalization.

MediaInfo reports duration in several shapes depending on version, container
and output options: a preformatted "HH:MM:SS.mmm" string (Duration_String3),
a raw value in milliseconds, or a raw value in seconds. Tracks may also
disagree, or the General/Video tracks may omit the duration entirely while
a sub-stream still reports it.

Both the source of the raw value and its unit are resolved through explicit
ordered candidate lists, so each fallback step can be inspected and tested
on its own.

Known ambiguity: without a trustworthy unit tag a raw value is assumed to be
milliseconds. A value below 1000 would floor to zero seconds that way, so it
is read as whole seconds instead. Raw values between 0 and 999 may therefore
be misread when a file really is shorter than one second.
"""

import logging
import math
from collections.abc import Callable, Sequence
from typing import Any

from checkmeta.models import UNKNOWN, RawTrack, SelectedTracks

from .tracks import field_number, field_text

logger = logging.getLogger(__name__)

# Unit assumptions, most likely first: (unit name, raw value -> whole seconds)
UNIT_INTERPRETATIONS: list[tuple[str, Callable[[float], int]]] = [
    ("milliseconds", lambda value: math.floor(value / 1000)),
    ("seconds", lambda value: math.floor(value)),
]


def _positive_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


def to_total_seconds(value: float) -> int:
    """Convert a positive raw duration to whole seconds.

    Tries each unit interpretation in order and keeps the first that yields
    a positive number of seconds.
    """
    for unit, convert in UNIT_INTERPRETATIONS:
        seconds = convert(value)
        if seconds > 0:
            logger.debug("Interpreting duration %s as %s", value, unit)
            return seconds
    return 0


def split_seconds(total_seconds: int) -> tuple[int, int, int]:
    """Return (hours, minutes, seconds); hours are unbounded."""
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return hours, minutes, seconds


def format_duration(raw_value: Any = None, preformatted: str | None = None) -> str:
    """Format a duration for display.

    Args:
        raw_value: Raw duration (milliseconds or seconds, number or string)
        preformatted: MediaInfo "HH:MM:SS.mmm" string, used verbatim if usable

    Returns:
        "H:MM:SS" when at least an hour, "M:SS" otherwise, the preformatted
        string truncated at the fractional separator, or "unknown"
    """
    if preformatted and ":" in preformatted:
        return preformatted.split(".")[0]

    number = _positive_number(raw_value)
    if number is None:
        return UNKNOWN

    hours, minutes, seconds = split_seconds(to_total_seconds(number))
    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def preformatted_duration(selected: SelectedTracks) -> str | None:
    """Return the first Duration_String3 found in General > Video > Audio order."""
    for track in selected.by_priority():
        text = field_text(track, "Duration_String3")
        if text:
            return text
    return None


def duration_candidates(
    selected: SelectedTracks, tracks: Sequence[RawTrack]
) -> list[tuple[str, float | None]]:
    """Return raw duration candidates as (source, value) in priority order."""
    all_durations = [d for d in (field_number(t, "Duration") for t in tracks) if d and d > 0]
    return [
        ("general", field_number(selected.general, "Duration")),
        ("video", field_number(selected.video, "Duration")),
        ("audio", field_number(selected.audio, "Duration")),
        ("longest track", max(all_durations) if all_durations else None),
    ]


def pick_raw_duration(selected: SelectedTracks, tracks: Sequence[RawTrack]) -> float | None:
    """Return the first positive raw duration among the candidates."""
    for source, value in duration_candidates(selected, tracks):
        if value is not None and value > 0:
            logger.debug("Using %s duration %s", source, value)
            return value
    return None


def normalize_duration(selected: SelectedTracks, tracks: Sequence[RawTrack] = ()) -> str:
    """Resolve the display duration from the selected and all probed tracks."""
    return format_duration(pick_raw_duration(selected, tracks), preformatted_duration(selected))
