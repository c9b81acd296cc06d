"""Track selection and tolerant field access for MediaInfo tracks."""

import contextlib
import math
from collections.abc import Iterable
from typing import Any

from checkmeta.models import ProbeResult, RawTrack, SelectedTracks, TrackType


def iter_tracks(probe: ProbeResult | None) -> list[RawTrack]:
    """Return the track list of a probe result.

    Tolerates a missing "media" object, a missing or empty "track" entry,
    and builds that emit a lone track mapping instead of a list.
    """
    if not isinstance(probe, dict):
        return []
    media = probe.get("media")
    if not isinstance(media, dict):
        return []
    tracks = media.get("track")
    if isinstance(tracks, dict):
        return [tracks]
    if not isinstance(tracks, list):
        return []
    return [t for t in tracks if isinstance(t, dict)]


def select_tracks(tracks: Iterable[Any]) -> SelectedTracks:
    """Pick the first General, Video and Audio track.

    Args:
        tracks: Ordered track sequence from the probing engine

    Returns:
        SelectedTracks with absent slots left as None
    """
    found: dict[str, RawTrack] = {}
    wanted = {
        TrackType.GENERAL.value: "general",
        TrackType.VIDEO.value: "video",
        TrackType.AUDIO.value: "audio",
    }
    for track in tracks:
        if not isinstance(track, dict):
            continue
        slot = wanted.get(track.get("@type"))
        if slot and slot not in found:
            found[slot] = track
    return SelectedTracks(**found)


def field_text(track: RawTrack | None, key: str) -> str | None:
    """Return a field as a stripped string, or None when absent or blank."""
    if not track:
        return None
    value = track.get(key)
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text or None


def field_number(track: RawTrack | None, key: str) -> float | None:
    """Return a field parsed as a finite number, or None."""
    text = field_text(track, key)
    if text is None:
        return None
    with contextlib.suppress(ValueError, TypeError):
        number = float(text)
        if math.isfinite(number):
            return number
    return None


def field_int(track: RawTrack | None, key: str) -> int | None:
    """Return a field truncated to an integer, or None."""
    number = field_number(track, key)
    if number is None:
        return None
    return int(number)
