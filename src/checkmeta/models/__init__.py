"""Pydantic models for checkmeta."""

from .file import FileInfo, format_size
from .metadata import UNKNOWN, DisplayRow, NormalizedMetadata
from .tracks import ProbeResult, RawTrack, SelectedTracks, TrackType

__all__ = [
    # Main model
    "NormalizedMetadata",
    "DisplayRow",
    "UNKNOWN",
    # Tracks
    "RawTrack",
    "ProbeResult",
    "SelectedTracks",
    "TrackType",
    # File
    "FileInfo",
    "format_size",
]
