"""checkmeta - video technical metadata at a glance.

Probe a video container with MediaInfo and turn its inconsistent track
fields into a canonical, display-ready summary.

Usage:
    from checkmeta import analyze_file, format_default

    metadata = analyze_file("video.mp4")
    print(metadata.duration, metadata.resolution, metadata.resolution_label)
    print(format_default(metadata))

    # Normalize a MediaInfo JSON result you already have
    from checkmeta import FileInfo, assemble
    record = assemble(mediainfo_json, FileInfo(path="a.mp4", filename="a.mp4", size_bytes=0))
"""

from checkmeta._version import __version__
from checkmeta.analyze import analyze_file, analyze_source, get_file_info, probe_file
from checkmeta.errors import CheckMetaError, NoMediaTrackError, ProbeFailureError
from checkmeta.formatters import (
    format_default,
    format_json,
    format_probe_json,
    format_quiet,
    format_rows_json,
    to_dict,
)
from checkmeta.models import (
    UNKNOWN,
    DisplayRow,
    FileInfo,
    NormalizedMetadata,
    SelectedTracks,
    TrackType,
    format_size,
)
from checkmeta.normalize import (
    assemble,
    classify_resolution,
    format_duration,
    normalize_bit_rate,
    normalize_duration,
    normalize_frame_rate,
    normalize_resolution,
    resolve_codec,
    select_tracks,
)
from checkmeta.probes import BaseProbe, MediaInfoProbe, get_probe_status
from checkmeta.state import DisplayState, MetadataViewer
from checkmeta.utils import ChunkedReader, FileSource

__all__ = [
    # Version
    "__version__",
    # Main functions
    "analyze_file",
    "analyze_source",
    "probe_file",
    "get_file_info",
    "assemble",
    # Normalizers
    "select_tracks",
    "format_size",
    "classify_resolution",
    "normalize_resolution",
    "format_duration",
    "normalize_duration",
    "normalize_bit_rate",
    "normalize_frame_rate",
    "resolve_codec",
    # Models
    "NormalizedMetadata",
    "DisplayRow",
    "FileInfo",
    "SelectedTracks",
    "TrackType",
    "UNKNOWN",
    # Errors
    "CheckMetaError",
    "NoMediaTrackError",
    "ProbeFailureError",
    # Probes and sources
    "BaseProbe",
    "MediaInfoProbe",
    "get_probe_status",
    "FileSource",
    "ChunkedReader",
    # Display state
    "DisplayState",
    "MetadataViewer",
    # Formatters
    "format_default",
    "format_json",
    "format_rows_json",
    "format_probe_json",
    "format_quiet",
    "to_dict",
]
