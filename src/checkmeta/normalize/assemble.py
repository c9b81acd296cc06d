"""Combine normalized fields into a NormalizedMetadata record."""

import logging

from checkmeta.errors import NoMediaTrackError
from checkmeta.models import UNKNOWN, FileInfo, NormalizedMetadata, ProbeResult, format_size

from .codec import resolve_codec
from .duration import normalize_duration
from .rates import normalize_bit_rate, normalize_frame_rate
from .resolution import normalize_resolution
from .tracks import field_text, iter_tracks, select_tracks

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def assemble(
    probe: ProbeResult | None,
    file_info: FileInfo,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> NormalizedMetadata:
    """Build the display record for one probed file.

    Every field normalizer is total, so once a General or Video track is
    present the record always assembles.

    Args:
        probe: MediaInfo JSON result
        file_info: Name, size and modification time of the source file
        date_format: strftime pattern for the modification time

    Returns:
        NormalizedMetadata with every field set

    Raises:
        NoMediaTrackError: If the probe has neither a General nor a Video track
    """
    tracks = iter_tracks(probe)
    selected = select_tracks(tracks)
    if not selected.has_media:
        logger.error("No General or Video track in probe result (%d tracks)", len(tracks))
        raise NoMediaTrackError()

    resolution, resolution_label = normalize_resolution(selected.video)
    bit_rate, bit_rate_mode = normalize_bit_rate(selected.video, selected.general)
    updated_date = file_info.modified.strftime(date_format) if file_info.modified else UNKNOWN

    return NormalizedMetadata(
        name=file_info.filename or UNKNOWN,
        updated_date=updated_date or UNKNOWN,
        size=format_size(file_info.size_bytes),
        resolution=resolution,
        resolution_label=resolution_label,
        bit_rate=bit_rate,
        bit_rate_mode=bit_rate_mode,
        frame_rate=normalize_frame_rate(selected.video),
        duration=normalize_duration(selected, tracks),
        container=field_text(selected.general, "Format") or UNKNOWN,
        video_codec=resolve_codec(selected.video),
        audio_codec=resolve_codec(selected.audio),
    )
