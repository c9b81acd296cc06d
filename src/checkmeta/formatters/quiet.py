"""Quiet output formatter - one-line summary."""

from checkmeta.models import UNKNOWN, NormalizedMetadata


def format_quiet(metadata: NormalizedMetadata) -> str:
    """Format metadata as one-line summary.

    Format: filename | duration | resolution (class) | bit rate | video codec | audio codec
    """
    parts = []

    parts.append(metadata.name)
    parts.append(metadata.duration)

    # Resolution
    if metadata.resolution != UNKNOWN:
        parts.append(f"{metadata.resolution} ({metadata.resolution_label})")
    else:
        parts.append(UNKNOWN)

    parts.append(metadata.bit_rate)
    parts.append(metadata.video_codec)
    parts.append(metadata.audio_codec)

    return " | ".join(parts)
