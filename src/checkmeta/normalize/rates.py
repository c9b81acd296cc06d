"""Bit rate and frame rate normalization."""

from checkmeta.models import UNKNOWN, RawTrack

from .tracks import field_number, field_text


def format_bit_rate(bits_per_second: float) -> str:
    """Format bits per second as megabits per second."""
    return f"{bits_per_second / 1_000_000:.2f} Mbps"


def normalize_bit_rate(
    video: RawTrack | None, general: RawTrack | None
) -> tuple[str, str]:
    """Return (rate, mode) preferring the video stream over the container.

    Args:
        video: First video track, if any
        general: General (container) track, if any

    Returns:
        Tuple of formatted rate and rate mode (e.g. "CBR", "VBR"); either is
        "unknown" when neither track reports it
    """
    rate = field_number(video, "BitRate")
    if rate is None:
        rate = field_number(general, "OverallBitRate")

    mode = field_text(video, "BitRate_Mode") or field_text(general, "OverallBitRate_Mode")

    return (format_bit_rate(rate) if rate is not None else UNKNOWN), (mode or UNKNOWN)


def normalize_frame_rate(video: RawTrack | None) -> str:
    """Return the video frame rate with an "fps" suffix."""
    value = field_text(video, "FrameRate") or field_text(video, "FrameRate_Nominal")
    if value is None:
        return UNKNOWN
    return f"{value} fps"
