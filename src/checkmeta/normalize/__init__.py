"""Normalization of raw MediaInfo tracks into display values."""

from .assemble import DEFAULT_DATE_FORMAT, assemble
from .codec import CODEC_NAMES, resolve_codec
from .duration import format_duration, normalize_duration
from .rates import normalize_bit_rate, normalize_frame_rate
from .resolution import classify_resolution, normalize_resolution
from .tracks import field_number, field_text, iter_tracks, select_tracks

__all__ = [
    "assemble",
    "DEFAULT_DATE_FORMAT",
    # Tracks
    "iter_tracks",
    "select_tracks",
    "field_text",
    "field_number",
    # Field normalizers
    "classify_resolution",
    "normalize_resolution",
    "format_duration",
    "normalize_duration",
    "normalize_bit_rate",
    "normalize_frame_rate",
    "resolve_codec",
    "CODEC_NAMES",
]
