"""Codec identity resolution."""

from checkmeta.models import UNKNOWN, RawTrack

from .tracks import field_text

# MediaInfo format code -> (ISO/IEC style name, ITU-T style / short name)
CODEC_NAMES: dict[str, tuple[str, str]] = {
    # Video
    "AVC": ("Advanced Video Coding", "H.264"),
    "HEVC": ("High Efficiency Video Coding", "H.265"),
    "VVC": ("Versatile Video Coding", "H.266"),
    "MPEG-4 Visual": ("MPEG-4 Part 2", "Visual"),
    "AV1": ("AOMedia Video 1", "AV1"),
    # Audio
    "AAC": ("Advanced Audio Coding", "MPEG-4 AAC"),
    "AC-3": ("Dolby Digital", "AC-3"),
    "E-AC-3": ("Dolby Digital Plus", "E-AC-3"),
}

# Profiles too generic to be worth showing
HIDDEN_PROFILES = {"Base", "Main"}


def codec_names(track: RawTrack) -> tuple[str, str]:
    """Return (long name, short name) for a track's format."""
    format_code = field_text(track, "Format") or ""
    info = field_text(track, "Format_Information") or ""
    return CODEC_NAMES.get(format_code, (info or format_code, format_code))


def resolve_codec(track: RawTrack | None) -> str:
    """Return a human-readable codec identity for a video or audio track.

    Examples:
        {"Format": "AVC", "Format_Profile": "High"}
            -> "Advanced Video Coding（H.264） [High]"
        {"Format": "AAC"} -> "Advanced Audio Coding（MPEG-4 AAC）"
    """
    if not track:
        return UNKNOWN

    long_name, short_name = codec_names(track)
    result = long_name
    if short_name and short_name != long_name:
        result = f"{long_name}（{short_name}）"

    profile = field_text(track, "Format_Profile")
    if result and profile and profile not in HIDDEN_PROFILES and profile not in result:
        result = f"{result} [{profile}]"

    return result or field_text(track, "CodecID") or UNKNOWN
