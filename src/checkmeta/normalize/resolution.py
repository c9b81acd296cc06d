"""Resolution formatting and classification."""

from checkmeta.models import UNKNOWN, RawTrack

from .tracks import field_int

# (minimum long edge, label), highest threshold first
RESOLUTION_CLASSES = [
    (3840, "4K"),
    (2560, "2K"),
    (1920, "FullHD"),
    (1280, "HD"),
]


def classify_resolution(width: int | None, height: int | None) -> str:
    """Bucket a frame size by its long edge.

    Args:
        width: Frame width in pixels
        height: Frame height in pixels

    Returns:
        One of 4K, 2K, FullHD, HD, SD, or "unknown" if either side is missing
    """
    if not width or not height or width <= 0 or height <= 0:
        return UNKNOWN
    long_edge = max(width, height)
    for threshold, label in RESOLUTION_CLASSES:
        if long_edge >= threshold:
            return label
    return "SD"


def normalize_resolution(video: RawTrack | None) -> tuple[str, str]:
    """Return ("W x H", class label) for a video track."""
    width = field_int(video, "Width")
    height = field_int(video, "Height")
    label = classify_resolution(width, height)
    if label == UNKNOWN:
        return UNKNOWN, UNKNOWN
    return f"{width} x {height}", label
