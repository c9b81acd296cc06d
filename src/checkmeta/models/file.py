"""File information models."""

from datetime import datetime

from pydantic import BaseModel

from .metadata import UNKNOWN

SIZE_UNITS = ["Bytes", "KB", "MB", "GB", "TB"]


def format_size(size_bytes: int | float) -> str:
    """Convert bytes to human-readable string.

    Uses base-1024 units up to TB. The value is rounded to two decimals and
    trailing zeros are dropped, so 1536 becomes "1.5 KB" and 1024**4 "1 TB".
    """
    if isinstance(size_bytes, bool) or not isinstance(size_bytes, (int, float)):
        return UNKNOWN
    if size_bytes < 0:
        return UNKNOWN
    if size_bytes == 0:
        return "0 Bytes"

    # Integer comparison keeps exact powers of 1024 on the right unit
    index = 0
    while index < len(SIZE_UNITS) - 1 and size_bytes >= 1024 ** (index + 1):
        index += 1

    value = f"{size_bytes / 1024**index:.2f}".rstrip("0").rstrip(".")
    return f"{value} {SIZE_UNITS[index]}"


class FileInfo(BaseModel):
    """Basic file information."""

    path: str
    filename: str
    extension: str = ""
    size_bytes: int
    modified: datetime | None = None

    @property
    def size_human(self) -> str:
        """Return human-readable file size."""
        return format_size(self.size_bytes)
