"""Random-access byte sources read in bounded chunks.

The probing engine never needs the whole file in memory: it asks for the
total size once and then reads (length, offset) ranges. ``FileSource``
serves those ranges from a local file and ``ChunkedReader`` wraps any
size/read pair as a seekable binary stream for libraries that expect a
file-like object.
"""

from __future__ import annotations

import io
import os
from collections.abc import Callable
from typing import BinaryIO

# Returns the total byte length of the source
SizeAccessor = Callable[[], int]

# (length, offset) -> at most ``length`` bytes starting at ``offset``
ChunkReader = Callable[[int, int], bytes]


class FileSource:
    """Local file exposed as a size accessor and a chunk reader.

    Usage:
        with FileSource("video.mp4") as source:
            header = source.read_chunk(1024, 0)
    """

    def __init__(self, path: str):
        self.path = path
        self._handle: BinaryIO | None = None

    def __enter__(self) -> FileSource:
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def open(self) -> None:
        """Open the underlying file for reading."""
        if self._handle is None:
            self._handle = open(self.path, "rb")

    def close(self) -> None:
        """Close the underlying file."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def size(self) -> int:
        """Return the file size in bytes."""
        return os.path.getsize(self.path)

    def read_chunk(self, length: int, offset: int) -> bytes:
        """Read up to ``length`` bytes starting at ``offset``."""
        if self._handle is None:
            self.open()
        assert self._handle is not None
        if length <= 0:
            return b""
        self._handle.seek(offset)
        return self._handle.read(length)


class ChunkedReader(io.RawIOBase):
    """Seekable read-only stream backed by a size accessor and a chunk reader.

    Each ``read`` is served by a single call to the chunk reader for the
    current position, so nothing beyond the requested range is loaded.
    """

    def __init__(self, size: SizeAccessor, read_chunk: ChunkReader):
        super().__init__()
        self._size = int(size())
        self._read_chunk = read_chunk
        self._position = 0

    @property
    def size(self) -> int:
        return self._size

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def tell(self) -> int:
        return self._position

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        if whence == io.SEEK_SET:
            position = offset
        elif whence == io.SEEK_CUR:
            position = self._position + offset
        elif whence == io.SEEK_END:
            position = self._size + offset
        else:
            raise ValueError(f"Invalid whence: {whence}")
        if position < 0:
            raise ValueError(f"Negative seek position: {position}")
        self._position = position
        return position

    def readinto(self, buffer) -> int:  # type: ignore[override]
        view = memoryview(buffer).cast("B")
        remaining = self._size - self._position
        if not len(view) or remaining <= 0:
            return 0

        length = min(len(view), remaining)
        data = self._read_chunk(length, self._position)[:length]
        count = len(data)
        view[:count] = data
        self._position += count
        return count
