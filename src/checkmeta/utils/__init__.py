"""Utility functions for checkmeta."""

from checkmeta.models.file import format_size

from .chunked import ChunkedReader, ChunkReader, FileSource, SizeAccessor

__all__ = [
    # Formatting
    "format_size",
    # Chunked sources
    "FileSource",
    "ChunkedReader",
    "SizeAccessor",
    "ChunkReader",
]
