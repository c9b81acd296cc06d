"""Pytest configuration and fixtures."""

from datetime import datetime
from typing import Any, ClassVar

import pytest

from checkmeta.config import reset_config
from checkmeta.models import FileInfo
from checkmeta.probes import BaseProbe, MediaInfoProbe


class StubProbe(BaseProbe):
    """Probe returning a fixed result and recording the reads it made."""

    name: ClassVar[str] = "stub"

    def __init__(self, result: Any = None, error: Exception | None = None, read_size: int = 0):
        self.result = result
        self.error = error
        self.read_size = read_size
        self.chunks: list[bytes] = []
        self.size: int | None = None

    @classmethod
    def is_available(cls) -> bool:
        return True

    def analyze(self, size, read_chunk):
        self.size = size()
        if self.read_size:
            self.chunks.append(read_chunk(self.read_size, 0))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """Keep tests independent of the user's config file and environment."""
    monkeypatch.setattr("checkmeta.config.CONFIG_LOCATIONS", [tmp_path / "missing.yaml"])
    for key in ("DATE_FORMAT", "CHUNK_SIZE", "PARSE_SPEED"):
        monkeypatch.delenv(f"CHECKMETA_{key}", raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def has_mediainfo() -> bool:
    """Check if libmediainfo is available."""
    return MediaInfoProbe.is_available()


@pytest.fixture
def file_info() -> FileInfo:
    return FileInfo(
        path="/videos/clip.mp4",
        filename="clip.mp4",
        extension=".mp4",
        size_bytes=51_097_600,
        modified=datetime(2024, 5, 1, 10, 12, 40),
    )


@pytest.fixture
def mp4_probe() -> dict[str, Any]:
    """MediaInfo JSON for a typical H.264/AAC MP4 (values as strings)."""
    return {
        "creatingLibrary": {"name": "MediaInfoLib", "version": "24.01"},
        "media": {
            "@ref": "",
            "track": [
                {
                    "@type": "General",
                    "Format": "MPEG-4",
                    "Duration": "135.500",
                    "Duration_String3": "00:02:15.500",
                    "OverallBitRate": "3016000",
                    "OverallBitRate_Mode": "VBR",
                },
                {
                    "@type": "Video",
                    "Format": "AVC",
                    "Format_Information": "Advanced Video Codec",
                    "Format_Profile": "High",
                    "CodecID": "avc1",
                    "Width": "1920",
                    "Height": "1080",
                    "BitRate": "2860000",
                    "BitRate_Mode": "VBR",
                    "FrameRate": "29.970",
                    "Duration": "135.468",
                },
                {
                    "@type": "Audio",
                    "Format": "AAC",
                    "Format_Information": "Advanced Audio Codec Low Complexity",
                    "CodecID": "mp4a-40-2",
                    "BitRate": "128000",
                    "Duration": "135.500",
                },
            ],
        },
    }


@pytest.fixture
def stub_probe():
    """Factory for StubProbe instances."""
    return StubProbe
