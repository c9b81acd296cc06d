"""Tests for record assembly."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from checkmeta.errors import NoMediaTrackError
from checkmeta.models import UNKNOWN, FileInfo, NormalizedMetadata
from checkmeta.normalize import assemble


class TestAssemble:
    """Test assemble."""

    def test_full_record(self, mp4_probe, file_info):
        metadata = assemble(mp4_probe, file_info)

        assert metadata.name == "clip.mp4"
        assert metadata.updated_date == "2024-05-01 10:12:40"
        assert metadata.size == "48.73 MB"
        assert metadata.resolution == "1920 x 1080"
        assert metadata.resolution_label == "FullHD"
        assert metadata.bit_rate == "2.86 Mbps"
        assert metadata.bit_rate_mode == "VBR"
        assert metadata.frame_rate == "29.970 fps"
        assert metadata.duration == "00:02:15"
        assert metadata.container == "MPEG-4"
        assert metadata.video_codec == "Advanced Video Coding（H.264） [High]"
        assert metadata.audio_codec == "Advanced Audio Coding（MPEG-4 AAC）"

    def test_date_format(self, mp4_probe, file_info):
        metadata = assemble(mp4_probe, file_info, date_format="%Y/%m/%d")
        assert metadata.updated_date == "2024/05/01"

    def test_audio_only_fails(self, file_info):
        probe = {"media": {"track": [{"@type": "Audio", "Format": "AAC"}]}}
        with pytest.raises(NoMediaTrackError):
            assemble(probe, file_info)

    @pytest.mark.parametrize("probe", [None, {}, {"media": None}, {"media": {"track": []}}])
    def test_empty_probe_fails(self, probe, file_info):
        with pytest.raises(NoMediaTrackError):
            assemble(probe, file_info)

    def test_general_only(self, file_info):
        probe = {
            "media": {
                "track": [
                    {"@type": "General", "Format": "MPEG-4", "OverallBitRate": "4000000"},
                ]
            }
        }
        metadata = assemble(probe, file_info)

        assert metadata.container == "MPEG-4"
        assert metadata.bit_rate == "4.00 Mbps"
        assert metadata.bit_rate_mode == UNKNOWN
        assert metadata.resolution == UNKNOWN
        assert metadata.resolution_label == UNKNOWN
        assert metadata.frame_rate == UNKNOWN
        assert metadata.video_codec == UNKNOWN
        assert metadata.audio_codec == UNKNOWN
        assert metadata.duration == UNKNOWN

    def test_video_only(self, file_info):
        probe = {"media": {"track": [{"@type": "Video", "Format": "HEVC", "Duration": 7400000}]}}
        metadata = assemble(probe, file_info)

        assert metadata.container == UNKNOWN
        assert metadata.video_codec == "High Efficiency Video Coding（H.265）"
        assert metadata.duration == "2:03:20"

    def test_missing_modified_time(self, mp4_probe):
        info = FileInfo(path="a.mkv", filename="a.mkv", size_bytes=0)
        metadata = assemble(mp4_probe, info)
        assert metadata.updated_date == UNKNOWN
        assert metadata.size == "0 Bytes"

    def test_idempotent(self, mp4_probe, file_info):
        assert assemble(mp4_probe, file_info) == assemble(mp4_probe, file_info)

    @pytest.mark.parametrize(
        "tracks",
        [
            [{"@type": "General"}],
            [{"@type": "Video"}],
            [{"@type": "General", "Format": ""}, {"@type": "Video", "Width": "abc"}],
            [{"@type": "Video", "Format": "AVC", "FrameRate": ""}, {"@type": "Audio"}],
        ],
    )
    def test_every_field_populated(self, tracks, file_info):
        metadata = assemble({"media": {"track": tracks}}, file_info)
        for value in metadata.model_dump().values():
            assert isinstance(value, str)
            assert value


class TestNormalizedMetadata:
    """Test the NormalizedMetadata model."""

    def test_defaults_are_unknown(self):
        metadata = NormalizedMetadata(name="a.mp4")
        assert metadata.duration == UNKNOWN
        assert metadata.video_codec == UNKNOWN

    def test_empty_value_rejected(self):
        with pytest.raises(ValidationError):
            NormalizedMetadata(name="")
        with pytest.raises(ValidationError):
            NormalizedMetadata(name="a.mp4", duration="")

    def test_frozen(self):
        metadata = NormalizedMetadata(name="a.mp4")
        with pytest.raises(ValidationError):
            metadata.duration = "1:00"  # type: ignore[misc]

    def test_rows_order(self, mp4_probe, file_info):
        rows = assemble(mp4_probe, file_info).rows()
        assert [row.key for row in rows] == [
            "name",
            "updated_date",
            "duration",
            "size",
            "resolution",
            "bit_rate",
            "frame_rate",
            "container",
            "video_codec",
            "audio_codec",
        ]

    def test_rows_badges(self, mp4_probe, file_info):
        rows = {row.key: row for row in assemble(mp4_probe, file_info).rows()}
        assert rows["resolution"].badge == "FullHD"
        assert rows["bit_rate"].badge == "VBR"
        assert rows["duration"].badge is None

    def test_unknown_mode_has_no_badge(self):
        rows = {row.key: row for row in NormalizedMetadata(name="a.mp4").rows()}
        assert rows["bit_rate"].badge is None
        assert rows["resolution"].badge == UNKNOWN


def test_file_info_size_human():
    info = FileInfo(path="/a.mp4", filename="a.mp4", size_bytes=1536, modified=datetime.now())
    assert info.size_human == "1.5 KB"
